"""Entry point used by a game host to embed the player viewer API."""
from __future__ import annotations

import logging

from fastapi import FastAPI

from player_viewer.config.settings import Settings, get_settings
from player_viewer.domain.repositories.game_host import GameHost
from player_viewer.infrastructure.host.host_reference import HostReference
from player_viewer.infrastructure.http.embedded_server import EmbeddedServer
from player_viewer.main import create_app

logger = logging.getLogger(__name__)


class PlayerViewerService:
    """Own the HTTP server and the link to the running game host.

    The host calls :meth:`start` while loading and :meth:`attach_host` once its
    player registry is available. Requests arriving before the host attaches
    see an empty roster.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        """Build the application around a fresh, unattached host reference."""

        self._settings = settings or get_settings()
        self._host_reference = HostReference()
        self._app = create_app(host_reference=self._host_reference, settings=self._settings)
        self._server = EmbeddedServer(
            self._app, self._settings.bind_host, self._settings.port
        )

    @property
    def app(self) -> FastAPI:
        """Return the ASGI application served by this service."""

        return self._app

    @property
    def host_reference(self) -> HostReference:
        """Return the reference requests use to reach the host."""

        return self._host_reference

    @property
    def is_running(self) -> bool:
        """Return ``True`` while the HTTP server is serving requests."""

        return self._server.is_running

    def start(self) -> bool:
        """Start serving; return ``False`` when the server cannot bind.

        A bind failure is logged and swallowed so the host keeps running
        without the API.
        """

        try:
            self._server.start()
        except OSError as error:
            logger.error(
                "Failed to start HTTP server on %s: %s",
                self._settings.bind_address,
                error,
            )
            return False
        return True

    def stop(self) -> None:
        """Shut the HTTP server down."""

        self._server.stop()

    def attach_host(self, host: GameHost) -> None:
        """Point the API at the game host's live player registry."""

        self._host_reference.attach(host)

    def detach_host(self) -> None:
        """Stop reading from the host, e.g. while the game server shuts down."""

        self._host_reference.detach()
