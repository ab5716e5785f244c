"""Holder for the game host the API reads from."""
from __future__ import annotations

import logging

from player_viewer.domain.repositories.game_host import GameHost

logger = logging.getLogger(__name__)


class HostReference:
    """Point at the active game host, or at nothing before it attaches.

    The host is assigned when the game server finishes starting and read by
    every request afterwards. Readers must treat ``None`` as "no players".
    """

    def __init__(self, host: GameHost | None = None) -> None:
        self._host = host

    @property
    def current(self) -> GameHost | None:
        """Return the attached host, if any."""

        return self._host

    @property
    def is_attached(self) -> bool:
        """Return ``True`` once a host has been attached."""

        return self._host is not None

    def attach(self, host: GameHost) -> None:
        """Make ``host`` the source of player data."""

        if self._host is not None and self._host is not host:
            logger.warning("Replacing previously attached game host")
        self._host = host
        logger.info("Game host attached")

    def detach(self) -> None:
        """Forget the current host, e.g. when the game server stops."""

        if self._host is not None:
            logger.info("Game host detached")
        self._host = None
