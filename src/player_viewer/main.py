"""Application entry point defining the HTTP API."""
from __future__ import annotations

import logging
from typing import Any, Callable

from fastapi import FastAPI, Request, status
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from player_viewer.application.dispatch_command import CommandDispatcher
from player_viewer.application.errors import (
    InvalidRequestBodyError,
    MethodNotAllowedError,
    MissingPathSegmentsError,
    PlayerViewerError,
    UnknownSubresourceError,
)
from player_viewer.application.project_player import PlayerProjection
from player_viewer.application.retrieve_online_players import (
    ResolvePlayerUseCase,
    RetrieveOnlinePlayersUseCase,
)
from player_viewer.config.settings import Settings, get_settings
from player_viewer.domain.models.subresource import Subresource
from player_viewer.domain.repositories.game_host import PlayerHandle
from player_viewer.domain.repositories.player_directory import PlayerDirectory
from player_viewer.infrastructure.host.host_reference import HostReference
from player_viewer.infrastructure.repositories.host_player_directory import (
    HostPlayerDirectory,
)
from player_viewer.request_bodies import KickRequest, MessageRequest, decode_body

logger = logging.getLogger(__name__)

_ANY_METHOD = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE"]

_SubresourceHandler = Callable[[PlayerHandle, bytes], Any]


def create_app(
    host_reference: HostReference | None = None,
    directory: PlayerDirectory | None = None,
    projection: PlayerProjection | None = None,
    dispatcher: CommandDispatcher | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application instance.

    Host reads and commands are synchronous, so every endpoint runs them on
    the thread pool and a slow host never stalls the event loop.
    """

    settings = settings or get_settings()
    host_reference = host_reference if host_reference is not None else HostReference()
    player_directory = (
        directory if directory is not None else HostPlayerDirectory(host_reference)
    )
    player_projection = projection or PlayerProjection()
    command_dispatcher = dispatcher or CommandDispatcher(settings.default_kick_reason)

    online_players_retriever = RetrieveOnlinePlayersUseCase(
        player_directory, player_projection
    )
    player_resolver = ResolvePlayerUseCase(player_directory)

    app = FastAPI(title="Player Viewer API", version=settings.app_version)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.allowed_origins),
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(PlayerViewerError)
    async def handle_player_viewer_error(
        request: Request, error: PlayerViewerError
    ) -> JSONResponse:
        """Render domain failures as ``{"error": ...}`` with their status."""

        return JSONResponse(status_code=error.status_code, content={"error": error.message})

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(
        request: Request, error: StarletteHTTPException
    ) -> JSONResponse:
        """Render framework routing errors in the same ``{"error": ...}`` shape."""

        return JSONResponse(
            status_code=error.status_code,
            content={"error": str(error.detail)},
            headers=getattr(error, "headers", None),
        )

    @app.get("/status", status_code=status.HTTP_200_OK)
    def get_status() -> dict:
        """Return the operational status of the service and its host link."""

        return {
            "status": "ok",
            "version": settings.app_version,
            "hostAttached": host_reference.is_attached,
            "onlinePlayers": len(_guarded(player_directory.list_players)),
        }

    @app.get("/players", status_code=status.HTTP_200_OK)
    def list_players() -> list[dict]:
        """Return a snapshot of every connected player."""

        snapshots = _guarded(online_players_retriever.execute)
        return [snapshot.to_dict() for snapshot in snapshots]

    def show_inventory(handle: PlayerHandle, raw_body: bytes) -> list[dict]:
        """Return the player's non-empty inventory stacks."""

        return [stack.to_dict() for stack in player_projection.to_inventory_view(handle)]

    def show_position(handle: PlayerHandle, raw_body: bytes) -> dict:
        """Return the player's block position and dimension."""

        return player_projection.to_position_view(handle).to_dict()

    def kick_player(handle: PlayerHandle, raw_body: bytes) -> dict:
        """Disconnect the player with the reason from the request body."""

        body = decode_body(raw_body, KickRequest)
        return command_dispatcher.kick(handle, body.reason).to_dict()

    def message_player(handle: PlayerHandle, raw_body: bytes) -> dict:
        """Send the request body's message to the player's chat."""

        body = decode_body(raw_body, MessageRequest)
        return command_dispatcher.message(handle, body.message).to_dict()

    subresource_handlers: dict[Subresource, _SubresourceHandler] = {
        Subresource.INVENTORY: show_inventory,
        Subresource.POSITION: show_position,
        Subresource.KICK: kick_player,
        Subresource.MESSAGE: message_player,
    }
    missing_handlers = set(Subresource) - set(subresource_handlers)
    if missing_handlers:
        raise RuntimeError(f"No handler registered for {sorted(missing_handlers)}")

    def serve_player_request(
        identifier: str, segment: str, method: str, raw_body: bytes
    ) -> Any:
        """Resolve the player and run the view or action named by ``segment``."""

        handle = _guarded(player_resolver.execute, identifier)

        subresource = Subresource.parse(segment)
        if subresource is None:
            raise UnknownSubresourceError()
        if subresource.requires_post and method != "POST":
            raise MethodNotAllowedError()

        try:
            return subresource_handlers[subresource](handle, raw_body)
        except InvalidRequestBodyError:
            logger.warning(
                "Rejected malformed %s body for player %s", subresource.value, identifier
            )
            raise
        except PlayerViewerError:
            raise
        except Exception as error:
            logger.exception("Failed to serve %s for player %s", subresource.value, identifier)
            raise PlayerViewerError() from error

    @app.api_route("/players/{player_path:path}", methods=_ANY_METHOD)
    async def handle_player_subresource(player_path: str, request: Request) -> Any:
        """Serve a per-player view or action addressed by ``{id}/{subresource}``."""

        identifier, segment = _split_player_path(player_path)
        raw_body = await request.body()
        return await run_in_threadpool(
            serve_player_request, identifier, segment, request.method, raw_body
        )

    return app


def _split_player_path(player_path: str) -> tuple[str, str]:
    """Return the identifier and subresource segments of ``player_path``.

    Trailing empty segments are dropped and anything after the subresource is
    ignored.
    """

    segments = player_path.split("/")
    while segments and segments[-1] == "":
        segments.pop()
    if len(segments) < 2:
        raise MissingPathSegmentsError()
    return segments[0], segments[1]


def _guarded(operation: Callable[..., Any], *args: Any) -> Any:
    """Run a host-facing operation converting unexpected failures to 500s."""

    try:
        return operation(*args)
    except PlayerViewerError:
        raise
    except Exception as error:
        logger.exception("Unexpected error while reading from the game host")
        raise PlayerViewerError() from error
