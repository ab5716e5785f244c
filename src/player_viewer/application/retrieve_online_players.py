"""Use cases for retrieving the currently connected players."""
from __future__ import annotations

from player_viewer.application.errors import PlayerNotFoundError
from player_viewer.application.project_player import PlayerProjection
from player_viewer.domain.models.player_snapshot import PlayerSnapshot
from player_viewer.domain.repositories.game_host import PlayerHandle
from player_viewer.domain.repositories.player_directory import PlayerDirectory


class RetrieveOnlinePlayersUseCase:
    """Expose snapshots of every connected player."""

    def __init__(self, directory: PlayerDirectory, projection: PlayerProjection) -> None:
        """Initialize the use case with its collaborators."""

        self._directory = directory
        self._projection = projection

    def execute(self) -> list[PlayerSnapshot]:
        """Return a fresh snapshot for each player known by the directory."""

        return [
            self._projection.to_snapshot(handle)
            for handle in self._directory.list_players()
        ]


class ResolvePlayerUseCase:
    """Look up a single connected player by identifier."""

    def __init__(self, directory: PlayerDirectory) -> None:
        """Initialize the use case with the directory dependency."""

        self._directory = directory

    def execute(self, identifier: str) -> PlayerHandle:
        """Return the matching player or raise :class:`PlayerNotFoundError`."""

        handle = self._directory.find_by_identifier(identifier)
        if handle is None:
            raise PlayerNotFoundError()
        return handle
