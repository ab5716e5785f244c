"""Repository abstraction for looking up connected players."""
from __future__ import annotations

from typing import Protocol

from player_viewer.domain.repositories.game_host import PlayerHandle


class PlayerDirectory(Protocol):
    """Provide read-only access to the players connected to the host."""

    def list_players(self) -> list[PlayerHandle]:
        """Return every connected player, or an empty list without a host."""

    def find_by_identifier(self, identifier: str) -> PlayerHandle | None:
        """Return the player whose identifier equals ``identifier`` exactly."""
