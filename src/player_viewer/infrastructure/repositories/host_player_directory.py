"""Player directory reading directly from the attached game host."""
from __future__ import annotations

from player_viewer.domain.repositories.game_host import PlayerHandle
from player_viewer.domain.repositories.player_directory import PlayerDirectory
from player_viewer.infrastructure.host.host_reference import HostReference


class HostPlayerDirectory(PlayerDirectory):
    """Resolve connected players through the host's live player list."""

    def __init__(self, host_reference: HostReference) -> None:
        """Store the reference used to reach the active host."""

        self._host_reference = host_reference

    def list_players(self) -> list[PlayerHandle]:
        """Return the host's players, or an empty list when none is attached."""

        host = self._host_reference.current
        if host is None:
            return []
        return list(host.list_connected_players())

    def find_by_identifier(self, identifier: str) -> PlayerHandle | None:
        """Return the first player whose ``uuid`` equals ``identifier``."""

        for handle in self.list_players():
            if str(handle.uuid) == identifier:
                return handle
        return None
