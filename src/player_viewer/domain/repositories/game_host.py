"""Contracts describing the live game host consumed by the API."""
from __future__ import annotations

from typing import Optional, Protocol, Sequence


class BlockPosition(Protocol):
    """Coordinates of a player on the block grid."""

    x: float
    y: float
    z: float


class ItemStack(Protocol):
    """A single inventory slot holding ``count`` units of ``item``."""

    item: str
    count: int


class PlayerHandle(Protocol):
    """Live reference to a connected player, owned by the game host.

    Attributes are read on demand; the host may mutate them between reads.
    Inventory slots may be ``None`` for empty slots.
    """

    @property
    def username(self) -> str:
        """Return the player's display name."""

    @property
    def uuid(self) -> str:
        """Return the stable unique identifier of the player."""

    @property
    def position(self) -> BlockPosition:
        """Return the player's current position."""

    @property
    def dimension(self) -> str:
        """Return the identifier of the world the player is in."""

    @property
    def inventory(self) -> Sequence[Optional[ItemStack]]:
        """Return the player's inventory slots in slot order."""

    def disconnect(self, reason: str) -> None:
        """Remove the player from the server showing ``reason``."""

    def send_message(self, text: str) -> None:
        """Deliver ``text`` to the player's chat."""


class GameHost(Protocol):
    """Running game server exposing its connected players."""

    def list_connected_players(self) -> Sequence[PlayerHandle]:
        """Return the players currently connected, in host order."""
