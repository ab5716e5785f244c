"""Domain models describing administrative actions applied to a player."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class KickCommand:
    """Disconnect the player, showing ``reason`` on their screen."""

    reason: str


@dataclass(frozen=True)
class MessageCommand:
    """Deliver ``text`` to the player's chat."""

    text: str


AdminCommand = Union[KickCommand, MessageCommand]


@dataclass(frozen=True)
class CommandOutcome:
    """Result reported back to the caller once a command has been applied."""

    success: bool = True

    def to_dict(self) -> dict[str, bool]:
        """Serialize the outcome into a JSON-ready dictionary."""

        return {"success": self.success}
