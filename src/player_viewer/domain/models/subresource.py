"""Per-player views and actions addressable below ``/players/{id}``."""
from __future__ import annotations

from enum import Enum


class Subresource(str, Enum):
    """Second path segment of a player route."""

    INVENTORY = "inventory"
    POSITION = "position"
    KICK = "kick"
    MESSAGE = "message"

    @property
    def requires_post(self) -> bool:
        """Return ``True`` for subresources that act on the player."""

        return self in (Subresource.KICK, Subresource.MESSAGE)

    @classmethod
    def parse(cls, segment: str) -> "Subresource | None":
        """Return the member named by ``segment`` or ``None`` when unknown."""

        try:
            return cls(segment)
        except ValueError:
            return None
