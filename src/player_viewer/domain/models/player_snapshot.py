"""Domain models representing point-in-time views of a connected player."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Tuple


@dataclass(frozen=True)
class InventoryItem:
    """A non-empty inventory stack."""

    item: str
    count: int

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready representation of the stack."""

        return {"item": self.item, "count": self.count}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "InventoryItem":
        """Recreate a stack from its serialized representation."""

        return cls(item=str(data.get("item", "")), count=int(data.get("count", 0)))


@dataclass(frozen=True)
class PositionView:
    """Block-grid coordinates plus the dimension the player is in."""

    x: int
    y: int
    z: int
    dimension: str

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready representation of the position."""

        return {"x": self.x, "y": self.y, "z": self.z, "dimension": self.dimension}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PositionView":
        """Recreate a position from its serialized representation."""

        return cls(
            x=int(data.get("x", 0)),
            y=int(data.get("y", 0)),
            z=int(data.get("z", 0)),
            dimension=str(data.get("dimension", "")),
        )


@dataclass(frozen=True)
class PlayerSnapshot:
    """Immutable projection of a player's identity, position and inventory."""

    username: str
    uuid: str
    position: PositionView
    inventory: Tuple[InventoryItem, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        """Serialize the snapshot into a JSON-ready dictionary."""

        return {
            "username": self.username,
            "uuid": self.uuid,
            "position": self.position.to_dict(),
            "inventory": [stack.to_dict() for stack in self.inventory],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PlayerSnapshot":
        """Recreate a snapshot from the output of :meth:`to_dict`."""

        raw_position = data.get("position")
        raw_inventory = data.get("inventory")
        return cls(
            username=str(data.get("username", "")),
            uuid=str(data.get("uuid", "")),
            position=PositionView.from_dict(
                raw_position if isinstance(raw_position, dict) else {}
            ),
            inventory=tuple(
                InventoryItem.from_dict(stack)
                for stack in (raw_inventory if isinstance(raw_inventory, list) else [])
                if isinstance(stack, dict)
            ),
        )
