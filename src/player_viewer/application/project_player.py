"""Projection of live player handles into immutable JSON-ready views."""
from __future__ import annotations

import math

from player_viewer.domain.models.player_snapshot import (
    InventoryItem,
    PlayerSnapshot,
    PositionView,
)
from player_viewer.domain.repositories.game_host import ItemStack, PlayerHandle

EMPTY_ITEM_ID = "minecraft:air"


class PlayerProjection:
    """Read a player's fields from the host and build snapshot views.

    Each field is read from the handle exactly once per call. The host may
    change the player between reads, so a snapshot is consistent per field
    only.
    """

    def to_snapshot(self, handle: PlayerHandle) -> PlayerSnapshot:
        """Return the full snapshot of ``handle``."""

        return PlayerSnapshot(
            username=str(handle.username),
            uuid=str(handle.uuid),
            position=self.to_position_view(handle),
            inventory=tuple(self.to_inventory_view(handle)),
        )

    def to_inventory_view(self, handle: PlayerHandle) -> list[InventoryItem]:
        """Return the non-empty inventory stacks of ``handle`` in slot order."""

        return [
            InventoryItem(item=str(stack.item), count=int(stack.count))
            for stack in handle.inventory
            if not _is_empty_stack(stack)
        ]

    def to_position_view(self, handle: PlayerHandle) -> PositionView:
        """Return the block position and dimension of ``handle``."""

        position = handle.position
        return PositionView(
            x=_to_block_coordinate(position.x),
            y=_to_block_coordinate(position.y),
            z=_to_block_coordinate(position.z),
            dimension=str(handle.dimension),
        )


def _is_empty_stack(stack: ItemStack | None) -> bool:
    """Return ``True`` when ``stack`` represents an empty inventory slot."""

    if stack is None:
        return True
    return stack.count <= 0 or stack.item == EMPTY_ITEM_ID


def _to_block_coordinate(value: float) -> int:
    """Floor an entity coordinate onto the block grid."""

    return int(math.floor(value))
