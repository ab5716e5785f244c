"""In-memory stand-ins for the game host used across the test suite."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class FakeStack:
    item: str
    count: int


@dataclass
class FakePosition:
    x: float
    y: float
    z: float


@dataclass
class FakePlayer:
    """Mutable stand-in for a connected player that records commands."""

    username: str
    uuid: str
    position: FakePosition = field(default_factory=lambda: FakePosition(0, 64, 0))
    dimension: str = "minecraft:overworld"
    inventory: List[Optional[FakeStack]] = field(default_factory=list)
    disconnect_reasons: List[str] = field(default_factory=list)
    messages: List[str] = field(default_factory=list)

    def disconnect(self, reason: str) -> None:
        self.disconnect_reasons.append(reason)

    def send_message(self, text: str) -> None:
        self.messages.append(text)


class FakeGameHost:
    """Game host whose roster is a plain list."""

    def __init__(self, players: List[FakePlayer] | None = None) -> None:
        self.players: List[FakePlayer] = list(players or [])

    def list_connected_players(self) -> List[FakePlayer]:
        return list(self.players)
