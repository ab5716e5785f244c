"""Test configuration providing an importable package and game host fixtures."""
from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

import pytest


def _ensure_src_on_path() -> None:
    """Add the project's ``src`` directory to ``sys.path`` when missing."""

    src_path_str = str(Path(__file__).resolve().parents[1] / "src")
    if src_path_str not in sys.path:
        sys.path.insert(0, src_path_str)


_ensure_src_on_path()

from host_fakes import FakeGameHost, FakePlayer, FakePosition, FakeStack  # noqa: E402


@pytest.fixture
def make_player() -> Callable[..., FakePlayer]:
    """Return a factory building fake players with sensible defaults."""

    def _make_player(
        username: str = "Steve",
        uuid: str = "069a79f4-44e9-4726-a5be-fca90e38aaf5",
        **kwargs,
    ) -> FakePlayer:
        return FakePlayer(username=username, uuid=uuid, **kwargs)

    return _make_player


@pytest.fixture
def steve(make_player) -> FakePlayer:
    """A player standing in the overworld with a couple of stacks."""

    return make_player(
        position=FakePosition(12.7, 64.0, -3.2),
        inventory=[
            None,
            FakeStack("minecraft:diamond", 3),
            FakeStack("minecraft:air", 0),
            FakeStack("minecraft:stick", 1),
        ],
    )


@pytest.fixture
def game_host(steve) -> FakeGameHost:
    """A host with ``steve`` connected."""

    return FakeGameHost([steve])
