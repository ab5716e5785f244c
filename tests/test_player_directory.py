"""Tests for the host-backed player directory."""
from __future__ import annotations

import uuid

from player_viewer.infrastructure.host.host_reference import HostReference
from player_viewer.infrastructure.repositories.host_player_directory import (
    HostPlayerDirectory,
)

from host_fakes import FakeGameHost


def test_list_players_is_empty_without_host() -> None:
    """No attached host should read as an empty roster rather than an error."""

    directory = HostPlayerDirectory(HostReference())

    assert directory.list_players() == []
    assert directory.find_by_identifier("anything") is None


def test_list_players_preserves_host_order(make_player) -> None:
    """Players should be returned in the order the host reports them."""

    alex = make_player(username="Alex", uuid="b")
    steve = make_player(username="Steve", uuid="a")
    directory = HostPlayerDirectory(HostReference(FakeGameHost([alex, steve])))

    assert [player.username for player in directory.list_players()] == ["Alex", "Steve"]


def test_find_by_identifier_matches_exact_uuid(make_player) -> None:
    """Every connected identifier resolves to the player carrying it."""

    players = [make_player(username=f"p{index}", uuid=str(uuid.uuid4())) for index in range(3)]
    directory = HostPlayerDirectory(HostReference(FakeGameHost(players)))

    for player in players:
        found = directory.find_by_identifier(player.uuid)
        assert found is player
        assert found.uuid == player.uuid


def test_find_by_identifier_is_case_sensitive(make_player) -> None:
    """Identifiers differing only by case must not match."""

    player = make_player(uuid="abcdef-0001")
    directory = HostPlayerDirectory(HostReference(FakeGameHost([player])))

    assert directory.find_by_identifier("ABCDEF-0001") is None
    assert directory.find_by_identifier("abcdef") is None
    assert directory.find_by_identifier("") is None


def test_directory_follows_host_attachment(steve) -> None:
    """Attaching and detaching the host changes what the directory sees."""

    reference = HostReference()
    directory = HostPlayerDirectory(reference)

    reference.attach(FakeGameHost([steve]))
    assert directory.find_by_identifier(steve.uuid) is steve

    reference.detach()
    assert directory.list_players() == []
