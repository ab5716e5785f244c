"""Tests for the application settings helper."""
from __future__ import annotations

import pytest

from player_viewer.config.settings import Settings, get_settings


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Ensure environment variables are cleared between tests."""
    for name in (
        "PLAYER_VIEWER_HOST",
        "PLAYER_VIEWER_PORT",
        "PLAYER_VIEWER_LOG_LEVEL",
        "PLAYER_VIEWER_ALLOWED_ORIGINS",
    ):
        monkeypatch.delenv(name, raising=False)
    yield


def test_get_settings_defaults_to_local_binding():
    """Without overrides the API listens on the loopback interface port 8080."""
    settings = get_settings()

    assert settings == Settings()
    assert settings.bind_address == "127.0.0.1:8080"
    assert settings.default_kick_reason == "Kicked by admin"


def test_get_settings_applies_environment_overrides(monkeypatch):
    """Host, port, log level and origins can be overridden from the environment."""
    monkeypatch.setenv("PLAYER_VIEWER_HOST", "0.0.0.0")
    monkeypatch.setenv("PLAYER_VIEWER_PORT", "9090")
    monkeypatch.setenv("PLAYER_VIEWER_LOG_LEVEL", "debug")
    monkeypatch.setenv("PLAYER_VIEWER_ALLOWED_ORIGINS", "http://localhost:3000, http://example.test")

    settings = get_settings()

    assert settings.bind_address == "0.0.0.0:9090"
    assert settings.log_level == "DEBUG"
    assert settings.allowed_origins == ("http://localhost:3000", "http://example.test")


@pytest.mark.parametrize("raw_port", ["not-a-port", "0", "70000"])
def test_get_settings_ignores_invalid_ports(monkeypatch, raw_port):
    """Unusable port values fall back to the default port."""
    monkeypatch.setenv("PLAYER_VIEWER_PORT", raw_port)

    assert get_settings().port == 8080
