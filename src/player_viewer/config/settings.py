"""Application configuration helpers."""
from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Tuple


@dataclass(frozen=True)
class Settings:
    """Holds configuration values for the player viewer API."""

    bind_host: str = "127.0.0.1"
    port: int = 8080
    log_level: str = "INFO"
    app_version: str = "0.1.0"
    default_kick_reason: str = "Kicked by admin"
    allowed_origins: Tuple[str, ...] = ("*",)

    @property
    def bind_address(self) -> str:
        """Return the ``host:port`` pair the HTTP server listens on."""

        return f"{self.bind_host}:{self.port}"


def get_settings() -> Settings:
    """Provide application settings, applying environment overrides."""

    settings = Settings()
    overrides: dict[str, object] = {}

    bind_host = os.getenv("PLAYER_VIEWER_HOST")
    if bind_host:
        overrides["bind_host"] = bind_host.strip()

    port = _parse_port(os.getenv("PLAYER_VIEWER_PORT"))
    if port is not None:
        overrides["port"] = port

    log_level = os.getenv("PLAYER_VIEWER_LOG_LEVEL")
    if log_level:
        overrides["log_level"] = log_level.strip().upper()

    origins = os.getenv("PLAYER_VIEWER_ALLOWED_ORIGINS")
    if origins:
        parsed_origins = tuple(
            origin.strip() for origin in origins.split(",") if origin.strip()
        )
        if parsed_origins:
            overrides["allowed_origins"] = parsed_origins

    if not overrides:
        return settings
    return replace(settings, **overrides)


def _parse_port(raw_port: str | None) -> int | None:
    """Convert ``raw_port`` into a valid TCP port number when possible."""

    if not raw_port:
        return None
    try:
        port = int(raw_port)
    except ValueError:
        return None
    if not 0 < port < 65536:
        return None
    return port
