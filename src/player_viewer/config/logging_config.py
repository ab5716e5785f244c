"""Logging setup shared by the standalone server and the embedded service."""
from __future__ import annotations

import logging

_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Install a basic stream handler for the ``player_viewer`` loggers."""

    resolved_level = logging.getLevelName(level.upper())
    if not isinstance(resolved_level, int):
        resolved_level = logging.INFO
    logging.basicConfig(level=resolved_level, format=_LOG_FORMAT)
    logging.getLogger("player_viewer").setLevel(resolved_level)
