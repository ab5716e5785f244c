"""Command-line entry point for running the player viewer API standalone."""
from __future__ import annotations

import uvicorn

from player_viewer.config.logging_config import configure_logging
from player_viewer.config.settings import get_settings
from player_viewer.main import create_app


def main() -> None:
    """Run the API with Uvicorn; no game host is attached, so rosters are empty."""

    settings = get_settings()
    configure_logging(settings.log_level)
    app = create_app(settings=settings)
    uvicorn.run(app, host=settings.bind_host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
