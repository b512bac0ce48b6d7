#!/usr/bin/env python3
"""Main entry point for the LAN music remote."""

from __future__ import annotations

import json
import logging
import logging.config
import sys
from pathlib import Path

from lan_music_remote.domain.shared.messages import LogTemplates

_LOGGING_CONFIG_PATH = Path(__file__).resolve().parents[2] / "logging_config.json"


def setup_logging(log_level: str = "INFO") -> None:
    resolved_level = getattr(logging, log_level.upper(), logging.INFO)

    try:
        with open(_LOGGING_CONFIG_PATH) as f:
            config = json.load(f)
        logging.config.dictConfig(config)
    except (FileNotFoundError, json.JSONDecodeError, ValueError):
        logging.basicConfig(
            level=resolved_level,
            format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        logging.getLogger(__name__).warning(
            "Could not load %s, falling back to basic config", _LOGGING_CONFIG_PATH
        )

    logging.getLogger().setLevel(resolved_level)


def main() -> int:
    from lan_music_remote.config.settings import get_settings

    settings = get_settings()
    setup_logging(settings.log_level)

    logger = logging.getLogger(__name__)
    logger.info(LogTemplates.APP_STARTING, settings.environment)

    from lan_music_remote.config.container import create_container
    from lan_music_remote.infrastructure.http.server import run_app

    container = create_container(settings)

    try:
        run_app(container.web_app, host=settings.server.host, port=settings.server.port)
        logger.info(LogTemplates.APP_STOPPED)
        return 0
    except KeyboardInterrupt:
        logger.info(LogTemplates.APP_KEYBOARD_INTERRUPT)
        return 0
    except Exception as e:
        logger.exception(LogTemplates.APP_FATAL_ERROR, e)
        return 1


def cli() -> None:
    """Console script entry point (used by pyproject.toml [project.scripts])."""
    sys.exit(main())


if __name__ == "__main__":
    cli()  # pragma: no cover
