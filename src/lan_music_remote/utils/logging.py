"""Console logging formatter used by ``logging_config.json``."""

from __future__ import annotations

import logging
import os
import sys

PACKAGE_PREFIX = "lan_music_remote."


class ConsoleFormatter(logging.Formatter):
    """Colours the level name and trims the package prefix from logger names.

    Colours are disabled when ``NO_COLOR`` is set or the stream is not a TTY.
    """

    COLORS: dict[int, str] = {
        logging.DEBUG: "\033[36m",     # cyan
        logging.INFO: "\033[32m",      # green
        logging.WARNING: "\033[33m",   # yellow
        logging.ERROR: "\033[31m",     # red
        logging.CRITICAL: "\033[1;31m",  # bold red
    }
    RESET = "\033[0m"

    def __init__(self, *args, stream=None, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._stream = stream

    def _use_color(self) -> bool:
        if os.environ.get("NO_COLOR") is not None:
            return False
        stream = self._stream or sys.stderr
        return hasattr(stream, "isatty") and stream.isatty()

    def format(self, record: logging.LogRecord) -> str:
        record = logging.makeLogRecord(record.__dict__)
        if record.name.startswith(PACKAGE_PREFIX):
            record.name = record.name[len(PACKAGE_PREFIX):]
        if self._use_color():
            color = self.COLORS.get(record.levelno, "")
            record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)
