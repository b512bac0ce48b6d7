"""Tests for ConsoleFormatter."""

import logging
from io import StringIO

import pytest

from lan_music_remote.utils.logging import ConsoleFormatter

RESET = "\033[0m"
LEVEL_COLORS = {
    logging.DEBUG: "\033[36m",
    logging.INFO: "\033[32m",
    logging.WARNING: "\033[33m",
    logging.ERROR: "\033[31m",
    logging.CRITICAL: "\033[1;31m",
}


def _make_record(level: int, name: str = "lan_music_remote.application.x") -> logging.LogRecord:
    return logging.LogRecord(
        name=name,
        level=level,
        pathname="test.py",
        lineno=1,
        msg="hello %s",
        args=("world",),
        exc_info=None,
    )


def _tty_stream() -> StringIO:
    stream = StringIO()
    stream.isatty = lambda: True  # type: ignore[method-assign]
    return stream


class TestConsoleFormatter:
    """Tests for ANSI colouring and logger name trimming."""

    @pytest.mark.parametrize(
        "level",
        [logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR, logging.CRITICAL],
    )
    def test_color_applied_per_level(self, level, monkeypatch):
        """Should apply the correct ANSI color code for each level."""
        monkeypatch.delenv("NO_COLOR", raising=False)
        fmt = ConsoleFormatter("%(levelname)s | %(message)s", stream=_tty_stream())

        output = fmt.format(_make_record(level))

        assert output.startswith(LEVEL_COLORS[level])
        assert RESET in output
        assert output.endswith("hello world")

    def test_no_color_when_no_color_env_set(self, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "1")
        fmt = ConsoleFormatter("%(levelname)s", stream=_tty_stream())

        assert fmt.format(_make_record(logging.ERROR)) == "ERROR"

    def test_no_color_when_not_a_tty(self, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        fmt = ConsoleFormatter("%(levelname)s", stream=StringIO())

        assert fmt.format(_make_record(logging.WARNING)) == "WARNING"

    def test_package_prefix_trimmed(self):
        fmt = ConsoleFormatter("%(name)s", stream=StringIO())

        assert fmt.format(_make_record(logging.INFO)) == "application.x"

    def test_foreign_logger_name_kept(self):
        fmt = ConsoleFormatter("%(name)s", stream=StringIO())

        assert fmt.format(_make_record(logging.INFO, name="aiohttp.access")) == "aiohttp.access"

    def test_original_record_untouched(self, monkeypatch):
        """Other handlers must still see the plain level name."""
        monkeypatch.delenv("NO_COLOR", raising=False)
        fmt = ConsoleFormatter("%(levelname)s", stream=_tty_stream())
        record = _make_record(logging.INFO)

        fmt.format(record)

        assert record.levelname == "INFO"
        assert record.name == "lan_music_remote.application.x"
