from __future__ import annotations

import io
import logging

import pytest

from asset_input.logger import (
    TRACE,
    ColoredFormatter,
    color_enabled,
    level_color,
    resolve_level,
    setup_logging,
)


def _record(level: int, message: str = "hello") -> logging.LogRecord:
    return logging.LogRecord("asset_input", level, __file__, 1, message, None, None)


class _Terminal(io.StringIO):
    def isatty(self) -> bool:
        return True


def test_plain_formatter_leaves_level_name_untouched():
    formatter = ColoredFormatter(fmt="%(levelname)s %(message)s", use_color=False)

    assert formatter.format(_record(logging.WARNING)) == "WARNING hello"


def test_colored_formatter_wraps_level_name():
    formatter = ColoredFormatter(fmt="%(levelname)s %(message)s")

    output = formatter.format(_record(logging.ERROR))

    assert output == "\033[31m\033[1mERROR\033[0m hello"


def test_colored_formatter_does_not_modify_record():
    formatter = ColoredFormatter(fmt="%(levelname)s %(message)s")
    record = _record(logging.INFO)

    formatter.format(record)

    assert record.levelname == "INFO"


def test_trace_records_are_colored():
    formatter = ColoredFormatter(fmt="%(levelname)s")

    assert formatter.format(_record(TRACE)) == "\033[90m\033[1mTRACE\033[0m"


def test_level_color_uses_nearest_lower_level():
    assert level_color(logging.INFO + 5) == level_color(logging.INFO)
    assert level_color(1) == ""


def test_color_enabled_requires_terminal(monkeypatch):
    monkeypatch.delenv("NO_COLOR", raising=False)

    assert color_enabled(_Terminal())
    assert not color_enabled(io.StringIO())
    assert not color_enabled(None)


def test_color_enabled_respects_no_color(monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")

    assert not color_enabled(_Terminal())


@pytest.mark.parametrize(
    "name, expected",
    [
        ("trace", TRACE),
        ("debug", logging.DEBUG),
        ("WARNING", logging.WARNING),
        ("verbose", logging.INFO),
    ],
)
def test_resolve_level(name, expected):
    assert resolve_level(name) == expected


def test_resolve_level_reads_environment(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "error")

    assert resolve_level() == logging.ERROR


def test_setup_logging_sets_root_level():
    root = logging.getLogger()
    previous_level, previous_handlers = root.level, root.handlers[:]
    try:
        setup_logging("DEBUG")

        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, ColoredFormatter)
    finally:
        root.handlers = previous_handlers
        root.setLevel(previous_level)
