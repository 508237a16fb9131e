"""Simple logging configuration for asset-input."""

import logging
import os
import sys
from typing import TextIO

# Define TRACE level (lower than DEBUG)
TRACE = 5
logging.addLevelName(TRACE, "TRACE")

_RESET = "\033[0m"
_BOLD = "\033[1m"

# Level number -> ANSI color, checked from the most severe down
_LEVEL_COLORS = (
    (logging.CRITICAL, "\033[35m"),  # Magenta
    (logging.ERROR, "\033[31m"),  # Red
    (logging.WARNING, "\033[33m"),  # Yellow
    (logging.INFO, "\033[32m"),  # Green
    (logging.DEBUG, "\033[36m"),  # Cyan
    (TRACE, "\033[90m"),  # Dark gray
)


def color_enabled(stream: TextIO | None) -> bool:
    """Whether ANSI colors should be written to ``stream``.

    Honors the NO_COLOR convention and skips streams that are not terminals,
    such as pipes or captured test output.
    """
    if os.getenv("NO_COLOR"):
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def level_color(levelno: int) -> str:
    for threshold, color in _LEVEL_COLORS:
        if levelno >= threshold:
            return color
    return ""


class ColoredFormatter(logging.Formatter):
    """Formatter that highlights the level name of each record.

    Custom levels between the standard ones take the color of the nearest
    lower level. With ``use_color=False`` records are formatted unchanged.
    """

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
        use_color: bool = True,
    ) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.use_color = use_color

    def formatMessage(self, record: logging.LogRecord) -> str:
        color = level_color(record.levelno) if self.use_color else ""
        if not color:
            return super().formatMessage(record)
        # Handlers share records; color a copy so others see the plain name.
        colored = logging.makeLogRecord(record.__dict__)
        colored.levelname = f"{color}{_BOLD}{record.levelname}{_RESET}"
        return super().formatMessage(colored)


def resolve_level(log_level: str | None = None) -> int:
    """Map a level name (or the LOG_LEVEL env var) to a logging level."""
    name = (log_level or os.getenv("LOG_LEVEL", "INFO")).upper()
    if name == "TRACE":
        return TRACE
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def setup_logging(log_level: str | None = None) -> None:
    """Configure logging for the application.

    Uses ``log_level`` when given, otherwise the LOG_LEVEL environment
    variable (defaults to INFO). Sets up a console handler on stderr so that
    command results on stdout stay clean; level names are colored only when
    stderr is a terminal.
    """
    handler = logging.StreamHandler(sys.stderr)
    formatter = ColoredFormatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        use_color=color_enabled(sys.stderr),
    )
    handler.setFormatter(formatter)

    logging.basicConfig(
        level=resolve_level(log_level),
        handlers=[handler],
        force=True,
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module.

    Args:
        name: Usually __name__ of the calling module

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)
