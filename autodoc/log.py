"""
Logging for autodoc.

Extends Python's standard logging with:
- Structured extra fields rendered as [key:value] after the message
- Colored level markers with ANSI escape sequences
- Level names resolved from configuration text, including "false" to
  disable logging completely
"""

import collections
import logging
import sys
from typing import Any, TextIO

from .exceptions import ConfigError
from .ui.console import should_use_color


class LogConstants:
    """Constants for the logging system."""

    DATE_FORMAT: str = "%Y-%m-%d %H:%M:%S"

    LEVEL_NAMES: dict[str, int | bool] = {
        "critical": logging.CRITICAL,
        "error": logging.ERROR,
        "warning": logging.WARNING,
        "info": logging.INFO,
        "debug": logging.DEBUG,
        "false": False,  # Special value to disable all logging
    }

    RESET: str = "\x1b[0m"

    # Record attribute holding structured extra fields
    EXTRA_ATTR: str = "__autodoc__extra"


class ColorManager:
    """ANSI color codes per log level."""

    COLORS: dict[int, str] = {
        logging.DEBUG: "\x1b[38;5;32m",
        logging.INFO: "\x1b[36m",
        logging.WARNING: "\x1b[33m",
        logging.ERROR: "\x1b[31m",
        logging.CRITICAL: "\x1b[35m",
    }

    FIELD: str = "\x1b[38;5;244m"

    @staticmethod
    def get_color_for_level(level: int) -> str | None:
        """
        Get appropriate color for log level.

        Args:
            level: Log level number

        Returns:
            Color escape sequence or None if not found
        """
        return ColorManager.COLORS.get(level)


def resolve_level(s: str | int | bool) -> int | bool:
    """
    Resolve log level from string, numeric value, or boolean.

    Args:
        s: Log level as string name, numeric value, or False to disable logging

    Returns:
        Numeric log level or False to disable logging

    Raises:
        ConfigError: If the log level is invalid
    """
    if isinstance(s, bool):
        return s

    if str(s).isnumeric():
        return int(s)

    name = str(s).lower()
    if name in LogConstants.LEVEL_NAMES:
        return LogConstants.LEVEL_NAMES[name]

    raise ConfigError(
        f"Invalid log level: {s}", valid=", ".join(LogConstants.LEVEL_NAMES)
    )


class Logger(logging.Logger):
    """
    Logger that keeps the extra mapping as structured fields.

    Fields passed with extra={...} are not merged into the record's
    attributes; they are kept together and rendered by LogFormatter.

    Example:
        lg = create_logger("autodoc", "info")
        lg.info("spliced table", extra={"table": "inputs", "result": "replaced"})
    """

    def makeRecord(  # noqa: N802
        self,
        name: str,
        level: int,
        fn: str,
        lno: int,
        msg: object,
        args: Any,
        exc_info: Any,
        func: str | None = None,
        extra: dict[str, Any] | None = None,
        sinfo: str | None = None,
    ) -> logging.LogRecord:
        """Create log record with extra fields stored under one attribute."""
        record = super().makeRecord(
            name, level, fn, lno, msg, args, exc_info, func=func, sinfo=sinfo
        )
        setattr(record, LogConstants.EXTRA_ATTR, extra or {})
        return record


class LogFormatter(logging.Formatter):
    """
    Text formatter producing `[time] [L] message [key:value] [name]` lines.

    Colors are applied to the level marker and the extra fields when enabled.
    """

    def __init__(self, colors: bool = True) -> None:
        super().__init__(datefmt=LogConstants.DATE_FORMAT)
        self.colors = colors

    def _format_extra(self, record: logging.LogRecord) -> str:
        extra = getattr(record, LogConstants.EXTRA_ATTR, None)
        if not extra:
            return ""

        keys = extra.keys()
        if not isinstance(extra, collections.OrderedDict):
            keys = sorted(keys)

        parts = []
        for key in keys:
            value = extra[key]
            if isinstance(value, Exception):
                value = value.__class__.__name__
            parts.append(f"[{key}:{value}]")

        text = " ".join(parts)
        if self.colors:
            text = ColorManager.FIELD + text + LogConstants.RESET
        return " " + text

    def format(self, record: logging.LogRecord) -> str:
        """
        Format a log record.

        Args:
            record: Log record to format

        Returns:
            Formatted log line, followed by traceback text if any
        """
        record.message = record.getMessage()
        record.asctime = self.formatTime(record, self.datefmt)

        level = record.levelname[:1]
        color = ColorManager.get_color_for_level(record.levelno)
        if self.colors and color:
            level = f"{color}{level}{LogConstants.RESET}"

        text = (
            f"[{record.asctime}] [{level}] {record.message}"
            f"{self._format_extra(record)} [{record.name}]"
        )

        if record.exc_info and not record.exc_text:
            record.exc_text = self.formatException(record.exc_info)
        if record.exc_text:
            text += "\n" + record.exc_text
        if record.stack_info:
            text += "\n" + self.formatStack(record.stack_info)
        return text


def create_logger(
    name: str = "autodoc",
    level: str | int | bool = "warning",
    *,
    stream: TextIO | None = None,
    colors: bool | None = None,
) -> Logger:
    """
    Create a console logger.

    Args:
        name: Logger name
        level: Level name, number, or "false"/False to disable logging
        stream: Output stream (defaults to sys.stderr)
        colors: Force colors on or off; auto-detected when None

    Returns:
        Configured Logger instance (not registered with logging.getLogger)

    Raises:
        ConfigError: If the level is invalid
    """
    resolved = resolve_level(level)
    stream = stream if stream is not None else sys.stderr

    lg = Logger(name)
    lg.propagate = False
    if resolved is False:
        lg.setLevel(logging.CRITICAL + 1)
        lg.disabled = True
        return lg

    lg.setLevel(logging.DEBUG if resolved is True else resolved)
    handler = logging.StreamHandler(stream)
    if colors is None:
        colors = should_use_color(stream)
    handler.setFormatter(LogFormatter(colors=colors))
    lg.addHandler(handler)
    return lg
