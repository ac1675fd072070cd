"""
Log formatter for the logging system.

Renders records as:

    [12:34:56,789] [D] resolved field            [attr:_Base__count] [1234] [/reflective]
"""

import logging
from typing import Any

from .config import LogConfig
from .constants import LogConstants


def _format_extra(record: logging.LogRecord) -> str:
    """Format extra fields sorted by key."""
    extra = getattr(record, "__reflective__extra", None)
    if not extra:
        return ""

    parts = []
    for key in sorted(extra.keys()):
        value = extra[key]
        if key == "exception" and isinstance(value, BaseException):
            parts.append(f"[{key}:{value.__class__.__name__}]")
        else:
            parts.append(f"[{key}:{_format_value(value)}]")
    return " " + " ".join(parts)


def _format_value(value: Any) -> str:
    if isinstance(value, (list, tuple)):
        return ",".join(str(v) for v in value)
    return str(value)


class LogFormatter(logging.Formatter):
    """
    Formatter with a padded message column, extra fields and logger name.
    """

    def __init__(self, config: LogConfig) -> None:
        self._config = config
        super().__init__(LogConstants.DEFAULT_FORMAT)

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        """Format timestamp with optional microsecond precision."""
        s = super().formatTime(record, datefmt)
        if self._config.micros:
            micros = int((record.created % 1) * 1000000) % 1000
            s += f".{micros:03d}"
        return s

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)

        # exc_info and stack text is appended by the base class after the message
        head, sep, tail = line.partition("\n")
        rule = (
            LogConstants.MICRO_RULE_WIDTH
            if self._config.micros
            else LogConstants.DEFAULT_RULE_WIDTH
        )
        head += " " * max(1, rule - len(head))
        head += _format_extra(record).lstrip()
        head += f" [{record.process}] [{record.name}]"
        return head + sep + tail
