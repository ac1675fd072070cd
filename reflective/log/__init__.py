"""
Logging for reflective access.

Extends Python's standard logging with:
- Custom TRACE and TRACE2 log levels for detailed debugging
- Structured logging with extra fields
- Microsecond precision timestamps
- Complete logging disable functionality (level=False or level="false")
"""

import logging

from .config import LogConfig, navigate_to_section, resolve_level
from .constants import LogConstants
from .exceptions import InvalidLogLevelError, LogError
from .factory import LoggerFactory
from .formatters import LogFormatter
from .logger import Logger

# Define custom log levels for more granular debugging
logging.TRACE = LogConstants.CUSTOM_LEVELS["TRACE"]  # type: ignore[attr-defined]
logging.addLevelName(logging.TRACE, "TRACE")  # type: ignore[attr-defined]

logging.TRACE2 = LogConstants.CUSTOM_LEVELS["TRACE2"]  # type: ignore[attr-defined]
logging.addLevelName(logging.TRACE2, "TRACE2")  # type: ignore[attr-defined]

LogConstants.LEVEL_NAMES.update(
    {
        "trace": logging.TRACE,  # type: ignore[attr-defined]
        "trace2": logging.TRACE2,  # type: ignore[attr-defined]
    }
)


def create_lg(
    name: str,
    level: str | int | bool,
    micros: bool = False,
    cls: type[Logger] = Logger,
) -> Logger:
    """
    Create a logger with the specified configuration.

    Convenience function that wraps LoggerFactory.create() without needing
    to construct a LogConfig object explicitly.

    Example:
        >>> lg = create_lg("/reflective", "debug")
    """
    config = LogConfig.from_params(level, micros)
    return LoggerFactory.create(name, config, cls)


__all__ = [
    "Logger",
    "LoggerFactory",
    "LogConfig",
    "LogConstants",
    "LogFormatter",
    "LogError",
    "InvalidLogLevelError",
    "resolve_level",
    "navigate_to_section",
    "create_lg",
]
