"""
Configuration for the logging system.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from .constants import LogConstants
from .exceptions import InvalidLogLevelError


def resolve_level(level: str | int | bool) -> int | bool:
    """
    Resolve log level from string, numeric value, or boolean.

    Args:
        level: Log level as string name, numeric value, or a bool. False
            disables logging, True means info.

    Returns:
        Numeric log level or False to disable logging

    Raises:
        InvalidLogLevelError: If the log level is invalid
    """
    if isinstance(level, bool):
        return False if not level else logging.INFO
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        if level.isnumeric():
            return int(level)
        if level.lower() in LogConstants.LEVEL_NAMES:
            return LogConstants.LEVEL_NAMES[level.lower()]
    raise InvalidLogLevelError(level)


def navigate_to_section(config_dict: dict, section: str) -> dict[str, Any]:
    """Navigate to a dotted section in config dict, empty dict if missing."""
    current: Any = config_dict
    for part in section.split("."):
        if isinstance(current, dict) and part in current:
            current = current[part]
        else:
            # Fall back to empty dict if section not found
            return {}
    return current if isinstance(current, dict) else {}


@dataclass(frozen=True)
class LogConfig:
    """
    Immutable logger configuration.

    level is an int for normal levels, or False to disable logging.
    """

    level: int | bool = logging.INFO
    micros: bool = False

    @classmethod
    def from_params(cls, level: str | int | bool, micros: bool = False) -> LogConfig:
        """
        Create LogConfig from individual parameters.

        Args:
            level: Log level (string name, numeric value, or False to disable logging)
            micros: Whether to show microsecond precision

        Returns:
            LogConfig instance

        Raises:
            InvalidLogLevelError: If level is an unknown level name
        """
        return cls(level=resolve_level(level), micros=micros)

    @classmethod
    def from_config(
        cls,
        config_dict: dict,
        section: str = "logging",
        default_level: str | int | bool = "info",
    ) -> LogConfig:
        """
        Create LogConfig from a configuration dictionary.

        Args:
            config_dict: Configuration dictionary
            section: Dotted path of the section to use (default: "logging")
            default_level: Level used when the section sets none

        Example:
            log_config = LogConfig.from_config(
                {"reflective": {"logging": {"level": "trace"}}},
                "reflective.logging",
            )
        """
        current = navigate_to_section(config_dict, section)

        level = current.get("level", default_level)
        micros = current.get("microseconds", current.get("micros", False))

        # Handle string "false" to disable logging
        if level == "false":
            level = False

        return cls.from_params(level=level, micros=micros)
