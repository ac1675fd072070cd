"""
Configuration for the reflective accessor.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .log import LogConfig, navigate_to_section, resolve_level
from .preconditions import check_argument


@dataclass(frozen=True)
class AccessorConfig:
    """
    Immutable accessor options.

    Attributes:
        strict_types: Check values written by set_property against the
            declaring class's annotation (plain classes only).
        log_level: Level of the accessor's default logger (name, number,
            or False to disable logging).
        log_micros: Show microsecond timestamps in the default logger.
    """

    strict_types: bool = False
    log_level: str | int | bool = "warning"
    log_micros: bool = False

    def __post_init__(self) -> None:
        check_argument(
            isinstance(self.strict_types, bool),
            "strict_types must be a bool",
            strict_types=repr(self.strict_types),
        )
        # Raises InvalidLogLevelError for unknown level names
        resolve_level(self.log_level)

    @classmethod
    def from_params(
        cls,
        strict_types: bool = False,
        log_level: str | int | bool = "warning",
        log_micros: bool = False,
    ) -> AccessorConfig:
        return cls(strict_types=strict_types, log_level=log_level, log_micros=log_micros)

    @classmethod
    def from_dict(
        cls, config_dict: dict[str, Any], section: str = "reflective"
    ) -> AccessorConfig:
        """
        Create AccessorConfig from a configuration dictionary.

        The logging subsection is read by LogConfig.from_config, so it takes
        the same keys as any logger section (level, micros).

        Args:
            config_dict: Configuration dictionary
            section: Dotted path of the section to use (default: "reflective").
                Missing sections yield the defaults.

        Example:
            config = AccessorConfig.from_dict(
                {"reflective": {"strict_types": True, "logging": {"level": "trace"}}}
            )
        """
        current = navigate_to_section(config_dict, section)
        log_config = LogConfig.from_config(
            current, "logging", default_level=current.get("log_level", "warning")
        )

        return cls.from_params(
            strict_types=current.get("strict_types", False),
            log_level=log_config.level,
            log_micros=log_config.micros,
        )

    def log_config(self) -> LogConfig:
        """Return the configuration of the accessor's default logger."""
        return LogConfig.from_params(self.log_level, self.log_micros)
