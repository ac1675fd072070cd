"""
Logger class for the logging system.

This module provides a logger with custom TRACE levels and structured
extra fields that are merged into every record.
"""

import logging
import sys
from typing import Any

from .config import LogConfig
from .constants import LogConstants


class Logger(logging.Logger):
    """
    Enhanced logger with custom record creation.

    Extends the standard Python logger with:
    - Pre-populated extra fields merged into each record
    - Custom trace and trace2 methods
    - A disabled state for level=False
    """

    def __init__(
        self,
        name: str,
        config: LogConfig | None = None,
        extra: dict[str, Any] | None = None,
    ):
        """
        Initialize the enhanced logger.

        Args:
            name: Logger name
            config: Logger configuration, default LogConfig if None
            extra: Pre-populated extra fields to include in all log records
        """
        # Handle case where Logger is instantiated by standard logging system
        if config is None:
            config = LogConfig.from_params("info")

        super().__init__(name)
        self._extra = extra or {}
        self.apply_config(config)

    def apply_config(self, config: LogConfig) -> None:
        """Switch the logger to config, level=False disables it."""
        self._config = config
        self._logging_disabled = config.level is False
        if config.level is False:
            self.setLevel(logging.CRITICAL + 1)
        else:
            self.setLevel(config.level)

    @property
    def config(self) -> LogConfig:
        """Get logger configuration."""
        return self._config

    @property
    def extra(self) -> dict[str, Any]:
        """Get pre-populated extra fields."""
        return self._extra

    @property
    def disabled(self) -> bool:
        """Check if logging is disabled."""
        return self._logging_disabled

    @disabled.setter
    def disabled(self, value: bool) -> None:
        """Set the disabled state."""
        self._logging_disabled = value

    def _merge_extra(self, extra: dict[str, Any] | None) -> dict[str, Any]:
        """Merge pre-populated extra fields with per-call extra fields."""
        merged = self._extra.copy()
        if extra:
            merged.update(extra)
        return merged

    def makeRecord(  # type: ignore[override]
        self,
        name: str,
        level: int,
        fn: str,
        lno: int,
        msg: str,
        args: tuple,
        exc_info: Any | None,
        func: str | None = None,
        extra: dict[str, Any] | None = None,
        sinfo: str | None = None,
    ) -> logging.LogRecord:
        """Create log record with extra field handling."""
        merged_extra = self._merge_extra(extra)
        record = super().makeRecord(
            name, level, fn, lno, msg, args, exc_info, func, merged_extra, sinfo
        )
        # Use setattr to avoid Python name mangling with __ prefix
        setattr(record, "__reflective__extra", merged_extra)
        return record

    def trace(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """
        Log a TRACE level message.

        Args:
            msg: Log message
            *args: Message format arguments
            **kwargs: Additional keyword arguments including 'extra' for structured data
        """
        trace_level = LogConstants.CUSTOM_LEVELS["TRACE"]
        if self.isEnabledFor(trace_level):
            self._log(trace_level, msg, args, **kwargs)

    def trace2(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """
        Log a TRACE2 level message (most verbose level).
        """
        trace2_level = LogConstants.CUSTOM_LEVELS["TRACE2"]
        if self.isEnabledFor(trace2_level):
            self._log(trace2_level, msg, args, **kwargs)

    def isEnabledFor(self, level: int) -> bool:
        if self._logging_disabled:
            return False
        return super().isEnabledFor(level)

    def _log(self, level: int, msg: str, args: tuple, **kwargs: Any) -> None:  # type: ignore[override]
        if self._logging_disabled:
            return

        try:
            super()._log(level, msg, args, **kwargs)
        except (TypeError, ValueError) as e:
            # Log to stderr so format bugs don't go unnoticed
            msg_preview = msg[:80] + "..." if len(msg) > 80 else msg
            sys.stderr.write(
                f"LOG_FORMAT_ERROR [{self.name}]: {e.__class__.__name__}: {e} "
                f"| msg={msg_preview!r} args={args!r}\n"
            )
