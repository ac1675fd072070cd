"""
Factory for creating and configuring loggers.
"""

import logging
import sys
from typing import cast

from .config import LogConfig
from .formatters import LogFormatter
from .logger import Logger


class LoggerFactory:
    """Factory for creating and configuring loggers."""

    @staticmethod
    def create(
        name: str,
        config: LogConfig,
        logger_class: type[Logger] = Logger,
    ) -> Logger:
        """
        Create a logger with the specified configuration.

        An existing logger registered under the same name is returned as is;
        use reconfigure() to switch it to a new configuration.

        Args:
            name: Logger name
            config: Logger configuration
            logger_class: Logger class to use

        Returns:
            Configured logger instance

        Example:
            >>> from reflective.log import LoggerFactory, LogConfig
            >>>
            >>> config = LogConfig.from_params(level="trace")
            >>> lg = LoggerFactory.create("/reflective", config)
            >>> lg.trace("resolved field", extra={"attr": "_Base__count"})
            [12:34:56,789] [T] resolved field      [attr:_Base__count] [1234] [/reflective]
        """
        existing = LoggerFactory._check_existing_logger(name)
        if existing:
            return existing

        return LoggerFactory._create_new_logger(name, config, logger_class)

    @staticmethod
    def reconfigure(lg: Logger, config: LogConfig) -> Logger:
        """
        Apply config to an existing logger and the handlers it owns.

        Args:
            lg: Logger to update
            config: New logger configuration

        Returns:
            The same logger
        """
        if lg.config == config:
            return lg

        lg.apply_config(config)
        for handler in lg.handlers:
            if not isinstance(handler.formatter, LogFormatter):
                continue
            handler.setLevel(logging.NOTSET if config.level is False else config.level)
            handler.setFormatter(LogFormatter(config))

        lg.trace2("reconfigured logger", extra=LoggerFactory._describe(config))
        return lg

    @staticmethod
    def _describe(config: LogConfig) -> dict[str, object]:
        return {
            "level": (
                "disabled"
                if config.level is False
                else logging.getLevelName(config.level)
            ),
            "micros": config.micros,
        }

    @staticmethod
    def _check_existing_logger(name: str) -> Logger | None:
        """Check if logger exists and return it."""
        existing = logging.root.manager.loggerDict.get(name)
        if isinstance(existing, Logger):
            lg = cast(Logger, existing)
            lg.trace2("logger already exists", extra={"logger": name})
            return lg
        return None

    @staticmethod
    def _setup_console_handler(config: LogConfig) -> logging.Handler:
        handler = logging.StreamHandler(sys.stdout)
        if config.level is not False:
            handler.setLevel(config.level)
        handler.setFormatter(LogFormatter(config))
        return handler

    @staticmethod
    def _create_new_logger(
        name: str,
        config: LogConfig,
        logger_class: type[Logger],
    ) -> Logger:
        """Create a new logger with a console handler."""
        lg = logger_class(name, config)
        lg.addHandler(LoggerFactory._setup_console_handler(config))
        lg.propagate = False
        lg.parent = logging.root

        # Register in loggerDict so later lookups return the same logger
        logging.root.manager.loggerDict[name] = lg

        lg.trace2("created logger", extra=LoggerFactory._describe(config))
        return lg
