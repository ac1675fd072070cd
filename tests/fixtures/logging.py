"""
Logging fixtures for testing.

Provides fixtures for loggers and log capturing.
"""

import logging
from collections.abc import Generator
from io import StringIO

import pytest

from reflective.log import LogConfig, Logger, LogFormatter


@pytest.fixture(autouse=True)
def reset_logging_state() -> Generator[None, None, None]:
    """
    Reset Python logging global state after each test.

    Removes loggers registered by LoggerFactory (names starting with "/")
    and restores the root logger.
    """
    original_handlers = logging.root.handlers[:]
    original_level = logging.root.level

    yield

    for name in list(logging.root.manager.loggerDict.keys()):
        if name.startswith("/") or name.startswith("test"):
            del logging.root.manager.loggerDict[name]

    logging.root.handlers = original_handlers
    logging.root.setLevel(original_level)


@pytest.fixture
def log_stream() -> StringIO:
    """Provide a stream that trace_logger writes to."""
    return StringIO()


@pytest.fixture
def trace_logger(log_stream: StringIO) -> Logger:
    """
    Provide a logger at TRACE level writing formatted records to log_stream.

    Returns:
        Logger: Logger not registered with the logging module
    """
    config = LogConfig.from_params("trace")
    lg = Logger("test_reflective", config)
    handler = logging.StreamHandler(log_stream)
    handler.setFormatter(LogFormatter(config))
    lg.addHandler(handler)
    lg.propagate = False
    return lg
