"""
Tests for LogConfig and level resolution.
"""

import logging

import pytest

from reflective.log import (
    InvalidLogLevelError,
    LogConfig,
    navigate_to_section,
    resolve_level,
)


@pytest.mark.unit
class TestLogConfig:
    """Test LogConfig creation."""

    def test_from_params_level_name(self):
        """Test level names resolve to numeric levels."""
        assert LogConfig.from_params("debug").level == logging.DEBUG
        assert LogConfig.from_params("WARNING").level == logging.WARNING

    def test_from_params_custom_levels(self):
        """Test custom TRACE levels resolve."""
        assert LogConfig.from_params("trace").level == 5
        assert LogConfig.from_params("trace2").level == 4

    def test_from_params_numeric(self):
        """Test numeric levels and numeric strings."""
        assert LogConfig.from_params(15).level == 15
        assert LogConfig.from_params("15").level == 15

    def test_from_params_disabled(self):
        """Test False disables logging and True means info."""
        assert LogConfig.from_params(False).level is False
        assert LogConfig.from_params(True).level == logging.INFO
        assert LogConfig.from_params("false").level is False

    def test_from_params_invalid(self):
        """Test unknown level names raise."""
        with pytest.raises(InvalidLogLevelError) as exc_info:
            LogConfig.from_params("loud")
        assert exc_info.value.level == "loud"

    def test_from_config(self):
        """Test creation from a nested configuration dictionary."""
        config = LogConfig.from_config(
            {"reflective": {"logging": {"level": "debug", "micros": True}}},
            "reflective.logging",
        )
        assert config == LogConfig(level=logging.DEBUG, micros=True)

    def test_from_config_missing_section(self):
        """Test a missing section yields info level."""
        assert LogConfig.from_config({}).level == logging.INFO

    def test_from_config_default_level(self):
        """Test the default level applies when the section sets none."""
        config = LogConfig.from_config({"logging": {}}, default_level="warning")
        assert config.level == logging.WARNING

    def test_from_config_false_string(self):
        """Test the string "false" disables logging."""
        assert LogConfig.from_config({"logging": {"level": "false"}}).level is False


@pytest.mark.unit
class TestNavigateToSection:
    """Test navigate_to_section()."""

    def test_dotted_path(self):
        """Test nested sections are reached by dotted path."""
        assert navigate_to_section({"a": {"b": {"c": 1}}}, "a.b") == {"c": 1}

    def test_missing(self):
        """Test missing sections and non-dict values yield an empty dict."""
        assert navigate_to_section({}, "a.b") == {}
        assert navigate_to_section({"a": 3}, "a") == {}


@pytest.mark.unit
class TestResolveLevel:
    """Test resolve_level()."""

    def test_names(self):
        """Test standard and custom names."""
        assert resolve_level("info") == logging.INFO
        assert resolve_level("trace") == 5

    def test_bool(self):
        """Test False disables logging and True means info."""
        assert resolve_level(False) is False
        assert resolve_level(True) == logging.INFO

    def test_matches_log_config(self):
        """Test LogConfig resolves levels the same way."""
        for level in (False, True, "trace", "false", "15", 7):
            assert LogConfig.from_params(level).level == resolve_level(level)

    def test_numeric(self):
        """Test numbers resolve to themselves."""
        assert resolve_level(20) == 20

    def test_invalid(self):
        """Test invalid levels raise."""
        with pytest.raises(InvalidLogLevelError):
            resolve_level("nope")

    def test_level_names_registered(self):
        """Test TRACE levels are registered with the logging module."""
        assert logging.getLevelName(5) == "TRACE"
        assert logging.getLevelName(4) == "TRACE2"
