"""
Pytest configuration and shared fixtures.

This module provides central pytest configuration, custom markers,
and shared fixtures for the reflective test suite.
"""

from importlib.metadata import entry_points

import pytest

# =============================================================================
# Plugin Registration
# =============================================================================

pytest_plugins = [
    "pytester",
    "tests.fixtures.logging",
    "tests.fixtures.targets",
]

# The accessor fixtures are registered through the pytest11 entry point when
# the package is installed; load them directly when running from a checkout.
if not any(
    ep.value == "reflective.testing" for ep in entry_points(group="pytest11")
):
    pytest_plugins.append("reflective.testing")


# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, isolated, no external dependencies)"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests (pytest plugin, subprocess runs)"
    )
    config.addinivalue_line("markers", "property: Property-based tests (hypothesis)")


# =============================================================================
# Test Collection Hooks
# =============================================================================


def pytest_collection_modifyitems(config, items):
    """
    Add 'unit' marker to tests without other markers.

    Args:
        config: Pytest config object
        items: List of collected test items
    """
    for item in items:
        if not any(mark.name == "integration" for mark in item.iter_markers()):
            item.add_marker(pytest.mark.unit)
