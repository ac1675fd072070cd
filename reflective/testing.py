"""
Pytest integration for reflective access.

Registered as a pytest plugin through the ``pytest11`` entry point, so the
fixtures are available in any test suite that installs this package.

Example:
    def test_rollback_clears_pending(reflect):
        manager = TransactionManager()
        manager.begin()
        manager.rollback()
        assert reflect.get_property(manager, "pending") == []
"""

import pytest

from .accessor import ReflectiveAccessor
from .config import AccessorConfig


@pytest.fixture
def reflect() -> ReflectiveAccessor:
    """
    Provide a ReflectiveAccessor with default options.

    Returns:
        ReflectiveAccessor: Accessor bound to the shared "/reflective" logger
    """
    return ReflectiveAccessor()


@pytest.fixture
def reflect_strict() -> ReflectiveAccessor:
    """Provide a ReflectiveAccessor that type-checks set_property values."""
    return ReflectiveAccessor(AccessorConfig(strict_types=True))
