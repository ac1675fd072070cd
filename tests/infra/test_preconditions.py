"""
Tests for precondition checks.
"""

import pytest

from reflective.exceptions import MemberNotFoundError, PreconditionError
from reflective.preconditions import (
    check_argument,
    check_member_name,
    check_not_none,
)


@pytest.mark.unit
class TestCheckNotNone:
    """Test check_not_none()."""

    def test_returns_reference(self):
        """Test a non-None reference is returned unchanged."""
        value = object()
        assert check_not_none(value) is value

    @pytest.mark.parametrize("falsy", [0, "", [], False])
    def test_falsy_values_pass(self, falsy):
        """Test only None fails, not other falsy values."""
        assert check_not_none(falsy) is falsy

    def test_none_raises_precondition_error(self):
        """Test None raises PreconditionError by default."""
        with pytest.raises(PreconditionError, match="unexpected None"):
            check_not_none(None)

    def test_custom_error_and_context(self):
        """Test the error class, message and context are used."""
        with pytest.raises(MemberNotFoundError) as exc_info:
            check_not_none(None, MemberNotFoundError, "field not found", name="x")
        assert exc_info.value.message == "field not found"
        assert exc_info.value.context == {"name": "x"}


@pytest.mark.unit
class TestCheckArgument:
    """Test check_argument()."""

    def test_true_expression(self):
        """Test truthy expressions pass."""
        check_argument(True, "never raised")

    def test_false_expression(self):
        """Test falsy expressions raise with context."""
        with pytest.raises(PreconditionError) as exc_info:
            check_argument(0, "must be positive", value=0)
        assert str(exc_info.value) == "must be positive (value=0)"

    def test_precondition_error_is_value_error(self):
        """Test PreconditionError can be caught as ValueError."""
        with pytest.raises(ValueError):
            check_argument(False, "bad")


@pytest.mark.unit
class TestCheckMemberName:
    """Test check_member_name()."""

    def test_valid(self):
        """Test a non-empty string is returned."""
        assert check_member_name("count") == "count"

    @pytest.mark.parametrize("name", ["", None, 1, b"count"])
    def test_invalid(self, name):
        """Test empty and non-string names are rejected."""
        with pytest.raises(PreconditionError):
            check_member_name(name)
