"""
Tests for ancestor chain traversal and private name resolution.
"""

import pytest

from reflective.chain import ancestor_chain, candidate_names, mangled_name
from tests.fixtures.targets import Base, Derived, Grandchild


class _Private:
    pass


@pytest.mark.unit
class TestAncestorChain:
    """Test ancestor_chain()."""

    def test_most_derived_first(self):
        """Test the chain starts at the concrete type and ends at object."""
        assert ancestor_chain(Grandchild()) == (Grandchild, Derived, Base, object)

    def test_builtin_target(self):
        """Test builtin values have a chain too."""
        assert ancestor_chain(True) == (bool, int, object)


@pytest.mark.unit
class TestMangledName:
    """Test mangled_name()."""

    def test_plain_name(self):
        """Test a plain name is mangled as if declared with a double underscore."""
        assert mangled_name(Base, "count") == "_Base__count"

    def test_double_underscore_name(self):
        """Test a double-underscore name is mangled as is."""
        assert mangled_name(Base, "__count") == "_Base__count"

    def test_leading_underscores_of_class_stripped(self):
        """Test leading underscores of the class name are dropped."""
        assert mangled_name(_Private, "x") == "_Private__x"

    def test_dunder_not_mangled(self):
        """Test dunder names are never mangled."""
        assert mangled_name(Base, "__init__") is None

    def test_single_underscore_not_mangled(self):
        """Test protected names are never mangled."""
        assert mangled_name(Base, "_retries") is None

    def test_underscore_only_class_not_mangled(self):
        """Test classes named only with underscores do not mangle."""
        assert mangled_name(type("__", (), {}), "x") is None


@pytest.mark.unit
class TestCandidateNames:
    """Test candidate_names()."""

    def test_mangled_first(self):
        """Test the mangled name is tried before the plain one."""
        assert candidate_names(Base, "count") == ["_Base__count", "count"]

    def test_plain_only(self):
        """Test unmangled names produce a single candidate."""
        assert candidate_names(Base, "__repr__") == ["__repr__"]
