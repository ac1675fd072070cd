from importlib.metadata import PackageNotFoundError, version

from .accessor import (
    ReflectiveAccessor,
    default_accessor,
    get_property,
    has_property,
    method_invoke,
    set_property,
)
from .chain import ancestor_chain, mangled_name
from .config import AccessorConfig
from .exceptions import MemberNotFoundError, PreconditionError, ReflectiveError
from .members import FieldRef, MethodRef, find_field, find_method, parameter_types
from .preconditions import check_argument, check_not_none

# Version is read from package metadata (pyproject.toml)
try:
    __version__ = version("reflective")
except PackageNotFoundError:
    # Package not installed, use fallback (development mode)
    __version__ = "0.1.0-dev"

# Explicit public API
__all__ = [
    # Version
    "__version__",
    # Accessor
    "ReflectiveAccessor",
    "AccessorConfig",
    "default_accessor",
    "get_property",
    "set_property",
    "has_property",
    "method_invoke",
    # Lookup
    "ancestor_chain",
    "mangled_name",
    "find_field",
    "find_method",
    "parameter_types",
    "FieldRef",
    "MethodRef",
    # Preconditions
    "check_not_none",
    "check_argument",
    # Exceptions
    "ReflectiveError",
    "MemberNotFoundError",
    "PreconditionError",
]
