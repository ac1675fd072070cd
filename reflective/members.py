"""
Member descriptors and lookup over the ancestor chain.

Lookups in this module never raise for a missing member: they return None,
and the accessor turns that into MemberNotFoundError.
"""

import abc
import functools
import inspect
import types
import typing
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from .chain import ancestor_chain, candidate_names

_MISSING = object()


@dataclass(frozen=True)
class FieldRef:
    """
    A field resolved on a target.

    Attributes:
        owner: Class of the ancestor chain that declares the field
        name: Name as requested by the caller
        attr: Attribute name actually stored (mangled for private fields)
    """

    owner: type
    name: str
    attr: str

    def annotation(self) -> Any:
        """
        Return the annotation for this field, or None.

        The first class of the owner's MRO annotating the stored attribute
        wins, so a subclass inherits the annotations of its bases.
        """
        for cls in self.owner.__mro__:
            annotations = _class_annotations(cls)
            if self.attr in annotations:
                return annotations[self.attr]
        return None


def _class_annotations(cls: type) -> dict[str, Any]:
    try:
        return inspect.get_annotations(cls, eval_str=True)
    except (NameError, SyntaxError, TypeError, AttributeError):
        return inspect.get_annotations(cls)


@dataclass(frozen=True)
class MethodRef:
    """
    A method resolved on a target.

    Attributes:
        owner: Class of the ancestor chain that declares the method
        name: Name as requested by the caller
        attr: Attribute name actually stored (mangled for private methods)
        raw: Object found in the owner's namespace (function, staticmethod, ...)
    """

    owner: type
    name: str
    attr: str
    raw: Any

    def bind(self, target: Any) -> Callable[..., Any]:
        """
        Bind the owner's implementation to target.

        Uses the descriptor protocol on the raw object rather than attribute
        access on target, so an override in a subclass is bypassed.
        """
        if hasattr(type(self.raw), "__get__"):
            bound = self.raw.__get__(target, type(target))
            return typing.cast(Callable[..., Any], bound)
        return typing.cast(Callable[..., Any], self.raw)


def parameter_types(
    args: tuple[Any, ...] | list[Any] | None,
) -> tuple[type, ...] | None:
    """
    Return the run-time types of args.

    None or an empty sequence yields None, meaning "no parameters".
    """
    if not args:
        return None
    return tuple(type(arg) for arg in args)


def describe_types(types_: tuple[type, ...] | None) -> str:
    """Render a parameter type signature as ``(int, str)``."""
    if not types_:
        return "()"
    return "(" + ", ".join(t.__qualname__ for t in types_) + ")"


# =============================================================================
# Fields
# =============================================================================


def _is_field_object(value: Any) -> bool:
    """Check whether a class namespace entry holds a field rather than a method."""
    if isinstance(value, (staticmethod, classmethod)):
        return False
    if isinstance(value, (property, functools.cached_property)):
        return True
    # Data descriptors: slot members, getset descriptors, custom descriptors
    if hasattr(type(value), "__set__") or hasattr(type(value), "__delete__"):
        return True
    return not callable(value)


def _instance_dict(target: Any) -> dict[str, Any]:
    try:
        instance_dict = object.__getattribute__(target, "__dict__")
    except (AttributeError, TypeError):
        return {}
    return typing.cast(dict[str, Any], instance_dict)


def _declares_field(owner: type, attr: str, in_instance: bool, target: Any) -> bool:
    if in_instance and attr in _instance_dict(target):
        return True
    value = owner.__dict__.get(attr, _MISSING)
    return value is not _MISSING and _is_field_object(value)


def find_field(target: Any, name: str) -> FieldRef | None:
    """
    Find the field name on target, walking its ancestor chain.

    For each class the mangled private name is tried before the plain name.
    A plain name stored in the instance dict belongs to the concrete type.

    Returns:
        FieldRef, or None if no class of the chain declares the field
    """
    chain = ancestor_chain(target)
    for owner in chain:
        for attr in candidate_names(owner, name):
            in_instance = attr != name or owner is chain[0]
            if _declares_field(owner, attr, in_instance, target):
                return FieldRef(owner=owner, name=name, attr=attr)
    return None


# =============================================================================
# Methods
# =============================================================================


def _is_method_object(value: Any) -> bool:
    # Nested classes are not methods
    if isinstance(value, type):
        return False
    if isinstance(value, (staticmethod, classmethod)):
        return True
    return callable(value) and not _is_field_object(value)


def _type_hints(func: Any) -> dict[str, Any]:
    """Return resolved annotations of func, raw ones if they cannot be resolved."""
    func = inspect.unwrap(func) if callable(func) else func
    try:
        return typing.get_type_hints(func)
    except (NameError, SyntaxError, TypeError, AttributeError):
        return dict(getattr(func, "__annotations__", {}) or {})


def _is_abstract(cls: type) -> bool:
    """Classes no value can be an exact instance of (ABCs and protocols)."""
    return isinstance(cls, abc.ABCMeta) and (
        inspect.isabstract(cls)
        or cls.__module__ in ("collections.abc", "typing")
        or getattr(cls, "_is_protocol", False)
    )


def type_matches(value: Any, annotation: Any) -> bool:
    """
    Check a value against a parameter annotation.

    Concrete classes require an exact run-time type match: no widening
    (int for float) and no subclass covariance (bool for int). Abstract base
    classes and protocols, for which no exact match exists, use isinstance.
    Unions match when any member matches. Annotations that are not classes
    (type variables, strings, Any) accept every value.
    """
    if annotation in (inspect.Parameter.empty, Any, object):
        return True
    if annotation is None or annotation is type(None):
        return value is None

    origin = typing.get_origin(annotation)
    if origin is typing.Union or origin is types.UnionType:
        return any(type_matches(value, arg) for arg in typing.get_args(annotation))
    if origin is typing.Annotated:
        return type_matches(value, typing.get_args(annotation)[0])
    if origin is typing.Literal:
        return value in typing.get_args(annotation)
    if origin is not None:
        annotation = origin

    if not isinstance(annotation, type):
        return True
    if _is_abstract(annotation):
        return isinstance(value, annotation)
    return type(value) is annotation


def _function_of(raw: Any) -> Any:
    if isinstance(raw, (staticmethod, classmethod)):
        return raw.__func__
    return raw


def signature_accepts(
    ref: MethodRef, target: Any, args: tuple[Any, ...], kwargs: dict[str, Any]
) -> bool:
    """
    Check whether the method resolved by ref accepts args and kwargs.

    The arguments must bind to the signature and every annotated parameter
    must match its argument per type_matches. A callable without an
    introspectable signature accepts any arguments.
    """
    bound_method = ref.bind(target)
    try:
        signature = inspect.signature(bound_method)
    except (TypeError, ValueError):
        return True

    try:
        bound = signature.bind(*args, **kwargs)
    except TypeError:
        return False

    hints = _type_hints(_function_of(ref.raw))
    for param_name, value in bound.arguments.items():
        param = signature.parameters[param_name]
        annotation = hints.get(param_name, param.annotation)
        if isinstance(annotation, str):
            continue
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            values = list(value)
        elif param.kind is inspect.Parameter.VAR_KEYWORD:
            values = list(value.values())
        else:
            values = [value]
        if not all(type_matches(v, annotation) for v in values):
            return False
    return True


def find_method(
    target: Any,
    name: str,
    args: tuple[Any, ...] = (),
    kwargs: dict[str, Any] | None = None,
) -> MethodRef | None:
    """
    Find the method name on target accepting args, walking its ancestor chain.

    A candidate whose signature does not accept the arguments is skipped and
    the search continues with the next ancestor.

    Returns:
        MethodRef, or None if no class of the chain declares a matching method
    """
    kwargs = kwargs or {}
    for owner in ancestor_chain(target):
        for attr in candidate_names(owner, name):
            raw = owner.__dict__.get(attr, _MISSING)
            if raw is _MISSING or not _is_method_object(raw):
                continue
            ref = MethodRef(owner=owner, name=name, attr=attr, raw=raw)
            if signature_accepts(ref, target, args, kwargs):
                return ref
    return None
