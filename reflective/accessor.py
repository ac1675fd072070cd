"""
Reflective access to private members of arbitrary objects.

Lets tests read, write and invoke members a class keeps private, including
name-mangled ``__private`` members declared by any ancestor of the target's
type.

Example:
    from reflective import get_property, method_invoke, set_property

    class Base:
        def __init__(self):
            self.__count = 0

        def __add(self, a: int, b: int) -> int:
            return a + b

    class Derived(Base):
        pass

    d = Derived()
    set_property(d, "count", 5)
    assert get_property(d, "count") == 5
    assert method_invoke(d, "add", 2, 3) == 5
"""

from typing import Any

from .config import AccessorConfig
from .exceptions import MemberNotFoundError
from .log import Logger, LoggerFactory, create_lg
from .members import (
    FieldRef,
    MethodRef,
    describe_types,
    find_field,
    find_method,
    parameter_types,
    type_matches,
)
from .preconditions import check_member_name, check_not_none

LOGGER_NAME = "/reflective"


class ReflectiveAccessor:
    """
    Reads, writes and invokes members of a target regardless of visibility.

    Every operation resolves the member by walking the target's ancestor
    chain from its concrete type to object. The accessor keeps no state
    between calls; the same instance can serve any number of targets.

    Attributes:
        config: Accessor options
        lg: Logger used for resolution tracing
    """

    def __init__(
        self, config: AccessorConfig | None = None, lg: Logger | None = None
    ) -> None:
        """
        Initialize the accessor.

        Args:
            config: Accessor options, defaults if None
            lg: Logger to use. If None, the shared "/reflective" logger is
                switched to config.log_level; the most recently created
                accessor's level applies.
        """
        self.config = config or AccessorConfig()
        self.lg = lg or self._create_logger()

    def _create_logger(self) -> Logger:
        log_config = self.config.log_config()
        lg = create_lg(LOGGER_NAME, log_config.level, log_config.micros)
        return LoggerFactory.reconfigure(lg, log_config)

    # =========================================================================
    # Fields
    # =========================================================================

    def _resolve_field(self, target: Any, field_name: str) -> FieldRef:
        check_not_none(target, message="target must not be None")
        check_member_name(field_name)

        ref = find_field(target, field_name)
        if ref is None:
            self.lg.debug(
                "field not found",
                extra={"member": field_name, "target": type(target).__qualname__},
            )
        return check_not_none(
            ref,
            MemberNotFoundError,
            "field not found",
            kind="field",
            name=field_name,
            target_type=type(target).__qualname__,
        )

    def get_property(self, target: Any, field_name: str) -> Any:
        """
        Return the current value of a field of target.

        Args:
            target: Object to read from
            field_name: Field name, without the leading ``__`` of private fields

        Returns:
            The field's value

        Raises:
            MemberNotFoundError: If no class of the ancestor chain declares the field
            AttributeError: If the runtime refuses the read (e.g. an unset slot)
        """
        ref = self._resolve_field(target, field_name)
        self.lg.trace(
            "get property",
            extra={
                "member": field_name,
                "owner": ref.owner.__qualname__,
                "attr": ref.attr,
            },
        )
        return getattr(target, ref.attr)

    def set_property(self, target: Any, field_name: str, value: Any) -> None:
        """
        Overwrite the value of a field on target.

        Args:
            target: Object to write to
            field_name: Field name, without the leading ``__`` of private fields
            value: New value

        Raises:
            MemberNotFoundError: If no class of the ancestor chain declares the field
            TypeError: If strict_types is set and value does not match the
                declaring class's annotation
            AttributeError: If the runtime refuses the write (e.g. a read-only
                property or a frozen dataclass)
        """
        ref = self._resolve_field(target, field_name)
        if self.config.strict_types:
            self._check_value_type(ref, value)
        self.lg.trace(
            "set property",
            extra={
                "member": field_name,
                "owner": ref.owner.__qualname__,
                "attr": ref.attr,
            },
        )
        setattr(target, ref.attr, value)

    def has_property(self, target: Any, field_name: str) -> bool:
        """Check whether any class of target's ancestor chain declares the field."""
        check_not_none(target, message="target must not be None")
        return find_field(target, check_member_name(field_name)) is not None

    @staticmethod
    def _check_value_type(ref: FieldRef, value: Any) -> None:
        annotation = ref.annotation()
        if isinstance(annotation, type) and not type_matches(value, annotation):
            raise TypeError(
                f"{ref.owner.__qualname__}.{ref.name} expects "
                f"{annotation.__qualname__}, got {type(value).__qualname__}"
            )

    # =========================================================================
    # Methods
    # =========================================================================

    def _resolve_method(
        self, target: Any, method_name: str, args: tuple, kwargs: dict
    ) -> MethodRef:
        check_not_none(target, message="target must not be None")
        check_member_name(method_name)

        ref = find_method(target, method_name, args, kwargs)
        signature = describe_types(parameter_types(args))
        if ref is None:
            self.lg.debug(
                "method not found",
                extra={
                    "member": method_name,
                    "target": type(target).__qualname__,
                    "signature": signature,
                },
            )
        return check_not_none(
            ref,
            MemberNotFoundError,
            "method not found",
            kind="method",
            name=method_name,
            target_type=type(target).__qualname__,
            parameter_types=signature,
        )

    def method_invoke(
        self, target: Any, method_name: str, /, *args: Any, **kwargs: Any
    ) -> Any:
        """
        Invoke a method of target with the given arguments.

        The method is looked up by name and by the run-time types of the
        arguments; the ancestor's own implementation runs even when a
        subclass overrides the name.

        Args:
            target: Object to invoke on
            method_name: Method name, without the leading ``__`` of private methods
            *args: Positional arguments
            **kwargs: Keyword arguments

        Returns:
            The method's return value

        Raises:
            MemberNotFoundError: If no class of the ancestor chain declares a
                method of that name accepting the arguments
            Exception: Whatever the invoked method raises, unchanged
        """
        ref = self._resolve_method(target, method_name, args, kwargs)
        self.lg.trace(
            "invoke method",
            extra={
                "member": method_name,
                "owner": ref.owner.__qualname__,
                "attr": ref.attr,
            },
        )
        method = ref.bind(target)
        try:
            return method(*args, **kwargs)
        except Exception as e:
            self.lg.debug(
                "invoked method raised",
                extra={"member": method_name, "exception": e},
            )
            raise


_default: ReflectiveAccessor | None = None


def default_accessor() -> ReflectiveAccessor:
    """Return the accessor shared by the module-level functions."""
    global _default
    if _default is None:
        _default = ReflectiveAccessor()
    return _default


def get_property(target: Any, field_name: str) -> Any:
    """Return the current value of a field of target. See ReflectiveAccessor."""
    return default_accessor().get_property(target, field_name)


def set_property(target: Any, field_name: str, value: Any) -> None:
    """Overwrite the value of a field on target. See ReflectiveAccessor."""
    default_accessor().set_property(target, field_name, value)


def has_property(target: Any, field_name: str) -> bool:
    """Check whether target declares the field. See ReflectiveAccessor."""
    return default_accessor().has_property(target, field_name)


def method_invoke(target: Any, method_name: str, /, *args: Any, **kwargs: Any) -> Any:
    """Invoke a method of target. See ReflectiveAccessor."""
    return default_accessor().method_invoke(target, method_name, *args, **kwargs)
