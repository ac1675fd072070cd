"""Precondition checks that raise context-carrying errors.

Example:
    from reflective.preconditions import check_argument, check_not_none

    field = check_not_none(find_field(target, name), MemberNotFoundError,
                           "field not found", name=name)
    check_argument(name.isidentifier(), "invalid member name", name=name)
"""

from typing import Any, TypeVar

from .exceptions import PreconditionError, ReflectiveError

T = TypeVar("T")


def check_not_none(
    reference: T | None,
    error: type[ReflectiveError] = PreconditionError,
    message: str = "unexpected None",
    **context: Any,
) -> T:
    """
    Ensure a reference is not None.

    Args:
        reference: Value to check
        error: ReflectiveError subclass to raise when the reference is None
        message: Error message
        **context: Context attached to the raised error

    Returns:
        The reference, unchanged

    Raises:
        error: If reference is None
    """
    if reference is None:
        raise error(message, **context)
    return reference


def check_argument(expression: Any, message: str, **context: Any) -> None:
    """
    Ensure an expression involving call arguments holds.

    Raises:
        PreconditionError: If expression is falsy
    """
    if not expression:
        raise PreconditionError(message, **context)


def check_member_name(name: Any) -> str:
    """Ensure a member name is a non-empty string and return it."""
    check_argument(
        isinstance(name, str) and len(name) > 0,
        "member name must be a non-empty string",
        name=repr(name),
    )
    return name
