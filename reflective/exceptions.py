"""
Exception hierarchy for reflective member access.

All errors raised by the accessor itself derive from ReflectiveError, so a
test can catch every accessor failure with a single except clause. Errors
raised by the runtime while touching a member (a read-only property, an
unset slot) and errors raised by an invoked method are never wrapped and
propagate with their original type.
"""

from typing import Any


class ReflectiveError(Exception):
    """
    Base exception for all reflective access errors.

    Example:
        try:
            get_property(manager, "state")
        except ReflectiveError as e:
            lg.error(f"reflective access failed: {e}")
    """

    def __init__(self, message: str, **context: Any) -> None:
        """
        Initialize the exception with a message and optional context.

        Args:
            message: Human-readable error message
            **context: Additional context information (stored in self.context)
        """
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        """String representation with context if available."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class PreconditionError(ReflectiveError, ValueError):
    """
    Raised when an argument fails a precondition check.

    Examples:
        - Target is None
        - Member name is empty or not a string
        - Invalid configuration value
    """

    pass


class MemberNotFoundError(ReflectiveError, LookupError):
    """
    Raised when no class in the target's ancestor chain declares the member.

    For methods, "declares" also means the declared signature accepts the
    run-time types of the supplied arguments.
    """

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message, **context)
        self.kind = context.get("kind")
        self.name = context.get("name")
        self.target_type = context.get("target_type")
        self.parameter_types = context.get("parameter_types")
