"""Exceptions for group-naming."""

from typing import Any

# ---------------------------------------------------------------------------
# Base Exception
# ---------------------------------------------------------------------------


class GroupNamingError(Exception):
    """
    Base exception for all group-naming errors.

    All exceptions raised by this library inherit from this class,
    allowing callers to catch all library-specific errors with a single
    except clause.
    """

    pass


# ---------------------------------------------------------------------------
# Validation Exceptions
# ---------------------------------------------------------------------------


class ValidationError(GroupNamingError):
    """
    Raised when an input value is rejected.

    Attributes:
        field: Name of the rejected argument (e.g., "group", "delimiter")
        value: The rejected value
        reason: Human-readable explanation of the rejection
    """

    def __init__(self, field: str, value: Any, reason: str) -> None:
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {field} {value!r}: {reason}")


class InvalidGroupError(ValidationError):
    """
    Raised when a group cannot be encoded into a resource name.

    Decoding never raises this; it returns ``None`` instead.
    """

    def __init__(self, value: Any, reason: str) -> None:
        super().__init__("group", value, reason)


class ConfigurationError(ValidationError):
    """Raised when naming options (prefix, delimiter, suffix shape) are invalid."""

    pass
