"""Custom exceptions for impossible_states.

The core operations on ``Option`` and ``LinkedList`` are total and never raise.
These exceptions cover the places where a closed variant family is misused:
incomplete dispatch tables, values outside a family, and variants constructed
with data that does not fit them.
"""

from enum import Enum
from typing import Any, Iterable, Optional


class ErrorType(Enum):
    """Types of errors that can occur when working with sum types."""

    # Dispatch errors
    UNREACHABLE_VARIANT = "unreachable_variant"
    MISSING_HANDLER = "missing_handler"

    # Construction errors
    INVALID_VARIANT = "invalid_variant"

    # Extraction errors
    UNWRAP_NOTHING = "unwrap_nothing"

    # General errors
    UNKNOWN_ERROR = "unknown_error"


def _type_name(obj: Any) -> str:
    return obj.__name__ if isinstance(obj, type) else type(obj).__name__


class SumTypeError(Exception):
    """Base exception for all impossible_states errors.

    Attributes:
        message: Human-readable error message
        error_type: Type of error from ErrorType enum
        details: Optional dict with additional error context
    """

    def __init__(
        self,
        message: str,
        error_type: ErrorType = ErrorType.UNKNOWN_ERROR,
        details: Optional[dict] = None,
    ):
        self.message = message
        self.error_type = error_type
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        base = f"[{self.error_type.value}] {self.message}"
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{base} ({details_str})"
        return base

    def to_dict(self) -> dict:
        """Convert exception to dictionary for logging/serialization."""
        return {
            "error_type": self.error_type.value,
            "message": self.message,
            "details": self.details,
        }


class UnreachableVariantError(SumTypeError):
    """Raised when a dispatch site receives a value outside its variant family."""

    def __init__(self, value: Any, expected: Optional[Iterable[type]] = None):
        details = {"received": _type_name(value)}
        if expected is not None:
            details["expected"] = "|".join(_type_name(v) for v in expected)
        super().__init__(
            f"Unhandled variant: {value!r}",
            ErrorType.UNREACHABLE_VARIANT,
            details,
        )
        self.value = value


class MissingHandlerError(SumTypeError):
    """Raised when a dispatch table does not cover every variant of its family."""

    def __init__(self, missing: Iterable[type]):
        self.missing = tuple(missing)
        names = ", ".join(_type_name(v) for v in self.missing)
        super().__init__(
            f"No handler for variant(s): {names}",
            ErrorType.MISSING_HANDLER,
            {"missing": names},
        )


class InvalidVariantError(SumTypeError):
    """Raised when a variant is constructed with data that does not fit it."""

    def __init__(self, message: str, variant: Optional[Any] = None, **kwargs):
        details = {"variant": _type_name(variant)} if variant is not None else {}
        details.update(kwargs)
        super().__init__(message, ErrorType.INVALID_VARIANT, details)


class UnwrapError(SumTypeError):
    """Raised when unwrap() is called on an absent value."""

    def __init__(self, message: str = "Called unwrap() on Nothing"):
        super().__init__(message, ErrorType.UNWRAP_NOTHING)
