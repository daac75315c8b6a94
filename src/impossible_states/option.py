"""Option type for values that may be absent.

Provides an Option[T] type, Some(value) or Nothing(), as a replacement for
fields that are nullable by convention. ``Some(None)`` is a present value:
absence is the Nothing variant, never a sentinel of T.
"""

from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar, Union

from .dispatch import unreachable
from .exceptions import UnwrapError

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Some(Generic[T]):
    """Represents a present value."""

    value: T

    def is_some(self) -> bool:
        return True

    def is_none(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def get_or_else(self, fallback: T) -> T:
        return self.value

    def map(self, func: Callable[[T], U]) -> "Option[U]":
        return Some(func(self.value))


@dataclass(frozen=True)
class Nothing(Generic[T]):
    """Represents an absent value."""

    def is_some(self) -> bool:
        return False

    def is_none(self) -> bool:
        return True

    def unwrap(self):
        raise UnwrapError()

    def get_or_else(self, fallback: T) -> T:
        return fallback

    def map(self, func: Callable[[T], U]) -> "Option[U]":
        return NOTHING


Option = Union[Some[T], Nothing[T]]

OPTION_VARIANTS = (Some, Nothing)

NOTHING: Nothing = Nothing()


def make_some(value: T) -> Option[T]:
    """Wrap a value."""
    return Some(value)


def make_none() -> Option[T]:
    """Return the absent variant."""
    return NOTHING


def get_or_else(option: Option[T], fallback: T) -> T:
    """Return the wrapped value, or ``fallback`` if the option is Nothing."""
    if isinstance(option, Some):
        return option.value
    elif isinstance(option, Nothing):
        return fallback
    unreachable(option, OPTION_VARIANTS)


def from_nullable(value: Optional[T]) -> Option[T]:
    """Convert a None-by-convention value into an Option."""
    if value is None:
        return NOTHING
    return Some(value)
