"""Exhaustive dispatch over closed variant families.

Python has no compiler-enforced exhaustive match, so a family of variants is
declared as a tuple of classes and every dispatch table is checked against it
when it is built. A table with a missing handler never gets the chance to
silently skip a case at runtime.

Example::

    describe = Dispatcher(
        OPTION_VARIANTS,
        {
            Some: lambda opt: f"got {opt.value}",
            Nothing: lambda opt: "nothing",
        },
    )
    describe(make_some(3))  # "got 3"
"""

import logging
from typing import Any, Callable, Dict, Generic, NoReturn, Optional, Sequence, TypeVar

from .exceptions import InvalidVariantError, MissingHandlerError, UnreachableVariantError

logger = logging.getLogger(__name__)

R = TypeVar("R")


def unreachable(value: Any, expected: Optional[Sequence[type]] = None) -> NoReturn:
    """Fail loudly for a value that no branch of a dispatch handled.

    Call this at the end of every ``isinstance`` chain over a sum type.
    """
    logger.error(f"Unreachable variant reached: {type(value).__name__}")
    raise UnreachableVariantError(value, expected)


class Dispatcher(Generic[R]):
    """Dispatch table that must cover every variant of a closed family.

    Attributes:
        variants: The classes making up the family
        handlers: Mapping of variant class to its handler
    """

    def __init__(
        self, variants: Sequence[type], handlers: Dict[type, Callable[[Any], R]]
    ):
        self.variants = tuple(variants)

        unknown = [key for key in handlers if key not in self.variants]
        if unknown:
            raise InvalidVariantError(
                "Handler registered for a type outside the variant family",
                unknown=", ".join(k.__name__ for k in unknown),
            )

        missing = [v for v in self.variants if v not in handlers]
        if missing:
            raise MissingHandlerError(missing)

        self.handlers = dict(handlers)
        logger.debug(
            f"Dispatch table built for {'|'.join(v.__name__ for v in self.variants)}"
        )

    def __call__(self, value: Any) -> R:
        handler = self.handlers.get(type(value))
        if handler is None:
            unreachable(value, self.variants)
        return handler(value)


def match_variant(
    value: Any, variants: Sequence[type], handlers: Dict[type, Callable[[Any], R]]
) -> R:
    """Build a one-off exhaustive dispatch table and apply it to ``value``."""
    return Dispatcher(variants, handlers)(value)
