"""Persistent singly linked list modelled as a recursive sum type.

A LinkedList[T] is either Empty() or Cons(head, tail) where the tail is itself
a LinkedList[T]. Nodes are frozen and a tail has to exist before the node that
points at it, so every chain ends in Empty and cycles cannot be built. Tails
may be shared freely between lists.

Traversals walk the chain with a loop rather than Python recursion, so long
lists stay within the interpreter's recursion limit.
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, List, TypeVar, Union

from .dispatch import unreachable
from .exceptions import InvalidVariantError
from .option import NOTHING, Option, Some

T = TypeVar("T")
U = TypeVar("U")
A = TypeVar("A")


@dataclass(frozen=True)
class Empty(Generic[T]):
    """The empty list."""

    def __iter__(self) -> Iterator[T]:
        return iter(())

    def __len__(self) -> int:
        return 0


@dataclass(frozen=True, eq=False, repr=False)
class Cons(Generic[T]):
    """A value prepended to the rest of a list."""

    head: T
    tail: "LinkedList[T]"

    def __post_init__(self):
        if not isinstance(self.tail, LIST_VARIANTS):
            raise InvalidVariantError(
                "Cons tail must be Empty or Cons",
                variant=self,
                tail=type(self.tail).__name__,
            )

    def __iter__(self) -> Iterator[T]:
        node: LinkedList[T] = self
        while isinstance(node, Cons):
            yield node.head
            node = node.tail

    def __len__(self) -> int:
        return length(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, (Cons, Empty)):
            return NotImplemented
        left: LinkedList = self
        right: LinkedList = other
        while isinstance(left, Cons) and isinstance(right, Cons):
            if left is right:
                return True
            if left.head != right.head:
                return False
            left, right = left.tail, right.tail
        return isinstance(left, Empty) and isinstance(right, Empty)

    def __hash__(self) -> int:
        return hash(("Cons", tuple(self)))

    def __repr__(self) -> str:
        items = to_list(self)
        inner = "".join(f"Cons({item!r}, " for item in items)
        return f"{inner}Empty(){')' * len(items)}"


LinkedList = Union[Empty[T], Cons[T]]

LIST_VARIANTS = (Empty, Cons)

EMPTY: Empty = Empty()


def empty() -> LinkedList[T]:
    """Return the canonical empty list."""
    return EMPTY


def cons(value: T, rest: LinkedList[T]) -> LinkedList[T]:
    """Prepend ``value`` to ``rest`` without touching ``rest``."""
    return Cons(value, rest)


def head(lst: LinkedList[T]) -> Option[T]:
    """Return Some(first element), or Nothing for the empty list."""
    if isinstance(lst, Cons):
        return Some(lst.head)
    elif isinstance(lst, Empty):
        return NOTHING
    unreachable(lst, LIST_VARIANTS)


def tail(lst: LinkedList[T]) -> Option[LinkedList[T]]:
    """Return Some(rest of the list), or Nothing for the empty list."""
    if isinstance(lst, Cons):
        return Some(lst.tail)
    elif isinstance(lst, Empty):
        return NOTHING
    unreachable(lst, LIST_VARIANTS)


def fold_left(lst: LinkedList[T], seed: A, combine: Callable[[A, T], A]) -> A:
    """Reduce the list head-to-tail, starting from ``seed``."""
    acc = seed
    node = lst
    while True:
        if isinstance(node, Cons):
            acc = combine(acc, node.head)
            node = node.tail
        elif isinstance(node, Empty):
            return acc
        else:
            unreachable(node, LIST_VARIANTS)


def length(lst: LinkedList[Any]) -> int:
    """Count the Cons nodes of a list."""
    return fold_left(lst, 0, lambda count, _: count + 1)


def reverse(lst: LinkedList[T]) -> LinkedList[T]:
    return fold_left(lst, empty(), lambda acc, item: Cons(item, acc))


def map_list(lst: LinkedList[T], transform: Callable[[T], U]) -> LinkedList[U]:
    """Apply ``transform`` to every element, keeping order and length."""
    reversed_mapped = fold_left(
        lst, empty(), lambda acc, item: Cons(transform(item), acc)
    )
    return reverse(reversed_mapped)


def to_list(lst: LinkedList[T]) -> List[T]:
    """Collect the elements into a native Python list, in order."""

    def append(acc: List[T], item: T) -> List[T]:
        acc.append(item)
        return acc

    return fold_left(lst, [], append)


def sum_list(lst: LinkedList[Any], start: Any = 0) -> Any:
    return fold_left(lst, start, lambda total, item: total + item)


def from_iterable(items: Iterable[T]) -> LinkedList[T]:
    """Build a list with the same order as ``items``."""
    result: LinkedList[T] = empty()
    for item in reversed(list(items)):
        result = Cons(item, result)
    return result
