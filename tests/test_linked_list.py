"""Tests for the persistent linked list."""

import pytest

from impossible_states.exceptions import InvalidVariantError, UnreachableVariantError
from impossible_states.linked_list import (
    EMPTY,
    Cons,
    Empty,
    cons,
    empty,
    fold_left,
    from_iterable,
    head,
    length,
    map_list,
    reverse,
    sum_list,
    tail,
    to_list,
)
from impossible_states.option import make_none, make_some

SAMPLE_LISTS = [
    [],
    [1],
    [1, 2, 3],
    [5, -3, 0, 8, 8],
    list(range(50)),
]


def test_empty_is_canonical():
    """Test empty() always returns the same value."""
    assert empty() is EMPTY
    assert empty() == Empty()


def test_length_of_empty():
    """Test the empty list has length 0."""
    assert length(empty()) == 0


def test_length_of_three():
    """Test counting Cons nodes."""
    assert length(cons(1, cons(2, cons(3, empty())))) == 3


@pytest.mark.parametrize("items", SAMPLE_LISTS)
def test_length_of_cons_is_one_more(items):
    """Test length(cons(x, l)) == 1 + length(l)."""
    lst = from_iterable(items)
    assert length(cons("x", lst)) == 1 + length(lst)


def test_head_of_empty():
    """Test head of the empty list is Nothing."""
    assert head(empty()) == make_none()


def test_head_of_cons():
    """Test head of a non-empty list is Some(first)."""
    assert head(cons(1, cons(2, empty()))) == make_some(1)


@pytest.mark.parametrize("items", SAMPLE_LISTS)
def test_head_ignores_rest(items):
    """Test head(cons(x, rest)) == Some(x) for any rest."""
    assert head(cons("x", from_iterable(items))) == make_some("x")


def test_tail():
    """Test tail of empty and non-empty lists."""
    rest = cons(2, empty())
    assert tail(empty()) == make_none()
    assert tail(cons(1, rest)).unwrap() is rest


def test_cons_does_not_mutate_rest():
    """Test prepending leaves the original list untouched."""
    rest = from_iterable([2, 3])
    extended = cons(1, rest)
    assert to_list(rest) == [2, 3]
    assert to_list(extended) == [1, 2, 3]
    assert extended.tail is rest


def test_shared_tails():
    """Test two lists can share one tail."""
    shared = from_iterable([3, 4])
    first = cons(1, shared)
    second = cons(2, shared)
    assert first.tail is second.tail
    assert to_list(first) == [1, 3, 4]
    assert to_list(second) == [2, 3, 4]


def test_cons_rejects_non_list_tail():
    """Test a Cons tail must be a list variant."""
    with pytest.raises(InvalidVariantError) as exc_info:
        cons(1, [2, 3])
    assert exc_info.value.details["tail"] == "list"


def test_nodes_are_immutable():
    """Test Cons nodes cannot be rewired."""
    node = cons(1, empty())
    with pytest.raises(AttributeError):
        node.tail = node


@pytest.mark.parametrize("items", SAMPLE_LISTS)
def test_map_identity_preserves_length(items):
    """Test length(l) == length(map(l, identity))."""
    lst = from_iterable(items)
    assert length(map_list(lst, lambda x: x)) == length(lst)


@pytest.mark.parametrize("items", SAMPLE_LISTS)
def test_map_composition(items):
    """Test map(map(l, f), g) == map(l, g . f)."""
    lst = from_iterable(items)

    def f(x):
        return x * 3

    def g(x):
        return x - 1

    assert map_list(map_list(lst, f), g) == map_list(lst, lambda x: g(f(x)))


def test_map_keeps_order_and_input():
    """Test map applies in order and leaves the input unchanged."""
    lst = from_iterable([1, 2, 3])
    mapped = map_list(lst, str)
    assert to_list(mapped) == ["1", "2", "3"]
    assert to_list(lst) == [1, 2, 3]


def test_fold_left_order():
    """Test fold_left processes head to tail."""
    lst = from_iterable(["a", "b", "c"])
    assert fold_left(lst, "", lambda acc, item: acc + item) == "abc"


def test_fold_left_on_empty_returns_seed():
    """Test folding the empty list returns the seed."""
    assert fold_left(empty(), 10, lambda acc, item: acc + item) == 10


def test_round_trip_through_prepend_fold():
    """Test building [1, 2, 3] with cons, folding with prepend, then reversing."""
    lst = cons(1, cons(2, cons(3, empty())))
    prepended = fold_left(lst, [], lambda acc, item: [item] + acc)
    assert list(reversed(prepended)) == [1, 2, 3]


def test_sum_list():
    """Test summing numbers and concatenating with a custom start."""
    assert sum_list(from_iterable([1, 2, 3, 4])) == 10
    assert sum_list(empty()) == 0
    assert sum_list(from_iterable([[1], [2]]), start=[]) == [1, 2]


def test_reverse():
    """Test reversing a list."""
    assert to_list(reverse(from_iterable([1, 2, 3]))) == [3, 2, 1]
    assert reverse(empty()) == empty()


def test_from_iterable_and_to_list():
    """Test conversion from and to native sequences."""
    assert from_iterable([]) is EMPTY
    assert from_iterable(iter([1, 2])) == cons(1, cons(2, empty()))
    assert to_list(from_iterable("abc")) == ["a", "b", "c"]


def test_iteration_and_len():
    """Test Python iteration protocol on both variants."""
    assert list(from_iterable([1, 2, 3])) == [1, 2, 3]
    assert list(empty()) == []
    assert len(from_iterable([1, 2])) == 2
    assert len(empty()) == 0


def test_equality():
    """Test structural equality between lists."""
    assert from_iterable([1, 2]) == cons(1, cons(2, empty()))
    assert from_iterable([1, 2]) != from_iterable([1, 2, 3])
    assert from_iterable([1, 2, 3]) != from_iterable([1, 2])
    assert from_iterable([1]) != empty()
    assert empty() != from_iterable([1])
    assert from_iterable([1]) != [1]


def test_hash_matches_equality():
    """Test equal lists hash alike."""
    assert hash(from_iterable([1, 2])) == hash(cons(1, cons(2, empty())))
    assert len({from_iterable([1, 2]), from_iterable([1, 2]), empty()}) == 2


def test_repr():
    """Test repr mirrors the constructor calls."""
    assert repr(from_iterable([1, 2])) == "Cons(1, Cons(2, Empty()))"
    assert repr(empty()) == "Empty()"


def test_long_list_does_not_recurse():
    """Test operations on lists far deeper than the recursion limit."""
    items = list(range(20000))
    lst = from_iterable(items)
    assert length(lst) == 20000
    assert sum_list(map_list(lst, lambda x: 1)) == 20000
    assert lst == from_iterable(items)
    assert repr(lst).startswith("Cons(0, Cons(1, ")


def test_fold_left_rejects_foreign_values():
    """Test a non-list value fails loudly instead of being treated as empty."""
    with pytest.raises(UnreachableVariantError):
        fold_left([1, 2], 0, lambda acc, item: acc + item)
    with pytest.raises(UnreachableVariantError):
        head(None)
