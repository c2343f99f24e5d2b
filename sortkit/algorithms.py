"""Generic sequence algorithms: folding, counting, searching and reordering."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, MutableSequence, Sequence
from typing import Any, TypeVar

T = TypeVar("T")
A = TypeVar("A")
F = TypeVar("F", bound=Callable[..., Any])


def accumulate(
    iterable: Iterable[T],
    init: A,
    op: Callable[[A, T], A] = operator.add,
) -> A:
    """Fold ``iterable`` from the left, starting from ``init``."""
    result = init
    for item in iterable:
        result = op(result, item)
    return result


def count(iterable: Iterable[T], value: object) -> int:
    """Return how many items compare equal to ``value``."""
    return sum(1 for item in iterable if item == value)


def count_if(iterable: Iterable[T], pred: Callable[[T], bool]) -> int:
    """Return how many items satisfy ``pred``."""
    return sum(1 for item in iterable if pred(item))


def find(items: Iterable[T], value: object) -> int | None:
    """Return the index of the first item equal to ``value``, or None."""
    return find_if(items, lambda item: item == value)


def find_if(items: Iterable[T], pred: Callable[[T], bool]) -> int | None:
    """Return the index of the first item satisfying ``pred``, or None."""
    return next((index for index, item in enumerate(items) if pred(item)), None)


def all_of(iterable: Iterable[T], pred: Callable[[T], bool]) -> bool:
    """True if every item satisfies ``pred`` (True for an empty iterable)."""
    return all(pred(item) for item in iterable)


def any_of(iterable: Iterable[T], pred: Callable[[T], bool]) -> bool:
    """True if at least one item satisfies ``pred``."""
    return any(pred(item) for item in iterable)


def none_of(iterable: Iterable[T], pred: Callable[[T], bool]) -> bool:
    """True if no item satisfies ``pred`` (True for an empty iterable)."""
    return not any_of(iterable, pred)


def for_each(iterable: Iterable[T], func: F) -> F:
    """Call ``func`` on every item in order and return ``func``."""
    for item in iterable:
        func(item)
    return func


def min_element(
    items: Sequence[T],
    comp: Callable[[T, T], bool] = operator.lt,
) -> int | None:
    """Return the index of the first smallest item under ``comp``, or None if empty."""
    smallest: int | None = None
    for index, item in enumerate(items):
        if smallest is None or comp(item, items[smallest]):
            smallest = index
    return smallest


def max_element(
    items: Sequence[T],
    comp: Callable[[T, T], bool] = operator.lt,
) -> int | None:
    """Return the index of the first largest item under ``comp``, or None if empty."""
    largest: int | None = None
    for index, item in enumerate(items):
        if largest is None or comp(items[largest], item):
            largest = index
    return largest


def reverse(items: MutableSequence[T]) -> None:
    """Reverse ``items`` in place."""
    items[:] = items[::-1]