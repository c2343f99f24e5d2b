"""In-place comparison sorts with a size-based automatic choice."""

from __future__ import annotations

import enum
import operator
from collections.abc import Callable, MutableSequence, Sequence
from typing import TypeVar

T = TypeVar("T")
Compare = Callable[[T, T], bool]

_INSERTION_LIMIT = 16
_QUICK_LIMIT = 1000


class Algorithm(enum.Enum):
    """Sorting algorithms available to :func:`sort`."""

    INSERTION = "insertion"
    MERGE = "merge"
    QUICK = "quick"


def insertion_sort(items: MutableSequence[T], comp: Compare = operator.lt) -> None:
    """Stable in-place insertion sort; ``comp(a, b)`` means ``a`` goes before ``b``."""
    for position in range(1, len(items)):
        key = items[position]
        slot = position
        while slot > 0 and comp(key, items[slot - 1]):
            items[slot] = items[slot - 1]
            slot -= 1
        items[slot] = key


def _merged(run: Sequence[T], comp: Compare) -> list[T]:
    if len(run) <= 1:
        return list(run)
    middle = len(run) // 2
    left = _merged(run[:middle], comp)
    right = _merged(run[middle:], comp)
    result: list[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if comp(right[j], left[i]):
            result.append(right[j])
            j += 1
        else:
            result.append(left[i])
            i += 1
    result.extend(left[i:])
    result.extend(right[j:])
    return result


def merge_sort(items: MutableSequence[T], comp: Compare = operator.lt) -> None:
    """Stable merge sort; the result is written back into ``items``."""
    items[:] = _merged(list(items), comp)


def _partition(items: MutableSequence[T], lo: int, hi: int, comp: Compare) -> int:
    """Partition ``items[lo:hi]`` around its last element; return the pivot's index."""
    last = hi - 1
    pivot = items[last]
    boundary = lo
    for index in range(lo, last):
        if comp(items[index], pivot):
            items[boundary], items[index] = items[index], items[boundary]
            boundary += 1
    items[boundary], items[last] = items[last], items[boundary]
    return boundary


def quick_sort(items: MutableSequence[T], comp: Compare = operator.lt) -> None:
    """In-place quicksort using the last element of each range as pivot."""
    pending = [(0, len(items))]
    while pending:
        lo, hi = pending.pop()
        if hi - lo <= 1:
            continue
        mid = _partition(items, lo, hi, comp)
        pending.append((lo, mid))
        pending.append((mid + 1, hi))


def select_algorithm(size: int) -> Algorithm:
    """Pick an algorithm for a range of ``size`` items."""
    if size < _INSERTION_LIMIT:
        return Algorithm.INSERTION
    if size < _QUICK_LIMIT:
        return Algorithm.QUICK
    return Algorithm.MERGE


_SORTERS: dict[Algorithm, Callable[[MutableSequence, Compare], None]] = {
    Algorithm.INSERTION: insertion_sort,
    Algorithm.MERGE: merge_sort,
    Algorithm.QUICK: quick_sort,
}


def sort(
    items: MutableSequence[T],
    algorithm: Algorithm | str | None = None,
    comp: Compare = operator.lt,
) -> None:
    """Sort ``items`` in place with ``algorithm``, or one chosen by size if None.

    Raises ValueError for an unknown algorithm.
    """
    if algorithm is None:
        chosen = select_algorithm(len(items))
    else:
        try:
            chosen = Algorithm(algorithm)
        except ValueError:
            raise ValueError("Unknown sorting algorithm") from None
    _SORTERS[chosen](items, comp)