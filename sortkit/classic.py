"""Textbook in-place sorts of mutable sequences in ascending order."""

from __future__ import annotations

import random
from collections.abc import MutableSequence, Sequence
from typing import Any, Protocol


class _RandomSource(Protocol):
    def randrange(self, start: int, stop: int) -> int: ...


def bubble_sort(items: MutableSequence[Any]) -> None:
    """Bubble sort; stops early once a pass makes no swap."""
    size = len(items)
    for done in range(size - 1):
        swapped = False
        for j in range(size - done - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break


def heapify(items: MutableSequence[Any], size: int, root: int) -> None:
    """Sift ``items[root]`` down so the first ``size`` items under it form a max-heap."""
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heap_sort(items: MutableSequence[Any]) -> None:
    """Heap sort using a max-heap built in place."""
    size = len(items)
    for root in range(size // 2 - 1, -1, -1):
        heapify(items, size, root)
    for end in range(size - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        heapify(items, end, 0)


def insertion_sort(items: MutableSequence[Any]) -> None:
    """Insertion sort, growing a sorted prefix one item at a time."""
    for position in range(1, len(items)):
        key = items[position]
        slot = position
        while slot > 0 and items[slot - 1] > key:
            items[slot] = items[slot - 1]
            slot -= 1
        items[slot] = key


def _merged(run: Sequence[Any]) -> list[Any]:
    if len(run) <= 1:
        return list(run)
    # The left half takes ceil(n/2) items, as (l + r) / 2 splits an inclusive range.
    middle = (len(run) + 1) // 2
    left = _merged(run[:middle])
    right = _merged(run[middle:])
    result: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            result.append(left[i])
            i += 1
        else:
            result.append(right[j])
            j += 1
    result.extend(left[i:])
    result.extend(right[j:])
    return result


def merge_sort(items: MutableSequence[Any]) -> None:
    """Top-down merge sort; the merged result is written back into ``items``."""
    items[:] = _merged(list(items))


def partition(
    items: MutableSequence[Any],
    start: int,
    end: int,
    rng: _RandomSource | None = None,
) -> int:
    """Partition ``items[start..end]`` (inclusive) around a random pivot.

    Afterwards every item before the returned index is smaller than the pivot
    and every item after it is not smaller.
    """
    source = rng if rng is not None else random
    chosen = source.randrange(start, end + 1)
    items[start], items[chosen] = items[chosen], items[start]

    smaller = sum(1 for index in range(start + 1, end + 1) if items[index] < items[start])
    pivot_index = start + smaller
    items[start], items[pivot_index] = items[pivot_index], items[start]

    i, j = start, end
    while i < j:
        if items[i] < items[pivot_index]:
            i += 1
        elif items[j] >= items[pivot_index]:
            j -= 1
        else:
            items[i], items[j] = items[j], items[i]
            i += 1
            j -= 1
    return pivot_index


def quick_sort(items: MutableSequence[Any], rng: _RandomSource | None = None) -> None:
    """Quicksort with a randomly chosen pivot for every range."""
    pending = [(0, len(items) - 1)]
    while pending:
        start, end = pending.pop()
        if start >= end:
            continue
        pivot_index = partition(items, start, end, rng)
        pending.append((start, pivot_index - 1))
        pending.append((pivot_index + 1, end))


def selection_sort(items: MutableSequence[Any]) -> None:
    """Selection sort: move the smallest remaining item to the front each pass."""
    size = len(items)
    for i in range(size - 1):
        smallest = min(range(i, size), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]