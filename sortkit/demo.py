"""Walk-through of the sequence algorithms on numbers and on people."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import TextIO

from sortkit.algorithms import (
    accumulate,
    all_of,
    any_of,
    count,
    count_if,
    find,
    for_each,
    max_element,
    min_element,
    none_of,
    reverse,
)
from sortkit.sorters import sort


@dataclass
class Person:
    """A named person with an age."""

    name: str
    age: int

    def __str__(self) -> str:
        return f"{self.name} ({self.age})"


def _spaced(values: Iterable[object]) -> str:
    return "".join(f"{value} " for value in values)


def _flag(value: bool) -> int:
    return int(value)


def run_demo(out: TextIO | None = None) -> None:
    """Write the walk-through to ``out`` (standard output by default)."""
    stream = out if out is not None else sys.stdout

    def emit(text: str = "") -> None:
        stream.write(text + "\n")

    nums = [5, 2, 9, 1, 5, 6]

    sort(nums)
    emit(_spaced(nums))

    reverse(nums)
    emit(_spaced(nums))

    emit(f"Sum = {accumulate(nums, 0)}")
    emit(f"Count of 5 = {count(nums, 5)}")

    if find(nums, 9) is not None:
        emit("Found 9")

    emit(f"All positive? {_flag(all_of(nums, lambda x: x > 0))}")
    emit(f"Any even? {_flag(any_of(nums, lambda x: x % 2 == 0))}")
    emit(f"None negative? {_flag(none_of(nums, lambda x: x < 0))}")

    emit(f"Max = {nums[max_element(nums)]}")
    emit(f"Min = {nums[min_element(nums)]}")

    nums = [x + 1 for x in nums]
    emit(_spaced(nums))

    people = [
        Person("Alice", 30),
        Person("Bob", 25),
        Person("Carol", 30),
        Person("Dave", 20),
    ]

    sort(people, comp=lambda a, b: a.age < b.age)
    for_each(people, lambda p: emit(str(p)))

    sort(people, comp=lambda a, b: a.name > b.name)
    for_each(people, lambda p: emit(str(p)))

    oldest = people[max_element(people, lambda a, b: a.age < b.age)]
    emit(f"Oldest: {oldest}")

    over_25 = count_if(people, lambda p: p.age > 25)
    emit(f"People older than 25: {over_25}")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the walk-through, printing to standard output."""
    parser = argparse.ArgumentParser(
        prog="sortkit-demo",
        description="Show the sequence algorithms and sorters at work.",
    )
    parser.parse_args(argv)
    run_demo(sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())