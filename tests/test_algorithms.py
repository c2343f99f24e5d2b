import operator

import pytest
from hypothesis import given
from hypothesis import strategies as st

from sortkit.algorithms import (
    accumulate,
    all_of,
    any_of,
    count,
    count_if,
    find,
    find_if,
    for_each,
    max_element,
    min_element,
    none_of,
    reverse,
)

ints = st.lists(st.integers(min_value=-50, max_value=50))


@given(ints, st.integers())
def test_accumulate_default_adds(xs, init):
    assert accumulate(xs, init) == init + sum(xs)


def test_accumulate_folds_left_in_order():
    assert accumulate([1, 2, 3], [], lambda acc, x: acc + [x]) == [1, 2, 3]


def test_accumulate_strings():
    assert accumulate(["a", "b", "c"], "", operator.add) == "abc"


def test_accumulate_empty_returns_init():
    assert accumulate([], 7) == 7


@given(ints, st.integers(min_value=-50, max_value=50))
def test_count_matches_list_count(xs, value):
    assert count(xs, value) == xs.count(value)


@given(ints)
def test_count_if_partitions_length(xs):
    even = count_if(xs, lambda x: x % 2 == 0)
    odd = count_if(xs, lambda x: x % 2 != 0)
    assert even + odd == len(xs)


def test_count_if_on_demo_data():
    nums = [5, 2, 9, 1, 5, 6]
    assert count_if(nums, lambda x: x == 5) == count(nums, 5) == nums.count(5)


@given(ints, st.integers(min_value=-50, max_value=50))
def test_find_first_index(xs, value):
    if value in xs:
        assert find(xs, value) == xs.index(value)
    else:
        assert find(xs, value) is None


def test_find_missing_returns_none():
    assert find([1, 2, 3], 9) is None


def test_find_if_first_match():
    nums = [5, 2, 9, 1, 5, 6]
    index = find_if(nums, lambda x: x % 2 == 0)
    assert index == 1
    assert nums[index] == 2


@given(ints)
def test_none_of_is_negation_of_any_of(xs):
    pred = lambda x: x < 0  # noqa: E731
    assert none_of(xs, pred) == (not any_of(xs, pred))


def test_empty_predicates():
    assert all_of([], lambda x: False) is True
    assert any_of([], lambda x: True) is False
    assert none_of([], lambda x: True) is True


def test_all_of_stops_at_first_failure():
    seen = []

    def positive(x):
        seen.append(x)
        return x > 0

    assert all_of([3, -1, 4], positive) is False
    assert seen == [3, -1]


def test_for_each_visits_in_order_and_returns_func():
    seen = []
    returned = for_each([4, 5, 6], seen.append)
    assert seen == [4, 5, 6]
    assert returned == seen.append


@given(st.lists(st.integers(min_value=-5, max_value=5), min_size=1))
def test_min_element_first_minimum(xs):
    assert min_element(xs) == xs.index(min(xs))


@given(st.lists(st.integers(min_value=-5, max_value=5), min_size=1))
def test_max_element_first_maximum(xs):
    assert max_element(xs) == xs.index(max(xs))


def test_min_max_empty():
    assert min_element([]) is None
    assert max_element([]) is None


def test_max_element_custom_comparator_keeps_first():
    people = [("Alice", 30), ("Bob", 25), ("Carol", 30), ("Dave", 20)]
    oldest = max_element(people, lambda a, b: a[1] < b[1])
    youngest = min_element(people, lambda a, b: a[1] < b[1])
    assert people[oldest] == ("Alice", 30)
    assert people[youngest] == ("Dave", 20)


@given(ints)
def test_reverse_in_place(xs):
    data = list(xs)
    reverse(data)
    assert data == xs[::-1]
    reverse(data)
    assert data == xs


def test_reverse_bytearray():
    data = bytearray(b"abc")
    reverse(data)
    assert data == bytearray(b"cba")


@pytest.mark.parametrize("xs", [[], [1]])
def test_reverse_trivial(xs):
    data = list(xs)
    reverse(data)
    assert data == xs