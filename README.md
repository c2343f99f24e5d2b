# sortkit

In-place sorting algorithms and small sequence helpers. Where a function
takes a comparator, it is a "less than" test: `comp(a, b)` is true when `a`
goes before `b`. The default is `operator.lt`.

## Installation

    pip install sortkit

## Sorting with a comparator

`sortkit.sorters` sorts a mutable sequence in place with `insertion_sort`,
`merge_sort` or `quick_sort`. Insertion sort and merge sort are stable; quick
sort uses the last item of each range as its pivot.

`sort(items, algorithm=None, comp=operator.lt)` runs the named algorithm. The
algorithm may be an `Algorithm` member (`INSERTION`, `MERGE`, `QUICK`) or its
value as a string (`"insertion"`, `"merge"`, `"quick"`); any other value
raises `ValueError`. With no algorithm, `select_algorithm` chooses one from the
size of the input: insertion sort below 16 items, quick sort below 1000 and
merge sort from 1000 up.

```python
from sortkit.sorters import Algorithm, sort, merge_sort, select_algorithm

numbers = [5, 2, 9, 1, 5, 6]
sort(numbers, Algorithm.QUICK)
# numbers == [1, 2, 5, 5, 6, 9]

words = ["pear", "fig", "apple"]
merge_sort(words, lambda a, b: len(a) < len(b))   # stable, shortest first
# words == ["fig", "pear", "apple"]

people_by_age_desc = [30, 25, 41]
sort(people_by_age_desc, "insertion", lambda a, b: a > b)
# [41, 30, 25]

select_algorithm(500)   # Algorithm.QUICK
```

## Classic sorts

`sortkit.classic` holds textbook in-place sorts into ascending order, using
the items' own `<` and `>`: `bubble_sort`, `selection_sort`,
`insertion_sort`, `merge_sort`, `heap_sort` and `quick_sort`. The building
blocks `heapify(items, size, root)` and `partition(items, start, end, rng)`
are public as well.

`quick_sort` picks a random pivot for every range. Pass your own
`random.Random` (or any object with a `randrange` method) to get the same run
every time.

```python
import random
from sortkit.classic import heap_sort, quick_sort

data = [8, 9, 6, 4, 1, 10]
heap_sort(data)                       # [1, 4, 6, 8, 9, 10]

more = [3, 1, 2]
quick_sort(more, random.Random(0))    # [1, 2, 3]
```

## Sequence helpers

`sortkit.algorithms` has `accumulate`, `count`, `count_if`, `find`,
`find_if`, `all_of`, `any_of`, `none_of`, `for_each`, `min_element`,
`max_element` and `reverse`.

- `accumulate(iterable, init, op=operator.add)` folds from the left.
- `find`, `find_if`, `min_element` and `max_element` return an index, or
  `None` if nothing matches or the input is empty. `min_element` and
  `max_element` return the first of equal candidates.
- `for_each` calls a function on every item and returns that function.
- `reverse` reverses a mutable sequence in place.

```python
from sortkit.algorithms import accumulate, count_if, find, max_element

values = [9, 6, 5, 5, 2, 1]
accumulate(values, 0)                      # 28
count_if(values, lambda x: x % 2 == 0)     # 2
max_element(values)                        # 0
find(values, 7)                            # None
```

## Demo

To run a short walk through the helpers and sorters on sample numbers and
people, printing to standard output:

    sortkit-demo

The same walk-through is available as `sortkit.demo.run_demo(out)`, which
writes to any text stream.