# dsadrills

A small library of classic algorithm exercises, written as plain Python functions.
Every function takes ordinary Python values and returns a result. None of them
prints anything, and none of them changes the list it is given.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `dsadrills.arrays`

- `is_sorted(values)`: `True` if no value is smaller than the one before it.
- `remove_duplicates(values)`: the distinct values in ascending order.
- `largest_element(values)`: the largest value. Raises `ValueError` when the input is empty.
- `left_rotate_by_one(values)`: a copy with each element moved one place to the left.
- `right_rotate(values, k)`: a copy rotated `k` places to the right. `k` is taken modulo the length.
- `linear_search(values, target)`: the index of the first match, or `-1` when there is none.
- `search_sorted(values, target)`: `True` if `target` occurs in `values`.
- `longest_subarray_with_sum(values, k)`: the length of the longest contiguous run that sums to `k`, or `0` when there is none.
- `next_permutation(values)`: the next lexicographic permutation. After the last permutation it wraps round to the first.
- `second_smallest(values)` and `second_largest(values)`: the second distinct value from either end. Raise `ValueError` when there are fewer than two distinct values.
- `rearrange_by_sign(values)`: non-negatives at even indices and negatives at odd indices, each group kept in its original order. Raises `ValueError` unless the counts fill those places exactly.
- `rearrange_by_sign_split(values)`: alternates positives and non-positives for the first `len // 2` pairs. For an odd length the last element stays where it was. Raises `ValueError` when either group is too small.
- `rearrange_by_sign_uneven(values)`: alternates positives and non-positives, then appends whatever is left over.

### `dsadrills.hashing`

- `count_characters(text)`: a `collections.Counter` of the characters in `text`.
- `count_values(values)`: a `Counter` of the values.
- `frequency_count(values)`: for N values, a list of length N whose entry at index `i` is how often `i + 1` occurs. Values outside `1..N` are ignored.
- `count_small_numbers(values, limit=16)`: a table of length `limit`, indexed by value. Raises `ValueError` for a value outside `0..limit-1`.

### `dsadrills.recursion`

- `edit_distance(first, second)`: the fewest insertions, deletions and substitutions needed to turn `first` into `second`.
- `factorial(n)`: `n!`. Raises `ValueError` for negative `n`.
- `fibonacci(n)`: the n-th Fibonacci number. Any `n <= 1` is returned unchanged.
- `power(base, exponent)`: `base ** exponent` for a non-negative integer exponent. Raises `ValueError` otherwise.
- `digit_sum(n)`: the sum of the decimal digits of `n`. The result is negated when `n` is negative.
- `count_up(n)` and `count_down(n)`: `[1, ..., n]` and `[n, ..., 1]`.
- `add_matrices(a, b)`: the element-wise sum of two matrices given as lists of rows. Raises `ValueError` if their shapes differ.
- `maximize_cuts(n, x, y, z)`: the most pieces of length `x`, `y` or `z` that exactly make up `n`, or `0` when no such cut exists. Raises `ValueError` for a negative `n` or a piece length that is not positive.
- `tower_of_hanoi(n, source, target, auxiliary)`: the moves that shift `n` disks from `source` to `target`, as a list of `(disk, from_rod, to_rod)` tuples. The rods can be any labels.

### `dsadrills.sorting`

`bubble_sort`, `insertion_sort`, `merge_sort`, `quick_sort`, `selection_sort` and
`shell_sort`. Each one takes an iterable and returns a new sorted list.
`merge_sort` is stable.

## Usage

```python
from dsadrills.arrays import is_sorted, next_permutation, second_largest
from dsadrills.recursion import edit_distance, tower_of_hanoi
from dsadrills.sorting import merge_sort, quick_sort

is_sorted([1, 2, 3, 4, 5])                 # True
next_permutation([2, 1, 5, 4, 3, 0, 0])    # [2, 3, 0, 0, 1, 4, 5]
second_largest([1, 2, 4, 7, 7, 5])         # 5

edit_distance("kitten", "sitting")         # 3
tower_of_hanoi(2, "A", "C", "B")           # [(1, 'A', 'B'), (2, 'A', 'C'), (1, 'B', 'C')]

merge_sort([9, 4, 7, 6, 3, 1, 5])          # [1, 3, 4, 5, 6, 7, 9]
quick_sort([4, 6, 2, 5, 7, 9, 1, 3])       # [1, 2, 3, 4, 5, 6, 7, 9]
```

## What it does not do

The package is a library only. It has no command-line program, does not read
input from the terminal and prints no results. To use a function, call it from
Python.

The package needs Python 3.10 or later and has no runtime dependencies.