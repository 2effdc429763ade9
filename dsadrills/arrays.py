"""Everyday array drills: searching, rotating, permuting and rearranging lists."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import accumulate, pairwise


def is_sorted(values: Iterable[int]) -> bool:
    """Return True if the values never decrease from one to the next."""
    return all(left <= right for left, right in pairwise(values))


def remove_duplicates(values: Iterable[int]) -> list[int]:
    """Return the distinct values in ascending order."""
    return sorted(set(values))


def largest_element(values: Iterable[int]) -> int:
    """Return the largest value; raise ValueError for an empty input."""
    items = list(values)
    if not items:
        raise ValueError("cannot take the largest element of an empty sequence")
    return max(items)


def left_rotate_by_one(values: Sequence[int]) -> list[int]:
    """Return a copy with every element moved one place to the left."""
    items = list(values)
    return items[1:] + items[:1]


def linear_search(values: Iterable[int], target: int) -> int:
    """Return the index of the first occurrence of target, or -1 if absent."""
    return next((index for index, value in enumerate(values) if value == target), -1)


def longest_subarray_with_sum(values: Sequence[int], k: int) -> int:
    """Return the length of the longest contiguous run whose sum equals k."""
    items = list(values)
    best = 0
    for start in range(len(items)):
        for length, total in enumerate(accumulate(items[start:]), start=1):
            if total == k:
                best = max(best, length)
    return best


def next_permutation(values: Sequence[int]) -> list[int]:
    """Return the next lexicographic permutation, wrapping round to the first."""
    result = list(values)
    pivot = next(
        (i for i in range(len(result) - 2, -1, -1) if result[i] < result[i + 1]),
        None,
    )
    if pivot is None:
        result.reverse()
        return result
    swap_at = next(
        i for i in range(len(result) - 1, pivot, -1) if result[i] > result[pivot]
    )
    result[pivot], result[swap_at] = result[swap_at], result[pivot]
    result[pivot + 1 :] = reversed(result[pivot + 1 :])
    return result


def rearrange_by_sign_split(values: Sequence[int]) -> list[int]:
    """Alternate positives and non-positives for the first len//2 pairs.

    Positives go to even places and the rest to odd places. For an odd
    length the final element is left where it was. Raises ValueError when
    either group is too small to fill its places.
    """
    result = list(values)
    half = len(result) // 2
    positives = [v for v in result if v > 0]
    negatives = [v for v in result if v <= 0]
    if len(positives) < half or len(negatives) < half:
        raise ValueError("not enough positive and negative values to alternate")
    result[0 : 2 * half : 2] = positives[:half]
    result[1 : 2 * half : 2] = negatives[:half]
    return result


def rearrange_by_sign(values: Sequence[int]) -> list[int]:
    """Place non-negatives at even indices and negatives at odd indices.

    Relative order within each group is kept. Raises ValueError unless the
    counts exactly fill the even and odd places.
    """
    items = list(values)
    non_negatives = [v for v in items if v >= 0]
    negatives = [v for v in items if v < 0]
    if len(non_negatives) != (len(items) + 1) // 2:
        raise ValueError("values cannot be alternated by sign")
    result = [0] * len(items)
    result[0::2] = non_negatives
    result[1::2] = negatives
    return result


def rearrange_by_sign_uneven(values: Iterable[int]) -> list[int]:
    """Alternate positives and non-positives, then append whichever are left."""
    items = list(values)
    positives = [v for v in items if v > 0]
    negatives = [v for v in items if v <= 0]
    pairs = min(len(positives), len(negatives))
    result = [v for pair in zip(positives, negatives) for v in pair]
    result.extend(positives[pairs:])
    result.extend(negatives[pairs:])
    return result


def right_rotate(values: Sequence[int], k: int) -> list[int]:
    """Return a copy rotated k places to the right."""
    items = list(values)
    if not items:
        return items
    k %= len(items)
    return items[len(items) - k :] + items[: len(items) - k]


def second_smallest(values: Iterable[int]) -> int:
    """Return the second smallest distinct value.

    Raises ValueError when there are fewer than two distinct values.
    """
    distinct = sorted(set(values))
    if len(distinct) < 2:
        raise ValueError("need at least two distinct values")
    return distinct[1]


def second_largest(values: Iterable[int]) -> int:
    """Return the second largest distinct value.

    Raises ValueError when there are fewer than two distinct values.
    """
    distinct = sorted(set(values))
    if len(distinct) < 2:
        raise ValueError("need at least two distinct values")
    return distinct[-2]


def search_sorted(values: Iterable[int], target: int) -> bool:
    """Return True if target occurs among the values."""
    return any(value == target for value in values)