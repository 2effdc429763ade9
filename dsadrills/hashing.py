"""Frequency counting by precomputed tables."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence


def count_characters(text: str) -> Counter[str]:
    """Count each character of text; absent characters count as zero."""
    return Counter(text)


def frequency_count(values: Sequence[int]) -> list[int]:
    """Count occurrences of 1..N, where N is the number of values.

    The entry at index i holds how often i + 1 occurs. Values outside 1..N
    are ignored.
    """
    size = len(values)
    counts = Counter(v for v in values if 1 <= v <= size)
    return [counts[number] for number in range(1, size + 1)]


def count_values(values: Iterable[int]) -> Counter[int]:
    """Count each value; absent values count as zero."""
    return Counter(values)


def count_small_numbers(values: Iterable[int], limit: int = 16) -> list[int]:
    """Count values in range(limit) into a table indexed by value.

    Raises ValueError for a value outside that range.
    """
    table = [0] * limit
    for value in values:
        if not 0 <= value < limit:
            raise ValueError(f"value {value} is outside 0..{limit - 1}")
        table[value] += 1
    return table