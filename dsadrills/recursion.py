"""Classic recursion drills: counting, powers, digits, edits and puzzles."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from functools import lru_cache


def edit_distance(first: str, second: str) -> int:
    """Return the fewest insertions, deletions and substitutions turning first into second."""

    @lru_cache(maxsize=None)
    def distance(m: int, n: int) -> int:
        if m == 0:
            return n
        if n == 0:
            return m
        if first[m - 1] == second[n - 1]:
            return distance(m - 1, n - 1)
        return 1 + min(
            distance(m, n - 1),
            distance(m - 1, n),
            distance(m - 1, n - 1),
        )

    return distance(len(first), len(second))


def factorial(n: int) -> int:
    """Return n! for a non-negative n."""
    if n < 0:
        raise ValueError("factorial is undefined for negative numbers")
    if n <= 1:
        return 1
    return n * factorial(n - 1)


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number; any n <= 1 is returned unchanged."""
    if n <= 1:
        return n
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def add_matrices(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return the element-wise sum of two matrices of the same shape."""
    if len(a) != len(b) or any(len(row_a) != len(row_b) for row_a, row_b in zip(a, b)):
        raise ValueError("matrices must have the same shape")
    return [[x + y for x, y in zip(row_a, row_b)] for row_a, row_b in zip(a, b)]


def maximize_cuts(n: int, x: int, y: int, z: int) -> int:
    """Return the most pieces of lengths x, y or z that exactly make up n.

    Returns 0 when n cannot be cut that way. Piece lengths must be positive.
    """
    if n < 0:
        raise ValueError("length must not be negative")
    pieces = (x, y, z)
    if any(piece <= 0 for piece in pieces):
        raise ValueError("piece lengths must be positive")
    best: list[int | None] = [0] + [None] * n
    for length in range(1, n + 1):
        options = [
            best[length - piece] + 1
            for piece in pieces
            if piece <= length and best[length - piece] is not None
        ]
        best[length] = max(options, default=None)
    return best[n] or 0


def power(base: int, exponent: int) -> int:
    """Return base raised to a non-negative integer exponent."""
    if exponent < 0:
        raise ValueError("exponent must not be negative")
    if exponent == 0:
        return 1
    return base * power(base, exponent - 1)


def count_up(n: int) -> list[int]:
    """Return the numbers 1 to n in increasing order."""
    return list(range(1, n + 1))


def count_down(n: int) -> list[int]:
    """Return the numbers n down to 1."""
    return list(range(n, 0, -1))


def digit_sum(n: int) -> int:
    """Return the sum of the decimal digits of n, negated for negative n."""
    if n < 0:
        return -digit_sum(-n)
    if n == 0:
        return 0
    return n % 10 + digit_sum(n // 10)


def tower_of_hanoi(n: int, source, target, auxiliary) -> list[tuple[int, object, object]]:
    """Return the moves, as (disk, from_rod, to_rod), that shift n disks from source to target."""
    if n < 0:
        raise ValueError("number of disks must not be negative")

    def moves(disks: int, start, end, spare) -> Iterator[tuple[int, object, object]]:
        if disks == 0:
            return
        yield from moves(disks - 1, start, spare, end)
        yield (disks, start, end)
        yield from moves(disks - 1, spare, end, start)

    return list(moves(n, source, target, auxiliary))