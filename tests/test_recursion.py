import math

import pytest
from hypothesis import given, strategies as st

from dsadrills.recursion import (
    add_matrices,
    count_down,
    count_up,
    digit_sum,
    edit_distance,
    factorial,
    fibonacci,
    maximize_cuts,
    power,
    tower_of_hanoi,
)

short_text = st.text(alphabet="abcd", max_size=8)


def test_edit_distance_worked_example():
    assert edit_distance("kitten", "sitting") == 3


@given(short_text)
def test_edit_distance_to_itself_is_zero(text):
    assert edit_distance(text, text) == 0


@given(short_text)
def test_edit_distance_to_empty_is_length(text):
    assert edit_distance(text, "") == len(text)
    assert edit_distance("", text) == len(text)


@given(short_text, short_text)
def test_edit_distance_is_symmetric_and_bounded(a, b):
    d = edit_distance(a, b)
    assert d == edit_distance(b, a)
    assert abs(len(a) - len(b)) <= d <= max(len(a), len(b))


@given(st.integers(min_value=0, max_value=30))
def test_factorial_matches_math(n):
    assert factorial(n) == math.factorial(n)


def test_factorial_rejects_negative():
    with pytest.raises(ValueError):
        factorial(-1)


@given(st.integers(min_value=0, max_value=60))
def test_fibonacci_recurrence(n):
    assert fibonacci(n + 2) == fibonacci(n + 1) + fibonacci(n)


@pytest.mark.parametrize("n", [-3, 0, 1])
def test_fibonacci_small_values_return_n(n):
    assert fibonacci(n) == n


def test_add_matrices_with_zero_is_identity():
    a = [[1, 2, 3], [4, 5, 6]]
    zero = [[0, 0, 0], [0, 0, 0]]
    assert add_matrices(a, zero) == a


@given(
    st.integers(min_value=1, max_value=4).flatmap(
        lambda cols: st.lists(
            st.tuples(
                st.lists(st.integers(-50, 50), min_size=cols, max_size=cols),
                st.lists(st.integers(-50, 50), min_size=cols, max_size=cols),
            ),
            max_size=4,
        )
    )
)
def test_add_matrices_commutes(rows):
    a = [row_a for row_a, _ in rows]
    b = [row_b for _, row_b in rows]
    assert add_matrices(a, b) == add_matrices(b, a)


def test_add_matrices_shape_mismatch():
    with pytest.raises(ValueError):
        add_matrices([[1, 2]], [[1, 2, 3]])
    with pytest.raises(ValueError):
        add_matrices([[1]], [[1], [2]])


@given(st.integers(min_value=0, max_value=20), st.integers(min_value=1, max_value=5))
def test_maximize_cuts_single_length(count, piece):
    assert maximize_cuts(count * piece, piece, piece, piece) == count


def test_maximize_cuts_impossible_is_zero():
    assert maximize_cuts(1, 2, 2, 2) == 0


@given(st.integers(min_value=1, max_value=40), st.integers(2, 6), st.integers(2, 6))
def test_maximize_cuts_with_unit_piece_uses_all_units(n, y, z):
    assert maximize_cuts(n, 1, y, z) == n


def test_maximize_cuts_rejects_bad_input():
    with pytest.raises(ValueError):
        maximize_cuts(5, 0, 1, 2)
    with pytest.raises(ValueError):
        maximize_cuts(-1, 1, 2, 3)


@given(st.integers(-10, 10), st.integers(min_value=0, max_value=12))
def test_power_matches_operator(base, exponent):
    assert power(base, exponent) == base**exponent


def test_power_rejects_negative_exponent():
    with pytest.raises(ValueError):
        power(2, -1)


@given(st.integers(min_value=0, max_value=50))
def test_count_up_and_down_are_reverses(n):
    up = count_up(n)
    assert len(up) == n
    assert up == sorted(up)
    assert count_down(n) == up[::-1]


def test_count_up_starts_at_one():
    assert count_up(4)[0] == 1
    assert count_down(4)[-1] == 1


def test_digit_sum_worked_example():
    assert digit_sum(12345) == 15


@given(st.integers(min_value=0, max_value=10**12))
def test_digit_sum_properties(n):
    assert digit_sum(n) == sum(map(int, str(n)))
    assert digit_sum(-n) == -digit_sum(n)
    assert digit_sum(n * 10) == digit_sum(n)


@pytest.mark.parametrize("n", range(0, 8))
def test_tower_of_hanoi_moves_are_legal(n):
    moves = tower_of_hanoi(n, "A", "C", "B")
    assert len(moves) == 2**n - 1
    rods = {"A": list(range(n, 0, -1)), "B": [], "C": []}
    for disk, start, end in moves:
        assert rods[start][-1] == disk
        rods[start].pop()
        assert not rods[end] or rods[end][-1] > disk
        rods[end].append(disk)
    assert rods["C"] == list(range(n, 0, -1))
    assert rods["A"] == [] and rods["B"] == []


def test_tower_of_hanoi_rejects_negative():
    with pytest.raises(ValueError):
        tower_of_hanoi(-1, "A", "C", "B")