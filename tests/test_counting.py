import pytest

from algobook.dp.counting import (
    MOD,
    count_arrays,
    count_numbers,
    count_tilings,
    count_towers,
)


def test_count_numbers_singletons_sum_to_range():
    singles = [count_numbers(x, x) for x in range(0, 250)]
    assert set(singles) <= {0, 1}
    assert sum(singles) == count_numbers(0, 249)


def test_count_numbers_repeated_digit_excluded():
    assert count_numbers(11, 11) == 0
    assert count_numbers(12, 12) == 1


def test_count_numbers_single_digits_all_count():
    assert count_numbers(0, 9) == len(range(0, 10))


@pytest.mark.parametrize("a, b, c", [(0, 50, 400), (123, 321, 5000), (1, 999, 1000)])
def test_count_numbers_additive(a, b, c):
    assert count_numbers(a, b) + count_numbers(b + 1, c) == count_numbers(a, c)


def test_count_numbers_rejects_bad_ranges():
    with pytest.raises(ValueError):
        count_numbers(10, 5)
    with pytest.raises(ValueError):
        count_numbers(-1, 5)


@pytest.mark.parametrize("height, width", [(2, 3), (3, 4), (4, 5), (2, 6)])
def test_count_tilings_symmetric(height, width):
    assert count_tilings(height, width) == count_tilings(width, height)


@pytest.mark.parametrize("height, width", [(3, 3), (1, 5), (5, 7)])
def test_count_tilings_odd_area_is_zero(height, width):
    assert count_tilings(height, width) == 0


def test_count_tilings_single_domino():
    assert count_tilings(1, 2) == 1
    assert count_tilings(2, 1) == 1


def test_count_tilings_two_rows_follow_fibonacci():
    for width in range(3, 12):
        assert count_tilings(2, width) == count_tilings(2, width - 1) + count_tilings(2, width - 2)


def test_count_tilings_empty_width():
    assert count_tilings(4, 0) == 1


def test_count_tilings_rejects_bad_height():
    with pytest.raises(ValueError):
        count_tilings(0, 3)


def test_count_towers_worked_examples():
    assert count_towers(2) == 8
    assert count_towers(6) == 2864


def test_count_towers_increasing_and_in_range():
    values = [count_towers(h) for h in range(1, 12)]
    assert values == sorted(values)
    assert all(0 <= v < MOD for v in values)
    assert 0 <= count_towers(100_000) < MOD


def test_count_towers_rejects_zero():
    with pytest.raises(ValueError):
        count_towers(0)


def test_count_arrays_worked_example():
    assert count_arrays([2, 0, 2], 5) == 3


def test_count_arrays_single_unknown_takes_any_value():
    assert count_arrays([0], 7) == 7


def test_count_arrays_fully_known():
    assert count_arrays([1, 2, 2, 3], 3) == 1
    assert count_arrays([1, 3], 3) == 0


def test_count_arrays_value_beyond_upper_is_impossible():
    assert count_arrays([0, 9], 4) == 0


def test_count_arrays_reverse_symmetric():
    values = [0, 3, 0, 0, 2, 0]
    assert count_arrays(values, 5) == count_arrays(values[::-1], 5)


def test_count_arrays_rejects_bad_input():
    with pytest.raises(ValueError):
        count_arrays([], 3)
    with pytest.raises(ValueError):
        count_arrays([0, 1], 0)