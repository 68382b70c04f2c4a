import pytest

from algokit.numbers import count_symmetric_integers, divide, int_sqrt


@pytest.mark.parametrize(
    "dividend,divisor",
    [(10, 3), (7, -3), (-7, 3), (-7, -3), (0, 5), (2**31 - 1, 1), (-(2**31), 2), (1, 2), (99, 99)],
)
def test_divide_truncates_toward_zero(dividend, divisor):
    quotient = divide(dividend, divisor)
    remainder = dividend - quotient * divisor
    assert abs(remainder) < abs(divisor)
    assert remainder == 0 or (remainder > 0) == (dividend > 0)


def test_divide_overflow_is_capped():
    assert divide(-(2**31), -1) == 2147483647


def test_divide_lowest_value_by_one():
    assert divide(-(2**31), 1) == -(2**31)


def test_divide_by_zero():
    with pytest.raises(ZeroDivisionError, match="math error"):
        divide(5, 0)


@pytest.mark.parametrize("x", list(range(0, 200)) + [2**31 - 1, 10**12, 10**12 - 1])
def test_int_sqrt_bounds(x):
    root = int_sqrt(x)
    assert root * root <= x < (root + 1) * (root + 1)


def test_int_sqrt_negative():
    with pytest.raises(ValueError):
        int_sqrt(-4)


def test_count_symmetric_two_digit():
    assert count_symmetric_integers(1, 100) == 9


def test_count_symmetric_four_digit():
    assert count_symmetric_integers(1200, 1230) == 4


def test_count_symmetric_three_digit_range_has_none():
    assert count_symmetric_integers(100, 999) == 0


@pytest.mark.parametrize("low,mid,high", [(1, 50, 100), (1000, 1500, 2000), (1, 999, 3000)])
def test_count_symmetric_is_additive(low, mid, high):
    whole = count_symmetric_integers(low, high)
    parts = count_symmetric_integers(low, mid) + count_symmetric_integers(mid + 1, high)
    assert whole == parts


def test_count_symmetric_empty_range_is_smaller():
    assert count_symmetric_integers(50, 10) < count_symmetric_integers(10, 50)