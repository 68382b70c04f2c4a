"""Integer arithmetic routines."""

from __future__ import annotations

import math

_INT_MAX = 2**31 - 1


def divide(dividend: int, divisor: int) -> int:
    """Quotient truncated toward zero, capped at the largest 32-bit signed value."""
    if divisor == 0:
        raise ZeroDivisionError("math error")
    quotient = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        quotient = -quotient
    return min(quotient, _INT_MAX)


def int_sqrt(x: int) -> int:
    """The integer square root of a non-negative integer, rounded down."""
    if x < 0:
        raise ValueError(f"square root of negative number {x}")
    return math.isqrt(x)


def _is_symmetric(value: int) -> bool:
    if value < 100 and value % 11 == 0:
        return True
    if 1000 <= value < 10000:
        left = value // 1000 + value % 1000 // 100
        right = value % 100 // 10 + value % 10
        return left == right
    return False


def count_symmetric_integers(low: int, high: int) -> int:
    """Count integers in [low, high] whose two digit halves have equal sums."""
    return sum(1 for value in range(low, high + 1) if _is_symmetric(value))