"""Counting problems over arrays: triplets, pairs, partitions and subarrays."""

from __future__ import annotations

from collections import Counter
from itertools import combinations
from typing import Sequence

MOD = 10**9 + 7


def count_good_triplets(arr: Sequence[int], a: int, b: int, c: int) -> int:
    """Count ``i < j < k`` whose pairwise differences are within ``a``, ``b`` and ``c``."""
    return sum(
        1
        for x, y, z in combinations(arr, 3)
        if abs(x - y) <= a and abs(y - z) <= b and abs(x - z) <= c
    )


def count_pairs(nums: Sequence[int], k: int) -> int:
    """Count ``i < j`` with equal values whose index product is divisible by ``k``."""
    if k == 0:
        raise ZeroDivisionError("k must not be zero")
    return sum(
        1
        for (i, x), (j, y) in combinations(enumerate(nums), 2)
        if x == y and i * j % k == 0
    )


def count_partitions(nums: Sequence[int], k: int) -> int:
    """Count ordered splits into two groups each summing to at least ``k``, modulo 10**9 + 7."""
    if any(value < 0 for value in nums):
        raise ValueError("nums must not hold negative values")
    if sum(nums) // 2 < k:
        return 0
    # ways[s]: number of subsets whose sum is exactly s, for s < k.
    ways = [1] + [0] * (k - 1) if k > 0 else []
    for value in nums:
        for total in range(k - 1, value - 1, -1):
            ways[total] = (ways[total] + ways[total - value]) % MOD
    too_small = sum(ways) % MOD
    return (pow(2, len(nums), MOD) - 2 * too_small) % MOD


def count_interesting_subarrays(nums: Sequence[int], modulo: int, k: int) -> int:
    """Count subarrays whose number of values ``v`` with ``v % modulo == k`` is itself ``k`` modulo ``modulo``."""
    if modulo == 0:
        return 0
    seen = Counter({0: 1})
    prefix = 0
    result = 0
    for value in nums:
        if value % modulo == k:
            prefix += 1
        result += seen[(prefix - k) % modulo]
        seen[prefix % modulo] += 1
    return result