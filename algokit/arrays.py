"""Array algorithms: sums, profits, majorities, intervals and in-place rearrangements."""

from __future__ import annotations

import math
from collections import Counter
from itertools import accumulate, pairwise
from typing import MutableSequence, Sequence


def two_sum(nums: Sequence[int], target: int) -> tuple[int, ...]:
    """Indices ``(i, j)`` with ``i < j`` of two values summing to ``target``, or ``()``."""
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        partner = seen.get(target - value)
        if partner is not None:
            return partner, index
        seen[value] = index
    return ()


def max_area(height: Sequence[int]) -> int:
    """Largest area of water held between two of the vertical lines."""
    best = 0
    left, right = 0, len(height) - 1
    while left < right:
        best = max(best, (right - left) * min(height[left], height[right]))
        if height[left] > height[right]:
            right -= 1
        else:
            left += 1
    return best


def max_profit(prices: Sequence[int]) -> int:
    """Best profit from a single buy followed by a single sell."""
    if not prices:
        raise ValueError("prices must not be empty")
    profit = 0
    cheapest = prices[0]
    for price in prices[1:]:
        if price < cheapest:
            cheapest = price
        else:
            profit = max(profit, price - cheapest)
    return profit


def max_profit_unlimited(prices: Sequence[int]) -> int:
    """Best profit when any number of non-overlapping trades is allowed."""
    return sum(later - earlier for earlier, later in pairwise(prices) if earlier < later)


def majority_element(nums: Sequence[int]) -> int:
    """The most frequent value."""
    if not nums:
        raise ValueError("nums must not be empty")
    return Counter(nums).most_common(1)[0][0]


def majority_elements(nums: Sequence[int]) -> list[int]:
    """Values occurring more than ``len(nums) // 3`` times, in order of first appearance."""
    threshold = len(nums) // 3
    return [value for value, count in Counter(nums).items() if count > threshold]


def product_except_self(nums: Sequence[int]) -> list[int]:
    """For each position, the product of every other element."""
    prefixes = [1, *accumulate(nums[:-1], lambda acc, x: acc * x)] if nums else []
    result = list(prefixes)
    suffix = 1
    for index in reversed(range(len(nums))):
        result[index] *= suffix
        suffix *= nums[index]
    return result


def find_duplicate(nums: Sequence[int]) -> int:
    """The first value seen twice, or 0 if every value is distinct."""
    seen: set[int] = set()
    for value in nums:
        if value in seen:
            return value
        seen.add(value)
    return 0


def max_subarray_sum(nums: Sequence[int]) -> int:
    """Largest sum of a non-empty contiguous subarray."""
    if not nums:
        raise ValueError("nums must not be empty")
    running = 0
    best = nums[0]
    for value in nums:
        running = max(running, 0) + value
        best = max(best, running)
    return best


def max_absolute_sum(nums: Sequence[int]) -> int:
    """Largest absolute value of the sum of any (possibly empty) contiguous subarray."""
    best_max = best_min = run_max = run_min = 0
    for value in nums:
        run_max = max(value, run_max + value)
        best_max = max(best_max, run_max)
        run_min = min(value, run_min + value)
        best_min = min(best_min, run_min)
    return max(abs(best_max), abs(best_min))


def increasing_triplet(nums: Sequence[int]) -> bool:
    """Whether some ``i < j < k`` has ``nums[i] < nums[j] < nums[k]``."""
    first = second = math.inf
    for value in nums:
        if value <= first:
            first = value
        elif value <= second:
            second = value
        else:
            return True
    return False


def can_jump(nums: Sequence[int]) -> bool:
    """Whether the last index can be reached, each value being the longest jump from it."""
    reach = 0
    for index, step in enumerate(nums):
        if index > reach:
            return False
        reach = max(reach, index + step)
    return True


def merge_intervals(intervals: Sequence[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping ``[start, end]`` intervals; the input is left untouched."""
    merged: list[list[int]] = []
    for start, end in sorted(intervals, key=lambda interval: interval[0]):
        if merged and start <= merged[-1][1]:
            merged[-1][1] = max(merged[-1][1], end)
        else:
            merged.append([start, end])
    return merged


def array_pair_sum(nums: Sequence[int]) -> int:
    """Largest sum of pair minimums when the values are grouped into pairs."""
    return sum(sorted(nums)[:-1:2])


def sort_colors(nums: MutableSequence[int]) -> None:
    """Sort a sequence of 0s, 1s and 2s in place; any other value counts as 2."""
    counts = Counter(nums)
    red, white = counts[0], counts[1]
    blue = len(nums) - red - white
    nums[:] = [0] * red + [1] * white + [2] * blue


def merge_sorted(
    nums1: MutableSequence[int], m: int, nums2: Sequence[int], n: int
) -> None:
    """Place ``nums2`` after the first ``m`` values of ``nums1`` and sort ``nums1`` in place."""
    end = m + len(nums2)
    if m < 0 or end > len(nums1):
        raise ValueError(
            f"nums1 has room for {len(nums1)} values, {end} are needed"
        )
    nums1[m:end] = nums2
    nums1.sort()


def rotate_matrix(matrix: list[list[int]]) -> None:
    """Rotate a square matrix a quarter turn clockwise, in place."""
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")
    rotated = [list(column) for column in zip(*reversed(matrix))]
    for row, new_row in zip(matrix, rotated):
        row[:] = new_row


def find_content_children(greed: Sequence[int], sizes: Sequence[int]) -> int:
    """Most children content when each gets at most one cookie at least their greed."""
    children = sorted(greed)
    cookies = sorted(sizes)
    child = 0
    for cookie in cookies:
        if child == len(children):
            break
        if children[child] <= cookie:
            child += 1
    return child


def maximum_triplet_value(nums: Sequence[int]) -> int:
    """Largest ``(nums[i] - nums[j]) * nums[k]`` over ``i < j < k``, or 0 if all are negative."""
    best = largest = best_diff = 0
    for value in nums:
        best = max(best, best_diff * value)
        best_diff = max(best_diff, largest - value)
        largest = max(largest, value)
    return best