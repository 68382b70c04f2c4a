"""Binary searches over sorted sequences and matrices."""

from __future__ import annotations

from typing import Sequence


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in a rotated sorted sequence of distinct values, or -1."""
    left, right = 0, len(nums) - 1
    while left <= right:
        mid = (left + right) // 2
        if nums[mid] == target:
            return mid
        if nums[left] <= nums[mid]:
            if nums[left] <= target < nums[mid]:
                right = mid - 1
            else:
                left = mid + 1
        elif nums[mid] < target <= nums[right]:
            left = mid + 1
        else:
            right = mid - 1
    return -1


def _bound(nums: Sequence[int], target: int, leftmost: bool) -> int:
    found = -1
    left, right = 0, len(nums) - 1
    while left <= right:
        mid = (left + right) // 2
        if nums[mid] == target:
            found = mid
            if leftmost:
                right = mid - 1
            else:
                left = mid + 1
        elif nums[mid] < target:
            left = mid + 1
        else:
            right = mid - 1
    return found


def search_range(nums: Sequence[int], target: int) -> tuple[int, int]:
    """First and last index of ``target`` in a sorted sequence, or (-1, -1)."""
    return _bound(nums, target, True), _bound(nums, target, False)


def search_insert(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in a sorted sequence, or where it would be inserted."""
    left, right = 0, len(nums) - 1
    while left <= right:
        mid = (left + right) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] < target:
            left = mid + 1
        else:
            right = mid - 1
    return left


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Whether ``target`` occurs in a matrix whose rows and columns are sorted."""
    if not matrix or not matrix[0]:
        return False
    row, col = 0, len(matrix[0]) - 1
    while row < len(matrix) and col >= 0:
        value = matrix[row][col]
        if value == target:
            return True
        if value < target:
            row += 1
        else:
            col -= 1
    return False