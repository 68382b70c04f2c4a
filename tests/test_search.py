import bisect

import pytest

from algokit.search import search_insert, search_matrix, search_range, search_rotated

BASE = [0, 1, 2, 4, 5, 6, 7]


@pytest.mark.parametrize("shift", range(len(BASE)))
def test_search_rotated_finds_every_value(shift):
    nums = BASE[shift:] + BASE[:shift]
    for value in BASE:
        index = search_rotated(nums, value)
        assert nums[index] == value


@pytest.mark.parametrize("shift", range(len(BASE)))
@pytest.mark.parametrize("missing", [-5, 3, 8])
def test_search_rotated_missing(shift, missing):
    nums = BASE[shift:] + BASE[:shift]
    assert search_rotated(nums, missing) == -1


def test_search_rotated_empty():
    assert search_rotated([], 1) == -1


@pytest.mark.parametrize("nums", [[5, 7, 7, 8, 8, 10], [1, 1, 1, 1], [2], [], [1, 2, 3, 3, 3, 4]])
@pytest.mark.parametrize("target", [0, 1, 3, 7, 8, 10, 11])
def test_search_range_matches_bisect(nums, target):
    lo = bisect.bisect_left(nums, target)
    hi = bisect.bisect_right(nums, target)
    expected = (lo, hi - 1) if lo < hi else (-1, -1)
    assert search_range(nums, target) == expected


@pytest.mark.parametrize("nums", [[1, 3, 5, 6], [], [4], [-3, 0, 9, 12, 20]])
@pytest.mark.parametrize("target", [-4, 0, 1, 2, 5, 7, 12, 25])
def test_search_insert_matches_bisect(nums, target):
    assert search_insert(nums, target) == bisect.bisect_left(nums, target)


MATRIX = [[1, 3, 5, 7], [10, 11, 16, 20], [23, 30, 34, 60]]


def test_search_matrix_finds_every_element():
    for row in MATRIX:
        for value in row:
            assert search_matrix(MATRIX, value) is True


@pytest.mark.parametrize("target", [0, 2, 13, 35, 61])
def test_search_matrix_missing(target):
    assert search_matrix(MATRIX, target) is False


def test_search_matrix_empty():
    assert search_matrix([], 1) is False
    assert search_matrix([[]], 1) is False