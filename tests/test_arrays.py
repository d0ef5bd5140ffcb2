from collections import Counter

import pytest

from algokit.arrays import (
    build_array,
    can_jump,
    find_even_numbers,
    final_state,
    is_zero_array,
    majority_element,
    max_profit,
    max_profit_multiple,
    merge_sorted,
    min_equal_sum,
    remove_duplicates,
    remove_duplicates_keep_two,
    remove_element,
    rotate,
    set_zeroes,
    sort_colors,
    stable_mountains,
    three_consecutive_odds,
    two_sum,
)


@pytest.mark.parametrize(
    "nums, target", [([2, 7, 11, 15], 9), ([3, 2, 4], 6), ([3, 3], 6)]
)
def test_two_sum_finds_pair(nums, target):
    i, j = two_sum(nums, target)
    assert i < j
    assert nums[i] + nums[j] == target


def test_two_sum_no_pair():
    assert not two_sum([1, 2, 3], 100)


def test_max_profit_increasing_and_decreasing():
    rising = [1, 4, 6, 9]
    assert max_profit(rising) == rising[-1] - rising[0]
    assert max_profit_multiple(rising) == rising[-1] - rising[0]
    falling = [9, 6, 4, 1]
    assert max_profit(falling) == max_profit_multiple(falling)
    assert not max_profit(falling)


@pytest.mark.parametrize("prices", [[7, 1, 5, 3, 6, 4], [3, 8, 2, 9, 1], [5]])
def test_multiple_trades_never_worse(prices):
    assert max_profit_multiple(prices) >= max_profit(prices)


def test_max_profit_worked_example():
    assert max_profit([7, 1, 5, 3, 6, 4]) == 5


def test_three_consecutive_odds():
    assert three_consecutive_odds([1, 2, 34, 3, 4, 5, 7, 23, 12])
    assert not three_consecutive_odds([2, 6, 4, 1])
    assert not three_consecutive_odds([1, 3, 2, 5, 7])


@pytest.mark.parametrize("value, others", [(3, [1, 2]), (2, [1, 1, 2, 2, 1])])
def test_majority_element(value, others):
    nums = [value] * (len(others) + 1) + others
    assert majority_element(nums) == value


@pytest.mark.parametrize("k", [0, 1, 3, 7, 10])
def test_rotate_inverse(k):
    original = [1, 2, 3, 4, 5, 6, 7]
    nums = list(original)
    rotate(nums, k)
    rotate(nums, len(original) - k % len(original))
    assert nums == original


def test_rotate_by_one():
    original = [1, 2, 3, 4]
    nums = list(original)
    rotate(nums, 1)
    assert nums == [original[-1]] + original[:-1]


def test_build_array():
    identity = list(range(5))
    assert build_array(identity) == identity
    nums = [5, 0, 1, 2, 3, 4]
    result = build_array(nums)
    assert all(result[i] == nums[nums[i]] for i in range(len(nums)))


def test_find_even_numbers_invariants():
    digits = [2, 2, 8, 8, 2]
    result = find_even_numbers(digits)
    assert result == sorted(set(result))
    available = Counter(digits)
    for number in result:
        assert number % 2 == 0 and 100 <= number <= 999
        assert Counter(int(d) for d in str(number)) <= available


def test_find_even_numbers_worked_example():
    assert find_even_numbers([2, 1, 3, 0]) == [
        102, 120, 130, 132, 210, 230, 302, 310, 312, 320,
    ]


def test_find_even_numbers_none_possible():
    assert not find_even_numbers([3, 7, 5])


def test_remove_duplicates():
    original = [0, 0, 1, 1, 1, 2, 2, 3, 3, 4]
    nums = list(original)
    k = remove_duplicates(nums)
    assert nums[:k] == sorted(set(original))


def test_remove_duplicates_empty():
    nums = []
    assert remove_duplicates(nums) == len(nums)


def test_remove_element():
    original = [0, 1, 2, 2, 3, 0, 4, 2]
    nums = list(original)
    k = remove_element(nums, 2)
    assert k == len(original) - original.count(2)
    assert Counter(nums[:k]) == Counter(v for v in original if v != 2)


def test_remove_duplicates_keep_two():
    original = [0, 0, 1, 1, 1, 1, 2, 3, 3]
    nums = list(original)
    k = remove_duplicates_keep_two(nums)
    assert nums[:k] == sorted(nums[:k])
    assert Counter(nums[:k]) == {v: min(c, 2) for v, c in Counter(original).items()}


def test_remove_duplicates_keep_two_short():
    nums = [1, 1]
    assert remove_duplicates_keep_two(nums) == len(nums)


def test_min_equal_sum_worked_example():
    assert min_equal_sum([3, 2, 0, 1, 0], [6, 5, 0]) == 12


def test_min_equal_sum_impossible():
    assert min_equal_sum([2, 0, 2, 0], [1, 4]) == -1


def test_min_equal_sum_symmetric():
    a, b = [1, 0, 5], [0, 0, 9]
    assert min_equal_sum(a, b) == min_equal_sum(b, a)
    equal = [4, 4]
    assert min_equal_sum(equal, list(equal)) == sum(equal)


def test_final_state_identity_cases():
    nums = [3, 1, 2]
    assert final_state(list(nums), 0, 5) == nums
    assert final_state(list(nums), 4, 1) == nums


def test_final_state_in_place():
    nums = [2, 1, 3, 5, 6]
    result = final_state(nums, 5, 2)
    assert result is nums
    assert result == [8, 4, 6, 5, 6]


def test_stable_mountains():
    height = [1, 2, 3, 4, 5]
    assert stable_mountains(height, min(height) - 1) == list(range(1, len(height)))
    assert not stable_mountains(height, max(height))
    assert stable_mountains(height, 2) == [3, 4]


def test_is_zero_array():
    assert is_zero_array([1, 0, 1], [[0, 2]])
    assert not is_zero_array([4, 3, 2, 1], [[1, 3], [0, 2]])
    assert is_zero_array([2, 2], [[0, 1], [0, 1]])


def test_can_jump():
    assert can_jump([2, 3, 1, 1, 4])
    assert not can_jump([3, 2, 1, 0, 4])
    assert can_jump([0])


def test_set_zeroes_rows_and_columns():
    original = [[0, 1, 2, 0], [3, 4, 5, 2], [1, 3, 1, 5]]
    matrix = [list(row) for row in original]
    set_zeroes(matrix)
    zero_rows = {r for r, row in enumerate(original) if 0 in row}
    zero_cols = {c for row in original for c, v in enumerate(row) if v == 0}
    for r, row in enumerate(matrix):
        for c, value in enumerate(row):
            if r in zero_rows or c in zero_cols:
                assert value == 0
            else:
                assert value == original[r][c]


def test_set_zeroes_without_zero_is_unchanged():
    original = [[1, 2], [3, 4]]
    matrix = [list(row) for row in original]
    set_zeroes(matrix)
    assert matrix == original


@pytest.mark.parametrize("nums", [[2, 0, 2, 1, 1, 0], [2, 0, 1], [], [1]])
def test_sort_colors(nums):
    expected = sorted(nums)
    sort_colors(nums)
    assert nums == expected


@pytest.mark.parametrize(
    "a, b", [([1, 2, 3], [2, 5, 6]), ([1], []), ([], [1]), ([4, 5], [1, 2, 3])]
)
def test_merge_sorted(a, b):
    nums1 = a + [0] * len(b)
    merge_sorted(nums1, len(a), b, len(b))
    assert nums1 == sorted(a + b)