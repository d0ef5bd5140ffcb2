"""Algorithms over lists of integers.

Functions documented as working in place modify their argument, as the
callers of these classic routines expect.
"""

from __future__ import annotations

import heapq
from collections import Counter
from itertools import accumulate, combinations, pairwise


def two_sum(nums: list[int], target: int) -> list[int]:
    """Return the first pair of indices whose values add up to ``target``, or []."""
    for (i, a), (j, b) in combinations(enumerate(nums), 2):
        if a + b == target:
            return [i, j]
    return []


def max_profit(prices: list[int]) -> int:
    """Best profit from a single buy followed by a single sell."""
    best = 0
    lowest = float("inf")
    for price in prices:
        lowest = min(lowest, price)
        best = max(best, price - lowest)
    return int(best)


def max_profit_multiple(prices: list[int]) -> int:
    """Best profit when any number of buy/sell transactions are allowed."""
    return sum(max(today - yesterday, 0) for yesterday, today in pairwise(prices))


def three_consecutive_odds(arr: list[int]) -> bool:
    """Tell whether three odd numbers appear in a row."""
    run = 0
    for num in arr:
        run = run + 1 if num % 2 else 0
        if run == 3:
            return True
    return False


def majority_element(nums: list[int]) -> int:
    """Return the element that occurs more than half of the time."""
    return sorted(nums)[len(nums) // 2]


def rotate(nums: list[int], k: int) -> None:
    """Rotate ``nums`` right by ``k`` steps, in place."""
    if not nums:
        return
    k %= len(nums)
    nums[:] = nums[len(nums) - k:] + nums[: len(nums) - k]


def build_array(nums: list[int]) -> list[int]:
    """Return ``[nums[nums[i]] for each i]`` for a permutation ``nums``."""
    return [nums[i] for i in nums]


def find_even_numbers(digits: list[int]) -> list[int]:
    """All even three-digit numbers that can be formed from ``digits``, ascending."""
    available = Counter(digits)
    return [
        number
        for number in range(100, 1000, 2)
        if Counter(int(d) for d in str(number)) <= available
    ]


def remove_duplicates(nums: list[int]) -> int:
    """Compact a sorted list in place so each value appears once; return the count."""
    if not nums:
        return 0
    k = 1
    for value in nums[1:]:
        if value != nums[k - 1]:
            nums[k] = value
            k += 1
    return k


def remove_element(nums: list[int], val: int) -> int:
    """Move every value other than ``val`` to the front, in place; return the count."""
    k = 0
    for value in list(nums):
        if value != val:
            nums[k] = value
            k += 1
    return k


def min_equal_sum(nums1: list[int], nums2: list[int]) -> int:
    """Smallest equal sum reachable by replacing zeros with positive integers, or -1."""
    zeros1, zeros2 = nums1.count(0), nums2.count(0)
    sum1, sum2 = sum(nums1) + zeros1, sum(nums2) + zeros2
    if (not zeros1 and sum2 > sum1) or (not zeros2 and sum1 > sum2):
        return -1
    return max(sum1, sum2)


def final_state(nums: list[int], k: int, multiplier: int) -> list[int]:
    """Multiply the first minimum by ``multiplier`` ``k`` times, in place; return nums."""
    for _ in range(k):
        index = min(range(len(nums)), key=nums.__getitem__)
        nums[index] *= multiplier
    return nums


def stable_mountains(height: list[int], threshold: int) -> list[int]:
    """Indices whose left neighbour is strictly higher than ``threshold``."""
    return [i for i, h in enumerate(height[:-1], start=1) if h > threshold]


def is_zero_array(nums: list[int], queries: list[list[int]]) -> bool:
    """Tell whether the range-decrement queries can bring every value to zero."""
    delta = [0] * (len(nums) + 1)
    for left, right in queries:
        delta[left] += 1
        delta[right + 1] -= 1
    return all(
        available >= needed for available, needed in zip(accumulate(delta), nums)
    )


def can_jump(nums: list[int]) -> bool:
    """Tell whether the last index can be reached from the first."""
    reach = 0
    for i, step in enumerate(nums):
        if i > reach:
            return False
        reach = max(reach, i + step)
    return True


def set_zeroes(matrix: list[list[int]]) -> None:
    """Zero every row and column that holds a zero, in place."""
    zero_rows = {r for r, row in enumerate(matrix) if 0 in row}
    zero_cols = {c for row in matrix for c, value in enumerate(row) if value == 0}
    for r, row in enumerate(matrix):
        if r in zero_rows:
            row[:] = [0] * len(row)
        else:
            for c in zero_cols:
                row[c] = 0


def sort_colors(nums: list[int]) -> None:
    """Sort a list of 0s, 1s and 2s in place; any other value counts as 2."""
    counts = Counter(nums)
    twos = len(nums) - counts[0] - counts[1]
    nums[:] = [0] * counts[0] + [1] * counts[1] + [2] * twos


def remove_duplicates_keep_two(nums: list[int]) -> int:
    """Compact a sorted list in place so each value appears at most twice."""
    if len(nums) <= 2:
        return len(nums)
    k = 2
    for value in nums[2:]:
        if value != nums[k - 2]:
            nums[k] = value
            k += 1
    return k


def merge_sorted(nums1: list[int], m: int, nums2: list[int], n: int) -> None:
    """Merge the first ``n`` of ``nums2`` into the first ``m`` of ``nums1``, in place."""
    nums1[: m + n] = list(heapq.merge(nums1[:m], nums2[:n]))