"""Number puzzles: digits, square roots, counting and modular combinatorics."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Sequence
from itertools import accumulate

MOD = 1_000_000_007
_ALPHABET = 26

Matrix = list[list[int]]


def subtract_product_and_sum(n: int) -> int:
    """Product of the decimal digits of ``n`` minus their sum."""
    digits = [int(d) for d in str(n)] if n > 0 else []
    return math.prod(digits) - sum(digits)


def integer_sqrt(x: int) -> int:
    """Square root of ``x`` rounded down; 0 for non-positive input."""
    return math.isqrt(x) if x > 0 else 0


def climb_stairs(n: int) -> int:
    """Ways to climb ``n`` steps taking one or two at a time."""
    if n <= 2:
        return n
    first, second = 1, 2
    for _ in range(3, n + 1):
        first, second = second, first + second
    return second


def triangle_type(nums: Sequence[int]) -> str:
    """Classify three side lengths as equilateral, isosceles, scalene or none."""
    a, b, c = sorted(nums)
    if a + b <= c:
        return "none"
    if a == c:
        return "equilateral"
    if a == b or b == c:
        return "isosceles"
    return "scalene"


def _letter_counts(s: str) -> list[int]:
    counts = [0] * _ALPHABET
    for char in s:
        counts[ord(char) - ord("a")] += 1
    return counts


def length_after_transformations(s: str, t: int) -> int:
    """Length of ``s`` after ``t`` rounds where 'z' becomes "ab" and every
    other letter becomes the next one, modulo 1e9+7."""
    freq = _letter_counts(s)
    for _ in range(t):
        z = freq[-1]
        freq = [z] + freq[:-1]
        freq[1] = (freq[1] + z) % MOD
    return sum(freq) % MOD


def _mat_mul(u: Matrix, v: Matrix) -> Matrix:
    columns = list(zip(*v))
    return [
        [sum(a * b for a, b in zip(row, col)) % MOD for col in columns] for row in u
    ]


def _mat_pow(base: Matrix, exponent: int) -> Matrix:
    size = len(base)
    result = [[int(i == j) for j in range(size)] for i in range(size)]
    while exponent:
        if exponent & 1:
            result = _mat_mul(result, base)
        base = _mat_mul(base, base)
        exponent >>= 1
    return result


def length_after_custom_transformations(s: str, t: int, nums: Sequence[int]) -> int:
    """Length of ``s`` after ``t`` rounds where letter ``i`` becomes the next
    ``nums[i]`` letters of the cyclic alphabet, modulo 1e9+7."""
    step = [[0] * _ALPHABET for _ in range(_ALPHABET)]
    for i, spread in enumerate(nums[:_ALPHABET]):
        for j in range(1, spread + 1):
            step[(i + j) % _ALPHABET][i] = 1
    power = _mat_pow(step, t)
    freq = _letter_counts(s)
    return sum(a * f for row in power for a, f in zip(row, freq)) % MOD


def count_balanced_permutations(num: str) -> int:
    """Distinct permutations of the digit string ``num`` whose digits at even
    and odd positions have equal sums, modulo 1e9+7."""
    digits = [int(c) for c in num]
    total = sum(digits)
    if total % 2:
        return 0
    n = len(digits)
    half_sum, half_len = total // 2, n // 2

    ways = [[0] * (half_len + 1) for _ in range(half_sum + 1)]
    ways[0][0] = 1
    for d in digits:
        for i in range(half_sum, d - 1, -1):
            for j in range(half_len, 0, -1):
                ways[i][j] = (ways[i][j] + ways[i - d][j - 1]) % MOD

    fact = list(accumulate(range(1, n + 1), lambda a, b: a * b % MOD, initial=1))
    result = ways[half_sum][half_len] * fact[half_len] % MOD * fact[n - half_len] % MOD
    for count in Counter(digits).values():
        result = result * pow(fact[count], MOD - 2, MOD) % MOD
    return result