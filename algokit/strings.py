"""String algorithms: prefixes, matching, brackets and word subsequences."""

from __future__ import annotations

from collections.abc import Sequence
from functools import reduce
from itertools import zip_longest

_PAIRS = {")": "(", "}": "{", "]": "["}
_OPENERS = frozenset(_PAIRS.values())


def longest_common_prefix(strs: Sequence[str]) -> str:
    """Return the longest prefix shared by every string in ``strs``."""
    if not strs:
        return ""
    prefix = strs[0]
    for word in strs[1:]:
        while not word.startswith(prefix):
            prefix = prefix[:-1]
            if not prefix:
                return ""
    return prefix


def merge_alternately(word1: str, word2: str) -> str:
    """Interleave the letters of two words, appending the rest of the longer one."""
    return "".join(a + b for a, b in zip_longest(word1, word2, fillvalue=""))


def is_valid_parentheses(s: str) -> bool:
    """Tell whether every bracket in ``s`` is closed in the right order.

    Any character that is not an opening bracket is treated as a closer.
    """
    stack: list[str] = []
    for char in s:
        if char in _OPENERS:
            stack.append(char)
        elif not stack or _PAIRS.get(char) != stack[-1]:
            return False
        else:
            stack.pop()
    return not stack


def find_index(haystack: str, needle: str) -> int:
    """Index of the first occurrence of ``needle`` in ``haystack``, or -1."""
    if not needle:
        return 0
    return haystack.find(needle)


def find_the_difference(s: str, t: str) -> str:
    """Return the one extra character that ``t`` holds compared with ``s``."""
    code = reduce(lambda acc, char: acc ^ ord(char), s + t, 0)
    return chr(code)


def length_of_last_word(s: str) -> int:
    """Length of the last space-separated word, ignoring trailing spaces."""
    return len(s.rstrip(" ").rsplit(" ", 1)[-1])


def find_words_containing(words: Sequence[str], x: str) -> list[int]:
    """Indices of the words that contain the character ``x``."""
    return [i for i, word in enumerate(words) if x in word]


def _differs_by_one(a: str, b: str) -> bool:
    return len(a) == len(b) and sum(x != y for x, y in zip(a, b)) == 1


def _trace(words: Sequence[str], prev: list[int], end: int) -> list[str]:
    chain: list[str] = []
    index = end
    while index != -1:
        chain.append(words[index])
        index = prev[index]
    chain.reverse()
    return chain


def longest_hamming_subsequence(
    words: Sequence[str], groups: Sequence[int]
) -> list[str]:
    """Longest subsequence whose neighbours lie in different groups and are
    equal-length words differing in exactly one position."""
    count = len(groups)
    if count == 0:
        return []
    length = [1] * count
    prev = [-1] * count
    best = 0
    for i in range(1, count):
        for j in range(i):
            if (
                groups[i] != groups[j]
                and length[j] + 1 > length[i]
                and _differs_by_one(words[i], words[j])
            ):
                length[i] = length[j] + 1
                prev[i] = j
        if length[i] > length[best]:
            best = i
    return _trace(words, prev, best)


def longest_alternating_subsequence(
    words: Sequence[str], groups: Sequence[int]
) -> list[str]:
    """Longest subsequence of ``words`` whose neighbours lie in different groups."""
    count = len(words)
    if count == 0:
        return []
    length = [1] * count
    prev = [-1] * count
    best_length, end = 1, 0
    for i in range(1, count):
        for j in range(i - 1, -1, -1):
            if groups[i] != groups[j] and length[j] + 1 > length[i]:
                length[i] = length[j] + 1
                prev[i] = j
        if length[i] > best_length:
            best_length, end = length[i], i
    return _trace(words, prev, end)