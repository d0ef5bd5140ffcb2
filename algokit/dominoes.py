"""Puzzles about dominoes: rotations, pairs, tilings and falling rows."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

MOD = 1_000_000_007


def min_domino_rotations(tops: Sequence[int], bottoms: Sequence[int]) -> int:
    """Fewest rotations to make one whole row show the same value, or -1."""

    def rotations_for(value: int) -> int:
        rotate_top = rotate_bottom = 0
        for top, bottom in zip(tops, bottoms):
            if top != value and bottom != value:
                return -1
            if top != value:
                rotate_top += 1
            elif bottom != value:
                rotate_bottom += 1
        return min(rotate_top, rotate_bottom)

    result = rotations_for(tops[0])
    if result != -1:
        return result
    return rotations_for(bottoms[0])


def num_equiv_domino_pairs(dominoes: Sequence[Sequence[int]]) -> int:
    """Count pairs of dominoes that are equal, possibly after turning one round."""
    counts = Counter((min(a, b), max(a, b)) for a, b in dominoes)
    return sum(c * (c - 1) // 2 for c in counts.values())


def num_tilings(n: int) -> int:
    """Ways to tile a 2 x ``n`` board with dominoes and trominoes, modulo 1e9+7."""
    if n < 0:
        raise ValueError("board length must not be negative")
    ways = [1, 1, 2, 5]
    if n < len(ways):
        return ways[n]
    a, b, c = ways[1], ways[2], ways[3]
    for _ in range(4, n + 1):
        a, b, c = b, c, (2 * c + a) % MOD
    return c


def push_dominoes(dominoes: str) -> str:
    """Final state of a row of dominoes pushed left ('L') or right ('R')."""
    n = len(dominoes)
    forces = [0] * n

    force = 0
    for i, state in enumerate(dominoes):
        if state == "R":
            force = n
        elif state == "L":
            force = 0
        else:
            force = max(force - 1, 0)
        forces[i] += force

    force = 0
    for i in range(n - 1, -1, -1):
        state = dominoes[i]
        if state == "L":
            force = n
        elif state == "R":
            force = 0
        else:
            force = max(force - 1, 0)
        forces[i] -= force

    return "".join("R" if f > 0 else "L" if f < 0 else "." for f in forces)