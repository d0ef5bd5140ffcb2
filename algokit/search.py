"""Graph, greedy and shortest-path searches."""

from __future__ import annotations

import heapq
import math
from bisect import bisect_left
from collections.abc import Iterator, Sequence

_UNREACHABLE = 0x3F3F3F3F


def find_center(edges: Sequence[Sequence[int]]) -> int:
    """Return the centre node of a star graph given its edges."""
    first, second = edges[0], edges[1]
    if first[0] == second[0] or first[0] == second[1]:
        return first[0]
    return first[1]


def _can_assign(
    k: int, tasks: list[int], workers: list[int], pills: int, strength: int
) -> bool:
    available = workers[len(workers) - k :]
    remaining = pills
    for task in reversed(tasks[:k]):
        if available[-1] >= task:
            available.pop()
            continue
        index = bisect_left(available, task - strength)
        if index == len(available):
            return False
        del available[index]
        remaining -= 1
        if remaining < 0:
            return False
    return True


def max_task_assign(
    tasks: Sequence[int], workers: Sequence[int], pills: int, strength: int
) -> int:
    """Most tasks that workers can complete, each pill adding ``strength``
    to one worker."""
    sorted_tasks = sorted(tasks)
    sorted_workers = sorted(workers)
    low, high = 0, min(len(sorted_tasks), len(sorted_workers))
    while low < high:
        mid = (low + high + 1) // 2
        if _can_assign(mid, sorted_tasks, sorted_workers, pills, strength):
            low = mid
        else:
            high = mid - 1
    return low


def maximum_value_sum(
    nums: Sequence[int], k: int, edges: Sequence[Sequence[int]]
) -> int:
    """Largest sum reachable by XOR-ing both ends of tree edges with ``k``.

    On a tree any even number of nodes can be toggled, so the edges
    themselves do not restrict the answer.
    """
    even: float = 0
    odd: float = -math.inf
    for value in nums:
        toggled = value ^ k
        even, odd = max(even + value, odd + toggled), max(odd + value, even + toggled)
    return int(even)


def _neighbours(
    r: int, c: int, rows: int, cols: int, directions: Sequence[tuple[int, int]]
) -> Iterator[tuple[int, int]]:
    for dr, dc in directions:
        nr, nc = r + dr, c + dc
        if 0 <= nr < rows and 0 <= nc < cols:
            yield nr, nc


def min_time_to_reach(move_time: Sequence[Sequence[int]]) -> int:
    """Earliest arrival at the bottom-right room when every move takes one
    second and room ``(i, j)`` cannot be entered before ``move_time[i][j]``."""
    rows, cols = len(move_time), len(move_time[0])
    directions = ((1, 0), (-1, 0), (0, 1), (0, -1))
    dist = {(0, 0): 0}
    done: set[tuple[int, int]] = set()
    heap = [(0, 0, 0)]
    while heap:
        _, r, c = heapq.heappop(heap)
        if (r, c) in done:
            continue
        done.add((r, c))
        for cell in _neighbours(r, c, rows, cols, directions):
            arrival = max(dist[(r, c)], move_time[cell[0]][cell[1]]) + 1
            if arrival < dist.get(cell, _UNREACHABLE):
                dist[cell] = arrival
                heapq.heappush(heap, (arrival, *cell))
    return dist.get((rows - 1, cols - 1), _UNREACHABLE)


def min_time_to_reach_alternating(move_time: Sequence[Sequence[int]]) -> int:
    """Like :func:`min_time_to_reach`, but moves alternately take one and two
    seconds. Returns -1 if the last room is never reached."""
    rows, cols = len(move_time), len(move_time[0])
    directions = ((0, 1), (1, 0), (-1, 0), (0, -1))
    visited = {(0, 0)}
    heap = [(0, 0, 0, 0)]
    while heap:
        time, moves, r, c = heapq.heappop(heap)
        if (r, c) == (rows - 1, cols - 1):
            return time
        for cell in _neighbours(r, c, rows, cols, directions):
            if cell in visited:
                continue
            visited.add(cell)
            arrival = max(time, move_time[cell[0]][cell[1]]) + (1 if moves % 2 == 0 else 2)
            heapq.heappush(heap, (arrival, moves + 1, *cell))
    return -1