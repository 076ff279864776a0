"""Subsequence, scheduling and path-choice problems solved by dynamic programming."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Hashable, Iterable, Sequence
from typing import TypeVar

from .dp import MOD

T = TypeVar("T", bound=Hashable)


def longest_increasing_subsequence(values: Iterable[int]) -> int:
    """Return the length of the longest strictly increasing subsequence."""
    tails: list[int] = []
    for x in values:
        position = bisect_left(tails, x)
        if position == len(tails):
            tails.append(x)
        else:
            tails[position] = x
    return len(tails)


class _Fenwick:
    """Prefix sums modulo MOD over positions 1..size."""

    def __init__(self, size: int) -> None:
        self._tree = [0] * (size + 1)

    def add(self, position: int, amount: int) -> None:
        while position < len(self._tree):
            self._tree[position] = (self._tree[position] + amount) % MOD
            position += position & -position

    def prefix(self, position: int) -> int:
        total = 0
        while position > 0:
            total = (total + self._tree[position]) % MOD
            position -= position & -position
        return total


def count_increasing_subsequences(values: Iterable[int]) -> int:
    """Count non-empty strictly increasing subsequences, modulo 10**9+7."""
    items = list(values)
    ranks = {value: rank for rank, value in enumerate(sorted(set(items)), start=1)}
    tree = _Fenwick(len(ranks))
    total = 0
    for x in items:
        rank = ranks[x]
        ways = (tree.prefix(rank - 1) + 1) % MOD
        tree.add(rank, ways)
        total = (total + ways) % MOD
    return total


def longest_common_subsequence(first: Iterable[T], second: Iterable[T]) -> list[T]:
    """Return one longest common subsequence of the two sequences."""
    a = list(first)
    b = list(second)
    table = [[0] * (len(b) + 1) for _ in range(len(a) + 1)]
    for i, x in enumerate(a, start=1):
        row, above = table[i], table[i - 1]
        for j, y in enumerate(b, start=1):
            row[j] = max(above[j], row[j - 1], above[j - 1] + (x == y))
    result: list[T] = []
    i, j = len(a), len(b)
    while i > 0 and j > 0:
        if a[i - 1] == b[j - 1]:
            result.append(a[i - 1])
            i -= 1
            j -= 1
        elif table[i - 1][j] > table[i][j - 1]:
            i -= 1
        else:
            j -= 1
    result.reverse()
    return result


def max_project_reward(projects: Iterable[tuple[int, int, int]]) -> int:
    """Return the largest total reward of non-overlapping (start, end, reward) projects.

    A project ending on the day another starts overlaps it.
    """
    items = sorted((end, start, reward) for start, end, reward in projects)
    if any(start > end for end, start, _ in items):
        raise ValueError("a project cannot end before it starts")
    ends = [end for end, _, _ in items]
    best = [0]
    for _end, start, reward in items:
        earlier = bisect_left(ends, start)
        best.append(max(best[-1], reward + best[earlier]))
    return best[-1]


def elevator_rides(weights: Iterable[int], capacity: int) -> int:
    """Return the fewest elevator rides that carry everyone, at most capacity per ride."""
    items = list(weights)
    if not items:
        raise ValueError("weights must not be empty")
    if any(w <= 0 or w > capacity for w in items):
        raise ValueError("every weight must be positive and fit in the elevator")
    best: list[tuple[int, int]] = [(1, 0)] * (1 << len(items))
    for mask in range(1, 1 << len(items)):
        options = []
        for i, w in enumerate(items):
            if mask >> i & 1:
                rides, load = best[mask ^ (1 << i)]
                if load + w > capacity:
                    options.append((rides + 1, w))
                else:
                    options.append((rides, load + w))
        best[mask] = min(options)
    return best[-1][0]


def mountain_range(heights: Sequence[int]) -> int:
    """Return the most mountains a glide can visit, moving only to strictly lower ones."""
    h = list(heights)
    n = len(h)
    if n == 0:
        return 0
    next_higher = [n] * n
    prev_higher = [-1] * n
    stack: list[int] = []
    for i, x in enumerate(h):
        while stack and h[stack[-1]] < x:
            next_higher[stack.pop()] = i
        stack.append(i)
    stack = []
    for i in reversed(range(n)):
        while stack and h[stack[-1]] < h[i]:
            prev_higher[stack.pop()] = i
        stack.append(i)
    reach = [0] * n

    def at(i: int) -> int:
        return reach[i] if 0 <= i < n else 0

    for _, i in sorted(((x, i) for i, x in enumerate(h)), reverse=True):
        reach[i] = 1 + max(at(prev_higher[i]), at(next_higher[i]))
    return max(reach)


def minimal_grid_path(grid: Sequence[str]) -> str:
    """Return the lexicographically smallest right/down path string across a square grid."""
    rows = list(grid)
    n = len(rows)
    if n == 0 or any(len(row) != n for row in rows):
        raise ValueError("grid must be a non-empty square")
    path = [rows[0][0]]
    frontier = {(0, 0)}
    for _ in range(2 * n - 2):
        candidates = {
            (i + di, j + dj)
            for i, j in frontier
            for di, dj in ((1, 0), (0, 1))
            if i + di < n and j + dj < n
        }
        letter = min(rows[i][j] for i, j in candidates)
        frontier = {(i, j) for i, j in candidates if rows[i][j] == letter}
        path.append(letter)
    return "".join(path)


__all__: Sequence[str] = (
    "longest_increasing_subsequence",
    "count_increasing_subsequences",
    "longest_common_subsequence",
    "max_project_reward",
    "elevator_rides",
    "mountain_range",
    "minimal_grid_path",
)