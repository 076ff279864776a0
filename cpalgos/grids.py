"""Shortest routes through character grids."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

from .introductory import NoSolutionError

Cell = tuple[int, int]

# Order in which neighbours are explored: up, down, left, right.
_MOVES: tuple[tuple[int, int, str], ...] = (
    (-1, 0, "U"),
    (1, 0, "D"),
    (0, -1, "L"),
    (0, 1, "R"),
)


def _find(rows: Sequence[str], mark: str) -> Cell:
    for i, row in enumerate(rows):
        j = row.find(mark)
        if j >= 0:
            return i, j
    raise ValueError(f"grid has no {mark!r} cell")


def labyrinth(grid: Sequence[str]) -> str:
    """Return a shortest path from 'A' to 'B' as a string of U, D, L, R moves.

    Walls are '#'. Raises NoSolutionError when B cannot be reached.
    """
    rows = list(grid)
    if not rows or any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("grid must be a non-empty rectangle")
    height, width = len(rows), len(rows[0])
    start = _find(rows, "A")
    end = _find(rows, "B")
    came_from: dict[Cell, tuple[Cell, str]] = {}
    seen = {start}
    queue: deque[Cell] = deque([start])
    while queue:
        cell = queue.popleft()
        if cell == end:
            steps: list[str] = []
            while cell != start:
                cell, step = came_from[cell]
                steps.append(step)
            return "".join(reversed(steps))
        x, y = cell
        for dx, dy, step in _MOVES:
            nxt = (x + dx, y + dy)
            if (
                0 <= nxt[0] < height
                and 0 <= nxt[1] < width
                and nxt not in seen
                and rows[nxt[0]][nxt[1]] != "#"
            ):
                seen.add(nxt)
                came_from[nxt] = (cell, step)
                queue.append(nxt)
    raise NoSolutionError("NO")


__all__: Sequence[str] = ("labyrinth",)