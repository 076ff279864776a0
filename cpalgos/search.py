"""Exhaustive search and construction puzzles: strings, codes, paths and queens."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterator, Sequence
from string import ascii_uppercase

from .introductory import NoSolutionError

_GRID = 7
_STEPS = _GRID * _GRID - 1
_BOARD = 8


def palindrome_reorder(text: str) -> str:
    """Rearrange the upper-case letters of text into a palindrome.

    Raises NoSolutionError when more than one letter occurs an odd number of times.
    """
    if any(ch not in ascii_uppercase for ch in text):
        raise ValueError("text must consist of upper-case letters A-Z")
    counts = Counter(text)
    odd = [ch for ch in ascii_uppercase if counts[ch] % 2]
    if len(odd) > 1:
        raise NoSolutionError("NO SOLUTION")
    half = "".join(
        ch * (counts[ch] // 2) for ch in ascii_uppercase if counts[ch] % 2 == 0
    )
    middle = "".join(ch * counts[ch] for ch in odd)
    return half + middle + half[::-1]


def _advance(chars: list[str]) -> bool:
    """Turn chars into the next lexicographic permutation; False when it was the last."""
    pivot = next(
        (i for i in reversed(range(len(chars) - 1)) if chars[i] < chars[i + 1]), None
    )
    if pivot is None:
        return False
    swap = next(j for j in reversed(range(len(chars))) if chars[j] > chars[pivot])
    chars[pivot], chars[swap] = chars[swap], chars[pivot]
    chars[pivot + 1 :] = reversed(chars[pivot + 1 :])
    return True


def _permutations(text: str) -> Iterator[str]:
    chars = sorted(text)
    yield "".join(chars)
    while _advance(chars):
        yield "".join(chars)


def creating_strings(text: str) -> list[str]:
    """Return every distinct rearrangement of text in lexicographic order."""
    return list(_permutations(text))


def gray_code(n: int) -> list[str]:
    """Return the n-bit reflected Gray code as bit strings."""
    if n < 1:
        raise ValueError("n must be at least 1")
    return [format(i ^ (i >> 1), f"0{n}b") for i in range(1 << n)]


def _hanoi(n: int, source: int, target: int, spare: int) -> Iterator[tuple[int, int]]:
    if n == 0:
        return
    yield from _hanoi(n - 1, source, spare, target)
    yield source, target
    yield from _hanoi(n - 1, spare, target, source)


def tower_of_hanoi(n: int) -> list[tuple[int, int]]:
    """Return the moves (from, to) that carry n disks from stack 1 to stack 3."""
    if n < 0:
        raise ValueError("n must not be negative")
    return list(_hanoi(n, 1, 3, 2))


def grid_paths(pattern: str) -> int:
    """Count paths through a 7x7 grid from the upper-left to the lower-left corner.

    The path visits every square once; pattern holds 48 steps, each one of
    U, D, L, R, or ? for any direction.
    """
    if len(pattern) != _STEPS:
        raise ValueError(f"pattern must have {_STEPS} steps")
    if set(pattern) - set("UDLR?"):
        raise ValueError("pattern may only contain U, D, L, R and ?")
    visited = [[False] * _GRID for _ in range(_GRID)]
    goal = (_GRID - 1, 0)

    def free(i: int, j: int) -> bool:
        return 0 <= i < _GRID and 0 <= j < _GRID and not visited[i][j]

    def walk(x: int, y: int, step: int) -> int:
        if (x, y) == goal:
            return 1 if step == _STEPS else 0
        visited[x][y] = True
        move = pattern[step]
        total = 0
        if move in "U?" and x > 0 and free(x - 1, y):
            splits = not free(x - 2, y) and free(x - 1, y - 1) and free(x - 1, y + 1)
            if not splits or (x - 1, y) == goal:
                total += walk(x - 1, y, step + 1)
        if move in "D?" and x < _GRID - 1 and free(x + 1, y):
            if not (not free(x + 2, y) and free(x + 1, y - 1) and free(x + 1, y + 1)):
                total += walk(x + 1, y, step + 1)
        if move in "L?" and y > 0 and free(x, y - 1):
            if not (not free(x, y - 2) and free(x - 1, y - 1) and free(x + 1, y - 1)):
                total += walk(x, y - 1, step + 1)
        if move in "R?" and y < _GRID - 1 and free(x, y + 1):
            if not (not free(x, y + 2) and free(x - 1, y + 1) and free(x + 1, y + 1)):
                total += walk(x, y + 1, step + 1)
        visited[x][y] = False
        return total

    return walk(0, 0, 0)


def queen_placements(board: Sequence[str]) -> int:
    """Count ways to place eight non-attacking queens on free ('.') squares."""
    rows = list(board)
    if len(rows) != _BOARD or any(len(row) != _BOARD for row in rows):
        raise ValueError("board must be 8 rows of 8 characters")
    free_columns = [
        [col for col, cell in enumerate(row) if cell == "."] for row in rows
    ]

    def place(row: int, columns: int, diagonals: int, anti: int) -> int:
        if row == _BOARD:
            return 1
        total = 0
        for col in free_columns[row]:
            d = row - col + _BOARD
            a = row + col
            if columns >> col & 1 or diagonals >> d & 1 or anti >> a & 1:
                continue
            total += place(row + 1, columns | 1 << col, diagonals | 1 << d, anti | 1 << a)
        return total

    return place(0, 0, 0, 0)


__all__: Sequence[str] = (
    "palindrome_reorder",
    "creating_strings",
    "gray_code",
    "tower_of_hanoi",
    "grid_paths",
    "queen_placements",
)