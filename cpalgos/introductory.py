"""Introductory counting and construction problems."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import groupby


class NoSolutionError(ValueError):
    """Raised when a problem instance has no valid answer."""


def weird_algorithm(n: int) -> list[int]:
    """Return the Collatz sequence starting at n and ending at 1."""
    sequence = [n]
    while n > 1:
        n = 3 * n + 1 if n % 2 else n // 2
        sequence.append(n)
    return sequence


def missing_number(n: int, numbers: Iterable[int]) -> int:
    """Return the one number of 1..n absent from the n-1 given numbers."""
    values = list(numbers)
    if len(values) != n - 1:
        raise ValueError(f"expected {n - 1} numbers, got {len(values)}")
    return n * (n + 1) // 2 - sum(values)


def longest_repetition(sequence: str) -> int:
    """Return the length of the longest run of one repeated character."""
    if not sequence:
        raise ValueError("sequence must not be empty")
    return max(sum(1 for _ in run) for _, run in groupby(sequence))


def increasing_array_moves(values: Iterable[int]) -> int:
    """Return the minimum total increments that make the array non-decreasing."""
    moves = 0
    highest: int | None = None
    for x in values:
        if highest is not None and x < highest:
            moves += highest - x
        highest = x if highest is None else max(highest, x)
    return moves


def beautiful_permutation(n: int) -> list[int]:
    """Return a permutation of 1..n where no adjacent values differ by one."""
    if n == 1:
        return [1]
    if n in (2, 3):
        raise NoSolutionError("NO SOLUTION")
    if n % 2:
        return list(range(n - 1, 0, -2)) + list(range(n, 0, -2))
    return list(range(2, n + 1, 2)) + list(range(1, n, 2))


def number_spiral(row: int, col: int) -> int:
    """Return the number at (row, col) of the infinite number spiral."""
    z = max(row, col)
    if z % 2:
        return (z - 1) ** 2 + col if z == row else z * z - row + 1
    return z * z - col + 1 if z == row else (z - 1) ** 2 + row


def two_knights(n: int) -> list[int]:
    """For k = 1..n, count placements of two non-attacking knights on a k x k board."""
    return [k * k * (k * k - 1) // 2 - 4 * (k - 1) * (k - 2) for k in range(1, n + 1)]


def two_sets(n: int) -> tuple[list[int], list[int]]:
    """Split 1..n into two sets of equal sum."""
    if (n * (n + 1) // 2) % 2:
        raise NoSolutionError("NO")
    q = n // 4
    if n % 2:
        first = list(range(1, q + 1)) + list(range(n - q, n + 1))
        second = list(range(q + 1, n - q))
    else:
        first = list(range(1, q + 1)) + list(range(n - q + 1, n + 1))
        second = list(range(q + 1, n - q + 1))
    return first, second


def coin_piles(a: int, b: int) -> bool:
    """Return whether both piles can be emptied by removing 1 and 2 coins at a time."""
    if (a + b) % 3:
        return False
    return max(a, b) <= 2 * min(a, b)


def trailing_zeros(n: int) -> int:
    """Return the number of trailing zeros of n!."""
    count = 0
    power = 5
    while power <= n:
        count += n // power
        power *= 5
    return count


def digit_query(k: int) -> int:
    """Return the k-th digit (1-based) of the string 123456789101112..."""
    digits = 1
    block = 9
    while k - block > 0:
        k -= block
        digits += 1
        block = 9 * 10 ** (digits - 1) * digits
    k -= 1
    number = str(10 ** (digits - 1) + k // digits)
    return int(number[k % digits])


__all__: Sequence[str] = (
    "NoSolutionError",
    "weird_algorithm",
    "missing_number",
    "longest_repetition",
    "increasing_array_moves",
    "beautiful_permutation",
    "number_spiral",
    "two_knights",
    "two_sets",
    "coin_piles",
    "trailing_zeros",
    "digit_query",
)