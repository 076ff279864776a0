"""Classic dynamic-programming counting and optimisation problems."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .introductory import NoSolutionError

MOD = 10**9 + 7


def _positive(values: Iterable[int], what: str) -> list[int]:
    items = list(values)
    if any(v <= 0 for v in items):
        raise ValueError(f"{what} must be positive")
    return items


def dice_combinations(n: int) -> int:
    """Count ordered dice-roll sequences summing to n, modulo 10**9+7."""
    if n < 0:
        raise ValueError("n must not be negative")
    ways = [1]
    for i in range(1, n + 1):
        ways.append(sum(ways[max(0, i - 6) : i]) % MOD)
    return ways[n]


def minimizing_coins(coins: Iterable[int], target: int) -> int:
    """Return the fewest coins summing to target; raise NoSolutionError if impossible."""
    values = _positive(coins, "coins")
    best: list[int | None] = [0]
    for i in range(1, target + 1):
        options = [best[i - c] for c in values if c <= i and best[i - c] is not None]
        best.append(min(options) + 1 if options else None)
    result = best[target]
    if result is None:
        raise NoSolutionError("-1")
    return result


def ordered_coin_combinations(coins: Iterable[int], target: int) -> int:
    """Count ordered coin sequences summing to target, modulo 10**9+7."""
    values = _positive(coins, "coins")
    ways = [1]
    for i in range(1, target + 1):
        ways.append(sum(ways[i - c] for c in values if c <= i) % MOD)
    return ways[target]


def unordered_coin_combinations(coins: Iterable[int], target: int) -> int:
    """Count coin multisets summing to target, modulo 10**9+7."""
    values = _positive(coins, "coins")
    ways = [1] + [0] * target
    for c in values:
        for i in range(c, target + 1):
            ways[i] = (ways[i] + ways[i - c]) % MOD
    return ways[target]


def removing_digits(n: int) -> int:
    """Return the fewest steps to reach 0, each step subtracting one digit of the number."""
    if n < 0:
        raise ValueError("n must not be negative")
    steps = [0]
    for i in range(1, n + 1):
        steps.append(1 + min(steps[i - int(d)] for d in str(i) if d != "0"))
    return steps[n]


def grid_paths(grid: Sequence[str]) -> int:
    """Count right/down paths over free ('.') cells of a square grid, modulo 10**9+7."""
    rows = list(grid)
    n = len(rows)
    if n == 0 or any(len(row) != n for row in rows):
        raise ValueError("grid must be a non-empty square")
    previous = [0] * n
    for i, row in enumerate(rows):
        current: list[int] = []
        left = 0
        for j, cell in enumerate(row):
            if cell != ".":
                value = 0
            elif i == 0 and j == 0:
                value = 1
            else:
                value = (previous[j] + left) % MOD
            current.append(value)
            left = value
        previous = current
    return previous[-1]


def book_shop(budget: int, prices: Sequence[int], pages: Sequence[int]) -> int:
    """Return the most pages buyable within budget, each book bought at most once."""
    if len(prices) != len(pages):
        raise ValueError("prices and pages must have the same length")
    _positive(prices, "prices")
    best = [0] * (budget + 1)
    for price, count in zip(prices, pages):
        for k in range(budget, price - 1, -1):
            best[k] = max(best[k], best[k - price] + count)
    return max(best)


def array_description(values: Sequence[int], upper: int) -> int:
    """Count arrays over 1..upper matching values (0 = unknown) whose neighbours differ by at most 1."""
    if not values:
        raise ValueError("values must not be empty")
    if any(v < 0 or v > upper for v in values):
        raise ValueError("values must lie between 0 and upper")
    counts = [0] * (upper + 2)
    for k in range(1, upper + 1):
        counts[k] = 1 if values[0] in (0, k) else 0
    for v in values[1:]:
        following = [0] * (upper + 2)
        for k in range(1, upper + 1) if v == 0 else (v,):
            following[k] = (counts[k - 1] + counts[k] + counts[k + 1]) % MOD
        counts = following
    return sum(counts[1 : upper + 1]) % MOD


def counting_towers(n: int) -> int:
    """Count ways to build a tower of width 2 and height n from blocks, modulo 10**9+7."""
    if n < 1:
        raise ValueError("n must be at least 1")
    joined, split = 1, 1
    for _ in range(n - 1):
        joined, split = (2 * joined + split) % MOD, (4 * split + joined) % MOD
    return (joined + split) % MOD


def edit_distance(first: str, second: str) -> int:
    """Return the Levenshtein distance between two strings."""
    previous = list(range(len(second) + 1))
    for i, a in enumerate(first, start=1):
        current = [i]
        for j, b in enumerate(second, start=1):
            if a == b:
                current.append(previous[j - 1])
            else:
                current.append(min(current[j - 1], previous[j - 1], previous[j]) + 1)
        previous = current
    return previous[-1]


def rectangle_cutting(a: int, b: int) -> int:
    """Return the fewest straight cuts that divide an a x b rectangle into squares."""
    if a < 1 or b < 1:
        raise ValueError("sides must be at least 1")
    cuts = [[0] * (b + 1) for _ in range(a + 1)]
    for i in range(1, a + 1):
        for j in range(1, b + 1):
            if i == j:
                continue
            vertical = (1 + cuts[i][j - k] + cuts[i][k] for k in range(1, j))
            horizontal = (1 + cuts[i - k][j] + cuts[k][j] for k in range(1, i))
            cuts[i][j] = min((*vertical, *horizontal))
    return cuts[a][b]


def money_sums(coins: Iterable[int]) -> list[int]:
    """Return every positive sum formed by a subset of the coins, in increasing order."""
    values = _positive(coins, "coins")
    reachable = 1
    for c in values:
        reachable |= reachable << c
    return [s for s in range(1, sum(values) + 1) if reachable >> s & 1]


def removal_game(values: Sequence[int]) -> int:
    """Return the first player's score when both take from either end optimally."""
    if not values:
        raise ValueError("values must not be empty")
    n = len(values)
    lead = list(values)
    for length in range(2, n + 1):
        lead = [
            max(values[i] - lead[i + 1], values[i + length - 1] - lead[i])
            for i in range(n - length + 1)
        ]
    return (sum(values) + lead[0]) // 2


def two_sets_ways(n: int) -> int:
    """Count splits of 1..n into two sets of equal sum, modulo 10**9+7."""
    if n < 1:
        raise ValueError("n must be at least 1")
    total = n * (n + 1) // 2
    if total % 2:
        return 0
    half = total // 2
    ways = [1] + [0] * half
    for i in range(1, n + 1):
        for s in range(half, i - 1, -1):
            ways[s] = (ways[s] + ways[s - i]) % MOD
    return ways[half] * pow(2, MOD - 2, MOD) % MOD


__all__: Sequence[str] = (
    "MOD",
    "dice_combinations",
    "minimizing_coins",
    "ordered_coin_combinations",
    "unordered_coin_combinations",
    "removing_digits",
    "grid_paths",
    "book_shop",
    "array_description",
    "counting_towers",
    "edit_distance",
    "rectangle_cutting",
    "money_sums",
    "removal_game",
    "two_sets_ways",
)