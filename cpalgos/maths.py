"""Number theory: modular powers, divisor counting and divisor statistics."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence

from .dp import MOD


def mod_pow(base: int, exponent: int, modulus: int = MOD) -> int:
    """Return base**exponent reduced modulo modulus."""
    if exponent < 0:
        raise ValueError("exponent must not be negative")
    if modulus < 1:
        raise ValueError("modulus must be positive")
    return pow(base, exponent, modulus)


def power_tower(a: int, b: int, c: int) -> int:
    """Return a**(b**c) modulo 10**9+7, reducing the inner power by Fermat's little theorem."""
    if b < 0 or c < 0:
        raise ValueError("exponents must not be negative")
    return pow(a, pow(b, c, MOD - 1), MOD)


def common_divisor(values: Iterable[int]) -> int:
    """Return the greatest gcd over all pairs of the given positive integers."""
    numbers = list(values)
    if len(numbers) < 2:
        raise ValueError("at least two values are needed")
    if any(v <= 0 for v in numbers):
        raise ValueError("values must be positive")
    counts = Counter(numbers)
    largest = max(numbers)
    for candidate in range(largest, 0, -1):
        multiples = sum(counts[m] for m in range(candidate, largest + 1, candidate))
        if multiples >= 2:
            return candidate
    raise AssertionError("unreachable: 1 divides every pair")


def count_divisors(x: int) -> int:
    """Return the number of positive divisors of x."""
    if x < 1:
        raise ValueError("x must be positive")
    total = 1
    factor = 2
    while factor * factor <= x:
        exponent = 0
        while x % factor == 0:
            x //= factor
            exponent += 1
        total *= exponent + 1
        factor += 1
    if x > 1:
        total *= 2
    return total


def divisor_analysis(factors: Iterable[tuple[int, int]]) -> tuple[int, int, int]:
    """Return the count, sum and product of the divisors of a factorised number.

    factors holds (prime, exponent) pairs; all three results are modulo 10**9+7.
    """
    count = 1
    total = 1
    product = 1
    count_mod_phi = 1
    for prime, exponent in factors:
        if prime < 2 or exponent < 1:
            raise ValueError("factors must be (prime, positive exponent) pairs")
        count = count * (exponent + 1) % MOD
        geometric = (pow(prime, exponent + 1, MOD) - 1) % MOD
        total = total * geometric % MOD * pow(prime - 1, MOD - 2, MOD) % MOD
        triangle = pow(prime, exponent * (exponent + 1) // 2, MOD)
        product = pow(product, exponent + 1, MOD) * pow(triangle, count_mod_phi, MOD) % MOD
        count_mod_phi = count_mod_phi * (exponent + 1) % (MOD - 1)
    return count, total, product


__all__: Sequence[str] = (
    "mod_pow",
    "power_tower",
    "common_divisor",
    "count_divisors",
    "divisor_analysis",
)