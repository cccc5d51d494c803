"""Counting and summing the divisors of an integer by trial division."""

from __future__ import annotations

from collections.abc import Iterator
from math import isqrt


def _prime_factors(number: int) -> Iterator[tuple[int, int]]:
    """Yield ``(prime, exponent)`` pairs of ``number`` in ascending order."""
    if number < 1:
        raise ValueError(f"number must be positive, got {number}")
    remaining = number
    for candidate in range(2, isqrt(number) + 1):
        exponent = 0
        while remaining % candidate == 0:
            remaining //= candidate
            exponent += 1
        if exponent:
            yield candidate, exponent
    if remaining > 1:
        yield remaining, 1


def count_divisors(number: int) -> int:
    """Return how many positive divisors ``number`` has."""
    result = 1
    for _, exponent in _prime_factors(number):
        result *= exponent + 1
    return result


def sum_of_divisors(number: int) -> int:
    """Return the sum of all positive divisors of ``number``."""
    result = 1
    for prime, exponent in _prime_factors(number):
        result *= sum(prime**power for power in range(exponent + 1))
    return result