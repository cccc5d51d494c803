"""Modular arithmetic: fast powers, power towers, factorial tables and binomials."""

from __future__ import annotations

from collections import Counter

MOD = 1_000_000_007


def power_mod(base: int, exponent: int, modulus: int) -> int:
    """Return ``base ** exponent`` reduced modulo ``modulus``."""
    if exponent < 0:
        raise ValueError(f"exponent must not be negative, got {exponent}")
    if modulus < 1:
        raise ValueError(f"modulus must be positive, got {modulus}")
    return pow(base, exponent, modulus)


def tower_power(a: int, b: int, c: int) -> int:
    """Return ``a ** (b ** c)`` modulo 10**9+7, reducing the inner power by Fermat's theorem."""
    return power_mod(a, power_mod(b, c, MOD - 1), MOD)


class FactorialTable:
    """Factorials and inverse factorials modulo a prime, precomputed up to ``limit``."""

    def __init__(self, limit: int, modulus: int = MOD) -> None:
        if limit < 0:
            raise ValueError(f"limit must not be negative, got {limit}")
        if modulus < 2:
            raise ValueError(f"modulus must be at least 2, got {modulus}")
        self.limit = limit
        self.modulus = modulus
        facts = [1]
        for i in range(1, limit + 1):
            facts.append(facts[-1] * i % modulus)
        if facts[-1] == 0:
            raise ValueError(f"limit {limit} is too large for modulus {modulus}")
        inverses = [0] * (limit + 1)
        inverses[limit] = pow(facts[limit], modulus - 2, modulus)
        for i in range(limit, 0, -1):
            inverses[i - 1] = inverses[i] * i % modulus
        self._facts = tuple(facts)
        self._inverses = tuple(inverses)

    def _check(self, n: int) -> None:
        if not 0 <= n <= self.limit:
            raise ValueError(f"n must lie in 0..{self.limit}, got {n}")

    def factorial(self, n: int) -> int:
        """Return ``n!`` modulo the table's modulus."""
        self._check(n)
        return self._facts[n]

    def inverse_factorial(self, n: int) -> int:
        """Return the modular inverse of ``n!``."""
        self._check(n)
        return self._inverses[n]

    def binomial(self, n: int, r: int) -> int:
        """Return ``n choose r`` modulo the table's modulus; zero when ``r`` is outside 0..n."""
        self._check(n)
        if not 0 <= r <= n:
            return 0
        return self._facts[n] * self._inverses[r] % self.modulus * self._inverses[n - r] % self.modulus


def distinct_arrangements(word: str) -> int:
    """Count the distinct strings formed by rearranging the letters of ``word``, modulo 10**9+7."""
    table = FactorialTable(len(word))
    result = table.factorial(len(word))
    for count in Counter(word).values():
        result = result * table.inverse_factorial(count) % MOD
    return result