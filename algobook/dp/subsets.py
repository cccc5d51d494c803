"""Subset-sum style problems: splitting 1..n, reachable sums and the bookshop knapsack."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

MOD = 1_000_000_007


def two_sets_ways(n: int) -> int:
    """Count the ways to split 1..n into two sets of equal sum, modulo 10**9+7.

    Each split is counted once, regardless of which side is named first.
    """
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    total = n * (n + 1) // 2
    if total % 2:
        return 0
    half = total // 2
    # The number 1 is pinned to one side so every split is counted once.
    ways = [1] + [0] * half
    for item in range(2, n + 1):
        for amount in range(half, item - 1, -1):
            ways[amount] = (ways[amount] + ways[amount - item]) % MOD
    return ways[half]


def money_sums(coins: Iterable[int]) -> list[int]:
    """Return, in ascending order, every positive sum that some subset of the coins makes."""
    values = list(coins)
    if any(coin < 1 for coin in values):
        raise ValueError("coin values must be positive")
    reachable = 1
    for coin in values:
        reachable |= reachable << coin
    return [amount for amount in range(1, sum(values) + 1) if reachable >> amount & 1]


def max_pages(prices: Sequence[int], pages: Sequence[int], budget: int) -> int:
    """Return the most pages buyable with at most ``budget``, each book bought at most once."""
    if len(prices) != len(pages):
        raise ValueError("prices and pages must have the same length")
    if budget < 0:
        raise ValueError(f"budget must not be negative, got {budget}")
    if any(price < 0 for price in prices):
        raise ValueError("prices must not be negative")
    best = [0] * (budget + 1)
    for price, value in zip(prices, pages):
        for spend in range(budget, price - 1, -1):
            best[spend] = max(best[spend], best[spend - price] + value)
    return best[budget]