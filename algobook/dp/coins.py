"""Coin, dice and digit-removal problems solved by dynamic programming."""

from __future__ import annotations

from collections.abc import Iterable

MOD = 1_000_000_007


def _checked(coins: Iterable[int], target: int) -> list[int]:
    values = list(coins)
    if target < 0:
        raise ValueError(f"target must not be negative, got {target}")
    bad = [coin for coin in values if coin < 1]
    if bad:
        raise ValueError(f"coin values must be positive, got {bad}")
    return values


def min_coins(coins: Iterable[int], target: int) -> int | None:
    """Return the fewest coins summing to ``target``, or None if it cannot be made."""
    values = _checked(coins, target)
    unreachable = target + 1
    best = [0] + [unreachable] * target
    for amount in range(1, target + 1):
        best[amount] = min(
            (best[amount - coin] + 1 for coin in values if coin <= amount),
            default=unreachable,
        )
    return None if best[target] >= unreachable else best[target]


def count_ordered_ways(coins: Iterable[int], target: int) -> int:
    """Count ordered sequences of coins summing to ``target``, modulo 10**9+7."""
    values = _checked(coins, target)
    ways = [1] + [0] * target
    for amount in range(1, target + 1):
        ways[amount] = sum(ways[amount - coin] for coin in values if coin <= amount) % MOD
    return ways[target]


def count_unordered_ways(coins: Iterable[int], target: int) -> int:
    """Count multisets of coins summing to ``target``, modulo 10**9+7."""
    values = _checked(coins, target)
    ways = [1] + [0] * target
    for coin in values:
        for amount in range(coin, target + 1):
            ways[amount] = (ways[amount] + ways[amount - coin]) % MOD
    return ways[target]


def dice_combinations(total: int) -> int:
    """Count the ordered dice-throw sequences that add up to ``total``, modulo 10**9+7."""
    return count_ordered_ways(range(1, 7), total)


def removing_digits_steps(number: int) -> int:
    """Return the steps needed to reach zero by repeatedly subtracting one of the digits."""
    if number < 0:
        raise ValueError(f"number must not be negative, got {number}")
    steps = [0] * (number + 1)
    for value in range(1, number + 1):
        steps[value] = steps[value - int(max(str(value)))] + 1
    return steps[number]