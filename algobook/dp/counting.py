"""Counting problems: digit constraints, domino tilings, towers and array descriptions."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from functools import lru_cache

MOD = 1_000_000_007


def _count_up_to(limit: int) -> int:
    """Count integers in 0..limit with no two equal adjacent digits."""
    if limit < 0:
        return 0
    digits = [int(ch) for ch in str(limit)]
    length = len(digits)

    @lru_cache(maxsize=None)
    def walk(position: int, previous: int, leading: bool, tight: bool) -> int:
        if position == length:
            return 1
        upper = digits[position] if tight else 9
        total = 0
        for digit in range(upper + 1):
            if not leading and digit == previous:
                continue
            total += walk(position + 1, digit, leading and digit == 0, tight and digit == upper)
        return total

    return walk(0, -1, True, True)


def count_numbers(low: int, high: int) -> int:
    """Count integers in ``low..high`` with no two equal adjacent digits."""
    if low < 0:
        raise ValueError(f"low must not be negative, got {low}")
    if low > high:
        raise ValueError(f"low must not exceed high, got {low} > {high}")
    return _count_up_to(high) - _count_up_to(low - 1)


def _next_masks(mask: int, height: int) -> Iterator[int]:
    """Yield the profiles of the next column reachable by filling the current one."""

    def fill(row: int, following: int) -> Iterator[int]:
        if row == height:
            yield following
            return
        if mask >> row & 1:
            yield from fill(row + 1, following)
            return
        if row + 1 < height and not mask >> (row + 1) & 1:
            yield from fill(row + 2, following)
        yield from fill(row + 1, following | 1 << row)

    return fill(0, 0)


def count_tilings(height: int, width: int) -> int:
    """Count the domino tilings of a ``height`` x ``width`` grid, modulo 10**9+7."""
    if height < 1:
        raise ValueError(f"height must be positive, got {height}")
    if width < 0:
        raise ValueError(f"width must not be negative, got {width}")
    profiles = {0: 1}
    for _ in range(width):
        following: dict[int, int] = {}
        for mask, ways in profiles.items():
            for nxt in _next_masks(mask, height):
                following[nxt] = (following.get(nxt, 0) + ways) % MOD
        profiles = following
    return profiles.get(0, 0)


def count_towers(height: int) -> int:
    """Count the ways to build a width-2 tower of the given height from blocks, modulo 10**9+7."""
    if height < 1:
        raise ValueError(f"height must be positive, got {height}")
    separate, linked = 1, 1
    for _ in range(height - 1):
        both = (separate + linked) % MOD
        separate, linked = (both + 3 * separate) % MOD, (both + linked) % MOD
    return (separate + linked) % MOD


def count_arrays(values: Sequence[int], upper: int) -> int:
    """Count arrays matching ``values`` (0 marks an unknown) with entries in 1..upper.

    Adjacent entries may differ by at most one. The result is modulo 10**9+7.
    """
    known = list(values)
    if not known:
        raise ValueError("values must not be empty")
    if upper < 1:
        raise ValueError(f"upper must be positive, got {upper}")
    if any(value < 0 for value in known):
        raise ValueError("values must not be negative")

    def allowed(given: int, candidate: int) -> bool:
        return given == 0 or given == candidate

    # ways[x] for x in 1..upper; indices 0 and upper+1 stay zero as padding.
    ways = [0] + [int(allowed(known[0], x)) for x in range(1, upper + 1)] + [0]
    for given in known[1:]:
        ways = (
            [0]
            + [
                (ways[x - 1] + ways[x] + ways[x + 1]) % MOD if allowed(given, x) else 0
                for x in range(1, upper + 1)
            ]
            + [0]
        )
    return sum(ways) % MOD