"""Counting monotone paths through a grid with traps."""

from __future__ import annotations

from collections.abc import Sequence

MOD = 1_000_000_007
FREE = "."
TRAP = "*"


def grid_paths(grid: Sequence[str]) -> int:
    """Count right/down paths from the top-left to the bottom-right free cell, modulo 10**9+7.

    Cells are ``.`` for free and ``*`` for traps.
    """
    rows = list(grid)
    if not rows or not rows[0]:
        raise ValueError("grid must not be empty")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("all grid rows must have the same length")
    if rows[0][0] != FREE or rows[-1][-1] != FREE:
        return 0

    ways = [0] * width
    ways[0] = 1
    for row_index, row in enumerate(rows):
        for col, cell in enumerate(row):
            if cell != FREE:
                ways[col] = 0
            elif col > 0:
                ways[col] = (ways[col] + ways[col - 1]) % MOD
            elif row_index > 0:
                ways[col] %= MOD
    return ways[-1]