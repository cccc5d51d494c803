"""Counting connected rooms of floor cells in a map."""

from __future__ import annotations

from collections.abc import Sequence

FLOOR = "."
WALL = "#"

_STEPS = ((-1, 0), (0, 1), (1, 0), (0, -1))


def count_rooms(grid: Sequence[str]) -> int:
    """Return the number of groups of ``.`` cells joined up, down, left or right."""
    rows = list(grid)
    if not rows:
        return 0
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("all grid rows must have the same length")

    unvisited = {
        (r, c) for r, row in enumerate(rows) for c, cell in enumerate(row) if cell == FLOOR
    }
    rooms = 0
    while unvisited:
        rooms += 1
        stack = [unvisited.pop()]
        while stack:
            r, c = stack.pop()
            for dr, dc in _STEPS:
                neighbour = (r + dr, c + dc)
                if neighbour in unvisited:
                    unvisited.remove(neighbour)
                    stack.append(neighbour)
    return rooms