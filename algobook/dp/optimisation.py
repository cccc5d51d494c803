"""Optimisation problems: packing people into elevator rides and cutting rectangles into squares."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import chain


def min_elevator_rides(weights: Iterable[int], capacity: int) -> int:
    """Return the fewest elevator rides that carry everyone, given the maximum load per ride.

    As in the underlying subset search, an empty group still counts as one (empty) ride.
    """
    people = list(weights)
    if capacity < 1:
        raise ValueError(f"capacity must be positive, got {capacity}")
    too_heavy = [weight for weight in people if weight > capacity]
    if too_heavy:
        raise ValueError(f"weights exceed the capacity {capacity}: {too_heavy}")
    if any(weight < 0 for weight in people):
        raise ValueError("weights must not be negative")

    def board(state: tuple[int, int], weight: int) -> tuple[int, int]:
        rides, load = state
        if load + weight <= capacity:
            return rides, load + weight
        return rides + 1, weight

    # best[mask] is (rides, load of the last ride) for the people in ``mask``,
    # with the fewest rides first and then the lightest last ride.
    best: list[tuple[int, int]] = [(1, 0)]
    for mask in range(1, 1 << len(people)):
        best.append(
            min(
                board(best[mask ^ (1 << index)], weight)
                for index, weight in enumerate(people)
                if mask >> index & 1
            )
        )
    return best[-1][0]


def min_cuts(height: int, width: int) -> int:
    """Return the fewest straight cuts that split a ``height`` x ``width`` rectangle into squares."""
    if height < 1 or width < 1:
        raise ValueError(f"dimensions must be positive, got {height} x {width}")
    cuts = [[0] * (width + 1) for _ in range(height + 1)]
    for rows in range(1, height + 1):
        for cols in range(1, width + 1):
            if rows == cols:
                continue
            vertical = (cuts[rows][cols - v] + cuts[rows][v] + 1 for v in range(1, cols))
            horizontal = (cuts[rows - h][cols] + cuts[h][cols] + 1 for h in range(1, rows))
            cuts[rows][cols] = min(chain(vertical, horizontal))
    return cuts[height][width]