"""Sequence problems: edit distance, increasing subsequences, project scheduling and the removal game."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Project:
    """A project available from day ``start`` to day ``end`` inclusive, paying ``reward``."""

    start: int
    end: int
    reward: int

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError(f"project starts after it ends: {self.start} > {self.end}")


def edit_distance(source: str, target: str) -> int:
    """Return the fewest insertions, deletions and replacements turning ``source`` into ``target``."""
    previous = list(range(len(target) + 1))
    for i, source_char in enumerate(source, start=1):
        current = [i]
        for j, target_char in enumerate(target, start=1):
            if source_char == target_char:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(previous[j], current[j - 1], previous[j - 1]))
        previous = current
    return previous[-1]


def longest_increasing_subsequence(values: Iterable[int]) -> int:
    """Return the length of the longest strictly increasing subsequence."""
    tails: list[int] = []
    for value in values:
        position = bisect_left(tails, value)
        if position == len(tails):
            tails.append(value)
        else:
            tails[position] = value
    return len(tails)


def max_project_reward(projects: Iterable[Project]) -> int:
    """Return the largest total reward from projects whose day ranges do not overlap."""
    ordered = sorted(projects, key=lambda project: project.end)
    ends = [project.end for project in ordered]
    # best[k] is the most money earned using only the first k projects by end day.
    best = [0]
    for project in ordered:
        compatible = bisect_left(ends, project.start)
        best.append(max(best[-1], project.reward + best[compatible]))
    return best[-1]


def removal_game(values: Sequence[int]) -> int:
    """Return the first player's score when both players take from either end optimally."""
    numbers = list(values)
    if not numbers:
        raise ValueError("values must not be empty")
    count = len(numbers)
    # diff[r] holds, for the current left end l, the best (first - second) margin on l..r.
    diff = [0] * count
    for left in range(count - 1, -1, -1):
        diff[left] = numbers[left]
        for right in range(left + 1, count):
            diff[right] = max(numbers[left] - diff[right], numbers[right] - diff[right - 1])
    return (sum(numbers) + diff[-1]) // 2