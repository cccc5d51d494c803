"""Shortest-path searches on character grids: a labyrinth and an escape from monsters."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence

WALL = "#"
START = "A"
TARGET = "B"
MONSTER = "M"

Cell = tuple[int, int]

_MOVES = (("U", -1, 0), ("R", 0, 1), ("D", 1, 0), ("L", 0, -1))


def _rows(grid: Sequence[str]) -> list[str]:
    rows = list(grid)
    if not rows or not rows[0]:
        raise ValueError("grid must not be empty")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("all grid rows must have the same length")
    return rows


def _cells_of(rows: list[str], symbol: str) -> list[Cell]:
    return [(r, c) for r, row in enumerate(rows) for c, cell in enumerate(row) if cell == symbol]


def _single(rows: list[str], symbol: str) -> Cell:
    found = _cells_of(rows, symbol)
    if len(found) != 1:
        raise ValueError(f"grid must contain exactly one {symbol!r}, found {len(found)}")
    return found[0]


def _bfs(rows: list[str], sources: Iterable[Cell]) -> tuple[dict[Cell, int], dict[Cell, tuple[Cell, str]]]:
    """Breadth-first search from all sources, avoiding walls.

    Returns the distance to every reached cell and, for each cell other than a
    source, the cell it was reached from and the move letter used.
    """
    height, width = len(rows), len(rows[0])
    starts = list(sources)
    dist = {cell: 0 for cell in starts}
    prev: dict[Cell, tuple[Cell, str]] = {}
    queue = deque(starts)
    while queue:
        cell = queue.popleft()
        r, c = cell
        for letter, dr, dc in _MOVES:
            nr, nc = r + dr, c + dc
            nxt = (nr, nc)
            if 0 <= nr < height and 0 <= nc < width and rows[nr][nc] != WALL and nxt not in dist:
                dist[nxt] = dist[cell] + 1
                prev[nxt] = (cell, letter)
                queue.append(nxt)
    return dist, prev


def _trace(prev: dict[Cell, tuple[Cell, str]], start: Cell, end: Cell) -> str:
    letters = []
    while end != start:
        end, letter = prev[end]
        letters.append(letter)
    return "".join(reversed(letters))


def find_path(grid: Sequence[str]) -> str | None:
    """Return a shortest route from ``A`` to ``B`` as ``U``/``R``/``D``/``L`` moves, or None.

    Cells marked ``#`` are walls; every other cell can be walked on.
    """
    rows = _rows(grid)
    start = _single(rows, START)
    target = _single(rows, TARGET)
    dist, prev = _bfs(rows, [start])
    if target not in dist:
        return None
    return _trace(prev, start, target)


def escape_monsters(grid: Sequence[str]) -> str | None:
    """Return moves taking ``A`` to the border strictly before any monster can get there, or None.

    The first safe border cell in row-major order is chosen, reached by a shortest route.
    """
    rows = _rows(grid)
    start = _single(rows, START)
    monster_dist, _ = _bfs(rows, _cells_of(rows, MONSTER))
    own_dist, prev = _bfs(rows, [start])
    height, width = len(rows), len(rows[0])
    unreachable = float("inf")
    for r in range(height):
        for c in range(width):
            if r not in (0, height - 1) and c not in (0, width - 1):
                continue
            cell = (r, c)
            if own_dist.get(cell, unreachable) < monster_dist.get(cell, unreachable):
                return _trace(prev, start, cell)
    return None