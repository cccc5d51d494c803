"""Connected components of undirected graphs: linking them with roads and two-colouring."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable


def _adjacency(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    """Build 0-based adjacency lists from 1-based undirected edges."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    adjacency: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError(f"edge ({u}, {v}) refers to a node outside 1..{n}")
        adjacency[u - 1].append(v - 1)
        adjacency[v - 1].append(u - 1)
    return adjacency


def connect_components(n: int, edges: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """Return the fewest new roads that connect all nodes 1..n.

    Each component is represented by its smallest node, and consecutive
    representatives are joined in ascending order.
    """
    adjacency = _adjacency(n, edges)
    seen = [False] * n
    representatives = []
    for node in range(n):
        if seen[node]:
            continue
        representatives.append(node + 1)
        seen[node] = True
        stack = [node]
        while stack:
            current = stack.pop()
            for neighbour in adjacency[current]:
                if not seen[neighbour]:
                    seen[neighbour] = True
                    stack.append(neighbour)
    return list(zip(representatives, representatives[1:]))


def two_color(n: int, edges: Iterable[tuple[int, int]]) -> list[int] | None:
    """Assign team 1 or 2 to each node so that every edge joins different teams.

    The smallest node of each component goes to team 1. Returns None when the
    graph is not bipartite.
    """
    adjacency = _adjacency(n, edges)
    teams = [0] * n
    for node in range(n):
        if teams[node]:
            continue
        teams[node] = 1
        queue = deque([node])
        while queue:
            current = queue.popleft()
            for neighbour in adjacency[current]:
                if not teams[neighbour]:
                    teams[neighbour] = 3 - teams[current]
                    queue.append(neighbour)
                elif teams[neighbour] == teams[current]:
                    return None
    return teams