"""Eulerian circuits: a postman route using every street exactly once."""

from __future__ import annotations

from collections.abc import Iterable


def mail_route(n: int, edges: Iterable[tuple[int, int]]) -> list[int] | None:
    """Return a route from node 1 back to node 1 using every two-way street once, or None.

    The route lists 1-based nodes; None means no such route exists.
    """
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    count = 0
    for index, (u, v) in enumerate(edges):
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError(f"street ({u}, {v}) refers to a node outside 1..{n}")
        adjacency[u - 1].append((v - 1, index))
        adjacency[v - 1].append((u - 1, index))
        count += 1
    if any(len(streets) % 2 for streets in adjacency):
        return None

    used = [False] * count
    circuit: list[int] = []
    stack = [0]
    while stack:
        streets = adjacency[stack[-1]]
        while streets and used[streets[-1][1]]:
            streets.pop()
        if streets:
            neighbour, index = streets.pop()
            used[index] = True
            stack.append(neighbour)
        else:
            circuit.append(stack.pop())
    if len(circuit) != count + 1:
        return None
    circuit.reverse()
    return [node + 1 for node in circuit]