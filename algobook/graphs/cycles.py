"""Finding cycles: round trips in undirected and directed graphs, and negative cycles."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


def _check_node(n: int, *nodes: int) -> None:
    for node in nodes:
        if not 1 <= node <= n:
            raise ValueError(f"node {node} lies outside 1..{n}")


def _adjacency(n: int, edges: Iterable[tuple[int, int]], directed: bool) -> list[list[int]]:
    """Build 0-based adjacency lists from 1-based edges; undirected graphs drop self-loops."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    adjacency: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        _check_node(n, u, v)
        if directed:
            adjacency[u - 1].append(v - 1)
        elif u != v:
            adjacency[u - 1].append(v - 1)
            adjacency[v - 1].append(u - 1)
    return adjacency


def _search(adjacency: list[list[int]], skip_parent: bool) -> list[int] | None:
    """Depth-first search for an edge back to a node on the current path.

    Returns the closed cycle as 1-based nodes, or None when there is none.
    """
    visited = [False] * len(adjacency)
    for root in range(len(adjacency)):
        if visited[root]:
            continue
        visited[root] = True
        path = [root]
        parents = [-1]
        position = {root: 0}
        pending: list[Iterator[int]] = [iter(adjacency[root])]
        while path:
            node = path[-1]
            for neighbour in pending[-1]:
                if skip_parent and neighbour == parents[-1]:
                    continue
                if neighbour in position:
                    cycle = path[position[neighbour]:] + [neighbour]
                    return [member + 1 for member in cycle]
                if not visited[neighbour]:
                    visited[neighbour] = True
                    position[neighbour] = len(path)
                    path.append(neighbour)
                    parents.append(node)
                    pending.append(iter(adjacency[neighbour]))
                    break
            else:
                path.pop()
                parents.pop()
                pending.pop()
                del position[node]
    return None


def find_undirected_cycle(n: int, edges: Iterable[tuple[int, int]]) -> list[int] | None:
    """Return a round trip through at least three distinct cities, or None.

    The trip starts and ends at the same 1-based city. Roads are two-way;
    repeated roads between the same pair and self-loops do not form a trip.
    """
    return _search(_adjacency(n, edges, directed=False), skip_parent=True)


def find_directed_cycle(n: int, edges: Iterable[tuple[int, int]]) -> list[int] | None:
    """Return a directed cycle as 1-based nodes starting and ending at the same node, or None."""
    return _search(_adjacency(n, edges, directed=True), skip_parent=False)


def find_negative_cycle(n: int, edges: Iterable[tuple[int, int, int]]) -> list[int] | None:
    """Return a cycle of negative total weight, following edge directions, or None.

    The result lists 1-based nodes and starts and ends at the same node.
    """
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    arcs = []
    for u, v, weight in edges:
        _check_node(n, u, v)
        arcs.append((u - 1, v - 1, weight))

    # Starting every node at zero acts as a virtual source reaching all of them.
    dist = [0] * n
    parent = [-1] * n
    last = -1
    for _ in range(n):
        last = -1
        for u, v, weight in arcs:
            if dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight
                parent[v] = u
                last = v
    if last == -1:
        return None

    # Walking back n steps is guaranteed to land on the cycle itself.
    for _ in range(n):
        last = parent[last]
    cycle = [last]
    node = parent[last]
    while node != last:
        cycle.append(node)
        node = parent[node]
    cycle.append(last)
    cycle.reverse()
    return [member + 1 for member in cycle]