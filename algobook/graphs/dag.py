"""Directed acyclic graphs: course ordering, longest routes and counting routes."""

from __future__ import annotations

from collections.abc import Iterable

MOD = 1_000_000_007


def _adjacency(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    """Build 0-based one-way adjacency lists from 1-based edges."""
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")
    adjacency: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError(f"edge ({u}, {v}) refers to a node outside 1..{n}")
        adjacency[u - 1].append(v - 1)
    return adjacency


def _postorder(adjacency: list[list[int]], roots: Iterable[int]) -> list[int]:
    """Return the nodes reachable from ``roots`` in depth-first finishing order."""
    visited = [False] * len(adjacency)
    order: list[int] = []
    for root in roots:
        if visited[root]:
            continue
        visited[root] = True
        stack = [(root, iter(adjacency[root]))]
        while stack:
            node, pending = stack[-1]
            for neighbour in pending:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    stack.append((neighbour, iter(adjacency[neighbour])))
                    break
            else:
                stack.pop()
                order.append(node)
    return order


def _topological(adjacency: list[list[int]], roots: Iterable[int]) -> list[int] | None:
    """Return reachable nodes in topological order, or None if a cycle is reachable."""
    order = _postorder(adjacency, roots)
    order.reverse()
    position = {node: index for index, node in enumerate(order)}
    for node in order:
        if any(position[neighbour] <= position[node] for neighbour in adjacency[node]):
            return None
    return order


def course_order(n: int, edges: Iterable[tuple[int, int]]) -> list[int] | None:
    """Return courses 1..n in an order where each edge (a, b) puts a before b, or None if impossible."""
    adjacency = _adjacency(n, edges)
    order = _topological(adjacency, range(n))
    if order is None:
        return None
    return [node + 1 for node in order]


def longest_route(n: int, edges: Iterable[tuple[int, int]]) -> list[int] | None:
    """Return a route from node 1 to node n visiting as many nodes as possible, or None.

    Raises ValueError when a cycle can be reached from node 1.
    """
    adjacency = _adjacency(n, edges)
    order = _topological(adjacency, [0])
    if order is None:
        raise ValueError("the graph reachable from node 1 contains a cycle")
    if n - 1 not in order:
        return None
    length = {0: 1}
    parent: dict[int, int] = {}
    for node in order:
        for neighbour in adjacency[node]:
            if length[node] + 1 > length.get(neighbour, 0):
                length[neighbour] = length[node] + 1
                parent[neighbour] = node
    route = [n - 1]
    while route[-1] != 0:
        route.append(parent[route[-1]])
    route.reverse()
    return [node + 1 for node in route]


def count_routes(n: int, edges: Iterable[tuple[int, int]]) -> int:
    """Count the routes from node 1 to node n, modulo 10**9+7.

    Raises ValueError when the graph contains a cycle.
    """
    adjacency = _adjacency(n, edges)
    order = _topological(adjacency, range(n))
    if order is None:
        raise ValueError("the graph contains a cycle")
    ways = [0] * n
    ways[n - 1] = 1
    for node in reversed(order):
        if node != n - 1:
            ways[node] = sum(ways[neighbour] for neighbour in adjacency[node]) % MOD
    return ways[0]