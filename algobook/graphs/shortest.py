"""Shortest and longest routes: Dijkstra, Floyd-Warshall, BFS routing and Bellman-Ford scoring."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Iterable
from math import inf


def _check_graph(n: int, u: int, v: int) -> None:
    if not (1 <= u <= n and 1 <= v <= n):
        raise ValueError(f"edge ({u}, {v}) refers to a node outside 1..{n}")


def _check_size(n: int) -> None:
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")


def dijkstra(n: int, edges: Iterable[tuple[int, int, int]]) -> list[int | None]:
    """Return the shortest distance from node 1 to every node along one-way edges.

    Entry ``i`` is the distance to node ``i + 1``, or None if it cannot be reached.
    Weights must not be negative.
    """
    _check_size(n)
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for u, v, weight in edges:
        _check_graph(n, u, v)
        if weight < 0:
            raise ValueError(f"edge ({u}, {v}) has negative weight {weight}")
        adjacency[u - 1].append((v - 1, weight))

    dist: list[float] = [inf] * n
    dist[0] = 0
    heap = [(0, 0)]
    while heap:
        distance, node = heapq.heappop(heap)
        if distance > dist[node]:
            continue
        for neighbour, weight in adjacency[node]:
            candidate = distance + weight
            if candidate < dist[neighbour]:
                dist[neighbour] = candidate
                heapq.heappush(heap, (candidate, neighbour))
    return [None if d == inf else int(d) for d in dist]


def all_pairs_distances(n: int, edges: Iterable[tuple[int, int, int]]) -> list[list[int | None]]:
    """Return the matrix of shortest distances between all nodes over two-way roads.

    ``result[a - 1][b - 1]`` is the distance from node ``a`` to node ``b``, or None
    when they are not connected.
    """
    _check_size(n)
    dist: list[list[float]] = [[inf] * n for _ in range(n)]
    for u, v, weight in edges:
        _check_graph(n, u, v)
        a, b = u - 1, v - 1
        if weight < dist[a][b]:
            dist[a][b] = dist[b][a] = weight
    for node in range(n):
        dist[node][node] = 0

    for via in range(n):
        through = dist[via]
        for row in dist:
            to_via = row[via]
            if to_via == inf:
                continue
            for target, onward in enumerate(through):
                if to_via + onward < row[target]:
                    row[target] = to_via + onward
    return [[None if d == inf else int(d) for d in row] for row in dist]


def shortest_message_route(n: int, edges: Iterable[tuple[int, int]]) -> list[int] | None:
    """Return a route from node 1 to node n with the fewest hops, or None if there is none.

    Connections are two-way; the route lists every 1-based node on the way.
    """
    _check_size(n)
    adjacency: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        _check_graph(n, u, v)
        adjacency[u - 1].append(v - 1)
        adjacency[v - 1].append(u - 1)

    parent: dict[int, int] = {0: 0}
    queue = deque([0])
    while queue:
        node = queue.popleft()
        for neighbour in adjacency[node]:
            if neighbour not in parent:
                parent[neighbour] = node
                queue.append(neighbour)
    if n - 1 not in parent:
        return None

    route = [n - 1]
    while route[-1] != 0:
        route.append(parent[route[-1]])
    route.reverse()
    return [node + 1 for node in route]


def high_score(n: int, edges: Iterable[tuple[int, int, int]]) -> int | None:
    """Return the largest total score of a walk from node 1 to node n along one-way edges.

    Returns None when the score can be made arbitrarily large. Raises ValueError
    when node n cannot be reached from node 1.
    """
    _check_size(n)
    arcs = []
    reverse: list[list[int]] = [[] for _ in range(n)]
    for u, v, score in edges:
        _check_graph(n, u, v)
        arcs.append((u - 1, v - 1, score))
        reverse[v - 1].append(u - 1)

    best: list[float] = [-inf] * n
    best[0] = 0
    for _ in range(n - 1):
        for u, v, score in arcs:
            if best[u] != -inf and best[u] + score > best[v]:
                best[v] = best[u] + score

    improving: set[int] = set()
    for _ in range(n):
        for u, v, score in arcs:
            if best[u] != -inf and best[u] + score > best[v]:
                best[v] = best[u] + score
                improving.add(v)

    reaches_end = {n - 1}
    stack = [n - 1]
    while stack:
        node = stack.pop()
        for previous in reverse[node]:
            if previous not in reaches_end:
                reaches_end.add(previous)
                stack.append(previous)

    if improving & reaches_end:
        return None
    if best[n - 1] == -inf:
        raise ValueError(f"node {n} cannot be reached from node 1")
    return int(best[n - 1])