"""Cheapest flight routes: a one-time discount, the k cheapest fares and route statistics."""

from __future__ import annotations

import heapq
from collections.abc import Iterable
from dataclasses import dataclass
from math import inf

MOD = 1_000_000_007


@dataclass(frozen=True)
class RouteStats:
    """Facts about the cheapest routes from the first city to the last.

    ``count`` is the number of cheapest routes modulo 10**9+7.
    """

    price: int
    count: int
    min_flights: int
    max_flights: int


def _adjacency(n: int, edges: Iterable[tuple[int, int, int]]) -> list[list[tuple[int, int]]]:
    """Build 0-based one-way adjacency lists from 1-based weighted flights."""
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for u, v, price in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError(f"flight ({u}, {v}) refers to a city outside 1..{n}")
        if price < 0:
            raise ValueError(f"flight ({u}, {v}) has negative price {price}")
        adjacency[u - 1].append((v - 1, price))
    return adjacency


def discounted_price(n: int, edges: Iterable[tuple[int, int, int]]) -> int | None:
    """Return the cheapest fare from city 1 to city n when one flight may be taken at half price.

    The halved price is rounded down. Returns None when city n cannot be reached.
    """
    adjacency = _adjacency(n, edges)
    dist: dict[tuple[int, bool], int] = {(0, False): 0}
    heap: list[tuple[int, int, bool]] = [(0, 0, False)]
    while heap:
        cost, node, used = heapq.heappop(heap)
        if cost > dist.get((node, used), inf):
            continue
        for neighbour, price in adjacency[node]:
            options = [(cost + price, used)]
            if not used:
                options.append((cost + price // 2, True))
            for candidate, coupon_used in options:
                state = (neighbour, coupon_used)
                if candidate < dist.get(state, inf):
                    dist[state] = candidate
                    heapq.heappush(heap, (candidate, neighbour, coupon_used))
    finals = [dist[state] for state in ((n - 1, False), (n - 1, True)) if state in dist]
    return min(finals, default=None)


def k_cheapest_routes(n: int, edges: Iterable[tuple[int, int, int]], k: int) -> list[int]:
    """Return, in ascending order, the prices of the ``k`` cheapest routes from city 1 to city n.

    Routes may revisit cities. Fewer than ``k`` prices come back when fewer routes exist.
    """
    if k < 1:
        raise ValueError(f"k must be positive, got {k}")
    adjacency = _adjacency(n, edges)
    visits = [0] * n
    found: list[int] = []
    heap = [(0, 0)]
    while heap and len(found) < k:
        cost, node = heapq.heappop(heap)
        if visits[node] >= k:
            continue
        visits[node] += 1
        if node == n - 1:
            found.append(cost)
        for neighbour, price in adjacency[node]:
            if visits[neighbour] < k:
                heapq.heappush(heap, (cost + price, neighbour))
    return found


def investigate(n: int, edges: Iterable[tuple[int, int, int]]) -> RouteStats | None:
    """Describe the cheapest routes from city 1 to city n, or return None if there are none."""
    adjacency = _adjacency(n, edges)
    dist: list[float] = [inf] * n
    routes = [0] * n
    fewest = [0] * n
    most = [0] * n
    dist[0] = 0
    routes[0] = 1
    heap = [(0, 0)]
    while heap:
        cost, node = heapq.heappop(heap)
        if cost > dist[node]:
            continue
        for neighbour, price in adjacency[node]:
            candidate = cost + price
            if candidate < dist[neighbour]:
                dist[neighbour] = candidate
                routes[neighbour] = routes[node]
                fewest[neighbour] = fewest[node] + 1
                most[neighbour] = most[node] + 1
                heapq.heappush(heap, (candidate, neighbour))
            elif candidate == dist[neighbour]:
                routes[neighbour] = (routes[neighbour] + routes[node]) % MOD
                fewest[neighbour] = min(fewest[neighbour], fewest[node] + 1)
                most[neighbour] = max(most[neighbour], most[node] + 1)
    last = n - 1
    if dist[last] == inf:
        return None
    return RouteStats(int(dist[last]), routes[last], fewest[last], most[last])