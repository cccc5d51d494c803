"""Disjoint-set union with road-construction tracking and Kruskal's spanning tree."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class DisjointSet:
    """Union-find over nodes ``0..size-1`` with path compression and union by size."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"size must not be negative, got {size}")
        self._parent = list(range(size))
        self._size = [1] * size
        self.components = size

    def __len__(self) -> int:
        return len(self._parent)

    def _check(self, node: int) -> None:
        if not 0 <= node < len(self._parent):
            raise ValueError(f"node must lie in 0..{len(self._parent) - 1}, got {node}")

    def find(self, node: int) -> int:
        """Return the representative of the set holding ``node``."""
        self._check(node)
        root = node
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[node] != root:
            self._parent[node], node = root, self._parent[node]
        return root

    def union(self, a: int, b: int) -> bool:
        """Merge the sets of ``a`` and ``b``; return False if they were already joined."""
        root_a, root_b = self.find(a), self.find(b)
        if root_a == root_b:
            return False
        if self._size[root_a] < self._size[root_b]:
            root_a, root_b = root_b, root_a
        self._parent[root_b] = root_a
        self._size[root_a] += self._size[root_b]
        self.components -= 1
        return True

    def component_size(self, node: int) -> int:
        """Return the number of nodes in the set holding ``node``."""
        return self._size[self.find(node)]

    def largest_component(self) -> int:
        """Return the size of the largest set (0 when there are no nodes)."""
        return max(self._size, default=0)


def road_construction(n: int, edges: Iterable[tuple[int, int]]) -> Iterator[tuple[int, int]]:
    """Yield ``(components, largest component)`` after each road between 1-based cities is built."""
    groups = DisjointSet(n)
    for a, b in edges:
        if not (1 <= a <= n and 1 <= b <= n):
            raise ValueError(f"road ({a}, {b}) refers to a city outside 1..{n}")
        groups.union(a - 1, b - 1)
        yield groups.components, groups.largest_component()


def minimum_spanning_cost(n: int, edges: Iterable[tuple[int, int, int]]) -> int | None:
    """Return the total weight of a minimum spanning tree over cities 1..n, or None if disconnected."""
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")
    roads = list(edges)
    for a, b, _ in roads:
        if not (1 <= a <= n and 1 <= b <= n):
            raise ValueError(f"road ({a}, {b}) refers to a city outside 1..{n}")
    groups = DisjointSet(n)
    total = 0
    for a, b, weight in sorted(roads, key=lambda road: road[2]):
        if groups.union(a - 1, b - 1):
            total += weight
    return total if groups.components == 1 else None