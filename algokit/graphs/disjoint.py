"""Disjoint-set forest with union by rank and path compression."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Sequence


class DisjointSet:
    """Partition of items into disjoint sets."""

    def __init__(self, items: Iterable[Hashable] = ()):
        self._parent: dict[Hashable, Hashable] = {}
        self._rank: dict[Hashable, int] = {}
        self._sets = 0
        for item in items:
            self.add(item)

    def add(self, item: Hashable) -> None:
        """Add ``item`` as a set of its own, unless it is already present."""
        if item not in self._parent:
            self._parent[item] = item
            self._rank[item] = 0
            self._sets += 1

    def __contains__(self, item: Hashable) -> bool:
        return item in self._parent

    def __len__(self) -> int:
        return len(self._parent)

    @property
    def set_count(self) -> int:
        """How many disjoint sets there are."""
        return self._sets

    def find(self, item: Hashable) -> Hashable:
        """Representative of the set holding ``item``; raises KeyError for unknown items."""
        if item not in self._parent:
            raise KeyError(item)
        root = item
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[item] != root:
            self._parent[item], item = root, self._parent[item]
        return root

    def union(self, a: Hashable, b: Hashable) -> bool:
        """Merge the sets of ``a`` and ``b``; False when they were already one set."""
        root_a, root_b = self.find(a), self.find(b)
        if root_a == root_b:
            return False
        if self._rank[root_a] < self._rank[root_b]:
            self._parent[root_a] = root_b
        elif self._rank[root_b] < self._rank[root_a]:
            self._parent[root_b] = root_a
        else:
            self._parent[root_a] = root_b
            self._rank[root_b] += 1
        self._sets -= 1
        return True

    def connected(self, a: Hashable, b: Hashable) -> bool:
        """True when ``a`` and ``b`` are in the same set."""
        return self.find(a) == self.find(b)


def has_cycle(vertex_count: int, edges: Iterable[Sequence[int]]) -> bool:
    """True when the undirected edges on vertices 0..vertex_count-1 form a cycle."""
    sets = DisjointSet(range(vertex_count))
    return any(not sets.union(u, v) for u, v in edges)