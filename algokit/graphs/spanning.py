"""Minimum spanning trees by Kruskal's and Prim's algorithms."""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from operator import attrgetter

from algokit.graphs.disjoint import DisjointSet


@dataclass(frozen=True)
class Edge:
    """An undirected weighted edge between ``u`` and ``v``."""

    u: int
    v: int
    weight: int


def minimum_spanning_tree(
    vertex_count: int, edges: Iterable[Edge | Sequence[int]]
) -> list[Edge]:
    """Edges of a minimum spanning tree on vertices 0..vertex_count-1, by Kruskal's algorithm.

    ``edges`` holds :class:`Edge` objects or (u, v, weight) triples. Edges are taken
    lightest first, skipping any that would close a cycle; when the graph is not
    connected the result is a minimum spanning forest.
    """
    tree: list[Edge] = []
    if vertex_count <= 1:
        return tree
    candidates = sorted(
        (edge if isinstance(edge, Edge) else Edge(*edge) for edge in edges),
        key=attrgetter("weight"),
    )
    sets = DisjointSet(range(vertex_count))
    for edge in candidates:
        if sets.union(edge.u, edge.v):
            tree.append(edge)
            if len(tree) == vertex_count - 1:
                break
    return tree


def prim_parents(matrix: Sequence[Sequence[int]]) -> list[int | None]:
    """Parent of each vertex in a minimum spanning tree rooted at vertex 0, by Prim's algorithm.

    ``matrix`` is a symmetric weight matrix in which 0 means no edge. The root's
    parent is None. Raises ValueError when the graph is not connected.
    """
    n = len(matrix)
    key: list[float] = [math.inf] * n
    parents: list[int | None] = [None] * n
    in_tree = [False] * n
    if n:
        key[0] = 0
    for _ in range(n):
        node = min((v for v in range(n) if not in_tree[v]), key=key.__getitem__)
        if key[node] == math.inf:
            raise ValueError("graph is not connected")
        in_tree[node] = True
        for neighbour, weight in enumerate(matrix[node]):
            if weight and not in_tree[neighbour] and weight < key[neighbour]:
                key[neighbour] = weight
                parents[neighbour] = node
    return parents


def spanning_tree_weight(adjacency: Sequence[Iterable[Sequence[int]]]) -> int:
    """Total weight of a minimum spanning tree, by Prim's algorithm with a heap.

    ``adjacency`` lists (neighbour, weight) pairs for vertices 0..n-1 of an
    undirected graph. Raises ValueError when the graph is not connected.
    """
    n = len(adjacency)
    if n == 0:
        return 0
    key: list[float] = [math.inf] * n
    in_tree = [False] * n
    key[0] = 0
    heap = [(0, 0)]
    taken = 0
    while heap:
        _, node = heapq.heappop(heap)
        if in_tree[node]:
            continue
        in_tree[node] = True
        taken += 1
        for neighbour, weight in adjacency[node]:
            if not in_tree[neighbour] and weight < key[neighbour]:
                key[neighbour] = weight
                heapq.heappush(heap, (weight, neighbour))
    if taken < n:
        raise ValueError("graph is not connected")
    return sum(key)