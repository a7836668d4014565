"""Single-source and all-pairs shortest paths, plus problems built on them.

Distances to vertices that cannot be reached are ``math.inf``.
"""

from __future__ import annotations

import heapq
import math
from collections import deque
from collections.abc import Iterable, Sequence

from algokit.graphs.ordering import topological_sort_dfs

Adjacency = Sequence[Iterable[Sequence[int]]]
"""Adjacency lists on 0..n-1 whose entries are (neighbour, weight) pairs."""


class NegativeCycleError(ValueError):
    """Raised when a graph holds a cycle of negative total weight."""


class WeightedGraph:
    """An undirected graph with weighted edges on vertices 0..vertex_count-1."""

    def __init__(self, vertex_count: int):
        self._adjacency: list[list[tuple[int, int]]] = [[] for _ in range(vertex_count)]

    def __len__(self) -> int:
        return len(self._adjacency)

    def add_edge(self, u: int, v: int, weight: int) -> None:
        """Connect ``u`` and ``v`` with an edge of ``weight``."""
        self._adjacency[u].append((v, weight))
        self._adjacency[v].append((u, weight))

    def shortest_paths(self, source: int) -> list[float]:
        """Distance from ``source`` to every vertex."""
        return dijkstra(self._adjacency, source)


def dijkstra(adjacency: Adjacency, source: int) -> list[float]:
    """Distances from ``source`` using a binary heap; weights must not be negative."""
    distances: list[float] = [math.inf] * len(adjacency)
    distances[source] = 0
    done = [False] * len(adjacency)
    heap = [(0, source)]
    while heap:
        _, node = heapq.heappop(heap)
        if done[node]:
            continue
        done[node] = True
        for neighbour, weight in adjacency[node]:
            candidate = distances[node] + weight
            if not done[neighbour] and candidate < distances[neighbour]:
                distances[neighbour] = candidate
                heapq.heappush(heap, (candidate, neighbour))
    return distances


def dijkstra_matrix(
    matrix: Sequence[Sequence[int]],
) -> tuple[list[float], list[int | None]]:
    """Distances and tree parents from vertex 0 of a weight matrix in which 0 means no edge.

    Each step settles the unsettled vertex with the smallest known distance.
    """
    n = len(matrix)
    distances: list[float] = [math.inf] * n
    parents: list[int | None] = [None] * n
    done = [False] * n
    if n:
        distances[0] = 0
    for _ in range(n):
        node = min(
            (v for v in range(n) if not done[v] and distances[v] < math.inf),
            key=distances.__getitem__,
            default=None,
        )
        if node is None:
            break
        done[node] = True
        for neighbour, weight in enumerate(matrix[node]):
            if done[neighbour] or not weight:
                continue
            candidate = distances[node] + weight
            if candidate < distances[neighbour]:
                distances[neighbour] = candidate
                parents[neighbour] = node
    return distances, parents


def bellman_ford(
    vertex_count: int, edges: Iterable[Sequence[int]]
) -> tuple[list[float], list[int | None]]:
    """Distances and tree parents from vertex 0 over directed (src, dst, weight) edges.

    Negative weights are allowed; a negative cycle reachable from vertex 0
    raises :class:`NegativeCycleError`.
    """
    edge_list = [tuple(edge) for edge in edges]
    distances: list[float] = [math.inf] * vertex_count
    parents: list[int | None] = [None] * vertex_count
    if vertex_count == 0:
        return distances, parents
    distances[0] = 0
    updated = True
    for _ in range(vertex_count - 1):
        updated = False
        for u, v, weight in edge_list:
            if distances[u] != math.inf and distances[u] + weight < distances[v]:
                distances[v] = distances[u] + weight
                parents[v] = u
                updated = True
        if not updated:
            break
    if updated and any(
        distances[u] != math.inf and distances[u] + weight < distances[v]
        for u, v, weight in edge_list
    ):
        raise NegativeCycleError("graph has a negative weight cycle")
    return distances, parents


def has_negative_cycle(vertex_count: int, edges: Iterable[Sequence[int]]) -> bool:
    """True when a negative cycle is reachable from vertex 0."""
    try:
        bellman_ford(vertex_count, edges)
    except NegativeCycleError:
        return True
    return False


def floyd_warshall(matrix: Sequence[Sequence[float]]) -> list[list[float]]:
    """All-pairs distances from a weight matrix in which -1 means no edge.

    Returns a new matrix with ``math.inf`` for unreachable pairs; raises
    :class:`NegativeCycleError` when some vertex reaches itself at negative cost.
    """
    dist = [[math.inf if weight == -1 else weight for weight in row] for row in matrix]
    n = len(dist)
    for k in range(n):
        row_k = dist[k]
        for i in range(n):
            via = dist[i][k]
            if via == math.inf:
                continue
            row_i = dist[i]
            for j in range(n):
                candidate = via + row_k[j]
                if candidate < row_i[j]:
                    row_i[j] = candidate
    if any(dist[i][i] < 0 for i in range(n)):
        raise NegativeCycleError("graph has a negative weight cycle")
    return dist


def shortest_path_faster(adjacency: Adjacency, source: int) -> list[float]:
    """Distances from ``source`` by queue-based relaxation; negative weights are allowed.

    Raises :class:`NegativeCycleError` when a negative cycle is reachable.
    """
    n = len(adjacency)
    distances: list[float] = [math.inf] * n
    distances[source] = 0
    relaxed = [0] * n
    in_queue = [False] * n
    queue = deque([source])
    in_queue[source] = True
    while queue:
        node = queue.popleft()
        in_queue[node] = False
        for neighbour, weight in adjacency[node]:
            candidate = distances[node] + weight
            if candidate < distances[neighbour]:
                distances[neighbour] = candidate
                relaxed[neighbour] += 1
                if relaxed[neighbour] >= n:
                    raise NegativeCycleError("graph has a negative weight cycle")
                if not in_queue[neighbour]:
                    in_queue[neighbour] = True
                    queue.append(neighbour)
    return distances


def bfs_distances(adjacency: Sequence[Iterable[int]], source: int) -> list[float]:
    """Edge counts from ``source`` in an unweighted graph."""
    distances: list[float] = [math.inf] * len(adjacency)
    distances[source] = 0
    queue = deque([source])
    while queue:
        node = queue.popleft()
        for neighbour in adjacency[node]:
            if distances[node] + 1 < distances[neighbour]:
                distances[neighbour] = distances[node] + 1
                queue.append(neighbour)
    return distances


def dag_shortest_paths(adjacency: Adjacency, source: int) -> list[float]:
    """Distances from ``source`` in a weighted directed acyclic graph, in topological order."""
    neighbours = [[v for v, _ in edges] for edges in adjacency]
    distances: list[float] = [math.inf] * len(adjacency)
    distances[source] = 0
    for node in topological_sort_dfs(neighbours):
        if distances[node] == math.inf:
            continue
        for neighbour, weight in adjacency[node]:
            if distances[node] + weight < distances[neighbour]:
                distances[neighbour] = distances[node] + weight
    return distances


def network_delay_time(times: Iterable[Sequence[int]], n: int, k: int) -> int | None:
    """Time for a signal from node ``k`` to reach all nodes 1..n, or None if some never hear it.

    ``times`` holds directed (u, v, w) edges.
    """
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    for u, v, weight in times:
        adjacency[u].append((v, weight))
    longest = max(dijkstra(adjacency, k)[1:], default=0)
    return None if longest == math.inf else longest


def cheapest_price(
    n: int, flights: Iterable[Sequence[int]], src: int, dst: int, k: int
) -> int | None:
    """Cheapest fare from ``src`` to ``dst`` with at most ``k`` stops, or None."""
    if src == dst and k >= -1:
        return 0
    flight_list = [tuple(flight) for flight in flights]
    best: list[float] = [math.inf] * n
    best[src] = 0
    for _ in range(max(k + 1, 0)):
        following = best[:]
        for u, v, price in flight_list:
            if best[u] + price < following[v]:
                following[v] = best[u] + price
        best = following
    return None if best[dst] == math.inf else best[dst]


def find_the_city(n: int, edges: Iterable[Sequence[int]], threshold: int) -> int:
    """The city reaching the fewest others within ``threshold``; ties go to the larger index."""
    matrix: list[list[float]] = [[0 if i == j else math.inf for j in range(n)] for i in range(n)]
    for u, v, weight in edges:
        matrix[u][v] = matrix[v][u] = weight
    dist = floyd_warshall(matrix)
    counts = [
        sum(1 for j in range(n) if j != i and dist[i][j] <= threshold) for i in range(n)
    ]
    return min(range(n), key=lambda city: (counts[city], -city))