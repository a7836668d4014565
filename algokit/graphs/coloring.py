"""Two-colouring of graphs and Euler circuit classification."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from enum import IntEnum

from algokit.graphs.traversal import dfs_order


def _two_colourable(adjacency: Sequence[Iterable[int]], vertices: Iterable[int]) -> bool:
    colour: dict[int, int] = {}
    for start in vertices:
        if start in colour:
            continue
        colour[start] = 1
        queue = deque([start])
        while queue:
            node = queue.popleft()
            for nxt in adjacency[node]:
                if nxt not in colour:
                    colour[nxt] = 1 - colour[node]
                    queue.append(nxt)
                elif colour[nxt] == colour[node]:
                    return False
    return True


def is_bipartite(graph: Sequence[Iterable[int]]) -> bool:
    """True when the undirected graph on 0..n-1 can be two-coloured."""
    return _two_colourable(graph, range(len(graph)))


def possible_bipartition(n: int, dislikes: Iterable[Sequence[int]]) -> bool:
    """True when people 1..n split into two groups with no dislike inside a group."""
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    for a, b in dislikes:
        adjacency[a].append(b)
        adjacency[b].append(a)
    return _two_colourable(adjacency, range(1, n + 1))


class EulerKind(IntEnum):
    """What kind of Euler walk an undirected graph admits."""

    NOT_EULERIAN = 0
    PATH = 1
    CIRCUIT = 2


def euler_kind(adjacency: Sequence[Sequence[int]]) -> EulerKind:
    """Classify an undirected graph given as adjacency lists on 0..n-1."""
    seen: set[int] = set()
    components = 0
    for vertex, neighbours in enumerate(adjacency):
        if vertex not in seen and neighbours:
            components += 1
            seen.update(dfs_order(adjacency, vertex))
    if components == 0:
        return EulerKind.CIRCUIT
    if components > 1:
        return EulerKind.NOT_EULERIAN
    odd = sum(1 for neighbours in adjacency if len(neighbours) % 2)
    if odd == 0:
        return EulerKind.CIRCUIT
    if odd == 2:
        return EulerKind.PATH
    return EulerKind.NOT_EULERIAN