"""Topological ordering, course scheduling, safe states and strongly connected components."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence


def _postorder(
    adjacency: Sequence[Iterable[int]], roots: Iterable[int], seen: set[int]
) -> Iterator[int]:
    """Yield vertices in depth-first post-order, starting from each unseen root in turn."""
    for root in roots:
        if root in seen:
            continue
        seen.add(root)
        stack = [(root, iter(adjacency[root]))]
        while stack:
            node, neighbours = stack[-1]
            for nxt in neighbours:
                if nxt not in seen:
                    seen.add(nxt)
                    stack.append((nxt, iter(adjacency[nxt])))
                    break
            else:
                stack.pop()
                yield node


def topological_sort_dfs(adjacency: Sequence[Iterable[int]]) -> list[int]:
    """Vertices 0..n-1 in reverse depth-first post-order.

    For a directed acyclic graph every edge u -> v has u before v.
    """
    return list(_postorder(adjacency, range(len(adjacency)), set()))[::-1]


def topological_sort_kahn(adjacency: Sequence[Iterable[int]]) -> list[int]:
    """Vertices in Kahn's order, repeatedly taking a vertex with no incoming edges left.

    Vertices on or behind a cycle never lose all their incoming edges and are left out,
    so the result is shorter than the vertex count exactly when the graph has a cycle.
    """
    indegree = [0] * len(adjacency)
    for neighbours in adjacency:
        for v in neighbours:
            indegree[v] += 1
    queue = deque(v for v, degree in enumerate(indegree) if degree == 0)
    order = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for v in adjacency[node]:
            indegree[v] -= 1
            if indegree[v] == 0:
                queue.append(v)
    return order


def _course_graph(num_courses: int, prerequisites: Iterable[Sequence[int]]) -> list[list[int]]:
    adjacency: list[list[int]] = [[] for _ in range(num_courses)]
    for course, required in prerequisites:
        adjacency[required].append(course)
    return adjacency


def can_finish(num_courses: int, prerequisites: Iterable[Sequence[int]]) -> bool:
    """True when all courses can be taken; each pair [a, b] means b comes before a."""
    adjacency = _course_graph(num_courses, prerequisites)
    return len(topological_sort_kahn(adjacency)) == num_courses


def find_order(num_courses: int, prerequisites: Iterable[Sequence[int]]) -> list[int]:
    """An order in which to take all courses, or an empty list when none exists."""
    order = topological_sort_kahn(_course_graph(num_courses, prerequisites))
    return order if len(order) == num_courses else []


def eventual_safe_nodes(graph: Sequence[Sequence[int]]) -> list[int]:
    """Vertices, in increasing order, from which every walk ends at a vertex with no exits."""
    reverse: list[list[int]] = [[] for _ in graph]
    remaining = [len(neighbours) for neighbours in graph]
    for u, neighbours in enumerate(graph):
        for v in neighbours:
            reverse[v].append(u)
    queue = deque(v for v, count in enumerate(remaining) if count == 0)
    safe = [False] * len(graph)
    while queue:
        node = queue.popleft()
        safe[node] = True
        for u in reverse[node]:
            remaining[u] -= 1
            if remaining[u] == 0:
                queue.append(u)
    return [v for v, is_safe in enumerate(safe) if is_safe]


def count_strongly_connected(adjacency: Sequence[Iterable[int]]) -> int:
    """Number of strongly connected components, by Kosaraju's two passes."""
    n = len(adjacency)
    finish_order = list(_postorder(adjacency, range(n), set()))
    reverse: list[list[int]] = [[] for _ in range(n)]
    for u, neighbours in enumerate(adjacency):
        for v in neighbours:
            reverse[v].append(u)
    seen: set[int] = set()
    components = 0
    for node in reversed(finish_order):
        if node not in seen:
            components += 1
            for _ in _postorder(reverse, (node,), seen):
                pass
    return components