"""Breadth- and depth-first traversal and small problems solved by walking a graph."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Callable, Hashable, Iterable, Sequence
from dataclasses import dataclass, field


def _bfs(neighbours: Callable[[Hashable], Iterable], start) -> list:
    order = []
    seen = {start}
    queue = deque([start])
    while queue:
        node = queue.popleft()
        order.append(node)
        for nxt in neighbours(node):
            if nxt not in seen:
                seen.add(nxt)
                queue.append(nxt)
    return order


def _dfs(neighbours: Callable[[Hashable], Iterable], start) -> list:
    order = [start]
    seen = {start}
    stack = [iter(neighbours(start))]
    while stack:
        for nxt in stack[-1]:
            if nxt not in seen:
                seen.add(nxt)
                order.append(nxt)
                stack.append(iter(neighbours(nxt)))
                break
        else:
            stack.pop()
    return order


class DirectedGraph:
    """A directed graph stored as adjacency lists in insertion order."""

    def __init__(self):
        self._adjacency: defaultdict[Hashable, list] = defaultdict(list)

    def _neighbours(self, node):
        return self._adjacency.get(node, ())

    def add_edge(self, u, v) -> None:
        """Add an edge from ``u`` to ``v``."""
        self._adjacency[u].append(v)

    def bfs(self, start) -> list:
        """Vertices reachable from ``start`` in breadth-first order."""
        return _bfs(self._neighbours, start)

    def dfs(self, start) -> list:
        """Vertices reachable from ``start`` in depth-first order."""
        return _dfs(self._neighbours, start)


class UndirectedGraph:
    """An unweighted undirected graph over any hashable vertices."""

    def __init__(self):
        self._adjacency: defaultdict[Hashable, list] = defaultdict(list)

    def add_edge(self, u, v) -> None:
        """Connect ``u`` and ``v``."""
        self._adjacency[u].append(v)
        self._adjacency[v].append(u)

    def bfs(self, source) -> list:
        """Vertices reachable from ``source`` in breadth-first order."""
        return _bfs(lambda node: self._adjacency.get(node, ()), source)


def bfs_order(adjacency: Sequence[Sequence[int]], start: int = 0) -> list[int]:
    """Breadth-first order over vertices 0..n-1 given as adjacency lists."""
    return _bfs(adjacency.__getitem__, start)


def dfs_order(adjacency: Sequence[Sequence[int]], start: int = 0) -> list[int]:
    """Depth-first order over vertices 0..n-1 given as adjacency lists."""
    return _dfs(adjacency.__getitem__, start)


def adjacency_rows(adjacency: Sequence[Sequence[int]]) -> list[list[int]]:
    """Each vertex followed by its neighbours."""
    return [[vertex, *neighbours] for vertex, neighbours in enumerate(adjacency)]


def can_visit_all_rooms(rooms: Sequence[Sequence[int]]) -> bool:
    """True when every room can be reached from room 0 using the keys found inside."""
    return len(_dfs(rooms.__getitem__, 0)) == len(rooms)


def find_judge(n: int, trust: Iterable[Sequence[int]]) -> int | None:
    """The person 1..n trusted by everyone else and trusting nobody, or None."""
    trusted_by = [0] * (n + 1)
    trusts = [0] * (n + 1)
    for truster, trustee in trust:
        trusts[truster] += 1
        trusted_by[trustee] += 1
    return next(
        (p for p in range(1, n + 1) if trusts[p] == 0 and trusted_by[p] == n - 1),
        None,
    )


@dataclass
class Employee:
    """An employee with an importance score and the ids of direct subordinates."""

    id: int
    importance: int
    subordinates: list[int] = field(default_factory=list)


def total_importance(employees: Iterable[Employee], employee_id: int) -> int:
    """Importance of an employee plus that of everyone below them."""
    by_id = {employee.id: employee for employee in employees}
    total = 0
    pending = [employee_id]
    while pending:
        employee = by_id[pending.pop()]
        total += employee.importance
        pending.extend(employee.subordinates)
    return total


def minutes_to_inform(
    n: int, head_id: int, manager: Sequence[int], inform_time: Sequence[int]
) -> int:
    """Minutes until news from the head reaches everyone it will reach."""
    reports: list[list[int]] = [[] for _ in range(n)]
    for employee, boss in enumerate(manager):
        if boss != -1:
            reports[boss].append(employee)
    longest = 0
    pending = [(head_id, 0)]
    while pending:
        employee, elapsed = pending.pop()
        if inform_time[employee] == 0:
            longest = max(longest, elapsed)
            continue
        reached = elapsed + inform_time[employee]
        pending.extend((report, reached) for report in reports[employee])
    return longest