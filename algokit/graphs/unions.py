"""Problems solved with a disjoint-set forest."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from algokit.graphs.disjoint import DisjointSet


def find_circle_num(is_connected: Sequence[Sequence[int]]) -> int:
    """Number of provinces (connected groups) in a symmetric connection matrix."""
    n = len(is_connected)
    sets = DisjointSet(range(n))
    for i in range(n):
        for j in range(i + 1, n):
            if is_connected[i][j]:
                sets.union(i, j)
    return sets.set_count


def find_redundant_connection(edges: Iterable[Sequence[int]]) -> tuple[int, int] | None:
    """The first undirected edge that closes a cycle, or None when there is none."""
    sets = DisjointSet()
    for u, v in edges:
        sets.add(u)
        sets.add(v)
        if not sets.union(u, v):
            return u, v
    return None


def remove_stones(stones: Sequence[Sequence[int]]) -> int:
    """Most stones that can be removed, each sharing a row or column with one left behind."""
    sets = DisjointSet(range(len(stones)))
    by_row: dict[int, int] = {}
    by_col: dict[int, int] = {}
    for index, (x, y) in enumerate(stones):
        if x in by_row:
            sets.union(index, by_row[x])
        else:
            by_row[x] = index
        if y in by_col:
            sets.union(index, by_col[y])
        else:
            by_col[y] = index
    return len(stones) - sets.set_count


def make_connected(n: int, connections: Sequence[Sequence[int]]) -> int | None:
    """Cables to move so that all ``n`` computers are connected, or None if there are too few."""
    if len(connections) < n - 1:
        return None
    sets = DisjointSet(range(n))
    for a, b in connections:
        sets.union(a, b)
    return sets.set_count - 1


def equations_possible(equations: Iterable[str]) -> bool:
    """True when equations such as ``"a==b"`` and ``"b!=c"`` can all hold at once."""
    parsed = []
    for equation in equations:
        if len(equation) != 4 or equation[1:3] not in ("==", "!="):
            raise ValueError(f"malformed equation {equation!r}")
        parsed.append((equation[0], equation[1:3] == "==", equation[3]))
    sets = DisjointSet()
    for a, equal, b in parsed:
        sets.add(a)
        sets.add(b)
        if equal:
            sets.union(a, b)
    return not any(not equal and sets.connected(a, b) for a, equal, b in parsed)


def accounts_merge(accounts: Sequence[Sequence[str]]) -> list[list[str]]:
    """Merge accounts that share an e-mail address.

    Each account is a name followed by addresses. Each merged account is the name
    followed by its addresses in sorted order; merged accounts are listed in the
    order of their first account.
    """
    sets = DisjointSet(range(len(accounts)))
    owner: dict[str, int] = {}
    for index, (_, *emails) in enumerate(accounts):
        for email in emails:
            if email in owner:
                sets.union(index, owner[email])
            else:
                owner[email] = index
    groups: dict[int, tuple[str, set[str]]] = {}
    for index, (name, *emails) in enumerate(accounts):
        _, collected = groups.setdefault(sets.find(index), (name, set()))
        collected.update(emails)
    return [[name, *sorted(emails)] for name, emails in groups.values()]