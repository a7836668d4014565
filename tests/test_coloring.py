import pytest

from algokit.graphs.coloring import EulerKind, euler_kind, is_bipartite, possible_bipartition


def _cycle(n):
    return [[(i - 1) % n, (i + 1) % n] for i in range(n)]


@pytest.mark.parametrize("n", [4, 6, 8])
def test_even_cycle_is_bipartite(n):
    assert is_bipartite(_cycle(n)) is True


@pytest.mark.parametrize("n", [3, 5, 7])
def test_odd_cycle_is_not_bipartite(n):
    assert is_bipartite(_cycle(n)) is False


def test_disconnected_parts_are_all_checked():
    graph = [[1], [0], [3, 4], [2, 4], [2, 3]]
    assert is_bipartite(graph) is False


def test_empty_graph_is_bipartite():
    assert is_bipartite([]) is True


def test_possible_bipartition():
    assert possible_bipartition(4, [[1, 2], [1, 3], [2, 4]]) is True
    assert possible_bipartition(3, [[1, 2], [1, 3], [2, 3]]) is False
    assert possible_bipartition(5, []) is True


def test_euler_circuit_on_cycle():
    assert euler_kind(_cycle(5)) is EulerKind.CIRCUIT


def test_euler_path_on_line():
    assert euler_kind([[1], [0, 2], [1]]) is EulerKind.PATH


def test_star_is_not_eulerian():
    assert euler_kind([[1, 2, 3], [0], [0], [0]]) is EulerKind.NOT_EULERIAN


def test_two_components_not_eulerian():
    assert euler_kind([[1], [0], [3], [2]]) is EulerKind.NOT_EULERIAN


def test_no_edges_counts_as_circuit():
    assert euler_kind([[], [], []]) is EulerKind.CIRCUIT


def test_isolated_vertices_are_ignored():
    graph = _cycle(3) + [[]]
    assert euler_kind(graph) is EulerKind.CIRCUIT