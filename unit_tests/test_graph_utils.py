import pytest
from pyadjgraph.Graphs import AdjacencyList, LabeledUndirected
from pyadjgraph.graph_utils import (
    any_loop,
    bounds_ok,
    has_parallel_sort,
    is_simple,
    is_undirected,
)


def test_bounds_ok():
    assert bounds_ok(AdjacencyList()) == (True, -1, -1)
    assert bounds_ok(AdjacencyList([[9]])) == (False, 0, 9)


def test_has_parallel_sort():
    g = AdjacencyList([[], [0]])
    assert has_parallel_sort(g) == (-1, -1)
    g[1].append(0)
    assert has_parallel_sort(g) == (1, 0)


def test_is_simple():
    assert is_simple(AdjacencyList([[], [], [0, 1]])) == (True, -1)
    assert is_simple(AdjacencyList([[], [1], [0, 1]])) == (False, 1)
    assert is_simple(AdjacencyList([[], [], [0, 1, 0]])) == (False, 2)
    assert any_loop(AdjacencyList([[0]])) == (True, 0)


def test_is_undirected():
    g = AdjacencyList([[1, 2], [], [0]])
    assert is_undirected(g) == (False, 0, 1)
    g[1].append(0)
    assert is_undirected(g) == (True, -1, -1)


def test_labeled_graphs_are_checked_too():
    g = LabeledUndirected.from_edges([(0, 1, 5), (0, 1, 6)])
    assert is_undirected(g) == (True, -1, -1)
    assert has_parallel_sort(g) == (0, 1)


def test_unrecognised_graph_type():
    with pytest.raises(TypeError):
        bounds_ok([[0]])
