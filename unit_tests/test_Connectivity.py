import numpy as np
import pytest
from scipy.sparse import csr_matrix
from scipy.sparse.csgraph import connected_components as scipy_components
from pyadjgraph.Connectivity import (
    acyclic,
    bipartite,
    connected_component_reps,
    connected_components,
    tarjan,
    topological,
)
from pyadjgraph.Graphs import AdjacencyList, LabeledUndirected


@pytest.fixture
def scc_graph():
    return AdjacencyList([
        [1],
        [4, 2, 5],
        [3, 6],
        [2, 7],
        [5, 0],
        [6],
        [5],
        [3, 6],
    ])


def random_undirected(n, m, seed):
    rng = np.random.default_rng(seed)
    g = AdjacencyList.empty(n)
    for _ in range(m):
        a, b = rng.integers(0, n, size=2).tolist()
        if a != b:
            g[a].append(b)
            g[b].append(a)
    return g


def test_connected_components_ids():
    g = AdjacencyList([[3, 4], [5], [], [0, 4], [0, 3], [1]])
    assert connected_components(g).tolist() == [0, 1, 2, 0, 0, 1]


def test_connected_component_reps():
    g = AdjacencyList([[3, 4], [5], [], [0, 4], [0, 3], [1]])
    reps, orders = connected_component_reps(g)
    assert reps == [0, 1, 2]
    assert orders == [3, 2, 1]


def test_connected_component_reps_labeled():
    g = LabeledUndirected.from_edges([(0, 1, 3), (1, 2, 4), (2, 0, 5), (3, 4, 2)])
    assert connected_component_reps(g) == ([0, 3], [3, 2])


def test_connected_components_match_scipy():
    g = random_undirected(60, 45, seed=1)
    rows = [fr for fr, to in enumerate(g) for _ in to]
    cols = [t for to in g for t in to]
    m = csr_matrix((np.ones(len(rows)), (rows, cols)), shape=(60, 60))
    count, scipy_labels = scipy_components(m, directed=False)
    ids = connected_components(g)
    assert ids.max() + 1 == count
    # same partition, possibly different numbering
    pairs = set(zip(ids.tolist(), scipy_labels.tolist()))
    assert len(pairs) == count


def test_bipartite_coloring():
    g = AdjacencyList([[3], [3], [3, 4], [0, 1, 2], [2]])
    result = bipartite(g, 0)
    assert result.ok
    assert result.c1.slice() == [0, 1, 2]
    assert result.c2.slice() == [3, 4]
    assert result.odd_cycle is None


def test_bipartite_odd_cycle():
    g = AdjacencyList([[3], [3], [3, 4], [0, 1, 2], [2]])
    g[3].append(4)
    g[4].append(3)
    result = bipartite(g, 0)
    assert not result.ok
    assert result.c1 is None and result.c2 is None
    assert result.odd_cycle == [3, 4, 2]


def test_bipartite_even_cycle():
    g = AdjacencyList([[1, 3], [0, 2], [1, 3], [2, 0]])
    result = bipartite(g, 0)
    assert result.ok
    assert result.c1.slice() == [0, 2]
    assert result.c2.slice() == [1, 3]


def test_acyclic():
    g = AdjacencyList([[1], [2], [3], []])
    assert acyclic(g) == (True, None)
    g[3] = [1]
    assert acyclic(g) == (False, (3, 1))


def test_acyclic_self_loop():
    g = AdjacencyList([[], [1]])
    assert acyclic(g) == (False, (1, 1))


def test_acyclic_cross_arc_is_not_a_cycle():
    # 0 -> 1 -> 2 and 0 -> 2: 2 is finished when 0 -> 2 is examined
    g = AdjacencyList([[1, 2], [2], []])
    assert acyclic(g) == (True, None)


def test_topological_order():
    g = AdjacencyList([[], [2], [], [1, 2], [3, 2]])
    assert topological(g) == [4, 3, 1, 2, 0]


def test_topological_with_cycle_is_empty():
    g = AdjacencyList([[], [2], [3], [1, 2], [3, 2]])
    assert topological(g) == []


def test_topological_arcs_point_forward():
    rng = np.random.default_rng(5)
    n = 40
    g = AdjacencyList.empty(n)
    perm = rng.permutation(n).tolist()
    for _ in range(120):
        i, j = sorted(rng.choice(n, size=2, replace=False).tolist())
        g[perm[i]].append(perm[j])
    order = topological(g)
    assert sorted(order) == list(range(n))
    position = {node: i for i, node in enumerate(order)}
    for fr, tos in enumerate(g):
        for to in tos:
            assert position[fr] < position[to]


def test_tarjan(scc_graph):
    assert tarjan(scc_graph) == [[6, 5], [7, 3, 2], [4, 1, 0]]


def test_tarjan_dag_gives_singletons():
    g = AdjacencyList([[1, 2], [2], []])
    assert tarjan(g) == [[2], [1], [0]]


def test_tarjan_covers_unreached_nodes():
    g = AdjacencyList([[1], [0], [0]])
    assert tarjan(g) == [[1, 0], [2]]


def test_tarjan_matches_scipy_strong_components():
    rng = np.random.default_rng(11)
    n = 50
    g = AdjacencyList.empty(n)
    for _ in range(80):
        a, b = rng.integers(0, n, size=2).tolist()
        g[a].append(b)
    rows = [fr for fr, to in enumerate(g) for _ in to]
    cols = [t for to in g for t in to]
    m = csr_matrix((np.ones(len(rows)), (rows, cols)), shape=(n, n))
    count, labels = scipy_components(m, directed=True, connection="strong")
    components = tarjan(g)
    assert len(components) == count
    assert sorted(x for c in components for x in c) == list(range(n))
    for c in components:
        assert len({labels[x] for x in c}) == 1
