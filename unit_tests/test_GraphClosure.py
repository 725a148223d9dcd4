import pytest
from pyadjgraph.GraphClosure import DisjointSetForest


def test_initial_sets():
    ds = DisjointSetForest(5)
    assert len(ds) == 5
    for i in range(5):
        assert ds.find(i) == i
        assert ds.is_connected(i, i)


def test_union_merges_sets():
    ds = DisjointSetForest(4)
    assert ds.union(0, 1) is True
    assert ds.is_connected(0, 1)
    assert len(ds) == 3
    assert ds.find(0) == ds.find(1)


def test_union_within_same_set_is_rejected():
    ds = DisjointSetForest(3)
    ds.union(0, 1)
    ds.union(1, 2)
    assert ds.union(0, 2) is False
    assert len(ds) == 1


def test_union_by_rank_keeps_taller_root():
    ds = DisjointSetForest(4)
    ds.union(0, 1)
    root = ds.find(0)
    ds.union(2, root)
    assert ds.find(2) == root
    assert ds.rank[root] == 1


def test_find_compresses_paths():
    ds = DisjointSetForest(4)
    # build a chain by hand: 3 -> 2 -> 1 -> 0
    ds.parent[3] = 2
    ds.parent[2] = 1
    ds.parent[1] = 0
    assert ds.find(3) == 0
    assert list(ds.parent) == [0, 0, 0, 0]


def test_sets_listing():
    ds = DisjointSetForest(6)
    ds.union(0, 1)
    ds.union(1, 2)
    ds.union(3, 4)
    assert ds.sets() == [[0, 1, 2], [3, 4], [5]]


def test_len_reflects_set_count():
    ds = DisjointSetForest(6)
    assert len(ds) == 6
    ds.union(0, 1)
    ds.union(1, 2)
    ds.union(3, 4)
    assert len(ds) == 3
    ds.union(2, 3)
    assert len(ds) == 2


def test_out_of_range_node_raises():
    ds = DisjointSetForest(2)
    with pytest.raises(IndexError):
        ds.find(5)
