"""
Spanning forest module
======================

Greedy minimum spanning forest construction.

* ``kruskal`` sorts a :class:`~pyadjgraph.Graphs.WeightedEdgeList` by weight
  (stable, so equal weights keep their input order) and hands it to
  ``kruskal_sorted``, which scans the edges keeping each one whose end points
  are still in different sets of a
  :class:`~pyadjgraph.GraphClosure.DisjointSetForest`. The result covers
  every component of the input, so it may be a forest.
* ``prim`` grows a single tree from a root, confined to the root's
  component, recording it in a :class:`~pyadjgraph.FromList.FromList`. Call
  it once per component representative to span a disconnected graph.

Disconnection is not an error: callers compare the spanned node count with
the component order they expect.
"""

import heapq
import itertools
import logging
from typing import MutableSequence, Optional, Tuple

import numpy as np

from pyadjgraph.Bits import Bits
from pyadjgraph.FromList import FromList, ensure_forest
from pyadjgraph.GraphClosure import DisjointSetForest
from pyadjgraph.Graphs import (
    LabeledAdjacencyList,
    LabeledUndirected,
    WeightedEdgeList,
    WeightFunc,
)

logger = logging.getLogger(__name__)


def kruskal(edge_list: WeightedEdgeList) -> Tuple[LabeledUndirected, float]:
    """Compute a minimum spanning forest with Kruskal's algorithm.

    Parameters
    ----------
    edge_list : WeightedEdgeList
        The graph as an edge list. It is not modified.

    Returns
    -------
    Tuple[LabeledUndirected, float]
        The spanning forest as an undirected graph over the same nodes, and
        its total weight.

    """

    ordered = WeightedEdgeList(edge_list.order, edge_list.weight_func, list(edge_list.edges))
    ordered.sort()
    return kruskal_sorted(ordered)


def kruskal_sorted(edge_list: WeightedEdgeList) -> Tuple[LabeledUndirected, float]:
    """Kruskal's algorithm on an edge list already sorted by ascending weight.

    The order is not checked. An unsorted list gives a spanning forest that
    is not minimal.

    Parameters
    ----------
    edge_list : WeightedEdgeList
        The graph as an edge list, ascending by weight.

    Returns
    -------
    Tuple[LabeledUndirected, float]
        The spanning forest as an undirected graph, and its total weight.

    """

    ds = DisjointSetForest(edge_list.order)
    forest = LabeledUndirected(LabeledAdjacencyList.empty(edge_list.order))
    w = edge_list.weight_func
    dist = 0.0
    accepted = 0
    for e in edge_list.edges:
        n1, n2 = e.edge
        if ds.union(n1, n2):
            forest.add_edge(e.edge, e.label)
            dist += w(e.label)
            accepted += 1
    logger.debug(
        "Kruskal accepted %d of %d edges, %d trees, total weight %g",
        accepted,
        len(edge_list.edges),
        len(ds),
        dist,
    )
    return forest, dist


def _labeled(g) -> LabeledAdjacencyList:
    if isinstance(g, LabeledUndirected):
        return g.labeled_adjacency_list
    if isinstance(g, LabeledAdjacencyList):
        return g
    raise TypeError(f"prim requires a labeled graph, got {type(g).__name__}")


def prim(
    g,
    start: int,
    weight_func: WeightFunc,
    forest: Optional[FromList] = None,
    labels: Optional[MutableSequence[int]] = None,
    leaves: Optional[Bits] = None,
) -> Tuple[int, float]:
    """Grow a minimum spanning tree from ``start`` with Prim's algorithm.

    Only the component containing ``start`` is spanned. Nodes already in
    ``forest`` (path length > 0) are treated as part of another tree and
    left alone, so one forest can collect the trees of several calls.

    Parameters
    ----------
    g : LabeledUndirected or LabeledAdjacencyList
        An undirected graph whose arc labels are passed to ``weight_func``.
    start : int
        Root of the tree.
    weight_func : Callable[[int], float]
        Maps an arc label to its weight.
    forest : FromList, optional
        Receives parent, path length and leaf bits for the spanned nodes.
        Reset if its size does not match the graph order.
    labels : MutableSequence[int], optional
        Sized to the graph order; receives the label of each spanned node's
        parent arc.
    leaves : Bits, optional
        Receives the leaves of this tree only. Reset first when its size
        does not match the graph order.

    Returns
    -------
    Tuple[int, float]
        Number of nodes spanned, including ``start``, and the total weight
        of the tree.

    """

    adj = _labeled(g)
    forest = ensure_forest(forest, len(adj))
    if leaves is not None and leaves.num != len(adj):
        leaves.reset(len(adj))
    parent = forest.parent
    length = forest.length

    parent[start] = FromList.NONE
    length[start] = 1
    forest.max_len = max(forest.max_len, 1)
    forest.leaves.set_bit(start)
    if leaves is not None:
        leaves.set_bit(start)

    best = np.full(len(adj), np.inf)
    frontier = []
    seq = itertools.count()
    spanned = 1
    dist = 0.0

    a = start
    while True:
        for to, label in adj[a]:
            if length[to] > 0:
                continue
            wt = weight_func(label)
            if wt < best[to]:
                best[to] = wt
                heapq.heappush(frontier, (wt, next(seq), to, a, label))

        nxt = None
        while frontier:
            wt, _, n, fr, label = heapq.heappop(frontier)
            # entries for nodes already in a tree are stale
            if length[n] == 0:
                nxt = n
                break
        if nxt is None:
            break

        a = nxt
        parent[a] = fr
        length[a] = length[fr] + 1
        if length[a] > forest.max_len:
            forest.max_len = int(length[a])
        if labels is not None:
            labels[a] = label
        dist += wt
        forest.leaves.set_bit(a)
        forest.leaves.clear_bit(fr)
        if leaves is not None:
            leaves.set_bit(a)
            leaves.clear_bit(fr)
        spanned += 1

    logger.debug("Prim from node %d spanned %d nodes, total weight %g", start, spanned, dist)
    return spanned, dist
