"""
Graph representations
=====================

Node ids are dense ``int`` indices ``0 <= n < order``. Graphs are stored as
adjacency lists: one slot per node, each slot an ordered list of outgoing
arcs. Adjacency lists are inherently directed; an undirected graph is one
where every arc has a reciprocal.

Both list types expose the same neighbor-access capability, ``arcs(n)``,
which returns the ordered ``(to, label)`` pairs leaving ``n``. Plain lists
report ``None`` for the label. The depth-first engine and every algorithm
built on it only go through ``arcs``, so they run unchanged on either type.

This module provides:

* ``AdjacencyList`` and ``LabeledAdjacencyList``;
* the ``Edge``, ``Half`` and ``LabeledEdge`` value types;
* the ``Undirected`` and ``LabeledUndirected`` builders, which insert
  reciprocal arcs; and
* ``WeightedEdgeList``, the input to Kruskal's algorithm.
"""

from dataclasses import dataclass, field
from typing import Callable, Iterable, List, NamedTuple, Optional, Tuple

import numpy as np

WeightFunc = Callable[[int], float]


class Edge(NamedTuple):
    """An undirected edge between two node ids."""

    n1: int
    n2: int


class Half(NamedTuple):
    """One direction of a labeled arc: the target node and the arc label."""

    to: int
    label: int


class LabeledEdge(NamedTuple):
    edge: Edge
    label: int


class AdjacencyList(list):
    """A graph as a list of neighbor id lists, indexed by node id."""

    @classmethod
    def empty(cls, order: int) -> "AdjacencyList":
        return cls([] for _ in range(order))

    @property
    def order(self) -> int:
        return len(self)

    def arcs(self, n: int) -> List[Tuple[int, None]]:
        return [(to, None) for to in self[n]]

    def arc_size(self) -> int:
        """Total number of arcs in the graph."""
        return sum(len(to) for to in self)

    def add_arc(self, fr: int, to: int) -> None:
        self[fr].append(to)


class LabeledAdjacencyList(list):
    """A graph as a list of ``Half`` lists, indexed by node id."""

    @classmethod
    def empty(cls, order: int) -> "LabeledAdjacencyList":
        return cls([] for _ in range(order))

    @property
    def order(self) -> int:
        return len(self)

    def arcs(self, n: int) -> List[Half]:
        return self[n]

    def arc_size(self) -> int:
        """Total number of arcs in the graph."""
        return sum(len(to) for to in self)

    def add_arc(self, fr: int, to: int, label: int) -> None:
        self[fr].append(Half(to, label))

    def unlabeled(self) -> AdjacencyList:
        """Copy of the graph with labels dropped."""
        return AdjacencyList([h.to for h in to] for to in self)


def _grow(g: list, n: int) -> None:
    while len(g) <= n:
        g.append([])


class Undirected:
    """
    Undirected graph built on an ``AdjacencyList``.

    Edges are stored as reciprocal arc pairs; a loop is stored as a single
    arc. The underlying list grows as edges name larger node ids.
    """

    def __init__(self, adjacency_list: Optional[AdjacencyList] = None):
        if adjacency_list is None:
            adjacency_list = AdjacencyList()
        self.adjacency_list = adjacency_list

    @property
    def order(self) -> int:
        return len(self.adjacency_list)

    def add_edge(self, n1: int, n2: int) -> None:
        g = self.adjacency_list
        _grow(g, max(n1, n2))
        g[n1].append(n2)
        if n1 != n2:
            g[n2].append(n1)

    def edges(self) -> List[Edge]:
        """Each undirected edge once, as ``(fr, to)`` with ``fr <= to``."""
        return [
            Edge(fr, to)
            for fr, tos in enumerate(self.adjacency_list)
            for to in tos
            if fr <= to
        ]


class LabeledUndirected:
    """
    Undirected graph built on a ``LabeledAdjacencyList``.

    This is the graph type produced by Kruskal's algorithm and consumed by
    Prim's algorithm.
    """

    def __init__(self, labeled_adjacency_list: Optional[LabeledAdjacencyList] = None):
        if labeled_adjacency_list is None:
            labeled_adjacency_list = LabeledAdjacencyList()
        self.labeled_adjacency_list = labeled_adjacency_list

    @classmethod
    def from_edges(
        cls, edges: Iterable[Tuple[int, int, int]], order: int = 0
    ) -> "LabeledUndirected":
        """
        Build a graph from ``(n1, n2, label)`` triples.

        Parameters
        ----------
        edges : Iterable[Tuple[int, int, int]]
            Edges in insertion order.
        order : int, optional
            Minimum number of nodes, for graphs with isolated trailing nodes.

        Returns
        -------
        LabeledUndirected
            The graph with every edge inserted as a reciprocal arc pair.
        """

        g = cls(LabeledAdjacencyList.empty(order))
        for n1, n2, label in edges:
            g.add_edge(Edge(n1, n2), label)
        return g

    @property
    def order(self) -> int:
        return len(self.labeled_adjacency_list)

    def add_edge(self, edge: Edge, label: int) -> None:
        n1, n2 = edge
        g = self.labeled_adjacency_list
        _grow(g, max(n1, n2))
        g[n1].append(Half(n2, label))
        if n1 != n2:
            g[n2].append(Half(n1, label))

    def edges(self) -> List[LabeledEdge]:
        """Each undirected edge once, in adjacency list order."""
        return [
            LabeledEdge(Edge(fr, h.to), h.label)
            for fr, halves in enumerate(self.labeled_adjacency_list)
            for h in halves
            if fr <= h.to
        ]

    def weighted_edge_list(self, weight_func: WeightFunc) -> "WeightedEdgeList":
        return WeightedEdgeList(self.order, weight_func, self.edges())


@dataclass
class WeightedEdgeList:
    """
    Edge list with a weight function over edge labels.

    Attributes
    ----------
    order : int
        Number of nodes.
    weight_func : Callable[[int], float]
        Maps an edge label to its real weight.
    edges : List[LabeledEdge]
        The edges, each listed once.
    """

    order: int
    weight_func: WeightFunc
    edges: List[LabeledEdge] = field(default_factory=list)

    def weights(self) -> np.ndarray:
        return np.array([self.weight_func(e.label) for e in self.edges], dtype=float)

    def sort(self) -> None:
        """Stable sort of ``edges`` by ascending weight, in place."""
        idx = np.argsort(self.weights(), kind="stable")
        self.edges = [self.edges[i] for i in idx]
