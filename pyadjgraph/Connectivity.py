"""
Connectivity module
===================

Graph analyses built as specialisations of :func:`~pyadjgraph.DepthFirst.depth_first`:

* ``connected_components`` and ``connected_component_reps`` for undirected
  graphs;
* ``bipartite``, a 2-coloring that reports an odd cycle on failure;
* ``acyclic`` and ``topological`` for directed graphs; and
* ``tarjan``, strongly connected components in a single pass.

Each function restarts the walk from every still unvisited node in ascending
id order (where the analysis covers the whole graph), sharing one visited
bitset across restarts. Bookkeeping that depends on the current walk path is
kept by :class:`~pyadjgraph.DepthFirst.Visitor` handlers.
"""

from typing import List, NamedTuple, Optional, Tuple

import numpy as np

from pyadjgraph.Bits import Bits
from pyadjgraph.DepthFirst import (
    CONTINUE,
    STOP,
    SearchConfig,
    Visitor,
    depth_first,
    neighbor_access,
)


def connected_components(g) -> np.ndarray:
    """Label each node of an undirected graph with a component id.

    Parameters
    ----------
    g : AdjacencyList or LabeledAdjacencyList (or an undirected wrapper)
        An undirected graph.

    Returns
    -------
    np.ndarray
        Component id per node. Ids count up from 0 in the order components
        are discovered, scanning start nodes by ascending id.

    """

    order = len(neighbor_access(g))
    ids = np.full(order, -1, dtype=np.int64)
    current = 0

    def label(n):
        ids[n] = current

    config = SearchConfig(node_visitor=label, visited=Bits(order))
    for n in range(order):
        if not config.visited.bit(n):
            depth_first(g, n, config)
            current += 1
    return ids


def connected_component_reps(g) -> Tuple[List[int], List[int]]:
    """Find a representative node and the order of each connected component.

    Parameters
    ----------
    g : AdjacencyList or LabeledAdjacencyList (or an undirected wrapper)
        An undirected graph.

    Returns
    -------
    Tuple[List[int], List[int]]
        Representatives (the lowest node id of each component) and the
        number of nodes in each component.

    """

    order = len(neighbor_access(g))
    reps: List[int] = []
    orders: List[int] = []
    count = 0

    def tally(n):
        nonlocal count
        count += 1

    config = SearchConfig(node_visitor=tally, visited=Bits(order))
    for n in range(order):
        if config.visited.bit(n):
            continue
        count = 0
        depth_first(g, n, config)
        reps.append(n)
        orders.append(count)
    return reps, orders


class _PathTracker(Visitor):
    """Keeps the nodes on the current walk path, root first."""

    def __init__(self):
        self.path: List[int] = []

    def visit_node(self, n):
        self.path.append(n)
        return CONTINUE

    def finish_node(self, n):
        self.path.pop()


class Bipartition(NamedTuple):
    """Result of :func:`bipartite`.

    ``c1`` and ``c2`` are set only when ``ok`` is True, ``odd_cycle`` only
    when it is False.
    """

    ok: bool
    c1: Optional[Bits]
    c2: Optional[Bits]
    odd_cycle: Optional[List[int]]


class _TwoColoring(_PathTracker):
    conditional = True

    def __init__(self, order: int):
        super().__init__()
        self.c1 = Bits(order)
        self.c2 = Bits(order)
        self.odd_cycle: Optional[List[int]] = None

    def visit_node(self, n):
        if self.path and self.c1.bit(self.path[-1]):
            self.c2.set_bit(n)
        else:
            self.c1.set_bit(n)
        return super().visit_node(n)

    def visit_arc(self, n, x, to, label):
        same = self.c1 if self.c1.bit(n) else self.c2
        if not same.bit(to):
            return CONTINUE
        cycle = [to]
        for p in reversed(self.path):
            if p == to:
                break
            cycle.append(p)
        self.odd_cycle = cycle
        return STOP


def bipartite(g, start: int) -> Bipartition:
    """Attempt a 2-coloring of the component containing ``start``.

    Parameters
    ----------
    g : AdjacencyList or LabeledAdjacencyList (or an undirected wrapper)
        An undirected graph.
    start : int
        Seed node; it receives the first color, ``c1``.

    Returns
    -------
    Bipartition
        On success, the two color classes. On failure, an odd cycle: the
        node whose color conflicted followed by the walk path back from
        the node that found the conflict. This is the first conflict
        found, not necessarily the shortest odd cycle.

    """

    order = len(neighbor_access(g))
    coloring = _TwoColoring(order)
    ok = depth_first(g, start, SearchConfig(visitors=[coloring]))
    if ok:
        return Bipartition(True, coloring.c1, coloring.c2, None)
    return Bipartition(False, None, None, coloring.odd_cycle)


class _BackArcDetector(Visitor):
    conditional = True

    def __init__(self, order: int):
        self.on_path = Bits(order)
        self.back_arc: Optional[Tuple[int, int]] = None

    def visit_node(self, n):
        self.on_path.set_bit(n)
        return CONTINUE

    def visit_arc(self, n, x, to, label):
        if self.on_path.bit(to):
            self.back_arc = (n, to)
            return STOP
        return CONTINUE

    def finish_node(self, n):
        self.on_path.clear_bit(n)


def _walk_all(g, order: int, visitors: List[Visitor]) -> bool:
    config = SearchConfig(visitors=visitors, visited=Bits(order))
    for n in range(order):
        if config.visited.bit(n):
            continue
        if depth_first(g, n, config) is STOP:
            return STOP
    return CONTINUE


def acyclic(g) -> Tuple[bool, Optional[Tuple[int, int]]]:
    """Test a directed graph for cycles.

    Parameters
    ----------
    g : AdjacencyList or LabeledAdjacencyList
        A directed graph.

    Returns
    -------
    Tuple[bool, Optional[Tuple[int, int]]]
        True and None if the graph has no cycle. Otherwise False and the
        first back arc ``(fr, to)`` found; ``to`` is on the walk path that
        leads to ``fr``.

    """

    order = len(neighbor_access(g))
    detector = _BackArcDetector(order)
    if _walk_all(g, order, [detector]) is STOP:
        return False, detector.back_arc
    return True, None


class _Postorder(Visitor):
    def __init__(self):
        self.nodes: List[int] = []

    def finish_node(self, n):
        self.nodes.append(n)


def topological(g) -> List[int]:
    """Order the nodes of a directed graph so every arc points forward.

    Parameters
    ----------
    g : AdjacencyList or LabeledAdjacencyList
        A directed graph.

    Returns
    -------
    List[int]
        All nodes in topological order (reverse depth-first postorder,
        restarting from unvisited nodes in ascending id order), or an empty
        list if the graph has a cycle.

    """

    order = len(neighbor_access(g))
    postorder = _Postorder()
    if _walk_all(g, order, [_BackArcDetector(order), postorder]) is STOP:
        return []
    postorder.nodes.reverse()
    return postorder.nodes


class _Tarjan(_PathTracker):
    def __init__(self, order: int):
        super().__init__()
        self.index = np.full(order, -1, dtype=np.int64)
        self.low = np.zeros(order, dtype=np.int64)
        self.on_stack = Bits(order)
        self.stack: List[int] = []
        self.components: List[List[int]] = []
        self.counter = 0

    def visit_node(self, n):
        self.index[n] = self.low[n] = self.counter
        self.counter += 1
        self.stack.append(n)
        self.on_stack.set_bit(n)
        return super().visit_node(n)

    def visit_arc(self, n, x, to, label):
        # only arcs to nodes already indexed and still stacked lower low-link
        if self.on_stack.bit(to) and self.index[to] < self.low[n]:
            self.low[n] = self.index[to]
        return CONTINUE

    def finish_node(self, n):
        super().finish_node(n)
        if self.low[n] == self.index[n]:
            component = []
            while True:
                m = self.stack.pop()
                self.on_stack.clear_bit(m)
                component.append(m)
                if m == n:
                    break
            self.components.append(component)
        if self.path:
            parent = self.path[-1]
            if self.low[n] < self.low[parent]:
                self.low[parent] = self.low[n]


def tarjan(g) -> List[List[int]]:
    """Find the strongly connected components of a directed graph.

    Uses Tarjan's algorithm: one depth-first pass tracking a discovery index
    and a low-link per node. A component is emitted when a node finishes
    with a low-link equal to its own index, by popping the auxiliary stack
    down to that node. Runs in O(V + E).

    Parameters
    ----------
    g : AdjacencyList or LabeledAdjacencyList
        A directed graph.

    Returns
    -------
    List[List[int]]
        Components in the order they are emitted, each listing its nodes in
        stack pop order. A DAG gives one singleton per node.

    """

    order = len(neighbor_access(g))
    t = _Tarjan(order)
    _walk_all(g, order, [t])
    return t.components
