"""
Depth-first module
==================

A single configurable depth-first walk over adjacency lists.

The walk is driven by a :class:`SearchConfig`, which lists every recognised
option: unconditional and conditional node and arc visitors, a post-order
visitor, extra :class:`Visitor` handler objects, an optional caller-owned
visited bitset and an optional random source for neighbor order.

Two modes are selected from the configuration:

* *traversal* (no conditional visitors): every node reachable from the start
  node is visited exactly once and handler results are ignored;
* *search* (any conditional visitor): a conditional handler returning a false
  value (``STOP``) at any depth ends the whole walk at once. Siblings still pending at every
  ancestor level are skipped.

The walk keeps an explicit stack of frames (node, arc order, cursor) rather
than recursing, so graph depth is bounded only by memory. Nodes are marked
visited on first encounter, which guarantees termination on cyclic graphs.

Configuration problems and unrecognised graph types are reported before any
node is visited.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Sequence

import numpy as np

from pyadjgraph.Bits import Bits
from pyadjgraph.Graphs import (
    AdjacencyList,
    LabeledAdjacencyList,
    LabeledUndirected,
    Undirected,
)

logger = logging.getLogger(__name__)

CONTINUE = True
STOP = False

NodeFunc = Callable[[int], Any]
ArcFunc = Callable[[int, int, int, Optional[int]], Any]


class Visitor:
    """
    Handler interface shared by every callback the walk invokes.

    Handlers run in list order. ``visit_node`` runs once per node, right
    after the node is marked visited. ``visit_arc`` runs for every arc
    examined, before its target is checked against the visited set; ``x`` is
    the arc's index in the node's list and ``label`` is ``None`` for
    unlabeled graphs. ``finish_node`` runs once all of a node's arcs are
    done. Set ``conditional`` on handlers that may return ``STOP``; results
    from other handlers are ignored.
    """

    conditional = False

    def visit_node(self, n: int) -> bool:
        return CONTINUE

    def visit_arc(self, n: int, x: int, to: int, label: Optional[int]) -> bool:
        return CONTINUE

    def finish_node(self, n: int) -> None:
        pass


class _NodeCallback(Visitor):
    def __init__(self, fn: NodeFunc, conditional: bool):
        self.fn = fn
        self.conditional = conditional

    def visit_node(self, n):
        if self.conditional:
            return bool(self.fn(n))
        self.fn(n)
        return CONTINUE


class _ArcCallback(Visitor):
    def __init__(self, fn: ArcFunc, conditional: bool):
        self.fn = fn
        self.conditional = conditional

    def visit_arc(self, n, x, to, label):
        if self.conditional:
            return bool(self.fn(n, x, to, label))
        self.fn(n, x, to, label)
        return CONTINUE


class _PostCallback(Visitor):
    def __init__(self, fn: NodeFunc):
        self.fn = fn

    def finish_node(self, n):
        self.fn(n)


@dataclass
class SearchConfig:
    """
    Options for :func:`depth_first`.

    Attributes
    ----------
    node_visitor : callable, optional
        ``f(n)`` called on the first visit to each node.
    ok_node_visitor : callable, optional
        ``f(n) -> bool``; False stops the walk. Exclusive with
        ``node_visitor``.
    arc_visitor : callable, optional
        ``f(n, x, to, label)`` called for every arc examined.
    ok_arc_visitor : callable, optional
        ``f(n, x, to, label) -> bool``; False stops the walk. Exclusive with
        ``arc_visitor``.
    post_visitor : callable, optional
        ``f(n)`` called when all arcs from ``n`` have been followed.
    visitors : list of Visitor
        Extra handlers, run after the callables above.
    visited : Bits, optional
        Caller-owned visited set, shared across calls to restart a walk
        elsewhere. Allocated to the graph order when absent.
    rand : numpy.random.Generator, optional
        When given, each node's arcs are followed in a fresh random
        permutation drawn from it.
    """

    node_visitor: Optional[NodeFunc] = None
    ok_node_visitor: Optional[NodeFunc] = None
    arc_visitor: Optional[ArcFunc] = None
    ok_arc_visitor: Optional[ArcFunc] = None
    post_visitor: Optional[NodeFunc] = None
    visitors: List[Visitor] = field(default_factory=list)
    visited: Optional[Bits] = None
    rand: Optional[np.random.Generator] = None

    @property
    def searching(self) -> bool:
        """True when any conditional visitor is configured."""
        return (
            self.ok_node_visitor is not None
            or self.ok_arc_visitor is not None
            or any(v.conditional for v in self.visitors)
        )

    def validate(self) -> None:
        """
        Check the configuration for conflicts.

        Raises
        ------
        ValueError
            If both visitors of a node or arc pair are given.
        TypeError
            If ``visitors``, ``visited`` or ``rand`` hold unusable objects.
        """

        if self.node_visitor is not None and self.ok_node_visitor is not None:
            raise ValueError("node_visitor and ok_node_visitor cannot both be specified")
        if self.arc_visitor is not None and self.ok_arc_visitor is not None:
            raise ValueError("arc_visitor and ok_arc_visitor cannot both be specified")
        for v in self.visitors:
            if not isinstance(v, Visitor):
                raise TypeError(f"visitors must be Visitor instances, got {type(v).__name__}")
        if self.visited is not None and not isinstance(self.visited, Bits):
            raise TypeError("visited must be a Bits instance")
        if self.rand is not None and not hasattr(self.rand, "permutation"):
            raise TypeError("rand must provide a permutation method")

    def handlers(self) -> List[Visitor]:
        """Compile the configured callables and visitors into handler order."""
        hs: List[Visitor] = []
        if self.node_visitor is not None:
            hs.append(_NodeCallback(self.node_visitor, conditional=False))
        if self.ok_node_visitor is not None:
            hs.append(_NodeCallback(self.ok_node_visitor, conditional=True))
        if self.arc_visitor is not None:
            hs.append(_ArcCallback(self.arc_visitor, conditional=False))
        if self.ok_arc_visitor is not None:
            hs.append(_ArcCallback(self.ok_arc_visitor, conditional=True))
        if self.post_visitor is not None:
            hs.append(_PostCallback(self.post_visitor))
        hs.extend(self.visitors)
        return hs


def neighbor_access(g):
    """
    Resolve a graph value to the adjacency list the walk reads from.

    Raises
    ------
    TypeError
        If ``g`` is not a recognised graph representation.
    """

    if isinstance(g, (AdjacencyList, LabeledAdjacencyList)):
        return g
    if isinstance(g, Undirected):
        return g.adjacency_list
    if isinstance(g, LabeledUndirected):
        return g.labeled_adjacency_list
    raise TypeError(f"invalid graph type: {type(g).__name__}")


class _Frame:
    __slots__ = ("node", "arcs", "order", "cursor")

    def __init__(self, node: int, arcs: Sequence, order: Sequence[int]):
        self.node = node
        self.arcs = arcs
        self.order = order
        self.cursor = 0


def depth_first(g, start: int, config: Optional[SearchConfig] = None) -> bool:
    """
    Walk ``g`` depth-first from ``start``.

    Parameters
    ----------
    g : AdjacencyList, LabeledAdjacencyList, Undirected or LabeledUndirected
        The graph. It is never modified.
    start : int
        Start node. If it is already in ``config.visited`` nothing happens.
    config : SearchConfig, optional
        Visitors and options. Defaults to a plain traversal.

    Returns
    -------
    bool
        False if a conditional visitor stopped the walk, True otherwise.

    Raises
    ------
    ValueError, TypeError
        On a conflicting configuration or an unrecognised graph type. Raised
        before any node is visited.
    """

    if config is None:
        config = SearchConfig()
    config.validate()
    adj = neighbor_access(g)

    visited = config.visited if config.visited is not None else Bits(len(adj))
    handlers = config.handlers()
    searching = config.searching
    rand = config.rand

    if visited.bit(start):
        return CONTINUE

    logger.debug(
        "Depth-first %s from node %d", "search" if searching else "traversal", start
    )

    stack: List[_Frame] = []

    def enter(n: int) -> bool:
        visited.set_bit(n)
        for h in handlers:
            if not h.visit_node(n) and searching and h.conditional:
                return STOP
        arcs = adj.arcs(n)
        if rand is None:
            order = range(len(arcs))
        else:
            order = rand.permutation(len(arcs)).tolist()
        stack.append(_Frame(n, arcs, order))
        return CONTINUE

    if enter(start) is STOP:
        logger.debug("Search stopped at node %d", start)
        return STOP

    while stack:
        f = stack[-1]
        if f.cursor == len(f.order):
            stack.pop()
            for h in handlers:
                h.finish_node(f.node)
            continue
        x = f.order[f.cursor]
        f.cursor += 1
        to, label = f.arcs[x]
        for h in handlers:
            if not h.visit_arc(f.node, x, to, label) and searching and h.conditional:
                logger.debug("Search stopped at arc %d -> %d", f.node, to)
                return STOP
        if visited.bit(to):
            continue
        if enter(to) is STOP:
            logger.debug("Search stopped at node %d", to)
            return STOP

    return CONTINUE
