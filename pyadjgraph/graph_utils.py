"""Structural checks for adjacency lists.

The algorithms in this package assume valid input and do not call these.
Run them first on graphs from untrusted sources.
"""

from collections import Counter
from typing import Tuple

from pyadjgraph.DepthFirst import neighbor_access


def bounds_ok(g) -> Tuple[bool, int, int]:
    """Check that every arc targets a node id inside the graph.

    Returns ``(True, -1, -1)``, or ``False`` with the first arc ``fr -> to``
    found out of range.
    """
    adj = neighbor_access(g)
    order = len(adj)
    for fr in range(order):
        for to, _ in adj.arcs(fr):
            if not 0 <= to < order:
                return False, fr, to
    return True, -1, -1


def has_parallel_sort(g) -> Tuple[int, int]:
    """Find a pair of parallel arcs by sorting each node's targets.

    Returns ``(fr, to)`` for the first node with two arcs to the same node,
    or ``(-1, -1)`` if there are none. Repeated loops count as parallel.
    """
    adj = neighbor_access(g)
    for fr in range(len(adj)):
        targets = sorted(to for to, _ in adj.arcs(fr))
        for a, b in zip(targets, targets[1:]):
            if a == b:
                return fr, a
    return -1, -1


def any_loop(g) -> Tuple[bool, int]:
    adj = neighbor_access(g)
    for fr in range(len(adj)):
        for to, _ in adj.arcs(fr):
            if to == fr:
                return True, fr
    return False, -1


def is_simple(g) -> Tuple[bool, int]:
    """Check for a graph with no loops and no parallel arcs.

    Returns ``(True, -1)``, or ``False`` with a node that has a loop or
    parallel arcs. Loops are looked for first.
    """
    loop, n = any_loop(g)
    if loop:
        return False, n
    fr, _ = has_parallel_sort(g)
    if fr >= 0:
        return False, fr
    return True, -1


def is_undirected(g) -> Tuple[bool, int, int]:
    """Check that every arc has a reciprocal.

    Parallel arcs must be matched by as many reciprocals. Returns
    ``(True, -1, -1)``, or ``False`` with the first arc ``fr -> to`` found
    without one.
    """
    adj = neighbor_access(g)
    counts = Counter(
        (fr, to) for fr in range(len(adj)) for to, _ in adj.arcs(fr)
    )
    for fr in range(len(adj)):
        for to, _ in adj.arcs(fr):
            if counts[(fr, to)] != counts[(to, fr)]:
                return False, fr, to
    return True, -1, -1
