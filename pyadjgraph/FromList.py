import numpy as np
from typing import List, Optional, Sequence

from pyadjgraph.Bits import Bits
from pyadjgraph.Graphs import LabeledAdjacencyList, LabeledUndirected


class FromList:
    """
    A spanning forest stored as parent pointers.

    For every node ``n``, ``parent[n]`` is the node it was reached from
    (``-1`` for roots and for nodes not reached) and ``length[n]`` is the
    number of nodes on the path from its root to ``n`` inclusive (1 for a
    root, 0 for a node not reached). ``leaves`` has a bit set for every node
    that no other node points to.
    """

    NONE = -1

    def __init__(self, num: int):
        """
        Create an empty forest over ``num`` nodes.

        Parameters
        ----------
        num : int
            Number of nodes.
        """

        self.reset(num)

    def reset(self, num: int) -> None:
        """Clear the forest and size it to ``num`` nodes."""
        self.parent = np.full(num, self.NONE, dtype=np.int64)
        self.length = np.zeros(num, dtype=np.int64)
        self.leaves = Bits(num)
        self.max_len = 0

    def __len__(self) -> int:
        return len(self.parent)

    def roots(self) -> List[int]:
        return np.flatnonzero(self.length == 1).tolist()

    def path_to(self, n: int) -> List[int]:
        """
        List the nodes on the path from the root of ``n``'s tree to ``n``.

        Parameters
        ----------
        n : int
            The end node.

        Returns
        -------
        List[int]
            Node ids, root first. Empty if ``n`` was not reached.
        """

        size = int(self.length[n])
        path = [0] * size
        for i in range(size - 1, -1, -1):
            path[i] = n
            n = int(self.parent[n])
        return path

    def transpose_labeled(self, labels: Sequence[int]) -> LabeledAdjacencyList:
        """Reverse every parent arc, giving a list of child arcs per node."""
        g = LabeledAdjacencyList.empty(len(self))
        for n, p in enumerate(self.parent.tolist()):
            if p != self.NONE:
                g.add_arc(p, n, labels[n])
        return g

    def undirected(self, labels: Sequence[int]) -> LabeledUndirected:
        """
        The forest as an undirected graph.

        Parameters
        ----------
        labels : Sequence[int]
            Label of each node's parent arc, as filled in by ``prim``.

        Returns
        -------
        LabeledUndirected
            Each node lists its child arcs first, then the arc back to its
            parent.
        """

        t = self.transpose_labeled(labels)
        u = LabeledAdjacencyList(list(halves) for halves in t)
        for fr, halves in enumerate(t):
            for h in halves:
                u.add_arc(h.to, fr, h.label)
        return LabeledUndirected(u)

    def recalc_leaves(self) -> Bits:
        """Recompute ``leaves`` from the parent pointers."""
        self.leaves.fill()
        for p in self.parent.tolist():
            if p != self.NONE:
                self.leaves.clear_bit(p)
        return self.leaves

    def __repr__(self) -> str:
        return f"FromList(parent={self.parent.tolist()}, length={self.length.tolist()})"


def ensure_forest(forest: Optional[FromList], num: int) -> FromList:
    if forest is None:
        return FromList(num)
    if len(forest) != num:
        forest.reset(num)
    elif forest.leaves.num != num:
        forest.leaves.reset(num)
    return forest
