import numpy as np
from typing import List


class DisjointSetForest:
    """
    A Union-Find (Disjoint Set) structure over dense node ids, with union by
    rank and path compression.

    Used by Kruskal's algorithm to reject edges that would close a cycle.
    """

    def __init__(self, num_nodes: int):
        """
        Initialize the forest with every node in its own set.

        Parameters
        ----------
        num_nodes : int
            The number of nodes.
        """

        self.parent = np.arange(num_nodes, dtype=np.int64)
        self.rank = np.zeros(num_nodes, dtype=np.int64)
        self.num_nodes = num_nodes
        self.num_sets = num_nodes

    def find(self, node: int) -> int:
        """
        Find the root representative of the set containing the node.

        Every node on the path to the root is re-pointed at the root.

        Parameters
        ----------
        node : int
            The node whose set root is to be found.

        Returns
        -------
        int
            The root node of the set.
        """

        parent = self.parent
        root = node
        while parent[root] != root:
            root = int(parent[root])
        while parent[node] != root:
            up = int(parent[node])
            parent[node] = root
            node = up
        return root

    def union(self, node1: int, node2: int) -> bool:
        """
        Merge the sets containing node1 and node2.

        Parameters
        ----------
        node1 : int
            First node.
        node2 : int
            Second node.

        Returns
        -------
        bool
            True if the nodes were in different sets and have been merged,
            False if they were already in the same set.
        """

        root1 = self.find(node1)
        root2 = self.find(node2)
        if root1 == root2:
            return False

        # Attach smaller rank tree under the larger rank tree
        if self.rank[root1] < self.rank[root2]:
            root1, root2 = root2, root1
        self.parent[root2] = root1
        if self.rank[root1] == self.rank[root2]:
            self.rank[root1] += 1
        self.num_sets -= 1
        return True

    def is_connected(self, node1: int, node2: int) -> bool:
        """
        Check whether two nodes are in the same set.

        Parameters
        ----------
        node1 : int
            First node.
        node2 : int
            Second node.

        Returns
        -------
        bool
            True if node1 and node2 are in the same set, False otherwise.
        """

        return self.find(node1) == self.find(node2)

    def sets(self) -> List[List[int]]:
        """
        List the current sets, each in ascending node order.

        Returns
        -------
        List[List[int]]
            Sets ordered by their smallest node.
        """

        groups = {}
        for n in range(self.num_nodes):
            groups.setdefault(self.find(n), []).append(n)
        return list(groups.values())

    def __len__(self) -> int:
        """
        Return the number of disjoint sets.

        Returns
        -------
        int
            The number of sets currently tracked.
        """

        return self.num_sets
