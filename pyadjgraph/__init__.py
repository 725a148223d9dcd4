from pyadjgraph.Bits import Bits
from pyadjgraph.Graphs import (
    AdjacencyList,
    Edge,
    Half,
    LabeledAdjacencyList,
    LabeledEdge,
    LabeledUndirected,
    Undirected,
    WeightedEdgeList,
)
from pyadjgraph.FromList import FromList
from pyadjgraph.DepthFirst import CONTINUE, STOP, SearchConfig, Visitor, depth_first
from pyadjgraph.Connectivity import (
    Bipartition,
    acyclic,
    bipartite,
    connected_component_reps,
    connected_components,
    tarjan,
    topological,
)
from pyadjgraph.GraphClosure import DisjointSetForest
from pyadjgraph.SpanningForest import kruskal, kruskal_sorted, prim
from pyadjgraph.graph_utils import bounds_ok, has_parallel_sort, is_simple, is_undirected

__all__ = [
    "Bits",
    "AdjacencyList",
    "Edge",
    "Half",
    "LabeledAdjacencyList",
    "LabeledEdge",
    "LabeledUndirected",
    "Undirected",
    "WeightedEdgeList",
    "FromList",
    "CONTINUE",
    "STOP",
    "SearchConfig",
    "Visitor",
    "depth_first",
    "Bipartition",
    "acyclic",
    "bipartite",
    "connected_component_reps",
    "connected_components",
    "tarjan",
    "topological",
    "DisjointSetForest",
    "kruskal",
    "kruskal_sorted",
    "prim",
    "bounds_ok",
    "has_parallel_sort",
    "is_simple",
    "is_undirected",
]
