"""Graph module providing weighted digraph abstractions.

This module contains:
- Edge[V]: An immutable weighted, directed edge
- Digraph[V]: The read-only query protocol solvers depend on
- WeightedDigraph[V]: A generic, immutable weighted digraph
- reverse_post_order: Topological order of the vertices reachable from a start
- topological_sort: Whole-graph ordering used for validation
"""

from ._algorithms import CycleError, dfs_post_order, reverse_post_order, topological_sort
from ._edge import Digraph, Edge
from ._weighted_graph import WeightedDigraph

__all__ = [
    "CycleError",
    "Digraph",
    "Edge",
    "WeightedDigraph",
    "dfs_post_order",
    "reverse_post_order",
    "topological_sort",
]
