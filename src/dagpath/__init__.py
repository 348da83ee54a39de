"""Shortest paths in weighted directed acyclic graphs."""

__all__ = [
    "CycleError",
    "Digraph",
    "Edge",
    "EdgeEntry",
    "GraphDocument",
    "GraphFileError",
    "PathEntry",
    "ShortestPathSolver",
    "SolutionReport",
    "ToposortDAGSolver",
    "UnreachableVertexError",
    "WeightedDigraph",
    "build_solution_report",
    "dfs_post_order",
    "export_solution_to_toml",
    "load_graph_document",
    "load_graph_from_toml",
    "reverse_post_order",
    "topological_sort",
]

from ._graph import (
    CycleError,
    Digraph,
    Edge,
    WeightedDigraph,
    dfs_post_order,
    reverse_post_order,
    topological_sort,
)
from ._io import GraphFileError, export_solution_to_toml, load_graph_document, load_graph_from_toml
from ._models import EdgeEntry, GraphDocument
from ._report import PathEntry, SolutionReport, build_solution_report
from ._solver import ShortestPathSolver, ToposortDAGSolver, UnreachableVertexError
