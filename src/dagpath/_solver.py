"""Single-source shortest paths on directed acyclic graphs."""

import logging
from collections.abc import Hashable, Mapping
from types import MappingProxyType
from typing import Protocol

from ._graph import Digraph, Edge, reverse_post_order

logger = logging.getLogger(__name__)


class UnreachableVertexError(LookupError):
    """Raised when a path is requested to a vertex not reachable from the start.

    Vertices that are not in the graph at all are reported the same way.
    """

    def __init__(self, start: Hashable, goal: Hashable) -> None:
        self.start = start
        self.goal = goal
        super().__init__(f"Vertex '{goal}' is unreachable from '{start}'")


class ShortestPathSolver[V: Hashable](Protocol):
    """A solver answering shortest-path queries from a fixed start vertex."""

    def solution(self, goal: V) -> list[V]:
        """Return the vertices of a shortest path from the start to ``goal``."""
        ...


class ToposortDAGSolver[V: Hashable]:
    """Shortest paths from one start vertex in a directed acyclic graph.

    All work happens in the constructor: the vertices reachable from ``start``
    are put in topological order by a depth-first traversal, then every
    outgoing edge of each vertex is relaxed once in that order. Since all
    predecessors of a vertex precede it, its distance is final by the time its
    own edges are relaxed, so a single O(V + E) pass suffices and negative
    weights are fine.

    Ties are broken deterministically: a distance is only replaced by a
    strictly smaller one, so the first minimal path found in topological and
    edge-iteration order wins.

    The solver is read-only once constructed.

    Example:
        >>> from dagpath import WeightedDigraph
        >>> graph = WeightedDigraph.from_edges(
        ...     [("A", "B", 1), ("A", "C", 4), ("B", "C", 2), ("C", "D", 1)],
        ... )
        >>> solver = ToposortDAGSolver(graph, "A")
        >>> solver.solution("D")
        ['A', 'B', 'C', 'D']
        >>> solver.distance("D")
        4.0

    Raises:
        CycleError: If a cycle is reachable from ``start``.

    """

    def __init__(self, graph: Digraph[V], start: V) -> None:
        self._start = start
        self._edge_to: dict[V, Edge[V] | None] = {start: None}
        self._dist_to: dict[V, float] = {start: 0.0}

        order = reverse_post_order(graph, start)
        logger.debug(f"Topological order from '{start}': {order}")
        self._order = tuple(order)

        for from_ in order:
            # Only reachable vertices are relaxed
            if from_ not in self._dist_to:
                continue
            for edge in graph.neighbors(from_):
                self._relax(edge)

        logger.debug(f"Solved {len(self._dist_to)} reachable vertices from '{start}'")

    def _relax(self, edge: Edge[V]) -> None:
        new_dist = self._dist_to[edge.from_] + edge.weight
        old_dist = self._dist_to.get(edge.to)
        if old_dist is None or new_dist < old_dist:
            logger.debug(f"  Relaxed {edge}: {old_dist} -> {new_dist}")
            self._edge_to[edge.to] = edge
            self._dist_to[edge.to] = new_dist

    @property
    def start(self) -> V:
        """The start vertex."""
        return self._start

    @property
    def distances(self) -> Mapping[V, float]:
        """Read-only mapping from each reachable vertex to its shortest distance."""
        return MappingProxyType(self._dist_to)

    @property
    def topological_order(self) -> tuple[V, ...]:
        """The reachable vertices in the order they were relaxed."""
        return self._order

    def has_path_to(self, goal: V) -> bool:
        """Check whether ``goal`` is reachable from the start."""
        return goal in self._dist_to

    def distance(self, goal: V) -> float:
        """Get the shortest distance from the start to ``goal``.

        Raises:
            UnreachableVertexError: If ``goal`` is not reachable.

        """
        try:
            return self._dist_to[goal]
        except KeyError:
            raise UnreachableVertexError(self._start, goal) from None

    def path_edges(self, goal: V) -> list[Edge[V]]:
        """Get the edges of a shortest path from the start to ``goal``.

        Returns:
            The edges in traversal order; empty when ``goal`` is the start.

        Raises:
            UnreachableVertexError: If ``goal`` is not reachable.

        """
        if goal not in self._edge_to:
            raise UnreachableVertexError(self._start, goal)

        edges: list[Edge[V]] = []
        edge = self._edge_to[goal]
        while edge is not None:
            edges.append(edge)
            edge = self._edge_to[edge.from_]
        edges.reverse()
        return edges

    def solution(self, goal: V) -> list[V]:
        """Get the vertices of a shortest path from the start to ``goal``.

        Args:
            goal: The vertex to reach.

        Returns:
            The path, starting with the start vertex and ending with ``goal``.
            ``[start]`` when ``goal`` is the start.

        Raises:
            UnreachableVertexError: If ``goal`` is not reachable.

        """
        path = [self._start]
        path.extend(edge.to for edge in self.path_edges(goal))
        return path
