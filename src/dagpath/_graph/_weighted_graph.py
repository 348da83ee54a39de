"""Immutable weighted directed graph."""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from dataclasses import dataclass, field

from ._algorithms import CycleError, topological_sort
from ._edge import Edge


@dataclass(frozen=True, slots=True)
class WeightedDigraph[V: Hashable]:
    """A weighted directed graph built once from an edge list.

    This is a pure, immutable data structure with query methods.
    It is generic over the vertex type V (e.g., str, int, tuple).

    Outgoing edges keep the order in which they were given, which fixes the
    traversal and tie-break order of the solvers. Parallel edges are kept.

    Attributes:
        _out_edges: Mapping from vertex to its outgoing edges.
        _in_edges: Mapping from vertex to its incoming edges.

    """

    _out_edges: dict[V, tuple[Edge[V], ...]] = field(default_factory=dict)
    _in_edges: dict[V, tuple[Edge[V], ...]] = field(default_factory=dict)

    @classmethod
    def from_edges(cls, edges: Iterable[Edge[V] | tuple[V, V, float]]) -> WeightedDigraph[V]:
        """Build a graph from ``Edge`` objects or ``(from, to, weight)`` tuples.

        Args:
            edges: The edges of the graph, in neighbor order.

        Returns:
            A new WeightedDigraph instance.

        Example:
            >>> graph = WeightedDigraph.from_edges([("a", "b", 1.0), ("a", "c", 2.5)])
            >>> [str(e) for e in graph.neighbors("a")]
            ['a -> b (1)', 'a -> c (2.5)']

        """
        out_edges: dict[V, list[Edge[V]]] = {}
        in_edges: dict[V, list[Edge[V]]] = {}

        for item in edges:
            edge = item if isinstance(item, Edge) else Edge(item[0], item[1], float(item[2]))
            out_edges.setdefault(edge.from_, []).append(edge)
            in_edges.setdefault(edge.to, []).append(edge)
            # Ensure both vertices exist in the graph
            in_edges.setdefault(edge.from_, [])
            out_edges.setdefault(edge.to, [])

        return cls(
            _out_edges={k: tuple(v) for k, v in out_edges.items()},
            _in_edges={k: tuple(v) for k, v in in_edges.items()},
        )

    @property
    def nodes(self) -> frozenset[V]:
        """All vertices in the graph."""
        return frozenset(self._out_edges.keys()) | frozenset(self._in_edges.keys())

    @property
    def edges(self) -> tuple[Edge[V], ...]:
        """All edges, grouped by source vertex in insertion order."""
        return tuple(edge for out in self._out_edges.values() for edge in out)

    def neighbors(self, vertex: V) -> tuple[Edge[V], ...]:
        """Get the outgoing edges of a vertex.

        Args:
            vertex: The vertex to query.

        Returns:
            Outgoing edges in insertion order; empty for unknown vertices.

        """
        return self._out_edges.get(vertex, ())

    def roots(self) -> frozenset[V]:
        """Get vertices with no incoming edges (sources).

        Returns:
            Set of vertices that no edge points to.

        """
        return frozenset(n for n in self.nodes if not self._in_edges.get(n))

    def leaves(self) -> frozenset[V]:
        """Get vertices with no outgoing edges (sinks).

        Returns:
            Set of vertices that have no outgoing edges.

        """
        return frozenset(n for n in self.nodes if not self._out_edges.get(n))

    def topological_order(self) -> list[V]:
        """Return all vertices in topological order.

        Returns:
            List of vertices where each vertex appears before its successors.

        Raises:
            CycleError: If the graph contains a cycle.

        """
        return topological_sort({n: [e.to for e in out] for n, out in self._out_edges.items()})

    def validate(self) -> list[str]:
        """Validate the graph and return a list of error messages.

        Reports the vertices that cannot be ordered because they lie on a
        cycle or are only reachable through one.

        Returns:
            List of error messages. Empty list if graph is valid.

        """
        try:
            self.topological_order()
        except CycleError as e:
            names = ", ".join(sorted(str(v) for v in e.remaining))
            return [f"Graph contains a cycle; vertices on or behind it: {names}"]
        return []

    def __len__(self) -> int:
        """Return the number of vertices in the graph."""
        return len(self.nodes)

    def __contains__(self, vertex: object) -> bool:
        """Check if a vertex is in the graph."""
        return vertex in self._out_edges or vertex in self._in_edges
