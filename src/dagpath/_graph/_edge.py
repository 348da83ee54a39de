"""Edge type and the graph query protocol consumed by the solvers."""

import math
from collections.abc import Hashable, Sequence
from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True, slots=True)
class Edge[V: Hashable]:
    """A weighted, directed edge ``from_ -> to``.

    The source field is named ``from_`` since ``from`` is a keyword.

    Raises:
        ValueError: If ``weight`` is NaN.

    """

    from_: V
    to: V
    weight: float

    def __post_init__(self) -> None:
        if math.isnan(self.weight):
            msg = f"Edge '{self.from_} -> {self.to}' has a NaN weight"
            raise ValueError(msg)

    def __str__(self) -> str:
        return f"{self.from_} -> {self.to} ({self.weight:g})"


@runtime_checkable
class Digraph[V: Hashable](Protocol):
    """Read-only view of a weighted directed graph.

    Solvers only ever ask for the outgoing edges of a vertex. Implementations
    must report them in a stable order and return an empty sequence for
    vertices they do not know.
    """

    def neighbors(self, vertex: V) -> Sequence[Edge[V]]:
        """Return the outgoing edges of ``vertex``."""
        ...
