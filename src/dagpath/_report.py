"""Solution reports summarizing shortest-path queries."""

from collections.abc import Hashable, Iterable
from dataclasses import dataclass, field
from typing import Any

from ._solver import ToposortDAGSolver


@dataclass(frozen=True, slots=True)
class PathEntry[V: Hashable]:
    """A shortest path to one goal."""

    goal: V
    vertices: list[V]
    distance: float


@dataclass(frozen=True, slots=True)
class SolutionReport[V: Hashable]:
    """Result of solving from one start vertex and querying some goals.

    Attributes:
        start: The start vertex.
        order: Reachable vertices in topological order.
        distances: Shortest distance to every reachable vertex.
        paths: Shortest paths to the requested goals that are reachable.
        unreachable: Requested goals that are not reachable from the start.

    """

    start: V
    order: tuple[V, ...]
    distances: dict[V, float] = field(default_factory=dict)
    paths: list[PathEntry[V]] = field(default_factory=list)
    unreachable: list[V] = field(default_factory=list)

    @property
    def success(self) -> bool:
        """Check if every requested goal was reachable."""
        return len(self.unreachable) == 0

    def to_dict(self) -> dict[str, Any]:
        """Convert to a TOML-compatible dictionary with string keys.

        Vertices are written with ``str()``, so reachable vertices must have
        distinct string forms.

        Raises:
            ValueError: If two reachable vertices share a string form.

        """
        _check_distinct_names(self.distances)
        data: dict[str, Any] = {
            "start": str(self.start),
            "order": [str(v) for v in self.order],
            "distances": {str(v): d for v, d in self.distances.items()},
        }
        if self.paths:
            data["paths"] = {
                str(entry.goal): {
                    "vertices": [str(v) for v in entry.vertices],
                    "distance": entry.distance,
                }
                for entry in self.paths
            }
        if self.unreachable:
            data["unreachable"] = [str(v) for v in self.unreachable]
        return data


def _check_distinct_names(vertices: Iterable[Hashable]) -> None:
    seen: dict[str, Hashable] = {}
    for vertex in vertices:
        name = str(vertex)
        if name in seen:
            msg = f"Vertices {seen[name]!r} and {vertex!r} both serialize as '{name}'"
            raise ValueError(msg)
        seen[name] = vertex


def build_solution_report[V: Hashable](
    solver: ToposortDAGSolver[V],
    goals: Iterable[V] = (),
) -> SolutionReport[V]:
    """Collect distances and the shortest paths to ``goals`` from a solver.

    Unreachable goals are listed in the report rather than raised.
    """
    paths: list[PathEntry[V]] = []
    unreachable: list[V] = []
    for goal in goals:
        if solver.has_path_to(goal):
            paths.append(PathEntry(goal, solver.solution(goal), solver.distance(goal)))
        else:
            unreachable.append(goal)

    return SolutionReport(
        start=solver.start,
        order=solver.topological_order,
        distances=dict(solver.distances),
        paths=paths,
        unreachable=unreachable,
    )
