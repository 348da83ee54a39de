"""Rich rendering utilities for solver commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

if TYPE_CHECKING:
    from collections.abc import Hashable

    from rich.console import Console

    from dagpath._graph import WeightedDigraph
    from dagpath._report import SolutionReport


def render_distance_table[V: Hashable](report: SolutionReport[V], console: Console) -> None:
    """Render shortest distances as a Rich table, in topological order.

    Args:
        report: The SolutionReport to render.
        console: Rich Console to output to.

    """
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Vertex", style="bold")
    table.add_column("Distance", justify="right", style="yellow")

    for index, vertex in enumerate(report.order):
        table.add_row(str(index), escape(str(vertex)), f"{report.distances[vertex]:g}")

    console.print(
        Panel(
            table,
            title=f"[bold]Distances from {escape(str(report.start))}[/bold]",
            subtitle=f"[dim]{len(report.order)} reachable[/dim]",
            border_style="cyan",
        ),
    )


def render_paths[V: Hashable](report: SolutionReport[V], console: Console) -> None:
    """Render the shortest path to each requested goal.

    Args:
        report: The SolutionReport to render.
        console: Rich Console to output to.

    """
    for entry in report.paths:
        path_str = " -> ".join(escape(str(v)) for v in entry.vertices)
        console.print(f"[cyan]{escape(str(entry.goal))}[/cyan] ({entry.distance:g}): {path_str}")

    for goal in report.unreachable:
        console.print(f"[red]✗ {escape(str(goal))} is unreachable from {escape(str(report.start))}[/red]")


def render_order[V: Hashable](order: tuple[V, ...] | list[V], console: Console) -> None:
    """Render a topological order, one vertex per line."""
    for index, vertex in enumerate(order):
        console.print(f"[dim]{index:>4}[/dim]  {escape(str(vertex))}")


def render_graph_summary[V: Hashable](graph: WeightedDigraph[V], console: Console) -> None:
    """Render vertex and edge counts of a graph.

    Args:
        graph: The graph to summarize.
        console: Rich Console to output to.

    """
    table = Table(show_header=False, box=None)
    table.add_column("Key", style="cyan")
    table.add_column("Value", justify="right")

    table.add_row("Vertices", str(len(graph)))
    table.add_row("Edges", str(len(graph.edges)))
    table.add_row("Sources", ", ".join(sorted(escape(str(v)) for v in graph.roots())) or "-")
    table.add_row("Sinks", ", ".join(sorted(escape(str(v)) for v in graph.leaves())) or "-")

    console.print(Panel(table, title="[bold]Graph[/bold]", border_style="cyan"))
