import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from dagpath._graph import CycleError, WeightedDigraph
from dagpath._io import GraphFileError, export_solution_to_toml, load_graph_document
from dagpath._report import build_solution_report
from dagpath._solver import ToposortDAGSolver

from .config import ConfigError, get_config
from .render import render_distance_table, render_graph_summary, render_order, render_paths

app = typer.Typer()

logger = logging.getLogger(__name__)
# Console for stderr (info/errors)
err_console = Console(stderr=True)
# Console for stdout (results)
out_console = Console()


@app.callback()
def callback(
    *,
    verbose: bool = typer.Option(default=False, help="Enable verbose output"),
) -> None:
    """Dagpath CLI."""
    log_level = logging.DEBUG if verbose else logging.INFO

    # Configure rich logging handler to output to stderr
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=err_console,
                show_time=False,
                show_path=verbose,
                rich_tracebacks=True,
            ),
        ],
        force=True,
    )


def _load_graph(graph_path: Path | None, start: str | None) -> tuple[WeightedDigraph[str], str]:
    """Load the graph and pick the start vertex.

    Command-line values win over ``[tool.dagpath]`` in pyproject.toml, and the
    ``start`` key of the graph file is the last fallback for the start vertex.
    """
    try:
        config = get_config()
    except ConfigError as e:
        err_console.print(f"[red]✗ {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    graph_path = graph_path or config.graph
    if graph_path is None:
        msg = "No graph file given and no [tool.dagpath].graph configured"
        raise typer.BadParameter(msg, param_hint="GRAPH")

    err_console.print(f"[cyan]Loading graph from:[/cyan] {graph_path}")
    try:
        document = load_graph_document(graph_path)
    except GraphFileError as e:
        err_console.print(f"[red]✗ {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    start = start or config.start or document.start
    if start is None:
        msg = "No start vertex given, configured, or set in the graph file"
        raise typer.BadParameter(msg, param_hint="--start")

    return document.to_graph(), start


def _solve(graph: WeightedDigraph[str], start: str) -> ToposortDAGSolver[str]:
    try:
        return ToposortDAGSolver(graph, start)
    except CycleError as e:
        err_console.print(f"[red]✗ {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e


@app.command()
def solve(
    graph_path: Annotated[
        Path | None,
        typer.Argument(metavar="GRAPH", help="Path to graph TOML file"),
    ] = None,
    *,
    start: Annotated[
        str | None,
        typer.Option("-s", "--start", help="Start vertex"),
    ] = None,
    goals: Annotated[
        list[str] | None,
        typer.Option("-g", "--goal", help="Goal vertex to print a path for (repeatable)"),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("-o", "--output", help="Path to output TOML file"),
    ] = None,
) -> None:
    """Compute shortest paths from a start vertex."""
    err_console.print()

    graph, start = _load_graph(graph_path, start)
    err_console.print(f"[cyan]Start:[/cyan] [bold]{escape(start)}[/bold]")
    err_console.print()

    err_console.print("[cyan]Solving...[/cyan]")
    solver = _solve(graph, start)
    report = build_solution_report(solver, goals or [])
    err_console.print()

    render_distance_table(report, out_console)
    if report.paths or report.unreachable:
        out_console.print()
        render_paths(report, out_console)

    if output is not None:
        err_console.print()
        err_console.print(f"[cyan]Exporting solution to:[/cyan] {output}")
        export_solution_to_toml(report, output)

    err_console.print()
    if not report.success:
        err_console.print("[red]✗ Some goals are unreachable[/red]")
        err_console.print()
        raise typer.Exit(code=1)

    err_console.print("[green]✓ Solve complete[/green]")
    err_console.print()


@app.command()
def order(
    graph_path: Annotated[
        Path | None,
        typer.Argument(metavar="GRAPH", help="Path to graph TOML file"),
    ] = None,
    *,
    start: Annotated[
        str | None,
        typer.Option("-s", "--start", help="Start vertex"),
    ] = None,
) -> None:
    """Print the topological order of the vertices reachable from the start."""
    err_console.print()

    graph, start = _load_graph(graph_path, start)
    solver = _solve(graph, start)
    err_console.print()

    render_order(solver.topological_order, out_console)


@app.command()
def check(
    graph_path: Annotated[
        Path | None,
        typer.Argument(metavar="GRAPH", help="Path to graph TOML file"),
    ] = None,
) -> None:
    """Check that a graph file is valid and acyclic."""
    err_console.print()

    try:
        config = get_config()
        graph_path = graph_path or config.graph
        if graph_path is None:
            msg = "No graph file given and no [tool.dagpath].graph configured"
            raise typer.BadParameter(msg, param_hint="GRAPH")
        err_console.print(f"[cyan]Loading graph from:[/cyan] {graph_path}")
        graph = load_graph_document(graph_path).to_graph()
    except (ConfigError, GraphFileError) as e:
        err_console.print(f"[red]✗ {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e
    err_console.print()

    err_console.print("[cyan]Validating graph...[/cyan]")
    errors = graph.validate()
    err_console.print()

    render_graph_summary(graph, err_console)
    err_console.print()

    if errors:
        for error in errors:
            err_console.print(f"[red]✗ {escape(error)}[/red]")
        err_console.print()
        raise typer.Exit(code=1)

    err_console.print("[green]✓ Graph is a valid DAG[/green]")
    err_console.print()


if __name__ == "__main__":
    app()
