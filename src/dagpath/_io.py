from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import TYPE_CHECKING, Any

import tomli_w
from pydantic import ValidationError

from ._models import GraphDocument

if TYPE_CHECKING:
    from collections.abc import Hashable

    from ._graph import WeightedDigraph
    from ._report import SolutionReport

logger = logging.getLogger(__name__)


class GraphFileError(Exception):
    """Error reading or validating a graph file."""


def toml_to_graph_document(toml_contents: dict[str, Any]) -> GraphDocument:
    """Validate parsed TOML contents as a graph document.

    This is a pure function; see `load_graph_document` for the file variant.

    Raises:
        GraphFileError: If the contents do not describe a valid graph.

    """
    try:
        return GraphDocument.model_validate(toml_contents)
    except ValidationError as e:
        msg = f"Invalid graph definition: {e}"
        raise GraphFileError(msg) from e


def load_graph_document(input_path: Path | str) -> GraphDocument:
    """Load and validate a graph document from a TOML file.

    Args:
        input_path: Path to the graph TOML file

    Returns:
        The validated document, including the optional default start vertex

    Raises:
        GraphFileError: If the file is missing, is not TOML, or is invalid

    """
    input_path = Path(input_path)

    try:
        with input_path.open("rb") as f:
            toml_contents = tomllib.load(f)
    except FileNotFoundError as e:
        msg = f"Graph file not found: {input_path}"
        raise GraphFileError(msg) from e
    except tomllib.TOMLDecodeError as e:
        msg = f"Invalid TOML in {input_path}: {e}"
        raise GraphFileError(msg) from e

    document = toml_to_graph_document(toml_contents)
    logger.debug(f"Loaded {len(document.edges)} edges from {input_path}")
    return document


def load_graph_from_toml(input_path: Path | str) -> WeightedDigraph[str]:
    """Load a weighted digraph from a TOML file."""
    return load_graph_document(input_path).to_graph()


def export_solution_to_toml[V: Hashable](report: SolutionReport[V], output_path: Path | str) -> None:
    """Export a solution report to a TOML file.

    Vertices are written as strings.

    Args:
        report: The report built by build_solution_report
        output_path: Path to the output TOML file

    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("wb") as f:
        tomli_w.dump(report.to_dict(), f)

    logger.debug(f"Exported solution to {output_path}")
