from pathlib import Path

import pytest

from dagpath import WeightedDigraph


@pytest.fixture
def sample_graph() -> WeightedDigraph[str]:
    """A -> B (1), A -> C (4), B -> C (2), C -> D (1), plus a disconnected E -> F."""
    return WeightedDigraph.from_edges(
        [
            ("A", "B", 1.0),
            ("A", "C", 4.0),
            ("B", "C", 2.0),
            ("C", "D", 1.0),
            ("E", "F", 1.0),
        ],
    )


SAMPLE_GRAPH_TOML = """\
start = "A"

[[edges]]
from = "A"
to = "B"
weight = 1.0

[[edges]]
from = "A"
to = "C"
weight = 4

[[edges]]
from = "B"
to = "C"
weight = 2.0

[[edges]]
from = "C"
to = "D"
weight = 1.0

[[edges]]
from = "E"
to = "F"
weight = 1.0
"""


@pytest.fixture
def sample_graph_file(tmp_path: Path) -> Path:
    """The sample graph written as a TOML graph file."""
    path = tmp_path / "graph.toml"
    path.write_text(SAMPLE_GRAPH_TOML)
    return path
