"""Pydantic models for graph files."""

from pydantic import BaseModel, ConfigDict, Field

from ._graph import Edge, WeightedDigraph


class EdgeEntry(BaseModel):
    """One ``[[edges]]`` table of a graph file."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    from_: str = Field(alias="from", min_length=1)
    to: str = Field(min_length=1)
    weight: float = Field(allow_inf_nan=False)

    def to_edge(self) -> Edge[str]:
        return Edge(self.from_, self.to, self.weight)


class GraphDocument(BaseModel):
    """A weighted DAG stored as TOML.

    Example:
        start = "A"

        [[edges]]
        from = "A"
        to = "B"
        weight = 1.0

    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    start: str | None = Field(default=None, min_length=1)
    edges: list[EdgeEntry] = Field(default_factory=list)

    def to_graph(self) -> WeightedDigraph[str]:
        """Build the graph, keeping the file order of the edges."""
        return WeightedDigraph.from_edges(entry.to_edge() for entry in self.edges)
