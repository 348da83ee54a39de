"""Tests for graph file loading and solution export."""

import tomllib
from pathlib import Path

import pytest

from dagpath import (
    Edge,
    GraphDocument,
    GraphFileError,
    ToposortDAGSolver,
    WeightedDigraph,
    build_solution_report,
    export_solution_to_toml,
    load_graph_document,
    load_graph_from_toml,
)
from dagpath._io import toml_to_graph_document


class TestTomlToGraphDocument:
    def test_minimal_document(self) -> None:
        document = toml_to_graph_document({"edges": [{"from": "a", "to": "b", "weight": 1.5}]})
        assert document.start is None
        assert document.edges[0].from_ == "a"
        assert document.edges[0].to_edge() == Edge("a", "b", 1.5)

    def test_empty_document(self) -> None:
        document = toml_to_graph_document({})
        assert document == GraphDocument()
        assert len(document.to_graph()) == 0

    def test_integer_weight_accepted(self) -> None:
        document = toml_to_graph_document({"edges": [{"from": "a", "to": "b", "weight": 2}]})
        assert document.edges[0].weight == 2.0

    def test_missing_weight_rejected(self) -> None:
        with pytest.raises(GraphFileError, match="weight"):
            toml_to_graph_document({"edges": [{"from": "a", "to": "b"}]})

    def test_unknown_key_rejected(self) -> None:
        with pytest.raises(GraphFileError, match="colour"):
            toml_to_graph_document({"edges": [{"from": "a", "to": "b", "weight": 1.0, "colour": "red"}]})

    def test_empty_vertex_rejected(self) -> None:
        with pytest.raises(GraphFileError):
            toml_to_graph_document({"edges": [{"from": "", "to": "b", "weight": 1.0}]})

    def test_infinite_weight_rejected(self) -> None:
        with pytest.raises(GraphFileError):
            toml_to_graph_document({"edges": [{"from": "a", "to": "b", "weight": float("inf")}]})


class TestLoadGraph:
    def test_load_document(self, sample_graph_file: Path) -> None:
        document = load_graph_document(sample_graph_file)
        assert document.start == "A"
        assert len(document.edges) == 5

    def test_load_graph_keeps_edge_order(self, sample_graph_file: Path) -> None:
        graph = load_graph_from_toml(sample_graph_file)
        assert isinstance(graph, WeightedDigraph)
        assert [e.to for e in graph.neighbors("A")] == ["B", "C"]
        assert graph.nodes == frozenset({"A", "B", "C", "D", "E", "F"})

    def test_loaded_graph_solves(self, sample_graph_file: Path) -> None:
        graph = load_graph_from_toml(sample_graph_file)
        solver = ToposortDAGSolver(graph, "A")
        assert solver.solution("D") == ["A", "B", "C", "D"]

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(GraphFileError, match="not found"):
            load_graph_document(tmp_path / "missing.toml")

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "graph.toml"
        path.write_text("[[edges]\n")
        with pytest.raises(GraphFileError, match="Invalid TOML"):
            load_graph_document(path)


class TestSolutionReport:
    def test_report_contents(self, sample_graph: WeightedDigraph[str]) -> None:
        solver = ToposortDAGSolver(sample_graph, "A")
        report = build_solution_report(solver, ["D", "F"])

        assert report.start == "A"
        assert report.distances == {"A": 0.0, "B": 1.0, "C": 3.0, "D": 4.0}
        assert len(report.paths) == 1
        assert report.paths[0].vertices == ["A", "B", "C", "D"]
        assert report.paths[0].distance == 4.0
        assert report.unreachable == ["F"]
        assert report.success is False

    def test_report_without_goals(self, sample_graph: WeightedDigraph[str]) -> None:
        report = build_solution_report(ToposortDAGSolver(sample_graph, "A"))
        assert report.paths == []
        assert report.success is True

    def test_to_dict_stringifies_vertices(self) -> None:
        graph = WeightedDigraph.from_edges([(1, 2, 1.0)])
        report = build_solution_report(ToposortDAGSolver(graph, 1), [2])
        data = report.to_dict()
        assert data["start"] == "1"
        assert data["distances"] == {"1": 0.0, "2": 1.0}
        assert data["paths"] == {"2": {"vertices": ["1", "2"], "distance": 1.0}}
        assert "unreachable" not in data

    def test_to_dict_rejects_colliding_names(self) -> None:
        graph = WeightedDigraph.from_edges([(1, "1", 1.0)])
        report = build_solution_report(ToposortDAGSolver(graph, 1), ["1"])
        with pytest.raises(ValueError, match="both serialize as '1'"):
            report.to_dict()


class TestExportSolution:
    def test_export_round_trip(self, sample_graph: WeightedDigraph[str], tmp_path: Path) -> None:
        solver = ToposortDAGSolver(sample_graph, "A")
        report = build_solution_report(solver, ["D", "E"])
        output = tmp_path / "out" / "solution.toml"

        export_solution_to_toml(report, output)

        with output.open("rb") as f:
            data = tomllib.load(f)
        assert data["start"] == "A"
        assert data["order"][0] == "A"
        assert data["distances"]["D"] == 4.0
        assert data["paths"]["D"]["vertices"] == ["A", "B", "C", "D"]
        assert data["unreachable"] == ["E"]
