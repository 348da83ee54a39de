"""Tests for the configuration module."""

from pathlib import Path

import pytest

from dagpath._cli.config import (
    ConfigError,
    DagpathConfig,
    find_pyproject_toml,
    get_config,
    load_config,
)


class TestFindPyprojectToml:
    """Tests for find_pyproject_toml function."""

    def test_finds_in_current_directory(self, tmp_path: Path) -> None:
        """Should find pyproject.toml in current directory."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[project]\nname = 'test'\n")

        result = find_pyproject_toml(tmp_path)

        assert result == pyproject

    def test_finds_in_parent_directory(self, tmp_path: Path) -> None:
        """Should find pyproject.toml in parent directory."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[project]\nname = 'test'\n")

        subdir = tmp_path / "data" / "graphs"
        subdir.mkdir(parents=True)

        result = find_pyproject_toml(subdir)

        assert result == pyproject

    def test_returns_none_when_not_found(self, tmp_path: Path) -> None:
        """Should return None when no pyproject.toml is found."""
        result = find_pyproject_toml(tmp_path)

        assert result is None


class TestLoadConfig:
    """Tests for loading [tool.dagpath]."""

    def test_graph_and_start(self, tmp_path: Path) -> None:
        """Should parse graph path relative to the project root, and start."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(
            """
[tool.dagpath]
graph = "data/graph.toml"
start = "A"
""",
        )

        config = load_config(pyproject)

        assert config.graph == tmp_path / "data/graph.toml"
        assert config.start == "A"
        assert config.project_root == tmp_path

    def test_absolute_graph_path_kept(self, tmp_path: Path) -> None:
        """Should keep absolute graph paths unchanged."""
        graph = tmp_path / "elsewhere" / "graph.toml"
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(f'[tool.dagpath]\ngraph = "{graph.as_posix()}"\n')

        config = load_config(pyproject)

        assert config.graph == graph

    def test_invalid_graph_type_raises_error(self, tmp_path: Path) -> None:
        """Should raise ConfigError when graph is not a string."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.dagpath]\ngraph = 123\n")

        with pytest.raises(ConfigError, match="expected string path"):
            load_config(pyproject)

    def test_empty_start_raises_error(self, tmp_path: Path) -> None:
        """Should raise ConfigError when start is empty."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text('[tool.dagpath]\nstart = ""\n')

        with pytest.raises(ConfigError, match="non-empty string"):
            load_config(pyproject)

    def test_invalid_toml_raises_error(self, tmp_path: Path) -> None:
        """Should raise ConfigError for malformed TOML."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.dagpath\n")

        with pytest.raises(ConfigError, match="Invalid TOML"):
            load_config(pyproject)


class TestLoadConfigEmptySection:
    """Tests for empty or missing configuration."""

    def test_no_tool_section(self, tmp_path: Path) -> None:
        """Should return empty config when there is no [tool.dagpath]."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[project]\nname = 'test'\n")

        config = load_config(pyproject)

        assert config == DagpathConfig(project_root=tmp_path)

    def test_get_config_without_pyproject(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should return an empty config when no pyproject.toml exists."""
        monkeypatch.chdir(tmp_path)

        config = get_config()

        assert config.graph is None
        assert config.start is None
