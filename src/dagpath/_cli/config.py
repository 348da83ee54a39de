"""Configuration loading from pyproject.toml."""

import tomllib
from dataclasses import dataclass
from pathlib import Path


class ConfigError(Exception):
    """Error in dagpath configuration."""


@dataclass(slots=True, frozen=True)
class DagpathConfig:
    """Configuration loaded from the ``[tool.dagpath]`` table of pyproject.toml.

    All relative paths are resolved from the project root (directory containing pyproject.toml).
    """

    graph: Path | None = None
    start: str | None = None
    project_root: Path | None = None


def find_pyproject_toml(start_dir: Path | None = None) -> Path | None:
    """Find pyproject.toml by walking up from start_dir.

    Args:
        start_dir: Starting directory. Defaults to current working directory.

    Returns:
        Path to pyproject.toml if found, None otherwise.

    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = start_dir.resolve()

    while True:
        candidate = current / "pyproject.toml"
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            # Reached filesystem root
            return None
        current = parent


def load_config(pyproject_path: Path) -> DagpathConfig:
    """Load and validate [tool.dagpath] config from pyproject.toml.

    Args:
        pyproject_path: Path to pyproject.toml

    Returns:
        Parsed DagpathConfig

    Raises:
        ConfigError: If the configuration is invalid

    """
    project_root = pyproject_path.parent

    with pyproject_path.open("rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            msg = f"Invalid TOML in {pyproject_path}: {e}"
            raise ConfigError(msg) from e

    tool_section = data.get("tool", {})
    dagpath_section = tool_section.get("dagpath", {})

    if not dagpath_section:
        # No [tool.dagpath] section - return empty config
        return DagpathConfig(project_root=project_root)

    graph_path: Path | None = None
    if "graph" in dagpath_section:
        graph_value = dagpath_section["graph"]
        if not isinstance(graph_value, str):
            msg = "Invalid [tool.dagpath].graph: expected string path"
            raise ConfigError(msg)
        graph_path = Path(graph_value)
        if not graph_path.is_absolute():
            graph_path = project_root / graph_path

    start: str | None = None
    if "start" in dagpath_section:
        start_value = dagpath_section["start"]
        if not isinstance(start_value, str) or not start_value:
            msg = "Invalid [tool.dagpath].start: expected non-empty string"
            raise ConfigError(msg)
        start = start_value

    return DagpathConfig(graph=graph_path, start=start, project_root=project_root)


def get_config() -> DagpathConfig:
    """Get config from pyproject.toml in current directory or parents.

    Returns:
        DagpathConfig (may be empty if no pyproject.toml or no [tool.dagpath] section)

    """
    pyproject_path = find_pyproject_toml()
    if pyproject_path is None:
        return DagpathConfig()
    return load_config(pyproject_path)
