"""Graph configuration and loading from pyproject.toml."""

import importlib
import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import cast

from ._errors import ConfigError
from ._extension import VertexExtension

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class GraphConfig:
    """Options applied to a graph and to every vertex it creates.

    Attributes:
        extension: ``VertexExtension`` subclass bound to each new vertex.
        allow_parallel_edges: Accept a second edge between the same origin
            and destination instead of raising ``DuplicateEdgeError``.

    """

    extension: type[VertexExtension] | None = None
    allow_parallel_edges: bool = False

    def __post_init__(self) -> None:
        if self.extension is not None and not (
            isinstance(self.extension, type) and issubclass(self.extension, VertexExtension)
        ):
            msg = f"extension must be a VertexExtension subclass, got {self.extension!r}"
            raise ConfigError(msg)
        if not isinstance(self.allow_parallel_edges, bool):
            msg = f"allow_parallel_edges must be a bool, got {self.allow_parallel_edges!r}"
            raise ConfigError(msg)


def find_pyproject_toml(start_dir: Path | None = None) -> Path | None:
    """Locate the pyproject.toml that governs ``start_dir``.

    The nearest file wins: ``start_dir`` is searched first, then each parent
    up to the filesystem root.

    Args:
        start_dir: Directory to search from. Defaults to the working directory.

    Returns:
        Path to the nearest pyproject.toml, or None if there is none.

    """
    start = (Path.cwd() if start_dir is None else start_dir).resolve()

    for directory in (start, *start.parents):
        candidate = directory / "pyproject.toml"
        if candidate.is_file():
            logger.debug("Using %s for graph config", candidate)
            return candidate

    logger.debug("No pyproject.toml found above %s", start)
    return None


def _import_extension(value: object) -> type[VertexExtension]:
    """Resolve an extension reference of the form 'module.path:ClassName'.

    Raises:
        ConfigError: If the value is malformed or does not name a VertexExtension.

    """
    if not isinstance(value, str):
        msg = "Invalid [tool.simpledag].extension: expected string"
        raise ConfigError(msg)
    if ":" not in value:
        msg = f"Invalid extension path '{value}'. Expected format: 'module.path:ClassName'"
        raise ConfigError(msg)

    module_name, class_name = value.split(":", 1)
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        msg = f"Could not import extension module '{module_name}': {e}"
        raise ConfigError(msg) from e

    if not hasattr(module, class_name):
        msg = f"Could not find '{class_name}' in module '{module_name}'"
        raise ConfigError(msg)
    extension = getattr(module, class_name)
    if not (isinstance(extension, type) and issubclass(extension, VertexExtension)):
        msg = f"'{class_name}' in module '{module_name}' is not a VertexExtension subclass"
        raise ConfigError(msg)

    logger.debug("Resolved extension %s from %s", class_name, module_name)
    return cast("type[VertexExtension]", extension)


def load_config(pyproject_path: Path) -> GraphConfig:
    """Load and validate [tool.simpledag] config from pyproject.toml.

    Args:
        pyproject_path: Path to pyproject.toml

    Returns:
        Parsed GraphConfig

    Raises:
        ConfigError: If the configuration is invalid

    """
    with pyproject_path.open("rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            msg = f"Invalid TOML in {pyproject_path}: {e}"
            raise ConfigError(msg) from e

    tool_section = data.get("tool", {})
    section = tool_section.get("simpledag", {})

    if not section:
        logger.debug("No [tool.simpledag] section in %s", pyproject_path)
        return GraphConfig()

    unknown = set(section) - {"extension", "allow-parallel-edges"}
    if unknown:
        msg = f"Unknown [tool.simpledag] keys: {', '.join(sorted(unknown))}"
        raise ConfigError(msg)

    extension: type[VertexExtension] | None = None
    if "extension" in section:
        extension = _import_extension(section["extension"])

    allow_parallel_edges = section.get("allow-parallel-edges", False)
    if not isinstance(allow_parallel_edges, bool):
        msg = "Invalid [tool.simpledag].allow-parallel-edges: expected boolean"
        raise ConfigError(msg)

    logger.debug("Loaded graph config from %s", pyproject_path)
    return GraphConfig(extension=extension, allow_parallel_edges=allow_parallel_edges)


def get_config() -> GraphConfig:
    """Get config from pyproject.toml in current directory or parents.

    Returns:
        GraphConfig (default if no pyproject.toml or no [tool.simpledag] section)

    """
    pyproject_path = find_pyproject_toml()
    if pyproject_path is None:
        return GraphConfig()
    return load_config(pyproject_path)
