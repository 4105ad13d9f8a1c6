"""In-memory directed acyclic graphs with cycle prevention."""

__all__ = [
    "ConfigError",
    "CycleError",
    "DagError",
    "DuplicateEdgeError",
    "Edge",
    "Graph",
    "GraphConfig",
    "InvalidVertexError",
    "TreeNode",
    "Vertex",
    "VertexExtension",
    "build_vertex_tree",
    "find_pyproject_toml",
    "get_config",
    "load_config",
    "render_tree",
    "render_vertex_table",
    "to_rich_tree",
]

from ._config import GraphConfig, find_pyproject_toml, get_config, load_config
from ._errors import ConfigError, CycleError, DagError, DuplicateEdgeError, InvalidVertexError
from ._extension import VertexExtension
from ._graph import Edge, Graph, Vertex
from ._render import TreeNode, build_vertex_tree, render_tree, render_vertex_table, to_rich_tree
