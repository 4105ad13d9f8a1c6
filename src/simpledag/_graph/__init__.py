"""Graph module providing the DAG engine.

This module contains:
- Graph: A mutable directed acyclic graph that rejects cycles on insertion
- Vertex, Edge: The nodes and connections owned by a Graph
- collect_reachable, has_path, topological_sort: Generic traversal algorithms
"""

from ._algorithms import collect_reachable, has_path, topological_sort
from ._dag import Graph
from ._vertex import Edge, Vertex

__all__ = ["Edge", "Graph", "Vertex", "collect_reachable", "has_path", "topological_sort"]
