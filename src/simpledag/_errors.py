"""Exceptions raised by simpledag."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ._graph import Vertex


class DagError(Exception):
    """Base class for all simpledag errors."""


class InvalidVertexError(DagError, ValueError):
    """Raised when an argument is not a vertex of the required graph."""

    def __init__(self, value: object, role: str) -> None:
        self.value = value
        self.role = role
        super().__init__(f"{role} must be a vertex in this graph, got {value!r}")


class CycleError(DagError, ValueError):
    """Raised when an edge would create a self-loop or close a cycle."""

    def __init__(self, origin: Vertex, destination: Vertex) -> None:
        self.origin = origin
        self.destination = destination
        if origin is destination:
            msg = f"Edge from {origin!r} to itself would create a cycle"
        else:
            msg = f"Edge {origin!r} -> {destination!r} would create a cycle"
        super().__init__(msg)


class DuplicateEdgeError(DagError, ValueError):
    """Raised when an origin -> destination edge already exists."""

    def __init__(self, origin: Vertex, destination: Vertex) -> None:
        self.origin = origin
        self.destination = destination
        super().__init__(f"Edge {origin!r} -> {destination!r} already exists")


class ConfigError(DagError):
    """Error in simpledag configuration."""
