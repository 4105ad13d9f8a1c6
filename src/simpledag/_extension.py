"""Caller-defined behaviour attached to every vertex of a graph."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Hashable

    from ._graph import Vertex


class VertexExtension:
    """Base class for domain accessors bound to a vertex.

    Subclass it to give vertices read-only, domain-specific methods without
    subclassing ``Vertex``. A graph configured with an extension creates one
    instance per vertex and exposes it as ``vertex.ext``.

    Example:
        >>> from simpledag import Graph, GraphConfig
        >>> class Person(VertexExtension):
        ...     @property
        ...     def name(self) -> str:
        ...         return self.payload["name"]
        >>> graph = Graph(GraphConfig(extension=Person))
        >>> graph.create_vertex({"name": "ada"}).ext.name
        'ada'

    """

    __slots__ = ("vertex",)

    def __init__(self, vertex: Vertex) -> None:
        self.vertex = vertex

    @property
    def payload(self) -> dict[Hashable, Any]:
        """The payload of the bound vertex."""
        return self.vertex.payload

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.vertex!r})"
