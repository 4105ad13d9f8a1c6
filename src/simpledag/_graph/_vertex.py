"""Vertices and edges of a DAG."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from simpledag._errors import InvalidVertexError

from ._algorithms import collect_reachable, has_path

if TYPE_CHECKING:
    from collections.abc import Hashable

    from simpledag._extension import VertexExtension

    from ._dag import Graph


@dataclass(frozen=True, slots=True, eq=False)
class Edge:
    """A directed edge between two vertices of the same graph.

    Edges compare by identity, so two structurally equal edges are distinct.

    Attributes:
        origin: Vertex the edge leaves.
        destination: Vertex the edge arrives at.
        properties: Caller-defined data, never interpreted by the graph.

    """

    origin: Vertex
    destination: Vertex
    properties: dict[Hashable, Any] = field(default_factory=dict)


class Vertex:
    """A node owned by exactly one ``Graph``.

    Vertices are created with ``Graph.create_vertex`` and are never removed.
    A vertex built directly is not a member of any graph and is rejected
    wherever a graph vertex is expected.
    Equality and hashing are by identity, so two vertices with equal payloads
    are distinct.
    """

    __slots__ = ("_ext", "_graph", "_incoming", "_outgoing", "_payload")

    def __init__(self, graph: Graph, payload: dict[Hashable, Any]) -> None:
        self._graph = graph
        self._payload = payload
        self._outgoing: list[Edge] = []
        self._incoming: list[Edge] = []
        self._ext: VertexExtension | None = None

    @property
    def graph(self) -> Graph:
        """The graph that owns this vertex."""
        return self._graph

    @property
    def payload(self) -> dict[Hashable, Any]:
        """The payload mapping. Mutations are visible through the vertex."""
        return self._payload

    @property
    def ext(self) -> VertexExtension | None:
        """The extension bound by the owning graph, if it has one."""
        return self._ext

    @property
    def outgoing_edges(self) -> tuple[Edge, ...]:
        """Edges leaving this vertex, in insertion order."""
        return tuple(self._outgoing)

    @property
    def incoming_edges(self) -> tuple[Edge, ...]:
        """Edges arriving at this vertex, in insertion order."""
        return tuple(self._incoming)

    @property
    def in_degree(self) -> int:
        return len(self._incoming)

    @property
    def out_degree(self) -> int:
        return len(self._outgoing)

    def predecessors(self) -> list[Vertex]:
        """Get the distinct origins of incoming edges, in first-edge order."""
        return list(dict.fromkeys(edge.origin for edge in self._incoming))

    def successors(self) -> list[Vertex]:
        """Get the distinct destinations of outgoing edges, in first-edge order."""
        return list(dict.fromkeys(edge.destination for edge in self._outgoing))

    def has_edge_to(self, other: Vertex) -> bool:
        """Check whether a direct edge from this vertex to ``other`` exists."""
        return any(edge.destination is other for edge in self._outgoing)

    def path_to(self, other: object) -> bool:
        """Check whether a directed path leads from this vertex to ``other``.

        Args:
            other: A vertex in the same graph.

        Returns:
            True iff following outgoing edges from here reaches ``other``.

        Raises:
            InvalidVertexError: If ``other`` is not a vertex of the same graph.

        """
        target = self._require_sibling(other)
        return has_path(self, target, Vertex.successors)

    def reachable_from(self, other: object) -> bool:
        """Check whether a directed path leads from ``other`` to this vertex.

        Raises:
            InvalidVertexError: If ``other`` is not a vertex of the same graph.

        """
        return self._require_sibling(other).path_to(self)

    def ancestors(self, into: set[Vertex] | None = None) -> set[Vertex]:
        """Get every vertex with a path to this one.

        Args:
            into: Set to accumulate into. Vertices already present are not
                expanded again.

        Returns:
            The accumulator set. This vertex is not added.

        """
        return collect_reachable(self, Vertex.predecessors, into)

    def descendants(self, into: set[Vertex] | None = None) -> set[Vertex]:
        """Get every vertex reachable from this one.

        Args:
            into: Set to accumulate into. Vertices already present are not
                expanded again.

        Returns:
            The accumulator set. This vertex is not added.

        """
        return collect_reachable(self, Vertex.successors, into)

    def get(self, key: Hashable, default: Any = None) -> Any:
        return self._payload.get(key, default)

    def __getitem__(self, key: Hashable) -> Any:
        """Look up a payload value, returning None for a missing key."""
        return self._payload.get(key)

    def __repr__(self) -> str:
        return f"Vertex({self._payload!r})"

    def _require_sibling(self, other: object) -> Vertex:
        if not isinstance(other, Vertex) or other not in self._graph:
            raise InvalidVertexError(other, "other")
        return other

    def _bind(self, ext: VertexExtension) -> None:
        self._ext = ext

    def _attach_outgoing(self, edge: Edge) -> None:
        self._outgoing.append(edge)

    def _attach_incoming(self, edge: Edge) -> None:
        self._incoming.append(edge)
