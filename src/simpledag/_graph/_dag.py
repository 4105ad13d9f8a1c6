"""Mutable directed acyclic graph with cycle prevention on insertion."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from simpledag._config import GraphConfig
from simpledag._errors import CycleError, DuplicateEdgeError, InvalidVertexError

from ._algorithms import topological_sort
from ._vertex import Edge, Vertex

if TYPE_CHECKING:
    from collections.abc import Hashable, Iterable, Iterator

logger = logging.getLogger(__name__)

_ORIGIN_ALIASES = ("source", "start", "from_", "from")
_DESTINATION_ALIASES = ("sink", "end", "to")


def _pick_endpoint(role: str, explicit: Vertex | None, aliases: dict[str, Any], names: tuple[str, ...]) -> Any:
    """Resolve one endpoint from its canonical argument and its keyword aliases."""
    given = [name for name in names if name in aliases]
    if explicit is not None:
        given.insert(0, role)
    if len(given) > 1:
        msg = f"add_edge() got multiple values for the {role}: {', '.join(given)}"
        raise TypeError(msg)
    if explicit is not None:
        return explicit
    return aliases.pop(given[0]) if given else None


class Graph:
    """A directed acyclic graph that owns its vertices and edges.

    The graph is acyclic at every observable point: each edge insertion is
    validated before anything is mutated, and a rejected insertion leaves the
    graph unchanged. Vertices and edges are never removed.

    Not safe for concurrent mutation; callers serialise access to a graph.

    Example:
        >>> graph = Graph()
        >>> a = graph.create_vertex({"name": "a"})
        >>> b = graph.create_vertex({"name": "b"})
        >>> _ = graph.add_edge(a, b)
        >>> [v["name"] for v in graph.topological_sort()]
        ['a', 'b']

    """

    def __init__(self, config: GraphConfig | None = None) -> None:
        self._config = config if config is not None else GraphConfig()
        self._vertices: list[Vertex] = []
        # Vertex() can be called directly, so ownership is tracked here
        self._owned: set[Vertex] = set()
        self._edges: list[Edge] = []

    @property
    def config(self) -> GraphConfig:
        return self._config

    @property
    def vertices(self) -> tuple[Vertex, ...]:
        """All vertices in creation order."""
        return tuple(self._vertices)

    @property
    def edges(self) -> tuple[Edge, ...]:
        """All edges in insertion order."""
        return tuple(self._edges)

    def create_vertex(self, payload: dict[Hashable, Any] | None = None) -> Vertex:
        """Create a vertex owned by this graph.

        Args:
            payload: Caller-defined data, stored by reference. Defaults to a
                new empty dict.

        Returns:
            The new vertex, with the configured extension bound to it.

        """
        vertex = Vertex(self, {} if payload is None else payload)
        if self._config.extension is not None:
            vertex._bind(self._config.extension(vertex))  # noqa: SLF001
        self._vertices.append(vertex)
        self._owned.add(vertex)
        logger.debug("Created vertex #%d %r", len(self._vertices), vertex)
        return vertex

    def add_edge(
        self,
        origin: Vertex | None = None,
        destination: Vertex | None = None,
        properties: dict[Hashable, Any] | None = None,
        **aliases: Any,
    ) -> Edge:
        """Add an edge from ``origin`` to ``destination``.

        The origin may also be passed as ``source``, ``start``, ``from_`` or
        ``from``, and the destination as ``sink``, ``end`` or ``to``.

        Args:
            origin: Vertex the edge leaves.
            destination: Vertex the edge arrives at.
            properties: Caller-defined edge data, stored by reference.

        Returns:
            The new edge.

        Raises:
            InvalidVertexError: If an endpoint is missing or not a vertex of this graph.
            CycleError: If the edge is a self-loop or would close a cycle.
            DuplicateEdgeError: If the edge already exists and parallel edges
                are not allowed.
            TypeError: If an endpoint is given twice or an unknown keyword is passed.

        """
        origin = _pick_endpoint("origin", origin, aliases, _ORIGIN_ALIASES)
        destination = _pick_endpoint("destination", destination, aliases, _DESTINATION_ALIASES)
        if aliases:
            msg = f"add_edge() got unexpected keyword arguments: {', '.join(sorted(aliases))}"
            raise TypeError(msg)
        return self._insert_edge(origin, destination, properties)

    def has_edge(self, origin: Vertex, destination: Vertex) -> bool:
        """Check whether a direct edge from ``origin`` to ``destination`` exists.

        Raises:
            InvalidVertexError: If either argument is not a vertex of this graph.

        """
        self._require_vertex(origin, "origin")
        self._require_vertex(destination, "destination")
        return origin.has_edge_to(destination)

    def roots(self) -> list[Vertex]:
        """Get vertices with no incoming edges, in creation order."""
        return [v for v in self._vertices if not v.in_degree]

    def leaves(self) -> list[Vertex]:
        """Get vertices with no outgoing edges, in creation order."""
        return [v for v in self._vertices if not v.out_degree]

    def topological_sort(self) -> list[Vertex]:
        """Return vertices so that every edge's origin precedes its destination.

        Depth-first post-order over the vertices in creation order, reversed.
        The result is deterministic for a given sequence of insertions.

        Returns:
            List of all vertices in topological order.

        """
        return topological_sort(self._vertices, Vertex.successors)

    def subgraph(
        self,
        predecessors_of: Iterable[Vertex] = (),
        successors_of: Iterable[Vertex] = (),
    ) -> Graph:
        """Extract a new graph from ancestor and descendant closures.

        The result holds each vertex of ``predecessors_of`` with all its
        ancestors, and each vertex of ``successors_of`` with all its
        descendants. Vertices are copied in creation order with a shallow copy
        of their payload, and every edge between two selected vertices is
        copied once, in insertion order, with a shallow copy of its properties.

        Args:
            predecessors_of: Vertices whose ancestors are included.
            successors_of: Vertices whose descendants are included.

        Returns:
            A new, independent graph with the same configuration.

        Raises:
            InvalidVertexError: If any argument is not a vertex of this graph.

        """
        predecessors_of = list(predecessors_of)
        successors_of = list(successors_of)
        for vertex in predecessors_of:
            self._require_vertex(vertex, "predecessors_of item")
        for vertex in successors_of:
            self._require_vertex(vertex, "successors_of item")

        selected: set[Vertex] = set(predecessors_of)
        for vertex in predecessors_of:
            vertex.ancestors(selected)
        from_successors: set[Vertex] = set(successors_of)
        for vertex in successors_of:
            vertex.descendants(from_successors)
        selected |= from_successors

        result = Graph(self._config)
        mapping: dict[Vertex, Vertex] = {}
        for vertex in self._vertices:
            if vertex in selected:
                mapping[vertex] = result.create_vertex(dict(vertex.payload))

        for edge in self._edges:
            if edge.origin in mapping and edge.destination in mapping:
                result._insert_edge(  # noqa: SLF001
                    mapping[edge.origin],
                    mapping[edge.destination],
                    dict(edge.properties),
                )

        logger.debug(
            "Extracted subgraph with %d of %d vertices and %d of %d edges",
            len(result._vertices),  # noqa: SLF001
            len(self._vertices),
            len(result._edges),  # noqa: SLF001
            len(self._edges),
        )
        return result

    def _insert_edge(
        self,
        origin: object,
        destination: object,
        properties: dict[Hashable, Any] | None,
    ) -> Edge:
        origin = self._require_vertex(origin, "origin")
        destination = self._require_vertex(destination, "destination")
        if origin is destination:
            logger.debug("Rejected self-loop on %r", origin)
            raise CycleError(origin, destination)
        if not self._config.allow_parallel_edges and origin.has_edge_to(destination):
            logger.debug("Rejected duplicate edge %r -> %r", origin, destination)
            raise DuplicateEdgeError(origin, destination)
        if destination.path_to(origin):
            logger.debug("Rejected cycle-closing edge %r -> %r", origin, destination)
            raise CycleError(origin, destination)

        edge = Edge(origin, destination, {} if properties is None else properties)
        origin._attach_outgoing(edge)  # noqa: SLF001
        destination._attach_incoming(edge)  # noqa: SLF001
        self._edges.append(edge)
        logger.debug("Added edge %r -> %r", origin, destination)
        return edge

    def _require_vertex(self, value: object, role: str) -> Vertex:
        if not isinstance(value, Vertex) or value not in self._owned:
            raise InvalidVertexError(value, role)
        return value

    def __len__(self) -> int:
        """Return the number of vertices in the graph."""
        return len(self._vertices)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self._vertices)

    def __contains__(self, vertex: object) -> bool:
        """Check if a vertex belongs to this graph."""
        return isinstance(vertex, Vertex) and vertex in self._owned

    def __repr__(self) -> str:
        return f"Graph(vertices={len(self._vertices)}, edges={len(self._edges)})"
