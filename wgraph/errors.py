"""Exception types raised by wgraph.

Every error derives from :class:`GraphError`. Where a built-in exception
describes the same failure, the error also subclasses it, so callers may
catch either ``GraphError`` or the familiar built-in (``ValueError`` or
``LookupError``).
"""

from __future__ import annotations

from typing import Any


class GraphError(Exception):
    """Base class for all wgraph errors."""


class ConstructionError(GraphError, ValueError):
    """A graph could not be built from the supplied vertices and blueprints.

    Attributes:
        vertex: The offending vertex, when the failure is an unknown endpoint.
    """

    def __init__(self, message: str, vertex: Any = None) -> None:
        super().__init__(message)
        self.vertex = vertex


class VertexNotFoundError(GraphError, LookupError):
    """A query referenced a vertex that is not part of the graph."""

    def __init__(self, vertex: Any) -> None:
        super().__init__(f"Vertex {vertex} not found in graph")
        self.vertex = vertex


class EdgeNotFoundError(GraphError, LookupError):
    """A query referenced an edge id that is not part of the graph."""

    def __init__(self, edge_id: Any) -> None:
        super().__init__(f"Edge {edge_id} not found in graph")
        self.edge_id = edge_id


class EmptyGraphError(GraphError, ValueError):
    """A search was invoked on a graph with no vertices."""


class NoPathError(GraphError):
    """No connecting path exists between the requested vertices."""


class EmptyPathError(GraphError, ValueError):
    """An aggregate was requested over a path with no edges."""


class InvalidPathError(GraphError, ValueError):
    """A sequence of edges does not form a walk."""


class WeightDimensionError(GraphError, ValueError):
    """An algorithm was invoked on a graph with an unsupported weight dimension."""
