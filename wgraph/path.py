from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import TYPE_CHECKING, Iterator, Optional, Sequence, Tuple, Union

from wgraph.errors import EmptyPathError, InvalidPathError, NoPathError
from wgraph.types import Edge, EdgeID, VertexID, Weight

if TYPE_CHECKING:
    from wgraph.graph import WeightedGraph


@dataclass(frozen=True)
class Path:
    """
    Represents a walk through a graph as an ordered sequence of edges.

    Because edges are undirected, the walk needs a starting vertex to fix the
    traversal direction: each edge must be incident to the vertex reached by
    the previous edge.

    Attributes:
        src_vertex (Optional[VertexID]):
            The vertex the walk starts from. None only for a path built from
            an empty vertex sequence.
        edges (Tuple[Edge, ...]):
            The edges in traversal order.

    Raises:
        InvalidPathError: If consecutive edges do not share the traversal vertex.
    """

    src_vertex: Optional[VertexID]
    edges: Tuple[Edge, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "edges", tuple(self.edges))
        if self.edges and self.src_vertex is None:
            raise InvalidPathError("A non-empty path needs a source vertex")
        current = self.src_vertex
        for edge in self.edges:
            if not edge.is_incident(current):
                raise InvalidPathError(
                    f"Edge {edge.id} ({edge.vertex1}-{edge.vertex2}) does not "
                    f"continue the walk at vertex {current}"
                )
            current = edge.other(current)

    @classmethod
    def from_vertices(
        cls, graph: WeightedGraph, vertices: Sequence[VertexID]
    ) -> Path:
        """
        Convert a vertex sequence into a path of connecting edges.

        Each adjacent pair is joined by its cheapest edge in ``graph``.

        Args:
            graph: The graph the vertices belong to.
            vertices: Vertices in traversal order.

        Returns:
            Path: The corresponding path; empty for zero or one vertex.

        Raises:
            NoPathError: If two adjacent vertices are not connected.
        """
        if not vertices:
            return cls(None)
        edges = []
        for current, following in zip(vertices, vertices[1:]):
            edge = graph.cheapest_edge(current, following)
            if edge is None:
                raise NoPathError(f"Vertices {current} and {following} are not connected")
            edges.append(edge)
        return cls(vertices[0], tuple(edges))

    def __getitem__(self, idx: int) -> Edge:
        return self.edges[idx]

    def __iter__(self) -> Iterator[Edge]:
        return iter(self.edges)

    def __len__(self) -> int:
        return len(self.edges)

    def __repr__(self) -> str:
        return f"Path({' -> '.join(str(v) for v in self.vertices_seq)})"

    @property
    def dst_vertex(self) -> Optional[VertexID]:
        """Return the vertex the walk ends at."""
        return self.vertices_seq[-1] if self.vertices_seq else None

    @cached_property
    def vertices_seq(self) -> Tuple[VertexID, ...]:
        """
        Return the vertices visited, from source to destination.

        An empty path with a source yields just the source.
        """
        if self.src_vertex is None:
            return ()
        seq = [self.src_vertex]
        for edge in self.edges:
            seq.append(edge.other(seq[-1]))
        return tuple(seq)

    @cached_property
    def edge_ids(self) -> Tuple[EdgeID, ...]:
        return tuple(edge.id for edge in self.edges)

    def total_weight(self) -> Weight:
        """Return the elementwise sum of the edge weights. See :func:`total_weight`."""
        return total_weight(self)


def total_weight(path: Union[Path, Sequence[Edge]]) -> Weight:
    """
    Aggregate a path's per-dimension weight vector.

    Args:
        path: A Path or any sequence of edges.

    Returns:
        Weight: Elementwise sum of all edge weights, with the edges' dimension.

    Raises:
        EmptyPathError: If the path has no edges, since the weight dimension
            cannot be recovered from zero edges.
    """
    edges = path.edges if isinstance(path, Path) else tuple(path)
    if not edges:
        raise EmptyPathError("Cannot total the weight of an empty path")

    totals = list(edges[0].weight)
    for edge in edges[1:]:
        for dimension, component in enumerate(edge.weight):
            totals[dimension] += component
    return tuple(totals)
