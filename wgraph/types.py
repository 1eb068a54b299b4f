"""Core value types shared across wgraph."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from numbers import Real
from typing import Iterable, Optional, Tuple, Union

#: Numeric cost component carried by an edge.
Cost = Union[int, float]

#: Fixed-length vector of cost components. Its length is the graph's weight dimension.
Weight = Tuple[Cost, ...]


@dataclass(frozen=True, order=True)
class VertexID:
    """
    Opaque vertex identifier.

    Wraps an integer so that vertex ids never compare equal to raw integers
    or to :class:`EdgeID` values. Convert explicitly with ``int(vid)``.
    """

    value: int

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, order=True)
class EdgeID:
    """
    Opaque edge identifier, assigned sequentially by the graph constructor.
    """

    value: int

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    def next(self) -> EdgeID:
        """Return the id that follows this one."""
        return EdgeID(self.value + 1)


def as_weight(weight: Union[Cost, Iterable[Cost]]) -> Weight:
    """
    Normalize a scalar or an iterable of numbers into a Weight tuple.

    A bare number is promoted to a 1-tuple.

    Raises:
        TypeError: If any component is not a real number.
    """
    if isinstance(weight, Real):
        components: Tuple = (weight,)
    else:
        components = tuple(weight)
    for component in components:
        # bool is a Real subclass; reject it explicitly
        if isinstance(component, bool) or not isinstance(component, Real):
            raise TypeError(f"Weight component {component!r} is not a number")
    return components


@dataclass(frozen=True)
class EdgeBlueprint:
    """
    Edge descriptor supplied to the graph constructor before id assignment.

    Attributes:
        vertex1: One endpoint.
        vertex2: The other endpoint.
        weight: Cost vector; a scalar is promoted to a 1-tuple.
    """

    vertex1: VertexID
    vertex2: VertexID
    weight: Weight = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "weight", as_weight(self.weight))


@dataclass(frozen=True)
class Edge:
    """
    Undirected edge stored in a graph.

    ``(vertex1, vertex2)`` and ``(vertex2, vertex1)`` denote the same edge.
    """

    id: EdgeID
    vertex1: VertexID
    vertex2: VertexID
    weight: Weight

    @property
    def endpoints(self) -> Tuple[VertexID, VertexID]:
        return (self.vertex1, self.vertex2)

    def connects(self, a: VertexID, b: VertexID) -> bool:
        """Return True if this edge joins ``a`` and ``b`` in either direction."""
        return (self.vertex1 == a and self.vertex2 == b) or (
            self.vertex1 == b and self.vertex2 == a
        )

    def is_incident(self, vertex: VertexID) -> bool:
        return self.vertex1 == vertex or self.vertex2 == vertex

    def other(self, vertex: VertexID) -> VertexID:
        """
        Return the endpoint opposite to ``vertex``.

        Raises:
            ValueError: If ``vertex`` is not an endpoint of this edge.
        """
        if vertex == self.vertex1:
            return self.vertex2
        if vertex == self.vertex2:
            return self.vertex1
        raise ValueError(f"Vertex {vertex} is not an endpoint of edge {self.id}")


@dataclass(frozen=True)
class Connection:
    """
    One-sided view of an edge from a given vertex: the far endpoint and the weight.

    Equality and hashing use ``other_vertex`` and ``weight`` only; ``edge_id``
    records which edge produced the connection.
    """

    other_vertex: VertexID
    weight: Weight
    edge_id: Optional[EdgeID] = field(default=None, compare=False)


class NeighborPolicy(IntEnum):
    """How parallel edges are reported by a neighbor query."""

    #: Collapse connections that are equal by (other_vertex, weight).
    DEDUPLICATE = 1
    #: Report one connection per incident edge.
    PRESERVE_PARALLEL = 2
