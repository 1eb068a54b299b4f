from __future__ import annotations

from typing import (
    Dict,
    Iterable,
    Iterator,
    List,
    Optional,
    Sequence,
    Tuple,
    Union,
)

from wgraph.config import SEARCH_CONFIG
from wgraph.errors import ConstructionError, EdgeNotFoundError, VertexNotFoundError
from wgraph.logging import get_logger
from wgraph.types import (
    Connection,
    Cost,
    Edge,
    EdgeBlueprint,
    EdgeID,
    NeighborPolicy,
    VertexID,
)

logger = get_logger(__name__)

#: Raw edge description accepted by WeightedGraph.from_tuples: (v1, v2, weight).
EdgeTuple = Tuple[int, int, Union[Cost, Sequence[Cost]]]


class WeightedGraph:
    """
    An immutable, undirected graph whose edges carry fixed-length weight vectors.

    This class enforces:
      - Every edge endpoint must be one of the supplied vertices. The check
        runs before any edge is created, so a graph either exists in full or
        not at all.
      - Every edge weight has the same length (the weight dimension).
      - Edge ids are assigned sequentially from 0 in blueprint order.

    Duplicate vertex ids and parallel edges are accepted as given.

    Attributes are read-only; any change requires building a new graph.
    """

    __slots__ = ("_vertices", "_vertex_set", "_edges", "_edges_by_id", "_weight_dim")

    def __init__(
        self,
        vertex_ids: Iterable[VertexID],
        edge_blueprints: Iterable[EdgeBlueprint] = (),
        weight_dim: Optional[int] = None,
    ) -> None:
        """
        Build a graph from vertex ids and edge blueprints.

        Args:
            vertex_ids: Vertex ids in the order they should be stored.
            edge_blueprints: Edge descriptors; the i-th becomes edge ``EdgeID(i)``.
            weight_dim: Length of every edge weight. If None, taken from the
                first blueprint (0 when there are none).

        Raises:
            ConstructionError: If a blueprint references a vertex that is not in
                ``vertex_ids``, ``weight_dim`` is not a non-negative integer, or
                a weight does not match the weight dimension.
        """
        vertices = tuple(vertex_ids)
        blueprints = tuple(edge_blueprints)
        vertex_set = frozenset(vertices)

        # Referential integrity first, so no edge exists if any endpoint is bad
        for blueprint in blueprints:
            for vertex in (blueprint.vertex1, blueprint.vertex2):
                if vertex not in vertex_set:
                    raise ConstructionError(
                        f"Vertex {vertex} is not in the provided vertices",
                        vertex=vertex,
                    )

        if weight_dim is None:
            weight_dim = len(blueprints[0].weight) if blueprints else 0
        elif isinstance(weight_dim, bool) or not isinstance(weight_dim, int):
            raise ConstructionError(
                f"Weight dimension must be an integer, got {weight_dim!r}"
            )
        elif weight_dim < 0:
            raise ConstructionError(f"Weight dimension must be >= 0, got {weight_dim}")

        edges: List[Edge] = []
        edge_id = EdgeID(0)
        for blueprint in blueprints:
            weight = blueprint.weight
            if len(weight) != weight_dim:
                raise ConstructionError(
                    f"Edge {blueprint.vertex1}-{blueprint.vertex2} has weight "
                    f"dimension {len(weight)}, expected {weight_dim}"
                )
            edges.append(Edge(edge_id, blueprint.vertex1, blueprint.vertex2, weight))
            edge_id = edge_id.next()

        self._vertices: Tuple[VertexID, ...] = vertices
        self._vertex_set = vertex_set
        self._edges: Tuple[Edge, ...] = tuple(edges)
        self._edges_by_id: Dict[EdgeID, Edge] = {edge.id: edge for edge in edges}
        self._weight_dim: int = weight_dim

        logger.debug(
            "Built graph with %d vertices, %d edges, weight dimension %d",
            len(vertices),
            len(edges),
            weight_dim,
        )

    @classmethod
    def from_tuples(
        cls,
        vertices: Iterable[int],
        edges: Iterable[EdgeTuple] = (),
        weight_dim: Optional[int] = None,
    ) -> WeightedGraph:
        """
        Build a graph from raw integers and ``(v1, v2, weight)`` tuples.

        A scalar weight is promoted to a 1-tuple.

        Args:
            vertices: Raw integer vertex ids.
            edges: ``(v1, v2, weight)`` tuples with raw integer endpoints.
            weight_dim: Optional explicit weight dimension.

        Returns:
            WeightedGraph: The constructed graph.

        Raises:
            ConstructionError: As for the main constructor, or if a weight
                component is not a number.
        """
        blueprints = []
        for v1, v2, weight in edges:
            try:
                blueprint = EdgeBlueprint(VertexID(v1), VertexID(v2), weight)
            except TypeError as exc:
                raise ConstructionError(str(exc)) from exc
            blueprints.append(blueprint)
        return cls((VertexID(v) for v in vertices), blueprints, weight_dim=weight_dim)

    #
    # Read-only state
    #
    @property
    def vertices(self) -> Tuple[VertexID, ...]:
        """Vertex ids in input order (duplicates retained)."""
        return self._vertices

    @property
    def edges(self) -> Tuple[Edge, ...]:
        """Edges in id order."""
        return self._edges

    @property
    def weight_dim(self) -> int:
        return self._weight_dim

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._vertex_set

    def __iter__(self) -> Iterator[VertexID]:
        return iter(self._vertices)

    def __repr__(self) -> str:
        return (
            f"WeightedGraph(vertices={len(self._vertices)}, "
            f"edges={len(self._edges)}, weight_dim={self._weight_dim})"
        )

    def has_vertex(self, vertex: VertexID) -> bool:
        return vertex in self._vertex_set

    def get_edge(self, edge_id: EdgeID) -> Edge:
        """
        Retrieve an edge by id.

        Raises:
            EdgeNotFoundError: If no edge with this id exists.
        """
        try:
            return self._edges_by_id[edge_id]
        except KeyError:
            raise EdgeNotFoundError(edge_id) from None

    #
    # Edge and neighbor queries
    #
    def find_edge(self, vertex1: VertexID, vertex2: VertexID) -> Optional[Edge]:
        """
        Return the first edge (in stored order) joining two vertices.

        The match is direction-insensitive. Unknown vertices simply produce no
        match.

        Args:
            vertex1: One endpoint.
            vertex2: The other endpoint.

        Returns:
            Optional[Edge]: The edge, or None if the vertices are not adjacent.
        """
        for edge in self._edges:
            if edge.connects(vertex1, vertex2):
                return edge
        return None

    def edges_between(self, vertex1: VertexID, vertex2: VertexID) -> List[Edge]:
        """
        List all parallel edges joining two vertices, in stored order.

        Returns:
            List[Edge]: Possibly empty list of edges.
        """
        return [edge for edge in self._edges if edge.connects(vertex1, vertex2)]

    def cheapest_edge(self, vertex1: VertexID, vertex2: VertexID) -> Optional[Edge]:
        """
        Return the lowest-weight edge joining two vertices.

        Weights are compared as tuples; ties go to the edge stored first.
        Without parallel edges this is the same edge as :meth:`find_edge`.

        Returns:
            Optional[Edge]: The edge, or None if the vertices are not adjacent.
        """
        best: Optional[Edge] = None
        for edge in self._edges:
            if edge.connects(vertex1, vertex2) and (
                best is None or edge.weight < best.weight
            ):
                best = edge
        return best

    def find_neighbors(
        self,
        vertex: VertexID,
        policy: Optional[NeighborPolicy] = None,
    ) -> Tuple[Connection, ...]:
        """
        List the connections incident to a vertex.

        Every edge touching ``vertex`` yields its far endpoint and weight, in
        stored edge order. A self-loop yields ``vertex`` itself.

        Args:
            vertex: The vertex to query.
            policy: ``NeighborPolicy.DEDUPLICATE`` collapses connections that are
                equal by (other_vertex, weight), keeping the first;
                ``NeighborPolicy.PRESERVE_PARALLEL`` keeps one entry per edge.
                Defaults to the configured policy.

        Returns:
            Tuple[Connection, ...]: The connections.

        Raises:
            VertexNotFoundError: If ``vertex`` is not in the graph.
        """
        if vertex not in self._vertex_set:
            raise VertexNotFoundError(vertex)

        connections = [
            Connection(edge.other(vertex), edge.weight, edge.id)
            for edge in self._edges
            if edge.is_incident(vertex)
        ]
        if SEARCH_CONFIG.resolve_policy(policy) == NeighborPolicy.DEDUPLICATE:
            # dict keeps the first occurrence of each equal connection
            return tuple(dict.fromkeys(connections))
        return tuple(connections)


def find_edge(graph: WeightedGraph, vertex1: VertexID, vertex2: VertexID) -> Optional[Edge]:
    """Function form of :meth:`WeightedGraph.find_edge`."""
    return graph.find_edge(vertex1, vertex2)


def find_neighbors(
    graph: WeightedGraph,
    vertex: VertexID,
    policy: Optional[NeighborPolicy] = None,
) -> Tuple[Connection, ...]:
    """Function form of :meth:`WeightedGraph.find_neighbors`."""
    return graph.find_neighbors(vertex, policy)
