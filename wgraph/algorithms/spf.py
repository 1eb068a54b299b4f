from __future__ import annotations

from typing import Dict, Optional, Tuple

from wgraph.config import SEARCH_CONFIG
from wgraph.errors import (
    EmptyGraphError,
    NoPathError,
    VertexNotFoundError,
    WeightDimensionError,
)
from wgraph.graph import WeightedGraph
from wgraph.logging import get_logger
from wgraph.path import Path
from wgraph.types import Cost, Edge, VertexID

logger = get_logger(__name__)


def _check_scalar(graph: WeightedGraph) -> None:
    if graph.edges and graph.weight_dim != 1:
        raise WeightDimensionError(
            f"Dijkstra requires scalar (1-dimensional) weights, "
            f"graph has dimension {graph.weight_dim}"
        )


def shortest_distances(
    graph: WeightedGraph,
) -> Tuple[Dict[VertexID, Cost], Dict[VertexID, VertexID]]:
    """
    Textbook Dijkstra's Shortest Path First over the whole graph.

    The source is the first vertex in the graph's stored order. Each round
    selects the unvisited vertex with the smallest tentative distance by a
    linear scan (first in stored order on ties), relaxes its unvisited
    neighbors and marks it visited. The loop runs until every vertex has
    been visited.

    Args:
        graph: A graph with scalar weights.

    Returns:
        costs: tentative distance of every vertex from the first stored vertex;
            unreachable vertices keep the configured distance sentinel.
        pred: each reached vertex (other than the source) mapped to its predecessor.

    Raises:
        EmptyGraphError: If the graph has no vertices.
        WeightDimensionError: If the graph's weights are not scalar.
    """
    if len(graph) == 0:
        raise EmptyGraphError("No vertices exist")
    _check_scalar(graph)

    # Duplicate vertex ids share one distance slot
    order = list(dict.fromkeys(graph.vertices))
    sentinel = SEARCH_CONFIG.distance_sentinel
    costs: Dict[VertexID, Cost] = {vertex: sentinel for vertex in order}
    costs[order[0]] = 0
    pred: Dict[VertexID, VertexID] = {}
    unvisited = dict.fromkeys(order)

    while unvisited:
        # Dense O(V) selection of the closest unvisited vertex
        current = min(unvisited, key=costs.__getitem__)
        current_cost = costs[current]
        for connection in graph.find_neighbors(current):
            neighbor = connection.other_vertex
            if neighbor not in unvisited:
                continue
            cost_through_current = current_cost + connection.weight[0]
            if cost_through_current < costs[neighbor]:
                costs[neighbor] = cost_through_current
                pred[neighbor] = current
        del unvisited[current]

    return costs, pred


def dijkstra(
    graph: WeightedGraph,
    start_vertex: VertexID,
    end_vertex: VertexID,
) -> Path:
    """
    Find one shortest path between two vertices of a scalar-weight graph.

    Distances are computed from the graph's first stored vertex (see
    :func:`shortest_distances`); the path is recovered by following
    predecessor links backward from ``end_vertex`` until ``start_vertex``.
    Only the total weight of the returned path is guaranteed minimal: when
    several paths tie, which one is returned follows from the selection order.

    Args:
        graph: A graph with scalar weights.
        start_vertex: Vertex the path starts at.
        end_vertex: Vertex the path ends at.

    Returns:
        Path: Edges in start-to-end order; empty when start equals end.

    Raises:
        EmptyGraphError: If the graph has no vertices.
        VertexNotFoundError: If either endpoint is not in the graph.
        WeightDimensionError: If the graph's weights are not scalar.
        NoPathError: If the predecessor chain from ``end_vertex`` ends before
            reaching ``start_vertex``.
    """
    if len(graph) == 0:
        raise EmptyGraphError("No vertices exist")
    for vertex in (start_vertex, end_vertex):
        if vertex not in graph:
            raise VertexNotFoundError(vertex)

    logger.debug("Dijkstra search from %s to %s", start_vertex, end_vertex)
    _, pred = shortest_distances(graph)

    edges_backward = []
    current = end_vertex
    while current != start_vertex:
        previous: Optional[VertexID] = pred.get(current)
        if previous is None:
            raise NoPathError(
                f"No path from starting vertex {start_vertex} "
                f"to ending vertex {end_vertex}"
            )
        # The cheapest parallel edge is the one the relaxation used
        edge: Optional[Edge] = graph.cheapest_edge(previous, current)
        if edge is None:
            raise NoPathError(f"Vertices {previous} and {current} are not connected")
        edges_backward.append(edge)
        current = previous

    path = Path(start_vertex, tuple(reversed(edges_backward)))
    logger.debug("Dijkstra found %d-edge path %r", len(path), path)
    return path
