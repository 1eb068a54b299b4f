"""Graph conversion utilities between WeightedGraph and NetworkX graphs.

A WeightedGraph maps onto a ``networkx.MultiGraph``: vertices become nodes
keyed by their raw integer id, and every edge keeps its own key (the raw edge
id) so parallel edges survive the round trip.
"""

from __future__ import annotations

from typing import Optional

import networkx as nx

from wgraph.errors import ConstructionError
from wgraph.graph import WeightedGraph
from wgraph.types import as_weight


def to_networkx(graph: WeightedGraph, weight_attr: str = "weight") -> nx.MultiGraph:
    """Convert a WeightedGraph to a NetworkX MultiGraph.

    Each edge stores its weight tuple under ``weight_attr``. For scalar-weight
    graphs the single component is also stored under ``"cost"`` so NetworkX
    routines such as ``nx.dijkstra_path_length(G, u, v, weight="cost")`` can
    be used directly.

    Args:
        graph: The WeightedGraph to convert.
        weight_attr: Edge attribute name for the weight tuple.

    Returns:
        A NetworkX MultiGraph mirroring the input graph.
    """
    nx_graph = nx.MultiGraph(weight_dim=graph.weight_dim)
    nx_graph.add_nodes_from(int(vertex) for vertex in graph.vertices)

    for edge in graph.edges:
        attrs = {weight_attr: edge.weight}
        if graph.weight_dim == 1:
            attrs["cost"] = edge.weight[0]
        nx_graph.add_edge(int(edge.vertex1), int(edge.vertex2), key=int(edge.id), **attrs)
    return nx_graph


def from_networkx(
    nx_graph: nx.Graph,
    weight_attr: str = "weight",
    weight_dim: Optional[int] = None,
) -> WeightedGraph:
    """Convert a NetworkX graph to a WeightedGraph.

    Nodes must be integers. Edges are taken in NetworkX iteration order and
    receive fresh sequential ids. A scalar weight attribute is promoted to a
    1-tuple; a missing attribute defaults to ``(1,)``. Directed graphs are
    rejected since WeightedGraph edges are undirected.

    Args:
        nx_graph: Any undirected NetworkX graph (Graph or MultiGraph).
        weight_attr: Edge attribute holding the weight.
        weight_dim: Optional explicit weight dimension; defaults to
            ``nx_graph.graph["weight_dim"]`` when present.

    Returns:
        WeightedGraph: The converted graph.

    Raises:
        ConstructionError: If the graph is directed, has non-integer nodes, or
            has non-numeric weights.
    """
    if nx_graph.is_directed():
        raise ConstructionError("Directed graphs cannot be converted to WeightedGraph")

    try:
        vertices = [int(node) for node in nx_graph.nodes]
    except (TypeError, ValueError) as exc:
        raise ConstructionError(f"Graph nodes must be integers: {exc}") from exc

    edge_tuples = []
    for u, v, data in nx_graph.edges(data=True):
        try:
            weight = as_weight(data.get(weight_attr, 1))
        except TypeError as exc:
            raise ConstructionError(str(exc)) from exc
        edge_tuples.append((int(u), int(v), weight))

    if weight_dim is None:
        weight_dim = nx_graph.graph.get("weight_dim")
    return WeightedGraph.from_tuples(vertices, edge_tuples, weight_dim=weight_dim)
