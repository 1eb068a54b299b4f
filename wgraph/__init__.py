"""wgraph: weighted undirected graphs with path search.

Primary API:
    WeightedGraph - immutable graph with fixed-dimension edge weights
    dijkstra() - one shortest path in a scalar-weight graph
    find_all_paths() - every simple path between two vertices
    total_weight() - elementwise sum of a path's edge weights

Example:
    from wgraph import VertexID, WeightedGraph, dijkstra

    graph = WeightedGraph.from_tuples([1, 2, 3], [(1, 2, 4), (2, 3, 5)])
    path = dijkstra(graph, VertexID(1), VertexID(3))
    path.total_weight()  # (9,)
"""

from __future__ import annotations

from wgraph import logging
from wgraph._version import __version__
from wgraph.algorithms import (
    dijkstra,
    find_all_paths,
    iter_simple_paths,
    shortest_distances,
)
from wgraph.config import SEARCH_CONFIG, SearchConfig
from wgraph.convert import from_networkx, to_networkx
from wgraph.errors import (
    ConstructionError,
    EdgeNotFoundError,
    EmptyGraphError,
    EmptyPathError,
    GraphError,
    InvalidPathError,
    NoPathError,
    VertexNotFoundError,
    WeightDimensionError,
)
from wgraph.graph import WeightedGraph, find_edge, find_neighbors
from wgraph.path import Path, total_weight
from wgraph.types import (
    Connection,
    Edge,
    EdgeBlueprint,
    EdgeID,
    NeighborPolicy,
    VertexID,
    Weight,
)

__all__ = [
    # Version
    "__version__",
    # Model
    "WeightedGraph",
    "VertexID",
    "EdgeID",
    "EdgeBlueprint",
    "Edge",
    "Connection",
    "Weight",
    "NeighborPolicy",
    "Path",
    # Queries
    "find_edge",
    "find_neighbors",
    "total_weight",
    # Algorithms
    "dijkstra",
    "shortest_distances",
    "find_all_paths",
    "iter_simple_paths",
    # Errors
    "GraphError",
    "ConstructionError",
    "VertexNotFoundError",
    "EdgeNotFoundError",
    "EmptyGraphError",
    "NoPathError",
    "EmptyPathError",
    "InvalidPathError",
    "WeightDimensionError",
    # Configuration
    "SearchConfig",
    "SEARCH_CONFIG",
    # NetworkX integration
    "from_networkx",
    "to_networkx",
    # Utilities
    "logging",
]
