"""Path search algorithms over WeightedGraph."""

from wgraph.algorithms.simple_paths import find_all_paths, iter_simple_paths
from wgraph.algorithms.spf import dijkstra, shortest_distances

__all__ = [
    "dijkstra",
    "shortest_distances",
    "find_all_paths",
    "iter_simple_paths",
]
