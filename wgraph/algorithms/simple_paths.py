from __future__ import annotations

from typing import Iterator, List, Optional, Set, Tuple

from wgraph.config import SEARCH_CONFIG
from wgraph.errors import VertexNotFoundError
from wgraph.graph import WeightedGraph
from wgraph.logging import get_logger
from wgraph.path import Path
from wgraph.types import Connection, NeighborPolicy, VertexID

logger = get_logger(__name__)


def iter_simple_paths(
    graph: WeightedGraph,
    start_vertex: VertexID,
    end_vertex: VertexID,
    policy: Optional[NeighborPolicy] = None,
) -> Iterator[Tuple[VertexID, ...]]:
    """
    Lazily enumerate simple paths between two vertices as vertex sequences.

    Depth-first traversal with backtracking over an explicit stack, so depth is
    not limited by the interpreter's recursion limit. A vertex already on the
    current prefix is never entered again; reaching ``end_vertex`` emits the
    prefix and backtracks without exploring past it.

    When parallel edges with distinct weights join two vertices, the same
    vertex sequence is emitted once per such connection.

    Args:
        graph: The graph to search.
        start_vertex: First vertex of every path.
        end_vertex: Last vertex of every path.
        policy: Neighbor policy passed to ``find_neighbors``.

    Yields:
        Tuples of vertex ids from ``start_vertex`` to ``end_vertex``.

    Raises:
        VertexNotFoundError: If either endpoint is not in the graph.
    """
    for vertex in (start_vertex, end_vertex):
        if vertex not in graph:
            raise VertexNotFoundError(vertex)

    if start_vertex == end_vertex:
        yield (start_vertex,)
        return

    prefix: List[VertexID] = [start_vertex]
    visited: Set[VertexID] = {start_vertex}
    # Each frame iterates the connections of the vertex at the same prefix depth
    stack: List[Iterator[Connection]] = [
        iter(graph.find_neighbors(start_vertex, policy))
    ]

    while stack:
        connection = next(stack[-1], None)
        if connection is None:
            # neighbors exhausted: unwind
            stack.pop()
            visited.discard(prefix.pop())
            continue

        neighbor = connection.other_vertex
        if neighbor in visited:
            continue
        if neighbor == end_vertex:
            yield tuple(prefix) + (neighbor,)
            continue

        visited.add(neighbor)
        prefix.append(neighbor)
        stack.append(iter(graph.find_neighbors(neighbor, policy)))


def find_all_paths(
    graph: WeightedGraph,
    start_vertex: VertexID,
    end_vertex: VertexID,
    max_paths: Optional[int] = None,
    policy: Optional[NeighborPolicy] = None,
) -> Set[Path]:
    """
    Collect every simple path (no repeated vertex) between two vertices.

    Brute force: the result can grow exponentially with graph size. Intended
    for small graphs and as a correctness oracle for the shortest-path search.

    Args:
        graph: The graph to search.
        start_vertex: First vertex of every path.
        end_vertex: Last vertex of every path.
        max_paths: Stop once this many distinct paths are collected. Defaults to
            the configured limit (unlimited unless changed).
        policy: Neighbor policy passed to ``find_neighbors``.

    Returns:
        Set[Path]: Distinct paths as edge sequences. ``start_vertex ==
        end_vertex`` gives a single empty path.

    Raises:
        VertexNotFoundError: If either endpoint is not in the graph.
        NoPathError: If a traversed vertex pair turns out to be disconnected.
    """
    if max_paths is None:
        max_paths = SEARCH_CONFIG.max_paths
    if max_paths is not None and max_paths < 1:
        raise ValueError(f"max_paths must be >= 1, got {max_paths}")

    paths: Set[Path] = set()
    for vertices in iter_simple_paths(graph, start_vertex, end_vertex, policy):
        paths.add(Path.from_vertices(graph, vertices))
        if max_paths is not None and len(paths) >= max_paths:
            logger.debug("Stopped after collecting %d paths", max_paths)
            break

    logger.debug(
        "Found %d simple paths from %s to %s", len(paths), start_vertex, end_vertex
    )
    return paths
