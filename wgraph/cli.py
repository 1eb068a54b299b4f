"""Command-line interface for wgraph."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path as FilePath
from typing import Any, Dict, List, Optional

from wgraph.algorithms import dijkstra, find_all_paths
from wgraph.errors import GraphError
from wgraph.graph import WeightedGraph
from wgraph.io import edgelist_to_graph, load_graph_yaml
from wgraph.logging import get_logger, set_global_log_level
from wgraph.path import Path
from wgraph.types import VertexID

logger = get_logger(__name__)

_EDGELIST_SUFFIXES = (".txt", ".edges", ".edgelist")


def _format_table(
    headers: List[str],
    rows: List[List[str]],
    min_width: int = 6,
) -> str:
    """Format data as a simple ASCII table.

    Args:
        headers: Column headers
        rows: Data rows
        min_width: Minimum column width

    Returns:
        Formatted table string
    """
    if not rows:
        return ""

    all_data = [headers] + rows
    col_widths = [
        max(max(len(str(row[col_idx])) for row in all_data), min_width)
        for col_idx in range(len(headers))
    ]

    def format_row(row_data: List[str]) -> str:
        return "   " + " | ".join(
            f"{str(item):<{col_widths[i]}}" for i, item in enumerate(row_data)
        )

    lines = [format_row(headers)]
    lines.append("   " + "-+-".join("-" * width for width in col_widths))
    for row in rows:
        lines.append(format_row(row))
    return "\n".join(lines)


def _format_weight(weight: Any) -> str:
    """Return a weight tuple as ``5`` for scalars or ``(1, 2)`` for vectors."""
    if len(weight) == 1:
        return f"{weight[0]:g}" if isinstance(weight[0], float) else str(weight[0])
    return "(" + ", ".join(str(component) for component in weight) + ")"


def _plural(n: int, singular: str, plural: Optional[str] = None) -> str:
    if n == 1:
        return singular
    return plural or (singular + "s")


def _load_graph(path: FilePath) -> WeightedGraph:
    """Load a graph from YAML, or from an edge list for ``.txt``/``.edges`` files."""
    text = path.read_text()
    if path.suffix.lower() in _EDGELIST_SUFFIXES:
        return edgelist_to_graph(text.splitlines())
    return load_graph_yaml(text)


def _path_to_dict(path: Path) -> Dict[str, Any]:
    return {
        "vertices": [int(v) for v in path.vertices_seq],
        "edges": [int(edge_id) for edge_id in path.edge_ids],
        "total_weight": list(path.total_weight()) if path.edges else None,
    }


def _print_path(path: Path) -> None:
    print(f"   Path: {' -> '.join(str(v) for v in path.vertices_seq)}")
    if not path.edges:
        print("   (start and end are the same vertex)")
        return
    rows = [
        [str(edge.id), str(edge.vertex1), str(edge.vertex2), _format_weight(edge.weight)]
        for edge in path
    ]
    print(_format_table(["Edge", "Vertex1", "Vertex2", "Weight"], rows))
    print(f"   Total weight: {_format_weight(path.total_weight())}")


def _inspect_graph(graph: WeightedGraph, path: FilePath) -> None:
    """Print a summary of a graph and its edges."""
    print(f"GRAPH: {path}")
    print("-" * 30)
    vertex_count = len(graph.vertices)
    edge_count = len(graph.edges)
    print(f"   Vertices: {vertex_count:,}")
    print(f"   Edges: {edge_count:,}")
    print(f"   Weight dimension: {graph.weight_dim}")

    distinct = len(set(graph.vertices))
    if distinct != vertex_count:
        duplicates = vertex_count - distinct
        print(f"   Duplicate vertex ids: {duplicates} {_plural(duplicates, 'entry', 'entries')}")

    isolated = [
        vertex for vertex in dict.fromkeys(graph.vertices) if not graph.find_neighbors(vertex)
    ]
    if isolated:
        print(f"   Isolated vertices: {', '.join(str(v) for v in isolated)}")

    if graph.edges:
        print("\n   Edges:")
        rows = [
            [str(edge.id), str(edge.vertex1), str(edge.vertex2), _format_weight(edge.weight)]
            for edge in graph.edges
        ]
        print(_format_table(["Edge", "Vertex1", "Vertex2", "Weight"], rows))


def _shortest_path(
    graph: WeightedGraph, start: VertexID, end: VertexID, as_json: bool
) -> None:
    path = dijkstra(graph, start, end)
    logger.info(f"Shortest path from {start} to {end} has {len(path)} edges")
    if as_json:
        print(json.dumps(_path_to_dict(path), indent=2))
        return
    print(f"SHORTEST PATH {start} -> {end}")
    print("-" * 30)
    _print_path(path)


def _all_paths(
    graph: WeightedGraph,
    start: VertexID,
    end: VertexID,
    max_paths: Optional[int],
    as_json: bool,
) -> None:
    paths = find_all_paths(graph, start, end, max_paths=max_paths)
    # Deterministic output: by total weight, then by vertex sequence
    ordered = sorted(
        paths,
        key=lambda p: (p.total_weight() if p.edges else (), p.vertices_seq),
    )
    logger.info(f"Found {len(ordered)} simple paths from {start} to {end}")
    if as_json:
        print(json.dumps([_path_to_dict(p) for p in ordered], indent=2))
        return
    print(f"ALL SIMPLE PATHS {start} -> {end}")
    print("-" * 30)
    print(f"   Total: {len(ordered)} {_plural(len(ordered), 'path')}")
    rows = [
        [
            str(idx + 1),
            " -> ".join(str(v) for v in p.vertices_seq),
            _format_weight(p.total_weight()) if p.edges else "-",
        ]
        for idx, p in enumerate(ordered)
    ]
    if rows:
        print(_format_table(["#", "Vertices", "Weight"], rows))


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``wgraph`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="wgraph",
        description="Inspect weighted graphs and search them for paths.",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{inspect,shortest-path,all-paths}",
        help="Available commands",
    )

    inspect_parser = subparsers.add_parser("inspect", help="Summarize a graph file")
    inspect_parser.add_argument("graph", type=FilePath, help="Path to graph file")

    sp_parser = subparsers.add_parser(
        "shortest-path", help="Find one shortest path (scalar weights only)"
    )
    ap_parser = subparsers.add_parser(
        "all-paths", help="Enumerate all simple paths between two vertices"
    )
    for p in (sp_parser, ap_parser):
        p.add_argument("graph", type=FilePath, help="Path to graph file")
        p.add_argument("start", type=int, help="Start vertex id")
        p.add_argument("end", type=int, help="End vertex id")
        p.add_argument("--json", action="store_true", help="Print results as JSON")
    ap_parser.add_argument(
        "--max-paths",
        type=int,
        default=None,
        help="Stop after collecting this many paths",
    )

    effective_args = sys.argv[1:] if argv is None else argv

    # No arguments: show help and exit cleanly
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    try:
        graph = _load_graph(args.graph)
        if args.command == "inspect":
            _inspect_graph(graph, args.graph)
        elif args.command == "shortest-path":
            _shortest_path(graph, VertexID(args.start), VertexID(args.end), args.json)
        elif args.command == "all-paths":
            _all_paths(
                graph,
                VertexID(args.start),
                VertexID(args.end),
                args.max_paths,
                args.json,
            )
    except FileNotFoundError:
        logger.error(f"Graph file not found: {args.graph}")
        print(f"ERROR: Graph file not found: {args.graph}", file=sys.stderr)
        sys.exit(1)
    except (GraphError, ValueError) as e:
        logger.debug("Command failed", exc_info=True)
        print(f"ERROR: {type(e).__name__}: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
