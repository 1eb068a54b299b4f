from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

import yaml

from wgraph.errors import ConstructionError
from wgraph.graph import WeightedGraph
from wgraph.types import Cost, EdgeBlueprint, VertexID


def graph_to_node_link(graph: WeightedGraph) -> Dict[str, Any]:
    """
    Converts a WeightedGraph into a node-link dict representation.

    The representation only holds plain ints, lists and dicts, so it can be
    handed to ``json.dumps`` directly.

    The returned dict has the following structure:
        {
            "weight_dim": <int>,
            "nodes": [{"id": <vertex int>}, ...],
            "links": [
                {
                    "source": <index into nodes>,
                    "target": <index into nodes>,
                    "key": <edge id int>,
                    "weight": [<number>, ...]
                },
                ...
            ]
        }

    Args:
        graph: The WeightedGraph to convert.

    Returns:
        A dict containing 'weight_dim', the list of 'nodes', and the list of 'links'.
    """
    node_list = list(graph.vertices)
    # Duplicate vertex ids point at their first index
    node_map: Dict[VertexID, int] = {}
    for idx, vertex in enumerate(node_list):
        node_map.setdefault(vertex, idx)

    return {
        "weight_dim": graph.weight_dim,
        "nodes": [{"id": int(vertex)} for vertex in node_list],
        "links": [
            {
                "source": node_map[edge.vertex1],
                "target": node_map[edge.vertex2],
                "key": int(edge.id),
                "weight": list(edge.weight),
            }
            for edge in graph.edges
        ],
    }


def node_link_to_graph(data: Dict[str, Any]) -> WeightedGraph:
    """
    Reconstructs a WeightedGraph from its node-link dict representation.

    Links are ordered by their "key" when present so that edge ids survive a
    round trip; links without a key keep their list position.

    Args:
        data: A dict shaped like the output of :func:`graph_to_node_link`.

    Returns:
        A WeightedGraph reconstructed from the provided data.

    Raises:
        ConstructionError: If the data is malformed or references unknown nodes.
    """
    try:
        vertices = [VertexID(int(node_obj["id"])) for node_obj in data.get("nodes", [])]
        links = list(data.get("links", []))
        ordered = sorted(
            enumerate(links), key=lambda item: (item[1].get("key", item[0]), item[0])
        )
        blueprints = []
        for _, link in ordered:
            blueprints.append(
                EdgeBlueprint(
                    _node_at(vertices, link["source"]),
                    _node_at(vertices, link["target"]),
                    link.get("weight", ()),
                )
            )
    except (AttributeError, KeyError, IndexError, TypeError, ValueError) as exc:
        raise ConstructionError(f"Malformed node-link data: {exc}") from exc

    return WeightedGraph(vertices, blueprints, weight_dim=data.get("weight_dim"))


def edgelist_to_graph(
    lines: Iterable[str],
    separator: Optional[str] = None,
    vertices: Optional[Iterable[int]] = None,
) -> WeightedGraph:
    """
    Builds a WeightedGraph from an edge list.

    Each non-blank line holds ``v1 v2 w1 [w2 ...]``: two integer endpoints
    followed by the weight components. Lines starting with '#' are ignored.

    Args:
        lines: An iterable of strings, each representing one edge.
        separator: Token separator; None splits on any whitespace.
        vertices: Vertex ids in the desired order. If None, vertices are taken
            in order of first appearance in the edge list.

    Returns:
        The newly created WeightedGraph.

    Raises:
        ConstructionError: If a line cannot be parsed.
    """
    seen: Dict[int, None] = {}
    edge_tuples = []
    for line in lines:
        line = line.rstrip("\r\n")
        if not line.strip() or line.lstrip().startswith("#"):
            continue
        tokens = line.split(separator)
        if len(tokens) < 2:
            raise ConstructionError(f"Line '{line}' needs at least two vertices")
        try:
            v1, v2 = int(tokens[0]), int(tokens[1])
            weight = tuple(_parse_number(token) for token in tokens[2:])
        except ValueError as exc:
            raise ConstructionError(f"Line '{line}' is not a valid edge: {exc}") from exc
        seen.setdefault(v1)
        seen.setdefault(v2)
        edge_tuples.append((v1, v2, weight))

    vertex_list = list(seen) if vertices is None else list(vertices)
    return WeightedGraph.from_tuples(vertex_list, edge_tuples)


def load_graph_yaml(yaml_str: str) -> WeightedGraph:
    """
    Builds a WeightedGraph from a YAML document.

    Expected document:
        vertices: [1, 2, 3]
        weight_dim: 1            # optional
        edges:
          - [1, 2, 4]            # v1, v2, scalar weight
          - [2, 3, [5]]          # v1, v2, weight vector
          - {v1: 1, v2: 3, weight: 10}

    Args:
        yaml_str: The YAML text.

    Returns:
        The constructed WeightedGraph.

    Raises:
        ConstructionError: If the document is malformed.
    """
    try:
        data = yaml.safe_load(yaml_str)
    except yaml.YAMLError as exc:
        raise ConstructionError(f"Invalid YAML: {exc}") from exc

    if not isinstance(data, dict):
        raise ConstructionError("Graph document must be a mapping")
    unknown = set(data) - {"vertices", "edges", "weight_dim"}
    if unknown:
        raise ConstructionError(f"Unknown graph keys: {sorted(unknown)}")
    if not isinstance(data.get("vertices"), list):
        raise ConstructionError("Graph document needs a 'vertices' list")
    edges = data.get("edges") or []
    if not isinstance(edges, list):
        raise ConstructionError("Graph document 'edges' must be a list")

    try:
        vertex_list: List[int] = [_vertex_entry(v) for v in data["vertices"]]
        edge_tuples = [_edge_entry(entry) for entry in edges]
    except (KeyError, TypeError, ValueError) as exc:
        raise ConstructionError(f"Malformed graph document: {exc}") from exc

    return WeightedGraph.from_tuples(
        vertex_list, edge_tuples, weight_dim=data.get("weight_dim")
    )


def _vertex_entry(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"vertex id {value!r} is not an integer")
    return value


def _edge_entry(entry: Any) -> tuple:
    """Normalize one YAML edge entry into a (v1, v2, weight) tuple."""
    if isinstance(entry, dict):
        return (
            _vertex_entry(entry["v1"]),
            _vertex_entry(entry["v2"]),
            entry.get("weight", ()),
        )
    if isinstance(entry, (list, tuple)) and len(entry) == 3:
        return _vertex_entry(entry[0]), _vertex_entry(entry[1]), entry[2]
    raise ValueError(f"edge entry {entry!r} must be [v1, v2, weight] or a mapping")


def _parse_number(token: str) -> Cost:
    try:
        return int(token)
    except ValueError:
        return float(token)


def _node_at(vertices: List[VertexID], index: Any) -> VertexID:
    """Resolve a link endpoint, an index into the node list."""
    if isinstance(index, bool) or not isinstance(index, int):
        raise TypeError(f"link endpoint {index!r} is not a node index")
    if not 0 <= index < len(vertices):
        raise IndexError(f"link endpoint {index} is outside the node list")
    return vertices[index]
