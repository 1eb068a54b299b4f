import json
from pathlib import Path

import pytest

from wgraph import cli

GRAPH_YAML = """
vertices: [1, 3, 2, 4]
edges:
  - [1, 2, 5]
  - [1, 3, 10]
  - [2, 4, 999]
  - [3, 4, 1]
"""


@pytest.fixture
def graph_file(tmp_path: Path) -> Path:
    path = tmp_path / "graph.yaml"
    path.write_text(GRAPH_YAML)
    return path


def test_no_args_prints_help(capsys):
    with pytest.raises(SystemExit) as exc_info:
        cli.main([])
    assert exc_info.value.code == 0
    assert "usage: wgraph" in capsys.readouterr().out


def test_inspect(graph_file, capsys):
    cli.main(["inspect", str(graph_file)])
    out = capsys.readouterr().out
    assert "Vertices: 4" in out
    assert "Edges: 4" in out
    assert "Weight dimension: 1" in out
    assert "999" in out


def test_inspect_reports_isolated_vertices(tmp_path, capsys):
    path = tmp_path / "g.yaml"
    path.write_text("vertices: [1, 2, 5]\nedges:\n  - [1, 2, 1]\n")
    cli.main(["inspect", str(path)])
    assert "Isolated vertices: 5" in capsys.readouterr().out


def test_shortest_path(graph_file, capsys):
    cli.main(["shortest-path", str(graph_file), "1", "4"])
    out = capsys.readouterr().out
    assert "Path: 1 -> 3 -> 4" in out
    assert "Total weight: 11" in out


def test_shortest_path_json(graph_file, capsys):
    cli.main(["shortest-path", str(graph_file), "1", "4", "--json"])
    data = json.loads(capsys.readouterr().out)
    assert data == {"vertices": [1, 3, 4], "edges": [1, 3], "total_weight": [11]}


def test_shortest_path_same_vertex_json(graph_file, capsys):
    cli.main(["shortest-path", str(graph_file), "1", "1", "--json"])
    data = json.loads(capsys.readouterr().out)
    assert data == {"vertices": [1], "edges": [], "total_weight": None}


def test_all_paths(graph_file, capsys):
    cli.main(["all-paths", str(graph_file), "1", "4"])
    out = capsys.readouterr().out
    assert "Total: 2 paths" in out
    # sorted by total weight
    assert out.index("1 -> 3 -> 4") < out.index("1 -> 2 -> 4")


def test_all_paths_json_with_limit(graph_file, capsys):
    cli.main(["all-paths", str(graph_file), "1", "4", "--json", "--max-paths", "1"])
    data = json.loads(capsys.readouterr().out)
    assert len(data) == 1


def test_edgelist_file(tmp_path, capsys):
    path = tmp_path / "g.edges"
    path.write_text("1 2 4\n2 3 5\n")
    cli.main(["shortest-path", str(path), "1", "3", "--json"])
    assert json.loads(capsys.readouterr().out)["total_weight"] == [9]


def test_missing_file(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["inspect", str(tmp_path / "missing.yaml")])
    assert exc_info.value.code == 1
    assert "Graph file not found" in capsys.readouterr().err


def test_unknown_vertex_is_reported(graph_file, capsys):
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["shortest-path", str(graph_file), "1", "42"])
    assert exc_info.value.code == 1
    assert "VertexNotFoundError: Vertex 42 not found" in capsys.readouterr().err


def test_no_path_is_reported(tmp_path, capsys):
    path = tmp_path / "g.yaml"
    path.write_text("vertices: [1, 2, 3]\nedges:\n  - [1, 2, 1]\n")
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["shortest-path", str(path), "1", "3"])
    assert exc_info.value.code == 1
    assert "NoPathError" in capsys.readouterr().err


def test_verbose_enables_debug(graph_file, capsys):
    cli.main(["--verbose", "shortest-path", str(graph_file), "1", "4"])
    assert "Dijkstra search from 1 to 4" in capsys.readouterr().err


def test_non_integer_weight_dim_is_reported(tmp_path, capsys):
    path = tmp_path / "g.yaml"
    path.write_text("vertices: [1, 2]\nweight_dim: abc\nedges:\n  - [1, 2, 5]\n")
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["inspect", str(path)])
    assert exc_info.value.code == 1
    assert "ConstructionError: Weight dimension must be an integer" in capsys.readouterr().err
