import pytest

from wgraph.algorithms.spf import dijkstra, shortest_distances
from wgraph.config import DISTANCE_SENTINEL
from wgraph.errors import (
    EmptyGraphError,
    NoPathError,
    VertexNotFoundError,
    WeightDimensionError,
)
from wgraph.graph import WeightedGraph
from wgraph.types import EdgeID, VertexID

V = VertexID


class TestDijkstra:
    def test_single_edge(self, two_vertices):
        """Two vertices joined by one edge of weight 5."""
        path = dijkstra(two_vertices, V(1), V(2))
        assert len(path) == 1
        assert (path[0].vertex1, path[0].vertex2) == (V(1), V(2))
        assert path.total_weight() == (5,)

    def test_line(self, line3):
        """Three vertices in a line: both edges in order, total weight 9."""
        path = dijkstra(line3, V(1), V(3))
        assert path.edge_ids == (EdgeID(0), EdgeID(1))
        assert path.vertices_seq == (V(1), V(2), V(3))
        assert path.total_weight() == (9,)

    def test_cheap_first_hop_is_not_taken(self, tempting):
        """1-3-4 (11) beats 1-2-4 (1004) although 2 is closer to 1."""
        path = dijkstra(tempting, V(1), V(4))
        assert path.vertices_seq == (V(1), V(3), V(4))
        assert path.total_weight() == (11,)

    def test_equal_cost_paths(self, diamond):
        path = dijkstra(diamond, V(1), V(4))
        assert len(path) == 2
        assert path.total_weight() == (2,)

    def test_uses_cheapest_parallel_edge(self, parallel):
        path = dijkstra(parallel, V(1), V(3))
        assert path.edge_ids == (EdgeID(2), EdgeID(3))
        assert path.total_weight() == (4,)

    def test_start_equals_end(self, line3):
        path = dijkstra(line3, V(1), V(1))
        assert len(path) == 0
        assert path.src_vertex == V(1)

    def test_single_vertex_graph(self):
        g = WeightedGraph.from_tuples([7])
        assert len(dijkstra(g, V(7), V(7))) == 0

    def test_start_inside_shortest_path_tree(self, line3):
        path = dijkstra(line3, V(2), V(3))
        assert path.edge_ids == (EdgeID(1),)

    def test_distances_are_rooted_at_first_stored_vertex(self, line3):
        """
        Predecessor links point toward the first stored vertex, so walking back
        from that vertex never reaches a different start vertex.
        """
        with pytest.raises(NoPathError):
            dijkstra(line3, V(3), V(1))

    def test_unreachable_end(self, disconnected):
        with pytest.raises(NoPathError, match="No path from starting vertex 1"):
            dijkstra(disconnected, V(1), V(4))

    def test_empty_graph(self):
        with pytest.raises(EmptyGraphError):
            dijkstra(WeightedGraph([]), V(1), V(2))

    @pytest.mark.parametrize("start,end", [(9, 1), (1, 9)])
    def test_unknown_vertex(self, line3, start, end):
        with pytest.raises(VertexNotFoundError, match="Vertex 9"):
            dijkstra(line3, V(start), V(end))

    def test_requires_scalar_weights(self, vector_graph):
        with pytest.raises(WeightDimensionError):
            dijkstra(vector_graph, V(1), V(3))

    def test_edgeless_graph_of_any_dimension(self):
        g = WeightedGraph.from_tuples([1, 2], weight_dim=3)
        with pytest.raises(NoPathError):
            dijkstra(g, V(1), V(2))

    def test_float_weights(self):
        g = WeightedGraph.from_tuples(
            [1, 2, 3], [(1, 2, 0.5), (2, 3, 0.25), (1, 3, 1.0)]
        )
        path = dijkstra(g, V(1), V(3))
        assert path.total_weight() == (0.75,)


class TestShortestDistances:
    def test_costs_and_predecessors(self, tempting):
        costs, pred = shortest_distances(tempting)
        assert costs == {V(1): 0, V(3): 10, V(2): 5, V(4): 11}
        assert pred == {V(2): V(1), V(3): V(1), V(4): V(3)}

    def test_unreachable_keeps_sentinel(self, disconnected):
        costs, pred = shortest_distances(disconnected)
        assert costs[V(2)] == 2
        assert costs[V(3)] == DISTANCE_SENTINEL
        assert costs[V(4)] == DISTANCE_SENTINEL
        assert V(3) not in pred and V(4) not in pred

    def test_duplicate_vertex_ids(self):
        g = WeightedGraph.from_tuples([1, 2, 1], [(1, 2, 3)])
        costs, pred = shortest_distances(g)
        assert costs == {V(1): 0, V(2): 3}
        assert pred == {V(2): V(1)}

    def test_empty_graph(self):
        with pytest.raises(EmptyGraphError):
            shortest_distances(WeightedGraph([]))

    def test_debug_logging(self, line3, caplog):
        caplog.set_level("DEBUG", logger="wgraph")
        dijkstra(line3, V(1), V(3))
        assert "Dijkstra search from 1 to 3" in caplog.text
