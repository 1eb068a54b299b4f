"""Shared fixtures: small graphs used across the test suite."""

from __future__ import annotations

import pytest

from wgraph.graph import WeightedGraph
from wgraph.logging import reset_logging


@pytest.fixture
def two_vertices():
    #     [5]
    #  1◄─────►2
    return WeightedGraph.from_tuples([1, 2], [(1, 2, 5)])


@pytest.fixture
def line3():
    #     [4]      [5]
    #  1◄─────►2◄─────►3
    return WeightedGraph.from_tuples([1, 2, 3], [(1, 2, 4), (2, 3, 5)])


@pytest.fixture
def diamond():
    #       ┌────►2────┐
    #       │          ▼
    #       1          4
    #       │          ▲
    #       └────►3────┘
    # Unit weights, no direct 1-4 edge.
    return WeightedGraph.from_tuples(
        [1, 2, 3, 4], [(1, 2, 1), (1, 3, 1), (2, 4, 1), (3, 4, 1)]
    )


@pytest.fixture
def tempting():
    #       [5]          [999]
    #   ┌────────►2───────────┐
    #   │                     ▼
    #   1                     4
    #   │                     ▲
    #   │   [10]         [1]  │
    #   └────────►3───────────┘
    # Vertex 2 is cheaper to reach, but 1-3-4 is the shortest path.
    return WeightedGraph.from_tuples(
        [1, 3, 2, 4], [(1, 2, 5), (1, 3, 10), (2, 4, 999), (3, 4, 1)]
    )


@pytest.fixture
def parallel():
    # Three parallel 1-2 edges: [7], [7], [3]; then 2-3 [1].
    return WeightedGraph.from_tuples(
        [1, 2, 3], [(1, 2, 7), (1, 2, 7), (1, 2, 3), (2, 3, 1)]
    )


@pytest.fixture
def disconnected():
    #     [2]          [3]
    #  1◄─────►2    3◄─────►4
    return WeightedGraph.from_tuples([1, 2, 3, 4], [(1, 2, 2), (3, 4, 3)])


@pytest.fixture
def complete4():
    # Complete graph on 4 vertices, weight = v1 + v2.
    vertices = [1, 2, 3, 4]
    edges = [(a, b, a + b) for a in vertices for b in vertices if a < b]
    return WeightedGraph.from_tuples(vertices, edges)


@pytest.fixture
def vector_graph():
    # Two-dimensional weights (distance, toll) on a triangle.
    return WeightedGraph.from_tuples(
        [1, 2, 3], [(1, 2, (4, 1)), (2, 3, (5, 0)), (1, 3, (12, 3))]
    )


@pytest.fixture(autouse=True)
def _reset_logging_each_test():
    """Reset logging state before and after each test to avoid cross-test bleed."""
    reset_logging()
    yield
    reset_logging()
