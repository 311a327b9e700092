"""Shared fixtures: small graphs used across the test suite."""

import pytest

from adjgraph.graph.model import Graph


@pytest.fixture
def star_graph() -> Graph:
    """Undirected graph: vertex 0 joined to 1 and 2."""
    return Graph([[1, 2], [0], [0]])


@pytest.fixture
def diamond_dag() -> Graph:
    """Directed acyclic graph 0 -> {1, 2} -> 3."""
    return Graph([[1, 2], [3], [3], []])


@pytest.fixture
def undirected_graph() -> Graph:
    """Undirected graph matching data/undirected.csv; vertex 7 is isolated."""
    return Graph(
        [
            [1, 2],
            [0, 3, 4],
            [0, 4],
            [1, 5],
            [1, 2, 5],
            [3, 4, 6],
            [5],
            [],
        ],
    )


@pytest.fixture
def directed_dag() -> Graph:
    """Directed acyclic graph matching data/directed.csv."""
    return Graph([[1, 2], [3], [3, 4], [5], [5, 6], [7], [7], []])


@pytest.fixture
def two_components() -> Graph:
    """Directed graph with components {0, 1} and {2, 3, 4}."""
    return Graph([[1], [], [3, 4], [], []])
