"""Unit tests for depth-first reachability search."""

import pytest

from adjgraph.algorithms.distance import UNREACHED, breadth_first
from adjgraph.algorithms.search import depth_first_reachable
from adjgraph.graph.model import Graph, InvalidVertexError


class TestDepthFirstReachable:
    """Test reachability between two vertices."""

    def test_forward_and_backward(self, directed_dag):
        """Test that reachability follows edge direction."""
        assert depth_first_reachable(directed_dag, 0, 7)
        assert not depth_first_reachable(directed_dag, 7, 0)

    def test_vertex_reaches_itself(self, undirected_graph):
        """Test that every vertex reaches itself, isolated or not."""
        assert depth_first_reachable(undirected_graph, 7, 7)
        assert depth_first_reachable(undirected_graph, 3, 3)

    def test_sibling_branches(self, directed_dag):
        """Test vertices on parallel branches of a DAG."""
        assert not depth_first_reachable(directed_dag, 1, 4)
        assert depth_first_reachable(directed_dag, 2, 6)

    def test_cyclic_graph(self):
        """Test that cycles do not cause repeated exploration."""
        graph = Graph([[1], [2], [0], []])

        assert depth_first_reachable(graph, 2, 1)
        assert not depth_first_reachable(graph, 0, 3)

    @pytest.mark.parametrize("source", range(8))
    def test_agrees_with_distance(self, undirected_graph, directed_dag, source):
        """Test agreement with the breadth-first distance table."""
        for graph in (undirected_graph, directed_dag):
            table = breadth_first(graph, source)
            for target in graph.vertices():
                expected = table[target] != UNREACHED
                assert depth_first_reachable(graph, source, target) == expected

    def test_long_chain(self):
        """Test that deep graphs do not hit the recursion limit."""
        length = 5000
        graph = Graph([[i + 1] for i in range(length - 1)] + [[]])

        assert depth_first_reachable(graph, 0, length - 1)

    @pytest.mark.parametrize(("source", "target"), [(0, 8), (8, 0), (-1, 0)])
    def test_invalid_vertices(self, directed_dag, source, target):
        """Test that out-of-range endpoints raise instead of returning False."""
        with pytest.raises(InvalidVertexError):
            depth_first_reachable(directed_dag, source, target)
