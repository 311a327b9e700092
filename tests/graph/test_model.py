"""Unit tests for the Graph model.

Tests cover:
- Construction, immutability and structural validation
- Binary-search connectivity queries, including every search branch
- Walk, path and cycle predicates
- Invalid vertex handling
"""

import pytest

from adjgraph.graph.model import (
    Graph,
    GraphError,
    GraphStructureError,
    InvalidVertexError,
    is_connected,
    is_cycle,
    is_path,
    is_walk,
)


class TestGraphConstruction:
    """Test building graphs."""

    def test_empty_graph(self):
        """Test that a graph with zero vertices is valid."""
        graph = Graph()

        assert len(graph) == 0
        assert graph.edge_count == 0
        assert list(graph.vertices()) == []

    def test_adjacency_is_copied(self):
        """Test that later changes to the input lists do not leak into the graph."""
        adjacency = [[1], [0]]
        graph = Graph(adjacency)
        adjacency[0].append(0)

        assert graph[0] == (1,)

    def test_counts(self, undirected_graph):
        """Test vertex and edge counts."""
        assert undirected_graph.vertex_count == 8
        assert undirected_graph.edge_count == 16

    def test_isolated_vertex(self, undirected_graph):
        """Test that a vertex can have an empty adjacency list."""
        assert undirected_graph.neighbors(7) == ()

    def test_unsorted_list_rejected(self):
        """Test that an unsorted adjacency list is rejected."""
        with pytest.raises(GraphStructureError, match="not sorted"):
            Graph([[2, 1], [], []])

    def test_out_of_range_neighbor_rejected(self):
        """Test that a neighbour outside [0, n) is rejected."""
        with pytest.raises(GraphStructureError, match="outside"):
            Graph([[1], [2]])

    def test_non_integer_neighbor_rejected(self):
        """Test that non-integer neighbours are rejected."""
        with pytest.raises(GraphStructureError, match="non-integer"):
            Graph([["1"], []])

    def test_from_unsorted(self):
        """Test that from_unsorted sorts every list."""
        graph = Graph.from_unsorted([[2, 1], [0], [0]])

        assert graph == Graph([[1, 2], [0], [0]])

    def test_equality_and_hash(self, star_graph):
        """Test value equality between graphs."""
        same = Graph([[1, 2], [0], [0]])

        assert star_graph == same
        assert hash(star_graph) == hash(same)
        assert star_graph != Graph([[1], [0], []])

    def test_iteration_yields_adjacency_lists(self, star_graph):
        """Test iterating over a graph."""
        assert list(star_graph) == [(1, 2), (0,), (0,)]

    def test_repr(self, star_graph):
        """Test the debug representation."""
        assert repr(star_graph) == "Graph([[1, 2], [0], [0]])"


class TestIsConnected:
    """Test the binary-search connectivity query."""

    def test_star_graph_scenario(self, star_graph):
        """Test the star graph: 0 reaches 1, but 1 does not reach 2."""
        assert star_graph.is_connected(0, 1)
        assert not star_graph.is_connected(1, 2)

    def test_matches_membership_for_all_pairs(self, undirected_graph):
        """Test that is_connected agrees with list membership everywhere."""
        for i in undirected_graph.vertices():
            for j in undirected_graph.vertices():
                assert undirected_graph.is_connected(i, j) == (j in undirected_graph[i])

    def test_search_branches(self):
        """Test targets below, above, equal to and between the neighbours."""
        graph = Graph([[2, 4, 6], [], [], [], [], [], [], []])

        assert not graph.is_connected(0, 0)  # smaller than every neighbour
        assert not graph.is_connected(0, 7)  # larger than every neighbour
        assert graph.is_connected(0, 4)  # median neighbour
        assert graph.is_connected(0, 2)  # smallest neighbour
        assert graph.is_connected(0, 6)  # largest neighbour
        assert not graph.is_connected(0, 3)  # between two neighbours
        assert not graph.is_connected(0, 5)

    def test_empty_adjacency_list(self, undirected_graph):
        """Test that an isolated vertex is connected to nothing."""
        assert not any(undirected_graph.is_connected(7, j) for j in range(8))

    def test_module_function(self, star_graph):
        """Test the functional form."""
        assert is_connected(star_graph, 0, 2)
        assert not is_connected(star_graph, 2, 1)

    @pytest.mark.parametrize(("i", "j"), [(3, 0), (0, 3), (-1, 0), (0, -1)])
    def test_out_of_range_vertices(self, star_graph, i, j):
        """Test that out-of-range vertices raise instead of returning False."""
        with pytest.raises(InvalidVertexError):
            star_graph.is_connected(i, j)


class TestInvalidVertex:
    """Test vertex validation."""

    def test_error_attributes(self, star_graph):
        """Test that the error reports the vertex and the vertex count."""
        with pytest.raises(InvalidVertexError) as exc_info:
            star_graph.check_vertex(5)

        assert exc_info.value.vertex == 5
        assert exc_info.value.vertex_count == 3
        assert "[0, 3)" in str(exc_info.value)

    def test_error_hierarchy(self):
        """Test that the error is both a GraphError and an IndexError."""
        assert issubclass(InvalidVertexError, GraphError)
        assert issubclass(InvalidVertexError, IndexError)

    @pytest.mark.parametrize("vertex", [True, 1.0, "1", None])
    def test_non_integer_vertex(self, star_graph, vertex):
        """Test that non-int vertex values are rejected."""
        with pytest.raises(InvalidVertexError):
            star_graph.check_vertex(vertex)

    def test_any_vertex_invalid_in_empty_graph(self):
        """Test that an empty graph has no valid vertex."""
        with pytest.raises(InvalidVertexError):
            Graph().neighbors(0)


class TestWalkPathCycle:
    """Test walk, path and cycle predicates."""

    @pytest.mark.parametrize("sequence", [[], [0], [2]])
    def test_short_sequences_are_walks_and_cycles(self, star_graph, sequence):
        """Test that sequences of length 0 or 1 are trivially walks and cycles."""
        assert star_graph.is_walk(sequence)
        assert star_graph.is_cycle(sequence)
        assert star_graph.is_path(sequence)

    def test_walk(self, star_graph):
        """Test walks that revisit vertices."""
        assert star_graph.is_walk([1, 0, 2, 0, 1])
        assert not star_graph.is_walk([1, 2])

    def test_path(self, star_graph):
        """Test that paths must not repeat vertices."""
        assert star_graph.is_path([1, 0, 2])
        assert not star_graph.is_path([1, 0, 1])

    def test_path_implies_walk(self, undirected_graph):
        """Test that every path is also a walk."""
        candidates = [[0, 1, 3, 5, 6], [0, 2, 4, 1], [6, 5, 4, 2, 0], [0, 1, 0], [0, 3]]
        for sequence in candidates:
            if undirected_graph.is_path(sequence):
                assert undirected_graph.is_walk(sequence)

    def test_cycle(self, undirected_graph):
        """Test closed walks."""
        assert undirected_graph.is_cycle([0, 1, 4, 2, 0])
        assert not undirected_graph.is_cycle([0, 1, 4, 2])
        assert not undirected_graph.is_cycle([0, 3, 0])

    def test_directed_edges_respected(self, diamond_dag):
        """Test that a walk must follow edge direction."""
        assert diamond_dag.is_walk([0, 1, 3])
        assert not diamond_dag.is_walk([3, 1, 0])

    def test_invalid_vertex_in_sequence(self, star_graph):
        """Test that sequences holding unknown vertices raise."""
        with pytest.raises(InvalidVertexError):
            star_graph.is_walk([0, 9])

        with pytest.raises(InvalidVertexError):
            star_graph.is_cycle([9])

    def test_module_functions(self, star_graph):
        """Test the functional forms."""
        assert is_walk(star_graph, [0, 1, 0])
        assert not is_path(star_graph, [0, 1, 0])
        assert is_cycle(star_graph, [0, 1, 0])
