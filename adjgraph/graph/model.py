"""Immutable adjacency-list graph and its connectivity predicates.

This module provides the Graph class, which stores one sorted adjacency list
per vertex, along with the walk/path/cycle predicates built on top of the
binary-search connectivity query.
"""

from collections.abc import Iterable, Iterator, Sequence

import structlog

logger = structlog.get_logger(__name__)


class GraphError(Exception):
    """Base class for all errors raised by the graph library."""

    def __init__(self, message: str):
        """Initialize the exception with a descriptive message.

        Args:
            message: Description of the error
        """
        super().__init__(message)
        self.message = message


class InvalidVertexError(GraphError, IndexError):
    """Exception raised when a vertex index falls outside ``[0, n)``.

    This is kept distinct from the ``False`` and ``UNREACHED`` results that
    algorithms return for ordinary "no such edge" or "not reachable" answers.
    """

    def __init__(self, vertex: object, vertex_count: int):
        """Initialize the exception for an offending vertex.

        Args:
            vertex: The rejected vertex value
            vertex_count: Number of vertices in the graph
        """
        super().__init__(f"Invalid vertex {vertex!r}: expected an int in [0, {vertex_count})")
        self.vertex = vertex
        self.vertex_count = vertex_count


class GraphStructureError(GraphError, ValueError):
    """Exception raised when adjacency data is malformed.

    Raised for unsorted adjacency lists, out-of-range neighbour entries and
    unparsable input lines.
    """

    def __init__(self, message: str, line: int | None = None):
        """Initialize the exception.

        Args:
            message: Description of the structural problem
            line: 1-based input line number, when raised while loading
        """
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)
        self.line = line


class Graph:
    """Finite graph stored as sorted per-vertex adjacency lists.

    Vertices are the dense indices ``0..n-1``. Adjacency list ``i`` holds the
    vertices reachable from ``i`` by one edge, sorted ascending. A graph is
    directed in general; an undirected graph is one whose lists happen to be
    symmetric.

    Graphs are immutable once built: the constructor copies its input into
    tuples and nothing in the library mutates them afterwards.

    Example:
        >>> g = Graph([[1, 2], [0], [0]])
        >>> g.is_connected(0, 1)
        True
        >>> g.is_connected(1, 2)
        False
    """

    __slots__ = ("_adjacency",)

    def __init__(self, adjacency: Iterable[Iterable[int]] = ()):
        """Build a graph from already-sorted adjacency lists.

        Args:
            adjacency: One iterable of neighbour indices per vertex

        Raises:
            GraphStructureError: If a list is not sorted ascending or holds
                an entry outside ``[0, n)``
        """
        lists = tuple(tuple(neighbors) for neighbors in adjacency)
        vertex_count = len(lists)

        for vertex, neighbors in enumerate(lists):
            for position, neighbor in enumerate(neighbors):
                if isinstance(neighbor, bool) or not isinstance(neighbor, int):
                    msg = f"vertex {vertex} has non-integer neighbour {neighbor!r}"
                    raise GraphStructureError(msg)
                if not 0 <= neighbor < vertex_count:
                    msg = (
                        f"vertex {vertex} has neighbour {neighbor} "
                        f"outside [0, {vertex_count})"
                    )
                    raise GraphStructureError(msg)
                if position > 0 and neighbors[position - 1] > neighbor:
                    msg = f"adjacency list of vertex {vertex} is not sorted: {list(neighbors)}"
                    raise GraphStructureError(msg)

        self._adjacency = lists

    @classmethod
    def from_unsorted(cls, adjacency: Iterable[Iterable[int]]) -> "Graph":
        """Build a graph after sorting each adjacency list.

        Args:
            adjacency: One iterable of neighbour indices per vertex, in any order

        Returns:
            A new Graph with every list sorted ascending
        """
        return cls(sorted(neighbors) for neighbors in adjacency)

    def __len__(self) -> int:
        return len(self._adjacency)

    def __getitem__(self, vertex: int) -> tuple[int, ...]:
        return self.neighbors(vertex)

    def __iter__(self) -> Iterator[tuple[int, ...]]:
        return iter(self._adjacency)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return self._adjacency == other._adjacency

    def __hash__(self) -> int:
        return hash(self._adjacency)

    def __repr__(self) -> str:
        return f"Graph({[list(neighbors) for neighbors in self._adjacency]!r})"

    @property
    def vertex_count(self) -> int:
        """Number of vertices in the graph."""
        return len(self._adjacency)

    @property
    def edge_count(self) -> int:
        """Number of adjacency entries (directed edges) in the graph."""
        return sum(len(neighbors) for neighbors in self._adjacency)

    def vertices(self) -> range:
        """Return the vertex indices ``0..n-1``."""
        return range(len(self._adjacency))

    def check_vertex(self, vertex: object) -> int:
        """Validate a vertex index against this graph.

        Args:
            vertex: Candidate vertex index

        Returns:
            The vertex, unchanged

        Raises:
            InvalidVertexError: If the value is not an int in ``[0, n)``
        """
        if (
            isinstance(vertex, bool)
            or not isinstance(vertex, int)
            or not 0 <= vertex < len(self._adjacency)
        ):
            logger.warning(
                "invalid_vertex_rejected",
                vertex=repr(vertex),
                vertex_count=len(self._adjacency),
            )
            raise InvalidVertexError(vertex, len(self._adjacency))
        return vertex

    def neighbors(self, vertex: int) -> tuple[int, ...]:
        """Return the sorted adjacency list of a vertex.

        Raises:
            InvalidVertexError: If ``vertex`` is out of range
        """
        return self._adjacency[self.check_vertex(vertex)]

    def is_connected(self, i: int, j: int) -> bool:
        """Check whether the edge ``i -> j`` exists.

        The adjacency list of ``i`` is sorted, so this is a binary search
        over it and runs in O(log degree).

        Args:
            i: Edge source
            j: Edge target

        Returns:
            True if ``j`` appears in the adjacency list of ``i``

        Raises:
            InvalidVertexError: If ``i`` or ``j`` is out of range
        """
        neighbors = self.neighbors(i)
        self.check_vertex(j)

        low, high = 0, len(neighbors) - 1
        while low <= high:
            middle = low + (high - low) // 2
            candidate = neighbors[middle]
            if candidate < j:
                low = middle + 1
            elif j < candidate:
                high = middle - 1
            else:
                return True
        return False

    def is_walk(self, sequence: Sequence[int]) -> bool:
        """Check whether consecutive vertices of ``sequence`` are all joined by edges.

        Sequences of length 0 or 1 are trivially walks.
        """
        for vertex in sequence:
            self.check_vertex(vertex)
        return all(
            self.is_connected(sequence[k], sequence[k + 1]) for k in range(len(sequence) - 1)
        )

    def is_path(self, sequence: Sequence[int]) -> bool:
        """Check whether ``sequence`` is a walk that never repeats a vertex."""
        return self.is_walk(sequence) and len(set(sequence)) == len(sequence)

    def is_cycle(self, sequence: Sequence[int]) -> bool:
        """Check whether ``sequence`` is a closed walk.

        Sequences of length 0 or 1 are trivially cycles.
        """
        if not self.is_walk(sequence):
            return False
        return len(sequence) <= 1 or sequence[0] == sequence[-1]


def is_connected(graph: Graph, i: int, j: int) -> bool:
    """Check whether the edge ``i -> j`` exists in ``graph``."""
    return graph.is_connected(i, j)


def is_walk(graph: Graph, sequence: Sequence[int]) -> bool:
    """Check whether ``sequence`` is a walk in ``graph``."""
    return graph.is_walk(sequence)


def is_path(graph: Graph, sequence: Sequence[int]) -> bool:
    """Check whether ``sequence`` is a path in ``graph``."""
    return graph.is_path(sequence)


def is_cycle(graph: Graph, sequence: Sequence[int]) -> bool:
    """Check whether ``sequence`` is a cycle in ``graph``."""
    return graph.is_cycle(sequence)
