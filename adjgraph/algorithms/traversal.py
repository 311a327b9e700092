"""Visitor-driven graph traversals.

Each traversal visits every vertex reachable from a source exactly once and
calls the visitor at the moment of the visit. The three strategies differ
only in the order of those calls:

- ``depth_first_recursive`` marks a vertex when it is visited and descends
  into neighbours in adjacency order.
- ``depth_first`` marks a vertex when it is discovered and keeps discovered
  vertices on a LIFO stack, so neighbours come out in reverse adjacency order.
- ``breadth_first`` is ``depth_first`` with a FIFO queue, visiting vertices in
  non-decreasing distance from the source.
"""

from collections import deque
from collections.abc import Callable

import structlog

from adjgraph.graph.model import Graph

logger = structlog.get_logger(__name__)

Visitor = Callable[[int], None]
Traversal = Callable[[Graph, int, Visitor], None]


def depth_first_recursive(graph: Graph, source: int, visit: Visitor) -> None:
    """Depth-first traversal using recursion.

    Recursion depth grows with the longest chain explored, so very deep
    graphs can exceed the interpreter's recursion limit; ``depth_first``
    has no such limit.

    Args:
        graph: Graph to traverse
        source: Starting vertex
        visit: Called once per reachable vertex

    Raises:
        InvalidVertexError: If ``source`` is out of range
    """
    graph.check_vertex(source)
    visited = [False] * len(graph)

    def visit_vertex(u: int) -> None:
        visited[u] = True
        visit(u)
        for v in graph[u]:
            if not visited[v]:
                visit_vertex(v)

    visit_vertex(source)
    logger.debug(
        "traversal_complete",
        strategy="dfs-rec",
        source=source,
        visited=sum(visited),
    )


def depth_first(graph: Graph, source: int, visit: Visitor) -> None:
    """Depth-first traversal using an explicit stack.

    Vertices are marked when pushed rather than when visited.

    Args:
        graph: Graph to traverse
        source: Starting vertex
        visit: Called once per reachable vertex

    Raises:
        InvalidVertexError: If ``source`` is out of range
    """
    graph.check_vertex(source)
    found = [False] * len(graph)
    found[source] = True
    to_visit = [source]

    while to_visit:
        u = to_visit.pop()
        visit(u)
        for v in graph[u]:
            if not found[v]:
                found[v] = True
                to_visit.append(v)

    logger.debug("traversal_complete", strategy="dfs", source=source, visited=sum(found))


def breadth_first(graph: Graph, source: int, visit: Visitor) -> None:
    """Breadth-first traversal using a FIFO queue.

    Args:
        graph: Graph to traverse
        source: Starting vertex
        visit: Called once per reachable vertex

    Raises:
        InvalidVertexError: If ``source`` is out of range
    """
    graph.check_vertex(source)
    found = [False] * len(graph)
    found[source] = True
    to_visit = deque([source])

    while to_visit:
        u = to_visit.popleft()
        visit(u)
        for v in graph[u]:
            if not found[v]:
                found[v] = True
                to_visit.append(v)

    logger.debug("traversal_complete", strategy="bfs", source=source, visited=sum(found))


STRATEGIES: dict[str, Traversal] = {
    "dfs-rec": depth_first_recursive,
    "dfs": depth_first,
    "bfs": breadth_first,
}


def visit_order(graph: Graph, source: int, strategy: str = "bfs") -> list[int]:
    """Collect the visit order of a traversal strategy into a list.

    Args:
        graph: Graph to traverse
        source: Starting vertex
        strategy: One of ``"dfs-rec"``, ``"dfs"`` or ``"bfs"``

    Returns:
        Vertices in the order the visitor was called

    Raises:
        ValueError: If the strategy name is unknown
    """
    try:
        traversal = STRATEGIES[strategy]
    except KeyError:
        msg = f"Unknown traversal strategy: {strategy}. Use one of {', '.join(STRATEGIES)}."
        raise ValueError(msg) from None

    order: list[int] = []
    traversal(graph, source, order.append)
    return order
