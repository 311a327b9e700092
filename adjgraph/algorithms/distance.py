"""Single-source hop-count distances by breadth-first layering."""

from collections import deque

import structlog

from adjgraph.graph.model import Graph

logger = structlog.get_logger(__name__)

UNREACHED = -1


def breadth_first(graph: Graph, source: int) -> list[int]:
    """Compute the minimum number of edges from ``source`` to every vertex.

    Each vertex receives its distance the first time breadth-first search
    discovers it, which for an unweighted graph is its shortest hop count.

    Args:
        graph: Graph to measure
        source: Vertex to measure from

    Returns:
        Distance table indexed by vertex, with ``UNREACHED`` for vertices
        that cannot be reached from ``source``

    Raises:
        InvalidVertexError: If ``source`` is out of range

    Example:
        >>> breadth_first(Graph([[1, 2], [0], [0]]), 0)
        [0, 1, 1]
    """
    graph.check_vertex(source)
    distance = [UNREACHED] * len(graph)
    distance[source] = 0
    to_visit = deque([source])

    while to_visit:
        u = to_visit.popleft()
        for v in graph[u]:
            if distance[v] == UNREACHED:
                distance[v] = distance[u] + 1
                to_visit.append(v)

    logger.debug(
        "distances_computed",
        source=source,
        reached=sum(1 for d in distance if d != UNREACHED),
        eccentricity=max(distance),
    )
    return distance
