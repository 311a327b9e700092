"""Depth-first reachability search between two vertices."""

import structlog

from adjgraph.graph.model import Graph

logger = structlog.get_logger(__name__)


def depth_first_reachable(graph: Graph, source: int, target: int) -> bool:
    """Check whether ``target`` can be reached from ``source``.

    Marks vertices depth-first from ``source`` and stops as soon as
    ``target`` is marked. A vertex always reaches itself.

    Args:
        graph: Graph to search
        source: Vertex to start from
        target: Vertex to look for

    Returns:
        True if a walk leads from ``source`` to ``target``

    Raises:
        InvalidVertexError: If ``source`` or ``target`` is out of range
    """
    graph.check_vertex(source)
    graph.check_vertex(target)

    found = [False] * len(graph)
    found[source] = True
    to_visit = [source]

    while to_visit and not found[target]:
        u = to_visit.pop()
        for v in graph[u]:
            if not found[v]:
                found[v] = True
                to_visit.append(v)

    logger.debug("reachability_checked", source=source, target=target, reachable=found[target])
    return found[target]
