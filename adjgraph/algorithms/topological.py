"""Depth-first finishing order: component traces and topological sorting.

``traverse`` records when each vertex is entered and exited during a
depth-first search of every component, which is useful for seeing why
``sort`` produces the order it does. ``sort`` reverses the finishing order
to obtain a topological order of a directed acyclic graph.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Literal

import structlog

from adjgraph.graph.model import Graph, GraphError

logger = structlog.get_logger(__name__)


class CycleDetectedError(GraphError):
    """Exception raised when topological sorting meets a directed cycle.

    A cycle means no vertex order can respect every edge direction.
    """

    def __init__(self, cycle: list[int]):
        """Initialize the exception with the offending cycle.

        Args:
            cycle: Vertices along the cycle, first and last entries equal
        """
        super().__init__(f"Cycle detected in graph: {' -> '.join(str(v) for v in cycle)}")
        self.cycle = cycle


@dataclass(frozen=True)
class TraceEvent:
    """Entry into or exit from a vertex during depth-first search."""

    vertex: int
    kind: Literal["in", "out"]

    def __str__(self) -> str:
        return f"{self.vertex}{self.kind}"


TraceSink = Callable[[list[TraceEvent]], None]


def format_trace(events: list[TraceEvent]) -> str:
    """Render a component trace as ``"0in -> 1in -> 1out -> 0out"``."""
    return " -> ".join(str(event) for event in events)


def _log_trace(events: list[TraceEvent]) -> None:
    logger.info("component_trace", root=events[0].vertex, trace=format_trace(events))


def traverse(graph: Graph, sink: TraceSink | None = None) -> None:
    """Trace a depth-first search over every component of the graph.

    Roots are tried in vertex order and skipped once visited. For each
    component the ordered enter/exit events are handed to ``sink`` and a
    fresh trace is started for the next component. Cycles are tolerated:
    a vertex is never entered twice.

    The search keeps an explicit stack of neighbour iterators, so chain
    length is not bounded by the interpreter's recursion limit.

    Args:
        graph: Graph to trace
        sink: Receives one event list per component; defaults to logging
            each trace as a ``component_trace`` event
    """
    emit = sink if sink is not None else _log_trace
    found = [False] * len(graph)
    components = 0

    for root in graph.vertices():
        if found[root]:
            continue

        found[root] = True
        events = [TraceEvent(root, "in")]
        stack = [(root, iter(graph[root]))]

        while stack:
            u, neighbors = stack[-1]
            for v in neighbors:
                if not found[v]:
                    found[v] = True
                    events.append(TraceEvent(v, "in"))
                    stack.append((v, iter(graph[v])))
                    break
            else:
                stack.pop()
                events.append(TraceEvent(u, "out"))

        emit(events)
        components += 1

    logger.debug("topological_traverse_complete", components=components)


def sort(graph: Graph) -> list[int]:
    """Order the vertices of a DAG so every edge points forward.

    Runs a depth-first search from each unvisited vertex in index order,
    collects vertices as they finish, and returns the reversed finishing
    order. The search uses an explicit stack, so deep graphs are fine.

    Args:
        graph: Directed acyclic graph

    Returns:
        Every vertex exactly once, with ``u`` before ``v`` for each edge ``u -> v``

    Raises:
        CycleDetectedError: If the graph contains a directed cycle

    Example:
        >>> sort(Graph([[1, 2], [3], [3], []]))
        [0, 2, 1, 3]
    """
    found = [False] * len(graph)
    on_path = [False] * len(graph)
    finished: list[int] = []

    for root in graph.vertices():
        if found[root]:
            continue

        found[root] = on_path[root] = True
        path = [root]
        stack = [iter(graph[root])]

        while stack:
            for v in stack[-1]:
                if on_path[v]:
                    cycle = [*path[path.index(v):], v]
                    logger.error("cycle_detected_in_graph", cycle=cycle)
                    raise CycleDetectedError(cycle)
                if not found[v]:
                    found[v] = on_path[v] = True
                    path.append(v)
                    stack.append(iter(graph[v]))
                    break
            else:
                stack.pop()
                u = path.pop()
                on_path[u] = False
                finished.append(u)

    finished.reverse()
    logger.debug("topological_sort_complete", vertex_count=len(finished))
    return finished
