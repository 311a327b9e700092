"""Graph algorithms over immutable adjacency-list graphs.

Each submodule is independent of the others and depends only on
adjgraph.graph.model:

- traversal: visitor-driven DFS (recursive and stack) and BFS
- distance: single-source hop counts
- search: reachability between two vertices
- topological: component enter/exit traces and topological sorting
"""

from adjgraph.algorithms import distance, search, topological, traversal
from adjgraph.algorithms.distance import UNREACHED
from adjgraph.algorithms.topological import CycleDetectedError, TraceEvent

__all__ = [
    "UNREACHED",
    "CycleDetectedError",
    "TraceEvent",
    "distance",
    "search",
    "topological",
    "traversal",
]
