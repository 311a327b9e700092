"""Walkthrough of the adjgraph library on the bundled sample graphs.

This example loads the undirected and directed sample files and runs each
analysis in turn, with structured logs on stderr and results on stdout.
"""

import sys
from pathlib import Path

# Add the repository root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from adjgraph.algorithms import distance, search, topological, traversal
from adjgraph.graph import Graph, format_adjacency, format_matrix, load
from adjgraph.log_config import bind_context, clear_context, configure_logging, get_logger

DATA_DIR = Path(__file__).parent.parent / "data"


def demonstrate_io(graph: Graph) -> None:
    """Print a graph both as adjacency lists and as a matrix."""
    print("Adjacency list")
    print(format_adjacency(graph))
    print("\nAdjacency matrix")
    print(format_matrix(graph))


def demonstrate_traversals(graph: Graph, source: int = 0) -> None:
    """Print the visit order of every traversal strategy."""
    for strategy in traversal.STRATEGIES:
        order = traversal.visit_order(graph, source, strategy)
        print(f"Visiting by {strategy} from {source}: {' '.join(map(str, order))}")


def demonstrate_distances(graph: Graph) -> None:
    """Print distance tables and a few reachability checks."""
    for source in (0, 1):
        print(f"Distances from vertex {source}: {distance.breadth_first(graph, source)}")

    for source, target in ((0, 7), (1, 2), (7, 0)):
        reachable = search.depth_first_reachable(graph, source, target)
        print(f"{source}-{target} path: {str(reachable).lower()}")


def demonstrate_toposort(graph: Graph) -> None:
    """Print component traces, then a topological order."""
    topological.traverse(graph, lambda events: print(topological.format_trace(events)))
    print(", ".join(map(str, topological.sort(graph))))


def main() -> None:
    """Main demonstration function."""
    configure_logging(level="INFO", json_logs=False)
    logger = get_logger(__name__)

    undirected = load(DATA_DIR / "undirected.csv")
    directed = load(DATA_DIR / "directed.csv")

    bind_context(demo="io")
    demonstrate_io(undirected)

    bind_context(demo="traverse")
    print()
    demonstrate_traversals(undirected)

    bind_context(demo="distances")
    print()
    demonstrate_distances(directed)

    bind_context(demo="toposort")
    print()
    demonstrate_toposort(directed)

    try:
        topological.sort(undirected)
    except topological.CycleDetectedError as e:
        logger.warning("sort_rejected", cycle=e.cycle)

    clear_context()
    logger.info("demo_completed")


if __name__ == "__main__":
    main()
