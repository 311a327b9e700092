"""Edge-list loading and text rendering for adjacency-list graphs.

The on-disk format has one line per vertex, in vertex order. Each line holds
the comma-separated indices of that vertex's neighbours; an empty line is an
isolated vertex::

    1,2
    0

    0

Lists are sorted on load, so the file does not need to be.
"""

from collections.abc import Iterable
from pathlib import Path

import structlog

from adjgraph.graph.model import Graph, GraphStructureError

logger = structlog.get_logger(__name__)


def parse_adjacency(lines: Iterable[str]) -> list[list[int]]:
    """Parse adjacency lines into raw neighbour lists, in file order.

    Nothing is sorted or range-checked here; use ``parse`` for a Graph, or
    ``GraphValidator`` to inspect the raw lists.

    Args:
        lines: One text line per vertex

    Returns:
        One list of neighbour indices per line

    Raises:
        GraphStructureError: If a token is not an integer
    """
    adjacency: list[list[int]] = []

    for line_number, raw_line in enumerate(lines, 1):
        line = raw_line.strip()
        if not line:
            adjacency.append([])
            continue

        neighbors = []
        for token in line.split(","):
            try:
                neighbors.append(int(token))
            except ValueError as e:
                msg = f"invalid vertex index {token.strip()!r}"
                raise GraphStructureError(msg, line=line_number) from e
        adjacency.append(neighbors)

    return adjacency


def _build(adjacency: list[list[int]]) -> Graph:
    vertex_count = len(adjacency)
    for vertex, neighbors in enumerate(adjacency):
        for neighbor in neighbors:
            if not 0 <= neighbor < vertex_count:
                msg = f"neighbour {neighbor} outside [0, {vertex_count})"
                raise GraphStructureError(msg, line=vertex + 1)

    return Graph.from_unsorted(adjacency)


def parse(lines: Iterable[str]) -> Graph:
    """Parse adjacency lines into a Graph.

    Args:
        lines: One text line per vertex

    Returns:
        Graph with each adjacency list sorted ascending

    Raises:
        GraphStructureError: If a token is not an integer or refers to a
            vertex that does not exist
    """
    return _build(parse_adjacency(lines))


def read_adjacency(path: str | Path) -> list[list[int]]:
    """Read raw neighbour lists from an edge-list file.

    Raises:
        FileNotFoundError: If the file does not exist
        GraphStructureError: If a token is not an integer
    """
    graph_path = Path(path)

    if not graph_path.exists():
        msg = f"Graph file not found: {graph_path}"
        raise FileNotFoundError(msg)

    with graph_path.open(encoding="utf-8") as f:
        return parse_adjacency(f.read().splitlines())


def load(path: str | Path) -> Graph:
    """Load a graph from an edge-list file.

    Args:
        path: Path to the edge-list file

    Returns:
        Parsed Graph

    Raises:
        FileNotFoundError: If the file does not exist
        GraphStructureError: If the file content is malformed
    """
    try:
        graph = _build(read_adjacency(path))
    except GraphStructureError as e:
        logger.error("graph_parse_error", path=str(path), error=e.message)
        raise

    logger.info(
        "graph_loaded",
        path=str(path),
        vertex_count=graph.vertex_count,
        edge_count=graph.edge_count,
    )
    return graph


def format_adjacency(graph: Graph) -> str:
    """Render a graph as one ``"i: a,b,c"`` line per vertex."""
    return "\n".join(
        f"{vertex}: {','.join(str(neighbor) for neighbor in neighbors)}"
        for vertex, neighbors in enumerate(graph)
    )


def format_matrix(graph: Graph) -> str:
    """Render a graph as an adjacency matrix.

    Each row starts with the vertex index, followed by one cell per vertex:
    ``x`` where the edge exists and a blank otherwise.
    """
    rows = []
    for i in graph.vertices():
        cells = " ".join("x" if graph.is_connected(i, j) else " " for j in graph.vertices())
        rows.append(f"{i} {cells}")
    return "\n".join(rows)
