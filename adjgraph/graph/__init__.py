"""Graph module for adjacency-list graphs.

This module provides the immutable Graph representation with its
connectivity predicates, edge-list loading and rendering, and validation of
raw adjacency data.
"""

from adjgraph.graph.loader import (
    format_adjacency,
    format_matrix,
    load,
    parse,
    parse_adjacency,
    read_adjacency,
)
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
from adjgraph.graph.validator import GraphValidator, ValidationReport

__all__ = [
    "Graph",
    "GraphError",
    "GraphStructureError",
    "GraphValidator",
    "InvalidVertexError",
    "ValidationReport",
    "format_adjacency",
    "format_matrix",
    "is_connected",
    "is_cycle",
    "is_path",
    "is_walk",
    "load",
    "parse",
    "parse_adjacency",
    "read_adjacency",
]
