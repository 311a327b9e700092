"""Validation of raw adjacency lists with detailed reporting.

This module inspects adjacency data before it becomes a Graph: range and
ordering checks, duplicate and self-loop detection, symmetry checks for
graphs meant to be undirected, and directed cycle detection with path
reporting.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field

import structlog

logger = structlog.get_logger(__name__)


@dataclass
class ValidationReport:
    """Report containing validation results for adjacency data.

    Attributes:
        is_valid: Whether the data passed all validation checks
        errors: List of error messages (critical issues)
        warnings: List of warning messages (potential issues)
        cycles: Detected directed cycles, each as a vertex list closing on its start
        self_loops: Vertices that list themselves as a neighbour
        asymmetric_edges: Edges ``(u, v)`` whose reverse ``(v, u)`` is missing
    """

    is_valid: bool = True
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    cycles: list[list[int]] = field(default_factory=list)
    self_loops: set[int] = field(default_factory=set)
    asymmetric_edges: set[tuple[int, int]] = field(default_factory=set)

    def add_error(self, message: str) -> None:
        """Add an error message and mark validation as failed."""
        self.errors.append(message)
        self.is_valid = False
        logger.error("validation_error", message=message)

    def add_warning(self, message: str) -> None:
        """Add a warning message without failing validation."""
        self.warnings.append(message)
        logger.warning("validation_warning", message=message)

    def summary(self) -> str:
        """Generate a human-readable summary of the validation report."""
        lines = [
            f"Validation Status: {'PASS' if self.is_valid else 'FAIL'}",
            f"Errors: {len(self.errors)}",
            f"Warnings: {len(self.warnings)}",
            f"Cycles: {len(self.cycles)}",
        ]

        if self.errors:
            lines.append("\nErrors:")
            lines.extend(f"  - {error}" for error in self.errors)

        if self.warnings:
            lines.append("\nWarnings:")
            lines.extend(f"  - {warning}" for warning in self.warnings)

        if self.cycles:
            lines.append("\nCycles Detected:")
            for i, cycle in enumerate(self.cycles, 1):
                lines.append(f"  {i}. {' -> '.join(str(v) for v in cycle)}")

        return "\n".join(lines)


class GraphValidator:
    """Validator for raw adjacency lists.

    Out-of-range, unsorted or duplicate entries and (when requested) missing
    reverse edges are errors. Self-loops and directed cycles are warnings:
    they are legal graph structure, but a topological sort will reject them.
    """

    def validate(
        self,
        adjacency: Sequence[Sequence[int]],
        symmetric: bool = False,
    ) -> ValidationReport:
        """Validate adjacency lists and generate a detailed report.

        Args:
            adjacency: One neighbour list per vertex
            symmetric: If True, every edge must have its reverse edge

        Returns:
            ValidationReport containing all validation results
        """
        logger.info("starting_graph_validation", vertex_count=len(adjacency))

        report = ValidationReport()

        in_range = self._check_entries(adjacency, report)

        # Structural checks below index by neighbour, so they need in-range data
        if in_range:
            self._check_self_loops(adjacency, report)

            if symmetric:
                self._check_symmetry(adjacency, report)

            cycles = self._detect_cycles(adjacency)
            if cycles:
                report.cycles = cycles
                for cycle in cycles:
                    report.add_warning(
                        f"Cycle detected: {' -> '.join(str(v) for v in cycle)}",
                    )

        logger.info(
            "graph_validation_complete",
            is_valid=report.is_valid,
            error_count=len(report.errors),
            warning_count=len(report.warnings),
        )

        return report

    def _check_entries(
        self,
        adjacency: Sequence[Sequence[int]],
        report: ValidationReport,
    ) -> bool:
        """Check range, ordering and uniqueness of every adjacency entry.

        Returns:
            True if every entry is an in-range vertex index
        """
        vertex_count = len(adjacency)
        in_range = True

        for vertex, neighbors in enumerate(adjacency):
            out_of_range = [
                v
                for v in neighbors
                if isinstance(v, bool) or not isinstance(v, int) or not 0 <= v < vertex_count
            ]
            if out_of_range:
                in_range = False
                report.add_error(
                    f"Vertex {vertex} lists neighbours outside [0, {vertex_count}): "
                    f"{out_of_range}",
                )
                continue

            if any(neighbors[k] > neighbors[k + 1] for k in range(len(neighbors) - 1)):
                report.add_error(f"Adjacency list of vertex {vertex} is not sorted")

            if len(set(neighbors)) != len(neighbors):
                report.add_error(f"Adjacency list of vertex {vertex} has duplicate entries")

        return in_range

    def _check_self_loops(
        self,
        adjacency: Sequence[Sequence[int]],
        report: ValidationReport,
    ) -> None:
        """Record vertices that list themselves as a neighbour."""
        loops = {vertex for vertex, neighbors in enumerate(adjacency) if vertex in neighbors}
        if loops:
            report.self_loops = loops
            report.add_warning(f"Self-loops on vertices: {', '.join(map(str, sorted(loops)))}")

    def _check_symmetry(
        self,
        adjacency: Sequence[Sequence[int]],
        report: ValidationReport,
    ) -> None:
        """Record edges whose reverse edge is missing."""
        edges = {(u, v) for u, neighbors in enumerate(adjacency) for v in neighbors}
        missing = {(u, v) for u, v in edges if (v, u) not in edges}

        if missing:
            report.asymmetric_edges = missing
            edges_str = ", ".join(f"{u}->{v}" for u, v in sorted(missing))
            report.add_error(f"Edges without a reverse edge: {edges_str}")

    def _detect_cycles(self, adjacency: Sequence[Sequence[int]]) -> list[list[int]]:
        """Detect directed cycles, at most one per DFS tree.

        Uses an explicit stack of neighbour iterators so deep graphs do not
        hit the interpreter's recursion limit. Self-loops are reported
        separately and are skipped here.

        Args:
            adjacency: One neighbour list per vertex, all entries in range

        Returns:
            List of cycles, each a vertex list whose first and last entries match
        """
        visited = [False] * len(adjacency)
        on_path = [False] * len(adjacency)
        cycles = []

        for root in range(len(adjacency)):
            if visited[root]:
                continue

            path = [root]
            visited[root] = on_path[root] = True
            stack = [iter(adjacency[root])]
            found = None

            while stack and found is None:
                u = path[-1]
                for v in stack[-1]:
                    if v == u:
                        continue
                    if on_path[v]:
                        found = [*path[path.index(v):], v]
                        break
                    if not visited[v]:
                        visited[v] = on_path[v] = True
                        path.append(v)
                        stack.append(iter(adjacency[v]))
                        break
                else:
                    # Backtrack
                    on_path[path.pop()] = False
                    stack.pop()

            for v in path:
                on_path[v] = False

            if found is not None:
                cycles.append(found)

        if cycles:
            logger.debug("cycles_found", count=len(cycles), cycles=cycles)

        return cycles
