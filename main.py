#!/usr/bin/env python3
"""Main Entry Point and CLI Integration.

This module provides the command line interface for adjgraph. It loads
configuration and a graph from an edge-list file, runs one analysis and
prints the result to stdout. Logs go through structlog to stderr.
"""

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

import structlog

from adjgraph.algorithms import distance, search, topological, traversal
from adjgraph.config import AppConfig, load_config
from adjgraph.graph.loader import format_adjacency, format_matrix, load, read_adjacency
from adjgraph.graph.model import Graph, GraphError
from adjgraph.graph.validator import GraphValidator
from adjgraph.log_config import bind_context, clear_context, configure_logging

logger = structlog.get_logger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def resolve_graph_path(args: argparse.Namespace, config: AppConfig) -> Path:
    """Pick the graph file from the command line, falling back to configuration.

    Raises:
        ValueError: If neither the command line nor the configuration names a file
    """
    if args.graph is not None:
        return Path(args.graph)
    if config.graph.path is not None:
        return config.graph.path
    msg = "No graph file given. Pass GRAPH or set graph.path in the configuration."
    raise ValueError(msg)


def cmd_show(graph: Graph, args: argparse.Namespace, config: AppConfig) -> int:
    """Print the adjacency list, and the matrix when requested."""
    print("Adjacency list")
    print(format_adjacency(graph))
    if args.matrix or config.analysis.show_matrix:
        print()
        print("Adjacency matrix")
        print(format_matrix(graph))
    return 0


def cmd_traverse(graph: Graph, args: argparse.Namespace, config: AppConfig) -> int:
    """Print the visit order of the chosen traversal strategy."""
    source = args.source if args.source is not None else config.analysis.source
    strategy = args.strategy or config.analysis.traversal
    order = traversal.visit_order(graph, source, strategy)
    print(f"Visiting by {strategy} from {source}: {' '.join(map(str, order))}")
    return 0


def cmd_distances(graph: Graph, args: argparse.Namespace, config: AppConfig) -> int:
    """Print the hop-count distance table from the source vertex."""
    source = args.source if args.source is not None else config.analysis.source
    table = distance.breadth_first(graph, source)
    print(f"Distances from vertex {source}: {table}")
    return 0


def cmd_reachable(graph: Graph, args: argparse.Namespace, config: AppConfig) -> int:
    """Print whether the target vertex is reachable from the source vertex."""
    source = args.source if args.source is not None else config.analysis.source
    target = args.target if args.target is not None else config.analysis.target
    if target is None:
        msg = "No target vertex given. Pass --target or set analysis.target in the configuration."
        raise ValueError(msg)
    reachable = search.depth_first_reachable(graph, source, target)
    print(f"{source}-{target} path: {str(reachable).lower()}")
    return 0


def cmd_toposort(graph: Graph, args: argparse.Namespace, _config: AppConfig) -> int:
    """Print a topological order, optionally preceded by component traces."""
    if args.trace:
        topological.traverse(graph, lambda events: print(topological.format_trace(events)))
    print(", ".join(map(str, topological.sort(graph))))
    return 0


def cmd_validate(path: Path, args: argparse.Namespace, config: AppConfig) -> int:
    """Validate the raw adjacency lists of a file and print the report."""
    report = GraphValidator().validate(
        read_adjacency(path),
        symmetric=args.symmetric or config.graph.symmetric,
    )
    print(report.summary())
    return 0 if report.is_valid else 1


COMMANDS = {
    "show": cmd_show,
    "traverse": cmd_traverse,
    "distances": cmd_distances,
    "reachable": cmd_reachable,
    "toposort": cmd_toposort,
}


def run(args: argparse.Namespace) -> int:
    """Run one command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    exit_code = 0

    configure_logging(args.log_level or "INFO", json_logs=args.json_logs)

    try:
        config = load_config(args.config)
        # Command-line flags win over the configuration file
        configure_logging(
            args.log_level or config.logging_level,
            json_logs=args.json_logs or config.json_logs,
        )

        path = resolve_graph_path(args, config)
        bind_context(command=args.command, graph=str(path))
        logger.info("command_started")

        if args.command == "validate":
            exit_code = cmd_validate(path, args, config)
        else:
            graph = load(path)
            exit_code = COMMANDS[args.command](graph, args, config)

        logger.info("command_complete", exit_code=exit_code)

    except FileNotFoundError as e:
        logger.exception("file_not_found", error=str(e))
        exit_code = 1

    except topological.CycleDetectedError as e:
        logger.exception("cycle_detected", cycle=e.cycle)
        exit_code = 1

    except GraphError as e:
        logger.exception("graph_error", error=e.message)
        exit_code = 1

    except ValueError as e:
        logger.exception("invalid_input", error=str(e))
        exit_code = 1

    except RecursionError:
        logger.exception("recursion_limit_exceeded", limit=sys.getrecursionlimit())
        exit_code = 1

    finally:
        clear_context()

    return exit_code


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line argument parser."""
    parser = argparse.ArgumentParser(
        description="adjgraph - analyses over sorted adjacency-list graphs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Print a graph as an adjacency list and matrix
  python main.py show data/undirected.csv --matrix

  # Compare traversal orders
  python main.py traverse data/undirected.csv --strategy dfs-rec

  # Distances and reachability over a directed graph
  python main.py distances data/directed.csv --source 1
  python main.py reachable data/directed.csv --source 0 --target 7

  # Topological order with per-component enter/exit traces
  python main.py toposort data/directed.csv --trace
        """,
    )

    parser.add_argument(
        "-c",
        "--config",
        type=str,
        default=None,
        help="Path to configuration YAML file (default: adjgraph.yaml if present)",
    )
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Enable debug output (DEBUG level)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=LOG_LEVELS,
        default=None,
        help="Set logging level (default: from configuration, INFO)",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        help="Render logs as JSON",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    def add_command(name: str, help_text: str) -> argparse.ArgumentParser:
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument(
            "graph",
            nargs="?",
            default=None,
            help="Edge-list file (default: graph.path from configuration)",
        )
        return sub

    show = add_command("show", "Print the graph")
    show.add_argument("--matrix", action="store_true", help="Also print the adjacency matrix")

    traverse = add_command("traverse", "Print the visit order of a traversal")
    traverse.add_argument("-s", "--source", type=int, default=None, help="Source vertex")
    traverse.add_argument(
        "--strategy",
        choices=list(traversal.STRATEGIES),
        default=None,
        help="Traversal strategy (default: from configuration, bfs)",
    )

    distances = add_command("distances", "Print hop-count distances from a vertex")
    distances.add_argument("-s", "--source", type=int, default=None, help="Source vertex")

    reachable = add_command("reachable", "Check whether one vertex reaches another")
    reachable.add_argument("-s", "--source", type=int, default=None, help="Source vertex")
    reachable.add_argument("-t", "--target", type=int, default=None, help="Target vertex")

    toposort = add_command("toposort", "Print a topological order of a DAG")
    toposort.add_argument(
        "--trace",
        action="store_true",
        help="Print the enter/exit trace of each component first",
    )

    validate = add_command("validate", "Validate raw adjacency lists")
    validate.add_argument(
        "--symmetric",
        action="store_true",
        help="Require every edge to have its reverse edge",
    )

    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Returns:
        Parsed arguments namespace
    """
    args = build_parser().parse_args(argv)

    if args.debug:
        args.log_level = "DEBUG"

    return args


def main(argv: Sequence[str] | None = None) -> None:
    """Main entry point: parse arguments, run the command and exit with its code."""
    args = parse_args(argv)
    sys.exit(run(args))


if __name__ == "__main__":
    main()
