"""Command Line Interface for the street routing system.

This module provides a CLI for querying the bundled street network. It supports
instant route computation and step-by-step replay of either search algorithm.

The CLI supports the following commands:
    - nodes: List every intersection
    - route: Compute a route instantly
    - steps: Print every snapshot of a search, optionally paced in real time

Example Usage:
    python -m streetroute cli nodes
    python -m streetroute cli route C16_K24 C20_K29 --metric time --mode pedestrian
    python -m streetroute cli steps C16_K24 C18_K26 --algorithm bellman-ford --play
"""

import argparse
import asyncio
import logging
import math
from typing import List, Optional

from .config import AppConfig, NetworkConfig, PlaybackConfig
from .core.enums import AlgorithmType, CostMetric, TravelMode
from .core.exceptions import ConfigurationError, InvalidInputError
from .core.graph import Graph
from .core.graph_paths import RouteSession, compute_path
from .core.graph_paths.models import AlgorithmStep, PathResult
from .data import build_street_graph

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID_INPUT = 1
EXIT_NO_ROUTE = 2

ALGORITHM_CHOICES = {
    "dijkstra": AlgorithmType.DIJKSTRA,
    "bellman-ford": AlgorithmType.BELLMAN_FORD,
}
UNITS = {CostMetric.DISTANCE: "m", CostMetric.TIME: "min"}


def configure_logging(config: AppConfig) -> None:
    """Configure root logging for command line use."""
    logging.basicConfig(
        level=config.logging_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def format_result(graph: Graph, result: PathResult, metric: CostMetric) -> str:
    """Render a path result for the terminal."""
    if not result.found:
        return "No route found."
    names = " -> ".join(graph.get_node(node_id).name for node_id in result.path)
    return (
        f"Route: {' -> '.join(result.path)}\n"
        f"       {names}\n"
        f"Total: {result.total_weight:.2f} {UNITS[metric]} | "
        f"visited {result.visited_count} | {result.execution_time:.2f}ms"
    )


def format_step(step: AlgorithmStep) -> str:
    """One line per snapshot."""
    return f"[{step.step_index:3d}] {step.log_message}"


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser."""
    parser = argparse.ArgumentParser(description="Street network shortest paths")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    parser.add_argument(
        "--walking-speed", type=float, default=5.0, help="Walking speed in km/h (default: 5)"
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    subparsers.add_parser("nodes", help="List all intersections")

    for name, help_text in (
        ("route", "Compute a route instantly"),
        ("steps", "Print every step of a search"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("start", help="Start intersection id, e.g. C16_K24")
        sub.add_argument("end", help="End intersection id")
        sub.add_argument("--algorithm", choices=sorted(ALGORITHM_CHOICES), default="dijkstra")
        sub.add_argument("--metric", choices=[m.value for m in CostMetric], default="distance")
        sub.add_argument("--mode", choices=[m.value for m in TravelMode], default="vehicle")

    steps = subparsers.choices["steps"]
    steps.add_argument("--play", action="store_true", help="Advance automatically in real time")
    steps.add_argument("--interval", type=float, default=0.5, help="Seconds per step with --play")

    return parser


async def run_steps(session: RouteSession, args: argparse.Namespace) -> Optional[AlgorithmStep]:
    """Print each snapshot of a search; returns the last one."""
    first = session.start(
        args.start.upper(),
        args.end.upper(),
        CostMetric(args.metric),
        TravelMode(args.mode),
        ALGORITHM_CHOICES[args.algorithm],
    )
    print(format_step(first))

    if args.play:
        session.play(on_step=lambda step: print(format_step(step)))
        await session.wait()
    else:
        while (step := session.advance()) is not None:
            print(format_step(step))
    return session.current


async def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI application.

    Returns:
        Process exit code: 0 on success, 1 on invalid input, 2 when no route exists
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = AppConfig(
            log_level=args.log_level,
            network=NetworkConfig(walking_speed_kmh=args.walking_speed),
            playback=PlaybackConfig(interval=getattr(args, "interval", 0.5)),
        )
    except ConfigurationError as e:
        print(f"Configuration error: {e}")
        return EXIT_INVALID_INPUT
    configure_logging(config)

    if not args.command:
        parser.print_help()
        return EXIT_OK

    graph = build_street_graph(config.network)

    if args.command == "nodes":
        for node_id, node in graph.nodes.items():
            print(f"{node_id:10s} {node.name}")
        return EXIT_OK

    metric = CostMetric(args.metric)
    try:
        if args.command == "route":
            result = compute_path(
                graph,
                args.start.upper(),
                args.end.upper(),
                metric,
                TravelMode(args.mode),
                ALGORITHM_CHOICES[args.algorithm],
            )
        else:
            session = RouteSession(graph, config.playback)
            last = await run_steps(session, args)
            result = last.path_result if last is not None and last.finished else None
    except InvalidInputError as e:
        print(f"Invalid input: {e}")
        return EXIT_INVALID_INPUT

    if result is None:
        return EXIT_OK
    print(format_result(graph, result, metric))
    return EXIT_OK if not math.isinf(result.total_weight) else EXIT_NO_ROUTE
