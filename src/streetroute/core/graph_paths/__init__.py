"""Shortest path engine: instant searches and step-by-step sequences."""

import logging
from typing import Optional

from ..enums import AlgorithmType, CostMetric, TravelMode
from ..graph import Graph
from .algorithms import BellmanFordSequencer, DijkstraSequencer
from .base import StepSequencer, validate_endpoints
from .history import StepHistory
from .models import AlgorithmStep, PathResult, PathValidationError, PerformanceMetrics
from .playback import AutoPlayer
from .session import RouteSession, create_sequencer
from .utils import MemoryManager, PriorityQueue, reconstruct_path, timer

logger = logging.getLogger(__name__)

__all__ = [
    "PathFinding",
    "compute_path",
    "start_step_sequence",
    "create_sequencer",
    "StepSequencer",
    "DijkstraSequencer",
    "BellmanFordSequencer",
    "StepHistory",
    "AutoPlayer",
    "RouteSession",
    "AlgorithmStep",
    "PathResult",
    "PathValidationError",
    "PerformanceMetrics",
    "PriorityQueue",
    "reconstruct_path",
    "validate_endpoints",
]


class PathFinding:
    """Static interface for path finding operations."""

    @staticmethod
    def compute_path(
        graph: Graph,
        start_node: str,
        end_node: str,
        metric: CostMetric = CostMetric.DISTANCE,
        mode: TravelMode = TravelMode.VEHICLE,
        algorithm: AlgorithmType = AlgorithmType.DIJKSTRA,
        validate: bool = False,
        max_memory_mb: Optional[float] = None,
    ) -> PathResult:
        """
        Run a search to completion.

        An unreachable destination yields an empty path with infinite total weight.

        Args:
            validate: Check the found path against the graph before returning it
            max_memory_mb: Optional memory ceiling for the search

        Raises:
            InvalidInputError: If the endpoints are invalid
            PathValidationError: If validate is set and the path is inconsistent
        """
        sequencer = create_sequencer(graph, start_node, end_node, metric, mode, algorithm)
        memory = MemoryManager(max_memory_mb)
        with timer(f"{algorithm.value}_path") as metrics:
            for _ in sequencer:
                memory.check_memory()
            memory.check_memory(force=True)

        result = sequencer.result
        metrics.path_length = len(result)
        metrics.nodes_explored = result.visited_count
        metrics.max_memory_used = memory.peak_memory
        logger.debug(f"Search metrics: {metrics.to_dict()}")

        if validate:
            result.validate(graph, metric, mode, start=start_node, end=end_node)
        return result

    @staticmethod
    def start_step_sequence(
        graph: Graph,
        start_node: str,
        end_node: str,
        metric: CostMetric = CostMetric.DISTANCE,
        mode: TravelMode = TravelMode.VEHICLE,
        algorithm: AlgorithmType = AlgorithmType.DIJKSTRA,
    ) -> StepHistory:
        """
        Create a navigator over a fresh, not yet advanced, sequencer.

        Raises:
            InvalidInputError: If the endpoints are invalid
        """
        return StepHistory(create_sequencer(graph, start_node, end_node, metric, mode, algorithm))


compute_path = PathFinding.compute_path
start_step_sequence = PathFinding.start_step_sequence
