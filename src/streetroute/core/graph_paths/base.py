"""
Resumable step sequencers.

A sequencer wraps one shortest path algorithm as an explicit state machine: every
call to next() runs the algorithm up to its next observable point and returns an
AlgorithmStep snapshot. The search state (distances, predecessors, frontier, pass
counters) lives on the instance between calls, so a driver can advance the search
whenever it likes. After the finished snapshot the sequencer raises StopIteration.
"""

import logging
import math
import time
from abc import ABC, abstractmethod
from typing import Dict, Iterable, Iterator, List, Optional

from ..enums import AlgorithmType, CostMetric, TravelMode
from ..exceptions import InvalidInputError
from ..graph import Graph
from ..models import Edge
from ..selectors import is_usable, weight_of
from .models import AlgorithmStep, PathResult
from .utils import INFINITY, reconstruct_path

logger = logging.getLogger(__name__)


def validate_endpoints(graph: Graph, start_node: str, end_node: str) -> None:
    """
    Check that a search between start_node and end_node is well formed.

    Raises:
        InvalidInputError: If either node is missing or both are the same node
    """
    if not graph.has_node(start_node):
        raise InvalidInputError(f"Start node '{start_node}' not found")
    if not graph.has_node(end_node):
        raise InvalidInputError(f"End node '{end_node}' not found")
    if start_node == end_node:
        raise InvalidInputError("Start and end node must be different")


def format_cost(cost: float) -> str:
    """Format a tentative cost for log lines."""
    return "inf" if math.isinf(cost) else f"{cost:.2f}"


class StepSequencer(ABC, Iterator[AlgorithmStep]):
    """
    Abstract base class for resumable shortest path searches.

    Subclasses implement _advance(), which runs until the next observable point and
    returns its snapshot through _emit() or _finish().

    Attributes:
        graph: Graph being searched
        start_node: Search origin
        end_node: Search destination
        metric: Cost being minimised
        mode: Travel mode deciding edge usability
        distances: Live tentative cost per node
        previous: Live predecessor per node
    """

    algorithm: AlgorithmType

    def __init__(
        self,
        graph: Graph,
        start_node: str,
        end_node: str,
        metric: CostMetric = CostMetric.DISTANCE,
        mode: TravelMode = TravelMode.VEHICLE,
    ):
        """
        Validate the request and initialise search state.

        Raises:
            InvalidInputError: Before any state is created, if the endpoints are invalid
        """
        validate_endpoints(graph, start_node, end_node)
        if not isinstance(metric, CostMetric):
            raise InvalidInputError(f"Unknown cost metric: {metric!r}")
        if not isinstance(mode, TravelMode):
            raise InvalidInputError(f"Unknown travel mode: {mode!r}")

        self.graph = graph
        self.start_node = start_node
        self.end_node = end_node
        self.metric = metric
        self.mode = mode

        self.distances: Dict[str, float] = {node_id: INFINITY for node_id in graph.get_nodes()}
        self.previous: Dict[str, Optional[str]] = {node_id: None for node_id in graph.get_nodes()}
        self.distances[start_node] = 0.0

        self._step_index = 0
        self._started_at: Optional[float] = None
        self._done = False
        self._result: Optional[PathResult] = None

    def __iter__(self) -> "StepSequencer":
        return self

    def __next__(self) -> AlgorithmStep:
        """Run to the next observable point and return its snapshot."""
        if self._done:
            raise StopIteration
        if self._started_at is None:
            self._started_at = time.perf_counter()
        return self._advance()

    @abstractmethod
    def _advance(self) -> AlgorithmStep:
        """Run the algorithm until the next snapshot."""

    @property
    def finished(self) -> bool:
        """Whether the final snapshot has been emitted."""
        return self._done

    @property
    def result(self) -> Optional[PathResult]:
        """Final result, available once finished."""
        return self._result

    def run_to_completion(self) -> AlgorithmStep:
        """Drain the sequencer and return its finished snapshot."""
        last: Optional[AlgorithmStep] = None
        for step in self:
            last = step
        if last is None or not last.finished:
            raise StopIteration("Sequencer was already exhausted")
        return last

    def usable_neighbors(self, node_id: str) -> List[tuple]:
        """Outgoing (target, edge, weight) triples usable in the travel mode."""
        return [
            (target, edge, weight_of(edge, self.metric, self.mode))
            for target, edge in self.graph.neighbors_of(node_id)
            if is_usable(edge, self.mode)
        ]

    def relax(self, node_id: str) -> int:
        """
        Relax every usable outgoing edge of node_id.

        Distance and predecessor are updated together, so the predecessor map always
        matches the distance map.

        Returns:
            Number of neighbors whose distance improved
        """
        updates = 0
        for target, edge, weight in self.usable_neighbors(node_id):
            candidate = self.distances[node_id] + weight
            if candidate < self.distances[target]:
                self.distances[target] = candidate
                self.previous[target] = node_id
                self._on_relaxed(target, candidate, edge)
                updates += 1
        return updates

    def _on_relaxed(self, node_id: str, cost: float, edge: Edge) -> None:
        """Hook called after a successful relaxation."""
        logger.debug(f"  {edge.source} -> {node_id}: distance now {format_cost(cost)}")

    def _visited(self) -> Iterable[str]:
        return ()

    def _frontier(self) -> Iterable[str]:
        return ()

    def _iteration(self) -> Optional[int]:
        return None

    def _emit(self, current_node: Optional[str], message: str) -> AlgorithmStep:
        """Snapshot live state as an unfinished step."""
        step = AlgorithmStep.capture(
            step_index=self._step_index,
            current_node=current_node,
            visited=self._visited(),
            distances=self.distances,
            previous=self.previous,
            log_message=message,
            frontier=self._frontier(),
            iteration=self._iteration(),
        )
        self._step_index += 1
        logger.debug(f"[{self.algorithm.label} #{step.step_index}] {message}")
        return step

    def _finish(self, visited_count: int, max_walk: Optional[int] = None) -> AlgorithmStep:
        """Reconstruct the path, store the result and emit the finished snapshot."""
        found = not math.isinf(self.distances[self.end_node])
        elapsed = (time.perf_counter() - (self._started_at or time.perf_counter())) * 1000
        if found:
            path = reconstruct_path(self.previous, self.start_node, self.end_node, max_walk)
            result = PathResult(
                path=path,
                total_weight=self.distances[self.end_node],
                visited_count=visited_count,
                execution_time=elapsed,
            )
            message = self._found_message(result)
            logger.info(
                f"{self.algorithm.label} {self.start_node} -> {self.end_node}: cost "
                f"{format_cost(result.total_weight)}, {visited_count} visited, {elapsed:.2f}ms"
            )
        else:
            result = PathResult.unreachable(visited_count=visited_count, execution_time=elapsed)
            message = self._not_found_message()
            logger.warning(
                f"{self.algorithm.label}: no route from {self.start_node} to {self.end_node} "
                f"({self.mode.value})"
            )

        step = AlgorithmStep.capture(
            step_index=self._step_index,
            current_node=None,
            visited=self._visited(),
            distances=self.distances,
            previous=self.previous,
            log_message=message,
            finished=True,
            path_result=result,
            frontier=(),
            iteration=self._iteration(),
        )
        self._step_index += 1
        self._result = result
        self._done = True
        return step

    def _found_message(self, result: PathResult) -> str:
        return f"Destination reached. Total cost: {format_cost(result.total_weight)}"

    def _not_found_message(self) -> str:
        return "No route found."

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.start_node!r} -> {self.end_node!r}, "
            f"{self.metric.value}, {self.mode.value}, steps={self._step_index})"
        )
