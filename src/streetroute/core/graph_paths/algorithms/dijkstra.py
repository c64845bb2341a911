"""
Dijkstra's algorithm as a step sequencer.

Observable points, in order:
1. "start" snapshot with only the start node at cost 0
2. for every node taken from the queue: an "evaluating" snapshot once it is closed,
   then, if any neighbor improved, an "updated N neighbors" snapshot
3. the finished snapshot, as soon as the destination is closed or the queue runs dry

Correctness relies on non-negative weights, which the edge models guarantee.
Runs in O((V + E) log V).
"""

import logging
from enum import Enum, auto
from typing import List, Optional, Set

from ...enums import AlgorithmType, CostMetric, TravelMode
from ...graph import Graph
from ..base import StepSequencer, format_cost
from ..models import AlgorithmStep
from ..utils import PriorityQueue

logger = logging.getLogger(__name__)


class _Phase(Enum):
    START = auto()
    SELECT = auto()
    RELAX = auto()
    FINISH = auto()


class DijkstraSequencer(StepSequencer):
    """Resumable Dijkstra search over a street graph."""

    algorithm = AlgorithmType.DIJKSTRA

    def __init__(
        self,
        graph: Graph,
        start_node: str,
        end_node: str,
        metric: CostMetric = CostMetric.DISTANCE,
        mode: TravelMode = TravelMode.VEHICLE,
    ):
        super().__init__(graph, start_node, end_node, metric, mode)
        self.queue: PriorityQueue[str] = PriorityQueue()
        self.closed: Set[str] = set()
        # Closing order, for snapshots
        self._closed_order: List[str] = []
        self._current: Optional[str] = None
        self._phase = _Phase.START

    def _visited(self) -> List[str]:
        return self._closed_order

    def _frontier(self) -> List[str]:
        frontier: List[str] = []
        for node_id in self.queue.items():
            if node_id not in self.closed and node_id not in frontier:
                frontier.append(node_id)
        return frontier

    def _advance(self) -> AlgorithmStep:
        while True:
            if self._phase is _Phase.START:
                self.queue.insert(self.start_node, 0.0)
                self._phase = _Phase.SELECT
                return self._emit(self.start_node, f"Start: distance to {self.start_node} is 0.")

            if self._phase is _Phase.RELAX:
                current = self._current
                updates = self.relax(current)
                self._phase = _Phase.SELECT
                if updates:
                    return self._emit(current, f"-> Updated {updates} neighbors of {current}.")
                continue

            if self._phase is _Phase.SELECT:
                entry = self._next_open()
                if entry is None:
                    logger.debug("Priority queue exhausted")
                    self._phase = _Phase.FINISH
                    continue
                current, cost = entry
                self.closed.add(current)
                self._closed_order.append(current)
                self._current = current
                self._phase = _Phase.FINISH if current == self.end_node else _Phase.RELAX
                return self._emit(
                    current, f"Evaluating node {current} (accumulated cost: {format_cost(cost)})"
                )

            return self._finish(visited_count=len(self.closed))

    def _next_open(self) -> Optional[tuple]:
        """Pop queue entries until one for an open node turns up."""
        while not self.queue.empty():
            node_id, cost = self.queue.extract_min()
            if node_id in self.closed:
                logger.debug(f"Skipping stale queue entry for {node_id}")
                continue
            return node_id, cost
        return None

    def _on_relaxed(self, node_id, cost, edge) -> None:
        super()._on_relaxed(node_id, cost, edge)
        self.queue.insert(node_id, cost)
