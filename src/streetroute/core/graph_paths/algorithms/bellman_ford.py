"""
Bellman-Ford as a step sequencer.

The search makes up to V - 1 passes. Within a pass, nodes are taken in graph order
and every node already reached has all of its usable outgoing edges relaxed, which
groups relaxations by source node. There is no closed set: every reached node is
revisited on every pass. One snapshot is emitted per node visited, and a pass that
changes nothing ends the search early with a "converged" snapshot.

Runs in O(V * E).
"""

import logging
import math
from enum import Enum, auto
from typing import List, Optional

from ...enums import AlgorithmType, CostMetric, TravelMode
from ...graph import Graph
from ..base import StepSequencer
from ..models import AlgorithmStep, PathResult

logger = logging.getLogger(__name__)


class _Phase(Enum):
    START = auto()
    SCAN = auto()
    RELAX = auto()
    FINISH = auto()


class BellmanFordSequencer(StepSequencer):
    """Resumable Bellman-Ford search over a street graph."""

    algorithm = AlgorithmType.BELLMAN_FORD

    def __init__(
        self,
        graph: Graph,
        start_node: str,
        end_node: str,
        metric: CostMetric = CostMetric.DISTANCE,
        mode: TravelMode = TravelMode.VEHICLE,
    ):
        super().__init__(graph, start_node, end_node, metric, mode)
        self._order: List[str] = graph.get_nodes()
        self._max_passes = len(self._order) - 1
        self.pass_index = 0
        self._position = 0
        self._changed = False
        self._current: Optional[str] = None
        self._phase = _Phase.START

    def _iteration(self) -> Optional[int]:
        return min(self.pass_index, self._max_passes - 1) + 1

    def _advance(self) -> AlgorithmStep:
        while True:
            if self._phase is _Phase.START:
                self._phase = _Phase.SCAN
                return self._emit(self.start_node, "Start: Bellman-Ford initialised.")

            if self._phase is _Phase.RELAX:
                if self.relax(self._current):
                    self._changed = True
                self._position += 1
                self._phase = _Phase.SCAN
                continue

            if self._phase is _Phase.SCAN:
                if self.pass_index >= self._max_passes:
                    self._phase = _Phase.FINISH
                    continue

                node_id = self._next_reached()
                if node_id is not None:
                    self._current = node_id
                    self._phase = _Phase.RELAX
                    return self._emit(
                        node_id,
                        f"Iteration {self.pass_index + 1}: checking connections from {node_id}",
                    )

                # End of pass
                if not self._changed:
                    self._phase = _Phase.FINISH
                    return self._emit(
                        None, f"Converged early in iteration {self.pass_index + 1}."
                    )
                logger.debug(f"Pass {self.pass_index + 1} changed at least one distance")
                self.pass_index += 1
                self._position = 0
                self._changed = False
                continue

            return self._finish(visited_count=len(self._order), max_walk=len(self._order) + 2)

    def _next_reached(self) -> Optional[str]:
        """Advance through the pass to the next node with a finite distance."""
        while self._position < len(self._order):
            node_id = self._order[self._position]
            if not math.isinf(self.distances[node_id]):
                return node_id
            self._position += 1
        return None

    def _found_message(self, result: PathResult) -> str:
        return f"Finished. Route found with total cost {result.total_weight:.2f}."

    def _not_found_message(self) -> str:
        return "Finished. No route."
