"""
Data models for shortest path searches.

This module provides the core data structures used throughout the path engine:
- PathResult: Outcome of a completed search, with validation against the graph
- AlgorithmStep: Immutable snapshot of search state at one observable point
- PerformanceMetrics: Container for instant-mode performance metrics
- PathValidationError: Exception for path validation failures

Example:
    >>> result = PathResult(path=("A", "B", "C"), total_weight=10.0, visited_count=3)
    >>> result.validate(graph, CostMetric.DISTANCE, TravelMode.VEHICLE)
    >>> result.nodes
    ['A', 'B', 'C']
"""

import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple, Union

from ..enums import CostMetric, TravelMode
from ..graph import Graph
from ..models import Edge
from ..selectors import is_usable, weight_of


class PathValidationError(Exception):
    """
    Raised when a path fails validation checks.

    This exception indicates issues such as:
    - Path not starting or ending where expected
    - Consecutive nodes without a usable edge between them
    - Weight inconsistencies
    """


@dataclass(frozen=True)
class PathResult:
    """
    Outcome of a completed search.

    An unreachable destination is represented by an empty path and an infinite
    total weight rather than by an exception.

    Attributes:
        path: Node IDs from start to end inclusive, empty if unreachable
        total_weight: Sum of the selected weights along the path
        visited_count: Number of nodes settled (Dijkstra) or considered (Bellman-Ford)
        execution_time: Computation time in milliseconds
    """

    path: Tuple[str, ...]
    total_weight: float
    visited_count: int = 0
    execution_time: float = 0.0

    def __post_init__(self):
        """Normalise and validate initialization parameters."""
        if isinstance(self.path, (str, bytes)) or not isinstance(self.path, Iterable):
            raise TypeError("path must be a sequence of node IDs")
        object.__setattr__(self, "path", tuple(self.path))
        if not all(isinstance(node_id, str) for node_id in self.path):
            raise TypeError("path must contain only node ID strings")
        if isinstance(self.total_weight, bool) or not isinstance(self.total_weight, (int, float)):
            raise TypeError("total_weight must be a numeric value")
        if self.visited_count < 0:
            raise ValueError("visited_count cannot be negative")
        if self.execution_time < 0:
            raise ValueError("execution_time cannot be negative")

    @classmethod
    def unreachable(cls, visited_count: int = 0, execution_time: float = 0.0) -> "PathResult":
        """Result for a search whose destination was never reached."""
        return cls(
            path=(),
            total_weight=math.inf,
            visited_count=visited_count,
            execution_time=execution_time,
        )

    @property
    def found(self) -> bool:
        """Whether a route exists."""
        return bool(self.path)

    @property
    def nodes(self) -> List[str]:
        """Node IDs in order of traversal, for path animation."""
        return list(self.path)

    @property
    def length(self) -> int:
        """Number of hops in the path."""
        return max(len(self.path) - 1, 0)

    def __len__(self) -> int:
        return len(self.path)

    def __iter__(self):
        return iter(self.path)

    def __getitem__(self, index: int) -> str:
        return self.path[index]

    def edges_in(self, graph: Graph, metric: CostMetric, mode: TravelMode) -> List[Edge]:
        """
        Get the edge taken for each hop of the path.

        Where parallel edges join two consecutive nodes, the cheapest usable one is
        the edge a search would have relaxed last.

        Raises:
            PathValidationError: If a hop has no usable edge
        """
        edges = []
        for source, target in zip(self.path, self.path[1:]):
            candidates = [e for e in graph.get_edges_between(source, target) if is_usable(e, mode)]
            if not candidates:
                raise PathValidationError(
                    f"No edge usable by {mode.value} from {source} to {target}"
                )
            edges.append(min(candidates, key=lambda e: weight_of(e, metric, mode)))
        return edges

    def validate(
        self,
        graph: Graph,
        metric: CostMetric,
        mode: TravelMode,
        start: Optional[str] = None,
        end: Optional[str] = None,
        rel_tol: float = 1e-6,
    ) -> None:
        """
        Validate the path's consistency.

        Performs validation checks:
        - Endpoints (when start and end are given)
        - Every node exists in the graph
        - Every hop is joined by an edge usable in the travel mode
        - Total weight matches the sum of edge weights within rel_tol

        Raises:
            PathValidationError: If any validation check fails
        """
        if not self.path:
            if not math.isinf(self.total_weight):
                raise PathValidationError("Empty path must carry an infinite total weight")
            return

        if start is not None and self.path[0] != start:
            raise PathValidationError(f"Path starts at {self.path[0]}, expected {start}")
        if end is not None and self.path[-1] != end:
            raise PathValidationError(f"Path ends at {self.path[-1]}, expected {end}")

        for node_id in self.path:
            if not graph.has_node(node_id):
                raise PathValidationError(f"Node {node_id} not in graph")

        edges = self.edges_in(graph, metric, mode)
        calculated = sum(weight_of(edge, metric, mode) for edge in edges)
        if not math.isclose(calculated, self.total_weight, rel_tol=rel_tol, abs_tol=1e-9):
            raise PathValidationError(
                f"Weight mismatch: calculated {calculated} != stored {self.total_weight}"
            )


@dataclass(frozen=True)
class AlgorithmStep:
    """
    Immutable snapshot of a search at one observable point.

    Snapshots are complete rather than deltas: a consumer can render the whole
    search state from any single snapshot. The maps are private copies wrapped in
    read-only views, so later relaxations never alter an emitted snapshot.

    Attributes:
        step_index: 0-based position of the snapshot in its run
        current_node: Node being evaluated, or None
        visited: Closed nodes (always empty for Bellman-Ford)
        distances: Tentative cost per node ID (inf when unreached)
        previous: Predecessor per node ID (None when unset)
        log_message: What just happened, in plain words
        finished: True only on the final snapshot
        path_result: The outcome, present only when finished
        frontier: Nodes waiting in the priority queue, cheapest first
        iteration: 1-based Bellman-Ford pass, None for Dijkstra
    """

    step_index: int
    current_node: Optional[str]
    visited: Tuple[str, ...]
    # Excluded from hashing: read-only views are unhashable
    distances: Mapping[str, float] = field(hash=False)
    previous: Mapping[str, Optional[str]] = field(hash=False)
    log_message: str
    finished: bool = False
    path_result: Optional[PathResult] = None
    frontier: Tuple[str, ...] = ()
    iteration: Optional[int] = None

    @classmethod
    def capture(
        cls,
        step_index: int,
        current_node: Optional[str],
        visited: Iterable[str],
        distances: Dict[str, float],
        previous: Dict[str, Optional[str]],
        log_message: str,
        finished: bool = False,
        path_result: Optional[PathResult] = None,
        frontier: Iterable[str] = (),
        iteration: Optional[int] = None,
    ) -> "AlgorithmStep":
        """Snapshot live search state, cloning every mutable container."""
        return cls(
            step_index=step_index,
            current_node=current_node,
            visited=tuple(visited),
            distances=MappingProxyType(dict(distances)),
            previous=MappingProxyType(dict(previous)),
            log_message=log_message,
            finished=finished,
            path_result=path_result,
            frontier=tuple(frontier),
            iteration=iteration,
        )

    @property
    def reached(self) -> List[str]:
        """Nodes with a finite tentative distance."""
        return [node_id for node_id, dist in self.distances.items() if not math.isinf(dist)]

    def tree_edges(self) -> List[Tuple[str, str]]:
        """Current predecessor tree as (predecessor, node) pairs."""
        return [(prev, node_id) for node_id, prev in self.previous.items() if prev is not None]


@dataclass
class PerformanceMetrics:
    """
    Container for search performance metrics.

    Attributes:
        operation: Name of the operation
        start_time: Operation start timestamp (perf_counter seconds)
        end_time: Operation end timestamp (0.0 if not completed)
        path_length: Number of nodes in the found path
        nodes_explored: Number of nodes settled or considered
        max_memory_used: Peak resident memory during the operation (bytes)
    """

    operation: str
    start_time: float
    end_time: float = 0.0
    path_length: Optional[int] = None
    nodes_explored: Optional[int] = None
    max_memory_used: Optional[int] = None

    def __post_init__(self):
        """Validate metrics after initialization."""
        if not isinstance(self.operation, str) or not self.operation.strip():
            raise ValueError("operation must be a non-empty string")
        if self.end_time < 0:
            raise ValueError("end_time cannot be negative")
        if self.end_time and self.end_time < self.start_time:
            raise ValueError("end_time cannot be before start_time")

    @property
    def duration(self) -> float:
        """Operation duration in milliseconds."""
        return (self.end_time - self.start_time) * 1000 if self.end_time else 0.0

    def to_dict(self) -> Dict[str, Union[str, float, int, None]]:
        """Convert metrics to dictionary format."""
        return {
            "operation": self.operation,
            "duration_ms": self.duration,
            "path_length": self.path_length,
            "nodes_explored": self.nodes_explored,
            "max_memory_used": self.max_memory_used,
        }
