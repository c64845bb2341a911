"""
Utility functions and structures for path searches.
"""

import gc
import logging
import os
import time
from contextlib import contextmanager
from heapq import heappop, heappush
from typing import Dict, Generator, Generic, List, Optional, Tuple, TypeVar

import psutil

from ..exceptions import PathIntegrityError
from .models import PerformanceMetrics

logger = logging.getLogger(__name__)

T = TypeVar("T")

INFINITY = float("inf")


class PriorityQueue(Generic[T]):
    """
    Binary min-heap of (item, priority) pairs.

    There is no decrease-key: pushing an item that is already queued adds a second
    entry, and the consumer discards entries for items it has already closed when
    they come out. Ties are broken by insertion order.
    """

    def __init__(self):
        self._heap: List[Tuple[float, int, T]] = []
        self._counter = 0

    def insert(self, item: T, priority: float) -> None:
        """Add an entry in O(log n)."""
        heappush(self._heap, (priority, self._counter, item))
        self._counter += 1

    def extract_min(self) -> Optional[Tuple[T, float]]:
        """Remove and return the cheapest (item, priority) entry, or None when empty."""
        if not self._heap:
            return None
        priority, _, item = heappop(self._heap)
        return item, priority

    def items(self) -> List[T]:
        """Queued items cheapest first, duplicates included."""
        return [item for _, _, item in sorted(self._heap)]

    def empty(self) -> bool:
        """Return True if the queue is empty."""
        return not self._heap

    def __len__(self) -> int:
        """Return the number of entries, stale ones included."""
        return len(self._heap)


def reconstruct_path(
    previous: Dict[str, Optional[str]],
    start: str,
    end: str,
    max_steps: Optional[int] = None,
) -> List[str]:
    """
    Follow predecessors back from end to start.

    Args:
        previous: Predecessor map of a finished search
        start: Search start node
        end: Search end node, assumed reached
        max_steps: Bound on the number of nodes walked

    Returns:
        Node IDs from start to end inclusive

    Raises:
        PathIntegrityError: If the walk exceeds max_steps or dead-ends before start
    """
    path = []
    current: Optional[str] = end
    while current is not None:
        if max_steps is not None and len(path) >= max_steps:
            raise PathIntegrityError(
                f"Predecessor walk from {end} exceeded {max_steps} steps without reaching {start}"
            )
        path.append(current)
        if current == start:
            path.reverse()
            return path
        current = previous.get(current)

    raise PathIntegrityError(f"Predecessor chain from {end} ends before reaching {start}")


@contextmanager
def timer(operation: str) -> Generator[PerformanceMetrics, None, None]:
    """Time the enclosed block into a PerformanceMetrics record, logged at DEBUG."""
    metrics = PerformanceMetrics(operation=operation, start_time=time.perf_counter())
    try:
        yield metrics
    finally:
        metrics.end_time = time.perf_counter()
        logger.debug(f"{operation}: {metrics.duration:.1f}ms")


class MemoryManager:
    """Tracks resident memory while a search runs."""

    def __init__(self, max_memory_mb: Optional[float] = None):
        gc.collect()

        self.max_memory = max_memory_mb * 1024 * 1024 if max_memory_mb else None
        self.start_memory = get_memory_usage()
        self._peak_memory = self.start_memory
        self._last_check = time.time()
        self._check_interval = 0.1  # seconds

    def check_memory(self, force: bool = False) -> None:
        """
        Sample memory usage at most every check interval.

        Raises:
            MemoryError: If usage above the starting point exceeds the limit
        """
        current_time = time.time()
        if not force and current_time - self._last_check < self._check_interval:
            return

        self._last_check = current_time
        current = get_memory_usage()
        self._peak_memory = max(self._peak_memory, current)

        if self.max_memory and current - self.start_memory > self.max_memory:
            gc.collect()
            current = get_memory_usage()
            if current - self.start_memory > self.max_memory:
                raise MemoryError(
                    f"Memory usage {current/1024/1024:.1f}MB exceeds "
                    f"limit of {self.max_memory/1024/1024:.1f}MB"
                )

    @property
    def peak_memory(self) -> int:
        """Peak memory usage in bytes."""
        return self._peak_memory

    @property
    def peak_memory_mb(self) -> float:
        """Peak memory usage in MB."""
        return self._peak_memory / 1024 / 1024


def get_memory_usage() -> int:
    """Get current memory usage in bytes."""
    process = psutil.Process(os.getpid())
    return process.memory_info().rss
