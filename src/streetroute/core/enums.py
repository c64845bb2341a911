"""
Enumerations for the street routing system.

These enumerations select how a search treats the street graph: which cost the
algorithm minimises, which edges the traveller may use, and which algorithm runs.
"""

from enum import Enum


class CostMetric(Enum):
    """Cost minimised by a search."""

    DISTANCE = "distance"  # meters
    TIME = "time"  # minutes


class TravelMode(Enum):
    """Who is travelling. Vehicles may not use pedestrian-only segments."""

    VEHICLE = "vehicle"
    PEDESTRIAN = "pedestrian"


class AlgorithmType(Enum):
    """Shortest path algorithm used for a search."""

    DIJKSTRA = "dijkstra"
    BELLMAN_FORD = "bellman_ford"

    @property
    def label(self) -> str:
        """Human readable algorithm name."""
        return "Dijkstra" if self is AlgorithmType.DIJKSTRA else "Bellman-Ford"
