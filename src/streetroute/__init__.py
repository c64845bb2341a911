"""
streetroute - Shortest paths on a street intersection graph

This package computes shortest routes between street intersections and replays
the search step by step. It includes:

- An immutable directed street graph with distance and travel-time weights
- Dijkstra and Bellman-Ford searches as resumable step sequencers
- A step history that navigates forward and backward through a search
- The bundled street network and a command line interface
"""

__version__ = "0.1.0"
__author__ = "streetroute Team"

# Version compatibility check
import sys

if sys.version_info < (3, 12):
    raise RuntimeError("streetroute requires Python 3.12 or higher")

from .core.enums import AlgorithmType, CostMetric, TravelMode
from .core.graph import Graph
from .core.graph_paths import (
    AlgorithmStep,
    PathResult,
    RouteSession,
    StepHistory,
    compute_path,
    start_step_sequence,
)
from .core.models import Edge, Node

__all__ = [
    "Graph",
    "Node",
    "Edge",
    "AlgorithmType",
    "CostMetric",
    "TravelMode",
    "AlgorithmStep",
    "PathResult",
    "RouteSession",
    "StepHistory",
    "compute_path",
    "start_step_sequence",
]
