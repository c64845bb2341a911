"""
Core package for the street routing system.

Provides the street graph, its models, the edge selectors and the shortest path
engine.
"""

from .enums import AlgorithmType, CostMetric, TravelMode
from .exceptions import (
    ConfigurationError,
    GraphOperationError,
    InvalidInputError,
    InvalidOperationError,
    NodeNotFoundError,
    PathIntegrityError,
    ValidationError,
)
from .graph import Graph
from .models import Edge, Node
from .selectors import is_usable, weight_of

__all__ = [
    "AlgorithmType",
    "CostMetric",
    "TravelMode",
    "Graph",
    "Node",
    "Edge",
    "is_usable",
    "weight_of",
    "ConfigurationError",
    "GraphOperationError",
    "InvalidInputError",
    "InvalidOperationError",
    "NodeNotFoundError",
    "PathIntegrityError",
    "ValidationError",
]
