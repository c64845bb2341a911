"""
Core domain models package for the street routing system.

This package provides the intersection (node) and street segment (edge) models
the street graph is assembled from.
"""

from .base import validate_coordinate, validate_identifier, validate_weight
from .edge import DEFAULT_TIME_PRECISION, DEFAULT_WALKING_SPEED_KMH, Edge, travel_minutes
from .node import Node

__all__ = [
    # Base utilities
    "validate_identifier",
    "validate_coordinate",
    "validate_weight",
    # Models
    "Node",
    "Edge",
    "travel_minutes",
    "DEFAULT_WALKING_SPEED_KMH",
    "DEFAULT_TIME_PRECISION",
]
