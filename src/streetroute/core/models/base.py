"""
Core domain models base module for the street routing system.

This module provides the validation helpers shared by the node and edge models.
"""

import math


def validate_identifier(name: str, value: str) -> None:
    """Validate that an identifier is a non-empty string."""
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"{name} must be a non-empty string")


def validate_coordinate(name: str, value: float, limit: float) -> None:
    """Validate that a coordinate lies within [-limit, limit]."""
    if not isinstance(value, (int, float)) or not -limit <= value <= limit:
        raise ValueError(f"{name} value {value} must be between {-limit} and {limit}")


def validate_weight(name: str, value: float, allow_infinite: bool = False) -> None:
    """Validate that a weight is a non-negative number, finite unless allowed otherwise."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{name} must be a numeric value")
    if math.isnan(value):
        raise ValueError(f"{name} must not be NaN")
    if value < 0:
        raise ValueError(f"{name} must be non-negative")
    if math.isinf(value) and not allow_infinite:
        raise ValueError(f"{name} must be finite")
