"""
Validation package for the street routing system.

This package provides validation utilities and rules for ensuring data integrity
and type safety of graph models, raw dataset records and configuration values.
"""

from .base import (
    ValidationResult,
    ValidationRule,
    RangeRule,
    DataclassRule,
    validate_dataclass,
)
from .schema import SchemaValidator

__all__ = [
    "ValidationResult",
    "ValidationRule",
    "RangeRule",
    "DataclassRule",
    "validate_dataclass",
    "SchemaValidator",
]
