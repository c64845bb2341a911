"""
Custom exceptions for the street routing system.

This module defines the hierarchy of custom exceptions used throughout the system
to handle various error conditions in a structured and meaningful way. Each exception
type corresponds to a specific category of errors that may occur while building the
street graph or searching it.

An unreachable destination is deliberately absent from this hierarchy: a search that
cannot reach its target still completes, with an empty path and an infinite cost.
"""


class ValidationError(Exception):
    """
    Raised when data validation fails.

    This exception is raised when input data fails to meet the required validation
    criteria, such as schema validation of raw dataset records or model field checks.

    Examples:
        * Malformed intersection records
        * Street segment records with non-numeric distances
        * Schema validation failures
    """

    def __str__(self) -> str:
        """Format validation error message."""
        return f"Validation Error: {super().__str__()}"


class GraphOperationError(Exception):
    """
    Raised when graph operations fail.

    This exception is raised when the street graph cannot be assembled or when a
    graph integrity violation is detected.

    Examples:
        * Edge referencing an unknown intersection
        * Duplicate intersection identifiers
        * Graph integrity violations
    """

    def __str__(self) -> str:
        """Format graph operation error message."""
        return f"Graph Operation Error: {super().__str__()}"


class PathIntegrityError(GraphOperationError):
    """
    Raised when predecessor data cannot be walked back to the start node.

    The Bellman-Ford reconstruction bounds its backward walk; exceeding that bound
    means the predecessor map is malformed. This is distinct from an unreachable
    destination, which is a normal outcome.
    """


class ConfigurationError(Exception):
    """
    Raised when configuration is invalid.

    Examples:
        * Non-positive walking speed
        * Negative auto-advance interval
        * Unknown log level
    """


class ResourceNotFoundError(Exception):
    """
    Raised when a requested resource is not found.

    Examples:
        * Node not found
        * Edge not found
    """


class NodeNotFoundError(ResourceNotFoundError):
    """
    Raised when a requested node is not found.

    This exception is a specialized version of ResourceNotFoundError specifically
    for lookups of intersection identifiers that do not exist in the graph.
    """


class InvalidInputError(ValueError):
    """
    Raised when a search is requested with invalid endpoints.

    This exception is raised synchronously, before any search state is created
    and before any snapshot is produced.

    Examples:
        * Start node not found in the graph
        * End node not found in the graph
        * Start node equal to end node
    """


class InvalidOperationError(Exception):
    """
    Raised when an operation is invalid in the current context.

    Examples:
        * Advancing a navigator that has no sequencer attached
        * Starting playback without an active search
    """
