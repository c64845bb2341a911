"""
Edge filter and weight selector.

Pure functions deciding whether a travel mode may use an edge and which of the
edge's precomputed weights a search minimises.
"""

from typing import Callable

from .enums import CostMetric, TravelMode
from .models import Edge

# Type alias for weight functions
WeightFunc = Callable[[Edge], float]

# Type alias for edge filter functions
EdgeFilter = Callable[[Edge], bool]


def is_usable(edge: Edge, mode: TravelMode) -> bool:
    """False iff the edge is pedestrian-only and the traveller drives."""
    return not (edge.pedestrian_only and mode is TravelMode.VEHICLE)


def weight_of(edge: Edge, metric: CostMetric, mode: TravelMode) -> float:
    """Weight of edge under metric; time weights depend on the travel mode."""
    if metric is CostMetric.DISTANCE:
        return edge.weight_distance
    if mode is TravelMode.VEHICLE:
        return edge.weight_time_vehicle
    return edge.weight_time_pedestrian


def weight_func_for(metric: CostMetric, mode: TravelMode) -> WeightFunc:
    """Bind metric and mode into a single-argument weight function."""

    def weight_func(edge: Edge) -> float:
        return weight_of(edge, metric, mode)

    weight_func.__name__ = f"{metric.value}_{mode.value}"
    return weight_func


def edge_filter_for(mode: TravelMode) -> EdgeFilter:
    """Bind a travel mode into a single-argument edge filter."""

    def edge_filter(edge: Edge) -> bool:
        return is_usable(edge, mode)

    edge_filter.__name__ = f"usable_by_{mode.value}"
    return edge_filter
