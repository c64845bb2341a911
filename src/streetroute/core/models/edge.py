"""
Edge models for the street routing system.

An edge is one directed street segment. A two-way street is two edges. Each edge
carries its raw attributes and the three precomputed weights the algorithms select
between, so a search never recomputes travel times.
"""

import math
from dataclasses import dataclass

from ...utils.validation import validate_dataclass
from .base import validate_identifier, validate_weight

DEFAULT_WALKING_SPEED_KMH = 5.0
DEFAULT_TIME_PRECISION = 2


def travel_minutes(distance_m: float, speed_kmh: float, precision: int) -> float:
    """Minutes needed to cover distance_m at speed_kmh, rounded to precision decimals."""
    return round(distance_m / 1000 / speed_kmh * 60, precision)


@validate_dataclass
@dataclass(frozen=True)
class Edge:
    """
    Immutable directed street segment.

    Attributes:
        source (str): Source node ID
        target (str): Target node ID
        distance (float): Segment length in meters
        max_speed (float): Speed limit in km/h
        pedestrian_only (bool): Whether vehicles are barred from the segment
        weight_distance (float): Cost under the distance metric (meters)
        weight_time_vehicle (float): Cost in minutes when driving; may be infinite
            for pedestrian-only segments
        weight_time_pedestrian (float): Cost in minutes when walking
    """

    source: str
    target: str
    distance: float
    max_speed: float
    pedestrian_only: bool
    weight_distance: float
    weight_time_vehicle: float
    weight_time_pedestrian: float

    def __post_init__(self):
        """Validate edge after initialization."""
        validate_identifier("source node", self.source)
        validate_identifier("target node", self.target)
        validate_weight("distance", self.distance)
        validate_weight("max_speed", self.max_speed)
        validate_weight("weight_distance", self.weight_distance)
        validate_weight("weight_time_pedestrian", self.weight_time_pedestrian)
        validate_weight(
            "weight_time_vehicle", self.weight_time_vehicle, allow_infinite=self.pedestrian_only
        )

    @classmethod
    def from_segment(
        cls,
        source: str,
        target: str,
        distance: float,
        max_speed: float,
        pedestrian_only: bool,
        walking_speed: float = DEFAULT_WALKING_SPEED_KMH,
        time_precision: int = DEFAULT_TIME_PRECISION,
    ) -> "Edge":
        """
        Build an edge from raw segment attributes, precomputing its weights.

        The distance weight is the length in meters. Vehicle time uses the speed limit
        and is infinite on pedestrian-only segments. Pedestrian time always uses the
        walking speed.

        Raises:
            ValueError: If the speeds are not positive
        """
        if max_speed <= 0 or walking_speed <= 0:
            raise ValueError("speeds must be positive")
        vehicle_time = (
            math.inf
            if pedestrian_only
            else travel_minutes(distance, max_speed, time_precision)
        )
        return cls(
            source=source,
            target=target,
            distance=float(distance),
            max_speed=float(max_speed),
            pedestrian_only=pedestrian_only,
            weight_distance=float(distance),
            weight_time_vehicle=vehicle_time,
            weight_time_pedestrian=travel_minutes(distance, walking_speed, time_precision),
        )
