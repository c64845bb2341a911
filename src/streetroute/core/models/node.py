"""
Node models for the street routing system.

A node is a street intersection. Coordinates are carried for the rendering layer
only; the path engine never reads them.
"""

from dataclasses import dataclass

from ...utils.validation import validate_dataclass
from .base import validate_coordinate, validate_identifier


@validate_dataclass
@dataclass(frozen=True)
class Node:
    """
    Immutable street intersection.

    Attributes:
        id (str): Unique identifier, e.g. "C16_K24"
        name (str): Display name, e.g. "Calle 16 con Carrera 24"
        lat (float): Latitude in degrees
        lon (float): Longitude in degrees
    """

    id: str
    name: str
    lat: float = 0.0
    lon: float = 0.0

    def __post_init__(self):
        """Validate node after initialization."""
        validate_identifier("id", self.id)
        validate_identifier("name", self.name)
        validate_coordinate("lat", self.lat, 90.0)
        validate_coordinate("lon", self.lon, 180.0)
