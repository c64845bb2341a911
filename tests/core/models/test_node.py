"""Tests for the intersection model."""

import dataclasses

import pytest

from streetroute.core.models import Node


def test_node_creation():
    """Test creating a valid node."""
    node = Node(id="C16_K24", name="Calle 16 con Carrera 24", lat=1.2133, lon=-77.2802)
    assert node.id == "C16_K24"
    assert node.name == "Calle 16 con Carrera 24"
    assert node.lat == pytest.approx(1.2133)
    assert node.lon == pytest.approx(-77.2802)


def test_node_defaults_coordinates():
    """Coordinates are optional for nodes built in memory."""
    node = Node(id="A", name="Alpha")
    assert (node.lat, node.lon) == (0.0, 0.0)


def test_node_is_immutable():
    """Test nodes cannot be modified after construction."""
    node = Node(id="A", name="Alpha")
    with pytest.raises(dataclasses.FrozenInstanceError):
        node.id = "B"  # type: ignore[misc]


@pytest.mark.parametrize("node_id", ["", "   "])
def test_node_empty_id(node_id):
    """Test node validation with empty id."""
    with pytest.raises(ValueError, match="id must be a non-empty string"):
        Node(id=node_id, name="Alpha")


def test_node_empty_name():
    """Test node validation with empty name."""
    with pytest.raises(ValueError, match="name must be a non-empty string"):
        Node(id="A", name="")


def test_node_latitude_out_of_range():
    """Test node validation rejects impossible coordinates."""
    with pytest.raises(ValueError, match="lat value 91"):
        Node(id="A", name="Alpha", lat=91.0)


def test_node_invalid_coordinate_type():
    """Test node validation rejects non-numeric coordinates."""
    with pytest.raises(ValueError):
        Node(id="A", name="Alpha", lat="north")  # type: ignore[arg-type]
