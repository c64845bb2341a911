"""
Tests for the bundled street network.
"""

import math

import pytest

from streetroute.config import NetworkConfig
from streetroute.core.exceptions import GraphOperationError, ValidationError
from streetroute.data import build_street_graph, parse_node_records, parse_segment_records


def test_network_size(street_graph):
    """Test the network holds every intersection and segment."""
    assert street_graph.node_count == 31
    assert street_graph.edge_count == 107


def test_identifiers_are_upper_case(street_graph):
    """Test identifiers are normalised when the graph is built."""
    assert all(node_id == node_id.upper() for node_id in street_graph.get_nodes())
    assert street_graph.has_edge("C18_K25", "C18A_K25")
    assert not street_graph.has_node("C18a_K25")


def test_segment_weights(street_graph):
    """Test weights are precomputed from distance and speed."""
    (edge,) = street_graph.get_edges_between("C16_K24", "C16_K25")
    assert edge.weight_distance == pytest.approx(94.0)
    assert edge.weight_time_vehicle == pytest.approx(0.14)
    assert edge.weight_time_pedestrian == pytest.approx(1.13)

    (footpath,) = street_graph.get_edges_between("C16_K25", "C16_K24")
    assert footpath.pedestrian_only
    assert math.isinf(footpath.weight_time_vehicle)


def test_walking_speed_setting():
    """Test the configured walking speed changes pedestrian times."""
    graph = build_street_graph(NetworkConfig(walking_speed_kmh=4.0))
    (edge,) = graph.get_edges_between("C16_K24", "C16_K25")
    assert edge.weight_time_pedestrian == pytest.approx(1.41)


def test_parse_segment_records():
    """Test semicolon-separated parsing."""
    records = parse_segment_records("A;B;100;30;FALSE\n\nB;A;100;5;TRUE\n")
    assert records == [
        {"source": "A", "target": "B", "distance": 100, "max_speed": 30, "pedestrian_only": False},
        {"source": "B", "target": "A", "distance": 100, "max_speed": 5, "pedestrian_only": True},
    ]


def test_parse_segment_records_wrong_field_count():
    """Test malformed lines are reported by line number."""
    with pytest.raises(ValidationError, match="Segment line 2 has 4 fields"):
        parse_segment_records("A;B;100;30;FALSE\nA;B;100;30\n")


def test_schema_rejects_bad_segment():
    """Test non-numeric distances fail schema validation."""
    segments = parse_segment_records("C16_K24;C16_K25;far;40;FALSE")
    with pytest.raises(ValidationError, match=r"segment\[0\]"):
        build_street_graph(segment_records=segments)


def test_schema_rejects_bad_intersection():
    """Test out-of-range coordinates fail schema validation."""
    nodes = parse_node_records()
    nodes[3] = {**nodes[3], "lat": 123.0}
    with pytest.raises(ValidationError, match=r"intersection\[3\]"):
        build_street_graph(node_records=nodes, segment_records=[])


def test_unknown_intersection_in_segment():
    """Test segments must reference known intersections."""
    segments = parse_segment_records("C16_K24;NOWHERE;100;30;FALSE")
    with pytest.raises(GraphOperationError, match="NOWHERE"):
        build_street_graph(segment_records=segments)
