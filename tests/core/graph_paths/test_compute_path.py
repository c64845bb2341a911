"""
Tests for instant route computation.
"""

import logging
import math

import pytest

from streetroute.core.enums import AlgorithmType, CostMetric, TravelMode
from streetroute.core.exceptions import InvalidInputError
from streetroute.core.graph_paths import (
    BellmanFordSequencer,
    DijkstraSequencer,
    PathFinding,
    compute_path,
    start_step_sequence,
)

ALGORITHMS = [AlgorithmType.DIJKSTRA, AlgorithmType.BELLMAN_FORD]


def route(sequencer_cls, graph, start, end, *args):
    return sequencer_cls(graph, start, end, *args).run_to_completion().path_result


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_two_hop_route_beats_direct_edge(triangle_graph, algorithm):
    """Test the cheaper two-hop route is chosen."""
    result = compute_path(triangle_graph, "A", "C", algorithm=algorithm, validate=True)

    assert result.path == ("A", "B", "C")
    assert result.total_weight == pytest.approx(10.0)


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_removing_incoming_edges_makes_unreachable(diamond_graph, algorithm):
    """Test a node without incoming edges cannot be reached."""
    graph = diamond_graph.filter_edges(lambda edge: edge.target != "D")
    result = compute_path(graph, "A", "D", algorithm=algorithm)

    assert result.path == ()
    assert math.isinf(result.total_weight)


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_invalid_input(triangle_graph, algorithm):
    """Test invalid endpoints raise instead of returning a result."""
    with pytest.raises(InvalidInputError):
        compute_path(triangle_graph, "A", "missing", algorithm=algorithm)


def test_repeated_searches_agree(diamond_graph):
    """Test a search is idempotent on an unchanged graph."""
    first = compute_path(diamond_graph, "A", "D", metric=CostMetric.TIME)
    second = compute_path(diamond_graph, "A", "D", metric=CostMetric.TIME)

    assert first.path == second.path
    assert first.total_weight == second.total_weight


def test_static_interface():
    """Test the module level helpers are the static methods."""
    assert compute_path is PathFinding.compute_path
    assert start_step_sequence is PathFinding.start_step_sequence


def test_start_step_sequence_is_not_advanced(triangle_graph):
    """Test a new navigator has not produced any snapshot yet."""
    history = start_step_sequence(triangle_graph, "A", "C", algorithm=AlgorithmType.BELLMAN_FORD)

    assert len(history) == 0
    assert history.advance().log_message == "Start: Bellman-Ford initialised."


def test_start_step_sequence_invalid_input(triangle_graph):
    """Test invalid input is raised before a navigator exists."""
    with pytest.raises(InvalidInputError):
        start_step_sequence(triangle_graph, "A", "A")


def test_memory_limit_accepted(triangle_graph):
    """Test a generous memory ceiling does not interfere."""
    result = compute_path(triangle_graph, "A", "C", max_memory_mb=1024)
    assert result.found


class TestStreetNetwork:
    """Route properties on the bundled street network."""

    SOURCES = ["C16_K24", "C18A_K25", "C20_K29"]

    @pytest.mark.parametrize("metric", list(CostMetric))
    @pytest.mark.parametrize("mode", list(TravelMode))
    def test_distances_agree_exactly(self, street_graph, metric, mode):
        """Test Dijkstra costs equal the converged Bellman-Ford distance map."""
        nodes = street_graph.get_nodes()
        for source in nodes:
            other = next(node for node in nodes if node != source)
            sequencer = BellmanFordSequencer(street_graph, source, other, metric, mode)
            final = sequencer.run_to_completion()
            assert final.distances[source] == 0
            for target in nodes:
                if target == source:
                    continue
                dijkstra = route(DijkstraSequencer, street_graph, source, target, metric, mode)
                assert dijkstra.total_weight == final.distances[target], (source, target)

    @pytest.mark.parametrize("source", SOURCES)
    def test_vehicle_routes_avoid_footpaths(self, street_graph, source):
        """Test vehicle routes never use a pedestrian-only segment."""
        for target in street_graph.get_nodes():
            if target == source:
                continue
            result = route(DijkstraSequencer, street_graph, source, target)
            if result.found:
                edges = result.edges_in(street_graph, CostMetric.DISTANCE, TravelMode.VEHICLE)
                assert not any(edge.pedestrian_only for edge in edges)
                result.validate(street_graph, CostMetric.DISTANCE, TravelMode.VEHICLE)

    def test_one_way_block(self, street_graph):
        """Test walking may use the footpath that driving may not."""
        walk = compute_path(street_graph, "C16_K25", "C16_K24", mode=TravelMode.PEDESTRIAN)
        drive = compute_path(street_graph, "C16_K25", "C16_K24", mode=TravelMode.VEHICLE)

        assert walk.path == ("C16_K25", "C16_K24")
        assert walk.total_weight == pytest.approx(94.0)
        assert drive.path != walk.path
        assert not drive.found or drive.total_weight > 94.0


def test_search_metrics_are_logged(triangle_graph, caplog):
    """Test instant searches time themselves and log their metrics."""
    with caplog.at_level(logging.DEBUG, logger="streetroute.core.graph_paths"):
        compute_path(triangle_graph, "A", "C", algorithm=AlgorithmType.BELLMAN_FORD)

    messages = [record.getMessage() for record in caplog.records]
    assert any(m.startswith("bellman_ford_path: ") and m.endswith("ms") for m in messages)
    metrics_line = next(m for m in messages if m.startswith("Search metrics: "))
    assert "'operation': 'bellman_ford_path'" in metrics_line
    assert "'path_length': 3" in metrics_line
    assert "'nodes_explored': 4" in metrics_line
