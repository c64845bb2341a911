"""
Tests for the Bellman-Ford step sequencer.
"""

import math

import pytest

from streetroute.core.enums import TravelMode
from streetroute.core.exceptions import InvalidInputError
from streetroute.core.graph_paths import BellmanFordSequencer


def test_step_narration(triangle_graph):
    """Test the full snapshot sequence, including early convergence."""
    steps = list(BellmanFordSequencer(triangle_graph, "A", "C"))

    assert [step.log_message for step in steps] == [
        "Start: Bellman-Ford initialised.",
        "Iteration 1: checking connections from A",
        "Iteration 1: checking connections from B",
        "Iteration 1: checking connections from C",
        "Iteration 2: checking connections from A",
        "Iteration 2: checking connections from B",
        "Iteration 2: checking connections from C",
        "Converged early in iteration 2.",
        "Finished. Route found with total cost 10.00.",
    ]
    assert [step.iteration for step in steps] == [1, 1, 1, 1, 2, 2, 2, 2, 2]


def test_unreached_nodes_are_skipped(triangle_graph):
    """Test nodes without a finite distance get no snapshot."""
    steps = list(BellmanFordSequencer(triangle_graph, "A", "C"))
    assert "D" not in {step.current_node for step in steps}


def test_final_result(triangle_graph):
    """Test the result counts every node as considered."""
    final = BellmanFordSequencer(triangle_graph, "A", "C").run_to_completion()

    assert final.path_result.path == ("A", "B", "C")
    assert final.path_result.total_weight == pytest.approx(10.0)
    assert final.path_result.visited_count == triangle_graph.node_count


def test_no_closed_set(triangle_graph):
    """Test Bellman-Ford snapshots never report closed nodes."""
    steps = list(BellmanFordSequencer(triangle_graph, "A", "C"))
    assert all(step.visited == () for step in steps)
    assert all(step.frontier == () for step in steps)


def test_unreachable_destination(triangle_graph):
    """Test an unreachable destination finishes with an empty path."""
    final = BellmanFordSequencer(triangle_graph, "A", "D").run_to_completion()

    assert final.log_message == "Finished. No route."
    assert final.path_result.path == ()
    assert math.isinf(final.path_result.total_weight)


def test_pass_limit(make_edge, make_graph):
    """Test at most V - 1 passes run on a chain listed against its direction."""
    # Node order D, C, B, A means one new node is reached per pass
    edges = [make_edge("C", "D", 1.0), make_edge("B", "C", 1.0), make_edge("A", "B", 1.0)]
    graph = make_graph(edges)
    assert graph.get_nodes() == ["C", "D", "B", "A"]

    steps = list(BellmanFordSequencer(graph, "A", "D"))
    final = steps[-1]

    assert final.path_result.path == ("A", "B", "C", "D")
    assert final.path_result.total_weight == pytest.approx(3.0)
    assert max(step.iteration for step in steps) == 3
    assert not any("Converged" in step.log_message for step in steps)


def test_pedestrian_only_edges(diamond_graph):
    """Test travel mode decides which edges are relaxed."""
    vehicle = BellmanFordSequencer(diamond_graph, "A", "D", mode=TravelMode.VEHICLE)
    pedestrian = BellmanFordSequencer(diamond_graph, "A", "D", mode=TravelMode.PEDESTRIAN)

    assert vehicle.run_to_completion().path_result.path == ("A", "B", "C", "D")
    assert pedestrian.run_to_completion().path_result.path == ("A", "E", "D")


def test_stop_iteration_after_finish(triangle_graph):
    """Test the sequencer is exhausted after the finished snapshot."""
    sequencer = BellmanFordSequencer(triangle_graph, "A", "C")
    sequencer.run_to_completion()
    with pytest.raises(StopIteration):
        next(sequencer)


def test_invalid_endpoints(triangle_graph):
    """Test invalid input is rejected before any snapshot exists."""
    with pytest.raises(InvalidInputError):
        BellmanFordSequencer(triangle_graph, "A", "A")
