"""
Tests for the step history navigator.
"""

import pytest

from streetroute.core.exceptions import InvalidOperationError
from streetroute.core.graph_paths import DijkstraSequencer, StepHistory


class CountingSequencer:
    """Wraps a sequencer and counts how often it is advanced."""

    def __init__(self, sequencer):
        self.sequencer = sequencer
        self.calls = 0

    def __next__(self):
        self.calls += 1
        return next(self.sequencer)

    @property
    def finished(self):
        return self.sequencer.finished


@pytest.fixture
def counting(triangle_graph):
    return CountingSequencer(DijkstraSequencer(triangle_graph, "A", "C"))


def test_empty_history():
    """Test a fresh navigator."""
    history = StepHistory()

    assert history.cursor == -1
    assert history.current is None
    assert len(history) == 0
    assert history.retreat() is None
    assert not history.can_advance
    with pytest.raises(InvalidOperationError):
        history.advance()


def test_advance_records_steps(counting):
    """Test advancing pulls from the sequencer and moves the cursor."""
    history = StepHistory(counting)
    first = history.advance()
    second = history.advance()

    assert history.cursor == 1
    assert history.current is second
    assert history.steps == [first, second]
    assert counting.calls == 2


def test_retreat_then_advance_replays(counting):
    """Test moving forward again returns recorded snapshots without new work."""
    history = StepHistory(counting)
    recorded = [history.advance() for _ in range(3)]

    assert history.retreat() is recorded[1]
    assert history.retreat() is recorded[0]
    assert history.retreat() is None
    assert history.cursor == 0

    assert history.advance() is recorded[1]
    assert history.advance() is recorded[2]
    assert counting.calls == 3

    history.advance()
    assert counting.calls == 4
    assert len(history) == 4


def test_retreat_keeps_history(counting):
    """Test moving back never discards snapshots."""
    history = StepHistory(counting)
    for _ in range(4):
        history.advance()
    history.retreat()
    history.retreat()

    assert len(history) == 4
    assert history.can_retreat
    assert history.can_advance


def test_advance_past_finish(counting):
    """Test advancing at the end of a finished run is a no-op."""
    history = StepHistory(counting)
    while history.advance() is not None:
        pass

    assert history.is_finished
    assert history.current.finished
    assert history.final_result.path == ("A", "B", "C")
    assert not history.can_advance
    cursor = history.cursor
    assert history.advance() is None
    assert history.cursor == cursor


def test_reset(counting, triangle_graph):
    """Test reset discards history and detaches the sequencer."""
    history = StepHistory(counting)
    history.advance()
    history.reset()

    assert len(history) == 0
    assert history.cursor == -1
    assert history.final_result is None
    with pytest.raises(InvalidOperationError):
        history.advance()

    history.attach(DijkstraSequencer(triangle_graph, "A", "B"))
    assert history.advance().step_index == 0
