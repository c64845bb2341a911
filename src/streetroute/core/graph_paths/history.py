"""
Step history and navigation.

StepHistory records every snapshot a sequencer emits and moves a cursor over them.
Moving back never discards anything; moving forward replays recorded snapshots
until the cursor reaches the newest one, and only then asks the live sequencer for
more work.
"""

import logging
from typing import List, Optional

from ..exceptions import InvalidOperationError
from .base import StepSequencer
from .models import AlgorithmStep, PathResult

logger = logging.getLogger(__name__)


class StepHistory:
    """
    Append-only snapshot history with a cursor.

    The cursor is -1 while the history is empty and otherwise always indexes a
    recorded snapshot.
    """

    def __init__(self, sequencer: Optional[StepSequencer] = None):
        self._steps: List[AlgorithmStep] = []
        self._cursor = -1
        self._sequencer = sequencer

    def attach(self, sequencer: StepSequencer) -> None:
        """Discard any previous run and follow a new sequencer."""
        self.reset()
        self._sequencer = sequencer

    def advance(self) -> Optional[AlgorithmStep]:
        """
        Move forward one snapshot.

        Returns:
            The snapshot now under the cursor, or None when the run has finished and
            the cursor is already on its last snapshot

        Raises:
            InvalidOperationError: If there is nothing to replay and no sequencer
        """
        if self._cursor < len(self._steps) - 1:
            self._cursor += 1
            return self._steps[self._cursor]

        if self._sequencer is None:
            raise InvalidOperationError("No search sequence attached")

        try:
            step = next(self._sequencer)
        except StopIteration:
            logger.debug("Sequencer finished; nothing to advance")
            return None

        self._steps.append(step)
        self._cursor = len(self._steps) - 1
        return step

    def retreat(self) -> Optional[AlgorithmStep]:
        """
        Move back one snapshot without discarding history.

        Returns:
            The snapshot now under the cursor, or None if the cursor is at the first
            snapshot or the history is empty
        """
        if self._cursor <= 0:
            logger.debug("Cannot retreat past the first snapshot")
            return None
        self._cursor -= 1
        return self._steps[self._cursor]

    def reset(self) -> None:
        """Discard all history and detach the sequencer."""
        self._steps = []
        self._cursor = -1
        self._sequencer = None

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def current(self) -> Optional[AlgorithmStep]:
        """Snapshot under the cursor, if any."""
        return self._steps[self._cursor] if self._cursor >= 0 else None

    @property
    def steps(self) -> List[AlgorithmStep]:
        """Copy of the recorded snapshots."""
        return list(self._steps)

    @property
    def is_finished(self) -> bool:
        """Whether the finished snapshot has been recorded."""
        return bool(self._steps) and self._steps[-1].finished

    @property
    def can_retreat(self) -> bool:
        return self._cursor > 0

    @property
    def can_advance(self) -> bool:
        if self._cursor < len(self._steps) - 1:
            return True
        return self._sequencer is not None and not self._sequencer.finished

    @property
    def final_result(self) -> Optional[PathResult]:
        """Result of the recorded run once it has finished."""
        return self._steps[-1].path_result if self.is_finished else None

    def __len__(self) -> int:
        return len(self._steps)
