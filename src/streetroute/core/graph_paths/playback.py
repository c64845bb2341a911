"""
Automatic step advancement.

AutoPlayer drives a StepHistory forward at a fixed cadence on the running asyncio
event loop. It only ever calls StepHistory.advance() between sleeps, so cancelling
it at any moment leaves every recorded snapshot intact; it simply stops future
advances.
"""

import asyncio
import logging
from typing import Any, Callable, Optional

from ..exceptions import InvalidOperationError
from .history import StepHistory
from .models import AlgorithmStep

logger = logging.getLogger(__name__)

StepCallback = Callable[[AlgorithmStep], Any]


class AutoPlayer:
    """
    Periodic driver around StepHistory.advance().

    Attributes:
        history: Navigator being advanced
        interval: Seconds between two advances
        on_step: Optional callback receiving each new snapshot
    """

    def __init__(
        self,
        history: StepHistory,
        interval: float = 0.5,
        on_step: Optional[StepCallback] = None,
    ):
        if interval < 0:
            raise ValueError("interval must be non-negative")
        self.history = history
        self.interval = interval
        self.on_step = on_step
        self._task: Optional[asyncio.Task] = None

    def start(self) -> asyncio.Task:
        """
        Begin advancing on the running event loop.

        Raises:
            InvalidOperationError: If playback is already running
            RuntimeError: If no event loop is running
        """
        if self.running:
            raise InvalidOperationError("Playback is already running")
        self._task = asyncio.get_running_loop().create_task(self._run())
        return self._task

    async def _run(self) -> None:
        logger.debug(f"Auto-advance started every {self.interval}s")
        while True:
            await asyncio.sleep(self.interval)
            step = self.history.advance()
            if step is None:
                break
            if self.on_step is not None:
                self.on_step(step)
            if step.finished:
                break
        logger.debug("Auto-advance reached the end of the run")

    def cancel(self) -> None:
        """Stop future advances. Safe to call when not running."""
        task = self._task
        self._task = None
        if task is None:
            return
        if not task.done():
            task.cancel()
            logger.debug("Auto-advance cancelled")
        elif not task.cancelled() and task.exception() is not None:
            logger.error(f"Auto-advance stopped with an error: {task.exception()!r}")

    async def wait(self) -> None:
        """Wait until playback ends on its own or is cancelled."""
        task = self._task
        if task is None:
            return
        try:
            await task
        except asyncio.CancelledError:
            if not task.cancelled():
                raise

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()
