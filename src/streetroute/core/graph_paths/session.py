"""
Route session: one active step-by-step search per user.

A session owns the navigator and the optional auto-advance driver. Starting a new
search first cancels pending auto-advance and drops the previous sequencer and its
history, so two sequencers are never advanced concurrently.
"""

import logging
from typing import Optional

from ...config import PlaybackConfig
from ..enums import AlgorithmType, CostMetric, TravelMode
from ..exceptions import InvalidOperationError
from ..graph import Graph
from .algorithms import BellmanFordSequencer, DijkstraSequencer
from .base import StepSequencer
from .history import StepHistory
from .models import AlgorithmStep, PathResult
from .playback import AutoPlayer, StepCallback

logger = logging.getLogger(__name__)

SEQUENCERS = {
    AlgorithmType.DIJKSTRA: DijkstraSequencer,
    AlgorithmType.BELLMAN_FORD: BellmanFordSequencer,
}


def create_sequencer(
    graph: Graph,
    start_node: str,
    end_node: str,
    metric: CostMetric = CostMetric.DISTANCE,
    mode: TravelMode = TravelMode.VEHICLE,
    algorithm: AlgorithmType = AlgorithmType.DIJKSTRA,
) -> StepSequencer:
    """
    Create a fresh sequencer for the chosen algorithm.

    Raises:
        InvalidInputError: If the endpoints are invalid
        ValueError: If the algorithm is unknown
    """
    try:
        sequencer_cls = SEQUENCERS[algorithm]
    except KeyError:
        raise ValueError(f"Unknown algorithm: {algorithm!r}") from None
    return sequencer_cls(graph, start_node, end_node, metric, mode)


class RouteSession:
    """
    Step-by-step search state for a single user.

    Attributes:
        graph: Street graph searched by every run of the session
        history: Navigator over the current run
        playback: Auto-advance settings
    """

    def __init__(self, graph: Graph, playback: Optional[PlaybackConfig] = None):
        self.graph = graph
        self.history = StepHistory()
        self.playback = playback or PlaybackConfig()
        self._player: Optional[AutoPlayer] = None
        self._sequencer: Optional[StepSequencer] = None

    def start(
        self,
        start_node: str,
        end_node: str,
        metric: CostMetric = CostMetric.DISTANCE,
        mode: TravelMode = TravelMode.VEHICLE,
        algorithm: AlgorithmType = AlgorithmType.DIJKSTRA,
    ) -> AlgorithmStep:
        """
        Start a new run and return its first snapshot.

        Raises:
            InvalidInputError: If the endpoints are invalid; the session is left empty
        """
        self.stop()
        self.history.reset()
        self._sequencer = None

        sequencer = create_sequencer(self.graph, start_node, end_node, metric, mode, algorithm)
        self._sequencer = sequencer
        self.history.attach(sequencer)
        logger.info(
            f"Started {algorithm.label} run {start_node} -> {end_node} "
            f"({metric.value}, {mode.value})"
        )
        return self.history.advance()

    def advance(self) -> Optional[AlgorithmStep]:
        """Move forward one snapshot."""
        return self.history.advance()

    def retreat(self) -> Optional[AlgorithmStep]:
        """Move back one snapshot."""
        return self.history.retreat()

    def reset(self) -> None:
        """Stop playback and discard the current run."""
        self.stop()
        self.history.reset()
        self._sequencer = None

    def play(self, on_step: Optional[StepCallback] = None, interval: Optional[float] = None):
        """
        Auto-advance on the running event loop.

        Returns:
            The asyncio task driving playback

        Raises:
            InvalidOperationError: If no run has been started
        """
        if self._sequencer is None:
            raise InvalidOperationError("Start a search before playing it")
        self.stop()
        self._player = AutoPlayer(
            self.history,
            interval=self.playback.interval if interval is None else interval,
            on_step=on_step,
        )
        return self._player.start()

    def stop(self) -> None:
        """Cancel pending auto-advance, keeping the recorded history."""
        if self._player is not None:
            self._player.cancel()
            self._player = None

    async def wait(self) -> None:
        """Wait for auto-advance to end."""
        if self._player is not None:
            await self._player.wait()

    @property
    def playing(self) -> bool:
        return self._player is not None and self._player.running

    @property
    def current(self) -> Optional[AlgorithmStep]:
        return self.history.current

    @property
    def result(self) -> Optional[PathResult]:
        return self.history.final_result
