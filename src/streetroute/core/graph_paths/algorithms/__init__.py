"""Shortest path algorithms expressed as step sequencers."""

from .bellman_ford import BellmanFordSequencer
from .dijkstra import DijkstraSequencer

__all__ = ["DijkstraSequencer", "BellmanFordSequencer"]
