"""
Configuration for the street routing system.

This module defines configuration objects with validated defaults:
- NetworkConfig: how segment travel times are precomputed
- PlaybackConfig: how fast step-by-step playback advances
- AppConfig: command line settings aggregating both
"""

import logging
from typing import Optional

from .core.exceptions import ConfigurationError
from .core.models import DEFAULT_TIME_PRECISION, DEFAULT_WALKING_SPEED_KMH
from .utils.validation import RangeRule

DEFAULT_PLAYBACK_INTERVAL = 0.5  # seconds per step
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class NetworkConfig:
    """
    Configuration for building the street graph.

    Attributes:
        walking_speed_kmh: Walking speed used for pedestrian travel times
        time_precision: Decimal places travel times are rounded to
    """

    def __init__(
        self,
        walking_speed_kmh: float = DEFAULT_WALKING_SPEED_KMH,
        time_precision: int = DEFAULT_TIME_PRECISION,
    ):
        if not RangeRule(min_value=0, inclusive_min=False).validate(walking_speed_kmh):
            raise ConfigurationError(
                f"walking_speed_kmh must be a positive number, got {walking_speed_kmh!r}"
            )
        if not isinstance(time_precision, int) or not RangeRule(0, 10).validate(time_precision):
            raise ConfigurationError(
                f"time_precision must be an integer between 0 and 10, got {time_precision!r}"
            )
        self.walking_speed_kmh = float(walking_speed_kmh)
        self.time_precision = time_precision


class PlaybackConfig:
    """
    Configuration for automatic step advancement.

    Attributes:
        interval: Seconds between two automatic steps
    """

    def __init__(self, interval: float = DEFAULT_PLAYBACK_INTERVAL):
        if not RangeRule(min_value=0).validate(interval):
            raise ConfigurationError(f"interval must be a non-negative number, got {interval!r}")
        self.interval = float(interval)


class AppConfig:
    """
    Top level configuration used by the command line interface.

    Attributes:
        log_level: Name of the root logging level
        network: Street graph build settings
        playback: Step playback settings
    """

    def __init__(
        self,
        log_level: str = "INFO",
        network: Optional[NetworkConfig] = None,
        playback: Optional[PlaybackConfig] = None,
    ):
        level = str(log_level).upper()
        if level not in LOG_LEVELS:
            raise ConfigurationError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        self.log_level = level
        self.network = network or NetworkConfig()
        self.playback = playback or PlaybackConfig()

    @property
    def logging_level(self) -> int:
        """Numeric logging level."""
        return getattr(logging, self.log_level)
