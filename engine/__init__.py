"""
engine/
-------
Playback & recording layer.

    from engine import PlaybackController, TickScheduler, Recorder
"""

from engine.scheduler import TickScheduler, DeferredAction
from engine.playback  import (
    PlaybackController,
    PlaybackView,
    final_view,
    SPEED_PRESETS,
    BASE_INTERVAL,
    MIN_SPEED,
    MAX_SPEED,
)
from engine.recorder  import Recorder, RunMetrics

__all__ = [
    "TickScheduler",
    "DeferredAction",
    "PlaybackController",
    "PlaybackView",
    "final_view",
    "SPEED_PRESETS",
    "BASE_INTERVAL",
    "MIN_SPEED",
    "MAX_SPEED",
    "Recorder",
    "RunMetrics",
]
