"""
engine/
-------
Playback, command & recording layer.

    from engine import PlaybackEngine, Recorder
"""

from engine.commands import CommandDispatcher
from engine.stepper  import (
    PlaybackEngine, EngineState, SPEED_PRESETS,
    MIN_SPEED_MS, MAX_SPEED_MS, DEFAULT_SPEED_MS, speed_from_slider,
)
from engine.recorder import Recorder, RunMetrics

__all__ = [
    "PlaybackEngine",
    "EngineState",
    "SPEED_PRESETS",
    "MIN_SPEED_MS",
    "MAX_SPEED_MS",
    "DEFAULT_SPEED_MS",
    "speed_from_slider",
    "CommandDispatcher",
    "Recorder",
    "RunMetrics",
]
