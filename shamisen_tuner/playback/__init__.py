"""Playback layer - Hand resolved frequencies to a tone player.

The audio backend itself lives outside this package; this layer defines:
- The TonePlayer interface (play / stop / tone type)
- TuningSettings, the caller-held tuning inputs
- A driver that plays a single string or cycles through all three
"""

from .base import ToneType, TonePlayer, RecordingTonePlayer
from .settings import TuningSettings, snap_fine_tune
from .driver import play_string, StringCycle

__all__ = [
    "ToneType",
    "TonePlayer",
    "RecordingTonePlayer",
    "TuningSettings",
    "snap_fine_tune",
    "play_string",
    "StringCycle",
]
