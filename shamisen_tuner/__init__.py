"""Shamisen Tuner - Reference pitches for the three shamisen strings.

Architecture Layers:
    1. core/       - Constants and the base note / tuning mode / string catalogs
    2. resolution/ - Pure frequency and note-name computation
    3. playback/   - Tone player interface, tuning settings, string cycling
"""

__version__ = "0.1.0"

# Core types
from .core import BaseNote, TuningMode, ShamisenString

# Resolution layer
from .resolution import (
    ResolutionFailure,
    StringFrequency,
    resolve_base_frequency,
    resolve_string_frequency,
    resolve_all_string_frequencies,
    resolve_string_note_name,
)

# Playback layer
from .playback import (
    ToneType,
    TonePlayer,
    TuningSettings,
    StringCycle,
    play_string,
)

__all__ = [
    # Core
    "BaseNote",
    "TuningMode",
    "ShamisenString",
    # Resolution
    "ResolutionFailure",
    "StringFrequency",
    "resolve_base_frequency",
    "resolve_string_frequency",
    "resolve_all_string_frequencies",
    "resolve_string_note_name",
    # Playback
    "ToneType",
    "TonePlayer",
    "TuningSettings",
    "StringCycle",
    "play_string",
]
