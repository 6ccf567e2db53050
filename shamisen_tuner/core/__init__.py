"""Core types and constants for Shamisen Tuner."""

from .catalog import (
    BaseNote,
    TuningMode,
    TuningRatios,
    ShamisenString,
    BASE_NOTES,
    BASE_NOTE_LIST,
    TUNING_MODES,
    TUNING_MODE_LIST,
    SHAMISEN_STRINGS,
    STRING_LIST,
    STRING_IDS,
    STRING_1,
    STRING_2,
    STRING_3,
    get_base_note,
    get_tuning_mode,
    get_string,
)
from .constants import (
    PITCH_NAMES,
    DEFAULT_CALIBRATION_HZ,
    DEFAULT_BASE_NOTE_ID,
    DEFAULT_TUNING_MODE_ID,
    DEFAULT_FINE_TUNE_CENTS,
    FINE_TUNE_STEPS,
    UNKNOWN_NOTE_NAME,
)

__all__ = [
    "BaseNote",
    "TuningMode",
    "TuningRatios",
    "ShamisenString",
    "BASE_NOTES",
    "BASE_NOTE_LIST",
    "TUNING_MODES",
    "TUNING_MODE_LIST",
    "SHAMISEN_STRINGS",
    "STRING_LIST",
    "STRING_IDS",
    "STRING_1",
    "STRING_2",
    "STRING_3",
    "get_base_note",
    "get_tuning_mode",
    "get_string",
    "PITCH_NAMES",
    "DEFAULT_CALIBRATION_HZ",
    "DEFAULT_BASE_NOTE_ID",
    "DEFAULT_TUNING_MODE_ID",
    "DEFAULT_FINE_TUNE_CENTS",
    "FINE_TUNE_STEPS",
    "UNKNOWN_NOTE_NAME",
]
