"""Failure conditions for frequency resolution.

Resolvers never raise for bad input. They run these guard checks and return
None (or the "?" note name) on the first failing condition. The diagnose
functions are public so callers can report *why* a resolution failed.
"""

from enum import Enum
from typing import Optional

from ..core import get_base_note, get_tuning_mode


class ResolutionFailure(Enum):
    """Reasons a frequency could not be resolved."""

    INVALID_CALIBRATION = "invalid_calibration"
    UNKNOWN_BASE_NOTE = "unknown_base_note"
    UNKNOWN_TUNING_MODE = "unknown_tuning_mode"
    INVALID_BASE_FREQUENCY = "invalid_base_frequency"
    UNKNOWN_STRING = "unknown_string"

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    ResolutionFailure.INVALID_CALIBRATION: "calibration pitch must be positive",
    ResolutionFailure.UNKNOWN_BASE_NOTE: "unknown base note",
    ResolutionFailure.UNKNOWN_TUNING_MODE: "unknown tuning mode",
    ResolutionFailure.INVALID_BASE_FREQUENCY: "base frequency must be positive",
    ResolutionFailure.UNKNOWN_STRING: "unknown string",
}


class ResolutionWarning(UserWarning):
    """Issued when a tone could not be resolved for playback."""


def diagnose_base(base_note_id: str, calibration_hz: float) -> Optional[ResolutionFailure]:
    """Check base-frequency inputs, returning the first failure or None."""
    if calibration_hz <= 0:
        return ResolutionFailure.INVALID_CALIBRATION
    if get_base_note(base_note_id) is None:
        return ResolutionFailure.UNKNOWN_BASE_NOTE
    return None


def diagnose_string(
    string_id: str,
    base_frequency_hz: float,
    tuning_mode_id: str,
) -> Optional[ResolutionFailure]:
    """Check string-frequency inputs, returning the first failure or None."""
    if base_frequency_hz <= 0:
        return ResolutionFailure.INVALID_BASE_FREQUENCY
    tuning_mode = get_tuning_mode(tuning_mode_id)
    if tuning_mode is None:
        return ResolutionFailure.UNKNOWN_TUNING_MODE
    if tuning_mode.ratio_for(string_id) is None:
        return ResolutionFailure.UNKNOWN_STRING
    return None
