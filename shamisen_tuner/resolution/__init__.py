"""Resolution layer - Tuning inputs to frequencies and note names.

This layer holds the pure pitch computations:
- Base frequency from base note, calibration pitch and fine tune
- String frequencies from the base frequency and a tuning mode's ratios
- Display note names, independent of calibration and fine tune
"""

from .errors import (
    ResolutionFailure,
    ResolutionWarning,
    diagnose_base,
    diagnose_string,
)
from .frequency import (
    StringFrequency,
    resolve_base_frequency,
    resolve_string_frequency,
    resolve_all_string_frequencies,
)
from .note_name import (
    ratio_to_semitones,
    note_name_from_semitones,
    resolve_string_note_name,
    resolve_all_note_names,
)

__all__ = [
    # Errors
    "ResolutionFailure",
    "ResolutionWarning",
    "diagnose_base",
    "diagnose_string",
    # Frequencies
    "StringFrequency",
    "resolve_base_frequency",
    "resolve_string_frequency",
    "resolve_all_string_frequencies",
    # Note names
    "ratio_to_semitones",
    "note_name_from_semitones",
    "resolve_string_note_name",
    "resolve_all_note_names",
]
