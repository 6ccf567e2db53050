"""Note names for display.

Names are derived from the base note and tuning mode only; calibration and
fine tune never change which note a string is labelled with. The semitone
offset of each string is re-derived from its just ratio as the nearest
equal-tempered step.
"""

from typing import Dict

import numpy as np

from ..core import STRING_IDS, get_base_note, get_tuning_mode
from ..core.constants import (
    A4_OCTAVE,
    A4_PITCH_INDEX,
    OCTAVE_MARK,
    PITCH_NAMES,
    SEMITONES_PER_OCTAVE,
    UNKNOWN_NOTE_NAME,
)


def ratio_to_semitones(ratio: float) -> int:
    """Nearest equal-tempered semitone count for a frequency ratio (3/2 -> 7)."""
    return int(round(SEMITONES_PER_OCTAVE * np.log2(ratio)))


def note_name_from_semitones(semitones_from_a4: int) -> str:
    """
    Get the display name for a pitch given as semitones from A4.

    Pitches in octave 5 or above get a single prime mark, e.g. "D'".
    """
    # Shift so that C4 = 0; floor division keeps negatives in the right octave
    from_c4 = semitones_from_a4 + A4_PITCH_INDEX
    name = PITCH_NAMES[from_c4 % SEMITONES_PER_OCTAVE]
    octave = A4_OCTAVE + from_c4 // SEMITONES_PER_OCTAVE

    if octave >= 5:
        return f"{name}{OCTAVE_MARK}"
    return name


def resolve_string_note_name(
    string_id: str,
    base_note_id: str,
    tuning_mode_id: str,
) -> str:
    """
    Get the display note name of a string.

    Args:
        string_id: 'string_1', 'string_2' or 'string_3'
        base_note_id: Base note id, e.g. 'note_d4'
        tuning_mode_id: Tuning mode id, e.g. 'honchoshi'

    Returns:
        Note name such as "D", "G" or "D'", or "?" if any id is unknown
    """
    base_note = get_base_note(base_note_id)
    if base_note is None:
        return UNKNOWN_NOTE_NAME

    tuning_mode = get_tuning_mode(tuning_mode_id)
    if tuning_mode is None:
        return UNKNOWN_NOTE_NAME

    ratio = tuning_mode.ratio_for(string_id)
    if ratio is None:
        return UNKNOWN_NOTE_NAME

    total = base_note.semitones_from_a4 + ratio_to_semitones(ratio)
    return note_name_from_semitones(total)


def resolve_all_note_names(base_note_id: str, tuning_mode_id: str) -> Dict[str, str]:
    """Note names for all three strings, keyed by string id."""
    return {
        string_id: resolve_string_note_name(string_id, base_note_id, tuning_mode_id)
        for string_id in STRING_IDS
    }
