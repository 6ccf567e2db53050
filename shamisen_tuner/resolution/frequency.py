"""Frequency resolution - base note and per-string frequencies in Hz.

All functions are pure: they read only the frozen catalogs and their
arguments, and signal bad input by returning None instead of raising.
"""

from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from ..core import STRING_IDS, get_base_note, get_tuning_mode
from ..core.constants import CENTS_PER_SEMITONE, SEMITONES_PER_OCTAVE
from .errors import diagnose_base, diagnose_string


@dataclass(frozen=True)
class StringFrequency:
    """A resolved string and its frequency."""

    string_id: str
    frequency: float  # Hz


def resolve_base_frequency(
    base_note_id: str,
    calibration_hz: float,
    fine_tune_cents: float,
) -> Optional[float]:
    """
    Resolve the frequency of the first string (the base note).

    f = calibration * 2^(n / 12), where n is the base note's offset from A4
    in semitones plus the fine tune in hundredths of a semitone. The fine
    tune is not clamped.

    Args:
        base_note_id: Base note id, e.g. 'note_d4'
        calibration_hz: Frequency of A4 in Hz, e.g. 440
        fine_tune_cents: Fine tune offset in cents

    Returns:
        Frequency in Hz, or None if the calibration is not positive or
        the base note is unknown
    """
    if diagnose_base(base_note_id, calibration_hz) is not None:
        return None

    base_note = get_base_note(base_note_id)
    semitones = base_note.semitones_from_a4 + fine_tune_cents / CENTS_PER_SEMITONE
    return float(calibration_hz * np.power(2.0, semitones / SEMITONES_PER_OCTAVE))


def resolve_string_frequency(
    string_id: str,
    base_frequency_hz: float,
    tuning_mode_id: str,
) -> Optional[float]:
    """
    Resolve the frequency of one string from the base frequency.

    Args:
        string_id: 'string_1', 'string_2' or 'string_3'
        base_frequency_hz: Frequency of the first string in Hz
        tuning_mode_id: Tuning mode id, e.g. 'honchoshi'

    Returns:
        Frequency in Hz, or None if the base frequency is not positive or
        the mode or string is unknown
    """
    if diagnose_string(string_id, base_frequency_hz, tuning_mode_id) is not None:
        return None

    ratio = get_tuning_mode(tuning_mode_id).ratio_for(string_id)
    return base_frequency_hz * ratio


def resolve_all_string_frequencies(
    base_note_id: str,
    tuning_mode_id: str,
    calibration_hz: float,
    fine_tune_cents: float,
    strict: bool = False,
) -> List[StringFrequency]:
    """
    Resolve all three strings at once.

    Strings that fail to resolve are left out of the result. With
    strict=True any single failure empties the whole result instead.

    Returns:
        List of StringFrequency in string order, empty if the base
        frequency could not be resolved
    """
    base_frequency = resolve_base_frequency(base_note_id, calibration_hz, fine_tune_cents)
    if base_frequency is None:
        return []

    results = []
    for string_id in STRING_IDS:
        frequency = resolve_string_frequency(string_id, base_frequency, tuning_mode_id)
        if frequency is None:
            if strict:
                return []
            continue
        results.append(StringFrequency(string_id=string_id, frequency=frequency))

    return results
