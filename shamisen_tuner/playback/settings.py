"""Tuning settings - the caller-held input bundle for the resolvers."""

from dataclasses import dataclass, replace
from typing import Dict, List, Optional

from ..core import get_base_note, get_tuning_mode
from ..core.constants import (
    CALIBRATION_MAX_HZ,
    CALIBRATION_MIN_HZ,
    DEFAULT_BASE_NOTE_ID,
    DEFAULT_CALIBRATION_HZ,
    DEFAULT_FINE_TUNE_CENTS,
    DEFAULT_TUNING_MODE_ID,
    FINE_TUNE_MAX_CENTS,
    FINE_TUNE_MIN_CENTS,
    FINE_TUNE_STEPS,
)
from ..resolution import (
    StringFrequency,
    resolve_all_note_names,
    resolve_all_string_frequencies,
    resolve_base_frequency,
)


def snap_fine_tune(cents: float) -> float:
    """Snap cents to the nearest fine tune step; ties go toward zero."""
    return min(
        (value for value, _ in FINE_TUNE_STEPS),
        key=lambda value: (abs(value - cents), abs(value)),
    )


@dataclass
class TuningSettings:
    """Selected tuning inputs.

    Attributes:
        calibration_hz: Frequency of A4 (default: 440)
        base_note_id: Selected base note (default: 'note_c4', 四本)
        tuning_mode_id: Selected tuning mode (default: 'honchoshi')
        fine_tune_cents: Fine tune offset in cents (default: 0)

    The resolvers accept any values; range checks live here, on the
    caller's side.
    """

    calibration_hz: float = DEFAULT_CALIBRATION_HZ
    base_note_id: str = DEFAULT_BASE_NOTE_ID
    tuning_mode_id: str = DEFAULT_TUNING_MODE_ID
    fine_tune_cents: float = DEFAULT_FINE_TUNE_CENTS

    def clamped(self) -> "TuningSettings":
        """Copy with calibration clamped to range and fine tune snapped to a step."""
        calibration = min(max(self.calibration_hz, CALIBRATION_MIN_HZ), CALIBRATION_MAX_HZ)
        return replace(
            self,
            calibration_hz=calibration,
            fine_tune_cents=snap_fine_tune(self.fine_tune_cents),
        )

    def validate(self) -> List[str]:
        """List problems with these settings; empty if they are usable as-is."""
        problems = []
        if not CALIBRATION_MIN_HZ <= self.calibration_hz <= CALIBRATION_MAX_HZ:
            problems.append(
                f"calibration {self.calibration_hz:g} Hz outside "
                f"{CALIBRATION_MIN_HZ:g}-{CALIBRATION_MAX_HZ:g} Hz"
            )
        if get_base_note(self.base_note_id) is None:
            problems.append(f"unknown base note '{self.base_note_id}'")
        if get_tuning_mode(self.tuning_mode_id) is None:
            problems.append(f"unknown tuning mode '{self.tuning_mode_id}'")
        if not FINE_TUNE_MIN_CENTS <= self.fine_tune_cents <= FINE_TUNE_MAX_CENTS:
            problems.append(
                f"fine tune {self.fine_tune_cents:g} cents outside "
                f"{FINE_TUNE_MIN_CENTS:g} to {FINE_TUNE_MAX_CENTS:g}"
            )
        return problems

    @property
    def is_valid(self) -> bool:
        return not self.validate()

    def base_frequency(self) -> Optional[float]:
        return resolve_base_frequency(
            self.base_note_id, self.calibration_hz, self.fine_tune_cents
        )

    def string_frequencies(self, strict: bool = False) -> List[StringFrequency]:
        return resolve_all_string_frequencies(
            self.base_note_id,
            self.tuning_mode_id,
            self.calibration_hz,
            self.fine_tune_cents,
            strict=strict,
        )

    def note_names(self) -> Dict[str, str]:
        return resolve_all_note_names(self.base_note_id, self.tuning_mode_id)

    def to_dict(self) -> Dict[str, object]:
        """Convert to dictionary for JSON output."""
        return {
            "calibration_hz": self.calibration_hz,
            "base_note_id": self.base_note_id,
            "tuning_mode_id": self.tuning_mode_id,
            "fine_tune_cents": self.fine_tune_cents,
        }
