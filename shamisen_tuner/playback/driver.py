"""Playback driver - feeds resolved string frequencies to a tone player."""

import warnings
from typing import Optional

from ..core import STRING_IDS
from ..resolution import (
    ResolutionWarning,
    StringFrequency,
    diagnose_base,
    diagnose_string,
    resolve_base_frequency,
    resolve_string_frequency,
)
from .base import TonePlayer
from .settings import TuningSettings


def _warn_unplayable(string_id, failure):
    warnings.warn(
        f"Cannot play {string_id}: {failure.description}",
        ResolutionWarning,
        stacklevel=3,
    )


def play_string(
    player: TonePlayer,
    settings: TuningSettings,
    string_id: str,
) -> Optional[float]:
    """
    Resolve one string and play it.

    Args:
        player: Tone player to send the frequency to
        settings: Current tuning settings
        string_id: String to play

    Returns:
        The frequency played, or None if it could not be resolved. The
        player is left untouched on failure and a ResolutionWarning is issued.
    """
    base_frequency = resolve_base_frequency(
        settings.base_note_id, settings.calibration_hz, settings.fine_tune_cents
    )
    if base_frequency is None:
        failure = diagnose_base(settings.base_note_id, settings.calibration_hz)
        _warn_unplayable(string_id, failure)
        return None

    frequency = resolve_string_frequency(string_id, base_frequency, settings.tuning_mode_id)
    if frequency is None:
        failure = diagnose_string(string_id, base_frequency, settings.tuning_mode_id)
        _warn_unplayable(string_id, failure)
        return None

    player.play_tone(frequency)
    return frequency


class StringCycle:
    """Steps through the three strings one/two/three, one tone per step.

    This is the per-tick step of auto-play; the caller owns the timer and
    may swap `settings` between ticks.
    """

    def __init__(self, player: TonePlayer, settings: Optional[TuningSettings] = None):
        self.player = player
        self.settings = settings or TuningSettings()
        self.active_string_id: Optional[str] = None
        self._position = 0

    @property
    def next_string_id(self) -> str:
        return STRING_IDS[self._position]

    def advance(self) -> Optional[StringFrequency]:
        """
        Play the next string and move on.

        Returns:
            The string played, or None if it could not be resolved. A
            failed string is not skipped; the next advance retries it.
        """
        string_id = self.next_string_id
        frequency = play_string(self.player, self.settings, string_id)
        if frequency is None:
            return None

        self.active_string_id = string_id
        self._position = (self._position + 1) % len(STRING_IDS)
        return StringFrequency(string_id=string_id, frequency=frequency)

    def stop(self) -> None:
        """Stop the tone and rewind to the first string."""
        self.player.stop_tone()
        self.active_string_id = None
        self._position = 0
