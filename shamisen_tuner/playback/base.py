"""Base classes for tone playback."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional, Tuple


class ToneType(Enum):
    """Timbre of the reference tone."""

    ELECTRONIC = "electronic"
    PIPE = "pipe"  # pitch-pipe style, softer attack


class TonePlayer(ABC):
    """Abstract base class for anything that can sound a reference tone.

    Implementations wrap an audio backend. Resolvers never call a player
    themselves; the playback driver feeds resolved frequencies into it.
    """

    @abstractmethod
    def play_tone(self, frequency_hz: float) -> None:
        """
        Start sounding a tone, replacing any tone already playing.

        Args:
            frequency_hz: Tone frequency in Hz
        """
        pass

    @abstractmethod
    def stop_tone(self) -> None:
        """Stop the current tone, if any."""
        pass

    def set_tone_type(self, tone_type: ToneType) -> None:
        """Select the timbre. Players with a single timbre ignore this."""
        pass


class RecordingTonePlayer(TonePlayer):
    """Tone player that records calls instead of producing sound."""

    def __init__(self):
        self.calls: List[Tuple[str, Optional[object]]] = []
        self.current_frequency: Optional[float] = None
        self.tone_type = ToneType.ELECTRONIC

    def play_tone(self, frequency_hz: float) -> None:
        self.calls.append(("play_tone", frequency_hz))
        self.current_frequency = frequency_hz

    def stop_tone(self) -> None:
        self.calls.append(("stop_tone", None))
        self.current_frequency = None

    def set_tone_type(self, tone_type: ToneType) -> None:
        self.calls.append(("set_tone_type", tone_type))
        self.tone_type = tone_type

    @property
    def is_playing(self) -> bool:
        return self.current_frequency is not None

    @property
    def played_frequencies(self) -> List[float]:
        """Frequencies passed to play_tone, in call order."""
        return [arg for name, arg in self.calls if name == "play_tone"]
