"""Catalog data - base notes, tuning modes and strings.

Every entry is addressed by its id. Catalog order is only used for display
and for iterating the three strings one/two/three.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Tuple


@dataclass(frozen=True)
class BaseNote:
    """A selectable base note (基音)."""

    id: str
    display_label: str  # 本 count, e.g. "六本"
    note: str  # pitch class, e.g. "D"
    semitones_from_a4: int


@dataclass(frozen=True)
class TuningRatios:
    """Just-intonation ratios of each string relative to the first."""

    string1: float
    string2: float
    string3: float


@dataclass(frozen=True)
class TuningMode:
    """A traditional shamisen tuning (調子)."""

    id: str
    label: str
    ratios: TuningRatios

    def ratio_for(self, string_id: str) -> Optional[float]:
        """Get the ratio for a string id, or None if the id is unknown."""
        slot = _RATIO_SLOTS.get(string_id)
        if slot is None:
            return None
        return getattr(self.ratios, slot)


@dataclass(frozen=True)
class ShamisenString:
    """One of the three strings (糸)."""

    id: str
    label: str
    note_label: str  # static label for the default honchoshi tuning


STRING_1 = "string_1"
STRING_2 = "string_2"
STRING_3 = "string_3"

_RATIO_SLOTS = {
    STRING_1: "string1",
    STRING_2: "string2",
    STRING_3: "string3",
}


def _index(entries) -> Mapping[str, object]:
    return MappingProxyType({entry.id: entry for entry in entries})


# 一本 to 八本: A3 to E4
BASE_NOTE_LIST: Tuple[BaseNote, ...] = (
    BaseNote("note_a3", "一本", "A", -12),
    BaseNote("note_bb3", "二本", "B♭", -11),
    BaseNote("note_b3", "三本", "B", -10),
    BaseNote("note_c4", "四本", "C", -9),
    BaseNote("note_cs4", "五本", "C#", -8),
    BaseNote("note_d4", "六本", "D", -7),
    BaseNote("note_ds4", "七本", "D#", -6),
    BaseNote("note_e4", "八本", "E", -5),
)

TUNING_MODE_LIST: Tuple[TuningMode, ...] = (
    TuningMode(
        "honchoshi",
        "本調子",
        TuningRatios(string1=1.0, string2=4 / 3, string3=2.0),  # 4th, octave
    ),
    TuningMode(
        "niagari",
        "二上り",
        TuningRatios(string1=1.0, string2=3 / 2, string3=2.0),  # 5th, octave
    ),
    TuningMode(
        "sansagari",
        "三下り",
        TuningRatios(string1=1.0, string2=4 / 3, string3=16 / 9),  # 4th, minor 7th
    ),
)

STRING_LIST: Tuple[ShamisenString, ...] = (
    ShamisenString(STRING_1, "一の糸", "D"),
    ShamisenString(STRING_2, "二の糸", "G"),
    ShamisenString(STRING_3, "三の糸", "D'"),
)

STRING_IDS: Tuple[str, ...] = tuple(s.id for s in STRING_LIST)

BASE_NOTES: Mapping[str, BaseNote] = _index(BASE_NOTE_LIST)
TUNING_MODES: Mapping[str, TuningMode] = _index(TUNING_MODE_LIST)
SHAMISEN_STRINGS: Mapping[str, ShamisenString] = _index(STRING_LIST)


def get_base_note(base_note_id: str) -> Optional[BaseNote]:
    """Look up a base note by id."""
    return BASE_NOTES.get(base_note_id)


def get_tuning_mode(tuning_mode_id: str) -> Optional[TuningMode]:
    """Look up a tuning mode by id."""
    return TUNING_MODES.get(tuning_mode_id)


def get_string(string_id: str) -> Optional[ShamisenString]:
    """Look up a string by id."""
    return SHAMISEN_STRINGS.get(string_id)

