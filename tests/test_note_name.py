"""Tests for note-name resolution."""

import pytest

from shamisen_tuner.core import BASE_NOTE_LIST
from shamisen_tuner.resolution import (
    note_name_from_semitones,
    ratio_to_semitones,
    resolve_all_note_names,
    resolve_string_note_name,
)


class TestStringNoteName:
    """Tests for resolve_string_note_name."""

    def test_d4_honchoshi(self):
        assert resolve_string_note_name("string_1", "note_d4", "honchoshi") == "D"
        assert resolve_string_note_name("string_2", "note_d4", "honchoshi") == "G"
        assert resolve_string_note_name("string_3", "note_d4", "honchoshi") == "D'"

    def test_d4_niagari_second_string(self):
        assert resolve_string_note_name("string_2", "note_d4", "niagari") == "A"

    def test_d4_sansagari_third_string(self):
        assert resolve_string_note_name("string_3", "note_d4", "sansagari") == "C'"

    def test_c4_honchoshi(self):
        assert resolve_string_note_name("string_1", "note_c4", "honchoshi") == "C"
        assert resolve_string_note_name("string_2", "note_c4", "honchoshi") == "F"
        assert resolve_string_note_name("string_3", "note_c4", "honchoshi") == "C'"

    def test_a3_first_string_has_no_mark(self):
        assert resolve_string_note_name("string_1", "note_a3", "honchoshi") == "A"

    def test_a3_third_string_is_a4_without_mark(self):
        # A4 is still octave 4
        assert resolve_string_note_name("string_3", "note_a3", "honchoshi") == "A"

    def test_flat_spelling(self):
        assert resolve_string_note_name("string_1", "note_bb3", "honchoshi") == "B♭"
        assert resolve_string_note_name("string_1", "note_ds4", "honchoshi") == "E♭"

    @pytest.mark.parametrize("base_note", BASE_NOTE_LIST, ids=lambda n: n.id)
    def test_first_string_matches_catalog_note(self, base_note):
        name = resolve_string_note_name("string_1", base_note.id, "honchoshi")
        # The catalog spells D# as sharp, the display table as E flat
        expected = {"D#": "E♭"}.get(base_note.note, base_note.note)
        assert name == expected

    @pytest.mark.parametrize("base_note", BASE_NOTE_LIST, ids=lambda n: n.id)
    def test_octave_string_repeats_pitch_class(self, base_note):
        first = resolve_string_note_name("string_1", base_note.id, "honchoshi")
        third = resolve_string_note_name("string_3", base_note.id, "honchoshi")
        assert third.rstrip("'") == first

    def test_idempotent(self):
        assert resolve_string_note_name("string_2", "note_e4", "niagari") == resolve_string_note_name(
            "string_2", "note_e4", "niagari"
        )

    @pytest.mark.parametrize(
        "string_id, base_note_id, tuning_mode_id",
        [
            ("string_1", "invalid", "honchoshi"),
            ("invalid", "note_d4", "honchoshi"),
            ("string_1", "note_d4", "invalid"),
            ("invalid", "invalid", "invalid"),
        ],
    )
    def test_unknown_id_gives_question_mark(self, string_id, base_note_id, tuning_mode_id):
        assert resolve_string_note_name(string_id, base_note_id, tuning_mode_id) == "?"


class TestAllNoteNames:
    """Tests for resolve_all_note_names."""

    def test_d4_honchoshi(self):
        assert resolve_all_note_names("note_d4", "honchoshi") == {
            "string_1": "D",
            "string_2": "G",
            "string_3": "D'",
        }

    def test_unknown_mode(self):
        names = resolve_all_note_names("note_d4", "invalid")
        assert set(names.values()) == {"?"}


class TestSemitoneHelpers:
    """Tests for the ratio and semitone helpers."""

    @pytest.mark.parametrize(
        "ratio, semitones",
        [(1.0, 0), (4 / 3, 5), (3 / 2, 7), (16 / 9, 10), (2.0, 12)],
    )
    def test_ratio_to_semitones(self, ratio, semitones):
        assert ratio_to_semitones(ratio) == semitones

    def test_a4(self):
        assert note_name_from_semitones(0) == "A"

    def test_c5_is_marked(self):
        assert note_name_from_semitones(3) == "C'"

    def test_b4_is_not_marked(self):
        assert note_name_from_semitones(2) == "B"

    def test_negative_offsets_wrap(self):
        assert note_name_from_semitones(-9) == "C"
        assert note_name_from_semitones(-10) == "B"
        assert note_name_from_semitones(-21) == "C"

    def test_two_octaves_up_gets_single_mark(self):
        assert note_name_from_semitones(24) == "A'"
