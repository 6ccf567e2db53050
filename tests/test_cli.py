"""Tests for the command-line interface."""

import json

import pytest
from typer.testing import CliRunner

from shamisen_tuner.cli import app

runner = CliRunner()


class TestStringsCommand:
    """Tests for `shamisen-tuner strings`."""

    def test_table_output(self):
        result = runner.invoke(app, ["strings", "-b", "note_d4"])

        assert result.exit_code == 0
        assert "293.66" in result.stdout
        assert "391.55" in result.stdout
        assert "587.33" in result.stdout
        assert "D'" in result.stdout

    def test_json_output(self):
        result = runner.invoke(app, ["strings", "-b", "note_d4", "-m", "niagari", "--json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["settings"]["tuning_mode_id"] == "niagari"
        assert [s["string_id"] for s in data["strings"]] == ["string_1", "string_2", "string_3"]
        assert [s["note"] for s in data["strings"]] == ["D", "A", "D'"]
        assert data["strings"][1]["frequency"] == pytest.approx(440.5, abs=0.01)

    def test_negative_fine_tune(self):
        result = runner.invoke(app, ["strings", "-b", "note_d4", "--fine-tune=-50", "--json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["strings"][0]["frequency"] < 293.66

    def test_unknown_base_note(self):
        result = runner.invoke(app, ["strings", "-b", "note_zz"])
        assert result.exit_code == 1
        assert "unknown base note" in result.stdout

    def test_unknown_mode(self):
        result = runner.invoke(app, ["strings", "-m", "invalid"])
        assert result.exit_code == 1
        assert "unknown tuning mode" in result.stdout

    def test_non_positive_calibration(self):
        result = runner.invoke(app, ["strings", "-c", "0"])
        assert result.exit_code == 1

    def test_out_of_range_calibration_warns_but_resolves(self):
        result = runner.invoke(app, ["strings", "-c", "460"])
        assert result.exit_code == 0
        assert "Warning" in result.stdout


class TestCatalogCommand:
    """Tests for `shamisen-tuner catalog`."""

    def test_lists_everything(self):
        result = runner.invoke(app, ["catalog"])

        assert result.exit_code == 0
        assert "note_a3" in result.stdout
        assert "note_e4" in result.stdout
        assert "sansagari" in result.stdout
        assert "16/9" in result.stdout
        assert "+1/4" in result.stdout


class TestCycleCommand:
    """Tests for `shamisen-tuner cycle`."""

    def test_steps_through_strings(self):
        result = runner.invoke(app, ["cycle", "-b", "note_d4", "-n", "4", "--tone-type", "pipe"])

        assert result.exit_code == 0
        assert "pipe" in result.stdout
        assert "4. 一の糸 D 293.66 Hz" in result.stdout
        assert "Stopped after 4 tone(s)" in result.stdout

    def test_unknown_tone_type(self):
        result = runner.invoke(app, ["cycle", "--tone-type", "organ"])
        assert result.exit_code == 1
        assert "unknown tone type" in result.stdout


class TestInputChecks:
    """Tests for input the resolvers would accept but the CLI must not."""

    def test_nan_calibration_rejected(self):
        result = runner.invoke(app, ["strings", "-c", "nan", "--json"])
        assert result.exit_code == 1
        assert "NaN" not in result.stdout
        assert "finite" in result.stdout

    def test_infinite_fine_tune_rejected(self):
        result = runner.invoke(app, ["strings", "-f", "inf", "--json"])
        assert result.exit_code == 1
        assert "finite" in result.stdout

    def test_json_output_is_strict(self):
        def reject(constant):
            raise ValueError(f"non-standard JSON constant: {constant}")

        result = runner.invoke(app, ["strings", "-c", "442", "--fine-tune=-25", "--json"])
        assert result.exit_code == 0
        json.loads(result.stdout, parse_constant=reject)

    @pytest.mark.parametrize("count", ["0", "-2"])
    def test_cycle_count_must_be_positive(self, count):
        result = runner.invoke(app, ["cycle", "-n", count])
        assert result.exit_code != 0
        assert "Stopped after" not in result.stdout

    def test_base_note_id_shown_verbatim(self):
        result = runner.invoke(app, ["strings", "-b", "[bold]x"])
        assert result.exit_code == 1
        assert "[bold]x" in result.stdout

    def test_mode_id_shown_verbatim(self):
        result = runner.invoke(app, ["strings", "-m", "[red]mode"])
        assert result.exit_code == 1
        assert "[red]mode" in result.stdout

    def test_tone_type_shown_verbatim(self):
        result = runner.invoke(app, ["cycle", "--tone-type", "[blue]organ"])
        assert result.exit_code == 1
        assert "[blue]organ" in result.stdout
