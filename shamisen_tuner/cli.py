"""Command-line interface for Shamisen Tuner.

Provides commands for:
- strings: Show the frequency and note name of each string
- catalog: List base notes, tuning modes and fine tune steps
- cycle: Dry-run auto-play, stepping through the strings
"""

import math
from fractions import Fraction

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .core import (
    BASE_NOTE_LIST,
    DEFAULT_BASE_NOTE_ID,
    DEFAULT_CALIBRATION_HZ,
    DEFAULT_FINE_TUNE_CENTS,
    DEFAULT_TUNING_MODE_ID,
    FINE_TUNE_STEPS,
    STRING_LIST,
    TUNING_MODE_LIST,
    get_string,
    get_tuning_mode,
)
from .playback import RecordingTonePlayer, StringCycle, ToneType, TuningSettings
from .resolution import diagnose_base

app = typer.Typer(
    name="shamisen-tuner",
    help="Reference pitches for shamisen tuning",
    rich_markup_mode="markdown",
)
console = Console()


def _base_note_option():
    return typer.Option(
        DEFAULT_BASE_NOTE_ID, "-b", "--base-note", help="Base note id, e.g. note_d4"
    )


def _mode_option():
    return typer.Option(
        DEFAULT_TUNING_MODE_ID, "-m", "--mode", help="Tuning mode: honchoshi/niagari/sansagari"
    )


def _calibration_option():
    return typer.Option(
        DEFAULT_CALIBRATION_HZ, "-c", "--calibration", help="A4 calibration pitch in Hz"
    )


def _fine_tune_option():
    return typer.Option(
        DEFAULT_FINE_TUNE_CENTS, "-f", "--fine-tune", help="Fine tune in cents (-50 to +50)"
    )


def _settings_or_exit(
    base_note: str,
    mode: str,
    calibration: float,
    fine_tune: float,
    quiet: bool = False,
) -> TuningSettings:
    """Build settings, exiting on anything the resolvers would reject."""
    settings = TuningSettings(
        calibration_hz=calibration,
        base_note_id=base_note,
        tuning_mode_id=mode,
        fine_tune_cents=fine_tune,
    )

    if not math.isfinite(calibration) or not math.isfinite(fine_tune):
        console.print(
            f"[red]Error: calibration and fine tune must be finite numbers: "
            f"{calibration:g} Hz, {fine_tune:g} cents[/red]"
        )
        raise typer.Exit(1)

    failure = diagnose_base(base_note, calibration)
    if failure is not None:
        console.print(
            f"[red]Error: {failure.description}: {escape(base_note)} @ {calibration:g} Hz[/red]"
        )
        raise typer.Exit(1)
    if get_tuning_mode(mode) is None:
        console.print(f"[red]Error: unknown tuning mode: {escape(mode)}[/red]")
        raise typer.Exit(1)

    # Out-of-range values still resolve; just point them out
    if not quiet:
        for problem in settings.validate():
            console.print(f"[yellow]Warning: {escape(problem)}[/yellow]")

    return settings


@app.command()
def strings(
    base_note: str = _base_note_option(),
    mode: str = _mode_option(),
    calibration: float = _calibration_option(),
    fine_tune: float = _fine_tune_option(),
    json_output: bool = typer.Option(
        False, "--json", help="Output results as JSON (for scripting)"
    ),
):
    """Show the frequency and note name of each string.

    **Examples:**

        shamisen-tuner strings -b note_d4

        shamisen-tuner strings -b note_c4 -m niagari -c 442 -f 25
    """
    settings = _settings_or_exit(base_note, mode, calibration, fine_tune, quiet=json_output)
    frequencies = settings.string_frequencies()
    names = settings.note_names()

    if json_output:
        result = {
            "settings": settings.to_dict(),
            "strings": [
                {
                    "string_id": sf.string_id,
                    "label": get_string(sf.string_id).label,
                    "note": names[sf.string_id],
                    "frequency": sf.frequency,
                }
                for sf in frequencies
            ],
        }
        console.print_json(data=result)
        return

    tuning_mode = get_tuning_mode(mode)
    table = Table(title=f"{tuning_mode.label} ({tuning_mode.id})")
    table.add_column("String", style="cyan")
    table.add_column("Note", style="green")
    table.add_column("Frequency (Hz)", style="yellow", justify="right")

    for sf in frequencies:
        table.add_row(
            get_string(sf.string_id).label,
            names[sf.string_id],
            f"{sf.frequency:.2f}",
        )

    console.print(table)


@app.command()
def catalog():
    """List base notes, tuning modes and fine tune steps."""
    notes_table = Table(title="Base Notes")
    notes_table.add_column("Id", style="cyan")
    notes_table.add_column("Label", style="green")
    notes_table.add_column("Note", style="yellow")
    notes_table.add_column("Semitones from A4", style="magenta", justify="right")
    for base_note in BASE_NOTE_LIST:
        notes_table.add_row(
            base_note.id,
            base_note.display_label,
            base_note.note,
            str(base_note.semitones_from_a4),
        )
    console.print(notes_table)

    modes_table = Table(title="Tuning Modes")
    modes_table.add_column("Id", style="cyan")
    modes_table.add_column("Label", style="green")
    for shamisen_string in STRING_LIST:
        modes_table.add_column(shamisen_string.label, style="yellow", justify="right")
    for tuning_mode in TUNING_MODE_LIST:
        ratios = [
            str(Fraction(tuning_mode.ratio_for(s.id)).limit_denominator(16))
            for s in STRING_LIST
        ]
        modes_table.add_row(tuning_mode.id, tuning_mode.label, *ratios)
    console.print(modes_table)

    steps = ", ".join(f"{label} ({value:+g})" for value, label in FINE_TUNE_STEPS)
    console.print(f"\n[bold]Fine tune steps (cents):[/bold] {steps}")


@app.command()
def cycle(
    base_note: str = _base_note_option(),
    mode: str = _mode_option(),
    calibration: float = _calibration_option(),
    fine_tune: float = _fine_tune_option(),
    count: int = typer.Option(
        3, "-n", "--count", min=1, help="Number of tones to step through"
    ),
    tone_type: str = typer.Option(
        "electronic", "--tone-type", help="Tone timbre: electronic/pipe"
    ),
):
    """Dry-run auto-play: step through the strings without sounding them."""
    try:
        kind = ToneType(tone_type.lower())
    except ValueError:
        valid = ", ".join(t.value for t in ToneType)
        console.print(f"[red]Error: unknown tone type '{escape(tone_type)}'. Valid: {valid}[/red]")
        raise typer.Exit(1)

    settings = _settings_or_exit(base_note, mode, calibration, fine_tune)
    names = settings.note_names()

    player = RecordingTonePlayer()
    player.set_tone_type(kind)
    string_cycle = StringCycle(player, settings)

    console.print(f"[blue]Auto-play ({kind.value}):[/blue]")
    for step in range(1, count + 1):
        played = string_cycle.advance()
        if played is None:
            console.print(f"[red]Error: could not resolve {string_cycle.next_string_id}[/red]")
            raise typer.Exit(1)
        console.print(
            f"  {step}. {get_string(played.string_id).label} "
            f"{names[played.string_id]} {played.frequency:.2f} Hz"
        )

    string_cycle.stop()
    console.print(f"[green]Stopped after {count} tone(s)[/green]")


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
