"""Global constants for Shamisen Tuner."""

# Chromatic pitch names, index 0 = C
PITCH_NAMES = ["C", "C#", "D", "E♭", "E", "F", "F#", "G", "G#", "A", "B♭", "B"]

# A sits at index 9 of PITCH_NAMES
A4_PITCH_INDEX = 9
A4_OCTAVE = 4
SEMITONES_PER_OCTAVE = 12
CENTS_PER_SEMITONE = 100

# Appended to a note name one octave above the open-string register
OCTAVE_MARK = "'"

# Returned by the note-name resolver when any lookup fails
UNKNOWN_NOTE_NAME = "?"

# Defaults
DEFAULT_CALIBRATION_HZ = 440.0
DEFAULT_BASE_NOTE_ID = "note_c4"  # 四本
DEFAULT_TUNING_MODE_ID = "honchoshi"
DEFAULT_FINE_TUNE_CENTS = 0.0

# Calibration (A4) range
CALIBRATION_MIN_HZ = 430.0
CALIBRATION_MAX_HZ = 450.0

# Fine tune range, +/- half a semitone
FINE_TUNE_MIN_CENTS = -50.0
FINE_TUNE_MAX_CENTS = 50.0

# Discrete fine tune steps as (cents, label)
FINE_TUNE_STEPS = (
    (-50.0, "-1/2"),
    (-25.0, "-1/4"),
    (0.0, "0"),
    (25.0, "+1/4"),
    (50.0, "+1/2"),
)
