"""
Constants and enums for the fretboard system.

No magic strings - use enums for constrained values.
"""

from enum import Enum

DEFAULT_NUM_FRETS = 21

# Diagram glyphs
MARKER_GLYPH = "O"
OPEN_GLYPH = "-"  # Unmarked open string (fret 0)
FRET_GLYPH = "|"  # Unmarked string crossing a fretwire


class TuningPreset(str, Enum):
    """Named tunings for common fretted instruments."""

    STANDARD = "standard"
    DROP_D = "drop_d"
    OPEN_G = "open_g"
    OPEN_D = "open_d"
    DADGAD = "dadgad"
    BASS = "bass"
    FIVE_STRING_BASS = "five_string_bass"
    UKULELE = "ukulele"
    MANDOLIN = "mandolin"


# Open notes, lowest string first
TUNING_PRESETS: dict[TuningPreset, tuple[str, ...]] = {
    TuningPreset.STANDARD: ("E2", "A2", "D3", "G3", "B3", "E4"),
    TuningPreset.DROP_D: ("D2", "A2", "D3", "G3", "B3", "E4"),
    TuningPreset.OPEN_G: ("D2", "G2", "D3", "G3", "B3", "D4"),
    TuningPreset.OPEN_D: ("D2", "A2", "D3", "Gb3", "A3", "D4"),
    TuningPreset.DADGAD: ("D2", "A2", "D3", "G3", "A3", "D4"),
    TuningPreset.BASS: ("E1", "A1", "D2", "G2"),
    TuningPreset.FIVE_STRING_BASS: ("B0", "E1", "A1", "D2", "G2"),
    TuningPreset.UKULELE: ("G4", "C4", "E4", "A4"),  # Re-entrant
    TuningPreset.MANDOLIN: ("G3", "D4", "A4", "E5"),
}


class ErrorMessages:
    """Standardized error messages."""

    INVALID_NOTE = "Invalid note: '{note}'. Expected a name and octave like 'E2' or 'Db4'."
    INVALID_MODE = "Invalid mode: '{mode}'. Expected one of: {modes}."
    UNKNOWN_TUNING = "Unknown tuning preset: '{preset}'."
    TUNING_CONFLICT = "Give either a tuning or a preset, not both."


class SuccessMessages:
    """Standardized summary lines."""

    NO_OCCURRENCES = "No occurrences."
    ONE_OCCURRENCE = "1 occurrence:"
    OCCURRENCES = "{count} occurrences:"
    NO_CANDIDATES = "No candidates."
    ONE_CANDIDATE = "1 candidate:"
    CANDIDATES = "{count} candidates:"
