"""
Core music primitives.

These are the mathematical invariants that everything else composes on:
- NoteName: The 12 chromatic pitch classes (0-11), flat spelling
- Interval: Non-negative distance between pitches in semitones
- Pitch: Absolute pitch (pitch class + octave), parsed from text like 'Eb3'
- Mode: The seven church modes as whole/half-step patterns
- Key: Root pitch + mode, expanded into 7 notes
- guess_key: Find every key containing a set of notes
"""

from chuk_mcp_fretboard.core.pitch import (
    SEMITONE,
    TONE,
    Interval,
    NoteName,
    NoteParseError,
    Pitch,
    PitchRangeError,
    ascending,
    chromatic_roots,
)
from chuk_mcp_fretboard.core.scale import Key, Mode, guess_key

__all__ = [
    # Pitch
    "NoteName",
    "Interval",
    "Pitch",
    "SEMITONE",
    "TONE",
    "ascending",
    "chromatic_roots",
    "NoteParseError",
    "PitchRangeError",
    # Scale
    "Mode",
    "Key",
    "guess_key",
]
