"""
Guitar model - strings, frets and fretboard locations.

A Guitar holds one GuitarString per open note in its tuning. Strings
are numbered the way tablature numbers them: string 1 is the last
(highest) note of a low-to-high tuning.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from itertools import islice

from chuk_mcp_fretboard.constants import TUNING_PRESETS, TuningPreset
from chuk_mcp_fretboard.core.pitch import Pitch, ascending


@dataclass(frozen=True)
class FretboardLocation:
    """
    A place to fret a note: string number (from 1) and fret number.

    A fret_number of 0 indicates an open string.
    """

    string_number: int
    fret_number: int

    def __post_init__(self) -> None:
        if self.string_number < 1:
            raise ValueError(f"String number must be at least 1, got {self.string_number}")
        if self.fret_number < 0:
            raise ValueError(f"Fret number cannot be negative, got {self.fret_number}")

    @property
    def is_open(self) -> bool:
        return self.fret_number == 0

    def __str__(self) -> str:
        if self.is_open:
            return f"Open {self.string_number} string"
        return f"String {self.string_number}, fret {self.fret_number}"


class GuitarString:
    """
    A single string, holding the pitch of every fret.

    Index 0 is the open string; each fret is one semitone above the last.
    """

    def __init__(self, open_note: Pitch, num_frets: int) -> None:
        if num_frets < 0:
            raise ValueError(f"Number of frets cannot be negative, got {num_frets}")
        # One more than num_frets to include the open string
        self._frets = tuple(islice(ascending(open_note), num_frets + 1))

    @property
    def open_note(self) -> Pitch:
        return self._frets[0]

    @property
    def num_frets(self) -> int:
        return len(self._frets) - 1

    @property
    def frets(self) -> tuple[Pitch, ...]:
        return self._frets

    def __getitem__(self, fret: int) -> Pitch:
        return self._frets[fret]

    def __len__(self) -> int:
        return len(self._frets)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GuitarString):
            return NotImplemented
        return self._frets == other._frets

    def __hash__(self) -> int:
        return hash(self._frets)

    def __repr__(self) -> str:
        return f"GuitarString({self.open_note}, num_frets={self.num_frets})"


class Guitar:
    """
    A fretted instrument with any number of strings.

    The number of strings is determined by the tuning, which holds the
    open notes from lowest to highest. Build one directly or through
    a Luthier when a capo is involved.

    Example:
        guitar = Guitar(21, standard_tuning())
        guitar.locate(Pitch.parse("E3"))
    """

    def __init__(self, num_frets: int, tuning: Sequence[Pitch]) -> None:
        if num_frets < 0:
            raise ValueError(f"Number of frets cannot be negative, got {num_frets}")
        self._num_frets = num_frets
        self._strings = tuple(GuitarString(open_note, num_frets) for open_note in reversed(tuning))

    @property
    def num_frets(self) -> int:
        return self._num_frets

    @property
    def strings(self) -> tuple[GuitarString, ...]:
        """Strings in display order: index 0 is string number 1."""
        return self._strings

    @property
    def num_strings(self) -> int:
        return len(self._strings)

    @property
    def tuning(self) -> list[Pitch]:
        """Open notes from lowest to highest, as the guitar was strung."""
        return [string.open_note for string in reversed(self._strings)]

    def string(self, string_number: int) -> GuitarString:
        """Get a string by its 1-based number."""
        if not 1 <= string_number <= len(self._strings):
            raise IndexError(f"No string {string_number} on a {len(self._strings)}-string guitar")
        return self._strings[string_number - 1]

    def note_at(self, location: FretboardLocation) -> Pitch:
        """Get the pitch sounded at a fretboard location."""
        string = self.string(location.string_number)
        if location.fret_number > self._num_frets:
            raise IndexError(f"No fret {location.fret_number} on a {self._num_frets}-fret guitar")
        return string[location.fret_number]

    def locate(self, note: Pitch) -> list[FretboardLocation]:
        """
        Find every location of a note on the fretboard.

        Matching is octave sensitive: E3 does not match E4.
        Results are ordered by string number, then fret number.
        """
        locations = []
        for string_idx, string in enumerate(self._strings):
            for fret_idx, fret in enumerate(string.frets):
                if fret == note:
                    locations.append(FretboardLocation(string_idx + 1, fret_idx))
        return locations

    def __repr__(self) -> str:
        tuning = " ".join(str(note) for note in self.tuning)
        return f"Guitar(num_frets={self._num_frets}, tuning=[{tuning}])"


def standard_tuning() -> list[Pitch]:
    """Standard six-string guitar tuning, E2 A2 D3 G3 B3 E4."""
    return [Pitch.parse(name) for name in TUNING_PRESETS[TuningPreset.STANDARD]]
