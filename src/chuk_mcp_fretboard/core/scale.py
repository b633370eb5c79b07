"""
Scale primitives - Mode and Key, plus key guessing.

Modes are whole/half-step patterns. Keys are modes applied to a root pitch.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum

from .pitch import SEMITONE, TONE, Interval, Pitch, chromatic_roots


class Mode(str, Enum):
    """
    The seven church modes.

    Declaration order matters: key guessing reports candidates
    in this order for each root.
    """

    IONIAN = "ionian"
    DORIAN = "dorian"
    PHRYGIAN = "phrygian"
    LYDIAN = "lydian"
    MIXOLYDIAN = "mixolydian"
    AEOLIAN = "aeolian"
    LOCRIAN = "locrian"

    def pattern(self) -> tuple[Interval, ...]:
        """
        The 6 steps from the root to the seventh degree.

        The step back up to the octave is implied.
        """
        return _PATTERNS[self]

    def __str__(self) -> str:
        return self.value.capitalize()

    @classmethod
    def parse(cls, name: str) -> Mode:
        """Parse a mode from a name like 'dorian', 'Lydian', 'major' or 'minor'."""
        normalized = name.strip().lower()
        if normalized in _ALIASES:
            return _ALIASES[normalized]
        try:
            return cls(normalized)
        except ValueError:
            raise ValueError(f"Unknown mode: {name}") from None


_PATTERNS: dict[Mode, tuple[Interval, ...]] = {
    Mode.IONIAN: (TONE, TONE, SEMITONE, TONE, TONE, TONE),
    Mode.DORIAN: (TONE, SEMITONE, TONE, TONE, TONE, SEMITONE),
    Mode.PHRYGIAN: (SEMITONE, TONE, TONE, TONE, SEMITONE, TONE),
    Mode.LYDIAN: (TONE, TONE, SEMITONE, TONE, TONE, SEMITONE),
    Mode.MIXOLYDIAN: (TONE, TONE, TONE, SEMITONE, TONE, TONE),
    Mode.AEOLIAN: (TONE, SEMITONE, TONE, TONE, SEMITONE, TONE),
    Mode.LOCRIAN: (SEMITONE, TONE, TONE, SEMITONE, TONE, TONE),
}

_ALIASES: dict[str, Mode] = {
    "major": Mode.IONIAN,
    "minor": Mode.AEOLIAN,
}


@dataclass(frozen=True)
class Key:
    """
    A key is a root pitch plus a mode, expanded into its 7 notes.

    The notes keep the root's octave and climb from it, so a key
    rooted on D2 ends on C3.

    Examples:
        Key(Pitch.parse("C3"), Mode.IONIAN) = C Ionian
        Key(Pitch.parse("D2"), Mode.DORIAN).spell() == "D E F G A B C"
    """

    root: Pitch
    mode: Mode
    notes: tuple[Pitch, ...] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        notes = [self.root]
        for interval in self.mode.pattern():
            notes.append(notes[-1] + interval)
        object.__setattr__(self, "notes", tuple(notes))

    def contains_disregarding_octave(self, note: Pitch) -> bool:
        """Check whether the note's pitch class belongs to this key."""
        return any(note.same_class(member) for member in self.notes)

    def __contains__(self, note: object) -> bool:
        if not isinstance(note, Pitch):
            return False
        return self.contains_disregarding_octave(note)

    def note_names(self) -> list[str]:
        """Get the names of the notes in this key, without octaves."""
        return [note.spell() for note in self.notes]

    def spell(self) -> str:
        """Space-separated note names, e.g. 'D E F G A B C'."""
        return " ".join(self.note_names())

    def __str__(self) -> str:
        return f"{self.root.spell()} {self.mode!s}"

    def __format__(self, format_spec: str) -> str:
        # "#" selects the notes form, like an alternate display
        if format_spec == "#":
            return self.spell()
        return format(str(self), format_spec)


def guess_key(notes: Iterable[Pitch], root: Pitch | None = None) -> list[Key]:
    """
    Find every key that contains all of the given notes.

    Octaves are disregarded. Candidates are every mode over either the
    given root or the 12 chromatic roots from C0, so at most 84 keys are
    checked.

    Args:
        notes: The notes that must all belong to the key
        root: Optional root to restrict the search to

    Returns:
        Matching keys ordered by root, then by mode declaration order.
        Empty if nothing matches.
    """
    wanted = list(notes)
    roots = [root] if root is not None else chromatic_roots()

    candidates = []
    for candidate_root in roots:
        for mode in Mode:
            key = Key(candidate_root, mode)
            if all(key.contains_disregarding_octave(note) for note in wanted):
                candidates.append(key)
    return candidates
