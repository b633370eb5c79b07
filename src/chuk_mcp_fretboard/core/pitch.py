"""
Pitch primitives - NoteName, Interval and Pitch.

These are the foundational types for all pitch-related operations.
NoteName represents the 12 chromatic pitch classes (octave-independent).
Interval represents a non-negative distance in semitones.
Pitch is an absolute semitone offset from C0, so it carries an octave.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from enum import IntEnum
from functools import total_ordering
from itertools import islice
from typing import ClassVar

# Display names (module level to avoid IntEnum member issues)
_FLAT_NAMES: list[str] = [
    "C",
    "Db",
    "D",
    "Eb",
    "E",
    "F",
    "Gb",
    "G",
    "Ab",
    "A",
    "Bb",
    "B",
]

# Longest token first so "Db" is never read as "D" followed by junk
_NAME_PATTERN = "|".join(sorted(_FLAT_NAMES, key=len, reverse=True))
_PITCH_RE = re.compile(rf"(?P<name>{_NAME_PATTERN})(?P<octave>[0-9]+)")


class NoteParseError(ValueError):
    """Raised when text cannot be read as a note (e.g. 'Ab', 'Cb2', 'Gb-2')."""


class PitchRangeError(ValueError):
    """Raised when a pitch or interval would fall below zero."""


class NoteName(IntEnum):
    """
    The 12 chromatic pitch classes (0-11).

    Octave-independent - C2 and C3 are both NoteName.C.
    Spelling is always flat; sharps are never produced.
    """

    C = 0
    Db = 1
    D = 2
    Eb = 3
    E = 4
    F = 5
    Gb = 6
    G = 7
    Ab = 8
    A = 9
    Bb = 10
    B = 11

    def spell(self) -> str:
        """Get human-readable name."""
        return _FLAT_NAMES[self.value]

    def __str__(self) -> str:
        return self.spell()

    @classmethod
    def parse(cls, name: str) -> NoteName:
        """Parse a note name from an exact token like 'C', 'Db', 'Bb'."""
        if name in _FLAT_NAMES:
            return cls(_FLAT_NAMES.index(name))
        raise NoteParseError(f"Unknown note name: {name!r}")


@total_ordering
class Interval:
    """
    Distance between pitches in semitones.

    Intervals are never negative: subtracting two pitches gives
    the absolute distance between them.

    Immutable and hashable.
    """

    __slots__ = ("_semitones",)
    _semitones: int

    # Named intervals (class constants)
    UNISON: ClassVar[Interval]
    SEMITONE: ClassVar[Interval]
    TONE: ClassVar[Interval]
    OCTAVE: ClassVar[Interval]

    def __init__(self, semitones: int) -> None:
        """Create an interval with the given number of semitones."""
        if semitones < 0:
            raise PitchRangeError(f"Interval cannot be negative, got {semitones}")
        object.__setattr__(self, "_semitones", semitones)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("Interval is immutable")

    @property
    def semitones(self) -> int:
        """Number of semitones in this interval."""
        return self._semitones

    def __add__(self, other: Interval) -> Interval:
        """Add two intervals."""
        if not isinstance(other, Interval):
            return NotImplemented
        return Interval(self._semitones + other._semitones)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return bool(self._semitones == other._semitones)

    def __lt__(self, other: Interval) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return bool(self._semitones < other._semitones)

    def __hash__(self) -> int:
        return hash(self._semitones)

    def __repr__(self) -> str:
        for name in ("UNISON", "SEMITONE", "TONE", "OCTAVE"):
            named = getattr(Interval, name, None)
            if isinstance(named, Interval) and named._semitones == self._semitones:
                return f"Interval.{name}"
        return f"Interval({self._semitones})"

    def __str__(self) -> str:
        if self._semitones == 1:
            return "S"
        if self._semitones == 2:
            return "T"
        return f"{self._semitones}st"


Interval.UNISON = Interval(0)
Interval.SEMITONE = Interval(1)
Interval.TONE = Interval(2)
Interval.OCTAVE = Interval(12)

# Short aliases
SEMITONE = Interval.SEMITONE
TONE = Interval.TONE


@total_ordering
class Pitch:
    """
    An absolute pitch: semitones above C0.

    Equivalent to (pitch class, octave) where the pitch class is
    value % 12 and the octave is value // 12. Equality is octave
    sensitive; use same_class() to compare ignoring the octave.

    Immutable and hashable.

    Examples:
        Pitch.parse("Eb3").value == 39
        Pitch.parse("C0") + Interval.OCTAVE == Pitch.parse("C1")
    """

    __slots__ = ("_value",)
    _value: int

    def __init__(self, value: int) -> None:
        if value < 0:
            raise PitchRangeError(f"Pitch cannot be below C0, got {value}")
        object.__setattr__(self, "_value", value)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("Pitch is immutable")

    @classmethod
    def from_name(cls, name: NoteName, octave: int) -> Pitch:
        """Build a pitch from a note name and an octave number."""
        if octave < 0:
            raise PitchRangeError(f"Octave cannot be negative, got {octave}")
        return cls(int(name) + 12 * octave)

    @classmethod
    def parse(cls, text: str) -> Pitch:
        """
        Parse a pitch from a string like 'E2', 'Db4' or 'Bb10'.

        The whole string must match: a case-sensitive note name
        immediately followed by a non-negative octave number.

        Raises:
            NoteParseError: If the name is unknown, the octave is missing
                or non-numeric, or characters trail the octave.
        """
        match = _PITCH_RE.fullmatch(text)
        if match is None:
            raise NoteParseError(
                f"Invalid note: {text!r}. Expected a name and octave like 'E2' or 'Db4'"
            )
        name = NoteName.parse(match.group("name"))
        return cls.from_name(name, int(match.group("octave")))

    @classmethod
    def from_midi(cls, midi_note: int) -> Pitch:
        """Convert from a MIDI note number (C4 = 60, so C0 = 12)."""
        return cls(midi_note - 12)

    @property
    def value(self) -> int:
        """Semitones above C0."""
        return self._value

    @property
    def name(self) -> NoteName:
        """Octave-independent note name."""
        return NoteName(self._value % 12)

    @property
    def pitch_class(self) -> int:
        return self._value % 12

    @property
    def octave(self) -> int:
        return self._value // 12

    @property
    def midi(self) -> int:
        """MIDI note number. C4 = 60."""
        return self._value + 12

    def same_class(self, other: Pitch) -> bool:
        """Compare two pitches disregarding their octaves."""
        return self.pitch_class == other.pitch_class

    def spell(self) -> str:
        """Get the note name without the octave."""
        return self.name.spell()

    def __add__(self, other: Interval | int) -> Pitch:
        """Transpose up by an interval (or a plain semitone count)."""
        if isinstance(other, Interval):
            return Pitch(self._value + other.semitones)
        if isinstance(other, int) and not isinstance(other, bool):
            return Pitch(self._value + other)
        return NotImplemented

    def __sub__(self, other: Pitch | Interval | int) -> Pitch | Interval:
        """
        Transpose down by an interval (or a plain semitone count), or
        measure the distance to a pitch.

        Pitch - Interval raises PitchRangeError below C0.
        Pitch - Pitch is the absolute distance, whatever the order.
        """
        if isinstance(other, Pitch):
            return Interval(abs(self._value - other._value))
        if isinstance(other, Interval):
            return Pitch(self._value - other.semitones)
        if isinstance(other, int) and not isinstance(other, bool):
            return Pitch(self._value - other)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pitch):
            return NotImplemented
        return bool(self._value == other._value)

    def __lt__(self, other: Pitch) -> bool:
        if not isinstance(other, Pitch):
            return NotImplemented
        return bool(self._value < other._value)

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"Pitch({self})"

    def __str__(self) -> str:
        return f"{self.spell()}{self.octave}"


def ascending(start: Pitch) -> Iterator[Pitch]:
    """
    Yield start, then every pitch one semitone higher, forever.

    Bound it at the call site, e.g. itertools.islice(ascending(p), 12).
    """
    current = start
    while True:
        yield current
        current = current + Interval.SEMITONE


def chromatic_roots() -> list[Pitch]:
    """The 12 chromatic pitches of octave 0, C0 through B0."""
    return list(islice(ascending(Pitch(0)), 12))
