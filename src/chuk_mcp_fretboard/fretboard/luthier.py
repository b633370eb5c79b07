"""
Luthier - a step-by-step Guitar builder.

Tuning and capo placement are separate steps so the capo can be
checked against the strings and frets that actually exist.
"""

from __future__ import annotations

from collections.abc import Sequence

from chuk_mcp_fretboard.core.pitch import Pitch
from chuk_mcp_fretboard.fretboard.guitar import Guitar


class LuthierError(ValueError):
    """Raised when a Luthier is used out of order or after it has built."""


class CapoError(LuthierError):
    """Raised when a capo is added before tuning or beyond the last fret."""


class Luthier:
    """
    Builds a Guitar.

    Example:
        # Because of the capo, the guitar only has 18 usable frets,
        # even though it was started with 22
        guitar = Luthier(22).tune(standard_tuning()).add_capo(4).build()
    """

    def __init__(self, num_frets: int) -> None:
        if num_frets < 0:
            raise LuthierError(f"Number of frets cannot be negative, got {num_frets}")
        self._num_frets = num_frets
        self._tuning: list[Pitch] = []
        self._built = False

    @property
    def num_frets(self) -> int:
        """Frets still usable, after any capo."""
        return self._num_frets

    @property
    def tuning(self) -> list[Pitch]:
        """Open notes from lowest to highest, after any capo."""
        return list(self._tuning)

    def tune(self, open_notes: Sequence[Pitch]) -> Luthier:
        """
        String the guitar with the given open notes, lowest first.

        Replaces any previous tuning.

        Raises:
            LuthierError: If no open notes are given.
        """
        self._check_not_built()
        if not open_notes:
            raise LuthierError("A tuning needs at least one string")
        self._tuning = list(open_notes)
        return self

    def add_capo(self, fret_number: int) -> Luthier:
        """
        Put a capo on the guitar.

        Every open note moves up by fret_number semitones and the frets
        under the capo stop being usable. Each call works on the current
        state, so two capos consume frets twice.

        Raises:
            CapoError: If the guitar has not been tuned, or fret_number
                is not a whole number, negative or beyond the remaining frets.
        """
        self._check_not_built()
        if not self._tuning:
            raise CapoError("The guitar must be tuned before a capo is added")
        if not isinstance(fret_number, int) or isinstance(fret_number, bool):
            raise CapoError(f"Capo fret must be a whole number, got {fret_number!r}")
        if fret_number < 0:
            raise CapoError(f"Capo fret cannot be negative, got {fret_number}")
        if fret_number > self._num_frets:
            raise CapoError(
                f"Capo fret {fret_number} exceeds the {self._num_frets} frets on the guitar"
            )

        tuning = [open_note + fret_number for open_note in self._tuning]
        self._tuning = tuning
        self._num_frets -= fret_number
        return self

    def build(self) -> Guitar:
        """Return the finished Guitar. The luthier cannot be used afterwards."""
        self._check_not_built()
        if not self._tuning:
            raise LuthierError("The guitar must be tuned before it is built")
        self._built = True
        return Guitar(self._num_frets, self._tuning)

    def _check_not_built(self) -> None:
        if self._built:
            raise LuthierError("This luthier has already built its guitar")
