"""
ASCII fretboard diagrams.

One row per fret, from the lowest to the highest located fret. Strings
run across each row from the highest-numbered (lowest pitched) string
down to string 1, and each row ends with its fret number. A2 on a
standard-tuned guitar:

    - O - - - - 0
    | | | | | | 1
    | | | | | | 2
    | | | | | | 3
    | | | | | | 4
    O | | | | | 5
"""

from __future__ import annotations

from collections.abc import Iterable

from chuk_mcp_fretboard.constants import FRET_GLYPH, MARKER_GLYPH, OPEN_GLYPH
from chuk_mcp_fretboard.fretboard.guitar import FretboardLocation, Guitar


class FretboardDiagram:
    """
    A diagram of some locations on a guitar.

    The locations must not be empty, and must lie on the guitar's
    strings: callers decide what to show when a note does not occur.
    """

    def __init__(self, guitar: Guitar, locations: Iterable[FretboardLocation]) -> None:
        self.guitar = guitar
        self.locations = list(locations)
        if not self.locations:
            raise ValueError("A fretboard diagram needs at least one location")
        for loc in self.locations:
            if loc.string_number > guitar.num_strings:
                raise ValueError(
                    f"{loc} is off a guitar with {guitar.num_strings} strings"
                )

    def rows(self) -> list[str]:
        """Render each fret row of the diagram."""
        marked = set(self.locations)
        low = min(loc.fret_number for loc in self.locations)
        high = max(loc.fret_number for loc in self.locations)

        rows = []
        for fret in range(low, high + 1):
            filler = OPEN_GLYPH if fret == 0 else FRET_GLYPH
            cells = [
                MARKER_GLYPH if FretboardLocation(string, fret) in marked else filler
                for string in range(self.guitar.num_strings, 0, -1)
            ]
            rows.append(" ".join([*cells, str(fret)]))
        return rows

    def render(self) -> str:
        return "\n".join(self.rows())

    def __str__(self) -> str:
        return self.render()


def render(guitar: Guitar, locations: Iterable[FretboardLocation]) -> str:
    """Render a diagram of the given locations on a guitar."""
    return FretboardDiagram(guitar, locations).render()
