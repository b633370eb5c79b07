#!/usr/bin/env python3
"""
Example: Find a note on a guitar and guess keys from a melody.

This walks through the core without the MCP server: parse notes,
build an instrument with a capo, locate a note and draw it.

Usage:
    python examples/find_notes.py
"""

from chuk_mcp_fretboard.core import Key, Mode, Pitch, guess_key
from chuk_mcp_fretboard.fretboard import FretboardDiagram, Luthier, standard_tuning


def main() -> None:
    """Run the fretboard examples."""
    # Example 1: Every E3 on a 21-fret guitar in standard tuning
    print("E3 on a standard guitar:")
    guitar = Luthier(21).tune(standard_tuning()).build()
    locations = guitar.locate(Pitch.parse("E3"))
    for location in locations:
        print(f"  {location}")
    print(FretboardDiagram(guitar, locations))

    # Example 2: The same note with a capo on the 2nd fret
    print("\nE3 with a capo on fret 2:")
    capoed = Luthier(21).tune(standard_tuning()).add_capo(2).build()
    print(f"  Open strings: {' '.join(str(n) for n in capoed.tuning)}")
    for location in capoed.locate(Pitch.parse("E3")):
        print(f"  {location}")

    # Example 3: Notes of a key
    key = Key(Pitch.parse("D2"), Mode.DORIAN)
    print(f"\n{key}: {key:#}")

    # Example 4: Which keys hold this melody?
    melody = [Pitch.parse(n) for n in ("E3", "Gb3", "A3", "B3", "D4")]
    candidates = guess_key(melody)
    print(f"\n{len(candidates)} candidates:")
    for candidate in candidates:
        print(f"  {candidate} ({candidate:#})")


if __name__ == "__main__":
    main()
