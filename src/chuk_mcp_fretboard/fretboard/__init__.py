"""
Fretboard geometry.

This module provides:
- Guitar: Strings and frets for any tuning, with note location search
- GuitarString: The pitch of every fret on one string
- FretboardLocation: A (string, fret) position
- Luthier: Step-by-step Guitar builder with capo support
- FretboardDiagram: ASCII rendering of located positions
"""

from chuk_mcp_fretboard.fretboard.diagram import FretboardDiagram, render
from chuk_mcp_fretboard.fretboard.guitar import (
    FretboardLocation,
    Guitar,
    GuitarString,
    standard_tuning,
)
from chuk_mcp_fretboard.fretboard.luthier import CapoError, Luthier, LuthierError

__all__ = [
    "CapoError",
    "FretboardDiagram",
    "FretboardLocation",
    "Guitar",
    "GuitarString",
    "Luthier",
    "LuthierError",
    "render",
    "standard_tuning",
]
