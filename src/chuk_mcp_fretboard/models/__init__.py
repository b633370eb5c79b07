"""
Pydantic models for the fretboard system.

This module provides:
- InstrumentConfig: Fret count, tuning and capo for building a Guitar
- KeyQuery: Notes (and an optional root) to guess keys from
"""

from chuk_mcp_fretboard.models.instrument import InstrumentConfig, KeyQuery

__all__ = [
    "InstrumentConfig",
    "KeyQuery",
]
