"""
Instrument and query models - validated configuration.

These are the shapes that arrive from outside (tool arguments, YAML)
before they become core objects. Notes stay as strings here so the
models serialize cleanly; validators make sure every one parses.
"""

from __future__ import annotations

from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from chuk_mcp_fretboard.constants import DEFAULT_NUM_FRETS, TUNING_PRESETS, TuningPreset
from chuk_mcp_fretboard.core.pitch import Pitch
from chuk_mcp_fretboard.core.scale import Key, guess_key
from chuk_mcp_fretboard.fretboard.guitar import Guitar
from chuk_mcp_fretboard.fretboard.luthier import Luthier


def _default_tuning() -> list[str]:
    return list(TUNING_PRESETS[TuningPreset.STANDARD])


class InstrumentConfig(BaseModel):
    """
    Everything needed to build a Guitar.

    The tuning falls back to standard guitar tuning when none is given.
    """

    schema_version: str = Field("instrument/v1", description="Schema version")
    num_frets: int = Field(DEFAULT_NUM_FRETS, ge=0, description="Number of frets")
    tuning: list[str] = Field(
        default_factory=_default_tuning,
        min_length=1,
        description="Open string notes, lowest first (e.g. ['E2', 'A2', ...])",
    )
    capo: int | None = Field(None, ge=0, description="Capo fret, if any")

    model_config = {"frozen": True}

    @field_validator("tuning")
    @classmethod
    def validate_tuning(cls, v: list[str]) -> list[str]:
        """Ensure every open note parses."""
        for note in v:
            Pitch.parse(note)
        return v

    @model_validator(mode="after")
    def validate_capo(self) -> InstrumentConfig:
        """Ensure the capo sits on an existing fret."""
        if self.capo is not None and self.capo > self.num_frets:
            raise ValueError(f"Capo fret {self.capo} exceeds the {self.num_frets} frets")
        return self

    @classmethod
    def from_preset(
        cls,
        preset: TuningPreset | str,
        num_frets: int = DEFAULT_NUM_FRETS,
        capo: int | None = None,
    ) -> InstrumentConfig:
        """Create a config from a named tuning preset."""
        tuning = TUNING_PRESETS[TuningPreset(preset)]
        return cls(num_frets=num_frets, tuning=list(tuning), capo=capo)

    def get_tuning(self) -> list[Pitch]:
        """Get the parsed open notes, lowest first."""
        return [Pitch.parse(note) for note in self.tuning]

    def build(self) -> Guitar:
        """Build the Guitar this config describes."""
        luthier = Luthier(self.num_frets).tune(self.get_tuning())
        if self.capo:
            luthier.add_capo(self.capo)
        return luthier.build()

    def to_yaml(self) -> str:
        """Serialize to a YAML document."""
        data: dict[str, Any] = self.model_dump(exclude_none=True)
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)

    @classmethod
    def from_yaml(cls, text: str) -> InstrumentConfig:
        """Parse a YAML document produced by to_yaml()."""
        data = yaml.safe_load(text) or {}
        return cls.model_validate(data)


class KeyQuery(BaseModel):
    """A set of notes to guess keys for, with an optional root."""

    notes: list[str] = Field(..., description="Notes that must belong to the key")
    root: str | None = Field(None, description="Only consider keys on this root")

    model_config = {"frozen": True}

    @field_validator("notes")
    @classmethod
    def validate_notes(cls, v: list[str]) -> list[str]:
        """Ensure every note parses."""
        for note in v:
            Pitch.parse(note)
        return v

    @field_validator("root")
    @classmethod
    def validate_root(cls, v: str | None) -> str | None:
        """Ensure the root parses."""
        if v is not None:
            Pitch.parse(v)
        return v

    def get_notes(self) -> list[Pitch]:
        return [Pitch.parse(note) for note in self.notes]

    def get_root(self) -> Pitch | None:
        return Pitch.parse(self.root) if self.root is not None else None

    def run(self) -> list[Key]:
        """Guess the keys that contain every note."""
        return guess_key(self.get_notes(), self.get_root())
