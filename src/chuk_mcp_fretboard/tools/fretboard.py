"""
Fretboard tools - MCP tools for finding notes on an instrument.

Tools for locating a note, listing tuning presets, and exporting
an instrument configuration.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_fretboard.constants import (
    DEFAULT_NUM_FRETS,
    TUNING_PRESETS,
    ErrorMessages,
    SuccessMessages,
    TuningPreset,
)
from chuk_mcp_fretboard.core.pitch import Pitch
from chuk_mcp_fretboard.fretboard import FretboardDiagram
from chuk_mcp_fretboard.models import InstrumentConfig

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def occurrence_summary(count: int) -> str:
    """Summary line for a number of note occurrences."""
    if count == 0:
        return SuccessMessages.NO_OCCURRENCES
    if count == 1:
        return SuccessMessages.ONE_OCCURRENCE
    return SuccessMessages.OCCURRENCES.format(count=count)


def make_config(
    num_frets: int = DEFAULT_NUM_FRETS,
    tuning: list[str] | None = None,
    preset: str | None = None,
    capo: int | None = None,
) -> InstrumentConfig:
    """
    Build an InstrumentConfig from tool arguments.

    Standard tuning is used when neither a tuning nor a preset is given.
    """
    if tuning is not None and preset is not None:
        raise ValueError(ErrorMessages.TUNING_CONFLICT)
    if preset is not None:
        try:
            tuning_preset = TuningPreset(preset)
        except ValueError:
            raise ValueError(ErrorMessages.UNKNOWN_TUNING.format(preset=preset)) from None
        return InstrumentConfig.from_preset(tuning_preset, num_frets=num_frets, capo=capo)
    if tuning is not None:
        return InstrumentConfig(num_frets=num_frets, tuning=tuning, capo=capo)
    return InstrumentConfig(num_frets=num_frets, capo=capo)


def register_fretboard_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register fretboard tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def fretboard_find_note(
        note: str,
        num_frets: int = DEFAULT_NUM_FRETS,
        tuning: list[str] | None = None,
        preset: str | None = None,
        capo: int | None = None,
    ) -> str:
        """
        Find every place a note can be played on a fretted instrument.

        Matching is octave sensitive: 'E3' and 'E4' are different notes.

        Args:
            note: Note with octave (e.g., 'E3', 'Db4')
            num_frets: Number of frets on the instrument (default 21)
            tuning: Open string notes, lowest first (default standard guitar)
            preset: Named tuning instead of an explicit one (e.g., 'drop_d')
            capo: Optional capo fret

        Returns:
            JSON string with locations and an ASCII diagram

        Example:
            fretboard_find_note(note="E3", capo=2)
        """
        try:
            pitch = Pitch.parse(note)
            config = make_config(num_frets, tuning, preset, capo)
            guitar = config.build()
            locations = guitar.locate(pitch)

            result: dict[str, Any] = {
                "status": "success",
                "note": str(pitch),
                "summary": occurrence_summary(len(locations)),
                "count": len(locations),
                "locations": [
                    {
                        "string": loc.string_number,
                        "fret": loc.fret_number,
                        "description": str(loc),
                    }
                    for loc in locations
                ],
                "instrument": config.model_dump(exclude_none=True),
            }
            if locations:
                result["diagram"] = FretboardDiagram(guitar, locations).render()

            return json.dumps(result)
        except Exception as e:
            logger.exception("Failed to find note")
            return json.dumps({"status": "error", "message": str(e)})

    tools["fretboard_find_note"] = fretboard_find_note

    @mcp.tool  # type: ignore[arg-type]
    async def fretboard_list_tunings() -> str:
        """
        List the available tuning presets.

        Returns:
            JSON string with each preset's open notes, lowest first

        Example:
            fretboard_list_tunings()
        """
        try:
            return json.dumps(
                {
                    "status": "success",
                    "tunings": [
                        {
                            "name": preset.value,
                            "strings": len(notes),
                            "notes": list(notes),
                        }
                        for preset, notes in TUNING_PRESETS.items()
                    ],
                    "count": len(TUNING_PRESETS),
                }
            )
        except Exception as e:
            logger.exception("Failed to list tunings")
            return json.dumps({"status": "error", "message": str(e)})

    tools["fretboard_list_tunings"] = fretboard_list_tunings

    @mcp.tool  # type: ignore[arg-type]
    async def fretboard_export_instrument(
        num_frets: int = DEFAULT_NUM_FRETS,
        tuning: list[str] | None = None,
        preset: str | None = None,
        capo: int | None = None,
    ) -> str:
        """
        Export an instrument configuration as YAML.

        The configuration is validated first, including the capo.

        Args:
            num_frets: Number of frets on the instrument (default 21)
            tuning: Open string notes, lowest first (default standard guitar)
            preset: Named tuning instead of an explicit one
            capo: Optional capo fret

        Returns:
            JSON string with the YAML document

        Example:
            fretboard_export_instrument(preset="dadgad", capo=3)
        """
        try:
            config = make_config(num_frets, tuning, preset, capo)
            guitar = config.build()

            return json.dumps(
                {
                    "status": "success",
                    "yaml": config.to_yaml(),
                    "usable_frets": guitar.num_frets,
                    "open_notes": [str(n) for n in guitar.tuning],
                }
            )
        except Exception as e:
            logger.exception("Failed to export instrument")
            return json.dumps({"status": "error", "message": str(e)})

    tools["fretboard_export_instrument"] = fretboard_export_instrument

    return tools
