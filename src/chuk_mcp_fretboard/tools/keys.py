"""
Key tools - MCP tools for scales and key guessing.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_fretboard.constants import ErrorMessages, SuccessMessages
from chuk_mcp_fretboard.core.pitch import Pitch
from chuk_mcp_fretboard.core.scale import Key, Mode
from chuk_mcp_fretboard.models import KeyQuery

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def candidate_summary(count: int) -> str:
    """Summary line for a number of key candidates."""
    if count == 0:
        return SuccessMessages.NO_CANDIDATES
    if count == 1:
        return SuccessMessages.ONE_CANDIDATE
    return SuccessMessages.CANDIDATES.format(count=count)


def describe_key(key: Key) -> dict[str, Any]:
    """JSON-ready description of a key."""
    return {
        "name": str(key),
        "root": str(key.root),
        "mode": key.mode.value,
        "notes": key.note_names(),
        "display": f"{key} ({key:#})",
    }


def register_key_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register key tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def fretboard_key_notes(root: str, mode: str = "ionian") -> str:
        """
        List the notes of a key.

        Args:
            root: Root note with octave (e.g., 'D2')
            mode: Mode name ('ionian', 'dorian', ... 'locrian', or 'major'/'minor')

        Returns:
            JSON string with the key and its notes

        Example:
            fretboard_key_notes(root="D2", mode="dorian")
        """
        try:
            root_pitch = Pitch.parse(root)
            try:
                mode_enum = Mode.parse(mode)
            except ValueError:
                modes = ", ".join(m.value for m in Mode)
                raise ValueError(ErrorMessages.INVALID_MODE.format(mode=mode, modes=modes)) from None

            key = Key(root_pitch, mode_enum)
            return json.dumps(
                {
                    "status": "success",
                    "key": describe_key(key),
                    "pitches": [str(n) for n in key.notes],
                }
            )
        except Exception as e:
            logger.exception("Failed to list key notes")
            return json.dumps({"status": "error", "message": str(e)})

    tools["fretboard_key_notes"] = fretboard_key_notes

    @mcp.tool  # type: ignore[arg-type]
    async def fretboard_guess_key(notes: list[str], root: str | None = None) -> str:
        """
        Guess which keys contain every one of the given notes.

        Octaves are ignored when checking membership. All 12 roots and
        7 modes are tried unless a root is given.

        Args:
            notes: Notes with octaves (e.g., ['C3', 'E3', 'G3'])
            root: Optional root note to restrict the search to

        Returns:
            JSON string with candidate keys, ordered by root then mode

        Example:
            fretboard_guess_key(notes=["C3", "D3", "E3", "F3", "G3", "A3", "B3"])
        """
        try:
            query = KeyQuery(notes=notes, root=root)
            candidates = query.run()

            return json.dumps(
                {
                    "status": "success",
                    "summary": candidate_summary(len(candidates)),
                    "count": len(candidates),
                    "candidates": [describe_key(key) for key in candidates],
                }
            )
        except Exception as e:
            logger.exception("Failed to guess key")
            return json.dumps({"status": "error", "message": str(e)})

    tools["fretboard_guess_key"] = fretboard_guess_key

    return tools
