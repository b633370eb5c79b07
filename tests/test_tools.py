"""
Tests for MCP tools.

Tests the MCP tool implementations for note location and keys.
"""

import json

import pytest
import yaml

from chuk_mcp_fretboard.tools import register_fretboard_tools, register_key_tools
from chuk_mcp_fretboard.tools.fretboard import occurrence_summary
from chuk_mcp_fretboard.tools.keys import candidate_summary


class TestSummaries:
    """Tests for summary lines."""

    def test_occurrences(self) -> None:
        """Occurrence lines pluralize."""
        assert occurrence_summary(0) == "No occurrences."
        assert occurrence_summary(1) == "1 occurrence:"
        assert occurrence_summary(3) == "3 occurrences:"

    def test_candidates(self) -> None:
        """Candidate lines pluralize."""
        assert candidate_summary(0) == "No candidates."
        assert candidate_summary(1) == "1 candidate:"
        assert candidate_summary(7) == "7 candidates:"


class TestFretboardTools:
    """Tests for fretboard tools."""

    def test_registers_tools(self, mcp) -> None:
        """All tools are registered on the server."""
        tools = register_fretboard_tools(mcp)
        assert set(tools) == {
            "fretboard_find_note",
            "fretboard_list_tunings",
            "fretboard_export_instrument",
        }
        assert set(mcp.tools) == set(tools)

    @pytest.mark.asyncio
    async def test_find_note(self, mcp) -> None:
        """Find E3 on a standard guitar."""
        tools = register_fretboard_tools(mcp)

        result = await tools["fretboard_find_note"](note="E3")
        data = json.loads(result)
        assert data["status"] == "success"
        assert data["count"] == 3
        assert data["summary"] == "3 occurrences:"
        assert data["locations"][0] == {
            "string": 4,
            "fret": 2,
            "description": "String 4, fret 2",
        }
        assert data["diagram"].splitlines()[-1] == "O | | | | | 12"

    @pytest.mark.asyncio
    async def test_find_open_string(self, mcp) -> None:
        """Open strings are described as such."""
        tools = register_fretboard_tools(mcp)

        data = json.loads(await tools["fretboard_find_note"](note="E4"))
        assert data["count"] == 5
        assert data["locations"][0]["description"] == "Open 1 string"

    @pytest.mark.asyncio
    async def test_find_note_absent(self, mcp) -> None:
        """A note off the fretboard has no occurrences and no diagram."""
        tools = register_fretboard_tools(mcp)

        data = json.loads(await tools["fretboard_find_note"](note="E1"))
        assert data["status"] == "success"
        assert data["count"] == 0
        assert data["summary"] == "No occurrences."
        assert "diagram" not in data

    @pytest.mark.asyncio
    async def test_find_note_with_capo(self, mcp) -> None:
        """The capo moves the open strings."""
        tools = register_fretboard_tools(mcp)

        data = json.loads(await tools["fretboard_find_note"](note="E3", capo=2))
        assert data["locations"][0]["description"] == "Open 4 string"

    @pytest.mark.asyncio
    async def test_find_note_custom_tuning(self, mcp) -> None:
        """Explicit tunings are honoured."""
        tools = register_fretboard_tools(mcp)

        data = json.loads(
            await tools["fretboard_find_note"](note="D2", tuning=["D2", "A2", "D3"], num_frets=12)
        )
        assert data["count"] == 1
        assert data["locations"][0]["description"] == "Open 3 string"

    @pytest.mark.asyncio
    async def test_find_note_preset(self, mcp) -> None:
        """Presets are honoured."""
        tools = register_fretboard_tools(mcp)

        data = json.loads(await tools["fretboard_find_note"](note="E3", preset="bass"))
        assert data["status"] == "success"
        assert data["count"] == 3
        assert data["instrument"]["tuning"] == ["E1", "A1", "D2", "G2"]

    @pytest.mark.asyncio
    async def test_find_note_invalid_note(self, mcp) -> None:
        """Malformed notes return an error."""
        tools = register_fretboard_tools(mcp)

        data = json.loads(await tools["fretboard_find_note"](note="Cb2"))
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_find_note_capo_too_high(self, mcp) -> None:
        """A capo past the last fret returns an error."""
        tools = register_fretboard_tools(mcp)

        data = json.loads(await tools["fretboard_find_note"](note="E3", capo=30))
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_find_note_tuning_and_preset(self, mcp) -> None:
        """Tuning and preset together are ambiguous."""
        tools = register_fretboard_tools(mcp)

        data = json.loads(
            await tools["fretboard_find_note"](note="E3", tuning=["E2"], preset="standard")
        )
        assert data["status"] == "error"
        assert "not both" in data["message"]

    @pytest.mark.asyncio
    async def test_find_note_unknown_preset(self, mcp) -> None:
        """Unknown presets return an error."""
        tools = register_fretboard_tools(mcp)

        data = json.loads(await tools["fretboard_find_note"](note="E3", preset="sitar"))
        assert data["status"] == "error"
        assert "sitar" in data["message"]

    @pytest.mark.asyncio
    async def test_list_tunings(self, mcp) -> None:
        """Presets are listed with their notes."""
        tools = register_fretboard_tools(mcp)

        data = json.loads(await tools["fretboard_list_tunings"]())
        assert data["status"] == "success"
        standard = next(t for t in data["tunings"] if t["name"] == "standard")
        assert standard["notes"] == ["E2", "A2", "D3", "G3", "B3", "E4"]
        assert standard["strings"] == 6

    @pytest.mark.asyncio
    async def test_export_instrument(self, mcp) -> None:
        """Export returns a YAML document and the capoed open notes."""
        tools = register_fretboard_tools(mcp)

        data = json.loads(await tools["fretboard_export_instrument"](capo=2))
        assert data["status"] == "success"
        assert data["usable_frets"] == 19
        assert data["open_notes"][0] == "Gb2"
        exported = yaml.safe_load(data["yaml"])
        assert exported["capo"] == 2
        assert exported["tuning"][0] == "E2"


class TestKeyTools:
    """Tests for key tools."""

    def test_registers_tools(self, mcp) -> None:
        """All tools are registered on the server."""
        tools = register_key_tools(mcp)
        assert set(tools) == {"fretboard_key_notes", "fretboard_guess_key"}

    @pytest.mark.asyncio
    async def test_key_notes(self, mcp) -> None:
        """D Dorian notes."""
        tools = register_key_tools(mcp)

        data = json.loads(await tools["fretboard_key_notes"](root="D2", mode="dorian"))
        assert data["status"] == "success"
        assert data["key"]["name"] == "D Dorian"
        assert data["key"]["notes"] == ["D", "E", "F", "G", "A", "B", "C"]
        assert data["key"]["display"] == "D Dorian (D E F G A B C)"
        assert data["pitches"][-1] == "C3"

    @pytest.mark.asyncio
    async def test_key_notes_default_mode(self, mcp) -> None:
        """Mode defaults to Ionian."""
        tools = register_key_tools(mcp)

        data = json.loads(await tools["fretboard_key_notes"](root="G3"))
        assert data["key"]["name"] == "G Ionian"
        assert data["key"]["notes"] == ["G", "A", "B", "C", "D", "E", "Gb"]

    @pytest.mark.asyncio
    async def test_key_notes_invalid_mode(self, mcp) -> None:
        """Unknown modes return an error listing the valid ones."""
        tools = register_key_tools(mcp)

        data = json.loads(await tools["fretboard_key_notes"](root="D2", mode="blues"))
        assert data["status"] == "error"
        assert "dorian" in data["message"]

    @pytest.mark.asyncio
    async def test_guess_key(self, mcp) -> None:
        """The white keys give seven candidates."""
        tools = register_key_tools(mcp)

        data = json.loads(
            await tools["fretboard_guess_key"](notes=["C3", "D3", "E3", "F3", "G3", "A3", "B3"])
        )
        assert data["status"] == "success"
        assert data["count"] == 7
        assert data["summary"] == "7 candidates:"
        names = [c["name"] for c in data["candidates"]]
        assert names[0] == "C Ionian"
        assert "A Aeolian" in names

    @pytest.mark.asyncio
    async def test_guess_key_with_root(self, mcp) -> None:
        """A root narrows the result."""
        tools = register_key_tools(mcp)

        data = json.loads(
            await tools["fretboard_guess_key"](
                notes=["C3", "D3", "E3", "F3", "G3", "A3", "B3"], root="A2"
            )
        )
        assert data["summary"] == "1 candidate:"
        assert data["candidates"][0]["display"] == "A Aeolian (A B C D E F G)"

    @pytest.mark.asyncio
    async def test_guess_key_no_candidates(self, mcp) -> None:
        """No key holds three chromatic neighbours."""
        tools = register_key_tools(mcp)

        data = json.loads(await tools["fretboard_guess_key"](notes=["C3", "Db3", "D3"]))
        assert data["status"] == "success"
        assert data["count"] == 0
        assert data["summary"] == "No candidates."

    @pytest.mark.asyncio
    async def test_guess_key_invalid_note(self, mcp) -> None:
        """Malformed notes return an error."""
        tools = register_key_tools(mcp)

        data = json.loads(await tools["fretboard_guess_key"](notes=["C3", "H3"]))
        assert data["status"] == "error"
