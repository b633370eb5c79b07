#!/usr/bin/env python3
"""
Async Fretboard MCP Server using chuk-mcp-server

This server provides MCP tools for finding notes on fretted instruments
and for working with keys.

The server provides tools for:
- Locating a note on any tuning, fret count and capo position
- Listing tuning presets and exporting instrument configurations
- Listing the notes of a key
- Guessing the keys that contain a set of notes
"""

import logging

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_fretboard.tools import register_fretboard_tools, register_key_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-fretboard")

# Register all tools
fretboard_tools = register_fretboard_tools(mcp)
key_tools = register_key_tools(mcp)

# Export tool functions for direct access
fretboard_find_note = fretboard_tools["fretboard_find_note"]
fretboard_list_tunings = fretboard_tools["fretboard_list_tunings"]
fretboard_export_instrument = fretboard_tools["fretboard_export_instrument"]

fretboard_key_notes = key_tools["fretboard_key_notes"]
fretboard_guess_key = key_tools["fretboard_guess_key"]

logger.info("CHUK Fretboard MCP Server initialized")
logger.info(f"  Tools: {len(fretboard_tools) + len(key_tools)}")
