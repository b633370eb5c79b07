"""
MCP tool implementations.

Tools are organized by domain:
- fretboard - Note location, tuning presets, instrument export
- keys - Key notes and key guessing
"""

from chuk_mcp_fretboard.tools.fretboard import register_fretboard_tools
from chuk_mcp_fretboard.tools.keys import register_key_tools

__all__ = [
    "register_fretboard_tools",
    "register_key_tools",
]
