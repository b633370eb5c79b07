"""
Pytest configuration and shared fixtures.
"""

import pytest

from chuk_mcp_fretboard.fretboard import Guitar, Luthier, standard_tuning


@pytest.fixture
def standard_guitar() -> Guitar:
    """A 21-fret guitar in standard tuning."""
    return Luthier(21).tune(standard_tuning()).build()


class MockMCPServer:
    """Mock MCP server that just stores registered tools."""

    def __init__(self, name: str):
        self.name = name
        self.tools: dict = {}

    def tool(self, func):
        """Decorator to register a tool."""
        self.tools[func.__name__] = func
        return func


@pytest.fixture
def mcp() -> MockMCPServer:
    """A mock MCP server to register tools on."""
    return MockMCPServer("test")
