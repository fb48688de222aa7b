"""
MCP tool implementations.

Tools are organized by domain:
- spelling - Single-pitch arithmetic and enharmonics
- catalog - Chords, scales and formula tables
- export - MIDI export tools
"""

from chuk_mcp_spelling.tools.catalog import register_catalog_tools
from chuk_mcp_spelling.tools.export import register_export_tools
from chuk_mcp_spelling.tools.spelling import register_spelling_tools

__all__ = [
    "register_catalog_tools",
    "register_export_tools",
    "register_spelling_tools",
]
