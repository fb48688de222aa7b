#!/usr/bin/env python3
"""
Async Spelling MCP Server using chuk-mcp-server

This server provides MCP tools for spelling pitches, chords and scales
with letter names, so that C + M3 is E and never Fb.

The server provides tools for:
- Parsing pitches and respelling them enharmonically
- Adding and subtracting diatonic intervals
- Building chords and scales from the catalog
- Rendering formula tables
- Exporting chords to MIDI files
"""

import logging
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_spelling.catalog import CatalogLoader
from chuk_mcp_spelling.tools import (
    register_catalog_tools,
    register_export_tools,
    register_spelling_tools,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-spelling")

# Paths - use standard project structure
BASE_PATH = Path.cwd()
CATALOG_DIR = BASE_PATH / "catalog"
OUTPUT_DIR = BASE_PATH / "output"
LIBRARY_PATH = Path(__file__).parent / "catalog" / "library"

# Create the catalog
catalog = CatalogLoader(
    library_path=LIBRARY_PATH,
    project_path=CATALOG_DIR,
)

# Register all tools
spelling_tools = register_spelling_tools(mcp)
catalog_tools = register_catalog_tools(mcp, catalog)
export_tools = register_export_tools(mcp, catalog, OUTPUT_DIR)

# Export tool functions for direct access
music_spell_pitch = spelling_tools["music_spell_pitch"]
music_add_interval = spelling_tools["music_add_interval"]
music_subtract_interval = spelling_tools["music_subtract_interval"]
music_enharmonic = spelling_tools["music_enharmonic"]
music_pitch_from_height = spelling_tools["music_pitch_from_height"]
music_invert_interval = spelling_tools["music_invert_interval"]

music_list_collections = catalog_tools["music_list_collections"]
music_build_chord = catalog_tools["music_build_chord"]
music_build_scale = catalog_tools["music_build_scale"]
music_chord_inversion = catalog_tools["music_chord_inversion"]
music_formula_table = catalog_tools["music_formula_table"]

music_export_midi = export_tools["music_export_midi"]

logger.info("CHUK Spelling MCP Server initialized")
logger.info(f"  Library path: {LIBRARY_PATH}")
logger.info(f"  Catalog dir: {CATALOG_DIR}")
logger.info(f"  Output dir: {OUTPUT_DIR}")
