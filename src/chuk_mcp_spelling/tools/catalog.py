"""
Catalog tools - MCP tools for chords, scales and formula tables.

Tools for discovering collections and realizing them over a root.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_spelling.catalog import CatalogLoader, Chord, build_formula_table
from chuk_mcp_spelling.constants import CollectionKind
from chuk_mcp_spelling.core import Pitch

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_catalog_tools(
    mcp: ChukMCPServer,
    catalog: CatalogLoader,
) -> dict[str, Any]:
    """
    Register catalog tools with the MCP server.

    Args:
        mcp: The MCP server instance
        catalog: The chord/scale catalog

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def music_list_collections(kind: str | None = None) -> str:
        """
        List available chord structures and scales.

        Args:
            kind: Optional filter, 'chord' or 'scale'

        Returns:
            JSON string with collection summaries

        Example:
            music_list_collections(kind="chord")
        """
        try:
            kind_filter = CollectionKind(kind) if kind else None
            collections = catalog.list_collections(kind_filter)

            return json.dumps(
                {
                    "status": "success",
                    "collections": [collection.to_dict() for collection in collections],
                    "count": len(collections),
                }
            )
        except Exception as e:
            logger.exception("Failed to list collections")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_list_collections"] = music_list_collections

    @mcp.tool  # type: ignore[arg-type]
    async def music_build_chord(symbol: str, octave: int = 4) -> str:
        """
        Spell the notes of a chord symbol.

        Every tone is spelled from the root's letter, so C7 gives Bb
        (not A#) and E7 gives G# (not Ab).

        Args:
            symbol: Chord symbol (e.g., 'C7', 'F#m7b5', 'Bbmaj9', 'C/F#')
            octave: Octave of the root (default 4)

        Returns:
            JSON string with chord notes, formula and heights

        Example:
            music_build_chord(symbol="C7")
        """
        try:
            chord = Chord.from_symbol(symbol, catalog, octave)

            return json.dumps({"status": "success", "chord": chord.describe()})
        except Exception as e:
            logger.exception("Failed to build chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_build_chord"] = music_build_chord

    @mcp.tool  # type: ignore[arg-type]
    async def music_build_scale(root: str, scale: str) -> str:
        """
        Spell a scale over a root.

        Args:
            root: Root pitch (e.g., 'D4', 'Eb')
            scale: Scale name (e.g., 'major', 'dorian', 'harmonic_minor')

        Returns:
            JSON string with the scale notes

        Example:
            music_build_scale(root="F#4", scale="major")
        """
        try:
            root_pitch = Pitch.from_name(root)
            collection = catalog.find_by_suffix(scale, CollectionKind.SCALE)
            notes = collection.realize(root_pitch)

            return json.dumps(
                {
                    "status": "success",
                    "scale": {
                        "name": collection.name,
                        "root": str(root_pitch),
                        "formula": collection.formula(),
                        "notes": [note.name for note in notes],
                        "pitches": [str(note) for note in notes],
                        "heights": [note.height for note in notes],
                    },
                }
            )
        except Exception as e:
            logger.exception("Failed to build scale")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_build_scale"] = music_build_scale

    @mcp.tool  # type: ignore[arg-type]
    async def music_chord_inversion(symbol: str, inversion: int, octave: int = 4) -> str:
        """
        Voice a chord in an inversion.

        Args:
            symbol: Chord symbol (e.g., 'Cmaj7')
            inversion: 0 = root position, 1 = first inversion, ...
            octave: Octave of the root (default 4)

        Returns:
            JSON string with the voiced pitches, lowest first

        Example:
            music_chord_inversion(symbol="C", inversion=1)  # E4 G4 C5
        """
        try:
            chord = Chord.from_symbol(symbol, catalog, octave)
            voiced = chord.inversion(inversion)

            return json.dumps(
                {
                    "status": "success",
                    "symbol": chord.symbol,
                    "inversion": inversion,
                    "pitches": [str(pitch) for pitch in voiced],
                    "heights": [pitch.height for pitch in voiced],
                }
            )
        except Exception as e:
            logger.exception("Failed to voice inversion")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_chord_inversion"] = music_chord_inversion

    @mcp.tool  # type: ignore[arg-type]
    async def music_formula_table(
        root: str = "C",
        kind: str = "chord",
        fmt: str = "markdown",
    ) -> str:
        """
        Render a formula table of every collection over a root.

        Args:
            root: Root pitch (default 'C')
            kind: 'chord' or 'scale'
            fmt: 'markdown' or 'html'

        Returns:
            JSON string with the rendered table

        Example:
            music_formula_table(root="Bb", kind="chord", fmt="html")
        """
        try:
            root_pitch = Pitch.from_name(root)
            collections = catalog.list_collections(CollectionKind(kind))
            table = build_formula_table(collections, root_pitch, fmt)  # type: ignore[arg-type]

            return json.dumps(
                {
                    "status": "success",
                    "format": fmt,
                    "rows": len(collections),
                    "table": table,
                }
            )
        except Exception as e:
            logger.exception("Failed to build formula table")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_formula_table"] = music_formula_table

    return tools
