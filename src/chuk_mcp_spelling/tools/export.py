"""
Export tools - MCP tools for MIDI export.

Tools for writing realized chords to MIDI files.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from chuk_mcp_spelling.catalog import CatalogLoader, Chord
from chuk_mcp_spelling.compiler import pitches_to_midi
from chuk_mcp_spelling.constants import RealizeMode, SuccessMessages

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_export_tools(
    mcp: ChukMCPServer,
    catalog: CatalogLoader,
    output_dir: Path,
) -> dict[str, Any]:
    """
    Register export tools with the MCP server.

    Args:
        mcp: The MCP server instance
        catalog: The chord/scale catalog
        output_dir: Directory for output files

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def music_export_midi(
        symbol: str,
        mode: str = "block",
        tempo: int = 120,
        octave: int = 4,
        output_name: str | None = None,
    ) -> str:
        """
        Export a chord to a MIDI file.

        Args:
            symbol: Chord symbol (e.g., 'C7', 'Am/G')
            mode: 'block' (all notes together) or 'arpeggio' (one after another)
            tempo: Tempo in BPM (default 120)
            octave: Octave of the root (default 4)
            output_name: Optional output filename (without .mid extension)

        Returns:
            JSON string with the file path

        Example:
            music_export_midi(symbol="Cmaj7", mode="arpeggio")
        """
        try:
            chord = Chord.from_symbol(symbol, catalog, octave)
            notes = chord.notes()
            midi = pitches_to_midi(notes, mode=RealizeMode(mode), tempo_bpm=tempo)

            stem = output_name or chord.symbol.replace("/", "_over_").replace("#", "s")
            output_path = output_dir / f"{stem}.mid"
            output_dir.mkdir(parents=True, exist_ok=True)

            midi.save(str(output_path))
            logger.info(f"Exported {chord.symbol} to {output_path}")

            return json.dumps(
                {
                    "status": "success",
                    "path": str(output_path),
                    "notes": [str(note) for note in notes],
                    "heights": [note.height for note in notes],
                    "message": SuccessMessages.MIDI_EXPORTED.format(
                        symbol=chord.symbol, path=output_path
                    ),
                }
            )
        except Exception as e:
            logger.exception("Failed to export MIDI")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_export_midi"] = music_export_midi

    return tools
