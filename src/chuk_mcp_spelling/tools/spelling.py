"""
Spelling tools - MCP tools for single-pitch arithmetic.

Tools for parsing pitches, adding and subtracting intervals,
and respelling enharmonically.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_spelling.core import Interval, Pitch

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_spelling_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register pitch spelling tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def music_spell_pitch(name: str, octave: int | None = None) -> str:
        """
        Parse a pitch name and describe it.

        The octave defaults to 4 when the name carries none.

        Args:
            name: Pitch name (e.g., 'C', 'F#3', 'Ebb5')
            octave: Optional octave, overrides the one in the name

        Returns:
            JSON string with the pitch and its enharmonic alternate

        Example:
            music_spell_pitch(name="C#4")
        """
        try:
            pitch = Pitch.from_name(name, octave)
            alternate = pitch.enharmonic()

            return json.dumps(
                {
                    "status": "success",
                    "pitch": pitch.to_dict(),
                    "enharmonic": alternate.to_dict() if alternate else None,
                    "name_with_enharmonics": pitch.name_with_enharmonics(),
                }
            )
        except Exception as e:
            logger.exception("Failed to spell pitch")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_spell_pitch"] = music_spell_pitch

    @mcp.tool  # type: ignore[arg-type]
    async def music_add_interval(root: str, interval: str) -> str:
        """
        Add an interval to a pitch, spelling the result from the root's letter.

        Args:
            root: Root pitch (e.g., 'C4', 'Bb3')
            interval: Interval symbol (e.g., 'M3', 'm7', 'P5', 'b9', '#11')

        Returns:
            JSON string with the resulting pitch

        Example:
            music_add_interval(root="C4", interval="m3")  # Eb4
        """
        try:
            pitch = Pitch.from_name(root)
            step = Interval.parse(interval)
            result = pitch.add_interval(step)

            return json.dumps(
                {
                    "status": "success",
                    "root": pitch.to_dict(),
                    "interval": str(step),
                    "result": result.to_dict(),
                }
            )
        except Exception as e:
            logger.exception("Failed to add interval")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_add_interval"] = music_add_interval

    @mcp.tool  # type: ignore[arg-type]
    async def music_subtract_interval(root: str, interval: str) -> str:
        """
        Subtract an interval from a pitch.

        Args:
            root: Starting pitch (e.g., 'E4', 'D5')
            interval: Interval symbol (e.g., 'M3', 'M9')

        Returns:
            JSON string with the resulting pitch

        Example:
            music_subtract_interval(root="D5", interval="M9")  # C4
        """
        try:
            pitch = Pitch.from_name(root)
            step = Interval.parse(interval)
            result = pitch.subtract_interval(step)

            return json.dumps(
                {
                    "status": "success",
                    "root": pitch.to_dict(),
                    "interval": str(step),
                    "result": result.to_dict(),
                }
            )
        except Exception as e:
            logger.exception("Failed to subtract interval")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_subtract_interval"] = music_subtract_interval

    @mcp.tool  # type: ignore[arg-type]
    async def music_enharmonic(name: str) -> str:
        """
        Respell a pitch on the neighbouring letter.

        Sharps move to the letter above, flats to the letter below.
        Natural pitches have no enharmonic alternate.

        Args:
            name: Pitch name (e.g., 'C#4', 'Fb')

        Returns:
            JSON string with the alternate spelling, or null

        Example:
            music_enharmonic(name="C#4")  # Db4
        """
        try:
            pitch = Pitch.from_name(name)
            alternate = pitch.enharmonic()

            return json.dumps(
                {
                    "status": "success",
                    "pitch": pitch.to_dict(),
                    "enharmonic": alternate.to_dict() if alternate else None,
                }
            )
        except Exception as e:
            logger.exception("Failed to respell pitch")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_enharmonic"] = music_enharmonic

    @mcp.tool  # type: ignore[arg-type]
    async def music_pitch_from_height(height: int) -> str:
        """
        Spell an absolute height (MIDI note number).

        Black keys are spelled with a sharp and list the flat alternate.

        Args:
            height: Semitones above the lowest C (C4 = 60)

        Returns:
            JSON string with the spelled pitch

        Example:
            music_pitch_from_height(height=61)  # C#/Db 4
        """
        try:
            pitch = Pitch.from_absolute_semitone(height)

            return json.dumps({"status": "success", "pitch": pitch.to_dict()})
        except Exception as e:
            logger.exception("Failed to spell height")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_pitch_from_height"] = music_pitch_from_height

    @mcp.tool  # type: ignore[arg-type]
    async def music_invert_interval(interval: str) -> str:
        """
        Invert an interval.

        Simple intervals complete an octave (M3 -> m6); compound
        intervals complete two octaves (M9 -> m7).

        Args:
            interval: Interval symbol (e.g., 'M3', 'P5', 'M9')

        Returns:
            JSON string with the inversion

        Example:
            music_invert_interval(interval="M3")  # m6
        """
        try:
            step = Interval.parse(interval)
            inverted = step.invert()

            return json.dumps(
                {
                    "status": "success",
                    "interval": {
                        "symbol": str(step),
                        "number": step.number,
                        "semitones": step.semitones,
                        "compound": step.is_compound,
                    },
                    "inversion": {
                        "symbol": str(inverted),
                        "number": inverted.number,
                        "semitones": inverted.semitones,
                        "compound": inverted.is_compound,
                    },
                }
            )
        except Exception as e:
            logger.exception("Failed to invert interval")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_invert_interval"] = music_invert_interval

    return tools
