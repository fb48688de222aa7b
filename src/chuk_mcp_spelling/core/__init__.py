"""
Core spelling primitives - the engine layer.

These are the invariants that everything else composes on:
- Letter: The 7 natural letters with their offsets from C
- Interval: Diatonic number plus semitone size, with inversion
- Pitch: A spelled note with letter, accidentals and octave
- parse_pitch_name: Name string -> structured parse result
"""

from chuk_mcp_spelling.core.errors import (
    InvalidIntervalSymbol,
    InvalidPitchName,
    SpellingError,
    UnknownCollectionAlias,
    UnrepresentableOctaveRange,
)
from chuk_mcp_spelling.core.interval import NAMED_INTERVALS, Interval, IntervalQuality
from chuk_mcp_spelling.core.letter import Letter
from chuk_mcp_spelling.core.pitch import ParsedPitchName, Pitch, parse_pitch_name

__all__ = [
    # Letter
    "Letter",
    # Interval
    "Interval",
    "IntervalQuality",
    "NAMED_INTERVALS",
    # Pitch
    "Pitch",
    "ParsedPitchName",
    "parse_pitch_name",
    # Errors
    "SpellingError",
    "InvalidPitchName",
    "InvalidIntervalSymbol",
    "UnknownCollectionAlias",
    "UnrepresentableOctaveRange",
]
