"""
Constants and enums for the spelling system.

No magic strings - use enums and Literal types for constrained values.
"""

from enum import Enum
from typing import Literal

# Accidental symbols
SHARP = "#"
FLAT = "b"

# Joins a spelling and its enharmonic alternate: "C#/Db"
ENHARMONIC_SEPARATOR = "/"

# Octave assumed when a pitch name carries no (parseable) octave
DEFAULT_OCTAVE = 4

LETTER_COUNT = 7
SEMITONES_PER_OCTAVE = 12

# MIDI note range (height == MIDI note number, C4 = 60)
MIDI_MIN = 0
MIDI_MAX = 127


class CollectionKind(str, Enum):
    """Kinds of named interval collections in the catalog."""

    CHORD = "chord"
    SCALE = "scale"


class RealizeMode(str, Enum):
    """How realized pitches are laid out in time for export."""

    BLOCK = "block"  # All pitches sound together
    ARPEGGIO = "arpeggio"  # One pitch after another


TableFormat = Literal["markdown", "html"]


class ErrorMessages:
    """Standardized error messages."""

    INVALID_PITCH_NAME = "Invalid pitch name: '{name}'. Expected a letter A-G followed by # or b."
    INVALID_INTERVAL = "Invalid interval: '{symbol}'. Expected a symbol like 'M3', 'P5' or 'b7'."
    UNKNOWN_ALIAS = "No {kind} found for suffix '{suffix}'."
    OUT_OF_MIDI_RANGE = "Pitch height {height} is outside the MIDI range 0-127."
    INVALID_INVERSION = "Inversion {inversion} is out of range for a {size}-note chord."


class SuccessMessages:
    """Standardized success messages."""

    MIDI_EXPORTED = "Exported '{symbol}' to {path}."
