"""
Export pipeline - realized pitches to MIDI.

The pipeline:
    Chord / scale → realized Pitches (spelled)
    → MidiEvents (heights laid out in time)
    → MIDI File
"""

from chuk_mcp_spelling.compiler.midi import (
    TICKS_PER_BEAT,
    MidiEvent,
    events_to_midi,
    pitches_to_events,
    pitches_to_midi,
)

__all__ = [
    "TICKS_PER_BEAT",
    "MidiEvent",
    "events_to_midi",
    "pitches_to_events",
    "pitches_to_midi",
]
