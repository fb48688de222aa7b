"""
MIDI export - realized pitches to playable files.

This module converts spelled pitches into MIDI files using mido.
All operations are deterministic: same input → same output.
Spelling is lost on the way out - MIDI only knows heights.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from mido import Message, MetaMessage, MidiFile, MidiTrack

from chuk_mcp_spelling.constants import RealizeMode

if TYPE_CHECKING:
    from collections.abc import Sequence

    from chuk_mcp_spelling.core.pitch import Pitch


# Standard ticks per beat (quarter note) - industry standard
TICKS_PER_BEAT = 480

DEFAULT_VELOCITY = 90


@dataclass(frozen=True)
class MidiEvent:
    """
    A single MIDI note event.

    This is the lowest-level representation before writing to MIDI.
    All times are in ticks (absolute from start of track).
    """

    pitch: int  # MIDI note number (0-127)
    start_ticks: int  # Absolute start time in ticks
    duration_ticks: int  # Duration in ticks
    velocity: int  # 0-127
    channel: int = 0  # 0-15

    def __post_init__(self) -> None:
        """Validate MIDI ranges."""
        if not 0 <= self.pitch <= 127:
            raise ValueError(f"Pitch must be 0-127, got {self.pitch}")
        if not 0 <= self.velocity <= 127:
            raise ValueError(f"Velocity must be 0-127, got {self.velocity}")
        if not 0 <= self.channel <= 15:
            raise ValueError(f"Channel must be 0-15, got {self.channel}")
        if self.start_ticks < 0:
            raise ValueError(f"Start ticks must be >= 0, got {self.start_ticks}")
        if self.duration_ticks < 0:
            raise ValueError(f"Duration ticks must be >= 0, got {self.duration_ticks}")


def events_to_midi(
    events: Sequence[MidiEvent],
    tempo_bpm: int = 120,
    ticks_per_beat: int = TICKS_PER_BEAT,
) -> MidiFile:
    """
    Convert a sequence of MidiEvents to a MidiFile.

    Args:
        events: Sequence of MidiEvent objects
        tempo_bpm: Tempo in beats per minute
        ticks_per_beat: Resolution (default 480)

    Returns:
        A mido MidiFile ready to be saved
    """
    mid = MidiFile(ticks_per_beat=ticks_per_beat)
    track = MidiTrack()
    mid.tracks.append(track)

    # Set tempo (microseconds per beat)
    tempo_us = int(60_000_000 / tempo_bpm)
    track.append(MetaMessage("set_tempo", tempo=tempo_us, time=0))

    # Absolute times first, converted to deltas once sorted
    messages: list[tuple[int, Message]] = []

    for event in events:
        messages.append(
            (
                event.start_ticks,
                Message(
                    "note_on",
                    channel=event.channel,
                    note=event.pitch,
                    velocity=event.velocity,
                    time=0,
                ),
            )
        )
        messages.append(
            (
                event.start_ticks + event.duration_ticks,
                Message(
                    "note_off",
                    channel=event.channel,
                    note=event.pitch,
                    velocity=0,
                    time=0,
                ),
            )
        )

    # note_off before note_on at the same tick
    messages.sort(key=lambda x: (x[0], x[1].type != "note_off"))

    current_time = 0
    for abs_time, msg in messages:
        msg.time = abs_time - current_time
        track.append(msg)
        current_time = abs_time

    track.append(MetaMessage("end_of_track", time=0))

    return mid


def pitches_to_events(
    pitches: Sequence[Pitch],
    mode: RealizeMode = RealizeMode.BLOCK,
    beats_per_note: float = 1.0,
    velocity: int = DEFAULT_VELOCITY,
    channel: int = 0,
    ticks_per_beat: int = TICKS_PER_BEAT,
) -> list[MidiEvent]:
    """
    Lay realized pitches out in time.

    Args:
        pitches: Pitches in the order they should sound
        mode: BLOCK (all together, held for len(pitches) notes' worth)
            or ARPEGGIO (one after another)
        beats_per_note: Length of each arpeggio step in beats
        velocity: Note velocity (0-127)
        channel: MIDI channel (0-15)
        ticks_per_beat: Resolution

    Returns:
        List of MidiEvents

    Raises:
        UnrepresentableOctaveRange: If a pitch is outside MIDI range
    """
    step_ticks = beats_to_ticks(beats_per_note, ticks_per_beat)
    notes = [pitch.to_midi() for pitch in pitches]

    if mode == RealizeMode.BLOCK:
        duration = step_ticks * max(1, len(notes))
        return [
            MidiEvent(
                pitch=note,
                start_ticks=0,
                duration_ticks=duration,
                velocity=velocity,
                channel=channel,
            )
            for note in notes
        ]

    return [
        MidiEvent(
            pitch=note,
            start_ticks=i * step_ticks,
            duration_ticks=step_ticks,
            velocity=velocity,
            channel=channel,
        )
        for i, note in enumerate(notes)
    ]


def pitches_to_midi(
    pitches: Sequence[Pitch],
    mode: RealizeMode = RealizeMode.BLOCK,
    tempo_bpm: int = 120,
    beats_per_note: float = 1.0,
) -> MidiFile:
    """
    Convert realized pitches straight to a MidiFile.

    Example:
        chord = Chord.from_symbol("C7", catalog)
        pitches_to_midi(chord.notes(), RealizeMode.ARPEGGIO).save("c7.mid")
    """
    events = pitches_to_events(pitches, mode=mode, beats_per_note=beats_per_note)
    return events_to_midi(events, tempo_bpm=tempo_bpm)


def beats_to_ticks(beats: float, ticks_per_beat: int = TICKS_PER_BEAT) -> int:
    """Convert a beat position to ticks."""
    return int(beats * ticks_per_beat)
