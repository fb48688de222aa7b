"""
MIDI export tests - proof of life.

If these tests pass, we know spelled pitches reach a playable file.
"""

from pathlib import Path

import pytest
from mido import MidiFile

from chuk_mcp_spelling.catalog import CatalogLoader, Chord
from chuk_mcp_spelling.compiler.midi import (
    TICKS_PER_BEAT,
    MidiEvent,
    beats_to_ticks,
    events_to_midi,
    pitches_to_events,
    pitches_to_midi,
)
from chuk_mcp_spelling.constants import RealizeMode
from chuk_mcp_spelling.core import Pitch, UnrepresentableOctaveRange


def c7_pitches() -> list[Pitch]:
    return [Pitch.from_name(n) for n in ["C4", "E4", "G4", "Bb4"]]


class TestMidiEvent:
    """Test MidiEvent dataclass."""

    def test_create_valid_event(self) -> None:
        """Can create a valid MIDI event."""
        event = MidiEvent(pitch=60, start_ticks=0, duration_ticks=480, velocity=100, channel=0)
        assert event.pitch == 60
        assert event.duration_ticks == 480
        assert event.channel == 0

    def test_event_validation_pitch_range(self) -> None:
        """Pitch must be 0-127."""
        with pytest.raises(ValueError, match="Pitch must be 0-127"):
            MidiEvent(pitch=128, start_ticks=0, duration_ticks=480, velocity=100)

        with pytest.raises(ValueError, match="Pitch must be 0-127"):
            MidiEvent(pitch=-1, start_ticks=0, duration_ticks=480, velocity=100)

    def test_event_validation_velocity_range(self) -> None:
        """Velocity must be 0-127."""
        with pytest.raises(ValueError, match="Velocity must be 0-127"):
            MidiEvent(pitch=60, start_ticks=0, duration_ticks=480, velocity=128)

    def test_event_validation_channel_range(self) -> None:
        """Channel must be 0-15."""
        with pytest.raises(ValueError, match="Channel must be 0-15"):
            MidiEvent(pitch=60, start_ticks=0, duration_ticks=480, velocity=100, channel=16)

    def test_event_validation_times(self) -> None:
        """Times cannot be negative."""
        with pytest.raises(ValueError, match="Start ticks"):
            MidiEvent(pitch=60, start_ticks=-1, duration_ticks=480, velocity=100)
        with pytest.raises(ValueError, match="Duration ticks"):
            MidiEvent(pitch=60, start_ticks=0, duration_ticks=-1, velocity=100)


class TestEventsToMidi:
    """Test the events_to_midi function."""

    def test_empty_events(self) -> None:
        """Can create MIDI file with no events."""
        mid = events_to_midi([])
        assert len(mid.tracks) == 1
        assert mid.ticks_per_beat == TICKS_PER_BEAT

    def test_single_note(self) -> None:
        """Can create MIDI file with a single note."""
        mid = events_to_midi([MidiEvent(pitch=60, start_ticks=0, duration_ticks=480, velocity=100)])

        note_messages = [msg for msg in mid.tracks[0] if msg.type in ("note_on", "note_off")]
        assert len(note_messages) == 2
        assert note_messages[0].type == "note_on"
        assert note_messages[0].note == 60
        assert note_messages[1].type == "note_off"
        assert note_messages[1].time == 480

    def test_multiple_notes_ordering(self) -> None:
        """Notes are properly ordered by time."""
        events = [
            MidiEvent(pitch=60, start_ticks=480, duration_ticks=480, velocity=100),
            MidiEvent(pitch=64, start_ticks=0, duration_ticks=480, velocity=100),
        ]
        mid = events_to_midi(events)

        note_ons = [msg for msg in mid.tracks[0] if msg.type == "note_on"]
        assert note_ons[0].note == 64
        assert note_ons[1].note == 60

    def test_note_off_before_note_on_at_same_tick(self) -> None:
        """A note ending where the next begins is released first."""
        events = [
            MidiEvent(pitch=60, start_ticks=0, duration_ticks=480, velocity=100),
            MidiEvent(pitch=60, start_ticks=480, duration_ticks=480, velocity=100),
        ]
        mid = events_to_midi(events)

        types = [msg.type for msg in mid.tracks[0] if msg.type in ("note_on", "note_off")]
        assert types == ["note_on", "note_off", "note_on", "note_off"]

    def test_tempo_setting(self) -> None:
        """Tempo is correctly set in the MIDI file."""
        mid = events_to_midi([], tempo_bpm=140)

        tempo_msgs = [msg for msg in mid.tracks[0] if msg.type == "set_tempo"]
        assert len(tempo_msgs) == 1
        assert tempo_msgs[0].tempo == int(60_000_000 / 140)


class TestPitchesToEvents:
    """Test laying spelled pitches out in time."""

    def test_block(self) -> None:
        """Block mode starts every note together and holds them."""
        events = pitches_to_events(c7_pitches(), RealizeMode.BLOCK)

        assert [e.pitch for e in events] == [60, 64, 67, 70]
        assert all(e.start_ticks == 0 for e in events)
        assert all(e.duration_ticks == 4 * TICKS_PER_BEAT for e in events)

    def test_arpeggio(self) -> None:
        """Arpeggio mode plays one pitch per step."""
        events = pitches_to_events(c7_pitches(), RealizeMode.ARPEGGIO, beats_per_note=0.5)

        step = TICKS_PER_BEAT // 2
        assert [e.start_ticks for e in events] == [0, step, 2 * step, 3 * step]
        assert all(e.duration_ticks == step for e in events)

    def test_enharmonics_share_a_note(self) -> None:
        """Spelling is lost: C#4 and Db4 are both note 61."""
        events = pitches_to_events([Pitch.from_name("C#4"), Pitch.from_name("Db4")])
        assert [e.pitch for e in events] == [61, 61]

    def test_velocity_and_channel(self) -> None:
        events = pitches_to_events(c7_pitches(), velocity=64, channel=3)
        assert {e.velocity for e in events} == {64}
        assert {e.channel for e in events} == {3}

    def test_out_of_range(self) -> None:
        """Pitches outside the MIDI range cannot be exported."""
        with pytest.raises(UnrepresentableOctaveRange):
            pitches_to_events([Pitch.from_name("C10")])

    def test_empty(self) -> None:
        assert pitches_to_events([]) == []


class TestPitchesToMidi:
    """Test the pitches_to_midi shortcut."""

    def test_can_save_and_reload(self, temp_midi_path: Path) -> None:
        """MIDI file can be saved and reloaded."""
        mid = pitches_to_midi(c7_pitches(), RealizeMode.ARPEGGIO)
        mid.save(str(temp_midi_path))

        assert temp_midi_path.exists()
        assert temp_midi_path.stat().st_size > 0

        loaded = MidiFile(str(temp_midi_path))
        assert loaded.ticks_per_beat == TICKS_PER_BEAT
        note_ons = [msg.note for msg in loaded.tracks[0] if msg.type == "note_on"]
        assert note_ons == [60, 64, 67, 70]

    def test_slash_chord(self, catalog: CatalogLoader) -> None:
        """A slash bass is exported below the root."""
        chord = Chord.from_symbol("C/F#", catalog)
        mid = pitches_to_midi(chord.notes(), RealizeMode.ARPEGGIO)

        note_ons = [msg.note for msg in mid.tracks[0] if msg.type == "note_on"]
        assert note_ons == [54, 60, 64, 67]

    def test_tempo(self) -> None:
        mid = pitches_to_midi(c7_pitches(), tempo_bpm=90)
        tempo = next(msg for msg in mid.tracks[0] if msg.type == "set_tempo")
        assert tempo.tempo == int(60_000_000 / 90)


class TestHelperFunctions:
    """Test utility functions."""

    def test_beats_to_ticks(self) -> None:
        """Beat to tick conversion works correctly."""
        assert beats_to_ticks(0) == 0
        assert beats_to_ticks(1) == TICKS_PER_BEAT
        assert beats_to_ticks(0.5) == TICKS_PER_BEAT // 2
        assert beats_to_ticks(4) == TICKS_PER_BEAT * 4


class TestDeterminism:
    """Verify deterministic output."""

    def test_same_pitches_same_output(self, temp_midi_path: Path) -> None:
        """Same pitches should produce identical MIDI files."""
        path1 = temp_midi_path.parent / "test1.mid"
        path2 = temp_midi_path.parent / "test2.mid"

        pitches_to_midi(c7_pitches()).save(str(path1))
        pitches_to_midi(c7_pitches()).save(str(path2))

        assert path1.read_bytes() == path2.read_bytes()
