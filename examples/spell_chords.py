#!/usr/bin/env python3
"""
Example: Spell chords and scales, then export a progression to MIDI.

This demonstrates the spelling pipeline end to end - symbols in,
correctly spelled pitches out, and a playable file at the end.

Usage:
    python examples/spell_chords.py
    # Creates: examples/output/ii_v_i.mid
"""

from pathlib import Path

from chuk_mcp_spelling.catalog import CatalogLoader, Chord, build_formula_table
from chuk_mcp_spelling.compiler.midi import (
    TICKS_PER_BEAT,
    MidiEvent,
    events_to_midi,
    pitches_to_events,
)
from chuk_mcp_spelling.constants import CollectionKind
from chuk_mcp_spelling.core import Interval, Pitch


def main() -> None:
    """Run the spelling examples."""
    catalog = CatalogLoader()

    # Example 1: Interval arithmetic keeps the letter
    print("Interval arithmetic:")
    c4 = Pitch.from_name("C4")
    for interval in [Interval.M3, Interval.m3, Interval.A4, Interval.d5, Interval.M9]:
        print(f"  {c4} + {interval} = {c4.add_interval(interval)}")
    print(f"  D5 - M9 = {Pitch.from_name('D5').subtract_interval(Interval.M9)}")

    # Example 2: Chords spelled from their roots
    print("\nChords:")
    for symbol in ["C7", "E7", "Bbm7", "F#m7b5", "Cdim7", "C/F#"]:
        chord = Chord.from_symbol(symbol, catalog)
        print(f"  {symbol:8} {' '.join(str(note) for note in chord.notes())}")

    # Example 3: Scales over awkward roots
    print("\nScales:")
    for root, scale in [("F#", "major"), ("Eb", "minor"), ("D", "dorian")]:
        collection = catalog.find_by_suffix(scale, CollectionKind.SCALE)
        notes = collection.realize(Pitch.from_name(root))
        print(f"  {root} {scale:8} {' '.join(note.name for note in notes)}")

    # Example 4: Formula table
    print("\nSeventh chords over Bb:")
    sevenths = [catalog.get(key) for key in ["maj7", "dom7", "min7", "half_dim7", "dim7"]]
    print(build_formula_table([c for c in sevenths if c], Pitch.from_name("Bb")))

    # Example 5: ii-V-I in C, one bar per chord
    output_dir = Path(__file__).parent / "output"
    output_dir.mkdir(exist_ok=True)

    print("\nGenerating ii_v_i.mid...")
    mid = create_progression(catalog, ["Dm7", "G7", "Cmaj7"])
    mid.save(str(output_dir / "ii_v_i.mid"))
    print(f"  Created: {output_dir / 'ii_v_i.mid'}")


def create_progression(catalog: CatalogLoader, symbols: list[str]):
    """
    Lay chords out one per bar as block voicings.

    This demonstrates:
    - Resolving symbols against the catalog
    - Converting spelled pitches to MidiEvents
    - Offsetting events to place them in time
    """
    events: list[MidiEvent] = []
    ticks_per_bar = TICKS_PER_BEAT * 4

    for bar, symbol in enumerate(symbols):
        chord = Chord.from_symbol(symbol, catalog, octave=3)
        for event in pitches_to_events(chord.notes(), beats_per_note=1.0):
            events.append(
                MidiEvent(
                    pitch=event.pitch,
                    start_ticks=bar * ticks_per_bar + event.start_ticks,
                    duration_ticks=ticks_per_bar,
                    velocity=event.velocity,
                )
            )

    return events_to_midi(events, tempo_bpm=100)


if __name__ == "__main__":
    main()
