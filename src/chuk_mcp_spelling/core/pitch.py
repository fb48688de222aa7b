"""
Pitch primitives - spelled notes and interval arithmetic.

A Pitch is a letter, a run of accidentals and an octave. Adding an
interval moves the letter by the interval's number and the height by its
semitones, then spells whatever accidentals are needed to reconcile the
two. That is what makes C + M3 come out as E rather than Fb.

Equality, hashing and ordering look at absolute height only, so C#4 and
Db4 compare equal while keeping their own names.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from functools import total_ordering

from chuk_mcp_spelling.constants import (
    DEFAULT_OCTAVE,
    ENHARMONIC_SEPARATOR,
    FLAT,
    LETTER_COUNT,
    MIDI_MAX,
    MIDI_MIN,
    SEMITONES_PER_OCTAVE,
    SHARP,
)
from chuk_mcp_spelling.core.errors import InvalidPitchName, UnrepresentableOctaveRange
from chuk_mcp_spelling.core.interval import Interval
from chuk_mcp_spelling.core.letter import Letter

logger = logging.getLogger(__name__)

_NAME_PATTERN = re.compile(r"^([A-G])([#b]*)(.*?)(-?\d+)?$")


def accidental_string(accidentals: int) -> str:
    """Render a signed accidental count: 2 -> '##', -1 -> 'b'."""
    if accidentals > 0:
        return SHARP * accidentals
    return FLAT * -accidentals


def natural_height(letter: Letter, octave: int) -> int:
    """Absolute height of a natural letter in an octave (C4 = 60)."""
    return letter.semitones_from_c + (octave + 1) * SEMITONES_PER_OCTAVE


@dataclass(frozen=True)
class ParsedPitchName:
    """
    Structured result of parsing a pitch name such as 'Eb4' or 'C##'.

    The octave is the trailing integer, if any. Anything between the
    accidentals and that integer is ignored, so 'Cx5' reads as C5.
    octave is None when the name ends without one.
    """

    letter: Letter
    accidentals: int
    accidental_text: str
    octave: int | None
    octave_text: str = ""

    @property
    def spelling(self) -> str:
        """Letter plus accidentals as written."""
        return f"{self.letter.value}{self.accidental_text}"


def parse_pitch_name(text: str) -> ParsedPitchName:
    """
    Parse a pitch name into letter, accidentals and optional octave.

    Args:
        text: Name like 'C', 'F#', 'Bb3', 'C##5', 'Cb-1'

    Returns:
        ParsedPitchName

    Raises:
        InvalidPitchName: If the name does not start with a letter A-G
    """
    match = _NAME_PATTERN.match(text.strip())
    if match is None:
        raise InvalidPitchName(text)

    letter_symbol, accidental_text, ignored, octave_text = match.groups()
    accidentals = accidental_text.count(SHARP) - accidental_text.count(FLAT)

    if ignored:
        logger.debug(f"Ignoring {ignored!r} in pitch name {text!r}")

    return ParsedPitchName(
        letter=Letter.parse(letter_symbol),
        accidentals=accidentals,
        accidental_text=accidental_text,
        octave=int(octave_text) if octave_text else None,
        octave_text=octave_text or "",
    )


@total_ordering
@dataclass(frozen=True, eq=False)
class Pitch:
    """
    A spelled note: name, letter, octave and semitones above C.

    semitones_above_c is the letter's offset from C plus its accidentals
    and is not clamped: Cb4 stores -1 and B#4 stores 12. The octave is
    always the octave of the letter, as in scientific pitch notation.

    Immutable. Operations that "change" a pitch return a new one.
    """

    name: str
    letter: Letter
    octave: int
    semitones_above_c: int

    # Construction

    @classmethod
    def from_name(cls, name: str, octave: int | None = None) -> Pitch:
        """
        Build a pitch from a name like 'Eb4' or 'F#'.

        The name keeps the octave written in it ('Eb4' stays 'Eb4'), so
        reparsing it gives the same height. An explicit octave replaces
        that suffix and the name is just the spelling.

        Args:
            name: Pitch name, optionally ending in an octave number
            octave: Explicit octave, overrides the one in the name

        Raises:
            InvalidPitchName: If the name does not start with a letter A-G
        """
        parsed = parse_pitch_name(name)
        spelled = parsed.spelling

        if octave is None:
            octave = parsed.octave
            spelled += parsed.octave_text
        if octave is None:
            logger.debug(f"No octave in {name!r}, defaulting to {DEFAULT_OCTAVE}")
            octave = DEFAULT_OCTAVE

        return cls(
            name=spelled,
            letter=parsed.letter,
            octave=octave,
            semitones_above_c=parsed.letter.semitones_from_c + parsed.accidentals,
        )

    @classmethod
    def from_absolute_semitone(cls, semitones_above_lowest_c: int) -> Pitch:
        """
        Build a pitch from an absolute height (MIDI note number).

        The letter is the natural at or below the pitch class, so black
        keys are spelled with a sharp. Their name carries the flat
        alternate too: 61 -> 'C#/Db'.
        """
        octave = semitones_above_lowest_c // SEMITONES_PER_OCTAVE - 1
        pitch_class = semitones_above_lowest_c % SEMITONES_PER_OCTAVE

        letter = max(
            (candidate for candidate in Letter if candidate.semitones_from_c <= pitch_class),
            key=lambda candidate: candidate.semitones_from_c,
        )

        pitch = cls(
            name=letter.value + accidental_string(pitch_class - letter.semitones_from_c),
            letter=letter,
            octave=octave,
            semitones_above_c=pitch_class,
        )
        return pitch.with_name(pitch.name_with_enharmonics())

    @classmethod
    def from_midi(cls, midi_note: int) -> Pitch:
        """Alias of from_absolute_semitone."""
        return cls.from_absolute_semitone(midi_note)

    # Derived values

    @property
    def height(self) -> int:
        """Absolute height in semitones above the lowest C (C4 = 60)."""
        return self.semitones_above_c + (self.octave + 1) * SEMITONES_PER_OCTAVE

    @property
    def semitones_from_lowest_c(self) -> int:
        """Alias of height."""
        return self.height

    @property
    def accidentals(self) -> int:
        """Signed accidental count: sharps positive, flats negative."""
        return self.semitones_above_c - self.letter.semitones_from_c

    @property
    def spelling(self) -> str:
        """Letter plus accidentals, without any enharmonic alternate."""
        return self.letter.value + accidental_string(self.accidentals)

    @property
    def pitch_class(self) -> int:
        """Octave-independent pitch class (0-11)."""
        return self.height % SEMITONES_PER_OCTAVE

    def to_midi(self) -> int:
        """
        MIDI note number of this pitch.

        Raises:
            UnrepresentableOctaveRange: If the height is outside 0-127
        """
        if not MIDI_MIN <= self.height <= MIDI_MAX:
            raise UnrepresentableOctaveRange(self.height)
        return self.height

    # Interval arithmetic

    def add_interval(self, interval: Interval) -> Pitch:
        """
        Add an interval, spelling the result diatonically.

        The letter moves up by the interval's number (a third moves two
        letters) and the octave changes each time the letter passes B.
        Accidentals are whatever it takes to land on the exact height:

            C4 + M3 -> E4
            C4 + m3 -> Eb4
            B4 + m2 -> C5
            B#4 + M2 -> C##5

        The result is always exactly interval.semitones above this pitch.
        """
        position = self.letter.index + interval.steps
        letter = Letter.at_index(position)
        octave = self.octave + position // LETTER_COUNT

        target = self.height + interval.semitones
        accidentals = target - natural_height(letter, octave)

        return Pitch(
            name=letter.value + accidental_string(accidentals),
            letter=letter,
            octave=octave,
            semitones_above_c=letter.semitones_from_c + accidentals,
        )

    def subtract_interval(self, interval: Interval) -> Pitch:
        """
        Subtract an interval by adding its inversion and dropping octaves.

        Going up by the inversion and then down by the octaves the pair
        spans lands exactly interval.semitones below this pitch:

            E4 - M3 = (E4 + m6) - 1 octave = C4
            D5 - M9 = (D5 + m7) - 2 octaves = C4
        """
        raised = self.add_interval(interval.invert())
        return raised.with_octave(raised.octave - interval.octave_span)

    def interval_to(self, other: Pitch) -> Interval:
        """
        Get the interval from this pitch up to another.

        Raises:
            ValueError: If the other pitch is spelled below this one
        """
        number = (
            other.letter.index
            + other.octave * LETTER_COUNT
            - self.letter.index
            - self.octave * LETTER_COUNT
            + 1
        )
        if number < 1:
            raise ValueError(f"{other} is spelled below {self}")
        return Interval(number, other.height - self.height)

    # Spelling

    def enharmonic(self) -> Pitch | None:
        """
        Get the enharmonic respelling on the neighbouring letter.

        Sharps move to the letter above, flats to the letter below:
            C#4 -> Db4, Fb4 -> E4, Cb4 -> B3, B#4 -> C5

        Natural pitches have no alternate and return None.
        """
        if self.accidentals == 0:
            return None

        direction = 1 if self.accidentals > 0 else -1
        position = self.letter.index + direction
        letter = Letter.at_index(position)
        octave = self.octave + position // LETTER_COUNT
        accidentals = self.height - natural_height(letter, octave)

        return Pitch(
            name=letter.value + accidental_string(accidentals),
            letter=letter,
            octave=octave,
            semitones_above_c=letter.semitones_from_c + accidentals,
        )

    def name_with_enharmonics(self) -> str:
        """Spelling plus enharmonic alternate, e.g. 'C#/Db'."""
        if ENHARMONIC_SEPARATOR in self.name:
            return self.name
        alternate = self.enharmonic()
        if alternate is None:
            return self.spelling
        return f"{self.spelling}{ENHARMONIC_SEPARATOR}{alternate.spelling}"

    # Rebuilders

    def with_octave(self, octave: int) -> Pitch:
        """Same spelling in another octave. A name ending in an octave follows it."""
        name = self.name
        if name[-1:].isdigit():
            name = f"{self.spelling}{octave}"
        return Pitch(name, self.letter, octave, self.semitones_above_c)

    def with_name(self, name: str) -> Pitch:
        """Same pitch under another display name."""
        return Pitch(name, self.letter, self.octave, self.semitones_above_c)

    def transpose_octaves(self, octaves: int) -> Pitch:
        """Move by whole octaves, keeping the spelling."""
        return self.with_octave(self.octave + octaves)

    def to_dict(self) -> dict[str, str | int]:
        """Plain-data form for JSON output."""
        return {
            "name": self.name,
            "spelling": self.spelling,
            "letter": self.letter.value,
            "accidentals": self.accidentals,
            "octave": self.octave,
            "height": self.height,
            "pitch": str(self),
        }

    # Comparison (by height only)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pitch):
            return NotImplemented
        return self.height == other.height

    def __lt__(self, other: Pitch) -> bool:
        if not isinstance(other, Pitch):
            return NotImplemented
        return self.height < other.height

    def __hash__(self) -> int:
        return hash(self.height)

    def __str__(self) -> str:
        return f"{self.spelling}{self.octave}"
