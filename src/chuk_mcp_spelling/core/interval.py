"""
Interval primitives - diatonic intervals with a semitone size.

An interval carries two independent measurements:
- number: distance in letter steps (1 = unison, 3 = third, 9 = ninth)
- semitones: distance in half steps

The number decides which letter a note lands on, the semitones decide how
high it sounds. The pitch engine reconciles the two with accidentals.
"""

from __future__ import annotations

import re
from enum import Enum
from functools import total_ordering
from typing import ClassVar

from chuk_mcp_spelling.constants import FLAT, LETTER_COUNT, SEMITONES_PER_OCTAVE, SHARP
from chuk_mcp_spelling.core.errors import InvalidIntervalSymbol

# Major/perfect size of each simple interval number
_BASE_SEMITONES: dict[int, int] = {
    1: 0,
    2: 2,
    3: 4,
    4: 5,
    5: 7,
    6: 9,
    7: 11,
    8: 12,
}

_PERFECT_NUMBERS = frozenset({1, 4, 5, 8})

_SYMBOL_PATTERN = re.compile(r"^(P|M|m|A+|d+)(\d+)$")
_DEGREE_PATTERN = re.compile(r"^([#b]*)(\d+)$")


class IntervalQuality(str, Enum):
    """Interval qualities, by their conventional symbol."""

    PERFECT = "P"
    MAJOR = "M"
    MINOR = "m"
    AUGMENTED = "A"
    DIMINISHED = "d"


def _extra_octaves(number: int) -> int:
    """Whole octaves above the simple form (9th -> 1, 15th -> 1, 16th -> 2)."""
    return max(0, (number - 2) // LETTER_COUNT)


def _simple_number(number: int) -> int:
    return number - LETTER_COUNT * _extra_octaves(number)


def _base_semitones(number: int) -> int:
    extra = _extra_octaves(number)
    return _BASE_SEMITONES[number - LETTER_COUNT * extra] + SEMITONES_PER_OCTAVE * extra


@total_ordering
class Interval:
    """
    A diatonic interval: a number of letter steps plus a size in semitones.

    Immutable and hashable. Two intervals are equal only when both the
    number and the size match, so an augmented second and a minor third
    are different intervals even though they sound the same.
    """

    __slots__ = ("_number", "_semitones")
    _number: int
    _semitones: int

    # Named intervals (class constants)
    P1: ClassVar[Interval]
    A1: ClassVar[Interval]
    m2: ClassVar[Interval]
    M2: ClassVar[Interval]
    A2: ClassVar[Interval]
    m3: ClassVar[Interval]
    M3: ClassVar[Interval]
    P4: ClassVar[Interval]
    A4: ClassVar[Interval]
    d5: ClassVar[Interval]
    P5: ClassVar[Interval]
    A5: ClassVar[Interval]
    m6: ClassVar[Interval]
    M6: ClassVar[Interval]
    A6: ClassVar[Interval]
    d7: ClassVar[Interval]
    m7: ClassVar[Interval]
    M7: ClassVar[Interval]
    P8: ClassVar[Interval]
    m9: ClassVar[Interval]
    M9: ClassVar[Interval]
    A9: ClassVar[Interval]
    P11: ClassVar[Interval]
    A11: ClassVar[Interval]
    m13: ClassVar[Interval]
    M13: ClassVar[Interval]
    P15: ClassVar[Interval]

    # Long-form aliases
    UNISON: ClassVar[Interval]
    MINOR_SECOND: ClassVar[Interval]
    MAJOR_SECOND: ClassVar[Interval]
    MINOR_THIRD: ClassVar[Interval]
    MAJOR_THIRD: ClassVar[Interval]
    PERFECT_FOURTH: ClassVar[Interval]
    AUGMENTED_FOURTH: ClassVar[Interval]
    DIMINISHED_FIFTH: ClassVar[Interval]
    PERFECT_FIFTH: ClassVar[Interval]
    AUGMENTED_FIFTH: ClassVar[Interval]
    MINOR_SIXTH: ClassVar[Interval]
    MAJOR_SIXTH: ClassVar[Interval]
    DIMINISHED_SEVENTH: ClassVar[Interval]
    MINOR_SEVENTH: ClassVar[Interval]
    MAJOR_SEVENTH: ClassVar[Interval]
    OCTAVE: ClassVar[Interval]
    MINOR_NINTH: ClassVar[Interval]
    MAJOR_NINTH: ClassVar[Interval]
    PERFECT_ELEVENTH: ClassVar[Interval]
    MINOR_THIRTEENTH: ClassVar[Interval]
    MAJOR_THIRTEENTH: ClassVar[Interval]

    def __init__(self, number: int, semitones: int) -> None:
        """Create an interval from a diatonic number and a semitone size."""
        if number < 1:
            raise ValueError(f"Interval number must be >= 1, got {number}")
        object.__setattr__(self, "_number", number)
        object.__setattr__(self, "_semitones", semitones)

    @property
    def number(self) -> int:
        """Diatonic number (1 = unison, 8 = octave, 9 = ninth)."""
        return self._number

    @property
    def semitones(self) -> int:
        """Number of semitones in this interval."""
        return self._semitones

    @property
    def steps(self) -> int:
        """Letter steps to advance: a third moves two letters."""
        return self._number - 1

    @property
    def is_compound(self) -> bool:
        """True for intervals wider than an octave (9th and up)."""
        return self._number > 8

    @property
    def simple_number(self) -> int:
        """The number reduced into 1-8 (ninth -> 2, thirteenth -> 6)."""
        return _simple_number(self._number)

    @property
    def octave_span(self) -> int:
        """Octaves completed by this interval together with its inversion."""
        return _extra_octaves(self._number) + 1

    @property
    def alteration(self) -> int:
        """Semitones away from the major/perfect interval of the same number."""
        return self._semitones - _base_semitones(self._number)

    @property
    def quality(self) -> IntervalQuality:
        """Quality of the interval (doubly altered ones report A or d)."""
        alteration = self.alteration
        if alteration > 0:
            return IntervalQuality.AUGMENTED
        if self.simple_number in _PERFECT_NUMBERS:
            if alteration == 0:
                return IntervalQuality.PERFECT
            return IntervalQuality.DIMINISHED
        if alteration == 0:
            return IntervalQuality.MAJOR
        if alteration == -1:
            return IntervalQuality.MINOR
        return IntervalQuality.DIMINISHED

    @property
    def symbol(self) -> str:
        """Quality symbol plus number, e.g. 'M3', 'P5', 'dd7'."""
        alteration = self.alteration
        if alteration > 0:
            quality = IntervalQuality.AUGMENTED.value * alteration
        elif self.simple_number in _PERFECT_NUMBERS:
            quality = "P" if alteration == 0 else "d" * -alteration
        elif alteration in (0, -1):
            quality = "M" if alteration == 0 else "m"
        else:
            quality = "d" * (-alteration - 1)
        return f"{quality}{self._number}"

    @property
    def degree_label(self) -> str:
        """Chord-formula label: '1', '3', 'b7', '#11'."""
        alteration = self.alteration
        accidentals = SHARP * alteration if alteration > 0 else FLAT * -alteration
        return f"{accidentals}{self._number}"

    def invert(self) -> Interval:
        """
        Invert the interval.

        A simple interval is complemented within one octave:
            M3 (3rd, 4) -> m6 (6th, 8)
            P5 (5th, 7) -> P4 (4th, 5)

        A compound interval is complemented across two octaves, which
        leaves a simple interval:
            M9 (9th, 14) -> m7 (7th, 10)

        Stacking an interval on its inversion always spans exactly
        `octave_span` octaves.
        """
        span = self.octave_span
        return Interval(
            LETTER_COUNT * span + 2 - self._number,
            SEMITONES_PER_OCTAVE * span - self._semitones,
        )

    @classmethod
    def parse(cls, symbol: str) -> Interval:
        """
        Parse an interval from a quality symbol or a degree label.

        Accepts 'M3', 'm7', 'P5', 'A4', 'd5', 'AA4' as well as
        formula labels '3', 'b3', 'b7', '#11', 'bb7'.
        """
        text = symbol.strip()

        match = _SYMBOL_PATTERN.match(text)
        if match:
            quality, digits = match.groups()
            number = int(digits)
            if number < 1:
                raise InvalidIntervalSymbol(symbol)
            perfect = _simple_number(number) in _PERFECT_NUMBERS

            if quality == "P":
                if not perfect:
                    raise InvalidIntervalSymbol(symbol)
                alteration = 0
            elif quality in ("M", "m"):
                if perfect:
                    raise InvalidIntervalSymbol(symbol)
                alteration = 0 if quality == "M" else -1
            elif quality.startswith("A"):
                alteration = len(quality)
            else:
                alteration = -len(quality) if perfect else -len(quality) - 1

            return cls(number, _base_semitones(number) + alteration)

        match = _DEGREE_PATTERN.match(text)
        if match:
            accidentals, digits = match.groups()
            number = int(digits)
            if number < 1:
                raise InvalidIntervalSymbol(symbol)
            alteration = accidentals.count(SHARP) - accidentals.count(FLAT)
            return cls(number, _base_semitones(number) + alteration)

        raise InvalidIntervalSymbol(symbol)

    def __add__(self, other: Interval) -> Interval:
        """Stack two intervals: M3 + m3 = P5."""
        if not isinstance(other, Interval):
            return NotImplemented
        return Interval(self._number + other._number - 1, self._semitones + other._semitones)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self._number == other._number and self._semitones == other._semitones

    def __lt__(self, other: Interval) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return (self._semitones, self._number) < (other._semitones, other._number)

    def __hash__(self) -> int:
        return hash((self._number, self._semitones))

    def __repr__(self) -> str:
        symbol = self.symbol
        named = getattr(Interval, symbol, None)
        if isinstance(named, Interval) and named == self:
            return f"Interval.{symbol}"
        return f"Interval({self._number}, {self._semitones})"

    def __str__(self) -> str:
        return self.symbol


# Initialize class constants after class is defined
Interval.P1 = Interval(1, 0)
Interval.A1 = Interval(1, 1)
Interval.m2 = Interval(2, 1)
Interval.M2 = Interval(2, 2)
Interval.A2 = Interval(2, 3)
Interval.m3 = Interval(3, 3)
Interval.M3 = Interval(3, 4)
Interval.P4 = Interval(4, 5)
Interval.A4 = Interval(4, 6)
Interval.d5 = Interval(5, 6)
Interval.P5 = Interval(5, 7)
Interval.A5 = Interval(5, 8)
Interval.m6 = Interval(6, 8)
Interval.M6 = Interval(6, 9)
Interval.A6 = Interval(6, 10)
Interval.d7 = Interval(7, 9)
Interval.m7 = Interval(7, 10)
Interval.M7 = Interval(7, 11)
Interval.P8 = Interval(8, 12)
Interval.m9 = Interval(9, 13)
Interval.M9 = Interval(9, 14)
Interval.A9 = Interval(9, 15)
Interval.P11 = Interval(11, 17)
Interval.A11 = Interval(11, 18)
Interval.m13 = Interval(13, 20)
Interval.M13 = Interval(13, 21)
Interval.P15 = Interval(15, 24)

# Long-form aliases
Interval.UNISON = Interval.P1
Interval.MINOR_SECOND = Interval.m2
Interval.MAJOR_SECOND = Interval.M2
Interval.MINOR_THIRD = Interval.m3
Interval.MAJOR_THIRD = Interval.M3
Interval.PERFECT_FOURTH = Interval.P4
Interval.AUGMENTED_FOURTH = Interval.A4
Interval.DIMINISHED_FIFTH = Interval.d5
Interval.PERFECT_FIFTH = Interval.P5
Interval.AUGMENTED_FIFTH = Interval.A5
Interval.MINOR_SIXTH = Interval.m6
Interval.MAJOR_SIXTH = Interval.M6
Interval.DIMINISHED_SEVENTH = Interval.d7
Interval.MINOR_SEVENTH = Interval.m7
Interval.MAJOR_SEVENTH = Interval.M7
Interval.OCTAVE = Interval.P8
Interval.MINOR_NINTH = Interval.m9
Interval.MAJOR_NINTH = Interval.M9
Interval.PERFECT_ELEVENTH = Interval.P11
Interval.MINOR_THIRTEENTH = Interval.m13
Interval.MAJOR_THIRTEENTH = Interval.M13

# Every named interval, ordered by number
NAMED_INTERVALS: tuple[Interval, ...] = (
    Interval.P1,
    Interval.A1,
    Interval.m2,
    Interval.M2,
    Interval.A2,
    Interval.m3,
    Interval.M3,
    Interval.P4,
    Interval.A4,
    Interval.d5,
    Interval.P5,
    Interval.A5,
    Interval.m6,
    Interval.M6,
    Interval.A6,
    Interval.d7,
    Interval.m7,
    Interval.M7,
    Interval.P8,
    Interval.m9,
    Interval.M9,
    Interval.A9,
    Interval.P11,
    Interval.A11,
    Interval.m13,
    Interval.M13,
    Interval.P15,
)
