"""
Letter primitives - the seven natural note names.

Each letter has a fixed semitone offset from C and a position in the
7-letter cycle. Positions are counted from C so that stepping past B is
exactly where the octave number changes.
"""

from __future__ import annotations

from enum import Enum

from chuk_mcp_spelling.constants import LETTER_COUNT
from chuk_mcp_spelling.core.errors import InvalidPitchName


class Letter(Enum):
    """
    The seven natural letters.

    Lookups go through the explicit tables below, keyed by member,
    so reordering the members never changes the arithmetic.
    """

    C = "C"
    D = "D"
    E = "E"
    F = "F"
    G = "G"
    A = "A"
    B = "B"

    @property
    def semitones_from_c(self) -> int:
        """Semitones from C up to this natural letter."""
        return _SEMITONES_FROM_C[self]

    @property
    def index(self) -> int:
        """Position in the letter cycle (C=0 ... B=6)."""
        return _LETTER_INDEX[self]

    def step(self, steps: int) -> Letter:
        """The letter `steps` positions away (negative steps go down)."""
        return Letter.at_index(self.index + steps)

    @classmethod
    def at_index(cls, index: int) -> Letter:
        """Letter at a cycle position, reduced modulo 7 (negatives allowed)."""
        return _LETTERS_BY_INDEX[index % LETTER_COUNT]

    @classmethod
    def parse(cls, symbol: str) -> Letter:
        """Parse an uppercase letter symbol."""
        try:
            return cls(symbol)
        except ValueError:
            raise InvalidPitchName(symbol) from None

    def __str__(self) -> str:
        return self.value


# Lookup tables (module level to avoid Enum member issues)
_SEMITONES_FROM_C: dict[Letter, int] = {
    Letter.C: 0,
    Letter.D: 2,
    Letter.E: 4,
    Letter.F: 5,
    Letter.G: 7,
    Letter.A: 9,
    Letter.B: 11,
}

_LETTER_INDEX: dict[Letter, int] = {
    Letter.C: 0,
    Letter.D: 1,
    Letter.E: 2,
    Letter.F: 3,
    Letter.G: 4,
    Letter.A: 5,
    Letter.B: 6,
}

_LETTERS_BY_INDEX: tuple[Letter, ...] = tuple(
    sorted(_LETTER_INDEX, key=lambda letter: _LETTER_INDEX[letter])
)
