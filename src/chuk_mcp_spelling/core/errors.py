"""
Errors raised by the spelling engine and the catalog.

All of them are raised at construction or lookup time - there are no
partially built values.
"""

from __future__ import annotations

from chuk_mcp_spelling.constants import ErrorMessages


class SpellingError(ValueError):
    """Base class for all spelling errors."""


class InvalidPitchName(SpellingError):
    """The first character of a pitch name is not a letter A-G."""

    def __init__(self, name: str) -> None:
        super().__init__(ErrorMessages.INVALID_PITCH_NAME.format(name=name))
        self.name = name


class InvalidIntervalSymbol(SpellingError):
    """An interval symbol could not be parsed."""

    def __init__(self, symbol: str) -> None:
        super().__init__(ErrorMessages.INVALID_INTERVAL.format(symbol=symbol))
        self.symbol = symbol


class UnknownCollectionAlias(SpellingError, KeyError):
    """No chord or scale in the catalog answers to the given suffix."""

    def __init__(self, suffix: str, kind: str = "chord") -> None:
        message = ErrorMessages.UNKNOWN_ALIAS.format(kind=kind, suffix=suffix)
        super().__init__(message)
        self.suffix = suffix
        self.kind = kind

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class UnrepresentableOctaveRange(SpellingError):
    """A pitch height falls outside the representable MIDI range."""

    def __init__(self, height: int) -> None:
        super().__init__(ErrorMessages.OUT_OF_MIDI_RANGE.format(height=height))
        self.height = height
