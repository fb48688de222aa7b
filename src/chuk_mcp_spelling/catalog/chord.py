"""
Chord symbols - 'C', 'F#m7', 'Bbmaj7#11', 'C/F#', 'C6/9'.

A symbol is a root spelling, a suffix looked up in the catalog and an
optional slash bass. The concrete Chord realizes its structure with the
pitch engine, so every tone is spelled from the root's letter.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from chuk_mcp_spelling.constants import DEFAULT_OCTAVE, ErrorMessages
from chuk_mcp_spelling.core.errors import InvalidPitchName, UnknownCollectionAlias
from chuk_mcp_spelling.core.pitch import Pitch

if TYPE_CHECKING:
    from chuk_mcp_spelling.catalog.loader import CatalogLoader
    from chuk_mcp_spelling.catalog.models import IntervalCollection

_ROOT_PATTERN = re.compile(r"^([A-G])([#b]*)(.*)$")
_BASS_PATTERN = re.compile(r"^[A-G][#b]*$")


@dataclass(frozen=True)
class ChordSymbol:
    """Syntactic parts of a chord symbol."""

    root: str
    suffix: str
    bass: str | None = None

    def __str__(self) -> str:
        text = f"{self.root}{self.suffix}"
        if self.bass:
            text += f"/{self.bass}"
        return text


def parse_chord_symbol(symbol: str, catalog: CatalogLoader | None = None) -> ChordSymbol:
    """
    Split a chord symbol into root, suffix and slash bass.

    A trailing '/X' is a bass note only when X is a pitch name, so the
    slash in '6/9' stays part of the suffix.

    Without a catalog the root takes every accidental that follows the
    letter. With a catalog, shorter roots are tried until the suffix is
    known, so 'Cb5' reads as C + 'b5' when 'b5' is a chord and 'Cb' is
    not followed by a known suffix.

    Raises:
        InvalidPitchName: If the symbol does not start with a letter A-G
        UnknownCollectionAlias: If a catalog is given and no split matches
    """
    text = symbol.strip()

    bass: str | None = None
    head, slash, tail = text.rpartition("/")
    if slash and _BASS_PATTERN.match(tail):
        text, bass = head, tail

    match = _ROOT_PATTERN.match(text)
    if match is None:
        raise InvalidPitchName(symbol)

    letter, accidentals, rest = match.groups()

    if catalog is None:
        return ChordSymbol(root=letter + accidentals, suffix=rest, bass=bass)

    # Longest root first: 'Bb' + '' beats 'B' + 'b'
    for split in range(len(accidentals), -1, -1):
        suffix = accidentals[split:] + rest
        if catalog.lookup_suffix(suffix) is not None:
            return ChordSymbol(root=letter + accidentals[:split], suffix=suffix, bass=bass)

    raise UnknownCollectionAlias(rest)


@dataclass(frozen=True)
class Chord:
    """
    A concrete chord: root pitch, interval structure, optional slash bass.

    This is the resolved form - an actual set of spelled pitches.
    """

    root: Pitch
    structure: IntervalCollection
    bass: Pitch | None = None
    suffix: str | None = None

    @classmethod
    def from_symbol(
        cls,
        symbol: str,
        catalog: CatalogLoader,
        octave: int = DEFAULT_OCTAVE,
    ) -> Chord:
        """
        Resolve a chord symbol against the catalog.

        Args:
            symbol: Chord symbol (e.g., 'C7', 'F#m7b5', 'C/F#')
            catalog: Catalog to look the suffix up in
            octave: Octave of the root (default 4)

        Returns:
            A concrete Chord
        """
        parsed = parse_chord_symbol(symbol, catalog)
        root = Pitch.from_name(parsed.root, octave)
        bass = Pitch.from_name(parsed.bass, octave) if parsed.bass else None
        return cls(
            root=root,
            structure=catalog.find_by_suffix(parsed.suffix),
            bass=bass,
            suffix=parsed.suffix,
        )

    @property
    def symbol(self) -> str:
        """Chord symbol, e.g. 'Bbm7/F'."""
        suffix = self.suffix
        if suffix is None:
            suffix = self.structure.suffixes[0] if self.structure.suffixes else ""
        bass = self.bass.spelling if self.bass else None
        return str(ChordSymbol(root=self.root.spelling, suffix=suffix, bass=bass))

    def tones(self) -> list[Pitch]:
        """Chord tones above the root, in structure order (no slash bass)."""
        return self.structure.realize(self.root)

    def notes(self) -> list[Pitch]:
        """All pitches, with a slash bass placed below the root."""
        tones = self.tones()
        if self.bass is None:
            return tones

        bass = self.bass.with_octave(self.root.octave)
        while bass >= self.root:
            bass = bass.transpose_octaves(-1)
        return [bass, *tones]

    def inversion(self, inversion: int) -> list[Pitch]:
        """
        Voice the chord with its lowest tones raised an octave.

        Args:
            inversion: 0 = root position, 1 = first inversion, ...

        Returns:
            Pitches sorted by height

        Raises:
            ValueError: If the inversion is out of range for this chord
        """
        tones = self.tones()
        if not 0 <= inversion < len(tones):
            raise ValueError(
                ErrorMessages.INVALID_INVERSION.format(inversion=inversion, size=len(tones))
            )
        raised = [tone.transpose_octaves(1) for tone in tones[:inversion]]
        return sorted(raised + tones[inversion:])

    def pitch_classes(self) -> frozenset[int]:
        """Octave-independent pitch classes of all notes."""
        return frozenset(note.pitch_class for note in self.notes())

    def matches_notes(self, pitches: list[Pitch]) -> bool:
        """True when the pitches sound the same pitch classes as this chord."""
        return frozenset(p.pitch_class for p in pitches) == self.pitch_classes()

    def matches_notes_and_inversion(self, pitches: list[Pitch]) -> bool:
        """Like matches_notes, and the lowest pitch is this chord's lowest note."""
        if not pitches or not self.matches_notes(pitches):
            return False
        return min(pitches).pitch_class == min(self.notes()).pitch_class

    def describe(self) -> dict[str, Any]:
        """Plain-data description for JSON output."""
        notes = self.notes()
        return {
            "symbol": self.symbol,
            "name": self.structure.name,
            "root": str(self.root),
            "bass": str(notes[0]) if self.bass else None,
            "formula": self.structure.formula(),
            "notes": [note.name for note in notes],
            "pitches": [str(note) for note in notes],
            "heights": [note.height for note in notes],
        }

    def __str__(self) -> str:
        return self.symbol
