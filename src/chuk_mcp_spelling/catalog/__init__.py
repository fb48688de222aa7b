"""
Catalog - named chord and scale structures built on the pitch engine.

Collections are static interval lists loaded from YAML. Realizing one
over a root asks the engine to add each interval in turn.
"""

from chuk_mcp_spelling.catalog.chord import Chord, ChordSymbol, parse_chord_symbol
from chuk_mcp_spelling.catalog.loader import CatalogLoader
from chuk_mcp_spelling.catalog.models import IntervalCollection
from chuk_mcp_spelling.catalog.report import build_formula_table, formula_row

__all__ = [
    "CatalogLoader",
    "Chord",
    "ChordSymbol",
    "IntervalCollection",
    "build_formula_table",
    "formula_row",
    "parse_chord_symbol",
]
