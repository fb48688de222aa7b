"""
Formula tables - one row per collection, realized over a root.

    | Name             | Abbreviation | Formula                        |
    | Dominant Seventh | C7, Cdom7    | C(1) - E(3) - G(5) - Bb(b7)    |
"""

from __future__ import annotations

from collections.abc import Iterable
from html import escape

from chuk_mcp_spelling.catalog.models import IntervalCollection
from chuk_mcp_spelling.constants import TableFormat
from chuk_mcp_spelling.core.pitch import Pitch

_HEADERS = ("Name", "Abbreviation", "Formula")


def formula_row(collection: IntervalCollection, root: Pitch) -> tuple[str, str, str]:
    """Name, abbreviations and spelled formula of one collection."""
    abbreviations = ", ".join(f"{root.spelling}{suffix}" for suffix in collection.suffixes)
    notes = collection.realize(root)
    formula = " - ".join(
        f"{note.spelling}({label})" for note, label in zip(notes, collection.formula())
    )
    return collection.name, abbreviations, formula


def build_formula_table(
    collections: Iterable[IntervalCollection],
    root: Pitch,
    fmt: TableFormat = "markdown",
) -> str:
    """
    Render a formula table for a set of collections over one root.

    Args:
        collections: Chords or scales to list, in order
        root: Root every collection is realized over
        fmt: 'markdown' or 'html'

    Returns:
        The rendered table
    """
    rows = [formula_row(collection, root) for collection in collections]

    if fmt == "html":
        return _render_html(rows)
    if fmt == "markdown":
        return _render_markdown(rows)
    raise ValueError(f"Unknown table format: {fmt}")


def _render_markdown(rows: list[tuple[str, str, str]]) -> str:
    lines = [
        "| " + " | ".join(_HEADERS) + " |",
        "| " + " | ".join("---" for _ in _HEADERS) + " |",
    ]
    lines.extend("| " + " | ".join(row) + " |" for row in rows)
    return "\n".join(lines)


def _render_html(rows: list[tuple[str, str, str]]) -> str:
    head = "".join(f"<th>{escape(header)}</th>" for header in _HEADERS)
    body = "".join(
        "<tr>" + "".join(f"<td>{escape(cell)}</td>" for cell in row) + "</tr>" for row in rows
    )
    return f"<table><thead><tr>{head}</tr></thead><tbody>{body}</tbody></table>"
