"""
Catalog models - named interval collections.

A chord or a scale is just an ordered list of intervals above a root,
plus the names and suffixes people use for it. Realizing one against a
root asks the pitch engine to add each interval in turn.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from chuk_mcp_spelling.constants import CollectionKind
from chuk_mcp_spelling.core.interval import Interval
from chuk_mcp_spelling.core.pitch import Pitch


class IntervalCollection(BaseModel):
    """
    A named, ordered list of intervals (a chord structure or a scale).

    Intervals may be given as Interval objects or as symbols ('M3', 'b7')
    in catalog files.
    """

    id: str = Field(..., description="Unique identifier (e.g., 'dom7')")
    name: str = Field(..., description="Display name (e.g., 'Dominant Seventh')")
    kind: CollectionKind = Field(default=CollectionKind.CHORD, description="Chord or scale")
    suffixes: tuple[str, ...] = Field(
        default_factory=tuple,
        description="Symbol suffixes/aliases used for lookup (e.g., '7', 'dom7')",
    )
    intervals: tuple[Interval, ...] = Field(..., description="Intervals above the root, in order")
    description: str = Field("", description="Human-readable description")

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    @field_validator("intervals", mode="before")
    @classmethod
    def parse_intervals(cls, v: Any) -> tuple[Interval, ...]:
        """Accept interval symbols as well as Interval objects."""
        if isinstance(v, (str, Interval)):
            v = [v]
        intervals = tuple(
            item if isinstance(item, Interval) else Interval.parse(str(item)) for item in v
        )
        if not intervals:
            raise ValueError("A collection needs at least one interval")
        return intervals

    @field_validator("suffixes", mode="before")
    @classmethod
    def normalize_suffixes(cls, v: Any) -> tuple[str, ...]:
        """Suffixes are strings; YAML may hand us ints ('7', '6')."""
        if v is None:
            return ()
        if isinstance(v, (str, int)):
            v = [v]
        return tuple("" if item is None else str(item) for item in v)

    @property
    def key(self) -> str:
        """Catalog key in kind/id form (e.g., 'chord/dom7', 'scale/dorian')."""
        return f"{self.kind.value}/{self.id}"

    def realize(self, root: Pitch) -> list[Pitch]:
        """
        Spell every member of the collection above a root.

        Args:
            root: The root pitch

        Returns:
            One pitch per interval, in collection order
        """
        return [root.add_interval(interval) for interval in self.intervals]

    def formula(self) -> list[str]:
        """Degree labels of the members (e.g., ['1', '3', '5', 'b7'])."""
        return [interval.degree_label for interval in self.intervals]

    def matches_suffix(self, suffix: str) -> bool:
        """Check whether this collection answers to a suffix."""
        return suffix in self.suffixes

    def to_dict(self) -> dict[str, Any]:
        """Plain-data form for YAML/JSON output."""
        return {
            "id": self.id,
            "name": self.name,
            "kind": self.kind.value,
            "suffixes": list(self.suffixes),
            "intervals": [str(interval) for interval in self.intervals],
            "formula": self.formula(),
            "description": self.description,
        }

    def __str__(self) -> str:
        return self.name
