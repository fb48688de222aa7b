"""
Catalog loader - discovers and loads chord and scale collections.

Collections can come from:
1. Built-in library (shipped with package)
2. Project catalog (user's project/catalog directory)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from chuk_mcp_spelling.catalog.models import IntervalCollection
from chuk_mcp_spelling.constants import CollectionKind
from chuk_mcp_spelling.core.errors import UnknownCollectionAlias

logger = logging.getLogger(__name__)


class CatalogLoader:
    """
    Discovers and loads named interval collections.

    Collections are loaded from YAML files in the library and project
    directories. Project entries override library entries with the same
    kind and id. The loaded table is built once and never mutated.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the catalog loader.

        Args:
            library_path: Path to built-in catalog library
            project_path: Path to project catalog directory
        """
        self.library_path = library_path or (Path(__file__).parent / "library")
        self.project_path = project_path
        self._cache: dict[str, IntervalCollection] | None = None

    def list_collections(self, kind: CollectionKind | None = None) -> list[IntervalCollection]:
        """
        List all available collections in catalog order.

        Args:
            kind: Only chords or only scales

        Returns:
            List of collections
        """
        collections = list(self._collections().values())
        if kind is not None:
            collections = [c for c in collections if c.kind == kind]
        return collections

    def get(self, key: str) -> IntervalCollection | None:
        """
        Get a collection by key.

        Args:
            key: 'kind/id' (e.g., 'chord/dom7'); a bare id is looked up as a chord

        Returns:
            Collection if found, None otherwise
        """
        if "/" not in key:
            key = f"{CollectionKind.CHORD.value}/{key}"
        return self._collections().get(key)

    def lookup_suffix(
        self,
        suffix: str,
        kind: CollectionKind = CollectionKind.CHORD,
    ) -> IntervalCollection | None:
        """
        Look up the collection answering to a symbol suffix.

        Args:
            suffix: Suffix as written after the root ('m7', '7', '', 'dorian')
            kind: Chord or scale

        Returns:
            The first matching collection in catalog order, None if there is none
        """
        for collection in self.list_collections(kind):
            if collection.matches_suffix(suffix):
                return collection
        return None

    def find_by_suffix(
        self,
        suffix: str,
        kind: CollectionKind = CollectionKind.CHORD,
    ) -> IntervalCollection:
        """
        Find the collection answering to a symbol suffix.

        Raises:
            UnknownCollectionAlias: If nothing answers to the suffix
        """
        collection = self.lookup_suffix(suffix, kind)
        if collection is None:
            raise UnknownCollectionAlias(suffix, kind.value)
        return collection

    def clear_cache(self) -> None:
        """Forget loaded collections; the next lookup reloads from disk."""
        self._cache = None

    def _collections(self) -> dict[str, IntervalCollection]:
        if self._cache is None:
            collections: dict[str, IntervalCollection] = {}

            # Library first, project entries override
            for directory in (self.library_path, self.project_path):
                if directory and directory.exists():
                    for path in sorted(directory.glob("*.yaml")):
                        for collection in self._load_catalog_file(path):
                            collections[collection.key] = collection

            logger.debug(f"Loaded {len(collections)} catalog collections")
            self._cache = collections
        return self._cache

    def _load_catalog_file(self, path: Path) -> list[IntervalCollection]:
        """Load all collections from a YAML file; malformed files are skipped."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f)

            return self._parse_catalog(data)
        except Exception:
            logger.warning(f"Skipping malformed catalog file: {path}", exc_info=True)
            return []

    def _parse_catalog(self, data: dict[str, Any]) -> list[IntervalCollection]:
        """Parse collections from YAML data."""
        default_kind = CollectionKind(data.get("kind", CollectionKind.CHORD.value))

        return [
            IntervalCollection(
                id=entry["id"],
                name=entry.get("name", entry["id"]),
                kind=CollectionKind(entry.get("kind", default_kind.value)),
                suffixes=entry.get("suffixes", []),
                intervals=entry["intervals"],
                description=entry.get("description", ""),
            )
            for entry in data.get("collections", [])
        ]
