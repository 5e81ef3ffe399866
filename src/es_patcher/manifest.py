"""Manifest of replacement artifacts."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import RootModel, ValidationError

from es_patcher.filesystem import RealFileSystem
from es_patcher.protocols import FileSystem
from es_patcher.types import ManifestEntry, ManifestUnreadable

logger = logging.getLogger(__name__)

MANIFEST_FILE = "data.json"
TEMPLATE_FILE = "optimize.rpy"
ARTIFACT_SUFFIX = ".optimize"


class ManifestDocument(RootModel[dict[str, str]]):
    """Raw manifest: artifact identifier -> destination subdirectory."""

    def entries(self) -> list[ManifestEntry]:
        """Return the mappings in document order."""
        return [ManifestEntry(identifier=k, destination=v) for k, v in self.root.items()]


def _reject_duplicates(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    seen: dict[str, Any] = {}
    for key, value in pairs:
        if key in seen:
            raise ValueError(f"duplicate identifier '{key}'")
        seen[key] = value
    return seen


def parse_manifest(text: str) -> list[ManifestEntry]:
    """Parse manifest JSON into ordered entries.

    Args:
        text: JSON document content.

    Returns:
        Entries in document order.

    Raises:
        ManifestUnreadable: If the document is not a string-to-string object
            with unique keys.
    """
    try:
        data = json.loads(text, object_pairs_hook=_reject_duplicates)
        return ManifestDocument.model_validate(data).entries()
    except (ValueError, ValidationError) as e:
        raise ManifestUnreadable(f"Invalid manifest: {e}") from e


class ManifestStore:
    """Reads the manifest and locates artifacts in the resource directory.

    The manifest is read at most once per store; later calls to `load()`
    return the cached entries.
    """

    def __init__(self, resource_dir: Path, filesystem: FileSystem) -> None:
        """Initialize the store.

        Args:
            resource_dir: Directory holding the manifest, artifacts and template.
            filesystem: Filesystem abstraction.

        Note:
            Prefer the factory method `create()` for production code.
        """
        self.resource_dir = resource_dir
        self.fs = filesystem
        self._entries: list[ManifestEntry] | None = None

    @classmethod
    def create(cls, resource_dir: Path, filesystem: FileSystem | None = None) -> ManifestStore:
        """Factory method for production instantiation."""
        return cls(resource_dir=resource_dir, filesystem=filesystem or RealFileSystem())

    @property
    def manifest_file(self) -> Path:
        """Path to the manifest JSON file."""
        return self.resource_dir / MANIFEST_FILE

    @property
    def template_file(self) -> Path:
        """Path to the script template."""
        return self.resource_dir / TEMPLATE_FILE

    def artifact_path(self, entry: ManifestEntry) -> Path:
        """Path to the replacement artifact for an entry."""
        return self.resource_dir / entry.artifact_name

    def load(self) -> list[ManifestEntry]:
        """Load the ordered manifest.

        Returns:
            Manifest entries in document order.

        Raises:
            ManifestUnreadable: If the file is absent, unreadable or malformed.
        """
        if self._entries is not None:
            return self._entries

        if not self.fs.is_file(self.manifest_file):
            raise ManifestUnreadable(f"Manifest not found: {self.manifest_file}")

        try:
            text = self.fs.read_text(self.manifest_file, encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as e:
            raise ManifestUnreadable(f"Cannot read manifest {self.manifest_file}: {e}") from e

        entries = parse_manifest(text)
        logger.debug("Loaded %d manifest entries from %s", len(entries), self.manifest_file)
        self._entries = entries
        return entries
