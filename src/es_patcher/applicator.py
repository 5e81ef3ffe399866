"""Copies replacement artifacts into a game installation."""

from __future__ import annotations

import logging
from pathlib import Path

from es_patcher.paths import assets_root, is_within
from es_patcher.protocols import FileSystem, ManifestSource, Reporter
from es_patcher.types import CopyFailed, ManifestEntry

logger = logging.getLogger(__name__)


class PatchApplicator:
    """Replaces game files with their optimized counterparts.

    Existing files are overwritten without comparison or backup, so applying
    the same manifest twice leaves identical files behind.
    """

    def __init__(self, manifest: ManifestSource, filesystem: FileSystem, reporter: Reporter) -> None:
        self.manifest = manifest
        self.fs = filesystem
        self.reporter = reporter

    def destination_for(self, install_root: Path, entry: ManifestEntry) -> Path:
        """Resolve the installed path of an entry.

        Raises:
            CopyFailed: If the destination would leave the assets root.
        """
        root = assets_root(install_root)
        dest = root / entry.destination / entry.identifier
        if not is_within(dest, root):
            raise CopyFailed(entry.identifier, f"destination escapes {root}")
        return dest

    def apply(self, install_root: Path, entries: list[ManifestEntry]) -> list[Path]:
        """Copy every artifact to its destination, in manifest order.

        Args:
            install_root: Root of the game installation.
            entries: Manifest entries to apply.

        Returns:
            Installed file paths in the order they were written.

        Raises:
            CopyFailed: On the first artifact that cannot be copied. Nothing
                after it is attempted.
        """
        written: list[Path] = []
        for entry in entries:
            source = self.manifest.artifact_path(entry)
            dest = self.destination_for(install_root, entry)
            try:
                self.fs.mkdir(dest.parent, parents=True, exist_ok=True)
                self.fs.copy_file(source, dest)
            except OSError as e:
                logger.exception("Copy failed for %s", entry.identifier)
                raise CopyFailed(entry.identifier, str(e)) from e

            logger.debug("Copied %s -> %s", source, dest)
            self.reporter.show_success(f"File {entry.identifier} successfully replaced")
            written.append(dest)
        return written
