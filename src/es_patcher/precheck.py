"""Precondition checks run before any installation is modified."""

from __future__ import annotations

import logging

from es_patcher.protocols import FileSystem, ManifestSource
from es_patcher.types import ManifestUnreadable, PreconditionResult

logger = logging.getLogger(__name__)


class PreconditionChecker:
    """Verifies that every resource a patch run needs is present.

    All checks run on every call; a failing check records one error and
    the remaining checks still execute, so the result lists every missing
    resource at once.
    """

    def __init__(self, manifest: ManifestSource, filesystem: FileSystem) -> None:
        """Initialize the checker.

        Args:
            manifest: Manifest store describing the resource layout.
            filesystem: Filesystem abstraction.
        """
        self.manifest = manifest
        self.fs = filesystem

    def check(self) -> PreconditionResult:
        """Run all precondition checks.

        Returns:
            PreconditionResult listing each missing resource in check order.
        """
        errors: list[str] = []
        resource_dir = self.manifest.resource_dir

        if not self.fs.is_file(self.manifest.manifest_file):
            errors.append(f"Manifest file not found: {self.manifest.manifest_file}")

        listing: list[str] = []
        if self.fs.is_dir(resource_dir):
            try:
                listing = self.fs.list_files(resource_dir)
            except OSError as e:
                errors.append(f"Cannot list resource directory {resource_dir}: {e}")
        else:
            errors.append(f"Resource directory not found: {resource_dir}")

        if not listing:
            errors.append(f"No files found in resource directory: {resource_dir}")

        entries = []
        try:
            entries = self.manifest.load()
        except ManifestUnreadable as e:
            errors.append(f"Manifest unreadable: {e}")

        available = set(listing)
        for entry in entries:
            if entry.artifact_name not in available:
                errors.append(f"Replacement file not found: {self.manifest.artifact_path(entry)}")

        if not self.fs.is_file(self.manifest.template_file):
            errors.append(f"Script template not found: {self.manifest.template_file}")

        for error in errors:
            logger.debug("Precondition failed: %s", error)
        return PreconditionResult(errors=errors)
