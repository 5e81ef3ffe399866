"""Removal of unwanted translation directories."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from es_patcher.paths import is_within, translations_root
from es_patcher.protocols import FileSystem, Reporter
from es_patcher.types import MissingTranslationsRoot

logger = logging.getLogger(__name__)


class LanguagePruner:
    """Deletes per-language subdirectories of the translations root."""

    def __init__(self, filesystem: FileSystem, reporter: Reporter) -> None:
        self.fs = filesystem
        self.reporter = reporter

    def translations_dir(self, install_root: Path) -> Path:
        """Resolve the translations root.

        Raises:
            MissingTranslationsRoot: If the directory does not exist.
        """
        root = translations_root(install_root)
        if not self.fs.is_dir(root):
            raise MissingTranslationsRoot(f"Language directory not found: {root}")
        return root

    def prune(self, install_root: Path, languages: Iterable[str]) -> bool:
        """Delete the requested language directories.

        A language without a directory is reported and skipped. Repeated
        codes are harmless: the second occurrence is simply not found. A
        directory that cannot be deleted is reported and the remaining
        languages are still processed.

        Args:
            install_root: Root of the game installation.
            languages: Language codes, i.e. subdirectory names.

        Returns:
            False if the translations root is missing or a directory could
            not be deleted, True otherwise.
        """
        try:
            root = self.translations_dir(install_root)
        except MissingTranslationsRoot as e:
            self.reporter.show_error(str(e))
            return False

        failed = False
        for language in languages:
            target = root / language
            if not language or not is_within(target, root) or target.resolve() == root.resolve():
                self.reporter.show_warning(f"Skipping invalid language code: {language!r}")
                continue
            if not self.fs.is_dir(target):
                self.reporter.show_warning(f"Language directory not found: {target}")
                continue
            try:
                self.fs.rmtree(target)
            except OSError as e:
                logger.exception("Removing %s failed", target)
                self.reporter.show_error(f"Failed to delete language directory {target}: {e}")
                failed = True
                continue
            logger.debug("Removed %s", target)
            self.reporter.show_success(f"Deleted language directory: {target}")
        return not failed
