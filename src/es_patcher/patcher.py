"""Sequencing of a complete patch run."""

from __future__ import annotations

import logging
from pathlib import Path

from es_patcher.applicator import PatchApplicator
from es_patcher.precheck import PreconditionChecker
from es_patcher.protocols import FileSystem, ManifestSource, Reporter
from es_patcher.pruner import LanguagePruner
from es_patcher.script import ScriptRewriter
from es_patcher.settings import Settings
from es_patcher.types import InvalidInstallPath, PreconditionResult

logger = logging.getLogger(__name__)


class Patcher:
    """Runs preconditions, optimization and language pruning in order.

    Follows Separate Use from Creation: the constructor takes every step
    explicitly; use `create()` to build the production wiring.
    """

    def __init__(
        self,
        checker: PreconditionChecker,
        manifest: ManifestSource,
        applicator: PatchApplicator,
        rewriter: ScriptRewriter,
        pruner: LanguagePruner,
        filesystem: FileSystem,
        reporter: Reporter,
    ) -> None:
        self.checker = checker
        self.manifest = manifest
        self.applicator = applicator
        self.rewriter = rewriter
        self.pruner = pruner
        self.fs = filesystem
        self.reporter = reporter

    @classmethod
    def create(cls, manifest: ManifestSource, filesystem: FileSystem, reporter: Reporter) -> Patcher:
        """Factory method wiring every step to the same manifest and filesystem."""
        return cls(
            checker=PreconditionChecker(manifest, filesystem),
            manifest=manifest,
            applicator=PatchApplicator(manifest, filesystem, reporter),
            rewriter=ScriptRewriter(manifest, filesystem, reporter),
            pruner=LanguagePruner(filesystem, reporter),
            filesystem=filesystem,
            reporter=reporter,
        )

    def check(self) -> PreconditionResult:
        """Run the precondition checks and report each missing resource."""
        result = self.checker.check()
        if result.is_error:
            self.reporter.show_error("The necessary files are not present:")
            for error in result.errors:
                self.reporter.show_error(error)
        return result

    def _install_root(self, settings: Settings) -> Path:
        if not settings.path.strip():
            raise InvalidInstallPath("Invalid path: install path is empty")
        root = settings.install_root
        if not self.fs.is_dir(root):
            raise InvalidInstallPath(f"Invalid path: {settings.path}")
        return root

    def optimize(self, install_root: Path, remove_filters: bool) -> None:
        """Copy the replacement files and install the rewritten script.

        Raises:
            CopyFailed: If a file cannot be copied or written.
            TemplateUnreadable: If the script template cannot be used.
        """
        entries = self.manifest.load()
        self.applicator.apply(install_root, entries)
        self.rewriter.rewrite(install_root, remove_filters)

    def run(self, settings: Settings) -> bool:
        """Execute a full patch run.

        Nothing is written unless every precondition holds and the install
        path exists. Optimization failures propagate before any language
        directory is touched.

        Args:
            settings: Configuration for this run.

        Returns:
            True if pruning completed, False if the run stopped early or the
            translations root is missing.

        Raises:
            CopyFailed: If optimization cannot write a file.
            TemplateUnreadable: If the script template cannot be used.
        """
        if self.check().is_error:
            return False

        try:
            install_root = self._install_root(settings)
        except InvalidInstallPath as e:
            self.reporter.show_error(str(e))
            return False

        if settings.file_optimize:
            self.optimize(install_root, settings.remove_filters)
        else:
            logger.debug("File optimization disabled, skipping")

        return self.pruner.prune(install_root, settings.delete_languages)
