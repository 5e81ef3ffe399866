"""Application context for dependency injection.

This module separates object creation from object use, so CLI commands
can be tested with doubles in place of the real services.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path

from es_patcher.console import ConsoleReporter
from es_patcher.manifest import ManifestStore
from es_patcher.patcher import Patcher
from es_patcher.protocols import FileSystem, ManifestSource
from es_patcher.settings import SettingsStore

RESOURCE_DIR_NAME = "optimized"


def default_app_dir() -> Path:
    """Directory the patcher ships in: beside the frozen executable or the cwd."""
    if getattr(sys, "frozen", False):
        return Path(sys.executable).resolve().parent
    return Path.cwd()


@dataclass
class AppContext:
    """Container for application dependencies.

    Provides a single injection point for all services used by CLI commands.
    """

    settings_store: SettingsStore
    manifest: ManifestSource
    patcher: Patcher
    reporter: ConsoleReporter
    filesystem: FileSystem


def create_context(
    app_dir: Path | None = None,
    resource_dir: Path | None = None,
    reporter: ConsoleReporter | None = None,
) -> AppContext:
    """Factory for application dependencies.

    Args:
        app_dir: Directory holding settings.json. Defaults to `default_app_dir()`.
        resource_dir: Directory holding the manifest and artifacts.
            Defaults to `<app_dir>/optimized`.
        reporter: Output sink. Defaults to a ConsoleReporter.

    Returns:
        Configured AppContext.
    """
    from es_patcher.filesystem import RealFileSystem

    app_dir = app_dir or default_app_dir()
    filesystem = RealFileSystem()
    reporter = reporter or ConsoleReporter()
    manifest = ManifestStore.create(resource_dir or app_dir / RESOURCE_DIR_NAME, filesystem)

    return AppContext(
        settings_store=SettingsStore.create(app_dir),
        manifest=manifest,
        patcher=Patcher.create(manifest, filesystem, reporter),
        reporter=reporter,
        filesystem=filesystem,
    )
