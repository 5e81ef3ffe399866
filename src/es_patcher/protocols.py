"""Protocol definitions for core abstractions.

The patch steps depend on these interfaces rather than on concrete
classes, so tests can inject doubles without inheritance.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from es_patcher.types import ManifestEntry


@runtime_checkable
class FileSystem(Protocol):
    """Protocol for the filesystem operations used by the patcher."""

    def read_text(self, path: Path, encoding: str = "utf-8") -> str:
        """Read text content from a file."""
        ...

    def write_text(self, path: Path, content: str) -> None:
        """Write text content to a file."""
        ...

    def exists(self, path: Path) -> bool:
        """Check if a path exists."""
        ...

    def is_dir(self, path: Path) -> bool:
        """Check if a path is a directory."""
        ...

    def is_file(self, path: Path) -> bool:
        """Check if a path is a regular file."""
        ...

    def mkdir(self, path: Path, parents: bool = False, exist_ok: bool = False) -> None:
        """Create a directory."""
        ...

    def rmtree(self, path: Path) -> None:
        """Remove a directory tree."""
        ...

    def copy_file(self, src: Path, dst: Path) -> None:
        """Copy a file, replacing any existing destination."""
        ...

    def list_files(self, path: Path) -> list[str]:
        """List the names of regular files directly inside a directory."""
        ...


@runtime_checkable
class Reporter(Protocol):
    """Protocol for the status-line sink.

    Every meaningful action produces exactly one call.
    """

    def show_success(self, message: str) -> None:
        """Report a completed action."""
        ...

    def show_error(self, message: str) -> None:
        """Report a failure."""
        ...

    def show_warning(self, message: str) -> None:
        """Report a non-fatal notice."""
        ...

    def show_info(self, message: str) -> None:
        """Report neutral progress."""
        ...


@runtime_checkable
class ManifestSource(Protocol):
    """Protocol for manifest loading."""

    resource_dir: Path

    @property
    def manifest_file(self) -> Path:
        """Path to the manifest JSON file."""
        ...

    @property
    def template_file(self) -> Path:
        """Path to the script template."""
        ...

    def artifact_path(self, entry: ManifestEntry) -> Path:
        """Path to the replacement artifact for an entry."""
        ...

    def load(self) -> list[ManifestEntry]:
        """Load the ordered manifest.

        Raises:
            ManifestUnreadable: If the manifest is absent or malformed.
        """
        ...
