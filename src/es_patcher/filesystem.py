"""Filesystem abstraction for testability.

This module provides a filesystem abstraction so the patch steps can be
exercised against doubles. The RealFileSystem implementation wraps
standard library operations.
"""

from __future__ import annotations

import shutil
from pathlib import Path


class RealFileSystem:
    """Production filesystem implementation.

    Wraps standard library Path and shutil operations.
    Satisfies the FileSystem protocol structurally.
    """

    def read_text(self, path: Path, encoding: str = "utf-8") -> str:
        """Read text content from a file, keeping line endings as stored."""
        with path.open(encoding=encoding, newline="") as f:
            return f.read()

    def write_text(self, path: Path, content: str) -> None:
        """Write text content to a file without translating line endings."""
        with path.open("w", encoding="utf-8", newline="") as f:
            f.write(content)

    def exists(self, path: Path) -> bool:
        """Check if a path exists."""
        return path.exists()

    def is_dir(self, path: Path) -> bool:
        """Check if a path is a directory."""
        return path.is_dir()

    def is_file(self, path: Path) -> bool:
        """Check if a path is a regular file."""
        return path.is_file()

    def mkdir(self, path: Path, parents: bool = False, exist_ok: bool = False) -> None:
        """Create a directory."""
        path.mkdir(parents=parents, exist_ok=exist_ok)

    def rmtree(self, path: Path) -> None:
        """Remove a directory tree."""
        shutil.rmtree(path)

    def copy_file(self, src: Path, dst: Path) -> None:
        """Copy a file, replacing any existing destination."""
        shutil.copyfile(src, dst)

    def list_files(self, path: Path) -> list[str]:
        """List the names of regular files directly inside a directory."""
        return sorted(entry.name for entry in path.iterdir() if entry.is_file())
