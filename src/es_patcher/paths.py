"""Locations inside a game installation."""

from __future__ import annotations

from pathlib import Path

GAME_NAME = "Everlasting Summer"
ASSETS_DIR = "game"
TRANSLATIONS_DIR = "tl"


def assets_root(install_root: Path) -> Path:
    """Directory the game loads scripts and assets from."""
    return install_root / ASSETS_DIR


def translations_root(install_root: Path) -> Path:
    """Directory holding one subdirectory per translation language."""
    return assets_root(install_root) / TRANSLATIONS_DIR


def is_within(path: Path, root: Path) -> bool:
    """Check that `path` stays inside `root` once `..` segments are resolved."""
    return path.resolve().is_relative_to(root.resolve())
