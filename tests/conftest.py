"""Shared test fixtures."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from es_patcher.filesystem import RealFileSystem
from es_patcher.manifest import ManifestStore

TEMPLATE = 'init 999 python:\n    $ persistent.nofilters = False\n    config.gl2 = True\n'

ARTIFACTS = {
    "bg01": "images/backgrounds",
    "ui.png": "images/gui",
    "music.ogg": "sound",
}


def write_resources(
    resource_dir: Path,
    manifest: dict[str, str] | None = None,
    template: str | None = TEMPLATE,
) -> Path:
    """Populate a resource directory with a manifest, artifacts and template."""
    manifest = ARTIFACTS if manifest is None else manifest
    resource_dir.mkdir(parents=True, exist_ok=True)
    (resource_dir / "data.json").write_text(json.dumps(manifest))
    for identifier in manifest:
        (resource_dir / f"{identifier}.optimize").write_bytes(f"optimized {identifier}".encode())
    if template is not None:
        (resource_dir / "optimize.rpy").write_text(template, newline="")
    return resource_dir


@pytest.fixture
def resource_dir(tmp_path: Path) -> Path:
    """Create a complete resource directory."""
    return write_resources(tmp_path / "optimized")


@pytest.fixture
def install_root(tmp_path: Path) -> Path:
    """Create a game installation with a few translation directories."""
    root = tmp_path / "Everlasting Summer"
    tl = root / "game" / "tl"
    for language in ("french", "german", "english"):
        (tl / language).mkdir(parents=True)
        (tl / language / "script.rpy").write_text("translate")
    (root / "game" / "images" / "backgrounds").mkdir(parents=True)
    (root / "game" / "images" / "backgrounds" / "bg01").write_bytes(b"original")
    return root


@pytest.fixture
def filesystem() -> RealFileSystem:
    """Real filesystem implementation."""
    return RealFileSystem()


@pytest.fixture
def manifest_store(resource_dir: Path, filesystem: RealFileSystem) -> ManifestStore:
    """Manifest store over the sample resource directory."""
    return ManifestStore(resource_dir, filesystem)


@pytest.fixture
def reporter() -> MagicMock:
    """Create a mock Reporter that records every status line."""
    return MagicMock()


@pytest.fixture
def mock_filesystem() -> MagicMock:
    """Create a mock FileSystem for testing.

    The mock tracks all filesystem operations without touching real files.
    """
    fs = MagicMock()
    fs.exists.return_value = False
    fs.is_dir.return_value = False
    fs.is_file.return_value = False
    fs.read_text.return_value = ""
    fs.list_files.return_value = []
    return fs


def _messages(mock_method: MagicMock) -> list[str]:
    return [c.args[0] for c in mock_method.call_args_list]


@pytest.fixture
def messages() -> Callable[[MagicMock], list[str]]:
    """Collect the first positional argument of every call to a mock method."""
    return _messages


@pytest.fixture
def make_resources() -> Callable[..., Path]:
    """Build a resource directory with a custom manifest or template."""
    return write_resources


@pytest.fixture
def script_template() -> str:
    """Content of the sample optimize.rpy template."""
    return TEMPLATE
