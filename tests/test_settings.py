"""Tests for settings persistence and validation."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from es_patcher.settings import (
    DEFAULT_DELETE_LANGUAGES,
    Settings,
    SettingsStore,
    validate_install_path,
)
from es_patcher.types import InvalidInstallPath, SettingsError


class TestSettings:
    """Tests for the Settings model."""

    def test_defaults(self) -> None:
        """Defaults match a stock Steam install."""
        settings = Settings()
        assert settings.renpy_version == "7.4.11"
        assert settings.path.endswith("Everlasting Summer")
        assert settings.file_optimize is True
        assert settings.remove_filters is False
        assert settings.delete_languages == DEFAULT_DELETE_LANGUAGES
        assert len(settings.delete_languages) == 8

    def test_frozen(self) -> None:
        """Settings cannot be changed in place."""
        settings = Settings()
        with pytest.raises(ValidationError):
            settings.file_optimize = False  # type: ignore[misc]

    def test_model_copy(self) -> None:
        """Updates produce a new instance."""
        settings = Settings()
        updated = settings.model_copy(update={"remove_filters": True})
        assert updated.remove_filters is True
        assert settings.remove_filters is False

    def test_accepts_json_aliases(self) -> None:
        """Saved files use the PascalCase keys."""
        settings = Settings.model_validate(
            {"Path": "/games/Everlasting Summer", "FileOptimize": False, "DeleteLanguages": ["french"]}
        )
        assert settings.path == "/games/Everlasting Summer"
        assert settings.file_optimize is False
        assert settings.delete_languages == ("french",)

    def test_install_root(self) -> None:
        """The path is exposed as a Path."""
        assert Settings(path="/games/Everlasting Summer").install_root == Path(
            "/games/Everlasting Summer"
        )


class TestSettingsStore:
    """Tests for SettingsStore."""

    def test_load_defaults_when_missing(self, tmp_path: Path) -> None:
        """No file means default settings."""
        store = SettingsStore.create(tmp_path)
        assert store.exists() is False
        assert store.load() == Settings()

    def test_save_and_load(self, tmp_path: Path) -> None:
        """Saved settings load back equal."""
        store = SettingsStore.create(tmp_path)
        settings = Settings(path="/games/Everlasting Summer", file_optimize=False)

        store.save(settings)

        assert store.load() == settings

    def test_saved_format(self, tmp_path: Path) -> None:
        """The file uses aliases and never stores remove_filters."""
        store = SettingsStore.create(tmp_path)
        store.save(Settings(remove_filters=True))

        data = json.loads((tmp_path / "settings.json").read_text())

        assert set(data) == {"RenPyVersion", "Path", "FileOptimize", "DeleteLanguages"}
        assert data["DeleteLanguages"] == list(DEFAULT_DELETE_LANGUAGES)

    def test_remove_filters_not_restored(self, tmp_path: Path) -> None:
        """The filter switch only lives for one run."""
        store = SettingsStore.create(tmp_path)
        store.save(Settings(remove_filters=True))
        assert store.load().remove_filters is False

    def test_remove_filters_key_ignored(self, tmp_path: Path) -> None:
        """A hand-written remove_filters key is not read back."""
        (tmp_path / "settings.json").write_text('{"remove_filters": true, "FileOptimize": false}')

        settings = SettingsStore.create(tmp_path).load()

        assert settings.remove_filters is False
        assert settings.file_optimize is False

    def test_load_with_bom(self, tmp_path: Path) -> None:
        """Files saved by Windows editors with a UTF-8 BOM still load."""
        (tmp_path / "settings.json").write_bytes(
            b"\xef\xbb\xbf" + b'{"Path": "/games/Everlasting Summer"}'
        )

        settings = SettingsStore.create(tmp_path).load()

        assert settings.path == "/games/Everlasting Summer"

    def test_partial_file_uses_defaults(self, tmp_path: Path) -> None:
        """Missing keys fall back to defaults."""
        (tmp_path / "settings.json").write_text('{"FileOptimize": false}')
        settings = SettingsStore.create(tmp_path).load()
        assert settings.file_optimize is False
        assert settings.delete_languages == DEFAULT_DELETE_LANGUAGES

    @pytest.mark.parametrize("content", ["{", '{"FileOptimize": "maybe"}', "[]"])
    def test_corrupt_file(self, tmp_path: Path, content: str) -> None:
        """Unparseable settings raise SettingsError."""
        (tmp_path / "settings.json").write_text(content)
        with pytest.raises(SettingsError):
            SettingsStore.create(tmp_path).load()


class TestValidateInstallPath:
    """Tests for validate_install_path."""

    def test_valid(self, install_root: Path) -> None:
        """An existing game directory is accepted."""
        assert validate_install_path(str(install_root)) == install_root

    @pytest.mark.parametrize("path", ["", "   "])
    def test_blank(self, path: str) -> None:
        """Blank paths are rejected."""
        with pytest.raises(InvalidInstallPath, match="empty"):
            validate_install_path(path)

    def test_missing(self, tmp_path: Path) -> None:
        """Non-existent directories are rejected."""
        with pytest.raises(InvalidInstallPath, match="not found"):
            validate_install_path(str(tmp_path / "Everlasting Summer"))

    def test_other_game(self, tmp_path: Path) -> None:
        """Directories of other games are rejected."""
        other = tmp_path / "Katawa Shoujo"
        other.mkdir()
        with pytest.raises(InvalidInstallPath, match="Not an Everlasting Summer"):
            validate_install_path(str(other))
