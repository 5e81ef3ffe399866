"""Persisted user settings."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from es_patcher.paths import GAME_NAME
from es_patcher.types import InvalidInstallPath, SettingsError

logger = logging.getLogger(__name__)

SETTINGS_FILE = "settings.json"

DEFAULT_INSTALL_PATH = r"C:\Program Files (x86)\Steam\steamapps\common\Everlasting Summer"

DEFAULT_DELETE_LANGUAGES = (
    "chinese",
    "english",
    "french",
    "german",
    "italian",
    "portuguese",
    "spanish",
    "turkish",
)


class Settings(BaseModel):
    """Configuration for one patch run.

    Instances are immutable; use `model_copy(update=...)` to derive a
    changed copy.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    renpy_version: str = Field(default="7.4.11", alias="RenPyVersion")
    path: str = Field(default=DEFAULT_INSTALL_PATH, alias="Path")
    file_optimize: bool = Field(default=True, alias="FileOptimize")
    remove_filters: bool = Field(default=False, exclude=True)
    delete_languages: tuple[str, ...] = Field(
        default=DEFAULT_DELETE_LANGUAGES, alias="DeleteLanguages"
    )

    @property
    def install_root(self) -> Path:
        """The install path as a Path."""
        return Path(self.path)


def validate_install_path(path: str) -> Path:
    """Check that `path` is an existing installation of the game.

    Args:
        path: Candidate installation directory.

    Returns:
        The path as a Path.

    Raises:
        InvalidInstallPath: If the path is blank, missing or names another game.
    """
    if not path or not path.strip():
        raise InvalidInstallPath("Install path is empty")
    candidate = Path(path)
    if not candidate.is_dir():
        raise InvalidInstallPath(f"Directory not found: {path}")
    if GAME_NAME not in path:
        raise InvalidInstallPath(f"Not an {GAME_NAME} installation: {path}")
    return candidate


class SettingsStore:
    """Loads and saves settings.json."""

    def __init__(self, settings_file: Path) -> None:
        self.settings_file = settings_file

    @classmethod
    def create(cls, app_dir: Path) -> SettingsStore:
        """Create a store for the settings file in an application directory."""
        return cls(settings_file=app_dir / SETTINGS_FILE)

    def exists(self) -> bool:
        """Check whether a settings file has been saved."""
        return self.settings_file.is_file()

    def load(self) -> Settings:
        """Load settings from disk.

        Returns:
            Saved settings, or defaults if no file exists.

        Raises:
            SettingsError: If the file exists but cannot be parsed.
        """
        if not self.exists():
            logger.debug("No settings at %s, using defaults", self.settings_file)
            return Settings()

        try:
            data = json.loads(self.settings_file.read_text(encoding="utf-8-sig"))
            if isinstance(data, dict):
                # remove_filters is per-run only and never read back.
                data.pop("remove_filters", None)
            return Settings.model_validate(data)
        except (OSError, ValueError, ValidationError) as e:
            raise SettingsError(f"Invalid settings file {self.settings_file}: {e}") from e

    def save(self, settings: Settings) -> None:
        """Save settings to disk.

        Args:
            settings: Settings to persist. `remove_filters` is never saved.
        """
        self.settings_file.parent.mkdir(parents=True, exist_ok=True)
        data = settings.model_dump(mode="json", by_alias=True)
        self.settings_file.write_text(json.dumps(data, indent=2), encoding="utf-8")
        logger.debug("Saved settings to %s", self.settings_file)
