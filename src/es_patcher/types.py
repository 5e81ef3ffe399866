"""Shared data types and error taxonomy for es-patcher."""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = [
    "CopyFailed",
    "InvalidInstallPath",
    "ManifestEntry",
    "ManifestUnreadable",
    "MissingResource",
    "MissingTranslationsRoot",
    "PatcherError",
    "PreconditionResult",
    "SettingsError",
    "TemplateUnreadable",
]


class PatcherError(Exception):
    """Base class for all patcher errors."""

    pass


class ManifestUnreadable(PatcherError):
    """The manifest file is absent or is not a string-to-string JSON object."""

    pass


class MissingResource(PatcherError):
    """One or more required resources are missing.

    Attributes:
        errors: One description per missing resource.
    """

    def __init__(self, errors: list[str]) -> None:
        super().__init__(f"{len(errors)} required resource(s) missing")
        self.errors = list(errors)


class CopyFailed(PatcherError):
    """A replacement artifact could not be copied into the installation.

    Attributes:
        identifier: Manifest identifier of the offending artifact.
    """

    def __init__(self, identifier: str, reason: str) -> None:
        super().__init__(f"Failed to copy '{identifier}': {reason}")
        self.identifier = identifier


class TemplateUnreadable(PatcherError):
    """The script template is missing or too short to rewrite."""

    pass


class InvalidInstallPath(PatcherError):
    """The configured installation path is unusable."""

    pass


class MissingTranslationsRoot(PatcherError):
    """The installation has no translations directory."""

    pass


class SettingsError(PatcherError):
    """The persisted settings file cannot be parsed."""

    pass


@dataclass(frozen=True)
class ManifestEntry:
    """One manifest mapping.

    Attributes:
        identifier: Artifact identifier, also the installed file name.
        destination: Subdirectory relative to the assets root.
    """

    identifier: str
    destination: str

    @property
    def artifact_name(self) -> str:
        """File name of the replacement artifact in the resource directory."""
        return f"{self.identifier}.optimize"


@dataclass
class PreconditionResult:
    """Outcome of a precondition check.

    Attributes:
        errors: Ordered descriptions, one per missing resource.
    """

    errors: list[str] = field(default_factory=list)

    @property
    def is_error(self) -> bool:
        """True when at least one resource is missing."""
        return len(self.errors) > 0

    def raise_for_errors(self) -> None:
        """Raise MissingResource if any resource is missing."""
        if self.is_error:
            raise MissingResource(self.errors)
