"""Installs the optimization script with the filter flag applied."""

from __future__ import annotations

import logging
from pathlib import Path

from es_patcher.paths import assets_root
from es_patcher.protocols import FileSystem, ManifestSource, Reporter
from es_patcher.types import CopyFailed, TemplateUnreadable

logger = logging.getLogger(__name__)

# The template must keep the flag assignment on this line.
FLAG_LINE_INDEX = 1
FLAG_VARIABLE = "persistent.nofilters"


def render_flag_line(remove_filters: bool) -> str:
    """Ren'Py statement assigning the filter flag."""
    return f"    $ {FLAG_VARIABLE} = {remove_filters!r}"


def rewrite_config_line(lines: list[str], remove_filters: bool) -> list[str]:
    """Return a copy of `lines` with the flag line replaced.

    Lines may carry their terminators; the replaced line keeps its own.

    Args:
        lines: Template lines.
        remove_filters: Value assigned to the flag.

    Returns:
        New list; every other line is unchanged.

    Raises:
        TemplateUnreadable: If the template has no flag line.
    """
    if len(lines) <= FLAG_LINE_INDEX:
        raise TemplateUnreadable(
            f"Template has {len(lines)} line(s), expected at least {FLAG_LINE_INDEX + 1}"
        )
    old = lines[FLAG_LINE_INDEX]
    ending = old[len(old.rstrip("\r\n")):]
    rewritten = list(lines)
    rewritten[FLAG_LINE_INDEX] = render_flag_line(remove_filters) + ending
    return rewritten


class ScriptRewriter:
    """Copies the script template into the game with the flag line set."""

    def __init__(self, manifest: ManifestSource, filesystem: FileSystem, reporter: Reporter) -> None:
        self.manifest = manifest
        self.fs = filesystem
        self.reporter = reporter

    def rewrite(self, install_root: Path, remove_filters: bool) -> Path:
        """Write the rewritten template to the assets root.

        Args:
            install_root: Root of the game installation.
            remove_filters: Value for the filter flag.

        Returns:
            Path of the installed script.

        Raises:
            TemplateUnreadable: If the template is missing, unreadable or too short.
            CopyFailed: If the installed script cannot be written.
        """
        template = self.manifest.template_file
        try:
            text = self.fs.read_text(template)
        except (OSError, UnicodeDecodeError) as e:
            raise TemplateUnreadable(f"Cannot read script template {template}: {e}") from e

        lines = rewrite_config_line(text.splitlines(keepends=True), remove_filters)
        dest = assets_root(install_root) / template.name
        try:
            self.fs.write_text(dest, "".join(lines))
        except OSError as e:
            logger.exception("Writing %s failed", dest)
            raise CopyFailed(template.name, str(e)) from e

        logger.debug("Wrote %s with %s=%s", dest, FLAG_VARIABLE, remove_filters)
        self.reporter.show_success(
            f"Script {template.name} written (filters removed: {remove_filters})"
        )
        return dest
