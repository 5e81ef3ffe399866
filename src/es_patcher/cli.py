"""CLI commands using Typer."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Annotated, Any

if TYPE_CHECKING:
    from es_patcher.context import AppContext

import typer
from rich.console import Console
from rich.logging import RichHandler

from es_patcher import __version__
from es_patcher.context import create_context
from es_patcher.settings import Settings, validate_install_path
from es_patcher.types import InvalidInstallPath, MissingResource, PatcherError, SettingsError

app = typer.Typer(
    name="es-patcher",
    help="Install optimized files into Everlasting Summer and remove unused translations",
    no_args_is_help=True,
)

settings_app = typer.Typer(help="Manage saved settings")
app.add_typer(settings_app, name="settings")

console = Console()


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"es-patcher v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
) -> None:
    """Install optimized files into Everlasting Summer."""
    pass


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )


def _load_settings(ctx: AppContext) -> Settings:
    """Load saved settings.

    Raises:
        typer.Exit: If the settings file is corrupt.
    """
    try:
        return ctx.settings_store.load()
    except SettingsError as e:
        ctx.reporter.show_error(str(e))
        raise typer.Exit(1) from e


def _apply_overrides(
    ctx: AppContext,
    settings: Settings,
    path: str | None,
    file_opt: bool | None,
    renpy: str | None,
    no_filters: bool,
) -> Settings:
    """Merge command line options into loaded settings.

    Raises:
        typer.Exit: If the given path is not a game installation.
    """
    updates: dict[str, Any] = {}
    if path is not None:
        try:
            updates["path"] = str(validate_install_path(path))
        except InvalidInstallPath as e:
            ctx.reporter.show_error(str(e))
            raise typer.Exit(1) from e
    if file_opt is not None:
        updates["file_optimize"] = file_opt
        ctx.reporter.show_info(f"File optimization set to {file_opt}")
    if renpy is not None:
        updates["renpy_version"] = renpy
        ctx.reporter.show_info(f"RenPy version set to {renpy}")
    if no_filters:
        updates["remove_filters"] = True
        ctx.reporter.show_info("Filters will be disabled during initialization")
    return settings.model_copy(update=updates)


def _require_install_path(ctx: AppContext, settings: Settings) -> None:
    """Check the merged install path names an existing game installation.

    Raises:
        typer.Exit: If the path is blank, missing or belongs to another game.
    """
    try:
        validate_install_path(settings.path)
    except InvalidInstallPath as e:
        ctx.reporter.show_error(str(e))
        raise typer.Exit(1) from e


@app.command()
def run(
    path: Annotated[
        str | None, typer.Option("--path", "-p", help="Game installation directory")
    ] = None,
    file_opt: Annotated[
        bool | None,
        typer.Option("--file-opt/--no-file-opt", help="Enable or disable file optimization"),
    ] = None,
    save: Annotated[bool, typer.Option("--save", help="Save path and options to settings")] = False,
    renpy: Annotated[str | None, typer.Option("--renpy", help="RenPy version")] = None,
    no_filters: Annotated[
        bool, typer.Option("--no-filters", help="Disable filters during initialization")
    ] = False,
    resources: Annotated[
        Path | None, typer.Option("--resources", "-r", help="Directory with optimized files")
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", help="Enable debug logging")] = False,
    _context=None,
) -> None:
    """Patch the game installation."""
    _configure_logging(verbose)
    ctx = _context or create_context(resource_dir=resources)
    ctx.reporter.show_banner()

    settings = _apply_overrides(ctx, _load_settings(ctx), path, file_opt, renpy, no_filters)
    _require_install_path(ctx, settings)
    if save:
        ctx.settings_store.save(settings)
        ctx.reporter.show_success(f"Settings saved to {ctx.settings_store.settings_file}")
    ctx.reporter.show_settings(settings)

    try:
        ok = ctx.patcher.run(settings)
    except (PatcherError, OSError) as e:
        ctx.reporter.show_error(str(e))
        ok = False

    if not ok:
        ctx.reporter.show_error("Operation failed.")
        raise typer.Exit(1)
    ctx.reporter.show_success("Operation completed successfully.")


@app.command()
def check(
    resources: Annotated[
        Path | None, typer.Option("--resources", "-r", help="Directory with optimized files")
    ] = None,
    _context=None,
) -> None:
    """Verify that all optimized files are present."""
    ctx = _context or create_context(resource_dir=resources)
    try:
        ctx.patcher.check().raise_for_errors()
    except MissingResource as e:
        raise typer.Exit(1) from e
    ctx.reporter.show_success(f"All resources present in {ctx.manifest.resource_dir}")


@settings_app.command("show")
def settings_show(
    _context=None,
) -> None:
    """Show saved settings."""
    ctx = _context or create_context()
    ctx.reporter.show_settings(_load_settings(ctx))


@settings_app.command("open")
def settings_open(
    _context=None,
) -> None:
    """Open the settings file in the system editor."""
    ctx = _context or create_context()
    store = ctx.settings_store
    if not store.exists():
        store.save(Settings())
    ctx.reporter.show_info(f"Opening {store.settings_file}")
    typer.launch(str(store.settings_file))


if __name__ == "__main__":
    app()
