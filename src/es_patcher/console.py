"""Console output for es-patcher."""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from es_patcher import __version__
from es_patcher.settings import Settings


class ConsoleReporter:
    """Prints one status line per patcher event.

    Satisfies the Reporter protocol structurally.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_banner(self) -> None:
        """Display the program banner."""
        self.console.print(
            Panel(
                f"[bold magenta]ES Patcher[/bold magenta] v{__version__}\n"
                "Optimized files and language cleanup for Everlasting Summer",
                border_style="magenta",
            )
        )

    def show_settings(self, settings: Settings) -> None:
        """Display the effective settings.

        Args:
            settings: Settings for the upcoming run.
        """
        table = Table(title="Settings", show_header=False)
        table.add_column("Key", style="cyan")
        table.add_column("Value")
        table.add_row("Path", settings.path)
        table.add_row("RenPy version", settings.renpy_version)
        table.add_row("File optimize", str(settings.file_optimize))
        table.add_row("Remove filters", str(settings.remove_filters))
        table.add_row("Delete languages", ", ".join(settings.delete_languages) or "-")
        self.console.print(table)

    def show_success(self, message: str) -> None:
        """Show success message."""
        self.console.print(f"[green]\u2713[/green] {message}")

    def show_error(self, message: str) -> None:
        """Show error message."""
        self.console.print(f"[red]\u2717[/red] {message}")

    def show_warning(self, message: str) -> None:
        """Show warning message."""
        self.console.print(f"[yellow]![/yellow] {message}")

    def show_info(self, message: str) -> None:
        """Show info message."""
        self.console.print(f"[blue]i[/blue] {message}")
