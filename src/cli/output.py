"""Terminal output handling using Rich library.

This module provides the OutputHandler class for all CLI terminal output:
step headers, colored status messages, a progress bar for page
conversion, and the final export summary. Supports verbosity levels and
the --no-color flag.
"""

from contextlib import contextmanager
from typing import Iterator

from rich.console import Console
from rich.live import Live
from rich.markup import escape
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
    TimeRemainingColumn,
)
from rich.spinner import Spinner

from .models import ExportSummary

RULE_WIDTH = 50


class OutputHandler:
    """Handles all terminal output using Rich library.

    Attributes:
        verbosity: Verbosity level (0=summary, 1=info, 2=debug)
        console: Rich Console instance for output

    Example:
        >>> handler = OutputHandler(verbosity=1, no_color=False)
        >>> handler.step(1, 5, "Authentication")
        >>> with handler.spinner("Fetching your databases..."):
        ...     pass
    """

    def __init__(self, verbosity: int = 0, no_color: bool = False):
        """Initialize output handler.

        Args:
            verbosity: Verbosity level (0=summary, 1=info, 2=debug)
            no_color: Disable color output if True
        """
        self.verbosity = verbosity
        self.console = Console(
            no_color=no_color,
            highlight=False,
        )

    def banner(self, title: str) -> None:
        self.console.print(f"\n[bold]{title}[/bold]\n")
        self.console.print("=" * RULE_WIDTH)

    def step(self, number: int, total: int, title: str) -> None:
        """Display a numbered step header, e.g. ``[2/5] Fetching...``."""
        self.console.print(f"\n[bold cyan][{number}/{total}][/bold cyan] {escape(title)}\n")

    def success(self, message: str) -> None:
        self.console.print(f"[green]✓[/green] {message}")

    def error(self, message: str) -> None:
        self.console.print(f"[red]✗[/red] {message}", style="red")

    def info(self, message: str) -> None:
        """Display info message (only if verbosity >= 1)."""
        if self.verbosity >= 1:
            self.console.print(message)

    def debug(self, message: str) -> None:
        """Display debug message (only if verbosity >= 2)."""
        if self.verbosity >= 2:
            self.console.print(f"[dim]{message}[/dim]")

    def print(self, message: str) -> None:
        """Display message without formatting."""
        self.console.print(message, markup=False)

    @contextmanager
    def spinner(self, message: str) -> Iterator[None]:
        """Display spinner for single operations.

        Example:
            >>> with handler.spinner("Fetching your databases..."):
            ...     databases = api.list_databases()
        """
        spinner = Spinner("dots", text=message)
        with Live(spinner, console=self.console, refresh_per_second=10, transient=True):
            yield

    @contextmanager
    def progress_bar(self) -> Iterator[Progress]:
        """Display progress bar for multi-item operations.

        Example:
            >>> with handler.progress_bar() as progress:
            ...     task = progress.add_task("Converting pages", total=10)
            ...     progress.update(task, advance=1)
        """
        progress = Progress(
            SpinnerColumn(),
            TextColumn("[bold blue]{task.description}"),
            BarColumn(),
            TaskProgressColumn(),
            TimeRemainingColumn(),
            console=self.console,
        )
        with progress:
            yield progress

    def print_export_summary(self, summary: ExportSummary) -> None:
        """Display the result of a successful export and the next steps."""
        self.console.print("\n" + "=" * RULE_WIDTH)
        self.console.print("\n[green]✓ SUCCESS![/green] Your Notion database has been exported.\n")
        self.console.print("=" * RULE_WIDTH)
        self.print(f"\n   Database: {summary.database_title}")
        self.print(f"   Entries:  {summary.entry_count}")
        self.print(f"   Size:     {summary.size_kb} KB")
        self.console.print("\n   [bold]FILE CREATED:[/bold]")
        self.print(f"   {summary.file_path}")
        self.console.print("\n" + "=" * RULE_WIDTH)
        self.console.print("\n   Next steps:")
        self.console.print("      1. Open the file above to verify the content")
        self.console.print("      2. Upload to NotebookLM as a source")
        self.console.print("      3. Start asking questions about your Notion data!\n")
