"""Terminal output handling using Rich library.

This module provides the OutputHandler class for all CLI terminal output.
Uses Rich library for colored output and the end-of-run summary. Supports
verbosity levels and --no-color flag.
"""

from rich.console import Console
from rich.markup import escape

from src.cli.models import MigrationSummary


class OutputHandler:
    """Handles all terminal output using Rich library.

    Provides methods for displaying messages and summaries with color coding
    and verbosity level control.

    Attributes:
        verbosity: Logging verbosity level (0=summary, 1=info, 2=debug)
        console: Rich Console instance for output

    Example:
        >>> handler = OutputHandler(verbosity=1, no_color=False)
        >>> handler.success("Published 'Overview'")
    """

    def __init__(self, verbosity: int = 0, no_color: bool = False):
        """Initialize output handler.

        Args:
            verbosity: Verbosity level (0=summary, 1=info, 2=debug)
            no_color: Disable color output if True
        """
        self.verbosity = verbosity
        self.console = Console(
            force_terminal=not no_color,
            no_color=no_color,
            highlight=False,
        )

    def success(self, message: str) -> None:
        """Display success message in green."""
        self.console.print(f"[green]✓[/green] {escape(message)}")

    def error(self, message: str) -> None:
        """Display error message in red."""
        self.console.print(f"[red]✗[/red] {escape(message)}", style="red")

    def info(self, message: str) -> None:
        """Display info message (only if verbosity >= 1)."""
        if self.verbosity >= 1:
            self.console.print(escape(message))

    def print(self, message: str) -> None:
        """Display message without formatting.

        Page titles routinely contain square brackets, so the text is
        escaped rather than parsed as Rich markup.
        """
        self.console.print(escape(message))

    def print_summary(self, summary: MigrationSummary) -> None:
        """Display migration summary with color coding.

        Args:
            summary: Result of the migration run
        """
        self.console.print("\n[bold]Migration Summary:[/bold]")

        if summary.published_count > 0:
            self.console.print(
                f"  [green]↑[/green] Published: {summary.published_count} page(s)"
            )

        if summary.failed_count > 0:
            self.console.print(f"  [red]✗[/red] Failed: {summary.failed_count} page(s)")
            for title in summary.failed:
                self.console.print(f"    • {escape(title)}")

        if summary.total_count == 0:
            self.console.print("\n[yellow]No pages to publish[/yellow]")
        elif summary.failed_count > 0:
            self.console.print("\n[red]Migration completed with failures[/red]")
        else:
            self.console.print("\n[green]Migration completed successfully[/green]")
