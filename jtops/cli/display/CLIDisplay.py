"""CLI display implementation using Rich library."""

import sys
from datetime import datetime

from rich.console import Console
from rich.markup import escape


class CLIDisplay:
    """Rich console output: status lines to stderr, reports to stdout."""

    def __init__(self):
        self.console = Console(file=sys.stdout)
        self.stderr_console = Console(file=sys.stderr)

    def status(self, message: str) -> None:
        timestamp = datetime.now().strftime("%H:%M:%S")
        self.stderr_console.print(f"[dim]{timestamp}[/dim] [blue]i[/blue] {escape(message)}")

    def success(self, message: str) -> None:
        timestamp = datetime.now().strftime("%H:%M:%S")
        self.stderr_console.print(f"[dim]{timestamp}[/dim] [green]✓[/green] {escape(message)}")

    def error(self, message: str, details: str = "") -> None:
        timestamp = datetime.now().strftime("%H:%M:%S")
        self.stderr_console.print(f"[dim]{timestamp}[/dim] [red]✗[/red] {escape(message)}")
        if details:
            self.stderr_console.print(f"  [dim]{escape(details)}[/dim]")

    def info(self, message: str) -> None:
        self.stderr_console.print(message)

    def progress(self, progress_percent: float, message: str) -> None:
        timestamp = datetime.now().strftime("%H:%M:%S")
        self.info(f"[dim]{timestamp}[/dim] Progress: {escape(message)} ({progress_percent:.1%})")

    def report(self, *lines: str) -> None:
        """Print report lines to stdout verbatim (no markup, no wrapping)."""
        for line in lines:
            self.console.print(line, markup=False, emoji=False, highlight=False, soft_wrap=True)
