"""Terminal output handling using Rich library.

This module provides the OutputHandler class for CLI status output. Status
messages go to stderr so stdout carries only the rendered page (and, for the
serve command, the MCP protocol). Supports verbosity levels and --no-color.
"""

from contextlib import contextmanager
from typing import Iterator

from rich.console import Console
from rich.live import Live
from rich.spinner import Spinner


class OutputHandler:
    """Handles terminal status output using Rich library.

    Attributes:
        verbosity: Verbosity level (0=summary, 1=info, 2=debug)
        console: Rich Console instance writing to stderr

    Example:
        >>> handler = OutputHandler(verbosity=1, no_color=False)
        >>> handler.info("Fetching page")
        >>> with handler.spinner("Fetching page..."):
        ...     pass
    """

    def __init__(self, verbosity: int = 0, no_color: bool = False):
        """Initialize output handler.

        Args:
            verbosity: Verbosity level (0=summary, 1=info, 2=debug)
            no_color: Disable color output if True
        """
        self.verbosity = verbosity
        self.no_color = no_color
        self.console = Console(
            stderr=True,
            no_color=no_color,
            highlight=False,
        )

    def error(self, message: str) -> None:
        """Display error message in red.

        Args:
            message: Error message to display (printed without markup)
        """
        self.console.print("[red]✗[/red] ", end="")
        self.console.print(message, style="red", markup=False)

    def info(self, message: str) -> None:
        """Display info message (only if verbosity >= 1)."""
        if self.verbosity >= 1:
            self.console.print(message, markup=False)

    def debug(self, message: str) -> None:
        """Display debug message (only if verbosity >= 2)."""
        if self.verbosity >= 2:
            self.console.print(message, style="dim", markup=False)

    @contextmanager
    def spinner(self, message: str) -> Iterator[None]:
        """Display spinner for single operations.

        The spinner is skipped with --no-color or when stderr is not a
        terminal.

        Example:
            >>> with handler.spinner("Fetching page..."):
            ...     pass
        """
        if self.no_color or not self.console.is_terminal:
            yield
            return

        spinner = Spinner("dots", text=message)
        with Live(spinner, console=self.console, refresh_per_second=10, transient=True):
            yield
