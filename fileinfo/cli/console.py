"""Console utilities for the fileinfo CLI.

This module provides a Rich console with the styles the fileinfo commands
use for status and error output.
"""

from typing import Any

from rich.console import Console as RichConsole
from rich.markup import escape
from rich.theme import Theme


class FileInfoConsole(RichConsole):
    """Rich console with fileinfo styling and helpers."""

    def __init__(self, **kwargs: Any) -> None:
        """Initialize the console with the fileinfo theme.

        Args:
            **kwargs: Additional arguments to pass to the Rich Console
        """
        theme = Theme(
            {
                "info": "blue",
                "warning": "yellow",
                "error": "bold red",
                "success": "green",
                "path": "cyan",
                "debug": "dim",
            }
        )
        super().__init__(theme=theme, **kwargs)

    def warning(self, message: str) -> None:
        """Print a warning message."""
        self.print(f"[warning]{message}[/]")

    def error(self, message: str) -> None:
        """Print an error message.

        Args:
            message: The error message to print
        """
        self.print(f"[error]Error:[/] {escape(message)}")

    def success(self, message: str) -> None:
        """Print a success message."""
        self.print(f"[success]{message}[/]")

    def path(self, path: str) -> None:
        """Print a file path."""
        self.print(f"[path]{escape(path)}[/]")

    def debug_print(self, msg: str, debug: bool = False) -> None:
        """Print debug message if debug mode is enabled."""
        if debug:
            self.print(f"[debug]DEBUG: {escape(msg)}[/]")


# Create a default console instance for easy import
console = FileInfoConsole()
