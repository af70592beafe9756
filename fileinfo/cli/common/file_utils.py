"""File operation utilities."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from . import OperationStatus

console = Console()


class FileOperationResult:
    """Result of a file operation with status and details."""

    def __init__(
        self, status: OperationStatus, path: Path, message: Optional[str] = None
    ):
        self.status = status
        self.path = path
        self.message = message

    @property
    def success(self) -> bool:
        """Check if the operation was successful."""
        return self.status == OperationStatus.SUCCESS

    @property
    def error(self) -> bool:
        """Check if the operation resulted in an error."""
        return self.status == OperationStatus.ERROR


def safe_write_file(
    path: Path, content: str, non_interactive: bool = False
) -> FileOperationResult:
    """Write text content to a file, asking before an existing file is replaced.

    Args:
        path: Path to write to
        content: Content to write
        non_interactive: Overwrite existing files without asking

    Returns:
        FileOperationResult: Result of the operation
    """
    if path.is_dir():
        console.print(f"[bold red]Error:[/] Cannot write to {path} - it's a directory")
        return FileOperationResult(
            OperationStatus.ERROR, path, "Path exists as a directory"
        )

    if path.is_file() and not non_interactive:
        should_overwrite = typer.confirm(
            f"File {path} already exists. Overwrite?", default=True
        )
        if not should_overwrite:
            console.print("[yellow]Skipping file creation.[/]")
            return FileOperationResult(
                OperationStatus.SKIPPED, path, "User chose not to overwrite file"
            )

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return FileOperationResult(OperationStatus.SUCCESS, path)
    except OSError as e:
        console.print(f"[bold red]Error:[/] Failed to write to {path}: {e}")
        return FileOperationResult(
            OperationStatus.ERROR, path, f"Failed to write file: {str(e)}"
        )
