"""Command definitions for the fileinfo CLI.

This module contains all command definitions for the fileinfo application,
using the Typer framework to define the command structure and options.
"""

from pathlib import Path
from typing import Any, NoReturn, Optional

import typer
from rich.table import Table

from .console import console
from .encoding import convert_to_base64, save_as_hex, to_hex_string
from .errors import InvalidArgumentError
from .platform import MimeTypeClassifier, get_mime_content_type
from .report import build_report
from .size import file_size_suffix


app = typer.Typer(
    help="Inspect files: size, type, hex and base64 views",
    invoke_without_command=True,
    no_args_is_help=True,
)


def _decimals_option() -> Any:
    return typer.Option(
        0,
        "--decimals",
        "-d",
        envvar="FILEINFO_DECIMALS",
        help="Number of decimal places in the formatted size",
    )


def _fail(message: str) -> NoReturn:
    console.error(message)
    raise typer.Exit(1)


@app.command()
def size(
    path: Path = typer.Argument(..., help="File to measure"),
    decimals: int = _decimals_option(),
) -> None:
    """Show the size of a file in human-readable units."""
    try:
        typer.echo(file_size_suffix(path, decimals))
    except (OSError, InvalidArgumentError) as e:
        _fail(str(e))


@app.command(name="type")
def file_type(
    path: Path = typer.Argument(..., help="File to classify"),
) -> None:
    """Show the registered type of a file, based on its extension."""
    label = MimeTypeClassifier().get_file_type(path)
    typer.echo(label or "Unknown")


@app.command(name="hex")
def hex_dump(
    path: Path = typer.Argument(..., help="File to dump"),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Save the dump to this file instead of printing it"
    ),
    yes: bool = typer.Option(
        False, "--yes", "-y", help="Overwrite the output file without asking"
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Show verbose logs"),
) -> None:
    """Print the contents of a file as uppercase hexadecimal."""
    try:
        if output is None:
            typer.echo(to_hex_string(path))
            return

        console.debug_print(f"Writing hex dump of {path} to {output}", verbose)
        result = save_as_hex(path, output, non_interactive=yes)
    except OSError as e:
        _fail(str(e))

    if result.error:
        raise typer.Exit(1)
    if result.success:
        console.success(f"Saved hex dump to {result.path}")
    else:
        console.warning(f"Nothing written: {result.message}")


@app.command(name="base64")
def base64_dump(
    path: Path = typer.Argument(..., help="File to encode"),
) -> None:
    """Print the base64 encoding of a file."""
    try:
        typer.echo(convert_to_base64(path))
    except OSError as e:
        _fail(str(e))


@app.command()
def mime(
    mime_type: str = typer.Argument(..., help="MIME type, e.g. image/png"),
) -> None:
    """Show the subtype part of a MIME type."""
    subtype = get_mime_content_type(mime_type)
    if not subtype:
        _fail(f"Not a type/subtype MIME string: {mime_type}")
    typer.echo(subtype)


@app.command()
def info(
    path: Path = typer.Argument(..., help="File to inspect"),
    decimals: int = _decimals_option(),
    verbose: bool = typer.Option(False, "--verbose", help="Show verbose logs"),
) -> None:
    """Show a summary of a file: size, type and MIME type."""
    try:
        report = build_report(path, decimals)
    except (OSError, InvalidArgumentError) as e:
        _fail(str(e))

    console.path(str(report.path))
    console.debug_print(f"Raw size: {report.size_bytes} bytes", verbose)

    table = Table(title=report.name)
    table.add_column("Property", style="bold")
    table.add_column("Value")
    table.add_row("Size", report.size)
    table.add_row("Bytes", str(report.size_bytes))
    table.add_row("Type", report.file_type or "Unknown")
    table.add_row("MIME", report.mime_type or "N/A")
    table.add_row("Extension", report.extension or "(none)")
    table.add_row("Icon", "yes" if report.has_icon else "no")
    console.print(table)
