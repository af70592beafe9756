"""Hexadecimal and base64 encodings of file contents."""

import base64
from pathlib import Path

from ..common import OperationStatus, PathLike
from ..common.file_utils import FileOperationResult, safe_write_file


def _existing_file(path: PathLike) -> Path:
    file_path = Path(path)
    if not file_path.is_file():
        raise FileNotFoundError(f"Could not find the file '{file_path}'.")
    return file_path


def to_hex_string(path: PathLike) -> str:
    """
    Return the file's binary contents as an uppercase hexadecimal string.

    Args:
        path: Path to the file

    Returns:
        str: Two hex digits per byte, no separators

    Raises:
        FileNotFoundError: If the file does not exist
    """
    file_path = _existing_file(path)
    parts = []
    with open(file_path, "rb") as f:
        for byte_block in iter(lambda: f.read(4096), b""):
            parts.append(byte_block.hex().upper())
    return "".join(parts)


def save_as_hex(
    path: PathLike, output_path: PathLike, non_interactive: bool = True
) -> FileOperationResult:
    """
    Write the hexadecimal dump of a file to ``output_path``.

    An empty source file produces no output file.

    Args:
        path: Path to the source file
        output_path: Where to save the dump
        non_interactive: Overwrite an existing output file without asking

    Returns:
        FileOperationResult: Result of the write

    Raises:
        FileNotFoundError: If the source file does not exist
    """
    contents = to_hex_string(path)
    target = Path(output_path)
    if not contents:
        return FileOperationResult(
            OperationStatus.SKIPPED, target, "Source file is empty"
        )
    return safe_write_file(target, contents, non_interactive=non_interactive)


def convert_to_base64(path: PathLike) -> str:
    """
    Return the base64 encoding of a file's contents.

    Raises:
        FileNotFoundError: If the file does not exist
    """
    file_path = _existing_file(path)
    return base64.b64encode(file_path.read_bytes()).decode("ascii")
