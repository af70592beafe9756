"""File size formatting utilities."""

from decimal import ROUND_HALF_UP, Decimal, localcontext
from pathlib import Path

from ..common import PathLike
from ..errors import InvalidArgumentError

# One label per power of 1024
SIZE_SUFFIXES = ("bytes", "KB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB")

# A rounded magnitude at or above this moves up one bracket
ROLLOVER_THRESHOLD = 1024


def _bracket(byte_count: int) -> int:
    """Return the power-of-1024 bracket for a positive byte count."""
    return min(max(0, (byte_count.bit_length() - 1) // 10), len(SIZE_SUFFIXES) - 1)


def _round(value: Decimal, decimal_places: int) -> Decimal:
    return value.quantize(Decimal(1).scaleb(-decimal_places), rounding=ROUND_HALF_UP)


def format_size(byte_count: int, decimal_places: int = 0) -> str:
    """
    Format a size in bytes to a human-readable string.

    The bracket is picked from the integer bit length, so values next to a
    power of 1024 never land in the wrong unit. Counts beyond the last
    bracket are reported in YB.

    Args:
        byte_count: Size in bytes
        decimal_places: Number of fractional digits in the result

    Returns:
        str: Formatted size string (e.g., "0 bytes", "1 KB", "5.00 GB")

    Raises:
        InvalidArgumentError: If decimal_places is negative
    """
    if decimal_places < 0:
        raise InvalidArgumentError(
            "decimal_places",
            decimal_places,
            "decimal_places cannot be negative",
        )

    if byte_count <= 0:
        return f"{Decimal(0):.{decimal_places}f} {SIZE_SUFFIXES[0]}"

    last = len(SIZE_SUFFIXES) - 1
    mag = _bracket(int(byte_count))

    with localcontext() as ctx:
        # Enough digits for the integer part plus the requested fraction
        ctx.prec = max(28, len(str(int(byte_count))) + decimal_places + 10)

        adjusted = Decimal(byte_count) / (1 << (mag * 10))
        rounded = _round(adjusted, decimal_places)

        if rounded >= ROLLOVER_THRESHOLD and mag < last:
            mag += 1
            adjusted /= 1024
            rounded = _round(adjusted, decimal_places)

        return f"{rounded:.{decimal_places}f} {SIZE_SUFFIXES[mag]}"


def file_size_suffix(path: PathLike, decimal_places: int = 0) -> str:
    """Format the size of the file at ``path``.

    Raises:
        FileNotFoundError: If the file does not exist
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise FileNotFoundError(f"Could not find the file '{file_path}'.")
    return format_size(file_path.stat().st_size, decimal_places)
