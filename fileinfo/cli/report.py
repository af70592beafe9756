"""Combined file report."""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict

from .common import PathLike
from .platform import FileClassifier, IconProvider, MimeTypeClassifier, NullIconProvider
from .size import format_size


class FileReport(BaseModel):
    """Model representing what is known about a file."""

    model_config = ConfigDict(frozen=True)

    path: Path
    name: str
    extension: str
    size_bytes: int
    size: str
    file_type: str
    mime_type: Optional[str] = None
    has_icon: bool = False


def build_report(
    path: PathLike,
    decimal_places: int = 0,
    classifier: Optional[FileClassifier] = None,
    icon_provider: Optional[IconProvider] = None,
) -> FileReport:
    """
    Collect size, type and icon information for a file.

    Args:
        path: Path to the file
        decimal_places: Fractional digits for the formatted size
        classifier: File type lookup; defaults to MimeTypeClassifier
        icon_provider: Icon lookup; defaults to NullIconProvider

    Returns:
        FileReport: The collected information

    Raises:
        FileNotFoundError: If the file does not exist
        InvalidArgumentError: If decimal_places is negative
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise FileNotFoundError(f"Could not find the file '{file_path}'.")

    classifier = classifier or MimeTypeClassifier()
    icon_provider = icon_provider or NullIconProvider()

    size_bytes = file_path.stat().st_size
    return FileReport(
        path=file_path.resolve(),
        name=file_path.name,
        extension=file_path.suffix,
        size_bytes=size_bytes,
        size=format_size(size_bytes, decimal_places),
        file_type=classifier.get_file_type(file_path),
        mime_type=classifier.get_mime_type(file_path),
        has_icon=icon_provider.get_icon(file_path) is not None,
    )
