"""File classification capabilities.

File type and icon lookups are host services. The classes here define the
interfaces the rest of the package depends on, plus portable defaults.
"""

import mimetypes
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from ..common import PathLike

# Labels for the top-level part of a MIME type
_TYPE_DESCRIPTIONS = {
    "text": "Text Document",
    "image": "Image File",
    "audio": "Audio File",
    "video": "Video File",
    "font": "Font File",
    "application": "Application File",
}


class FileClassifier(ABC):
    """Looks up the registered type label for a file."""

    @abstractmethod
    def get_file_type(self, path: PathLike) -> str:
        """Return the type label for ``path``, or an empty string if unknown.

        Args:
            path: Path to the file; only its extension needs to be meaningful
        """
        pass

    def get_mime_type(self, path: PathLike) -> Optional[str]:
        """Return the MIME type for ``path``, or None if the classifier has none."""
        return None


class MimeTypeClassifier(FileClassifier):
    """Classifies files by extension using the ``mimetypes`` registry."""

    def get_mime_type(self, path: PathLike) -> Optional[str]:
        mime_type, _ = mimetypes.guess_type(Path(path).name)
        return mime_type

    def get_file_type(self, path: PathLike) -> str:
        mime_type = self.get_mime_type(path)
        if not mime_type:
            return ""
        major = mime_type.split("/", 1)[0]
        description = _TYPE_DESCRIPTIONS.get(major, "File")
        return f"{description} ({mime_type})"


class IconProvider(ABC):
    """Retrieves icons associated with files or stored in executables."""

    @abstractmethod
    def get_icon(self, path: PathLike, small: bool = False) -> Optional[bytes]:
        """Return the icon shown for ``path``, or None if there is none.

        Args:
            path: Path to the file
            small: Return the 16x16 icon instead of the 32x32 one
        """
        pass

    @abstractmethod
    def get_icon_from_executable(
        self, path: PathLike, resource_id: str = "#32512", size: int = 32
    ) -> Optional[bytes]:
        """Return an icon resource from an executable or library.

        Args:
            path: Path to the .exe/.dll holding the icon
            resource_id: Name of the icon resource; the default is the application icon
            size: Requested icon size in pixels
        """
        pass


class NullIconProvider(IconProvider):
    """Icon provider for hosts without a shell icon service."""

    def get_icon(self, path: PathLike, small: bool = False) -> Optional[bytes]:
        return None

    def get_icon_from_executable(
        self, path: PathLike, resource_id: str = "#32512", size: int = 32
    ) -> Optional[bytes]:
        return None


def get_mime_content_type(mime_type: str) -> str:
    """
    Return the subtype of a MIME string (``"image/pjpeg"`` gives ``"pjpeg"``).

    Returns an empty string when the value is not of the form ``type/subtype``.
    """
    parts = mime_type.split("/")
    if len(parts) == 2:
        return parts[1].strip()
    return ""
