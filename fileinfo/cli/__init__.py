"""fileinfo CLI package.

A command-line tool for inspecting files: human-readable size, type,
hexadecimal and base64 views.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("fileinfo")
except PackageNotFoundError:
    # Package is not installed
    __version__ = "0.1.0"

# Export the app for external use
from .cli import app

__all__ = ["app", "__version__"]
