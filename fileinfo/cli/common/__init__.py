"""Common types shared by the file inspection commands."""

from enum import Enum, auto
from pathlib import Path
from typing import Union

# Custom types
PathLike = Union[str, Path]


class OperationStatus(Enum):
    """Operation result status codes."""

    SUCCESS = auto()
    ERROR = auto()
    SKIPPED = auto()  # Nothing to do, or the user declined
