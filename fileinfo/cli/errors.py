"""Custom exceptions for file inspection."""

from typing import Any


class InvalidArgumentError(ValueError):
    """Raised when a caller passes an argument outside its allowed range."""

    def __init__(self, argument: str, value: Any, message: str | None = None):
        """Initialize invalid argument error.

        Args:
            argument: Name of the offending argument
            value: Value that was rejected
            message: Optional custom error message
        """
        super().__init__(message or f"Invalid value for {argument}: {value!r}")
        self.argument = argument
        self.value = value
