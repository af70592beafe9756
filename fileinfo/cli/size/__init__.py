"""File size formatting utilities."""

from .formatter import SIZE_SUFFIXES, file_size_suffix, format_size

__all__ = ["SIZE_SUFFIXES", "file_size_suffix", "format_size"]
