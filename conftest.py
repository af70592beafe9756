"""Global pytest configuration.

Shared fixtures for the fileinfo test suite.
"""

import pytest


@pytest.fixture
def text_file(tmp_path):
    """Create a 2 KB text file."""
    file_path = tmp_path / "notes.txt"
    file_path.write_bytes(b"a" * 2048)
    return file_path


@pytest.fixture
def binary_file(tmp_path):
    """Create a small binary file with known content."""
    file_path = tmp_path / "data.bin"
    file_path.write_bytes(b"\x00\xffA")
    return file_path


@pytest.fixture
def empty_file(tmp_path):
    """Create an empty file."""
    file_path = tmp_path / "empty.dat"
    file_path.write_bytes(b"")
    return file_path
