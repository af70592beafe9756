"""Tests for the CLI commands."""

from unittest.mock import patch

from typer.testing import CliRunner

from fileinfo.cli.cli import app


runner = CliRunner()


def test_size_command(text_file):
    """Test the size command."""
    result = runner.invoke(app, ["size", str(text_file)])
    assert result.exit_code == 0
    assert result.output.strip() == "2 KB"


def test_size_command_decimals(text_file):
    result = runner.invoke(app, ["size", str(text_file), "--decimals", "2"])
    assert result.exit_code == 0
    assert result.output.strip() == "2.00 KB"


def test_size_command_decimals_from_env(text_file):
    """Test that decimal places can come from the environment."""
    result = runner.invoke(
        app, ["size", str(text_file)], env={"FILEINFO_DECIMALS": "1"}
    )
    assert result.exit_code == 0
    assert result.output.strip() == "2.0 KB"


def test_size_command_negative_decimals(text_file):
    result = runner.invoke(app, ["size", str(text_file), "--decimals=-1"])
    assert result.exit_code == 1
    assert "decimal_places cannot be negative" in result.output


def test_size_command_missing_file(tmp_path):
    result = runner.invoke(app, ["size", str(tmp_path / "missing.txt")])
    assert result.exit_code == 1
    assert "Could not find the file" in result.output


def test_type_command(text_file):
    result = runner.invoke(app, ["type", str(text_file)])
    assert result.exit_code == 0
    assert result.output.strip() == "Text Document (text/plain)"


def test_type_command_unknown(tmp_path):
    result = runner.invoke(app, ["type", str(tmp_path / "hosts")])
    assert result.exit_code == 0
    assert result.output.strip() == "Unknown"


def test_hex_command(binary_file):
    result = runner.invoke(app, ["hex", str(binary_file)])
    assert result.exit_code == 0
    assert result.output.strip() == "00FF41"


def test_hex_command_output(binary_file, tmp_path):
    """Test saving the hex dump to a file."""
    output = tmp_path / "data.hex"
    result = runner.invoke(
        app, ["hex", str(binary_file), "--output", str(output), "--yes"]
    )
    assert result.exit_code == 0
    assert output.read_text(encoding="utf-8") == "00FF41"
    assert "Saved hex dump" in result.output


def test_hex_command_output_empty_source(empty_file, tmp_path):
    output = tmp_path / "empty.hex"
    result = runner.invoke(app, ["hex", str(empty_file), "-o", str(output)])
    assert result.exit_code == 0
    assert not output.exists()
    assert "Nothing written" in result.output


def test_hex_command_output_declined(binary_file, tmp_path):
    """Test declining the overwrite prompt."""
    output = tmp_path / "data.hex"
    output.write_text("old")
    result = runner.invoke(
        app, ["hex", str(binary_file), "-o", str(output)], input="n\n"
    )
    assert result.exit_code == 0
    assert output.read_text() == "old"


def test_hex_command_output_write_error(binary_file, tmp_path):
    """Test that a failed write exits with an error."""
    output = tmp_path / "folder"
    output.mkdir()
    result = runner.invoke(app, ["hex", str(binary_file), "-o", str(output), "-y"])
    assert result.exit_code == 1


def test_hex_command_missing_file(tmp_path):
    result = runner.invoke(app, ["hex", str(tmp_path / "missing.bin")])
    assert result.exit_code == 1
    assert "Could not find the file" in result.output


def test_base64_command(tmp_path):
    file_path = tmp_path / "hello.txt"
    file_path.write_bytes(b"hello")
    result = runner.invoke(app, ["base64", str(file_path)])
    assert result.exit_code == 0
    assert result.output.strip() == "aGVsbG8="


def test_base64_command_missing_file(tmp_path):
    result = runner.invoke(app, ["base64", str(tmp_path / "missing.bin")])
    assert result.exit_code == 1


def test_mime_command():
    result = runner.invoke(app, ["mime", "image/pjpeg"])
    assert result.exit_code == 0
    assert result.output.strip() == "pjpeg"


def test_mime_command_invalid():
    result = runner.invoke(app, ["mime", "bogus"])
    assert result.exit_code == 1
    assert "Not a type/subtype MIME string" in result.output


def test_info_command(text_file):
    """Test the info command."""
    result = runner.invoke(app, ["info", str(text_file), "--decimals", "2"])
    assert result.exit_code == 0
    assert "notes.txt" in result.output
    assert "2.00 KB" in result.output
    assert "2048" in result.output
    assert "text/plain" in result.output


def test_info_command_verbose(text_file):
    result = runner.invoke(app, ["info", str(text_file), "--verbose"])
    assert result.exit_code == 0
    assert "DEBUG: Raw size: 2048 bytes" in result.output


def test_info_command_missing_file(tmp_path):
    result = runner.invoke(app, ["info", str(tmp_path / "missing.txt")])
    assert result.exit_code == 1


@patch("fileinfo.cli.cli.build_report")
def test_info_command_passes_decimals(mock_build_report, text_file):
    """Test that the info command forwards its options."""
    mock_build_report.side_effect = FileNotFoundError("nope")
    result = runner.invoke(app, ["info", str(text_file), "-d", "3"])
    assert result.exit_code == 1
    mock_build_report.assert_called_once_with(text_file, 3)


def test_no_args_shows_help():
    result = runner.invoke(app, [])
    assert "size" in result.output
    assert "base64" in result.output


@patch("fileinfo.cli.cli.console.path")
def test_info_command_prints_resolved_path(mock_path, text_file):
    """Test that the info command shows where the file lives."""
    result = runner.invoke(app, ["info", str(text_file)])
    assert result.exit_code == 0
    mock_path.assert_called_once_with(str(text_file.resolve()))


@patch("fileinfo.cli.cli.to_hex_string")
def test_hex_command_unreadable_file(mock_to_hex, binary_file):
    """Test that read errors are reported instead of raising."""
    mock_to_hex.side_effect = PermissionError("Permission denied")
    result = runner.invoke(app, ["hex", str(binary_file)])
    assert result.exit_code == 1
    assert "Permission denied" in result.output


@patch("fileinfo.cli.cli.convert_to_base64")
def test_base64_command_unreadable_file(mock_convert, binary_file):
    mock_convert.side_effect = PermissionError("Permission denied")
    result = runner.invoke(app, ["base64", str(binary_file)])
    assert result.exit_code == 1
    assert "Permission denied" in result.output


@patch("fileinfo.cli.cli.file_size_suffix")
def test_size_command_unreadable_file(mock_size, text_file):
    mock_size.side_effect = PermissionError("Permission denied")
    result = runner.invoke(app, ["size", str(text_file)])
    assert result.exit_code == 1
    assert "Permission denied" in result.output
