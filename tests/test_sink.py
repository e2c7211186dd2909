"""Tests for output sinks."""

from pathlib import Path

import pytest

from htmlrender import ConsoleSink, FileSink


def test_file_sink_writes_and_overwrites(tmp_path: Path) -> None:
    """Ensure file sinks replace previous content."""

    path = tmp_path / "out.html"
    path.write_text("old content that is longer", encoding="utf-8")

    FileSink(path).write("new")

    assert path.read_text(encoding="utf-8") == "new"


def test_file_sink_creates_parent_folders(tmp_path: Path) -> None:
    """Ensure missing folders are created."""

    path = tmp_path / "a" / "b" / "out.html"

    FileSink(str(path)).write("<p>x</p>")

    assert path.read_text(encoding="utf-8") == "<p>x</p>"


def test_file_sink_uses_encoding(tmp_path: Path) -> None:
    """Ensure the configured encoding is used for the file."""

    path = tmp_path / "out.html"

    FileSink(path, encoding="utf-16").write("ș")

    assert path.read_bytes().decode("utf-16") == "ș"


def test_console_sink(capsys: pytest.CaptureFixture[str]) -> None:
    """Ensure console output ends with exactly one newline."""

    sink = ConsoleSink()
    sink.write("one")
    sink.write("two\n")

    assert capsys.readouterr().out == "one\ntwo\n"
