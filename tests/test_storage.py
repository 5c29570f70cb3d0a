"""Test reading and atomically writing documents."""

import os
from unittest.mock import patch

import pytest

from rezvan import storage


def test_split_lines_handles_all_terminators():
    assert storage.split_lines("a\nb\r\nc\rd") == ["a", "b", "c", "d"]


def test_split_lines_trailing_terminator():
    assert storage.split_lines("a\n") == ["a"]
    assert storage.split_lines("a\n\n") == ["a", ""]
    assert storage.split_lines("\n") == [""]
    assert storage.split_lines("") == []


def test_read_lines_keeps_tabs_and_strips_crlf(tmp_path):
    path = tmp_path / "doc.txt"
    path.write_bytes(b"first\r\n\tsecond\r\n")
    assert storage.read_lines(str(path)) == ["first", "\tsecond"]


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        storage.read_lines(str(tmp_path / "missing.txt"))


def test_write_text_replaces_file(tmp_path):
    path = tmp_path / "doc.txt"
    path.write_text("old content", encoding='utf-8')

    written = storage.write_text(str(path), "new\ncontent")

    assert written == len(b"new\ncontent")
    assert path.read_text(encoding='utf-8') == "new\ncontent"
    # No temporary files left behind
    assert os.listdir(tmp_path) == ["doc.txt"]


def test_write_text_counts_bytes_not_characters(tmp_path):
    path = tmp_path / "doc.txt"
    assert storage.write_text(str(path), "ñ€") == 5


def test_failed_rename_keeps_original_and_cleans_up(tmp_path):
    """A failure while replacing the target must not lose the original."""
    path = tmp_path / "doc.txt"
    path.write_text("Original content that should not be lost", encoding='utf-8')

    with patch("rezvan.storage.os.replace", side_effect=PermissionError("Permission denied")):
        with pytest.raises(OSError):
            storage.write_text(str(path), "replacement")

    assert path.read_text(encoding='utf-8') == "Original content that should not be lost"
    assert os.listdir(tmp_path) == ["doc.txt"]


def test_write_into_missing_directory_raises(tmp_path):
    with pytest.raises(OSError):
        storage.write_text(str(tmp_path / "nope" / "doc.txt"), "text")


def test_round_trip_through_disk(tmp_path):
    path = str(tmp_path / "doc.txt")
    lines = ["one", "\ttwo", "", "three"]
    storage.write_text(path, "\n".join(lines))
    assert storage.read_lines(path) == lines
