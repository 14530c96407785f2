"""Test reading and writing files."""

import os
import stat
from unittest.mock import patch

import pytest
from minivi.editor import Editor
from minivi.fileio import read_lines, write_lines

from fakes import FakeTerminal


def test_read_missing_file_returns_empty_list(tmp_path):
    assert read_lines(str(tmp_path / "missing.txt")) == []


def test_read_strips_newlines(tmp_path):
    path = tmp_path / "doc.txt"
    path.write_text("first\nsecond\n", encoding="utf-8")
    assert read_lines(str(path)) == ["first", "second"]


def test_read_without_trailing_newline(tmp_path):
    path = tmp_path / "doc.txt"
    path.write_text("first\nsecond", encoding="utf-8")
    assert read_lines(str(path)) == ["first", "second"]


def test_read_keeps_blank_lines(tmp_path):
    path = tmp_path / "doc.txt"
    path.write_text("a\n\n\nb\n", encoding="utf-8")
    assert read_lines(str(path)) == ["a", "", "", "b"]


def test_write_terminates_every_line(tmp_path):
    path = tmp_path / "out.txt"
    write_lines(str(path), ["one", "", "three"])
    assert path.read_text(encoding="utf-8") == "one\n\nthree\n"


def test_write_overwrites_existing(tmp_path):
    path = tmp_path / "out.txt"
    path.write_text("Old content that is longer\n", encoding="utf-8")
    write_lines(str(path), ["new"])
    assert path.read_text(encoding="utf-8") == "new\n"


def test_write_leaves_no_temp_files(tmp_path):
    path = tmp_path / "out.txt"
    write_lines(str(path), ["a"])
    assert os.listdir(tmp_path) == ["out.txt"]


def test_failed_save_keeps_target_and_removes_temp_file(tmp_path):
    """A save that fails before the swap leaves the original untouched."""
    path = tmp_path / "doc.txt"
    path.write_bytes(b"Original content\n")
    with patch('minivi.fileio.os.replace', side_effect=OSError("disk gone")):
        with pytest.raises(OSError):
            write_lines(str(path), ["lost"])
    assert path.read_bytes() == b"Original content\n"
    assert os.listdir(tmp_path) == ["doc.txt"]


def test_failed_fsync_removes_temp_file(tmp_path):
    path = tmp_path / "doc.txt"
    path.write_bytes(b"keep\n")
    with patch('minivi.fileio.os.fsync', side_effect=OSError("io error")):
        with pytest.raises(OSError):
            write_lines(str(path), ["lost"])
    assert path.read_bytes() == b"keep\n"
    assert not [name for name in os.listdir(tmp_path) if name.endswith(".tmp")]


def test_save_keeps_file_permissions(tmp_path):
    """An executable script stays executable after saving."""
    path = tmp_path / "script.sh"
    path.write_text("echo hi\n", encoding="utf-8")
    os.chmod(path, 0o755)
    write_lines(str(path), ["echo bye"])
    assert stat.S_IMODE(os.stat(path).st_mode) == 0o755
    assert path.read_text(encoding="utf-8") == "echo bye\n"


def test_non_utf8_file_survives_load_and_save(tmp_path):
    """Bytes that aren't valid UTF-8 load without error and save unchanged."""
    path = tmp_path / "latin1.txt"
    path.write_bytes(b"caf\xe9\n")
    lines = read_lines(str(path))
    assert len(lines) == 1
    assert lines[0].startswith("caf")
    write_lines(str(path), lines)
    assert path.read_bytes() == b"caf\xe9\n"


def test_carriage_returns_preserved(tmp_path):
    """Only newlines split lines; CR and CRLF come back byte for byte."""
    path = tmp_path / "mixed.txt"
    path.write_bytes(b"a\rb\r\nc\n")
    lines = read_lines(str(path))
    assert lines == ["a\rb\r", "c"]
    write_lines(str(path), lines)
    assert path.read_bytes() == b"a\rb\r\nc\n"


def test_read_empty_file(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_bytes(b"")
    assert read_lines(str(path)) == []


def test_editor_load_missing_file(tmp_path):
    editor = Editor(str(tmp_path / "new.txt"), terminal=FakeTerminal())
    editor.load_file()
    assert editor.buffer.lines == [""]
    assert (editor.cursor.row, editor.cursor.col) == (0, 0)


def test_editor_save_round_trip(tmp_path):
    path = tmp_path / "doc.txt"
    path.write_text("alpha\nbeta\n", encoding="utf-8")
    editor = Editor(str(path), terminal=FakeTerminal())
    editor.load_file()
    assert editor.buffer.lines == ["alpha", "beta"]
    editor.buffer.insert_line(2, "gamma")
    assert editor.save_file() is True
    assert path.read_text(encoding="utf-8") == "alpha\nbeta\ngamma\n"


def test_editor_save_failure_returns_false(tmp_path):
    target = tmp_path / "no_such_dir" / "doc.txt"
    editor = Editor(str(target), terminal=FakeTerminal())
    assert editor.save_file() is False
    assert not target.exists()
