import pytest

from itmostd.core import CallContext, StdLib
from itmostd.errors import ArgumentTypeError, FileAccessError, ParametersCountError
from itmostd.files import (
    file_append,
    file_read,
    file_read_lines,
    file_write,
    register_all,
)


def test_write_then_read(tmp_path):
    path = str(tmp_path / "data.txt")
    text = "first line\nsecond line"
    assert file_write([path, text], CallContext()) is None
    assert file_read([path], CallContext()) == text


def test_write_replaces_contents(tmp_path):
    path = str(tmp_path / "data.txt")
    file_write([path, "long original"], CallContext())
    file_write([path, "new"], CallContext())
    assert file_read([path], CallContext()) == "new"


def test_append(tmp_path):
    path = str(tmp_path / "data.txt")
    file_write([path, "abc"], CallContext())
    file_append([path, "def"], CallContext())
    assert file_read([path], CallContext()) == "abcdef"


def test_append_creates_file(tmp_path):
    path = str(tmp_path / "new.txt")
    file_append([path, "x"], CallContext())
    assert file_read([path], CallContext()) == "x"


def test_non_string_written_in_display_form(tmp_path):
    path = str(tmp_path / "num.txt")
    file_write([path, 5], CallContext())
    assert file_read([path], CallContext()) == "5"


def test_read_lines_matches_split(tmp_path):
    path = str(tmp_path / "lines.txt")
    file_write([path, "a\nb\nc\n"], CallContext())
    assert file_read_lines([path], CallContext()) == ["a", "b", "c"]


def test_read_lines_without_final_newline(tmp_path):
    path = str(tmp_path / "lines.txt")
    file_write([path, "a\n\nb"], CallContext())
    assert file_read_lines([path], CallContext()) == ["a", "", "b"]


def test_read_lines_empty_file(tmp_path):
    path = str(tmp_path / "empty.txt")
    file_write([path, ""], CallContext())
    assert file_read_lines([path], CallContext()) == []


def test_missing_file(tmp_path):
    path = str(tmp_path / "missing.txt")
    with pytest.raises(FileAccessError) as info:
        file_read([path], CallContext())
    assert info.value.filename == path
    with pytest.raises(FileAccessError):
        file_read_lines([path], CallContext())


def test_write_into_missing_directory(tmp_path):
    path = str(tmp_path / "nodir" / "file.txt")
    with pytest.raises(FileAccessError):
        file_write([path, "x"], CallContext())


def test_filename_must_be_string():
    with pytest.raises(ArgumentTypeError):
        file_read([42], CallContext())
    with pytest.raises(ArgumentTypeError):
        file_append([None, "x"], CallContext())


def test_registered_with_counts(tmp_path):
    lib = StdLib()
    register_all(lib)
    path = str(tmp_path / "f.txt")
    lib.call("file_write", [path, "hey"], CallContext())
    assert lib.call("file_read", [path], CallContext()) == "hey"
    with pytest.raises(ParametersCountError):
        lib.call("file_write", [path], CallContext())