import pytest

from ltbkit.error import Error, Severity
from ltbkit.file_utils import get_binary_file_contents, get_binary_files_contents


def test_reads_bytes_back(tmp_path):
    path = tmp_path / "data.bin"
    payload = bytes(range(256))
    path.write_bytes(payload)
    assert get_binary_file_contents(path) == payload


def test_accepts_string_path(tmp_path):
    path = tmp_path / "data.bin"
    path.write_bytes(b"\x00\x01\x02")
    assert get_binary_file_contents(str(path)) == b"\x00\x01\x02"


def test_empty_file(tmp_path):
    path = tmp_path / "empty.bin"
    path.write_bytes(b"")
    assert get_binary_file_contents(path) == b""


def test_missing_file_raises_error(tmp_path):
    missing = tmp_path / "missing.bin"
    with pytest.raises(Error) as info:
        get_binary_file_contents(missing)
    assert info.value.error_message == f"Failed to open file '{missing}'"
    assert info.value.severity is Severity.ERROR


def test_directory_raises_error(tmp_path):
    with pytest.raises(Error) as info:
        get_binary_file_contents(tmp_path)
    assert info.value.error_message.startswith("Failed to open file")


def test_multiple_files_in_order(tmp_path):
    first = tmp_path / "a.bin"
    second = tmp_path / "b.bin"
    first.write_bytes(b"first")
    second.write_bytes(b"second")
    assert get_binary_files_contents([second, first]) == [b"second", b"first"]


def test_no_files_gives_empty_list():
    assert get_binary_files_contents([]) == []


def test_multiple_files_with_missing_raises(tmp_path):
    present = tmp_path / "a.bin"
    present.write_bytes(b"ok")
    missing = tmp_path / "nope.bin"
    with pytest.raises(Error) as info:
        get_binary_files_contents([present, missing])
    assert info.value.error_message == f"Failed to open file '{missing}'"