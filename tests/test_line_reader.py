import os

import pytest

from ftkit.line_reader import LineReader, get_next_line


@pytest.fixture
def open_file(tmp_path):
    fds = []

    def _open(content: bytes, name: str = "data.txt") -> int:
        path = tmp_path / name
        path.write_bytes(content)
        fd = os.open(path, os.O_RDONLY)
        fds.append(fd)
        return fd

    yield _open
    for fd in fds:
        os.close(fd)


@pytest.mark.parametrize("buffer_size", [1, 2, 3, 7, 1024])
def test_reads_all_lines_for_any_buffer_size(open_file, buffer_size):
    fd = open_file(b"first\nsecond\n\nthird\n")
    reader = LineReader(buffer_size)
    assert list(reader.iter_lines(fd)) == ["first", "second", "", "third"]
    assert reader.read_line(fd) is None


def test_final_line_without_newline(open_file):
    fd = open_file(b"abc\ndef")
    reader = LineReader(2)
    assert reader.read_line(fd) == "abc"
    assert reader.read_line(fd) == "def"
    assert reader.read_line(fd) is None


def test_empty_file_gives_none(open_file):
    fd = open_file(b"")
    assert LineReader().read_line(fd) is None


def test_descriptors_do_not_mix(open_file):
    fd_a = open_file(b"a1\na2\na3\n", "a.txt")
    fd_b = open_file(b"b1\nb2\n", "b.txt")
    reader = LineReader(4)
    assert reader.read_line(fd_a) == "a1"
    assert reader.read_line(fd_b) == "b1"
    assert reader.read_line(fd_a) == "a2"
    assert reader.read_line(fd_b) == "b2"
    assert reader.read_line(fd_a) == "a3"
    assert reader.read_line(fd_b) is None
    assert reader.read_line(fd_a) is None


def test_forget_drops_buffered_data(open_file):
    fd = open_file(b"a\nb\nc\n")
    reader = LineReader(100)
    assert reader.read_line(fd) == "a"
    reader.forget(fd)
    assert reader.read_line(fd) is None


def test_lines_round_trip(open_file):
    lines = ["hello world", "ünïcödé", "", "x" * 50]
    fd = open_file(("\n".join(lines) + "\n").encode("utf-8"))
    assert list(LineReader(5).iter_lines(fd)) == lines


def test_invalid_buffer_size():
    with pytest.raises(ValueError):
        LineReader(0)


def test_bad_descriptor_raises(tmp_path):
    path = tmp_path / "closed.txt"
    path.write_bytes(b"data\n")
    fd = os.open(path, os.O_RDONLY)
    os.close(fd)
    with pytest.raises(OSError):
        LineReader().read_line(fd)


def test_get_next_line(open_file):
    fd = open_file(b"one\ntwo")
    assert get_next_line(fd) == "one"
    assert get_next_line(fd) == "two"
    assert get_next_line(fd) is None