import os

import pytest

from pipex.lines import LineReader, get_next_line


def _open(tmp_path, data: bytes, name: str = "input.txt") -> int:
    path = tmp_path / name
    path.write_bytes(data)
    return os.open(path, os.O_RDONLY)


@pytest.fixture
def opened(tmp_path):
    fds = []

    def factory(data: bytes, name: str = "input.txt") -> int:
        fd = _open(tmp_path, data, name)
        fds.append(fd)
        return fd

    yield factory
    for fd in fds:
        try:
            os.close(fd)
        except OSError:
            pass


def test_readline_returns_lines_with_newlines(opened):
    reader = LineReader(opened(b"ab\ncd\nef"), 10)
    assert reader.readline() == b"ab\n"
    assert reader.readline() == b"cd\n"
    assert reader.readline() == b"ef"
    assert reader.readline() is None


@pytest.mark.parametrize("buffer_size", [1, 2, 3, 7, 10, 1000])
def test_lines_rejoin_to_input(opened, buffer_size):
    data = b"first line\n\nsecond\na much longer line than the buffer\nend"
    lines = list(LineReader(opened(data), buffer_size))
    assert b"".join(lines) == data
    assert lines == data.splitlines(keepends=True)


def test_empty_input_gives_no_lines(opened):
    reader = LineReader(opened(b""), 4)
    assert reader.readline() is None
    assert list(reader) == []


def test_only_newlines(opened):
    assert list(LineReader(opened(b"\n\n\n"), 2)) == [b"\n", b"\n", b"\n"]


def test_non_positive_buffer_size_rejected(opened):
    fd = opened(b"x")
    with pytest.raises(ValueError):
        LineReader(fd, 0)
    with pytest.raises(ValueError):
        LineReader(fd, -5)


def test_read_error_raises(tmp_path):
    fd = _open(tmp_path, b"data\n")
    os.close(fd)
    with pytest.raises(OSError):
        LineReader(fd, 4).readline()


def test_get_next_line_keeps_state_per_descriptor(opened):
    first = opened(b"a1\na2\n", "a.txt")
    second = opened(b"b1\nb2\nb3", "b.txt")
    assert get_next_line(first) == b"a1\n"
    assert get_next_line(second) == b"b1\n"
    assert get_next_line(first) == b"a2\n"
    assert get_next_line(second) == b"b2\n"
    assert get_next_line(first) is None
    assert get_next_line(second) == b"b3"
    assert get_next_line(second) is None


def test_get_next_line_negative_descriptor():
    assert get_next_line(-1) is None


def test_get_next_line_reads_pipe(opened):
    read_end, write_end = os.pipe()
    try:
        os.write(write_end, b"over a pipe\nsecond")
        os.close(write_end)
        assert get_next_line(read_end) == b"over a pipe\n"
        assert get_next_line(read_end) == b"second"
        assert get_next_line(read_end) is None
    finally:
        os.close(read_end)