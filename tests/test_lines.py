import os

import pytest

from minishell.libft.lines import LineReader, get_next_line


def _fd_with(tmp_path, data: bytes, name="input.txt"):
    path = tmp_path / name
    path.write_bytes(data)
    return os.open(path, os.O_RDONLY)


def test_reads_lines_in_order(tmp_path):
    fd = _fd_with(tmp_path, b"first\nsecond\nlast")
    try:
        reader = LineReader(fd)
        assert reader.read_line() == "first\n"
        assert reader.read_line() == "second\n"
        assert reader.read_line() == "last"
        assert reader.read_line() is None
    finally:
        os.close(fd)


def test_empty_input_gives_none(tmp_path):
    fd = _fd_with(tmp_path, b"")
    try:
        assert LineReader(fd).read_line() is None
    finally:
        os.close(fd)


@pytest.mark.parametrize("buffer_size", [1, 3, 4, 1024])
def test_lines_join_back_to_input(tmp_path, buffer_size):
    data = "alpha\nbeta gamma delta\n\nomega\n"
    fd = _fd_with(tmp_path, data.encode())
    try:
        lines = list(LineReader(fd, buffer_size=buffer_size))
    finally:
        os.close(fd)
    assert "".join(lines) == data
    assert all(line.endswith("\n") for line in lines)


def test_pipe_input():
    read_end, write_end = os.pipe()
    os.write(write_end, b"echo hi\nls\n")
    os.close(write_end)
    try:
        reader = LineReader(read_end, buffer_size=2)
        assert list(reader) == ["echo hi\n", "ls\n"]
    finally:
        os.close(read_end)


def test_invalid_bytes_round_trip(tmp_path):
    raw = b"\xff\xfe\n"
    fd = _fd_with(tmp_path, raw)
    try:
        line = LineReader(fd).read_line()
    finally:
        os.close(fd)
    assert line.encode("utf-8", errors="surrogateescape") == raw


def test_reader_rejects_bad_arguments():
    with pytest.raises(ValueError):
        LineReader(-1)
    with pytest.raises(ValueError):
        LineReader(0, buffer_size=0)


def test_get_next_line_keeps_state_per_fd(tmp_path):
    fd_a = _fd_with(tmp_path, b"a1\na2\n", "a.txt")
    fd_b = _fd_with(tmp_path, b"b1\nb2", "b.txt")
    try:
        assert get_next_line(fd_a) == "a1\n"
        assert get_next_line(fd_b) == "b1\n"
        assert get_next_line(fd_a) == "a2\n"
        assert get_next_line(fd_b) == "b2"
        assert get_next_line(fd_a) is None
        assert get_next_line(fd_b) is None
    finally:
        os.close(fd_a)
        os.close(fd_b)


@pytest.mark.parametrize("fd", [-1, 1024])
def test_get_next_line_rejects_out_of_range_fd(fd):
    with pytest.raises(ValueError):
        get_next_line(fd)


def test_get_next_line_closed_fd_raises(tmp_path):
    fd = _fd_with(tmp_path, b"data\n")
    os.close(fd)
    with pytest.raises(OSError):
        get_next_line(fd)