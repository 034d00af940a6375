import os

import pytest

from fdlines.reader import DEFAULT_BUFFER_SIZE, LineReader, get_next_line


def _pipe_with(data: bytes) -> int:
    read_fd, write_fd = os.pipe()
    os.write(write_fd, data)
    os.close(write_fd)
    return read_fd


@pytest.fixture
def pipes():
    opened = []

    def make(data: bytes) -> int:
        fd = _pipe_with(data)
        opened.append(fd)
        return fd

    yield make
    for fd in opened:
        os.close(fd)


@pytest.mark.parametrize("buffer_size", [1, 3, 10, 100])
def test_lines_reassemble_input(pipes, buffer_size):
    data = b"first line\nsecond\n\nlast without newline"
    fd = pipes(data)
    reader = LineReader(buffer_size)
    lines = list(reader.lines(fd))
    assert b"".join(lines) == data
    assert lines == data.splitlines(keepends=True)


@pytest.mark.parametrize("buffer_size", [1, 4, 50])
def test_each_line_holds_at_most_one_trailing_newline(pipes, buffer_size):
    data = b"a\nbb\nccc\ndddd\n"
    fd = pipes(data)
    lines = list(LineReader(buffer_size).lines(fd))
    assert all(line.endswith(b"\n") and line.count(b"\n") == 1 for line in lines)
    assert len(lines) == data.count(b"\n")


def test_returns_none_at_eof(pipes):
    fd = pipes(b"only\n")
    reader = LineReader(2)
    assert reader.next_line(fd) == b"only\n"
    assert reader.next_line(fd) is None
    assert reader.next_line(fd) is None


def test_empty_input_yields_nothing(pipes):
    fd = pipes(b"")
    assert list(LineReader().lines(fd)) == []


def test_reads_regular_file(tmp_path):
    path = tmp_path / "sample.txt"
    data = b"alpha\nbeta\ngamma"
    path.write_bytes(data)
    fd = os.open(path, os.O_RDONLY)
    try:
        lines = list(LineReader(5).lines(fd))
    finally:
        os.close(fd)
    assert lines == [b"alpha\n", b"beta\n", b"gamma"]


def test_zero_buffer_size_rejected():
    with pytest.raises(ValueError):
        LineReader(0)


def test_negative_buffer_size_rejected():
    with pytest.raises(ValueError):
        LineReader(-5)


def test_negative_fd_raises_and_clears(pipes):
    fd = pipes(b"one\ntwo\n")
    reader = LineReader(DEFAULT_BUFFER_SIZE)
    assert reader.next_line(fd) == b"one\n"
    with pytest.raises(ValueError):
        reader.next_line(-1)
    assert reader.next_line(fd) is None


def test_read_error_discards_pending(pipes):
    fd = pipes(b"a\nbc")
    reader = LineReader(DEFAULT_BUFFER_SIZE)
    assert reader.next_line(fd) == b"a\n"
    bad_read, bad_write = os.pipe()
    os.close(bad_read)
    os.close(bad_write)
    with pytest.raises(OSError):
        reader.next_line(bad_read)
    fresh = pipes(b"x\n")
    assert reader.next_line(fresh) == b"x\n"


def test_shared_buffer_serves_buffered_line_first(pipes):
    first = pipes(b"a\nb\n")
    second = pipes(b"z\n")
    reader = LineReader(DEFAULT_BUFFER_SIZE)
    assert reader.next_line(first) == b"a\n"
    assert reader.next_line(second) == b"b\n"
    assert reader.next_line(second) == b"z\n"


def test_clear_drops_buffered_data(pipes):
    fd = pipes(b"keep\ndrop\n")
    reader = LineReader(DEFAULT_BUFFER_SIZE)
    assert reader.next_line(fd) == b"keep\n"
    reader.clear()
    assert reader.next_line(fd) is None


def test_module_level_get_next_line(pipes):
    data = b"hello\nworld\n"
    fd = pipes(data)
    collected = []
    while (line := get_next_line(fd)) is not None:
        collected.append(line)
    assert collected == [b"hello\n", b"world\n"]