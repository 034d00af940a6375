# fdlines

Read bytes from an open file descriptor one line at a time. Each line is
returned as `bytes`, ending in `b"\n"` unless it is the last line of the
data and had no newline. Bytes read past the end of a line are kept and
handed out on the next call.

Two readers are provided:

- `fdlines.reader.LineReader` keeps a single carry-over buffer, shared by
  every descriptor passed to it. It suits reading one descriptor from
  start to finish.
- `fdlines.multi.MultiLineReader` keeps a separate buffer for each
  descriptor from `0` up to, but not including, `max_fds`, so reads from
  several descriptors can be interleaved without mixing their data.

Both read from the descriptor with `os.read` in chunks of `buffer_size`
bytes, stopping as soon as a newline has been read or the descriptor
reports end of file. When no buffered bytes remain and the descriptor has
no more data, `next_line` returns `None`.

The package has no dependencies beyond the standard library.

## Installation

```
pip install fdlines
```

## Reading one descriptor

```python
import os
from fdlines.reader import LineReader

fd = os.open("notes.txt", os.O_RDONLY)
try:
    reader = LineReader(buffer_size=64)
    for line in reader.lines(fd):
        print(line.decode(), end="")
finally:
    os.close(fd)
```

- `next_line(fd)` returns one line at a time and `None` at the end.
- `lines(fd)` is a generator that yields lines until `next_line` returns
  `None`.
- `clear()` throws away any buffered bytes.

The default `buffer_size` is 10. The module-level `get_next_line(fd)`
works the same way through a shared `LineReader` with that default.

## Reading several descriptors

```python
from fdlines.multi import MultiLineReader

reader = MultiLineReader(buffer_size=32, max_fds=1024)
first = reader.next_line(fd_a)
second = reader.next_line(fd_b)
rest_of_a = reader.pending(fd_a)  # bytes already read but not yet returned
```

- `pending(fd)` returns the bytes read from `fd` but not yet handed out,
  or `b""` if there are none.
- `clear()` drops the buffers of every descriptor.

The defaults are `buffer_size=10` and `max_fds=1024`. The module-level
`get_next_line_multi(fd)` uses a shared `MultiLineReader` with those
defaults.

## Errors

- A `buffer_size` below 1, or a `max_fds` below 1, raises `ValueError`
  when the reader is created.
- `LineReader.next_line` given a negative descriptor drops its buffer and
  raises `ValueError`.
- `MultiLineReader.next_line` given a descriptor that is negative or not
  below `max_fds` drops every buffer and raises `ValueError`.
- If a read from the descriptor fails, the `OSError` is raised to the
  caller. `LineReader` drops its buffer; `MultiLineReader` drops the
  buffer of that descriptor only.

## What it does not do

The readers work on raw bytes: they do not decode text, do not treat
`\r\n` or `\r` as line endings, and do not open or close descriptors.
There is no command-line tool.