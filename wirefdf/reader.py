"""Line-by-line reading of a stream in fixed-size chunks."""

from __future__ import annotations

from collections.abc import Iterator
from typing import AnyStr, IO

BUFFER_SIZE = 100


def index_of_newline(text: AnyStr) -> int:
    """Return the index of the first newline, or the length when there is none."""
    newline = "\n" if isinstance(text, str) else b"\n"
    position = text.find(newline)
    return len(text) if position == -1 else position


class LineReader:
    """Read a stream one line at a time.

    Each line keeps its trailing newline; a last line without one is
    returned as it is. Works on text and binary streams alike.
    """

    def __init__(self, stream: IO, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._leftover = None

    def _has_newline(self, text) -> bool:
        return index_of_newline(text) < len(text)

    def next_line(self):
        """Return the next line, or None once the stream is exhausted."""
        leftover = self._leftover
        self._leftover = None
        while leftover is None or not self._has_newline(leftover):
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            leftover = chunk if leftover is None else leftover + chunk
        if not leftover:
            return None
        end = index_of_newline(leftover) + 1
        line, rest = leftover[:end], leftover[end:]
        self._leftover = rest or None
        return line

    def __iter__(self) -> Iterator:
        while (line := self.next_line()) is not None:
            yield line


def read_lines(stream: IO) -> list:
    """Return every line of ``stream`` as read by a LineReader."""
    return list(LineReader(stream))