"""Reading of height-map files: rows of space-separated integer heights."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from wirefdf.reader import LineReader
from wirefdf.strings import atoi, split, strtrim


class MapError(Exception):
    """Raised when a map cannot be read."""


@dataclass(frozen=True)
class Point:
    """A map point: row ``x``, column ``y`` and its height."""

    x: int
    y: int
    height: int


@dataclass
class HeightMap:
    """A grid of points, one list per row.

    ``size_x`` is the number of rows and ``size_y`` the number of words in
    the first row. A row holds at most ``size_y`` points.
    """

    rows: list[list[Point]] = field(default_factory=list)
    size_x: int = 0
    size_y: int = 0

    def points(self) -> Iterator[Point]:
        """Yield every point, row by row."""
        for row in self.rows:
            yield from row


def count_words(line: str) -> int:
    """Count the words of ``line`` separated by spaces."""
    return len(split(line, " "))


def parse_map_lines(lines: Iterable[str]) -> HeightMap:
    """Build a height map from the lines of a map file."""
    texts = [strtrim(line, "\n") for line in lines]
    if not texts:
        raise MapError("map is empty")
    size_y = count_words(texts[0])
    rows = [
        [Point(x, y, atoi(word)) for y, word in enumerate(split(text, " ")[:size_y])]
        for x, text in enumerate(texts)
    ]
    return HeightMap(rows=rows, size_x=len(texts), size_y=size_y)


def parse_map(path: str | os.PathLike[str]) -> HeightMap:
    """Read and parse the map file at ``path``."""
    try:
        with open(path, encoding="utf-8", errors="replace", newline="") as stream:
            lines = list(LineReader(stream))
    except OSError as error:
        raise MapError(f"error opening map {os.fspath(path)!r}: {error}") from error
    return parse_map_lines(lines)