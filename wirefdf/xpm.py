"""Reader for XPM images, the format loaded by the graphics layer."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable
from pathlib import Path

from wirefdf.colornames import lookup_color
from wirefdf.image import Image

_WORD_SPLIT = re.compile(r"[ \t]+")
_QUOTED = re.compile(r'"([^"]*)"')
_HEX = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")
_DECIMAL = re.compile(r"[\t\n\v\f\r ]*([+-]?)([0-9]*)")
_TRANSPARENT = 0xFF000000


class XpmError(ValueError):
    """Raised when XPM data is malformed."""


def _find_unquoted(text: str, token: str, start: int = 0) -> int:
    in_quote = False
    for index in range(start, len(text)):
        if text[index] == '"':
            in_quote = not in_quote
        if not in_quote and text.startswith(token, index):
            return index
    return -1


def _blank(text: str, begin: int, stop: int) -> str:
    return text[:begin] + " " * (stop - begin) + text[stop:]


def strip_comments(text: str) -> str:
    """Replace block and line comments outside quotes with spaces.

    The length of the text is kept, so positions do not move.
    """
    begin = _find_unquoted(text, "/*")
    while begin != -1:
        end = text.find("*/", begin + 2)
        text = _blank(text, begin, len(text) if end == -1 else end + 2)
        begin = _find_unquoted(text, "/*", begin)
    begin = _find_unquoted(text, "//")
    while begin != -1:
        end = text.find("\n", begin + 2)
        text = _blank(text, begin, len(text) if end == -1 else end + 1)
        begin = _find_unquoted(text, "//", begin)
    return text


def split_words(line: str) -> list[str]:
    """Split a line into words separated by spaces and tabs."""
    return [word for word in _WORD_SPLIT.split(line) if word]


def _parse_hex(text: str) -> int:
    match = _HEX.match(text)
    digits = match.group(2)
    if not digits:
        return 0
    value = int(digits, 16)
    return -value if match.group(1) == "-" else value


def _atoi(text: str) -> int:
    match = _DECIMAL.match(text)
    digits = match.group(2)
    if not digits:
        return 0
    value = int(digits)
    return -value if match.group(1) == "-" else value


def text_to_rgb(name: str, end: str | None) -> int:
    """Turn an XPM colour specification into a 0xRRGGBB value.

    ``#RRGGBB`` is read as hexadecimal. Otherwise ``name`` (joined with
    ``end`` when given, for two-word names) is looked up by name; unknown
    names give 0 and ``None`` gives -1.
    """
    if name.startswith("#"):
        return _parse_hex(name[1:])
    if end:
        name = f"{name} {end}"[:63]
    color = lookup_color(name)
    return 0 if color is None else color


def quoted_lines(text: str) -> list[str]:
    """Return the contents of successive double-quoted strings."""
    return _QUOTED.findall(text)


def _next_line(lines, what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"XPM data ends before {what}") from None


def parse_xpm(lines: Iterable[str]) -> Image:
    """Build an image from XPM lines: header, colour table, then pixel rows."""
    lines = iter(lines)
    header = split_words(_next_line(lines, "the header"))
    if len(header) < 4:
        raise XpmError("XPM header needs width, height, colour count and chars per pixel")
    width, height, ncolors, cpp = (_atoi(word) for word in header[:4])
    if not (width and height and ncolors and cpp):
        raise XpmError(f"invalid XPM header: {' '.join(header)!r}")
    if width < 0 or height < 0 or ncolors < 0 or cpp < 0:
        raise XpmError(f"negative value in XPM header: {' '.join(header)!r}")

    # Small keys go into a direct table where later entries win; longer keys
    # are searched so that the first matching entry wins.
    later_wins = cpp <= 2
    colors: dict[str, int] = {}
    for _ in range(ncolors):
        line = _next_line(lines, "the end of the colour table")
        words = split_words(line[cpp:])
        try:
            position = words.index("c") + 1
        except ValueError:
            raise XpmError(f"colour line without 'c' key: {line!r}") from None
        if position >= len(words):
            raise XpmError(f"colour line without a colour: {line!r}")
        end = words[position + 1] if position + 1 < len(words) else None
        rgb = text_to_rgb(words[position], end)
        key = line[:cpp]
        if later_wins:
            colors[key] = rgb
        else:
            colors.setdefault(key, rgb)

    image = Image(width, height)
    for row in range(height):
        line = _next_line(lines, "the last pixel row")
        for column in range(width):
            color = colors.get(line[cpp * column:cpp * column + cpp], 0)
            if color == -1:
                color = _TRANSPARENT
            image.put_pixel(row, column, color)
    return image


def read_xpm_file(path: str | os.PathLike[str]) -> Image:
    """Load an XPM file, ignoring its comments."""
    text = Path(path).read_text(encoding="latin-1")
    return parse_xpm(quoted_lines(strip_comments(text)))