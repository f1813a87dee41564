"""String helpers with the semantics the map reader relies on.

The functions work on Python strings. Where a C routine would hand back a
pointer into its input, these return an index, or None when nothing is
found. A request for the terminating NUL is answered with the length of the
string.
"""

from __future__ import annotations

from collections.abc import Callable
from itertools import islice, zip_longest

_WHITESPACE = frozenset("\t\n\v\f\r ")


def _wrap32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value >= 0x80000000 else value


def _single_char(char: str) -> str:
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return char


def atoi(text: str) -> int:
    """Read a leading decimal integer, as ``atoi`` does.

    Leading whitespace is skipped and one optional sign is accepted. Reading
    stops at the first non-digit. Text without digits gives 0. The result
    wraps around like a 32-bit signed integer.
    """
    position = 0
    while position < len(text) and text[position] in _WHITESPACE:
        position += 1
    negative = False
    if position < len(text) and text[position] in "+-":
        negative = text[position] == "-"
        position += 1
    number = 0
    for char in text[position:]:
        if not "0" <= char <= "9":
            break
        number = _wrap32(number * 10 + (ord(char) - ord("0")))
    return _wrap32(-number if negative else number)


def itoa(n: int) -> str:
    """Return the decimal text of an integer, with a leading minus if negative."""
    return str(int(n))


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` at every ``sep`` character, dropping empty words."""
    sep = _single_char(sep)
    return [word for word in text.split(sep) if word]


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start`` on.

    A start past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    if not charset:
        return text
    return text.strip(charset)


def strjoin(first: str, second: str) -> str:
    """Return the two strings one after the other."""
    return first + second


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find ``needle`` lying wholly within the first ``length`` characters.

    Returns the index of the first match, 0 for an empty needle, or None.
    """
    if not needle:
        return 0
    if length <= 0:
        return None
    index = haystack.find(needle, 0, length)
    return None if index == -1 else index


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the difference of the first differing character codes, a missing
    character counting as 0, or 0 when the compared parts are equal.
    """
    pairs = zip_longest(first, second, fillvalue="\0")
    for a, b in islice(pairs, max(n, 0)):
        if a != b:
            return ord(a) - ord(b)
        if a == "\0":
            return 0
    return 0


def strchr(text: str, char: str) -> int | None:
    """Return the index of the first ``char`` in ``text``, or None.

    Searching for ``"\\0"`` finds the end of the string.
    """
    char = _single_char(char)
    if char == "\0":
        return len(text)
    index = text.find(char)
    return None if index == -1 else index


def strrchr(text: str, char: str) -> int | None:
    """Return the index of the last ``char`` in ``text``, or None.

    Searching for ``"\\0"`` finds the end of the string.
    """
    char = _single_char(char)
    if char == "\0":
        return len(text)
    index = text.rfind(char)
    return None if index == -1 else index


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the copied text and the full length of ``src``.
    """
    if size <= 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full result would have had.
    When ``size`` does not exceed the length of ``dst``, ``dst`` is left as it
    is and the length returned is ``size`` plus the length of ``src``.
    """
    if size <= len(dst):
        return dst, size + len(src)
    room = size - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def striteri(text: str, func: Callable[[int, str], str | None]) -> str:
    """Visit every character with ``func(index, char)``.

    A returned character replaces the visited one; None keeps it.
    """
    result = []
    for index, char in enumerate(text):
        replacement = func(index, char)
        result.append(char if replacement is None else replacement)
    return "".join(result)