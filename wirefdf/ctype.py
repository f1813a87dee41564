"""Character classification and case conversion for ASCII codes.

Every function takes either an integer character code or a one-character
string. Predicates return a bool. Conversions return a value of the same
kind they were given.
"""

from __future__ import annotations


def _code(c: int | str) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def _same_kind(original: int | str, code: int) -> int | str:
    return chr(code) if isinstance(original, str) else code


def is_alpha(c: int | str) -> bool:
    """Tell whether ``c`` is an ASCII letter."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: int | str) -> bool:
    """Tell whether ``c`` is an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: int | str) -> bool:
    """Tell whether ``c`` is an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """Tell whether ``c`` lies in the 7-bit ASCII range 0-127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """Tell whether ``c`` is a printable ASCII character (32-126)."""
    return 32 <= _code(c) <= 126


def to_upper(c: int | str) -> int | str:
    """Turn a lowercase ASCII letter into uppercase; leave anything else."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return _same_kind(c, code)


def to_lower(c: int | str) -> int | str:
    """Turn an uppercase ASCII letter into lowercase; leave anything else."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return _same_kind(c, code)