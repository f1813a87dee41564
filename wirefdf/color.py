"""Packing and unpacking of 0xTTRRGGBB colour integers."""

from __future__ import annotations

_MASK32 = 0xFFFFFFFF


def create_color(t: int, r: int, g: int, b: int) -> int:
    """Pack transparency, red, green and blue into one 32-bit colour value."""
    return (t << 24 | r << 16 | g << 8 | b) & _MASK32


def get_t(trgb: int) -> int:
    """Return the transparency byte of a colour."""
    return (trgb >> 24) & 0xFF


def get_r(trgb: int) -> int:
    """Return the red byte of a colour."""
    return (trgb >> 16) & 0xFF


def get_g(trgb: int) -> int:
    """Return the green byte of a colour."""
    return (trgb >> 8) & 0xFF


def get_b(trgb: int) -> int:
    """Return the blue byte of a colour."""
    return trgb & 0xFF


def add_shade(distance: float, color: int) -> int:
    """Darken every channel of ``color`` by ``distance``.

    0 leaves the colour as it is, 1 makes it fully dark and 0.5 halves it.
    Channel values are truncated toward zero.
    """
    factor = 1 - distance
    return create_color(
        int(get_t(color) * factor),
        int(get_r(color) * factor),
        int(get_g(color) * factor),
        int(get_b(color) * factor),
    )


def get_opposite(color: int) -> int:
    """Invert every channel of ``color`` (255 minus its value)."""
    return create_color(
        255 - get_t(color),
        255 - get_r(color),
        255 - get_g(color),
        255 - get_b(color),
    )