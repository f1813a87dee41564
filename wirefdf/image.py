"""An in-memory 32-bit pixel image and the drawing-area constants."""

from __future__ import annotations

from collections.abc import Iterator

from wirefdf.color import add_shade, create_color

WIDTH = 1280
HEIGHT = 720
OFF_X = 0.2 * HEIGHT
OFF_Y = WIDTH / 2
BUF_BOTTOM = HEIGHT - OFF_X
BUF_LEFT = 0.1 * WIDTH
BUF_RIGHT = WIDTH - BUF_LEFT
MAX_HEIGHT = 50


class Image:
    """A block of 32-bit pixels.

    Coordinates follow the drawing code: ``x`` selects the row and ``y``
    the column.
    """

    def __init__(self, width: int = WIDTH, height: int = HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"image size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.bits_per_pixel = 32
        self.line_length = width * (self.bits_per_pixel // 8)
        self.pixels = [0] * (width * height)

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.height and 0 <= y < self.width):
            raise IndexError(f"pixel ({x}, {y}) is outside a {self.width}x{self.height} image")
        return x * self.width + y

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set the pixel at row ``x``, column ``y``."""
        self.pixels[self._offset(x, y)] = color & 0xFFFFFFFF

    def get_pixel(self, x: int, y: int) -> int:
        """Return the pixel at row ``x``, column ``y``."""
        return self.pixels[self._offset(x, y)]

    def in_bounds(self, x: int, y: int) -> bool:
        """Tell whether a point lies strictly inside the image, edges excluded."""
        return 0 < x < self.height and 0 < y < self.width

    def rows(self) -> Iterator[list[int]]:
        """Yield the pixel rows from top to bottom."""
        for start in range(0, len(self.pixels), self.width):
            yield self.pixels[start:start + self.width]


def shade_demo(image: Image) -> Image:
    """Draw a square at (20, 20) whose top and left edges fade to dark."""
    start_x = start_y = 20
    color = create_color(0, 255, 0, 255)
    for i in range(100):
        shaded = add_shade(i * 0.01, color)
        image.put_pixel(start_x, start_y + i, shaded)
        image.put_pixel(start_x + i, start_y, shaded)
    for i in range(100):
        image.put_pixel(start_x + i, start_y + 100, color)
        image.put_pixel(start_x + 100, start_y + i, color)
    return image