import pytest

from wirefdf.color import add_shade, create_color
from wirefdf.image import HEIGHT, WIDTH, Image, shade_demo


def test_default_size_and_layout():
    image = Image()
    assert (image.width, image.height) == (WIDTH, HEIGHT)
    assert image.line_length == 4 * image.width
    assert len(image.pixels) == image.width * image.height


def test_new_image_is_blank():
    image = Image(4, 3)
    assert set(image.pixels) == {0}


def test_put_then_get_round_trip():
    image = Image(10, 5)
    image.put_pixel(4, 9, 0x123456)
    assert image.get_pixel(4, 9) == 0x123456
    assert image.get_pixel(0, 0) == 0


def test_x_is_row_and_y_is_column():
    image = Image(6, 3)
    image.put_pixel(2, 5, 7)
    rows = list(image.rows())
    assert len(rows) == 3
    assert rows[2][5] == 7


def test_put_pixel_outside_raises():
    image = Image(6, 3)
    with pytest.raises(IndexError):
        image.put_pixel(3, 0, 1)
    with pytest.raises(IndexError):
        image.get_pixel(0, 6)


def test_invalid_size_raises():
    with pytest.raises(ValueError):
        Image(0, 10)


@pytest.mark.parametrize(
    "x, y, expected",
    [(0, 5, False), (5, 0, False), (1, 1, True), (HEIGHT - 1, WIDTH - 1, True), (HEIGHT, 1, False), (1, WIDTH, False)],
)
def test_in_bounds_excludes_edges(x, y, expected):
    assert Image().in_bounds(x, y) is expected


def test_shade_demo_draws_square():
    image = Image(640, 360)
    result = shade_demo(image)
    color = create_color(0, 255, 0, 255)
    assert result is image
    assert image.get_pixel(20, 20) == color
    assert image.get_pixel(20, 30) == add_shade(10 * 0.01, color)
    assert image.get_pixel(30, 20) == add_shade(10 * 0.01, color)
    assert image.get_pixel(50, 120) == color
    assert image.get_pixel(120, 50) == color
    assert image.get_pixel(21, 21) == 0