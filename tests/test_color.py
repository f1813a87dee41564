import pytest

from wirefdf.color import (
    add_shade,
    create_color,
    get_b,
    get_g,
    get_opposite,
    get_r,
    get_t,
)
from wirefdf.colornames import lookup_color


def test_create_color_yellow_matches_named_colour():
    assert create_color(0, 255, 255, 0) == lookup_color("yellow")


@pytest.mark.parametrize(
    "t, r, g, b",
    [(0, 0, 0, 0), (0, 255, 0, 255), (255, 255, 255, 255), (12, 34, 56, 78)],
)
def test_components_round_trip(t, r, g, b):
    color = create_color(t, r, g, b)
    assert (get_t(color), get_r(color), get_g(color), get_b(color)) == (t, r, g, b)


def test_high_transparency_is_kept():
    color = create_color(255, 1, 2, 3)
    assert get_t(color) == 255
    assert color >= 0


def test_opposite_of_black_is_full_white():
    assert get_opposite(create_color(0, 0, 0, 0)) == create_color(255, 255, 255, 255)


@pytest.mark.parametrize("color", [0, create_color(0, 255, 0, 255), create_color(9, 8, 7, 6)])
def test_opposite_twice_is_identity(color):
    assert get_opposite(get_opposite(color)) == color


def test_shade_zero_keeps_colour():
    color = create_color(0, 255, 0, 255)
    assert add_shade(0, color) == color


def test_shade_one_is_dark():
    assert add_shade(1, create_color(255, 255, 255, 255)) == 0


def test_shade_half_halves_channels():
    assert add_shade(0.5, create_color(0, 200, 100, 50)) == create_color(0, 100, 50, 25)


def test_shade_never_brightens():
    color = create_color(0, 255, 128, 7)
    for step in range(11):
        shaded = add_shade(step / 10, color)
        assert get_r(shaded) <= get_r(color)
        assert get_g(shaded) <= get_g(color)
        assert get_b(shaded) <= get_b(color)