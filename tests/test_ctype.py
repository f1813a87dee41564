import string

import pytest

from wirefdf.ctype import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize("code", range(256))
def test_is_alpha_matches_ascii_letters(code):
    assert is_alpha(code) == (chr(code) in string.ascii_letters)


@pytest.mark.parametrize("code", range(256))
def test_is_digit_matches_ascii_digits(code):
    assert is_digit(code) == (chr(code) in string.digits)


@pytest.mark.parametrize("code", range(256))
def test_is_alnum_is_alpha_or_digit(code):
    assert is_alnum(code) == (is_alpha(code) or is_digit(code))


def test_is_ascii_boundaries():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False


def test_is_print_boundaries():
    assert is_print(31) is False
    assert is_print(32) is True
    assert is_print(126) is True
    assert is_print(127) is False


def test_predicates_accept_strings():
    assert is_alpha("x") is True
    assert is_digit("7") is True
    assert is_alpha("7") is False
    assert is_print(" ") is True


def test_to_upper_letters():
    for lower, upper in zip(string.ascii_lowercase, string.ascii_uppercase):
        assert to_upper(lower) == upper
        assert to_upper(ord(lower)) == ord(upper)


def test_to_lower_letters():
    for lower, upper in zip(string.ascii_lowercase, string.ascii_uppercase):
        assert to_lower(upper) == lower
        assert to_lower(ord(upper)) == ord(lower)


@pytest.mark.parametrize("char", list(string.digits + string.punctuation + " "))
def test_case_conversion_leaves_non_letters(char):
    assert to_upper(char) == char
    assert to_lower(char) == char


@pytest.mark.parametrize("code", range(256))
def test_round_trip_on_letters(code):
    if is_alpha(code):
        assert to_lower(to_upper(code)) == to_lower(code)
        assert to_upper(to_lower(code)) == to_upper(code)
    else:
        assert to_upper(code) == code


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")


def test_wrong_type_rejected():
    with pytest.raises(TypeError):
        to_upper(1.5)