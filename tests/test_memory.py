import pytest

from wirefdf.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_memset_fills_prefix_only():
    buffer = bytearray(5)
    result = memset(buffer, 0x41, 3)
    assert result is buffer
    assert buffer == bytearray(b"AAA\x00\x00")


def test_memset_uses_low_byte():
    buffer = bytearray(4)
    memset(buffer, 0x141, 4)
    assert buffer == bytearray(b"AAAA")


def test_memset_overrun_raises():
    with pytest.raises(ValueError):
        memset(bytearray(2), 1, 3)


def test_bzero_clears_prefix():
    buffer = bytearray(b"xyzw")
    bzero(buffer, 2)
    assert buffer == bytearray(b"\x00\x00zw")


def test_bzero_zero_count_keeps_buffer():
    buffer = bytearray(b"keep")
    bzero(buffer, 0)
    assert buffer == bytearray(b"keep")


def test_calloc_is_zero_filled():
    block = calloc(3, 4)
    assert len(block) == 12
    assert all(byte == 0 for byte in block)


def test_calloc_negative_raises():
    with pytest.raises(ValueError):
        calloc(-1, 4)


def test_memcpy_copies_prefix():
    dest = bytearray(b"......")
    result = memcpy(dest, b"hello", 3)
    assert result is dest
    assert dest == bytearray(b"hel...")


def test_memcpy_overrun_raises():
    with pytest.raises(ValueError):
        memcpy(bytearray(2), b"abc", 3)


def test_memmove_forward_overlap():
    buffer = bytearray(b"abcdef")
    memmove(buffer, 2, 0, 4)
    assert buffer == bytearray(b"ababcd")


def test_memmove_backward_overlap():
    buffer = bytearray(b"abcdef")
    memmove(buffer, 0, 2, 4)
    assert buffer == bytearray(b"cdefef")


def test_memmove_same_offset_unchanged():
    buffer = bytearray(b"abcdef")
    memmove(buffer, 1, 1, 4)
    assert buffer == bytearray(b"abcdef")


def test_memmove_out_of_range_raises():
    with pytest.raises(ValueError):
        memmove(bytearray(b"abc"), 2, 0, 2)


def test_memchr_finds_first():
    assert memchr(b"hello", ord("l"), 5) == 2


def test_memchr_respects_count():
    assert memchr(b"hello", ord("o"), 4) is None
    assert memchr(b"hello", ord("o"), 5) == b"hello".index(b"o")


def test_memchr_uses_low_byte():
    assert memchr(b"hello", ord("h") + 0x100, 5) == 0


def test_memcmp_equal_prefix():
    assert memcmp(b"abcX", b"abcY", 3) == 0


def test_memcmp_sign():
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0


def test_memcmp_is_antisymmetric():
    first, second = b"\x00\xff\x10", b"\x00\x01\x10"
    assert memcmp(first, second, 3) == -memcmp(second, first, 3)


def test_memcmp_unsigned_bytes():
    assert memcmp(b"\x80", b"\x7f", 1) > 0


def test_memcmp_overrun_raises():
    with pytest.raises(ValueError):
        memcmp(b"ab", b"abc", 3)