import io

import pytest

from wirefdf.reader import LineReader, index_of_newline, read_lines


def test_index_of_newline_found():
    assert index_of_newline("ab\ncd") == 2


def test_index_of_newline_missing_gives_length():
    assert index_of_newline("abc") == len("abc")


def test_index_of_newline_bytes():
    assert index_of_newline(b"x\n") == 1


def test_read_lines_keeps_newlines_and_last_line():
    text = "one\ntwo\nthree"
    assert read_lines(io.StringIO(text)) == ["one\n", "two\n", "three"]


def test_read_lines_empty_stream():
    assert read_lines(io.StringIO("")) == []


@pytest.mark.parametrize("size", [1, 2, 3, 7, 100])
def test_lines_join_back_to_input(size):
    text = "0 0 0\n1 2 3\n\n10 20\n"
    lines = list(LineReader(io.StringIO(text), buffer_size=size))
    assert "".join(lines) == text
    assert all(line.endswith("\n") for line in lines)


def test_next_line_returns_none_after_end():
    reader = LineReader(io.StringIO("a\n"))
    assert reader.next_line() == "a\n"
    assert reader.next_line() is None
    assert reader.next_line() is None


def test_binary_stream():
    assert read_lines(io.BytesIO(b"a\nb")) == [b"a\n", b"b"]


def test_blank_lines_are_returned():
    assert read_lines(io.StringIO("\n\n")) == ["\n", "\n"]


def test_invalid_buffer_size():
    with pytest.raises(ValueError):
        LineReader(io.StringIO("x"), buffer_size=0)