import pytest

from wirefdf.mapfile import HeightMap, MapError, Point, count_words, parse_map, parse_map_lines


def test_count_words_ignores_repeated_spaces():
    assert count_words("  0  10 -3 ") == 3


def test_count_words_empty():
    assert count_words("") == 0


def test_parse_lines_sizes_and_heights():
    heightmap = parse_map_lines(["0 0 1\n", "2 3 4\n"])
    assert heightmap.size_x == 2
    assert heightmap.size_y == 3
    assert [p.height for p in heightmap.points()] == [0, 0, 1, 2, 3, 4]


def test_points_carry_row_and_column():
    heightmap = parse_map_lines(["5 6", "7 8"])
    assert heightmap.rows[1][0] == Point(1, 0, 7)
    assert [(p.x, p.y) for p in heightmap.points()] == [(0, 0), (0, 1), (1, 0), (1, 1)]


def test_negative_and_suffixed_heights():
    heightmap = parse_map_lines(["-4 10,0xFF"])
    assert [p.height for p in heightmap.points()] == [-4, 10]


def test_long_rows_are_cut_to_first_row_width():
    heightmap = parse_map_lines(["1 2", "3 4 5 6"])
    assert [p.height for p in heightmap.rows[1]] == [3, 4]


def test_short_rows_keep_fewer_points():
    heightmap = parse_map_lines(["1 2 3", "4"])
    assert len(heightmap.rows[1]) == 1
    assert heightmap.size_y == 3


def test_empty_input_raises():
    with pytest.raises(MapError):
        parse_map_lines([])


def test_parse_map_file(tmp_path):
    path = tmp_path / "small.fdf"
    path.write_text("0 1\n2 3\n")
    heightmap = parse_map(path)
    assert isinstance(heightmap, HeightMap)
    assert heightmap.size_x == 2
    assert [p.height for p in heightmap.points()] == [0, 1, 2, 3]


def test_parse_map_missing_file(tmp_path):
    with pytest.raises(MapError):
        parse_map(tmp_path / "absent.fdf")


def test_parse_map_empty_file(tmp_path):
    path = tmp_path / "empty.fdf"
    path.write_text("")
    with pytest.raises(MapError):
        parse_map(path)