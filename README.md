# wirefdf

Building blocks for drawing height maps: a map-file reader, an in-memory
32-bit pixel image, colour packing helpers, an XPM picture reader with the
X11 colour-name table, and small string, byte-buffer, list and line-reading
utilities. It has no dependencies outside the standard library.

## Map files

A map file is plain text. Each line is one row of the map and each
space-separated number on it is the height of one point:

```
0 0 0 0
0 5 5 0
0 5 5 0
0 0 0 0
```

```python
from wirefdf.mapfile import parse_map

heightmap = parse_map("mapfile.fdf")
print(heightmap.size_x, heightmap.size_y)   # rows, words in the first row
for point in heightmap.points():
    print(point.x, point.y, point.height)
```

- `parse_map(path)` reads a file; `parse_map_lines(lines)` parses lines
  you already have. Both return a `HeightMap` of `Point` rows.
- Numbers are read like `atoi`: leading digits count, anything else gives 0.
- `size_y` is the word count of the first row, and no row keeps more points
  than that.
- An empty map or a file that cannot be opened raises `MapError`.
- `count_words(line)` counts the space-separated words of a line.

## Images and colours

`wirefdf.image.Image(width=1280, height=720)` holds 32-bit pixels. Its
coordinates put `x` on the row and `y` on the column:

- `put_pixel(x, y, color)` and `get_pixel(x, y)` raise `IndexError` outside
  the image.
- `in_bounds(x, y)` is true only strictly inside the image, edges excluded.
- `rows()` yields the pixel rows from top to bottom.
- `shade_demo(image)` draws a square at (20, 20) whose top and left edges
  fade to dark.

`wirefdf.color` works on colours in the `0xTTRRGGBB` layout:
`create_color(t, r, g, b)`, `get_t`, `get_r`, `get_g`, `get_b`,
`add_shade(distance, color)` (0 keeps the colour, 1 makes it dark) and
`get_opposite(color)`.

## XPM pictures

- `wirefdf.xpm.read_xpm_file(path)` loads an XPM file into an `Image`,
  ignoring `/* */` and `//` comments outside quotes.
- `parse_xpm(lines)` builds an image from the header, colour table and
  pixel rows; malformed data raises `XpmError`.
- Colours may be `#RRGGBB` or X11 names; `None` gives a transparent pixel
  (`0xFF000000`).
- `wirefdf.colornames.lookup_color(name)` looks up a colour name, ignoring
  case, and returns `None` for unknown names.

## Utilities

- `wirefdf.strings`: `atoi`, `itoa`, `split`, `substr`, `strtrim`,
  `strjoin`, `strnstr`, `strncmp`, `strchr`, `strrchr`, `strlcpy`,
  `strlcat`, `strmapi`, `striteri`. Searches return an index or `None`.
- `wirefdf.ctype`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `to_upper`, `to_lower` for character codes or one-character
  strings.
- `wirefdf.memory`: `memset`, `bzero`, `calloc`, `memcpy`, `memmove`,
  `memchr`, `memcmp` on byte buffers; counts past the end raise `ValueError`.
- `wirefdf.lists`: `LinkedList` of `Node`s with `add_front`, `add_back`,
  `last`, `remove_first`, `clear`, `iterate`, `len()` and iteration.
- `wirefdf.reader`: `LineReader(stream)` reads lines in 100-character
  chunks, keeping each newline; `read_lines(stream)` returns them all;
  `index_of_newline(text)` finds the first newline.

## What it does not do

The package does not project a map into an isometric view, draw lines
between points or open a window, and it installs no command. Reading a
map gives you a `HeightMap`; turning it into a picture is left to your
own code, for example by writing pixels into an `Image`.

## Tests

```
pip install .[test]
pytest
```