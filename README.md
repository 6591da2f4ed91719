# wireframe

A small viewer that draws a height map as an isometric wireframe in a
1920×1080 window, using pygame.

## Installing

    pip install .

To run the tests as well:

    pip install ".[test]"
    pytest

## Map files

A map is a plain text file. Each line is a row of the grid and holds
space-separated integer heights. A height may be followed by a comma and
a colour written as `0x` and hexadecimal digits, for example
`10,0xFF0000`. A point with no colour is drawn in white. If a row is
shorter than the row before it, the map is rejected.

    0 0 0 0
    0 10,0xFF0000 10 0
    0 0 0 0

## Running

    wireframe MAP
    wireframe MAP ZOOM HEIGHT

With only a map, the view starts at zoom 1 and the heights are not
changed. With the two extra arguments, `ZOOM` sets the starting grid
spacing and `HEIGHT` is added to every height that is not zero. Neither
argument may contain letters; a wrong argument list prints
`Parameter error` on standard error. A map that cannot be read prints
`Map doesn't exist.`, and a map with a short row prints
`Found wrong line length.`. In every case the command exits with status 0.

## Keys

| Key                  | Action                                   |
|----------------------|------------------------------------------|
| Arrow keys           | Move the drawing by 50 pixels            |
| Q                    | Zoom in by 10                            |
| W                    | Zoom out by 10 (never down to zero)      |
| `+`, `=`, keypad `+` | Raise the non-zero heights by 5          |
| `-`, keypad `-`      | Lower the non-zero heights by 5          |
| Esc                  | Quit                                     |

Heights that are zero stay flat when raised or lowered, and a height that
would become zero is moved one step further so it stays raised. When W
would take the zoom to zero or below, the message
"You can't zoom out anymore." is shown instead.

The top of the window shows the key help, the current latitude, longitude
and zoom.

## Using it as a library

    from wireframe.heightmap import load_map
    from wireframe.render import View
    from wireframe.controls import Viewer
    from wireframe.canvas import Canvas

    heightmap = load_map("map.fdf")
    viewer = Viewer(heightmap, View())
    canvas = Canvas(1920, 1080)
    viewer.zoom_in()
    viewer.render(canvas)
    print(len(canvas.lit_pixels()))

- `wireframe.heightmap`: `load_map`, `parse_map`, `parse_row`,
  `parse_hex_color`, `has_letters`, `HeightMap` and `MapError`.
- `wireframe.render`: `View`, `render_map`, `draw_row_segment`,
  `draw_column_segment` and `info_lines`.
- `wireframe.controls`: `Viewer`, with `Key` codes and the `Action` a key
  press leads to.
- `wireframe.canvas`: `Canvas`, an off-screen image of coloured pixels.
- `wireframe.app`: `parse_arguments`, `build_viewer`, `run` and `main`.

Smaller helpers live in `wireframe.chars`, `wireframe.intconv`,
`wireframe.textops`, `wireframe.byteops`, `wireframe.output` and
`wireframe.linereader` (`LineReader` and `ReaderPool`, which read lines
in fixed-size chunks).

## What it does not do

The viewer only displays maps: it cannot edit or save them, and it draws
a single fixed isometric projection with no rotation.