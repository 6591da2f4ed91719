"""Projection of a height map onto a canvas as a wireframe.

Each point is joined to its right-hand neighbour and to the point below
it. Segments are stepped one pixel at a time along their major axis,
with the start and end positions fixed by the view's origin and zoom.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import List, Tuple

from wireframe.canvas import Canvas
from wireframe.heightmap import HeightMap
from wireframe.intconv import format_int

TEXT_COLOR = 0xFFFFFF
IMAGE_OFFSET = (0, 70)


@dataclass
class View:
    """Where the map's first point lands and how far apart points are."""

    begin_x: int = 50
    begin_y: int = 50
    zoom: int = 1


def _div3(value: int) -> int:
    """Integer division by three, truncating toward zero."""
    quotient = abs(value) // 3
    return quotient if value >= 0 else -quotient


def _slope(dy: float, dx: float) -> float:
    if dx == 0:
        return math.nan if dy == 0 else math.copysign(math.inf, dy)
    return dy / dx


def _plot(canvas: Canvas, x: float, y: float, color: int) -> None:
    if math.isfinite(x) and math.isfinite(y):
        canvas.put_pixel(x, y, color)


def _trace(
    canvas: Canvas,
    start: Tuple[float, float],
    end: Tuple[int, int],
    slope: float,
    along_x: bool,
    color: int,
) -> None:
    """Step from ``start`` until the major coordinate reaches ``end``.

    A segment whose end lies behind its start along the major axis is
    not drawn.
    """
    x, y = start
    target_x, target_y = end
    if along_x:
        if target_x < int(x):
            return
        while int(x) != target_x:
            _plot(canvas, x, y, color)
            x += 1
            y += slope
        return
    if target_y < int(y):
        return
    step = 1 / slope if slope != 0 else math.copysign(math.inf, slope)
    while int(y) != target_y:
        _plot(canvas, x, y, color)
        y += 1
        x += step


def draw_row_segment(
    canvas: Canvas, view: View, size: int, next_size: int, color: int
) -> None:
    """Draw the edge from a point to its right-hand neighbour.

    ``view`` holds the point's own position; ``size`` and ``next_size``
    are the raised offsets of the two ends.
    """
    bx, by, zoom = view.begin_x, view.begin_y, view.zoom
    x0 = float(_div3(by - zoom) + bx + size)
    y0 = 0.1 * (bx - zoom) + by - size
    x2 = float(_div3(by - zoom) + bx + zoom + next_size)
    y2 = 0.1 * bx + by - next_size
    slope = _slope(y2 - y0, x2 - x0)
    along_x = 0 < slope < 1 or -1 < slope < 0
    _trace(canvas, (x0, y0), (int(x2), int(y2)), slope, along_x, color)


def draw_column_segment(
    canvas: Canvas, view: View, size: int, next_size: int, color: int
) -> None:
    """Draw the edge from a point to the point below it.

    ``view`` holds the point's own position; ``size`` and ``next_size``
    are the raised offsets of the two ends.
    """
    bx, by, zoom = view.begin_x, view.begin_y, view.zoom
    x0 = float(_div3(by - zoom) + bx + size)
    y0 = 0.1 * (bx - zoom) + by - size
    x2 = float(_div3(by) + bx + next_size)
    y2 = 0.1 * (bx - zoom) + by + zoom - next_size
    slope = _slope(y2 - y0, x2 - x0)
    along_x = not (slope > 1 or slope < -1)
    _trace(canvas, (x0, y0), (int(x2), int(y2)), slope, along_x, color)


def render_map(heightmap: HeightMap, view: View, canvas: Canvas) -> Canvas:
    """Clear ``canvas`` and draw every edge of ``heightmap`` on it."""
    canvas.clear()
    heights = heightmap.heights
    n_rows = heightmap.rows()
    n_cols = heightmap.columns()
    for i, row in enumerate(heights):
        below = heights[i + 1] if i + 1 < n_rows else None
        for j in range(min(n_cols, len(row))):
            point = replace(
                view,
                begin_x=view.begin_x + j * view.zoom,
                begin_y=view.begin_y + i * view.zoom,
            )
            size = row[j] * 2
            color = heightmap.colors[i][j]
            if j + 1 < n_cols and j + 1 < len(row):
                draw_row_segment(canvas, point, size, row[j + 1] * 2, color)
            if below is not None and j < len(below):
                draw_column_segment(canvas, point, size, below[j] * 2, color)
    return canvas


def info_lines(view: View) -> List[Tuple[int, int, int, str]]:
    """Help and status text as ``(x, y, color, text)`` entries."""
    return [
        (10, 5, TEXT_COLOR, "ESC : Exit."),
        (10, 25, TEXT_COLOR, "Q : Zoom In."),
        (10, 45, TEXT_COLOR, "W : Zoom Out."),
        (900, 25, TEXT_COLOR, "The Best FDF"),
        (200, 5, TEXT_COLOR, "Arrows : Move."),
        (200, 25, TEXT_COLOR, "Latitude :"),
        (310, 25, TEXT_COLOR, format_int(view.begin_x)),
        (200, 45, TEXT_COLOR, "Longitude :"),
        (320, 45, TEXT_COLOR, format_int(view.begin_y)),
        (390, 5, TEXT_COLOR, "Zoom :"),
        (460, 5, TEXT_COLOR, format_int(view.zoom)),
    ]