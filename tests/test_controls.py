import pytest

from wireframe.canvas import Canvas
from wireframe.controls import (
    HEIGHT_STEP,
    MOVE_STEP,
    ZOOM_STEP,
    Action,
    Key,
    Viewer,
)
from wireframe.heightmap import HeightMap
from wireframe.render import View, render_map


def _viewer(zoom=20):
    hm = HeightMap(heights=[[0, 8], [12, 0]], colors=[[1, 2], [3, 4]])
    return Viewer(hm, View(begin_x=50, begin_y=50, zoom=zoom))


@pytest.mark.parametrize(
    "key, d_x, d_y",
    [
        (126, 0, MOVE_STEP),
        (123, MOVE_STEP, 0),
        (125, 0, -MOVE_STEP),
        (124, -MOVE_STEP, 0),
    ],
)
def test_arrow_keys_move_origin(key, d_x, d_y):
    viewer = _viewer()
    assert viewer.handle_key(key) is Action.REDRAW
    assert (viewer.view.begin_x, viewer.view.begin_y) == (50 + d_x, 50 + d_y)


def test_zoom_in_key():
    viewer = _viewer(zoom=20)
    assert viewer.handle_key(Key.Q) is Action.REDRAW
    assert viewer.view.zoom == 20 + ZOOM_STEP


def test_zoom_out_key():
    viewer = _viewer(zoom=30)
    assert viewer.handle_key(Key.W) is Action.REDRAW
    assert viewer.view.zoom == 30 - ZOOM_STEP


def test_zoom_out_refused_at_limit():
    viewer = _viewer(zoom=ZOOM_STEP)
    assert viewer.zoom_out() is Action.REFUSED
    assert viewer.view.zoom == ZOOM_STEP


def test_escape_quits():
    viewer = _viewer()
    assert viewer.handle_key(53) is Action.QUIT


def test_unknown_key_changes_nothing():
    viewer = _viewer()
    assert viewer.handle_key(999) is Action.NONE
    assert viewer.view == View(begin_x=50, begin_y=50, zoom=20)
    assert viewer.heightmap.heights == [[0, 8], [12, 0]]


def test_plus_key_raises_non_flat_points():
    viewer = _viewer()
    assert viewer.handle_key(Key.PLUS) is Action.REDRAW
    assert viewer.heightmap.heights == [[0, 8 + HEIGHT_STEP], [12 + HEIGHT_STEP, 0]]


def test_minus_key_lowers_and_keeps_points_raised():
    hm = HeightMap(heights=[[HEIGHT_STEP, 0]], colors=[[1, 1]])
    viewer = Viewer(hm)
    assert viewer.handle_key(Key.MINUS) is Action.REDRAW
    assert viewer.heightmap.heights == [[1, 0]]


def test_grow_then_shrink_round_trip():
    viewer = _viewer()
    viewer.grow()
    viewer.shrink()
    assert viewer.heightmap.heights == [[0, 8], [12, 0]]


def test_move_round_trip():
    viewer = _viewer()
    viewer.move(30, -70)
    viewer.move(-30, 70)
    assert viewer.view == View(begin_x=50, begin_y=50, zoom=20)


def test_default_view():
    viewer = Viewer(HeightMap())
    assert viewer.view == View()


def test_render_matches_render_map():
    viewer = _viewer()
    drawn = viewer.render(Canvas()).lit_pixels()
    expected = render_map(viewer.heightmap, viewer.view, Canvas()).lit_pixels()
    assert drawn == expected
    assert drawn


def test_render_follows_moves():
    viewer = _viewer()
    before = viewer.render(Canvas()).lit_pixels()
    viewer.handle_key(Key.ARROW_LEFT)
    after = viewer.render(Canvas()).lit_pixels()
    assert before.keys() != after.keys()
    assert len(after) > 0