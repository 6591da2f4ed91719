"""Keyboard handling for the map viewer."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Optional

from wireframe.canvas import Canvas
from wireframe.heightmap import HeightMap
from wireframe.render import View, render_map

MOVE_STEP = 50
ZOOM_STEP = 10
HEIGHT_STEP = 5
ZOOM_LIMIT_MESSAGE = "You can't zoom out anymore."
MESSAGE_POSITION = (840, 50)
MESSAGE_COLOR = 0xFF0000


class Key(IntEnum):
    """Key codes the viewer responds to."""

    Q = 12
    W = 13
    ESCAPE = 53
    PLUS = 69
    MINUS = 78
    ARROW_LEFT = 123
    ARROW_RIGHT = 124
    ARROW_DOWN = 125
    ARROW_UP = 126


class Action(Enum):
    """What the caller should do after a key press."""

    NONE = "none"
    REDRAW = "redraw"
    REFUSED = "refused"
    QUIT = "quit"


class Viewer:
    """A height map together with the view it is shown through."""

    def __init__(self, heightmap: HeightMap, view: Optional[View] = None) -> None:
        self.heightmap = heightmap
        self.view = view if view is not None else View()

    def move(self, d_x: int, d_y: int) -> Action:
        """Shift the map origin."""
        self.view.begin_x += d_x
        self.view.begin_y += d_y
        return Action.REDRAW

    def zoom_in(self) -> Action:
        """Spread points further apart."""
        self.view.zoom += ZOOM_STEP
        return Action.REDRAW

    def zoom_out(self) -> Action:
        """Bring points closer, refusing to go to zero or below."""
        if self.view.zoom - ZOOM_STEP > 0:
            self.view.zoom -= ZOOM_STEP
            return Action.REDRAW
        return Action.REFUSED

    def grow(self) -> Action:
        """Raise every non-flat point."""
        self.heightmap.rescale(HEIGHT_STEP)
        return Action.REDRAW

    def shrink(self) -> Action:
        """Lower every non-flat point."""
        self.heightmap.rescale(-HEIGHT_STEP)
        return Action.REDRAW

    def handle_key(self, key: int) -> Action:
        """Apply the command bound to ``key``; unknown keys do nothing."""
        try:
            code = Key(key)
        except ValueError:
            return Action.NONE
        if code is Key.ESCAPE:
            return Action.QUIT
        handlers = {
            Key.MINUS: self.shrink,
            Key.PLUS: self.grow,
            Key.ARROW_UP: lambda: self.move(0, MOVE_STEP),
            Key.ARROW_LEFT: lambda: self.move(MOVE_STEP, 0),
            Key.ARROW_DOWN: lambda: self.move(0, -MOVE_STEP),
            Key.ARROW_RIGHT: lambda: self.move(-MOVE_STEP, 0),
            Key.Q: self.zoom_in,
            Key.W: self.zoom_out,
        }
        return handlers[code]()

    def render(self, canvas: Canvas) -> Canvas:
        """Draw the map through the current view onto ``canvas``."""
        return render_map(self.heightmap, self.view, canvas)