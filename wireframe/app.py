"""Command-line entry point: load a map and show it in a window."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from os import PathLike
from typing import List, Optional, Sequence, Union

from wireframe.canvas import DEFAULT_HEIGHT, DEFAULT_WIDTH, Canvas
from wireframe.controls import (
    MESSAGE_COLOR,
    MESSAGE_POSITION,
    ZOOM_LIMIT_MESSAGE,
    Action,
    Key,
    Viewer,
)
from wireframe.heightmap import MapError, has_letters, load_map
from wireframe.intconv import parse_int
from wireframe.output import put_line, put_str
from wireframe.render import IMAGE_OFFSET, View, info_lines

WINDOW_TITLE = "FDF"
PARAMETER_ERROR = "Parameter error"
START_X = 50
START_Y = 50


@dataclass
class Settings:
    """What the command line asks for."""

    path: Union[str, "PathLike[str]"]
    zoom: int = 1
    height_add: int = 0


def parse_arguments(argv: Sequence[str]) -> Settings:
    """Read ``MAP`` or ``MAP ZOOM HEIGHT`` from the argument list.

    Any other number of arguments, or a zoom or height holding a letter,
    raises ``ValueError``.
    """
    args: List[str] = list(argv)
    if len(args) == 1:
        return Settings(path=args[0])
    if len(args) == 3:
        path, zoom, height = args
        if has_letters(zoom) or has_letters(height):
            raise ValueError(PARAMETER_ERROR)
        return Settings(path=path, zoom=parse_int(zoom), height_add=parse_int(height))
    raise ValueError(PARAMETER_ERROR)


def build_viewer(settings: Settings) -> Viewer:
    """Load the map named by ``settings`` and set up the starting view."""
    heightmap = load_map(settings.path)
    heightmap.rescale(settings.height_add)
    return Viewer(heightmap, View(begin_x=START_X, begin_y=START_Y, zoom=settings.zoom))


def _rgb(color: int):
    import pygame

    return pygame.Color((color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF)


def _key_table():
    import pygame

    return {
        pygame.K_q: Key.Q,
        pygame.K_w: Key.W,
        pygame.K_ESCAPE: Key.ESCAPE,
        pygame.K_KP_PLUS: Key.PLUS,
        pygame.K_EQUALS: Key.PLUS,
        pygame.K_PLUS: Key.PLUS,
        pygame.K_KP_MINUS: Key.MINUS,
        pygame.K_MINUS: Key.MINUS,
        pygame.K_LEFT: Key.ARROW_LEFT,
        pygame.K_RIGHT: Key.ARROW_RIGHT,
        pygame.K_DOWN: Key.ARROW_DOWN,
        pygame.K_UP: Key.ARROW_UP,
    }


def run(viewer: Viewer) -> None:
    """Show ``viewer`` in a window until it is closed or Escape is pressed."""
    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((DEFAULT_WIDTH, DEFAULT_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        font = pygame.font.Font(None, 22)
        canvas = Canvas(DEFAULT_WIDTH, DEFAULT_HEIGHT)
        keys = _key_table()

        def redraw() -> None:
            screen.fill((0, 0, 0))
            image = pygame.Surface((DEFAULT_WIDTH, DEFAULT_HEIGHT))
            for (x, y), color in viewer.render(canvas).lit_pixels().items():
                image.set_at((x, y), _rgb(color))
            screen.blit(image, IMAGE_OFFSET)
            for x, y, color, text in info_lines(viewer.view):
                screen.blit(font.render(text, True, _rgb(color)), (x, y))
            pygame.display.flip()

        redraw()
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                return
            if event.type != pygame.KEYDOWN or event.key not in keys:
                continue
            action = viewer.handle_key(keys[event.key])
            if action is Action.QUIT:
                return
            if action is Action.REDRAW:
                redraw()
            elif action is Action.REFUSED:
                screen.blit(
                    font.render(ZOOM_LIMIT_MESSAGE, True, _rgb(MESSAGE_COLOR)),
                    MESSAGE_POSITION,
                )
                pygame.display.flip()
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse arguments, load the map and run the viewer; returns 0."""
    args = sys.argv[1:] if argv is None else argv
    try:
        settings = parse_arguments(args)
    except ValueError as exc:
        put_str(str(exc), sys.stderr)
        return 0
    try:
        viewer = build_viewer(settings)
    except MapError as exc:
        put_line(str(exc), sys.stdout)
        return 0
    run(viewer)
    return 0