"""An off-screen image that collects coloured pixels."""

from __future__ import annotations

from typing import Dict, Tuple

DEFAULT_WIDTH = 1920
DEFAULT_HEIGHT = 1080


class Canvas:
    """A fixed-size image; unset pixels are black (0).

    Pixels on the top row, the left column or outside the image are
    silently dropped.
    """

    def __init__(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"canvas size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._pixels: Dict[Tuple[int, int], int] = {}

    def _inside(self, x: int, y: int) -> bool:
        return 0 < x < self.width and 0 < y < self.height

    def put_pixel(self, x: float, y: float, color: int) -> None:
        """Set a pixel; fractional coordinates are truncated."""
        ix, iy = int(x), int(y)
        if self._inside(ix, iy):
            self._pixels[(ix, iy)] = color & 0xFFFFFFFF

    def pixel(self, x: int, y: int) -> int:
        """Colour at ``(x, y)``, 0 where nothing was drawn."""
        return self._pixels.get((x, y), 0)

    def lit_pixels(self) -> Dict[Tuple[int, int], int]:
        """A copy of every drawn pixel and its colour."""
        return dict(self._pixels)

    def clear(self) -> None:
        """Forget every drawn pixel."""
        self._pixels.clear()