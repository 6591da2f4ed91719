"""Height maps read from text: one row per line, one point per word.

A point is a decimal height, optionally followed by a comma and a
colour written as ``0x`` and hexadecimal digits, as in ``10,0xFF0000``.
Points without a colour are white.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike
from typing import Iterable, List, Tuple, Union

from wireframe.chars import is_alpha
from wireframe.intconv import parse_int
from wireframe.textops import split

WHITE = 0xFFFFFF
_COLOR_PREFIX_LENGTH = 2


class MapError(Exception):
    """A map file is missing or malformed."""


def _digit_value(ch: str) -> int:
    if "0" <= ch <= "9":
        return ord(ch) - ord("0")
    if "A" <= ch <= "Z":
        return ord(ch) - ord("A") + 10
    if "a" <= ch <= "z":
        return ord(ch) - ord("a") + 10
    return 0


def parse_hex_color(token: str) -> int:
    """Read a colour such as ``0xFF00AA``.

    The first two characters are taken as the prefix and skipped. Each
    later character is one base-16 place; letters of either case count
    from 10 upwards, and any other character counts as 0.
    """
    value = 0
    for ch in token[_COLOR_PREFIX_LENGTH:]:
        value = value * 16 + _digit_value(ch)
    return value


def has_letters(text: str) -> bool:
    """True if ``text`` holds any ASCII letter."""
    return any(is_alpha(ch) for ch in text)


def parse_row(line: str) -> Tuple[List[int], List[int]]:
    """Parse one line into its heights and colours."""
    heights: List[int] = []
    colors: List[int] = []
    for word in split(line.rstrip("\n"), " "):
        heights.append(parse_int(word))
        _, comma, color = word.partition(",")
        colors.append(parse_hex_color(color) if comma else WHITE)
    return heights, colors


@dataclass
class HeightMap:
    """Grid of heights with one colour per point."""

    heights: List[List[int]] = field(default_factory=list)
    colors: List[List[int]] = field(default_factory=list)

    def rows(self) -> int:
        """Number of rows."""
        return len(self.heights)

    def columns(self) -> int:
        """Number of points in the last row, which is the widest."""
        return len(self.heights[-1]) if self.heights else 0

    def rescale(self, add: int) -> None:
        """Add ``add`` to every non-zero height, in place.

        Zero heights stay flat, and a height that would become zero is
        moved one step further so that it stays raised.
        """
        for row in self.heights:
            for index, height in enumerate(row):
                if height == 0:
                    continue
                if height + add == 0:
                    row[index] = height + add + 1
                else:
                    row[index] = height + add


def parse_map(lines: Iterable[str]) -> HeightMap:
    """Build a map from lines of text.

    A row shorter than the one before it raises ``MapError``.
    """
    result = HeightMap()
    previous = 0
    for line in lines:
        heights, colors = parse_row(line)
        if previous != 0 and previous > len(heights):
            raise MapError("Found wrong line length.")
        previous = len(heights)
        result.heights.append(heights)
        result.colors.append(colors)
    return result


def load_map(path: Union[str, "PathLike[str]"]) -> HeightMap:
    """Read a map file; a file that cannot be read raises ``MapError``."""
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            return parse_map(handle)
    except OSError as exc:
        raise MapError("Map doesn't exist.") from exc