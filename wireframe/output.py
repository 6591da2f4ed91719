"""Writing characters, strings and numbers to text streams."""

from __future__ import annotations

import sys
from typing import Optional, TextIO


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: str, stream: Optional[TextIO] = None) -> None:
    """Write one character."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(stream).write(c)


def put_str(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write a string; ``None`` writes nothing."""
    if s is None:
        return
    _target(stream).write(s)


def put_line(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write a string followed by a newline; ``None`` writes nothing."""
    if s is None:
        return
    _target(stream).write(s + "\n")


def put_number(n: int, stream: Optional[TextIO] = None) -> None:
    """Write an integer in decimal."""
    _target(stream).write(str(int(n)))