"""String helpers for splitting, searching, comparing and bounded copies.

Searches return the remainder of the text starting at the match, or
``None`` when there is no match. The bounded copy helpers return a
pair of the resulting text and the length the caller would have needed.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, List, Optional, Tuple


def _single_char(char: str) -> str:
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return char


def _non_negative(name: str, value: int) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def split(text: str, sep: str) -> List[str]:
    """Split ``text`` on ``sep``, dropping empty pieces."""
    _single_char(sep)
    return [word for word in text.split(sep) if word]


def find_char(text: str, char: str) -> Optional[str]:
    """Return ``text`` from the first ``char`` onwards, or ``None``."""
    index = text.find(_single_char(char))
    return None if index < 0 else text[index:]


def after_char(text: str, char: str) -> Optional[str]:
    """Return ``text`` after the first ``char``, or ``None``."""
    index = text.find(_single_char(char))
    return None if index < 0 else text[index + 1:]


def rfind_char(text: str, char: str) -> Optional[str]:
    """Return ``text`` from the last ``char`` onwards, or ``None``."""
    index = text.rfind(_single_char(char))
    return None if index < 0 else text[index:]


def find_within(haystack: str, needle: str, length: int) -> Optional[str]:
    """Find ``needle`` wholly inside the first ``length`` characters.

    An empty needle matches at the start. The remainder of ``haystack``
    from the match is returned, or ``None``.
    """
    _non_negative("length", length)
    if not needle:
        return haystack
    index = haystack.find(needle, 0, length)
    return None if index < 0 else haystack[index:]


def compare(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the difference of the character codes at the first mismatch,
    with the end of a string counting as code 0, or 0 if they agree.
    """
    _non_negative("n", n)
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue="\0"):
        if a != b:
            return ord(a) - ord(b)
    return 0


def copy_bounded(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` slots, one kept for the end.

    Returns the stored text and the full length of ``src``.
    """
    _non_negative("size", size)
    stored = src[: size - 1] if size > 0 else ""
    return stored, len(src)


def concat_bounded(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` slots.

    Returns the resulting text and the length the full result would need.
    When ``size`` is smaller than ``dst`` nothing is appended and the
    length reported is ``len(src) + size``.
    """
    _non_negative("size", size)
    if size >= len(dst) and size > 0:
        room = max(size - 1 - len(dst), 0)
        return dst + src[:room], len(dst) + len(src)
    return dst, len(src) + size


def trim(text: str, charset: str) -> str:
    """Remove characters in ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def substring(text: str, start: int, length: int) -> str:
    """Return up to ``length`` characters of ``text`` from ``start``."""
    _non_negative("start", start)
    _non_negative("length", length)
    if start >= len(text):
        return ""
    return text[start:start + length]


def map_chars(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def each_char(text: Optional[str], func: Callable[[int, str], object]) -> None:
    """Call ``func(index, char)`` for each character; ``None`` does nothing."""
    if text is None:
        return
    for index, ch in enumerate(text):
        func(index, ch)