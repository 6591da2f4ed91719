"""Lenient decimal integer parsing and formatting."""

from __future__ import annotations

_WHITESPACE = " \n\t\r\f\v"
_INT_BITS = 32


def _to_int32(value: int) -> int:
    value &= (1 << _INT_BITS) - 1
    if value >= 1 << (_INT_BITS - 1):
        value -= 1 << _INT_BITS
    return value


def parse_int(text: str) -> int:
    """Read a leading decimal integer from ``text``.

    Leading whitespace is skipped, one optional sign is accepted, and
    digits are read until the first non-digit. Text without digits gives
    0. The result wraps to a signed 32-bit integer.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    value = int("".join(digits)) if digits else 0
    return _to_int32(sign * value)


def format_int(n: int) -> str:
    """Return the decimal text of ``n``, with a leading minus if negative."""
    return str(int(n))