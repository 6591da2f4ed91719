"""ASCII character classification and case conversion.

Every function accepts either a one-character string or an integer
character code. The classifiers return a bool. The case converters
return a value of the same kind they were given. Only the ASCII ranges
are considered, so non-ASCII letters are neither alphabetic nor converted.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[str, int]


def _code(c: CharLike) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer code, got {c!r}")
    return c


def _is_upper(code: int) -> bool:
    return ord("A") <= code <= ord("Z")


def _is_lower(code: int) -> bool:
    return ord("a") <= code <= ord("z")


def is_alpha(c: CharLike) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return _is_upper(code) or _is_lower(code)


def is_digit(c: CharLike) -> bool:
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for printable ASCII, space through tilde."""
    return 32 <= _code(c) <= 126


def _convert(c: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(c, str) else code


def to_lower(c: CharLike) -> CharLike:
    """Map an ASCII upper-case letter to lower case; leave anything else."""
    code = _code(c)
    if _is_upper(code):
        code += 32
    return _convert(c, code)


def to_upper(c: CharLike) -> CharLike:
    """Map an ASCII lower-case letter to upper case; leave anything else."""
    code = _code(c)
    if _is_lower(code):
        code -= 32
    return _convert(c, code)