"""Helpers for zero-filled buffers and fixed-length byte operations.

Every operation works on the first ``n`` bytes of its buffers. A count
that is negative or longer than a buffer raises ``ValueError``.
"""

from __future__ import annotations

from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]


def _check_count(n: int, *buffers: BytesLike) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buffer in buffers:
        if n > len(buffer):
            raise ValueError(
                f"byte count {n} exceeds buffer length {len(buffer)}"
            )


def zeroed(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer for ``count`` items of ``size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError(f"count and size must not be negative, got {count}, {size}")
    return bytearray(count * size)


def zero(buffer: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buffer`` to zero, in place."""
    _check_count(n, buffer)
    buffer[:n] = bytes(n)


def fill(buffer: bytearray, value: int, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buffer`` to the low byte of ``value``."""
    _check_count(n, buffer)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def copy_bytes(dest: bytearray, src: BytesLike, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dest``."""
    _check_count(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def move_bytes(buffer: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes from offset ``src`` to offset ``dest`` in one buffer.

    The regions may overlap; the result is as if the source bytes were
    copied out first.
    """
    if dest < 0 or src < 0:
        raise ValueError(f"offsets must not be negative, got {dest}, {src}")
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    if dest + n > len(buffer) or src + n > len(buffer):
        raise ValueError(
            f"moving {n} bytes from {src} to {dest} overruns a buffer of {len(buffer)}"
        )
    buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer


def find_byte(data: BytesLike, value: int, n: int) -> Optional[int]:
    """Return the index of the low byte of ``value`` in the first ``n`` bytes."""
    _check_count(n, data)
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def compare_bytes(a: BytesLike, b: BytesLike, n: int) -> int:
    """Compare the first ``n`` bytes of ``a`` and ``b``.

    Returns the difference of the first unequal bytes, or 0 if they agree.
    """
    _check_count(n, a, b)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0