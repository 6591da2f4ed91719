"""Reading newline-terminated lines from streams and file descriptors."""

from __future__ import annotations

import os
from typing import AnyStr, Dict, Generic, IO, Iterator, Optional

DEFAULT_BUFFER_SIZE = 500
MAX_DESCRIPTORS = 1024


def _check_buffer_size(buffer_size: int) -> int:
    if buffer_size <= 0:
        raise ValueError(f"buffer size must be positive, got {buffer_size}")
    return buffer_size


def _newline(chunk: AnyStr) -> AnyStr:
    return b"\n" if isinstance(chunk, (bytes, bytearray)) else "\n"  # type: ignore[return-value]


class LineReader(Generic[AnyStr]):
    """Read lines from a stream in chunks of ``buffer_size``.

    Each line keeps its trailing newline; a last line without one is
    returned as it is. ``read_line`` returns ``None`` at the end. The
    stream may yield ``str`` or ``bytes``; lines are of the same kind.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        self._stream = stream
        self._buffer_size = _check_buffer_size(buffer_size)
        self._pending: Optional[AnyStr] = None

    def read_line(self) -> Optional[AnyStr]:
        """Return the next line, or ``None`` when the stream is exhausted."""
        line = self._pending
        self._pending = None
        while True:
            chunk = self._stream.read(self._buffer_size)
            line = chunk if line is None else line + chunk
            end = line.find(_newline(line))
            if end >= 0:
                self._pending = line[end + 1:]
                return line[:end + 1]
            if not chunk:
                return line if line else None

    def __iter__(self) -> Iterator[AnyStr]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line


class ReaderPool:
    """Read lines from several file descriptors, each with its own state.

    Lines are ``bytes``. A read shorter than ``buffer_size`` that brings
    no newline ends the current line, so data arriving in small pieces
    (from a pipe, say) is returned as soon as it is read.
    """

    def __init__(self, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        self._buffer_size = _check_buffer_size(buffer_size)
        self._pending: Dict[int, bytes] = {}

    def read_line(self, fd: int) -> Optional[bytes]:
        """Return the next line from ``fd``, or ``None`` at its end."""
        if not 0 <= fd < MAX_DESCRIPTORS:
            raise ValueError(f"descriptor out of range: {fd}")
        line = self._pending.pop(fd, b"")
        while True:
            chunk = os.read(fd, self._buffer_size)
            line += chunk
            end = line.find(b"\n")
            if end >= 0:
                self._pending[fd] = line[end + 1:]
                return line[:end + 1]
            if not chunk:
                return line if line else None
            if len(chunk) < self._buffer_size:
                return line