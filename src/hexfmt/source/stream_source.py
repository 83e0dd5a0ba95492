"""Stream byte source: wraps a binary file object, optionally bounded."""

from __future__ import annotations

from typing import BinaryIO


class StreamSource:
    """Reads from a binary stream such as an open file or sys.stdin.buffer.

    If `size` is given, at most that many bytes are read in total; the
    stream itself may end sooner. The stream is never closed or rewound
    here; the caller owns its lifecycle.
    """

    def __init__(self, stream: BinaryIO, size: int | None = None) -> None:
        if size is not None and size < 0:
            raise ValueError(f"Read size must be non-negative, got {size}")
        self._stream = stream
        self._limit = size
        self._consumed = 0

    @property
    def remaining(self) -> int | None:
        """Bytes left before the size bound, or None if unbounded."""
        if self._limit is None:
            return None
        return self._limit - self._consumed

    def read(self, size: int, /) -> bytes:
        """Read up to `size` bytes, honouring the size bound."""
        if self._limit is not None:
            size = min(size, self._limit - self._consumed)
            if size <= 0:
                return b""
        data = self._stream.read(size)
        self._consumed += len(data)
        return data
