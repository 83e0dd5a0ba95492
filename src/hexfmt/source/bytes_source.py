"""In-memory byte source: a read cursor over a bytes-like buffer."""

from __future__ import annotations


class BytesSource:
    """Reads sequentially from a bytes, bytearray or memoryview.

    The buffer is not copied. Its total length is known up front, which
    lets the iterator size the offset column before the first line.
    """

    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        self._view = memoryview(data).cast("B")
        self._pos = 0

    @property
    def remaining(self) -> int:
        """Number of bytes not yet read."""
        return len(self._view) - self._pos

    def read(self, size: int, /) -> bytes:
        """Return the next `size` bytes (fewer at the end, b"" when done)."""
        if size < 0:
            size = self.remaining
        start = self._pos
        end = min(start + size, len(self._view))
        self._pos = end
        return self._view[start:end].tobytes()
