"""Streaming iterator: pulls one line of bytes at a time and renders it."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

from ..config.builder import HexdumpConfig
from ..format.collapse import DuplicateCollapser
from ..format.line import LineChunk, render_line, resolve_offset_width
from ..source.protocol import ByteSource


def _max_line_offset(source: ByteSource, offset: int, bytes_per_line: int) -> int:
    """Offset of the last line, if the source can tell how much it holds.

    Sources that expose a `remaining` byte count (in-memory buffers,
    size-bounded streams) allow this; for the rest the starting offset
    is all that is known.
    """
    total = getattr(source, "remaining", None)
    if not total:
        return offset
    return offset + ((total - 1) // bytes_per_line) * bytes_per_line


class HexdumpIterator(Iterator[str]):
    """Lazy, single-pass sequence of hexdump lines over a byte source.

    Each step reads up to config.bytes_per_line bytes, renders them, and
    passes the result through a DuplicateCollapser. Reads are repeated
    until a full line is collected or the source returns no bytes, so
    only the final line can be short. Once the source is exhausted the
    iterator stops for good; it cannot be restarted.

    If the source raises, the exception propagates unchanged and the
    iterator is left exhausted.

    Attributes:
        config: The configuration lines are rendered with.
        offset: Offset of the next byte to be read.
        offset_width: Digits used for every offset column in this dump.
    """

    def __init__(
        self,
        source: ByteSource,
        config: HexdumpConfig | None = None,
        offset: int = 0,
        offset_width: int | None = None,
    ) -> None:
        if offset < 0:
            raise ValueError(f"Base offset must be non-negative, got {offset}")
        self.config = config if config is not None else HexdumpConfig()
        self.offset = offset
        self._source = source
        if offset_width is None:
            offset_width = resolve_offset_width(
                self.config,
                _max_line_offset(source, offset, self.config.bytes_per_line),
            )
        self.offset_width = offset_width
        self._collapser = DuplicateCollapser(
            enabled=not self.config.display_duplicates
        )
        self._pending: deque[str] = deque()
        self._eof = False
        self._done = False

    def __iter__(self) -> HexdumpIterator:
        return self

    def __next__(self) -> str:
        while not self._pending:
            if self._done:
                raise StopIteration
            data = self._read_chunk()
            if not data:
                self._done = True
                self._pending.extend(self._collapser.finish())
                continue
            chunk = LineChunk(offset=self.offset, data=data)
            line = render_line(chunk, self.config, self.offset_width)
            self.offset += len(data)
            self._pending.extend(self._collapser.push(line))
        return self._pending.popleft()

    def _read_chunk(self) -> bytes:
        """Collect up to one line of bytes; b"" once the source is done."""
        if self._eof:
            return b""
        want = self.config.bytes_per_line
        parts: list[bytes] = []
        try:
            while want > 0:
                data = self._source.read(want)
                if not data:
                    self._eof = True
                    break
                parts.append(data)
                want -= len(data)
        except Exception:
            self._done = True
            self._pending.clear()
            raise
        return b"".join(parts)
