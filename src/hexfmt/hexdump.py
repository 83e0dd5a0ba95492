"""Hexdump facade: one configuration, several ways to consume the output."""

from __future__ import annotations

import sys
from typing import BinaryIO, TextIO

from .config.builder import HexdumpConfig
from .source.bytes_source import BytesSource
from .source.stream_source import StreamSource
from .stream.iterator import HexdumpIterator

Buffer = bytes | bytearray | memoryview


class Hexdump:
    """Formats byte buffers and streams with a fixed configuration.

    The configuration is immutable, so one Hexdump can be shared freely;
    every call builds its own iterator and duplicate-line state.

    Example:
        >>> print(Hexdump().hexdump(b"Hello, world!"))
        00000000: 48 65 6c 6c 6f 2c 20 77 6f 72 6c 64 21 | Hello, world!
    """

    def __init__(self, config: HexdumpConfig | None = None) -> None:
        self.config = config if config is not None else HexdumpConfig()

    def iter(self, data: Buffer, offset: int = 0) -> HexdumpIterator:
        """Lazily iterate over the lines for an in-memory buffer.

        Args:
            data: The bytes to dump.
            offset: Offset displayed for the first byte.
        """
        return HexdumpIterator(BytesSource(data), self.config, offset=offset)

    def iter_stream(
        self, stream: BinaryIO, size: int | None = None, offset: int = 0,
    ) -> HexdumpIterator:
        """Lazily iterate over the lines for a binary stream.

        The stream is read from its current position and left open.

        Args:
            stream: A binary file object (anything with read(n) -> bytes).
            size: Maximum number of bytes to read, or None for all.
            offset: Offset displayed for the first byte.
        """
        return HexdumpIterator(StreamSource(stream, size), self.config, offset=offset)

    def hexdump(self, data: Buffer, offset: int = 0) -> str:
        """Dump a buffer to a single string, lines separated by newlines."""
        return "\n".join(self.iter(data, offset))

    def hexdump_stream(
        self, stream: BinaryIO, size: int | None = None, offset: int = 0,
    ) -> str:
        """Dump a binary stream to a single string."""
        return "\n".join(self.iter_stream(stream, size, offset))

    def dump(
        self, data: Buffer, file: TextIO | None = None, offset: int = 0,
    ) -> int:
        """Write a buffer's dump to a text stream, one line at a time.

        Args:
            data: The bytes to dump.
            file: Destination text stream (defaults to sys.stdout).
            offset: Offset displayed for the first byte.

        Returns:
            Number of lines written.
        """
        return _write_lines(self.iter(data, offset), file)

    def dump_stream(
        self,
        stream: BinaryIO,
        file: TextIO | None = None,
        size: int | None = None,
        offset: int = 0,
    ) -> int:
        """Write a binary stream's dump to a text stream as it is read."""
        return _write_lines(self.iter_stream(stream, size, offset), file)

    def __repr__(self) -> str:
        return f"Hexdump({self.config!r})"


def _write_lines(lines: HexdumpIterator, file: TextIO | None) -> int:
    """Write each line plus a newline to file; return the line count."""
    out = file if file is not None else sys.stdout
    count = 0
    for line in lines:
        out.write(line + "\n")
        count += 1
    return count


def hexdump(data: Buffer, offset: int = 0) -> str:
    """Dump a buffer with the default configuration."""
    return Hexdump().hexdump(data, offset)


def hexdump_stream(
    stream: BinaryIO, size: int | None = None, offset: int = 0,
) -> str:
    """Dump a binary stream with the default configuration."""
    return Hexdump().hexdump_stream(stream, size, offset)
