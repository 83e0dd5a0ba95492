"""Byte sources: in-memory buffers and binary streams."""

from .bytes_source import BytesSource
from .protocol import ByteSource
from .stream_source import StreamSource

__all__ = ["ByteSource", "BytesSource", "StreamSource"]
