"""hexfmt: configurable hex dumps of byte buffers and streams."""

from .config import (
    DEFAULT_TEMPLATE,
    Base,
    ConfigError,
    Endianness,
    Field,
    HexdumpBuilder,
    HexdumpConfig,
    Template,
)
from .format import (
    DUPLICATE_MARKER,
    CollapseState,
    DuplicateCollapser,
    LineChunk,
    RenderedLine,
    render,
    render_line,
    resolve_offset_width,
)
from .hexdump import Hexdump, hexdump, hexdump_stream
from .source import ByteSource, BytesSource, StreamSource
from .stream import HexdumpIterator

__all__ = [
    "DEFAULT_TEMPLATE",
    "DUPLICATE_MARKER",
    "Base",
    "ByteSource",
    "BytesSource",
    "CollapseState",
    "ConfigError",
    "DuplicateCollapser",
    "Endianness",
    "Field",
    "Hexdump",
    "HexdumpBuilder",
    "HexdumpConfig",
    "HexdumpIterator",
    "LineChunk",
    "RenderedLine",
    "StreamSource",
    "Template",
    "hexdump",
    "hexdump_stream",
    "render",
    "render_line",
    "resolve_offset_width",
]
