"""Line formatter: renders one chunk of bytes as a line of hexdump text."""

from __future__ import annotations

from dataclasses import dataclass

from ..config.builder import HexdumpConfig, group_width
from ..config.options import Base
from ..config.template import Field

# Smallest auto offset width is whatever a 32-bit offset needs in the base
_MIN_OFFSET_VALUE = 0xFFFFFFFF


@dataclass(frozen=True)
class LineChunk:
    """Bytes for one line and the offset of their first byte."""

    offset: int
    data: bytes


@dataclass(frozen=True)
class RenderedLine:
    """A rendered line together with the bytes it was rendered from."""

    offset: int
    text: str
    data: bytes


def printable(byte: int) -> str:
    """ASCII glyph for a byte: itself if in 0x20..0x7E, otherwise '.'."""
    return chr(byte) if 0x20 <= byte <= 0x7E else "."


def min_offset_width(base: Base) -> int:
    """Narrowest automatic offset column: 8 hex digits or the equivalent."""
    return base.digits(_MIN_OFFSET_VALUE)


def resolve_offset_width(config: HexdumpConfig, max_offset: int = 0) -> int:
    """Choose the offset column width for a dump.

    A fixed config.offset_width is returned as is. Otherwise the width is
    the larger of min_offset_width() and the digits needed for max_offset,
    the largest line offset the caller expects to render.

    Args:
        config: The hexdump configuration.
        max_offset: Largest line offset that will be displayed.

    Returns:
        Number of digits for the offset column.
    """
    if config.offset_width is not None:
        return config.offset_width
    return max(min_offset_width(config.base), config.base.digits(max_offset))


def format_offset(offset: int, config: HexdumpConfig, width: int) -> str:
    """Render an offset in the configured base, zero-padded to width."""
    return config.base.format(offset, width)


def format_raw(data: bytes, config: HexdumpConfig) -> str:
    """Render bytes as space-separated groups.

    Each group of config.group_size bytes is read as one unsigned integer
    in config.endianness. Groups stay in source order; endianness only
    changes the byte order inside a group. A short final group is read
    from the bytes it has and padded to the width of that many bytes.
    """
    size = config.group_size
    base = config.base
    byteorder = config.endianness.value
    full_width = config.group_digits
    groups: list[str] = []
    for i in range(0, len(data), size):
        group = data[i:i + size]
        if len(group) == size:
            width = full_width
        else:
            width = group_width(base, len(group))
        groups.append(base.format(int.from_bytes(group, byteorder), width))
    return " ".join(groups)


def format_ascii(data: bytes) -> str:
    """One printable glyph per byte, no separators."""
    return "".join(printable(b) for b in data)


def render(
    chunk: LineChunk, config: HexdumpConfig, offset_width: int | None = None,
) -> str:
    """Render a chunk into one line of text using config.template.

    Only the fields the template mentions are computed.

    Args:
        chunk: The bytes for this line and their starting offset.
        config: The hexdump configuration.
        offset_width: Digits for the offset column. Defaults to
            resolve_offset_width(config, chunk.offset).

    Returns:
        The rendered line, without a trailing newline.
    """
    if offset_width is None:
        offset_width = resolve_offset_width(config, chunk.offset)
    fields = config.template.fields
    values: dict[Field, str] = {}
    if Field.OFFSET in fields:
        values[Field.OFFSET] = format_offset(chunk.offset, config, offset_width)
    if Field.RAW in fields:
        values[Field.RAW] = format_raw(chunk.data, config)
    if Field.ASCII in fields:
        values[Field.ASCII] = format_ascii(chunk.data)
    return config.template.substitute(values)


def render_line(
    chunk: LineChunk, config: HexdumpConfig, offset_width: int | None = None,
) -> RenderedLine:
    """Like render(), but keeps the source bytes for duplicate detection."""
    text = render(chunk, config, offset_width)
    return RenderedLine(offset=chunk.offset, text=text, data=bytes(chunk.data))
