"""Tests for the streaming hexdump iterator."""

import io

import pytest

from hexfmt.config.builder import HexdumpBuilder, HexdumpConfig
from hexfmt.format.collapse import DUPLICATE_MARKER
from hexfmt.source.bytes_source import BytesSource
from hexfmt.source.stream_source import StreamSource
from hexfmt.stream.iterator import HexdumpIterator

LOREM = b"Lorem ipsum dolor sit amet, consectetur adipiscing elit"
LOREM_LINES = [
    "12340000: 4c 6f 72 65 6d 20 69 70 73 75 6d 20 64 6f 6c 6f | Lorem ipsum dolo",
    "12340010: 72 20 73 69 74 20 61 6d 65 74 2c 20 63 6f 6e 73 | r sit amet, cons",
    "12340020: 65 63 74 65 74 75 72 20 61 64 69 70 69 73 63 69 | ectetur adipisci",
    "12340030: 6e 67 20 65 6c 69 74 | ng elit",
]
ZERO_LINE = "00 00 00 00 00 00 00 00 00 00 00 00 00 00 00 00 | ................"


def _lines(data: bytes, config: HexdumpConfig | None = None, offset: int = 0) -> list[str]:
    """Collect every line for an in-memory buffer."""
    return list(HexdumpIterator(BytesSource(data), config, offset=offset))


class FailingSource:
    """Returns one full line, then raises on the next read."""

    def __init__(self) -> None:
        self.calls = 0

    def read(self, size: int, /) -> bytes:
        self.calls += 1
        if self.calls == 1:
            return bytes(size)
        raise OSError("read failed")


class TestHexdumpIterator:
    """Tests for chunking, offsets and termination."""

    def test_two_full_lines(self) -> None:
        assert _lines(bytes(range(0x20))) == [
            "00000000: 00 01 02 03 04 05 06 07 08 09 0a 0b 0c 0d 0e 0f | ................",
            "00000010: 10 11 12 13 14 15 16 17 18 19 1a 1b 1c 1d 1e 1f | ................",
        ]

    def test_empty_input_yields_nothing(self) -> None:
        assert _lines(b"") == []

    def test_short_last_line(self) -> None:
        lines = _lines(bytes(range(0x14)))
        assert len(lines) == 2
        assert lines[1] == "00000010: 10 11 12 13 | ...."

    def test_base_offset(self) -> None:
        assert _lines(LOREM, offset=0x12340000) == LOREM_LINES

    def test_short_reads_are_reassembled(self, chunked_source) -> None:
        source = chunked_source(LOREM, step=3)
        lines = list(HexdumpIterator(source, offset=0x12340000))
        assert lines == LOREM_LINES

    def test_stream_source(self) -> None:
        source = StreamSource(io.BytesIO(LOREM))
        assert list(HexdumpIterator(source, offset=0x12340000)) == LOREM_LINES

    def test_stream_source_with_size(self) -> None:
        source = StreamSource(io.BytesIO(bytes(range(0x10))), size=8)
        assert list(HexdumpIterator(source, offset=0x1000)) == [
            "00001000: 00 01 02 03 04 05 06 07 | ........",
        ]

    def test_offset_advances_by_bytes_read(self) -> None:
        it = HexdumpIterator(BytesSource(bytes(0x14)))
        assert it.offset == 0
        next(it)
        assert it.offset == 0x10
        next(it)
        assert it.offset == 0x14

    def test_pulls_one_line_per_step(self, chunked_source) -> None:
        source = chunked_source(bytes(64), step=16)
        it = HexdumpIterator(source)
        next(it)
        assert source.reads == 1

    def test_exhausted_iterator_stays_exhausted(self, chunked_source) -> None:
        source = chunked_source(b"abc", step=16)
        it = HexdumpIterator(source)
        assert next(it) == "00000000: 61 62 63 | abc"
        with pytest.raises(StopIteration):
            next(it)
        reads = source.reads
        with pytest.raises(StopIteration):
            next(it)
        assert source.reads == reads

    def test_is_its_own_iterator(self) -> None:
        it = HexdumpIterator(BytesSource(b"x"))
        assert iter(it) is it

    def test_negative_offset_rejected(self) -> None:
        with pytest.raises(ValueError):
            HexdumpIterator(BytesSource(b"x"), offset=-1)

    def test_source_error_propagates_and_ends_iteration(self) -> None:
        it = HexdumpIterator(FailingSource())
        assert next(it).startswith("00000000: 00 00")
        with pytest.raises(OSError, match="read failed"):
            next(it)
        with pytest.raises(StopIteration):
            next(it)


class TestOffsetWidth:
    """Tests for how the iterator sizes the offset column."""

    def test_known_length_widens_for_last_line(self) -> None:
        lines = _lines(bytes(0x20), offset=0xFFFFFFF0)
        assert lines[0].startswith("0fffffff0: ")
        assert lines[1].startswith("100000000: ")

    def test_known_length_uses_last_line_not_last_byte(self) -> None:
        it = HexdumpIterator(BytesSource(bytes(0x10)), offset=0xFFFFFFF0)
        assert it.offset_width == 8

    def test_unbounded_stream_uses_start_offset(self) -> None:
        source = StreamSource(io.BytesIO(bytes(0x20)))
        it = HexdumpIterator(source, offset=0xFFFFFFF0)
        assert it.offset_width == 8
        assert list(it)[1].startswith("100000000: ")

    def test_bounded_stream_uses_bound(self) -> None:
        source = StreamSource(io.BytesIO(bytes(0x20)), size=0x20)
        it = HexdumpIterator(source, offset=0xFFFFFFF0)
        assert it.offset_width == 9

    def test_explicit_width_argument(self) -> None:
        it = HexdumpIterator(BytesSource(b"A"), offset_width=4)
        assert list(it) == ["0000: 41 | A"]

    def test_configured_width(self) -> None:
        config = HexdumpBuilder().offset_bits(64).config()
        assert _lines(b"A", config) == ["0000000000000000: 41 | A"]

    def test_octal_words_with_64_bit_offsets(self) -> None:
        config = (HexdumpBuilder().base("oct").offset_bits(64)
                  .group_size(2).groups_per_line(4).config())
        assert _lines(bytes(range(0x14)), config) == [
            "0000000000000000000000: 000400 001402 002404 003406 | ........",
            "0000000000000000000010: 004410 005412 006414 007416 | ........",
            "0000000000000000000020: 010420 011422 | ....",
        ]


class TestDuplicateLines:
    """Tests for collapsing through the iterator."""

    def test_displayed_by_default(self) -> None:
        assert len(_lines(bytes(0x40))) == 4

    def test_large_zero_buffer(self) -> None:
        config = HexdumpBuilder().display_duplicates(False).config()
        assert _lines(bytes(0x10000), config) == [
            "00000000: " + ZERO_LINE,
            DUPLICATE_MARKER,
            "0000fff0: " + ZERO_LINE,
        ]

    def test_four_byte_lines(self) -> None:
        config = (HexdumpBuilder().display_duplicates(False)
                  .groups_per_line(4).config())
        assert _lines(bytes(0x10), config) == [
            "00000000: 00 00 00 00 | ....",
            DUPLICATE_MARKER,
            "0000000c: 00 00 00 00 | ....",
        ]

    def test_run_followed_by_other_data(self) -> None:
        config = HexdumpBuilder().display_duplicates(False).config()
        data = bytes(0x30) + b"tail"
        assert _lines(data, config) == [
            "00000000: " + ZERO_LINE,
            DUPLICATE_MARKER,
            "00000030: 74 61 69 6c | tail",
        ]

    def test_short_reads_do_not_break_detection(self, chunked_source) -> None:
        config = HexdumpBuilder().display_duplicates(False).config()
        it = HexdumpIterator(chunked_source(bytes(0x40), step=5), config)
        assert list(it) == [
            "00000000: " + ZERO_LINE,
            DUPLICATE_MARKER,
            "00000030: " + ZERO_LINE,
        ]
