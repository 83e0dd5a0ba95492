"""Shared fixtures for hexfmt tests."""

import pytest

from hexfmt.config.builder import HexdumpBuilder, HexdumpConfig


class ChunkedSource:
    """Byte source that hands out at most `step` bytes per read."""

    def __init__(self, data: bytes, step: int = 1) -> None:
        self._data = data
        self._pos = 0
        self._step = step
        self.reads = 0

    def read(self, size: int, /) -> bytes:
        self.reads += 1
        n = min(size, self._step)
        out = self._data[self._pos:self._pos + n]
        self._pos += len(out)
        return out


@pytest.fixture
def make_config():
    """Factory fixture: build a HexdumpConfig from builder keyword options."""
    def _make(**options: object) -> HexdumpConfig:
        builder = HexdumpBuilder()
        for name, value in options.items():
            getattr(builder, name)(value)
        return builder.config()
    return _make


@pytest.fixture
def chunked_source():
    """Factory fixture: a source that returns short reads."""
    def _make(data: bytes, step: int = 1) -> ChunkedSource:
        return ChunkedSource(data, step)
    return _make
