"""Lazy line iteration over byte sources."""

from .iterator import HexdumpIterator

__all__ = ["HexdumpIterator"]
