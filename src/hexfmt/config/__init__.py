"""Hexdump configuration model."""

from .builder import HexdumpBuilder, HexdumpConfig, group_width
from .options import Base, ConfigError, Endianness
from .template import DEFAULT_TEMPLATE, Field, Template

__all__ = [
    "DEFAULT_TEMPLATE",
    "Base",
    "ConfigError",
    "Endianness",
    "Field",
    "HexdumpBuilder",
    "HexdumpConfig",
    "Template",
    "group_width",
]
