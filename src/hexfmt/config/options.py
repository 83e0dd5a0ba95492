"""Numeral bases, endianness modes, and the configuration error type."""

from __future__ import annotations

from enum import Enum


class ConfigError(ValueError):
    """An invalid hexdump configuration option.

    Attributes:
        option: Name of the option that was rejected (e.g. "group_size").
    """

    def __init__(self, option: str, message: str) -> None:
        super().__init__(f"Invalid {option}: {message}")
        self.option = option


class Base(Enum):
    """Numeral base used for offsets and byte groups."""

    BIN = 2
    OCT = 8
    DEC = 10
    HEX = 16

    @property
    def spec(self) -> str:
        """The str.format() type character for this base."""
        return _FORMAT_SPECS[self]

    def digits(self, value: int) -> int:
        """Number of digits needed to write a non-negative value in this base."""
        return len(format(value, self.spec))

    def format(self, value: int, width: int) -> str:
        """Render value zero-padded to at least `width` digits."""
        return format(value, f"0{width}{self.spec}")

    @classmethod
    def parse(cls, value: Base | str | int) -> Base:
        """Convert a Base, a name ("hex", "oct"...) or a radix (16, 8...).

        Raises:
            ConfigError: If the value does not name a supported base.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().upper()
            if key in _BASE_ALIASES:
                return _BASE_ALIASES[key]
        elif isinstance(value, int) and not isinstance(value, bool):
            for member in cls:
                if member.value == value:
                    return member
        raise ConfigError(
            "base", f"{value!r} (expected one of bin, oct, dec, hex)"
        )


_FORMAT_SPECS = {
    Base.BIN: "b",
    Base.OCT: "o",
    Base.DEC: "d",
    Base.HEX: "x",
}

_BASE_ALIASES = {
    "BIN": Base.BIN,
    "BINARY": Base.BIN,
    "OCT": Base.OCT,
    "OCTAL": Base.OCT,
    "DEC": Base.DEC,
    "DECIMAL": Base.DEC,
    "HEX": Base.HEX,
    "HEXADECIMAL": Base.HEX,
}


class Endianness(Enum):
    """Byte order used to read a group of bytes as one integer.

    The values are the byte order names understood by int.from_bytes().
    """

    LITTLE = "little"
    BIG = "big"

    @classmethod
    def parse(cls, value: Endianness | str) -> Endianness:
        """Convert an Endianness or a name ("little", "big", "le", "be").

        Raises:
            ConfigError: If the value does not name a byte order.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            if key in ("little", "le"):
                return cls.LITTLE
            if key in ("big", "be"):
                return cls.BIG
        raise ConfigError(
            "endianness", f"{value!r} (expected little or big)"
        )
