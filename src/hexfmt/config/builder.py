"""Hexdump configuration: the immutable option set and its builder."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .options import Base, ConfigError, Endianness
from .template import DEFAULT_TEMPLATE, Template

if TYPE_CHECKING:
    from ..hexdump import Hexdump

# Offset bit widths accepted by HexdumpBuilder.offset_bits()
_OFFSET_BITS = (32, 64)


def _check_positive(option: str, value: object) -> int:
    """Return value if it is a positive int, else raise ConfigError."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(option, f"{value!r} (expected a positive integer)")
    if value < 1:
        raise ConfigError(option, f"{value} (expected a positive integer)")
    return value


@dataclass(frozen=True)
class HexdumpConfig:
    """Validated, immutable hexdump formatting options.

    Attributes:
        base: Numeral base for offsets and byte groups.
        endianness: Byte order used to read each group as an integer.
        group_size: Bytes per group.
        groups_per_line: Groups per rendered line.
        offset_width: Digits in the offset column, or None to size it
            automatically (see format.line.resolve_offset_width).
        display_duplicates: When False, runs of identical lines collapse
            to a single "*" line.
        template: Output layout. A plain string is parsed on construction.

    Raises:
        ConfigError: If any option is invalid.
    """

    base: Base = Base.HEX
    endianness: Endianness = Endianness.LITTLE
    group_size: int = 1
    groups_per_line: int = 16
    offset_width: int | None = None
    display_duplicates: bool = True
    template: Template = field(
        default_factory=lambda: Template.parse(DEFAULT_TEMPLATE)
    )

    def __post_init__(self) -> None:
        # Frozen dataclass: normalised values are written via object.__setattr__
        object.__setattr__(self, "base", Base.parse(self.base))
        object.__setattr__(self, "endianness", Endianness.parse(self.endianness))
        _check_positive("group_size", self.group_size)
        _check_positive("groups_per_line", self.groups_per_line)
        if self.offset_width is not None:
            _check_positive("offset_width", self.offset_width)
        if not isinstance(self.display_duplicates, bool):
            raise ConfigError(
                "display_duplicates",
                f"{self.display_duplicates!r} (expected True or False)",
            )
        if not isinstance(self.template, Template):
            object.__setattr__(self, "template", Template.parse(self.template))

    @property
    def bytes_per_line(self) -> int:
        """Number of source bytes covered by one full line."""
        return self.group_size * self.groups_per_line

    @property
    def group_digits(self) -> int:
        """Digits used to render one full group in the configured base."""
        return group_width(self.base, self.group_size)


def group_width(base: Base, nbytes: int) -> int:
    """Digits needed for the largest `nbytes`-byte unsigned value in `base`."""
    return base.digits((1 << (8 * nbytes)) - 1)


class HexdumpBuilder:
    """Collects options in any order and produces a HexdumpConfig.

    Every setter returns the builder so calls can be chained:

        config = (HexdumpBuilder()
                  .base(Base.OCT)
                  .group_size(2)
                  .groups_per_line(4)
                  .config())

    Values are validated when config() or build() is called.
    """

    def __init__(self) -> None:
        self._options: dict[str, object] = {}
        self._offset_bits: int | None = None

    def base(self, base: Base | str | int) -> HexdumpBuilder:
        """Set the numeral base."""
        self._options["base"] = base
        return self

    def endianness(self, endianness: Endianness | str) -> HexdumpBuilder:
        """Set the byte order used inside each group."""
        self._options["endianness"] = endianness
        return self

    def group_size(self, group_size: int) -> HexdumpBuilder:
        """Set the number of bytes per group."""
        self._options["group_size"] = group_size
        return self

    def groups_per_line(self, groups_per_line: int) -> HexdumpBuilder:
        """Set the number of groups per line."""
        self._options["groups_per_line"] = groups_per_line
        return self

    def offset_width(self, offset_width: int | None) -> HexdumpBuilder:
        """Set a fixed offset column width, or None for automatic sizing.

        Clears any width previously requested with offset_bits().
        """
        self._options["offset_width"] = offset_width
        self._offset_bits = None
        return self

    def offset_bits(self, bits: int) -> HexdumpBuilder:
        """Size the offset column for a 32- or 64-bit address space.

        The width is resolved against the final base, so this may be
        called before or after base().
        """
        self._offset_bits = bits
        self._options.pop("offset_width", None)
        return self

    def display_duplicates(self, display: bool) -> HexdumpBuilder:
        """Show (True) or collapse (False) runs of identical lines."""
        self._options["display_duplicates"] = display
        return self

    def template(self, template: str | Template) -> HexdumpBuilder:
        """Set the output template, e.g. "#[OFFSET]: #[RAW] | #[ASCII]"."""
        self._options["template"] = template
        return self

    def config(self) -> HexdumpConfig:
        """Validate the collected options and return the configuration.

        Raises:
            ConfigError: If any option is invalid.
        """
        options = dict(self._options)
        if self._offset_bits is not None:
            if self._offset_bits not in _OFFSET_BITS:
                raise ConfigError(
                    "offset_bits",
                    f"{self._offset_bits!r} (expected 32 or 64)",
                )
            base = Base.parse(options.get("base", Base.HEX))
            options["offset_width"] = base.digits((1 << self._offset_bits) - 1)
        return HexdumpConfig(**options)  # type: ignore[arg-type]

    def build(self) -> Hexdump:
        """Validate the options and return a Hexdump using them."""
        from ..hexdump import Hexdump
        return Hexdump(self.config())

    def __repr__(self) -> str:
        parts = [f"{k}={v!r}" for k, v in self._options.items()]
        if self._offset_bits is not None:
            parts.append(f"offset_bits={self._offset_bits}")
        return f"HexdumpBuilder({', '.join(parts)})"
