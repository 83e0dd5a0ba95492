"""Base protocol for byte sources read by the hexdump iterator."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class ByteSource(Protocol):
    """Anything that can hand out the next bytes of its data.

    This is the read() half of a binary file object. A source is a moving
    cursor: bytes returned once are not returned again, and nothing in
    the hexdump engine rewinds it.
    """

    def read(self, size: int, /) -> bytes:
        """Return up to `size` bytes. An empty result means exhausted."""
        ...
