"""Output template: parses "#[OFFSET]: #[RAW] | #[ASCII]" into tokens.

A template is split once into literal text and placeholder fields. Each
rendered line replays the token list instead of re-scanning the string.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .options import ConfigError

_OPEN_MARK = "#["
_CLOSE_MARK = "]"

DEFAULT_TEMPLATE = "#[OFFSET]: #[RAW] | #[ASCII]"


class Field(Enum):
    """A placeholder that is replaced by a computed column."""

    OFFSET = "OFFSET"
    RAW = "RAW"
    ASCII = "ASCII"


Token = str | Field


@dataclass(frozen=True)
class Template:
    """A pre-parsed output template.

    Attributes:
        source: The template string as given.
        tokens: Literal strings and Field placeholders in output order.
    """

    source: str
    tokens: tuple[Token, ...]

    @classmethod
    def parse(cls, source: str) -> Template:
        """Split a template string into literal and placeholder tokens.

        Placeholders are written `#[NAME]` where NAME is OFFSET, RAW or
        ASCII. They may repeat, appear in any order, or be absent.

        Args:
            source: The template string.

        Returns:
            The parsed Template.

        Raises:
            ConfigError: If the template is empty, has an unterminated
                `#[`, or names an unknown placeholder.
        """
        if not isinstance(source, str):
            raise ConfigError(
                "template", f"{source!r} (expected a string)"
            )
        if not source:
            raise ConfigError("template", "template must not be empty")

        tokens: list[Token] = []
        pos = 0
        while True:
            start = source.find(_OPEN_MARK, pos)
            if start < 0:
                break
            end = source.find(_CLOSE_MARK, start + len(_OPEN_MARK))
            if end < 0:
                raise ConfigError(
                    "template",
                    f"unterminated placeholder at position {start} in {source!r}",
                )
            name = source[start + len(_OPEN_MARK):end]
            try:
                field = Field(name)
            except ValueError:
                raise ConfigError(
                    "template",
                    f"unknown placeholder '#[{name}]' "
                    f"(expected one of OFFSET, RAW, ASCII)",
                ) from None
            if start > pos:
                tokens.append(source[pos:start])
            tokens.append(field)
            pos = end + len(_CLOSE_MARK)

        if pos < len(source):
            tokens.append(source[pos:])
        return cls(source=source, tokens=tuple(tokens))

    @property
    def fields(self) -> frozenset[Field]:
        """The set of placeholders this template uses."""
        return frozenset(t for t in self.tokens if isinstance(t, Field))

    def substitute(self, values: dict[Field, str]) -> str:
        """Replay the tokens, replacing each placeholder with its value."""
        return "".join(
            values[t] if isinstance(t, Field) else t for t in self.tokens
        )

    def __str__(self) -> str:
        return self.source
