"""Duplicate collapser: folds runs of identical lines into a "*" marker."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from .line import RenderedLine

DUPLICATE_MARKER = "*"


class CollapseState(Enum):
    """Where the collapser is relative to a run of identical lines."""

    NORMAL = "normal"
    IN_RUN = "in_run"


class DuplicateCollapser:
    """State machine that hides consecutive lines with identical bytes.

    Lines are compared by their source bytes, not their rendered text, so
    two lines at different offsets holding the same bytes are duplicates.

    For each pushed line:
      - nothing recorded yet: emit it and record its bytes;
      - same bytes as the recorded line: suppress it, and emit a single
        "*" the first time a run is entered;
      - different bytes: emit it, record its bytes, leave the run.

    finish() closes the input. If it ends inside a run, the last
    suppressed line is emitted so the dump still shows where the data
    stops.

    When `enabled` is False every line passes through unchanged.
    """

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled
        self.state = CollapseState.NORMAL
        self._recorded: bytes | None = None
        self._last_suppressed: str | None = None

    def push(self, line: RenderedLine) -> list[str]:
        """Feed one rendered line and return the lines to output (0 or 1).

        Args:
            line: The next rendered line, in offset order.

        Returns:
            The output lines produced by this step.
        """
        if not self.enabled:
            return [line.text]

        if self._recorded is not None and line.data == self._recorded:
            self._last_suppressed = line.text
            if self.state is CollapseState.IN_RUN:
                return []
            self.state = CollapseState.IN_RUN
            return [DUPLICATE_MARKER]

        self._recorded = line.data
        self._last_suppressed = None
        self.state = CollapseState.NORMAL
        return [line.text]

    def finish(self) -> list[str]:
        """Signal end of input and return any final output line."""
        if self.state is not CollapseState.IN_RUN or self._last_suppressed is None:
            return []
        last = self._last_suppressed
        self._last_suppressed = None
        self.state = CollapseState.NORMAL
        return [last]

    def collapse(self, lines: Iterable[RenderedLine]) -> list[str]:
        """Run a whole sequence of lines through push() and finish()."""
        out: list[str] = []
        for line in lines:
            out.extend(self.push(line))
        out.extend(self.finish())
        return out
