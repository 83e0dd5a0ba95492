"""Line rendering and duplicate-line collapsing."""

from .collapse import DUPLICATE_MARKER, CollapseState, DuplicateCollapser
from .line import (
    LineChunk,
    RenderedLine,
    format_ascii,
    format_offset,
    format_raw,
    min_offset_width,
    printable,
    render,
    render_line,
    resolve_offset_width,
)

__all__ = [
    "DUPLICATE_MARKER",
    "CollapseState",
    "DuplicateCollapser",
    "LineChunk",
    "RenderedLine",
    "format_ascii",
    "format_offset",
    "format_raw",
    "min_offset_width",
    "printable",
    "render",
    "render_line",
    "resolve_offset_width",
]
