"""Text positions, ranges and string helpers."""

from gherkinpy.text.strings import format_tags, strip_indent, trim_multiline, trim_ws
from gherkinpy.text.text import ZERO, LineIndex, TextRange, TextSize, slice_text_range

__all__ = [
    "ZERO",
    "LineIndex",
    "TextRange",
    "TextSize",
    "format_tags",
    "slice_text_range",
    "strip_indent",
    "trim_multiline",
    "trim_ws",
]
