"""Soft-wrap geometry and selection-to-row mapping."""

from .geometry import Measurements, VisualRow, chars_per_line, wrap_rows
from .selection import HighlightSpan, RowPosition, highlight_spans, offset_to_position
from .validation import SelectionRange, SelectionValidationError, ensure_selection

__all__ = [
    "Measurements",
    "VisualRow",
    "chars_per_line",
    "wrap_rows",
    "HighlightSpan",
    "RowPosition",
    "highlight_spans",
    "offset_to_position",
    "SelectionRange",
    "SelectionValidationError",
    "ensure_selection",
]
