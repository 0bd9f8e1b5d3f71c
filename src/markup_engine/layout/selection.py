"""Map flat character selections onto soft-wrapped visual rows."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from markup_engine.runtime import telemetry

from .geometry import Measurements, VisualRow, chars_per_line, wrap_rows
from .validation import SelectionRange, SelectionValidationError, ensure_selection

RowPosition = Tuple[int, int]  # (visual row, column within row)


@dataclass(frozen=True, slots=True)
class HighlightSpan:
    """Selection rectangle for one visual row, in columns."""

    row: int
    left: int
    width: int


def offset_to_position(
    rows: Sequence[VisualRow], offset: int
) -> Optional[RowPosition]:
    """Locate ``offset`` among ``rows``.

    An offset sitting on a soft-wrap break belongs to the start of the next
    row; the offset just past a line's last character (its newline, or the
    end of the text) stays on the line's final row.
    """

    for index, row in enumerate(rows):
        if row.start <= offset < row.stop:
            return index, offset - row.start
        if offset == row.stop and row.is_last:
            return index, row.length
    return None


def _row_span(
    index: int,
    row: VisualRow,
    first: RowPosition,
    last: RowPosition,
    columns: Optional[int],
) -> HighlightSpan:
    left = first[1] if index == first[0] else 0
    if first[0] == last[0]:
        width = last[1] - first[1] if index == first[0] else 0
    elif first[0] < index < last[0]:
        width = columns if columns is not None else row.length
    elif index == first[0]:
        width = row.length - first[1]
    elif index == last[0]:
        width = last[1]
    else:
        width = 0
    return HighlightSpan(index, left, width)


def highlight_spans(
    text: str,
    selection: Optional[SelectionRange],
    measurements: Measurements,
) -> List[HighlightSpan]:
    """One highlight span per visual row of ``text`` for ``selection``.

    Returns an empty list when there is no selection or when the selection
    no longer fits the text (a stale range racing a text update).
    """

    if selection is None:
        return []

    with telemetry.span(
        "layout::highlight_spans",
        component="layout",
        metadata={"selection": selection, "length": len(text)},
    ) as handle:
        try:
            start, end = ensure_selection(text, selection)
        except SelectionValidationError as exc:
            telemetry.record_event(
                "layout.stale_selection",
                level="warning",
                data={"reason": str(exc), "selection": exc.selection},
            )
            return []

        columns = chars_per_line(measurements)
        rows = wrap_rows(text, columns)
        first = offset_to_position(rows, start)
        last = offset_to_position(rows, end)
        if first is None or last is None:
            handle.note("unmapped", start=start, end=end)
            return []

        handle.add_metadata("rows", len(rows))
        return [
            _row_span(index, row, first, last, columns)
            for index, row in enumerate(rows)
        ]


__all__ = ["HighlightSpan", "RowPosition", "highlight_spans", "offset_to_position"]
