from __future__ import annotations

import math

import pytest

from markup_engine.layout import (
    HighlightSpan,
    Measurements,
    SelectionValidationError,
    VisualRow,
    chars_per_line,
    ensure_selection,
    highlight_spans,
    offset_to_position,
    wrap_rows,
)


def cells(columns: int) -> Measurements:
    return Measurements(char_width=8.0, container_width=8.0 * columns)


def test_chars_per_line_floors_measurements() -> None:
    assert chars_per_line(Measurements(8.0, 85.0)) == 10
    assert chars_per_line(Measurements.cells(42)) == 42


@pytest.mark.parametrize(
    "measurements",
    [
        Measurements(),
        Measurements(0.0, 100.0),
        Measurements(8.0, 0.0),
        Measurements(-1.0, 100.0),
        Measurements(math.nan, 100.0),
        Measurements(8.0, math.inf),
    ],
)
def test_degenerate_geometry_disables_wrapping(measurements: Measurements) -> None:
    assert chars_per_line(measurements) is None


def test_narrow_container_keeps_one_column() -> None:
    assert chars_per_line(Measurements(10.0, 4.0)) == 1


def test_wrap_rows_chunks_long_lines() -> None:
    assert wrap_rows("abcdefghij", 4) == [
        VisualRow(0, 0, 4, False),
        VisualRow(0, 4, 4, False),
        VisualRow(0, 8, 2, True),
    ]


def test_wrap_rows_keeps_empty_lines_and_unbounded_lines() -> None:
    assert wrap_rows("ab\n\ncd", None) == [
        VisualRow(0, 0, 2, True),
        VisualRow(1, 3, 0, True),
        VisualRow(2, 4, 2, True),
    ]
    assert wrap_rows("", 4) == [VisualRow(0, 0, 0, True)]
    assert wrap_rows("ab\n", 4) == [VisualRow(0, 0, 2, True), VisualRow(1, 3, 0, True)]


def test_soft_wrap_boundary_belongs_to_next_row() -> None:
    rows = wrap_rows("abcdefgh", 4)

    assert offset_to_position(rows, 3) == (0, 3)
    assert offset_to_position(rows, 4) == (1, 0)
    assert offset_to_position(rows, 8) == (1, 4)
    assert offset_to_position(rows, 9) is None


def test_line_end_stays_on_its_last_row() -> None:
    rows = wrap_rows("abcd\nef", 4)

    assert offset_to_position(rows, 4) == (0, 4)
    assert offset_to_position(rows, 5) == (1, 0)


def test_single_row_selection() -> None:
    assert highlight_spans("hello world", (1, 4), Measurements()) == [
        HighlightSpan(0, 1, 3)
    ]


def test_selection_across_wrapped_rows() -> None:
    assert highlight_spans("abcdefghij", (2, 9), cells(4)) == [
        HighlightSpan(0, 2, 2),
        HighlightSpan(1, 0, 4),
        HighlightSpan(2, 0, 1),
    ]


def test_selection_across_logical_lines_without_wrapping() -> None:
    assert highlight_spans("ab\ncd\nef", (1, 7), Measurements()) == [
        HighlightSpan(0, 1, 1),
        HighlightSpan(1, 0, 2),
        HighlightSpan(2, 0, 1),
    ]


def test_selection_spanning_soft_wrap_boundary() -> None:
    assert highlight_spans("abcdefgh", (2, 4), cells(4)) == [
        HighlightSpan(0, 2, 2),
        HighlightSpan(1, 0, 0),
    ]
    assert highlight_spans("abcdefgh", (4, 6), cells(4)) == [
        HighlightSpan(0, 0, 0),
        HighlightSpan(1, 0, 2),
    ]


def test_rows_outside_selection_have_zero_width() -> None:
    spans = highlight_spans("one\ntwo\nthree", (4, 6), Measurements())

    assert spans == [
        HighlightSpan(0, 0, 0),
        HighlightSpan(1, 0, 2),
        HighlightSpan(2, 0, 0),
    ]


def test_empty_text_and_caret_selection() -> None:
    assert highlight_spans("", (0, 0), cells(4)) == [HighlightSpan(0, 0, 0)]


@pytest.mark.parametrize("selection", [None, (0, 50), (-1, 2), (3, 1)])
def test_invalid_selection_produces_no_highlight(selection) -> None:
    assert highlight_spans("abc", selection, cells(4)) == []


def test_mapping_is_idempotent() -> None:
    text = "# Title\nsome longer body text that wraps"
    first = highlight_spans(text, (3, 30), cells(7))
    second = highlight_spans(text, (3, 30), cells(7))

    assert first == second
    assert first


def test_ensure_selection_reports_the_range() -> None:
    with pytest.raises(SelectionValidationError) as info:
        ensure_selection("abc", (1, 9))

    assert info.value.selection == (1, 9)
    assert ensure_selection("abc", (0, 3)) == (0, 3)
