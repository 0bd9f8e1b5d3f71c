"""Validation helpers for selections coming from the host."""

from __future__ import annotations

from typing import Optional, Tuple

SelectionRange = Tuple[int, int]  # (start, end) character offsets


class SelectionValidationError(RuntimeError):
    """Raised when a selection does not fit the text it refers to."""

    def __init__(
        self, message: str, *, selection: SelectionRange | None = None
    ) -> None:
        super().__init__(message)
        self.selection = selection


def ensure_selection(text: str, selection: Optional[SelectionRange]) -> SelectionRange:
    if selection is None:
        raise SelectionValidationError("No active selection")
    start, end = selection
    if start < 0 or end > len(text):
        raise SelectionValidationError("Selection out of range", selection=selection)
    if start > end:
        raise SelectionValidationError("Selection is reversed", selection=selection)
    return selection


__all__ = ["SelectionRange", "SelectionValidationError", "ensure_selection"]
