"""Mutable editor state: buffer text, selection and live measurements."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from markup_engine.layout import Measurements, SelectionRange


@dataclass(slots=True)
class EditorState:
    """Everything the core recomputes from; owned by an ``EditorSession``."""

    text: str = ""
    selection: Optional[SelectionRange] = None
    measurements: Measurements = field(default_factory=Measurements)
    baseline: Optional[str] = None
    version: int = 0

    @property
    def unsaved(self) -> bool:
        if self.baseline is None:
            return bool(self.text)
        return self.text != self.baseline

    def set_text(self, text: str) -> None:
        self.text = text
        self.version += 1

    def load(self, text: str) -> None:
        """Replace the buffer with freshly loaded content and mark it clean."""

        self.set_text(text)
        self.baseline = text
        self.selection = None

    def select(self, start: int, end: int) -> None:
        self.selection = (min(start, end), max(start, end))

    def clear_selection(self) -> None:
        self.selection = None

    def resize(self, measurements: Measurements) -> None:
        self.measurements = measurements

    def insert_tab(self, caret: Optional[int] = None) -> int:
        """Replace the selection (or insert at ``caret``) with a tab.

        Returns the caret offset just after the inserted tab.
        """

        if self.selection is not None:
            start, end = self.selection
        else:
            start = end = len(self.text) if caret is None else caret
        start = max(0, min(start, len(self.text)))
        end = max(start, min(end, len(self.text)))
        self.set_text(f"{self.text[:start]}\t{self.text[end:]}")
        self.selection = None
        return start + 1


__all__ = ["EditorState"]
