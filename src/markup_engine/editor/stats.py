"""Line, word and character counts shown in the status line."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import grapheme

from markup_engine.layout import SelectionRange


@dataclass(frozen=True, slots=True)
class TextStats:
    lines: int
    words: int
    chars: int

    def format(self) -> str:
        return f"{self.lines}L {self.words}W {self.chars}C"


def _line_count(text: str) -> int:
    # Only "\n" ends a line, and a trailing one does not open a new line.
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return len(lines)


def text_stats(text: str, selection: Optional[SelectionRange] = None) -> TextStats:
    """Counts for the selected slice when it fits ``text``, else the whole text.

    ``chars`` counts user-perceived characters (grapheme clusters), so an
    emoji sequence or a letter with combining accents counts once.
    """

    if selection is not None:
        start, end = selection
        if 0 <= start <= end <= len(text):
            text = text[start:end]
    return TextStats(
        lines=_line_count(text),
        words=len(text.split()),
        chars=grapheme.length(text),
    )


def status_line(text: str, selection: Optional[SelectionRange] = None) -> str:
    if not text:
        return ""
    return text_stats(text, selection).format()


__all__ = ["TextStats", "status_line", "text_stats"]
