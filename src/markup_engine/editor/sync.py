"""Adapter boundary types for pushing recomputed state to host widgets."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Protocol

from markup_engine.layout import HighlightSpan, SelectionRange
from markup_engine.parser import Document


@dataclass(slots=True)
class EditorMirror:
    """Host-friendly snapshot of one recomputation."""

    version: int
    text: str
    document: Optional[Document]
    selection: Optional[SelectionRange]
    highlights: List[HighlightSpan] = field(default_factory=list)
    status: str = ""
    unsaved: bool = False

    @property
    def fallback(self) -> bool:
        """``True`` when the host should render raw lines instead of segments."""

        return self.document is None


class EditorListener(Protocol):
    def __call__(self, mirror: EditorMirror) -> None:
        ...


__all__ = ["EditorListener", "EditorMirror"]
