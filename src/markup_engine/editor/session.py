"""Editor session façade: host events in, recomputed snapshots out."""

from __future__ import annotations

from typing import Callable, List, Optional

from markup_engine.layout import Measurements, highlight_spans
from markup_engine.parser import parse_document
from markup_engine.runtime import telemetry

from .state import EditorState
from .stats import status_line
from .sync import EditorListener, EditorMirror


class EditorSession:
    """Re-derives the document and highlights after every host event.

    Nothing is cached between events: each call parses the full buffer and
    re-maps the selection from scratch, so events may arrive in any order.
    """

    def __init__(
        self,
        *,
        name: str = "default",
        state: Optional[EditorState] = None,
    ) -> None:
        self.name = name
        self.state = state or EditorState()
        self._listeners: List[EditorListener] = []
        self._last: Optional[EditorMirror] = None

    @classmethod
    def from_text(cls, text: str, *, name: str = "default") -> "EditorSession":
        session = cls(name=name)
        session.state.load(text)
        return session

    def subscribe(self, listener: Callable[[EditorMirror], None]) -> None:
        self._listeners.append(listener)

    @property
    def last(self) -> EditorMirror:
        return self._last if self._last is not None else self.mirror()

    def mirror(self) -> EditorMirror:
        state = self.state
        return EditorMirror(
            version=state.version,
            text=state.text,
            document=parse_document(state.text),
            selection=state.selection,
            highlights=highlight_spans(state.text, state.selection, state.measurements),
            status=status_line(state.text, state.selection),
            unsaved=state.unsaved,
        )

    def set_text(self, text: str) -> EditorMirror:
        return self._apply("set_text", lambda: self.state.set_text(text))

    def load(self, text: str) -> EditorMirror:
        return self._apply("load", lambda: self.state.load(text))

    def select(self, start: int, end: int) -> EditorMirror:
        return self._apply("select", lambda: self.state.select(start, end))

    def clear_selection(self) -> EditorMirror:
        return self._apply("clear_selection", self.state.clear_selection)

    def resize(self, measurements: Measurements) -> EditorMirror:
        return self._apply("resize", lambda: self.state.resize(measurements))

    def insert_tab(self, caret: Optional[int] = None) -> int:
        """Insert a tab over the selection and return the new caret offset."""

        position: List[int] = []
        self._apply("insert_tab", lambda: position.append(self.state.insert_tab(caret)))
        return position[0]

    def _apply(self, label: str, change: Callable[[], object]) -> EditorMirror:
        with telemetry.span(
            f"editor::{label}",
            component="editor",
            metadata={"session": self.name},
        ) as handle:
            change()
            mirror = self.mirror()
            handle.add_metadata("version", mirror.version)
            handle.add_metadata("fallback", mirror.fallback)
        self._last = mirror
        for listener in list(self._listeners):
            listener(mirror)
        return mirror


__all__ = ["EditorSession"]
