"""Textual adapter that turns widget events into session calls and back."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from rich.text import Text as RichText

from markup_engine.editor import (
    EditorMirror,
    EditorSession,
    Location,
    location_for_offset,
    offset_for_location,
)
from markup_engine.layout import Measurements
from markup_engine.render import (
    DEFAULT_STYLES,
    RenderStyles,
    render_fallback,
    render_highlights,
    render_overlay,
)


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_overlay: Callable[[RichText], None]
    update_highlights: Callable[[RichText], None] = _noop
    update_status: Callable[[str], None] = _noop
    # Optional realtime log callback a host may use to surface debug lines
    log: Callable[[str], None] = _noop


class TextualEditorAdapter:
    """Bridges TextArea events to an ``EditorSession`` and renders its output."""

    def __init__(
        self,
        session: EditorSession,
        hooks: TextualUIHooks,
        *,
        styles: Optional[RenderStyles] = None,
    ) -> None:
        self.session = session
        self.hooks = hooks
        self.styles = styles or DEFAULT_STYLES
        self.session.subscribe(self._on_mirror)
        self._on_mirror(self.session.last)

    def handle_text_changed(self, text: str) -> EditorMirror:
        self.hooks.log(f"text -> length={len(text)}")
        if text == self.session.state.text:
            return self.session.last
        return self.session.set_text(text)

    def handle_selection_changed(self, start: Location, end: Location) -> EditorMirror:
        """Translate TextArea ``(row, column)`` locations into a flat selection."""

        text = self.session.state.text
        first = offset_for_location(text, start)
        last = offset_for_location(text, end)
        self.hooks.log(f"selection -> {first}:{last}")
        if first == last:
            return self.session.clear_selection()
        return self.session.select(first, last)

    def handle_resize(self, columns: int) -> EditorMirror:
        self.hooks.log(f"resize -> columns={columns}")
        return self.session.resize(Measurements.cells(columns))

    def handle_load(self, text: str) -> EditorMirror:
        return self.session.load(text)

    def handle_tab(self, caret: Location) -> Location:
        """Insert a tab at ``caret`` (or over the selection); return the new caret."""

        offset = offset_for_location(self.session.state.text, caret)
        position = self.session.insert_tab(offset)
        return location_for_offset(self.session.state.text, position)

    def _on_mirror(self, mirror: EditorMirror) -> None:
        if mirror.fallback:
            overlay = render_fallback(mirror.text, self.styles)
        else:
            overlay = render_overlay(mirror.text, self.styles, document=mirror.document)
        self.hooks.update_overlay(overlay)
        self.hooks.update_highlights(render_highlights(mirror.highlights, self.styles))
        status = mirror.status
        if mirror.unsaved:
            status = f"{status} *".strip()
        self.hooks.update_status(status)
        self.hooks.log(
            f"mirror <- version={mirror.version} fallback={mirror.fallback} "
            f"rows={len(mirror.highlights)}"
        )


__all__ = ["TextualEditorAdapter", "TextualUIHooks"]
