"""Executable Textual app that hosts the markup engine."""

from __future__ import annotations

import argparse
import os
from pathlib import Path
from typing import Callable, Optional, Sequence, Tuple

try:  # pragma: no cover - imported only when demo is run
    from textual import events
    from textual.app import App, ComposeResult
    from textual.containers import Horizontal, Vertical
    from textual.widgets import Footer, Header, Static, TextArea
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use markup_engine.adapters.textual.app"
    ) from exc

from rich.text import Text as RichText

from markup_engine.editor import EditorSession, Location
from markup_engine.render import RenderStyles
from markup_engine.runtime import telemetry

from .controller import TextualEditorAdapter, TextualUIHooks

TabHandler = Callable[[Location], Tuple[str, Location]]


class MarkupTextArea(TextArea):
    """``TextArea`` that hands Tab to the engine instead of moving focus."""

    def __init__(
        self, *args, tab_handler: Optional[TabHandler] = None, **kwargs
    ) -> None:
        super().__init__(*args, **kwargs)
        self.tab_handler = tab_handler

    def _on_key(self, event: events.Key) -> None:
        if event.key != "tab" or self.tab_handler is None:
            return
        event.prevent_default()
        event.stop()
        text, caret = self.tab_handler(self.cursor_location)
        self.load_text(text)
        self.cursor_location = caret


class MarkupEditorApp(App[None]):
    """Plain-text input beside a live, styled preview of the same buffer."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#panes {
		height: 1fr;
	}

	#input {
		width: 1fr;
	}

	#preview {
		width: 1fr;
		border: round $accent;
		padding: 0 1;
	}

	#overlay, #highlights {
		height: auto;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
		content-align: right middle;
	}
	"""

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self,
        *,
        path: Optional[Path] = None,
        styles: Optional[RenderStyles] = None,
    ) -> None:
        super().__init__()
        self.path = path
        self.session = EditorSession(name=path.name if path else "scratch")
        self.styles = styles or RenderStyles.from_env()
        self.adapter: TextualEditorAdapter | None = None
        self._input: MarkupTextArea | None = None
        self._overlay: Static | None = None
        self._highlights: Static | None = None
        self._status: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="panes"):
            self._input = MarkupTextArea(
                id="input", soft_wrap=True, tab_handler=self._insert_tab
            )
            yield self._input
            with Vertical(id="preview"):
                self._overlay = Static("", id="overlay")
                self._highlights = Static("", id="highlights")
                yield self._overlay
                yield self._highlights
        self._status = Static("", id="status-line")
        yield self._status
        yield Footer()

    def on_mount(self) -> None:
        hooks = TextualUIHooks(
            update_overlay=self._update_overlay,
            update_highlights=self._update_highlights,
            update_status=self._update_status,
            log=self._log_line,
        )
        self.adapter = TextualEditorAdapter(self.session, hooks, styles=self.styles)
        if self.path is not None:
            self._load(self.path)
        self.call_after_refresh(self._measure)

    def on_resize(self, event: events.Resize) -> None:
        del event
        self.call_after_refresh(self._measure)

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        if self.adapter:
            self.adapter.handle_text_changed(event.text_area.text)

    def on_text_area_selection_changed(self, event: TextArea.SelectionChanged) -> None:
        if self.adapter:
            selection = event.selection
            self.adapter.handle_selection_changed(selection.start, selection.end)

    def _insert_tab(self, caret: Location) -> Tuple[str, Location]:
        if self.adapter is None:
            return self.session.state.text, caret
        moved = self.adapter.handle_tab(caret)
        return self.session.state.text, moved

    def _measure(self) -> None:
        if self.adapter and self._overlay is not None:
            self.adapter.handle_resize(self._overlay.content_size.width)

    def _load(self, path: Path) -> None:
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            telemetry.record_event(
                "app.load_failed",
                level="warning",
                data={"path": str(path), "reason": str(exc)},
            )
            self._update_status(f"could not read {path}")
            return
        assert self.adapter is not None
        self.adapter.handle_load(text)
        if self._input is not None:
            self._input.load_text(text)

    def _update_overlay(self, overlay: RichText) -> None:
        if self._overlay:
            self._overlay.update(overlay)

    def _update_highlights(self, highlights: RichText) -> None:
        if self._highlights:
            self._highlights.update(highlights)

    def _update_status(self, status: str) -> None:
        if self._status:
            self._status.update(status)

    def _log_line(self, line: str) -> None:
        telemetry.get_logger("markup_engine.app").debug(line)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the markup engine Textual demo.")
    parser.add_argument(
        "path",
        nargs="?",
        type=Path,
        help="Optional UTF-8 text file to preload into the buffer",
    )
    parser.add_argument(
        "--log-level",
        default=os.environ.get("MARKUP_ENGINE_LOG_LEVEL"),
        help="Minimum telemetry level; logs go to MARKUP_ENGINE_LOG_FILE",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log parse and layout spans at DEBUG level",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    telemetry.configure(
        preset="debug" if args.debug else "quiet", level=args.log_level
    )
    app = MarkupEditorApp(path=args.path)
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
