from __future__ import annotations

from typing import List

from rich.text import Text as RichText

from markup_engine.adapters.textual import TextualEditorAdapter, TextualUIHooks
from markup_engine.editor import EditorSession


def make_adapter(
    overlays: List[RichText],
    highlights: List[RichText] | None = None,
    statuses: List[str] | None = None,
    logs: List[str] | None = None,
    *,
    text: str = "",
) -> TextualEditorAdapter:
    hooks = TextualUIHooks(
        update_overlay=overlays.append,
        update_highlights=(highlights if highlights is not None else []).append,
        update_status=(statuses if statuses is not None else []).append,
        log=(logs if logs is not None else []).append,
    )
    return TextualEditorAdapter(EditorSession.from_text(text), hooks)


def test_adapter_renders_initial_state() -> None:
    overlays: List[RichText] = []

    make_adapter(overlays, text="# Hi")

    assert overlays[-1].plain == "# Hi"


def test_adapter_updates_overlay_on_text_change() -> None:
    overlays: List[RichText] = []
    statuses: List[str] = []
    adapter = make_adapter(overlays, statuses=statuses)

    adapter.handle_text_changed("**bold**")
    adapter.handle_text_changed("**broken")

    assert overlays[-2].plain == "**bold**"
    assert overlays[-2].spans
    assert overlays[-1].plain == "**broken"
    assert overlays[-1].spans == []
    assert statuses[-1] == "1L 1W 8C *"


def test_adapter_ignores_unchanged_text() -> None:
    overlays: List[RichText] = []
    adapter = make_adapter(overlays, text="same")
    before = len(overlays)

    adapter.handle_text_changed("same")

    assert len(overlays) == before


def test_adapter_maps_locations_to_highlights() -> None:
    overlays: List[RichText] = []
    highlights: List[RichText] = []
    adapter = make_adapter(overlays, highlights, text="abcdefgh\nxy")

    adapter.handle_resize(4)
    adapter.handle_selection_changed((0, 2), (1, 1))

    assert highlights[-1].plain == "  " + "  " + "\n" + "    " + "\n" + " "
    assert adapter.session.state.selection == (2, 10)

    adapter.handle_selection_changed((1, 1), (1, 1))
    assert adapter.session.state.selection is None
    assert highlights[-1].plain == ""


def test_adapter_inserts_tab_at_caret() -> None:
    overlays: List[RichText] = []
    adapter = make_adapter(overlays, text="ab\ncd")

    caret = adapter.handle_tab((1, 1))

    assert caret == (1, 2)
    assert adapter.session.state.text == "ab\nc\td"


def test_adapter_emits_log_lines() -> None:
    overlays: List[RichText] = []
    logs: List[str] = []
    adapter = make_adapter(overlays, logs=logs)

    adapter.handle_text_changed("x")

    assert any(line.startswith("text ->") for line in logs)
    assert any(line.startswith("mirror <-") for line in logs)
