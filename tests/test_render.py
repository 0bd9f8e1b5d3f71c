from __future__ import annotations

from typing import Set, Tuple

from rich.text import Text as RichText

from markup_engine.layout import HighlightSpan
from markup_engine.parser import parse_document
from markup_engine.render import (
    RenderStyles,
    render_document,
    render_fallback,
    render_highlights,
    render_overlay,
)


def styled(text: RichText) -> Set[Tuple[str, str]]:
    return {(text.plain[span.start : span.end], str(span.style)) for span in text.spans}


def test_overlay_preserves_buffer_columns() -> None:
    source = "# Title\nSome **bold *and italic*** with \\* escapes"

    assert render_overlay(source).plain == source


def test_overlay_drops_synthetic_heading_newline() -> None:
    assert render_overlay("# Hello").plain == "# Hello"
    assert render_overlay("# Hello\n").plain == "# Hello\n"


def test_heading_marker_is_muted_and_content_bold() -> None:
    document = parse_document("## Hi\n")
    assert document is not None

    spans = styled(render_document(document))

    assert ("## ", "dim") in spans
    assert ("Hi", "bold") in spans


def test_emphasis_delimiters_flank_styled_content() -> None:
    document = parse_document("**b *i***")
    assert document is not None

    spans = styled(render_document(document))

    assert ("**", "bold dim") in spans
    assert ("b ", "bold") in spans
    assert ("i", "bold italic") in spans
    assert ("*", "bold italic dim") in spans


def test_escape_renders_muted_backslash() -> None:
    document = parse_document("\\#")
    assert document is not None

    rendered = render_document(document)

    assert rendered.plain == "\\#"
    assert styled(rendered) == {("\\", "dim")}


def test_fallback_renders_raw_lines() -> None:
    rendered = render_overlay("**broken\n\nx")

    assert rendered.plain == "**broken\n \nx"
    assert rendered.spans == []
    assert render_fallback("").plain == " "


def test_highlights_render_one_line_per_row() -> None:
    spans = [HighlightSpan(0, 2, 3), HighlightSpan(1, 0, 0), HighlightSpan(2, 0, 1)]

    rendered = render_highlights(spans)

    assert rendered.plain == "     \n\n "
    assert [(span.start, span.end) for span in rendered.spans] == [(2, 5), (7, 8)]


def test_styles_read_environment_overrides() -> None:
    styles = RenderStyles.from_env(
        {"MARKUP_ENGINE_STYLE_BOLD": "bold red", "UNRELATED": "x"}
    )

    assert styles.bold == "bold red"
    assert styles.italic == RenderStyles().italic


def test_custom_styles_apply() -> None:
    document = parse_document("*x*")
    assert document is not None

    spans = styled(render_document(document, RenderStyles(italic="green", marker="")))

    assert ("x", "green") in spans
    assert ("*", "green") in spans
