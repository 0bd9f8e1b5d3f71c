"""Render parse results and highlight spans as ``rich`` text.

Every renderer keeps the raw buffer's columns intact: markers, delimiters and
escapes are drawn (muted) instead of hidden, so the overlay lines up with the
input surface stacked on top of it.
"""

from __future__ import annotations

from typing import Iterable, Optional

from rich.text import Text as RichText

from markup_engine.layout import HighlightSpan
from markup_engine.parser import (
    Document,
    Emphasis,
    EmphasisKind,
    Escaped,
    Heading,
    Segment,
    Text,
    parse_document,
)

from .styles import DEFAULT_STYLES, RenderStyles


def _stack(inherited: str, extra: str) -> str:
    return f"{inherited} {extra}".strip()


def _append(
    out: RichText, segment: Segment, styles: RenderStyles, inherited: str
) -> None:
    if isinstance(segment, Text):
        out.append(segment.content, style=inherited or None)
    elif isinstance(segment, Escaped):
        out.append("\\", style=styles.escape or None)
        out.append(segment.char, style=inherited or None)
    elif isinstance(segment, Heading):
        out.append(segment.marker, style=styles.marker or None)
        nested = _stack(inherited, styles.heading)
        for child in segment.children:
            _append(out, child, styles, nested)
    elif isinstance(segment, Emphasis):
        kind_style = styles.bold if segment.kind is EmphasisKind.BOLD else styles.italic
        delimiter = segment.kind.delimiter
        nested = _stack(inherited, kind_style)
        out.append(delimiter, style=_stack(nested, styles.marker) or None)
        for child in segment.children:
            _append(out, child, styles, nested)
        out.append(delimiter, style=_stack(nested, styles.marker) or None)
    else:  # pragma: no cover - exhaustive over Segment
        raise TypeError(f"Unknown segment {segment!r}")


def render_document(
    document: Document, styles: RenderStyles = DEFAULT_STYLES
) -> RichText:
    out = RichText(style=styles.text, no_wrap=False)
    for segment in document:
        _append(out, segment, styles, "")
    return out


def render_fallback(text: str, styles: RenderStyles = DEFAULT_STYLES) -> RichText:
    """Literal per-line view used when the buffer does not parse."""

    lines = [line if line else " " for line in text.split("\n")]
    return RichText("\n".join(lines), style=styles.text)


def render_overlay(
    text: str,
    styles: RenderStyles = DEFAULT_STYLES,
    *,
    document: Optional[Document] = None,
) -> RichText:
    """Styled overlay for ``text``, falling back to raw lines on parse failure."""

    parsed = document if document is not None else parse_document(text)
    if parsed is None:
        return render_fallback(text, styles)
    rendered = render_document(parsed, styles)
    # A heading on the last line carries a newline the buffer never had.
    if not text.endswith("\n") and rendered.plain.endswith("\n"):
        rendered.right_crop(1)
    return rendered


def render_highlights(
    spans: Iterable[HighlightSpan], styles: RenderStyles = DEFAULT_STYLES
) -> RichText:
    out = RichText()
    for position, span in enumerate(spans):
        if position:
            out.append("\n")
        out.append(" " * span.left)
        if span.width > 0:
            out.append(" " * span.width, style=styles.highlight)
    return out


__all__ = [
    "render_document",
    "render_fallback",
    "render_highlights",
    "render_overlay",
]
