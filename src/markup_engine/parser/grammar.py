"""Inline markup grammar: headings, bold/italic emphasis, escapes and text.

Rules are ordered choices; the first alternative that matches at a position
wins and a rule that cannot complete simply fails so an outer alternative can
claim the input. ``parse_document`` is the only entry point hosts need: it
returns ``None`` whenever the buffer cannot be consumed completely, which the
host treats as "render the raw lines instead".
"""

from __future__ import annotations

from typing import Dict, Optional

from markup_engine.runtime import telemetry

from .combinators import (
    Cursor,
    Match,
    Parser,
    alternative,
    bounded,
    delimited,
    lazy,
    many0,
    many1,
    many1_count,
    mapped,
    memoized,
    one_of,
    run,
    sequence,
    tag,
    take_until_or_rest,
    take_while1,
)
from .segments import (
    ESCAPABLE,
    Document,
    Emphasis,
    EmphasisKind,
    Escaped,
    Heading,
    Segment,
    Text,
    walk,
)

STRUCTURAL = frozenset("*#\\")
LINE_BREAK = "\n"

text: Parser[Segment] = mapped(
    take_while1(lambda char: char not in STRUCTURAL), Text
)

escaped: Parser[Segment] = mapped(
    sequence(tag("\\"), one_of("".join(sorted(ESCAPABLE)))),
    lambda pair: Escaped(str(pair[1])),
)

_heading_prefix = sequence(
    many1_count(tag("#")),
    tag(" "),
    take_until_or_rest(LINE_BREAK),
)
_line_break = tag(LINE_BREAK)


def _heading(cursor: Cursor) -> Optional[Match[Segment]]:
    """``#``+ and a space, then the rest of the line parsed as inline markup."""

    prefix = _heading_prefix(cursor)
    if prefix is None:
        return None
    depth, _, line_span = prefix.value
    children = bounded(line_span, _inline_line, cursor)  # type: ignore[arg-type]
    if children is None:
        return None
    after = _line_break(prefix.cursor)
    rest = prefix.cursor if after is None else after.cursor
    segment = Heading(depth, (*children, Text(LINE_BREAK)))  # type: ignore[arg-type]
    return Match(segment, rest)


heading: Parser[Segment] = memoized(_heading)


def _emphasis(kind: EmphasisKind) -> Parser[Segment]:
    nested = lazy(lambda: _EMPHASIS[kind.other])
    body = many1(alternative(heading, escaped, text, nested))
    delimiter = tag(kind.delimiter)
    return memoized(
        mapped(
            delimited(delimiter, body, delimiter),
            lambda children: Emphasis(kind, tuple(children)),
        )
    )


# Bold must be tried before italic so "**" is never read as two italics.
bold = _emphasis(EmphasisKind.BOLD)
italic = _emphasis(EmphasisKind.ITALIC)
_EMPHASIS: Dict[EmphasisKind, Parser[Segment]] = {
    EmphasisKind.BOLD: bold,
    EmphasisKind.ITALIC: italic,
}

_inline_line = many1(alternative(bold, italic, escaped, text))

segment: Parser[Segment] = alternative(heading, escaped, text, bold, italic)

document: Parser[Document] = mapped(
    many0(segment), lambda segments: Document(tuple(segments))
)


def parse_document(source: str) -> Optional[Document]:
    """Parse the whole buffer, or return ``None`` if any part is malformed."""

    with telemetry.span(
        "parser::parse_document",
        component="parser",
        metadata={"length": len(source)},
    ) as handle:
        try:
            result = run(document, source)
        except RecursionError:
            telemetry.record_event(
                "parser.nesting_exhausted",
                level="warning",
                data={"length": len(source)},
            )
            return None
        if result is None:
            handle.note("fallback", length=len(source))
            return None
        handle.add_metadata("nodes", sum(1 for _ in walk(result)))
        return result


__all__ = [
    "STRUCTURAL",
    "bold",
    "document",
    "escaped",
    "heading",
    "italic",
    "parse_document",
    "segment",
    "text",
]
