"""Markup parser: segment model, combinators and grammar."""

from .grammar import (
    bold,
    document,
    escaped,
    heading,
    italic,
    parse_document,
    segment,
    text,
)
from .segments import (
    Document,
    Emphasis,
    EmphasisKind,
    Escaped,
    Heading,
    Segment,
    Text,
    walk,
)

__all__ = [
    "Document",
    "Emphasis",
    "EmphasisKind",
    "Escaped",
    "Heading",
    "Segment",
    "Text",
    "walk",
    "parse_document",
    "document",
    "segment",
    "heading",
    "escaped",
    "bold",
    "italic",
    "text",
]
