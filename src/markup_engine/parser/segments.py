"""Segment tree produced by the markup grammar."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Tuple, Union


class EmphasisKind(str, Enum):
    """Emphasis delimiter class."""

    BOLD = "bold"
    ITALIC = "italic"

    @property
    def delimiter(self) -> str:
        return "**" if self is EmphasisKind.BOLD else "*"

    @property
    def other(self) -> "EmphasisKind":
        return EmphasisKind.ITALIC if self is EmphasisKind.BOLD else EmphasisKind.BOLD


@dataclass(frozen=True, slots=True)
class Text:
    """Literal run of characters with no markup meaning."""

    content: str

    def source(self) -> str:
        return self.content


@dataclass(frozen=True, slots=True)
class Heading:
    """``#``-prefixed line; ``depth`` counts the markers.

    ``children`` always ends with a synthetic ``Text("\\n")`` so the line
    break survives even when the heading was the last line of the buffer.
    """

    depth: int
    children: Tuple["Segment", ...]

    def __post_init__(self) -> None:
        if self.depth < 1:
            raise ValueError("heading depth must be at least 1")
        object.__setattr__(self, "children", tuple(self.children))

    @property
    def marker(self) -> str:
        return "#" * self.depth + " "

    def source(self) -> str:
        return self.marker + _join(self.children)


@dataclass(frozen=True, slots=True)
class Emphasis:
    """Bold or italic run whose body may nest the other kind."""

    kind: EmphasisKind
    children: Tuple["Segment", ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "children", tuple(self.children))

    def source(self) -> str:
        delimiter = self.kind.delimiter
        return delimiter + _join(self.children) + delimiter


ESCAPABLE = frozenset("*#\\")


@dataclass(frozen=True, slots=True)
class Escaped:
    """Structural character written literally after a backslash."""

    char: str

    def __post_init__(self) -> None:
        if self.char not in ESCAPABLE:
            raise ValueError(f"'{self.char}' cannot be escaped")

    def source(self) -> str:
        return "\\" + self.char


Segment = Union[Text, Heading, Emphasis, Escaped]


@dataclass(frozen=True, slots=True)
class Document:
    """Parse result for one buffer snapshot."""

    segments: Tuple[Segment, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "segments", tuple(self.segments))

    def __iter__(self) -> Iterator[Segment]:
        return iter(self.segments)

    def __len__(self) -> int:
        return len(self.segments)

    def source(self) -> str:
        """Reassemble the literal text the document was parsed from."""

        return _join(self.segments)


def _join(segments: Iterable[Segment]) -> str:
    return "".join(segment.source() for segment in segments)


def walk(segments: Iterable[Segment]) -> Iterator[Tuple[int, Segment]]:
    """Depth-first traversal yielding ``(depth, segment)`` pairs."""

    stack = [(0, segment) for segment in reversed(tuple(segments))]
    while stack:
        level, segment = stack.pop()
        yield level, segment
        if isinstance(segment, (Heading, Emphasis)):
            stack.extend((level + 1, child) for child in reversed(segment.children))


__all__ = [
    "Document",
    "Emphasis",
    "EmphasisKind",
    "Escaped",
    "ESCAPABLE",
    "Heading",
    "Segment",
    "Text",
    "walk",
]
