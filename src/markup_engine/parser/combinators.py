"""Ordered-choice parser combinators over an immutable cursor.

A parser is any callable taking a :class:`Cursor` and returning either a
:class:`Match` (the produced value plus the advanced cursor) or ``None`` when
it cannot apply at that position. Parsers never raise on malformed input and
never consume anything when they fail, which is what lets ``alternative``
backtrack for free.

Rules wrapped in :func:`memoized` record their result per position in a table
shared by every cursor derived from the same parse, so backtracking over
nested rules stays polynomial.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, List, Optional, Tuple, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True, slots=True)
class Cursor:
    """Read position inside ``source[offset:end]``."""

    source: str
    offset: int = 0
    end: int = -1
    memo: Dict[Any, Any] = field(default_factory=dict, compare=False, repr=False)

    def __post_init__(self) -> None:
        if self.end < 0:
            object.__setattr__(self, "end", len(self.source))

    @property
    def at_end(self) -> bool:
        return self.offset >= self.end

    def peek(self) -> str:
        return "" if self.at_end else self.source[self.offset]

    def startswith(self, literal: str) -> bool:
        return self.source.startswith(literal, self.offset, self.end)

    def find(self, literal: str) -> int:
        return self.source.find(literal, self.offset, self.end)

    def advance(self, count: int) -> "Cursor":
        return self.moved_to(min(self.offset + count, self.end))

    def moved_to(self, offset: int) -> "Cursor":
        return Cursor(self.source, offset, self.end, self.memo)

    def narrowed(self, end: int) -> "Cursor":
        """Same position, with the readable span cut off at ``end``."""

        return Cursor(self.source, self.offset, min(end, self.end), self.memo)


@dataclass(frozen=True, slots=True)
class Match(Generic[T]):
    value: T
    cursor: Cursor


Parser = Callable[[Cursor], Optional[Match[T]]]


def tag(literal: str) -> Parser[str]:
    def parse(cursor: Cursor) -> Optional[Match[str]]:
        if literal and cursor.startswith(literal):
            return Match(literal, cursor.advance(len(literal)))
        return None

    return parse


def one_of(chars: str) -> Parser[str]:
    def parse(cursor: Cursor) -> Optional[Match[str]]:
        char = cursor.peek()
        if char and char in chars:
            return Match(char, cursor.advance(1))
        return None

    return parse


def take_while1(predicate: Callable[[str], bool]) -> Parser[str]:
    """Longest non-empty run of characters satisfying ``predicate``."""

    def parse(cursor: Cursor) -> Optional[Match[str]]:
        source, position, end = cursor.source, cursor.offset, cursor.end
        while position < end and predicate(source[position]):
            position += 1
        if position == cursor.offset:
            return None
        return Match(source[cursor.offset : position], cursor.moved_to(position))

    return parse


def take_until_or_rest(literal: str) -> Parser[Tuple[int, int]]:
    """Span up to (not including) ``literal``, or the rest of the input.

    Produces the ``(start, stop)`` offsets instead of a substring so the
    caller can re-parse the span in place with :func:`bounded`.
    """

    def parse(cursor: Cursor) -> Optional[Match[Tuple[int, int]]]:
        found = cursor.find(literal)
        stop = cursor.end if found < 0 else found
        return Match((cursor.offset, stop), cursor.moved_to(stop))

    return parse


def alternative(*parsers: Parser[T]) -> Parser[T]:
    """Ordered choice: the first parser that matches wins."""

    def parse(cursor: Cursor) -> Optional[Match[T]]:
        for parser in parsers:
            result = parser(cursor)
            if result is not None:
                return result
        return None

    return parse


def sequence(*parsers: Parser[object]) -> Parser[Tuple[object, ...]]:
    def parse(cursor: Cursor) -> Optional[Match[Tuple[object, ...]]]:
        values: List[object] = []
        current = cursor
        for parser in parsers:
            result = parser(current)
            if result is None:
                return None
            values.append(result.value)
            current = result.cursor
        return Match(tuple(values), current)

    return parse


def many0(parser: Parser[T]) -> Parser[List[T]]:
    """Zero or more repetitions; stops on failure or on a non-consuming match."""

    def parse(cursor: Cursor) -> Optional[Match[List[T]]]:
        values: List[T] = []
        current = cursor
        while True:
            result = parser(current)
            if result is None or result.cursor.offset == current.offset:
                return Match(values, current)
            values.append(result.value)
            current = result.cursor

    return parse


def many1(parser: Parser[T]) -> Parser[List[T]]:
    repeated = many0(parser)

    def parse(cursor: Cursor) -> Optional[Match[List[T]]]:
        result = repeated(cursor)
        if result is None or not result.value:
            return None
        return result

    return parse


def many1_count(parser: Parser[object]) -> Parser[int]:
    return mapped(many1(parser), len)


def mapped(parser: Parser[T], transform: Callable[[T], U]) -> Parser[U]:
    def parse(cursor: Cursor) -> Optional[Match[U]]:
        result = parser(cursor)
        if result is None:
            return None
        return Match(transform(result.value), result.cursor)

    return parse


def delimited(
    opening: Parser[object], body: Parser[T], closing: Parser[object]
) -> Parser[T]:
    framed = sequence(opening, body, closing)

    def parse(cursor: Cursor) -> Optional[Match[T]]:
        result = framed(cursor)
        if result is None:
            return None
        return Match(result.value[1], result.cursor)  # type: ignore[arg-type]

    return parse


def all_consuming(parser: Parser[T]) -> Parser[T]:
    """Succeed only when ``parser`` reads through to the end of the span."""

    def parse(cursor: Cursor) -> Optional[Match[T]]:
        result = parser(cursor)
        if result is None or not result.cursor.at_end:
            return None
        return result

    return parse


def bounded(span: Tuple[int, int], parser: Parser[T], cursor: Cursor) -> Optional[T]:
    """Run ``parser`` over ``source[start:stop]`` and require it to consume it all."""

    start, stop = span
    inner = cursor.moved_to(start).narrowed(stop)
    result = all_consuming(parser)(inner)
    return None if result is None else result.value


def lazy(factory: Callable[[], Parser[T]]) -> Parser[T]:
    """Defer building a parser until first use, for mutually recursive rules."""

    cache: List[Parser[T]] = []

    def parse(cursor: Cursor) -> Optional[Match[T]]:
        if not cache:
            cache.append(factory())
        return cache[0](cursor)

    return parse


def memoized(parser: Parser[T]) -> Parser[T]:
    """Cache ``parser``'s result (a match or a failure) per position and span."""

    def parse(cursor: Cursor) -> Optional[Match[T]]:
        key = (parse, cursor.offset, cursor.end)
        if key not in cursor.memo:
            cursor.memo[key] = parser(cursor)
        return cursor.memo[key]

    return parse


def run(parser: Parser[T], text: str) -> Optional[T]:
    """Apply ``parser`` to the whole of ``text``; ``None`` unless fully consumed."""

    result = all_consuming(parser)(Cursor(text))
    return None if result is None else result.value


__all__ = [
    "Cursor",
    "Match",
    "Parser",
    "all_consuming",
    "alternative",
    "bounded",
    "delimited",
    "lazy",
    "many0",
    "many1",
    "many1_count",
    "mapped",
    "memoized",
    "one_of",
    "run",
    "sequence",
    "tag",
    "take_until_or_rest",
    "take_while1",
]
