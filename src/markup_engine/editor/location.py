"""Conversions between host ``(row, column)`` locations and flat offsets."""

from __future__ import annotations

from typing import Tuple

Location = Tuple[int, int]  # (row, column)


def offset_for_location(text: str, location: Location) -> int:
    """Flat offset of ``location``; rows and columns are clamped to the text."""

    lines = text.split("\n")
    row, col = location
    row = max(0, min(row, len(lines) - 1))
    offset = 0
    for index in range(row):
        offset += len(lines[index]) + 1  # newline
    return offset + max(0, min(col, len(lines[row])))


def location_for_offset(text: str, offset: int) -> Location:
    lines = text.split("\n")
    running = 0
    for row, line in enumerate(lines):
        if offset <= running + len(line):
            return (row, max(0, offset - running))
        running += len(line) + 1
    return (len(lines) - 1, len(lines[-1]))


__all__ = ["Location", "location_for_offset", "offset_for_location"]
