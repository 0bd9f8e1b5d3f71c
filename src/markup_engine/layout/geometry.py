"""Soft-wrap geometry derived from live host measurements."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True, slots=True)
class Measurements:
    """Widths reported by the host renderer (pixels or terminal cells)."""

    char_width: float = 0.0
    container_width: float = 0.0

    @classmethod
    def cells(cls, columns: int) -> "Measurements":
        """Terminal hosts: every character is one cell wide."""

        return cls(char_width=1.0, container_width=float(columns))


@dataclass(frozen=True, slots=True)
class VisualRow:
    """One soft-wrapped chunk of a logical source line."""

    line_index: int
    start: int
    length: int
    is_last: bool

    @property
    def stop(self) -> int:
        return self.start + self.length


def chars_per_line(measurements: Measurements) -> Optional[int]:
    """Characters that fit on one visual row; ``None`` means no wrapping."""

    char_width = measurements.char_width
    container_width = measurements.container_width
    if not (math.isfinite(char_width) and math.isfinite(container_width)):
        return None
    if char_width <= 0 or container_width <= 0:
        return None
    return max(1, math.floor(container_width / char_width))


def wrap_rows(text: str, columns: Optional[int]) -> List[VisualRow]:
    rows: List[VisualRow] = []
    offset = 0
    for line_index, line in enumerate(text.split("\n")):
        length = len(line)
        if length == 0 or columns is None:
            rows.append(VisualRow(line_index, offset, length, True))
        else:
            for chunk_start in range(0, length, columns):
                chunk_length = min(columns, length - chunk_start)
                rows.append(
                    VisualRow(
                        line_index,
                        offset + chunk_start,
                        chunk_length,
                        chunk_start + chunk_length == length,
                    )
                )
        offset += length + 1
    return rows


__all__ = ["Measurements", "VisualRow", "chars_per_line", "wrap_rows"]
