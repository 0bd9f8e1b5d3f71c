"""Host-facing editor session built on the parser and layout mapper."""

from .location import Location, location_for_offset, offset_for_location
from .session import EditorSession
from .state import EditorState
from .stats import TextStats, status_line, text_stats
from .sync import EditorListener, EditorMirror

__all__ = [
    "EditorSession",
    "EditorState",
    "EditorMirror",
    "EditorListener",
    "TextStats",
    "status_line",
    "text_stats",
    "Location",
    "location_for_offset",
    "offset_for_location",
]
