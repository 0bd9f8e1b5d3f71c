"""Rich renderers for parsed documents, fallbacks and selection highlights."""

from .rich_text import (
    render_document,
    render_fallback,
    render_highlights,
    render_overlay,
)
from .styles import DEFAULT_STYLES, RenderStyles

__all__ = [
    "DEFAULT_STYLES",
    "RenderStyles",
    "render_document",
    "render_fallback",
    "render_highlights",
    "render_overlay",
]
