"""UI-agnostic markup parsing and selection layout engine."""

__all__ = [
    "adapters",
    "editor",
    "layout",
    "parser",
    "render",
    "runtime",
]

__version__ = "0.1.0"
