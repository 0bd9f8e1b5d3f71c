"""Textual host adapter; the runnable demo lives in ``.app``."""

from .controller import TextualEditorAdapter, TextualUIHooks

__all__ = ["TextualEditorAdapter", "TextualUIHooks"]
