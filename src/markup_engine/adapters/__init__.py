"""Host adapters for the markup engine."""

__all__ = ["textual"]
