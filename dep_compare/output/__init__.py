"""Output formatting for DepCompare."""

from .formatters import MarkdownFormatter

__all__ = ["MarkdownFormatter"]
