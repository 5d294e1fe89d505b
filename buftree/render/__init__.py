"""Text rendering helpers for tree and flat rows."""

from .rows import format_flat_row, format_row, format_rows

__all__ = ["format_flat_row", "format_row", "format_rows"]
