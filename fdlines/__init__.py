"""Per-descriptor line reading, character and string helpers, and a file-printing command."""

__version__ = "0.1.0"

__all__ = ["chars", "cli", "output", "reader", "search", "transform"]