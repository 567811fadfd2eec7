"""C-style character, memory, string, list, formatting and line-reading helpers."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "search", "output", "transform", "linkedlist", "printf", "nextline"]