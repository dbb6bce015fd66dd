"""Character, string, byte-buffer, linked-list, formatting and line-reading helpers."""

__version__ = "0.1.0"
__all__ = ["chars", "convert", "memory", "text", "transform", "output", "linked", "lines"]