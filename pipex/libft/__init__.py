"""Small character, string, memory, linked-list and output helpers."""

__all__ = ["chars", "lists", "memory", "output", "text"]