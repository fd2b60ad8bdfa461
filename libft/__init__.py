"""Character, string, memory, linked-list, formatted-output and line-reading routines."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "output", "strings", "lists", "printf", "lines"]