"""Small data structures and utilities: array, heap, binary buffer, CRC-32C, INI reader, condition handoff and linked list."""

__version__ = "2.0.0"
__all__ = ["array", "heap", "buffer", "bufstr", "crc32", "cond", "ini", "linkedlist"]