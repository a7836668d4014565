"""Classic algorithms and data structures: numbers, puzzles, geometry, strings, arrays, linked lists and graphs."""

__version__ = "0.1.0"