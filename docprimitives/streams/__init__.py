"""
Stream helpers for docprimitives.
"""

from .line_iterator import LineIterator, LineIteratorFlags, strip_line_delimiter

__all__ = [
    "LineIterator",
    "LineIteratorFlags",
    "strip_line_delimiter",
]
