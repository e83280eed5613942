"""
docprimitives - Small building blocks for document processing.

Provides:
- LineIterator: forward-only ``(index, line)`` iteration over an open stream,
  optionally keeping line terminators and skipping empty lines
- NonNegativeRange: immutable occurrence ranges such as "42", "5-" or "0-99",
  parsed from and rendered to text
"""

__version__ = "0.1.0"

# Types are imported before utils: utils.validation depends on types.errors
from .types import (
    DocPrimitivesError,
    InvalidSyntaxError,
    NonNegativeRange,
    OutOfRangeError,
    UnsupportedOperationError,
)
from .streams import LineIterator, LineIteratorFlags
from .utils.logger import configure_logging

configure_logging()

__all__ = [
    "DocPrimitivesError",
    "InvalidSyntaxError",
    "LineIterator",
    "LineIteratorFlags",
    "NonNegativeRange",
    "OutOfRangeError",
    "UnsupportedOperationError",
    "__version__",
]
