"""
docprimitives type definitions.

This module exports the value types and error types of the package.
"""

# Error types
from .errors import (
    DocPrimitivesError,
    ErrorCode,
    ErrorContext,
    ErrorSeverity,
    InvalidSyntaxError,
    OutOfRangeError,
    UnsupportedOperationError,
)

# Core types
from .core import NonNegativeRange

__all__ = [
    # Core types
    "NonNegativeRange",
    # Error types
    "ErrorCode",
    "ErrorSeverity",
    "ErrorContext",
    "DocPrimitivesError",
    "InvalidSyntaxError",
    "OutOfRangeError",
    "UnsupportedOperationError",
]
