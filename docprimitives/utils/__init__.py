"""
docprimitives utility modules.

This package provides shared utilities used across the codebase:
- Logging (loguru, silent unless enabled)
- Input validation
"""

# Logger
from .logger import (
    configure_logging,
    disable_logging,
    enable_logging,
    is_debug_enabled,
    logger,
)

# Validation
from .validation import (
    validate_lower_bound,
    validate_non_negative_integer,
)

__all__ = [
    # Logger
    "configure_logging",
    "disable_logging",
    "enable_logging",
    "is_debug_enabled",
    "logger",
    # Validation
    "validate_lower_bound",
    "validate_non_negative_integer",
]
