"""Shared constants and helpers for docprimitives.

Centralizes the platform line terminator, the environment variable names
the package reads, and timezone-aware datetime helpers.
"""

import os
from datetime import datetime, timezone


def utcnow() -> datetime:
    """Return the current UTC time as a timezone-aware datetime.

    Usable directly as a ``default_factory`` in dataclass fields.
    """
    return datetime.now(timezone.utc)


# Line terminator stripped from (or kept on) lines read from a stream.
LINE_DELIMITER: str = os.linesep

# Rendering of the missing upper bound in error messages.
UNBOUNDED_SYMBOL: str = "∞"

# Set to "true" to enable debug logging from the package.
DEBUG_ENV_VAR: str = "DOCPRIMITIVES_DEBUG"
