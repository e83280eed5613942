"""
Logging for docprimitives.

The package logs through loguru. Being a library, it stays silent unless
the host application opts in, either by setting DOCPRIMITIVES_DEBUG=true
in the environment or by calling enable_logging().
"""

import os

from loguru import logger as loguru_logger

from docprimitives.constants import DEBUG_ENV_VAR

_PACKAGE = "docprimitives"


def is_debug_enabled() -> bool:
    """Check if debug logging was requested through the environment."""
    return os.environ.get(DEBUG_ENV_VAR, "").lower() == "true"


def enable_logging() -> None:
    """Let records emitted by docprimitives reach the loguru sinks."""
    loguru_logger.enable(_PACKAGE)


def disable_logging() -> None:
    """Drop all records emitted by docprimitives."""
    loguru_logger.disable(_PACKAGE)


def configure_logging() -> None:
    """Apply the environment's logging choice. Called once at import."""
    if is_debug_enabled():
        enable_logging()
    else:
        disable_logging()


# Export loguru logger for direct use
logger = loguru_logger
