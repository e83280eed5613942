"""
Input validation utilities for docprimitives.

Bound checks shared by the value types. Violations raise OutOfRangeError,
carrying the offending value and the bound it failed.
"""

from docprimitives.types.errors import ErrorContext, OutOfRangeError
from docprimitives.utils.logger import logger


def validate_lower_bound(
    value: int,
    lower_bound: int,
    name: str,
) -> None:
    """
    Validate that a value is not below a lower bound.

    Args:
        value: Value to validate
        lower_bound: Smallest permitted value
        name: Parameter name for error context

    Raises:
        OutOfRangeError: If value is less than lower_bound
    """
    if value < lower_bound:
        logger.debug("Rejected {} = {} (must be >= {})", name, value, lower_bound)
        raise OutOfRangeError(
            value,
            lower_bound,
            context=ErrorContext(operation="validate", component=name),
        )


def validate_non_negative_integer(value: int, name: str) -> None:
    """
    Validate that a value is a non-negative integer.

    Raises:
        OutOfRangeError: If value is negative
    """
    validate_lower_bound(value, 0, name)
