"""
Core value types for docprimitives.

NonNegativeRange describes how often something may occur, written in a
compact text form: "" (anything), "42" (exactly 42), "5-" (at least 5)
or "0-99" (between 0 and 99 inclusive).
"""

import re
from dataclasses import dataclass

from docprimitives.types.errors import InvalidSyntaxError
from docprimitives.utils.validation import (
    validate_lower_bound,
    validate_non_negative_integer,
)

# <min>[-[<max>]], whitespace allowed around the hyphen
_RANGE_PATTERN = re.compile(r"(?P<min>[0-9]+)(?P<tail>\s*-\s*(?P<max>[0-9]+)?)?")


@dataclass(frozen=True)
class NonNegativeRange:
    """Immutable range of non-negative integers.

    ``max`` of None means the range has no upper bound.
    """

    min: int = 0
    max: int | None = None

    def __post_init__(self) -> None:
        if self.min is None:
            object.__setattr__(self, "min", 0)

        validate_non_negative_integer(self.min, "min")

        if self.max is not None:
            validate_lower_bound(self.max, self.min, "max")

    @classmethod
    def from_string(cls, text: str) -> "NonNegativeRange":
        """Parse ``""`` or ``<min>[-[<max>]]``.

        Surrounding whitespace is ignored. The empty string is [0, ∞[,
        a lone number is an exact range, and a trailing hyphen leaves
        the range open to the top.

        Raises:
            InvalidSyntaxError: If the text matches neither form
        """
        text = text.strip()

        if not text:
            return cls()

        match = _RANGE_PATTERN.fullmatch(text)
        if match is None:
            raise InvalidSyntaxError(text, extra_message="; not a valid length range")

        min_ = int(match.group("min"))

        if match.group("max") is not None:
            max_ = int(match.group("max"))
        elif match.group("tail") is not None:
            max_ = None
        else:
            max_ = min_

        return cls(min_, max_)

    def __str__(self) -> str:
        if self.min == 0 and self.max is None:
            return ""

        if self.min == self.max:
            return str(self.min)

        return f"{self.min}-{'' if self.max is None else self.max}"

    def __contains__(self, value: int) -> bool:
        return self.contains(value)

    def is_defined(self) -> bool:
        """Whether the range differs from [0, ∞[."""
        return self.min != 0 or self.max is not None

    def is_exact(self) -> bool:
        """Whether the range is one exact value."""
        return self.max is not None and self.min == self.max

    def contains(self, value: int) -> bool:
        """Check if value lies within the range (inclusive)."""
        return self.min <= value and (self.max is None or value <= self.max)
