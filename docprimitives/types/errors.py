"""
Structured error handling for docprimitives.

Every error raised by the package derives from DocPrimitivesError, which
carries a categorised error code, a severity and an optional context block.
Concrete errors also derive from the closest builtin exception so callers
that only know the standard library can still catch them.
"""

import io
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, IntEnum
from typing import Any

from docprimitives.constants import UNBOUNDED_SYMBOL, utcnow


class ErrorCode(IntEnum):
    """Internal error codes for categorization."""

    # Stream Errors (2000-2999)
    UNSUPPORTED_OPERATION = 2001

    # Parsing Errors (3000-3999)
    SYNTAX_ERROR = 3001

    # User Input Errors (6000-6999)
    OUT_OF_RANGE = 6001


class ErrorSeverity(str, Enum):
    """Error severity levels."""

    LOW = "low"
    MEDIUM = "medium"


@dataclass
class ErrorContext:
    """Context information for an error."""

    operation: str | None = None
    component: str | None = None
    timestamp: datetime = field(default_factory=utcnow)
    additional_info: dict[str, Any] = field(default_factory=dict)


class DocPrimitivesError(Exception):
    """Base error class for docprimitives."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        severity: str = ErrorSeverity.MEDIUM,
        context: ErrorContext | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.severity = severity
        self.context = context or ErrorContext()

        self.context.timestamp = utcnow()

    def get_formatted_message(self) -> str:
        """Get a formatted error message for display to users."""
        parts = [
            f"[Error] {self}",
            f"   Code: {self.code.value}",
        ]

        if self.context.operation:
            parts.append(f"   Operation: {self.context.operation}")
        if self.context.component:
            parts.append(f"   Component: {self.context.component}")

        return "\n".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "name": self.__class__.__name__,
            "code": self.code.value,
            "message": str(self),
            "severity": self.severity,
            "context": {
                "operation": self.context.operation,
                "component": self.context.component,
                "timestamp": self.context.timestamp.isoformat(),
                "additional_info": self.context.additional_info,
            },
        }


class InvalidSyntaxError(DocPrimitivesError, ValueError):
    """Text that does not follow the grammar expected by a parser."""

    def __init__(
        self,
        text: str,
        offset: int | None = None,
        extra_message: str = "",
        context: ErrorContext | None = None,
    ) -> None:
        self.text = text
        self.offset = offset

        message = f'Syntax error in "{text}"'
        if offset is not None:
            message += f" at offset {offset}"
        message += extra_message

        super().__init__(
            code=ErrorCode.SYNTAX_ERROR,
            message=message,
            severity=ErrorSeverity.MEDIUM,
            context=context,
        )
        self.context.additional_info.setdefault("text", text)


class OutOfRangeError(DocPrimitivesError, ValueError):
    """A numeric value outside its permitted bounds."""

    def __init__(
        self,
        value: int,
        lower_bound: int,
        upper_bound: int | None = None,
        context: ErrorContext | None = None,
    ) -> None:
        self.value = value
        self.lower_bound = lower_bound
        self.upper_bound = upper_bound

        upper = f"{UNBOUNDED_SYMBOL}[" if upper_bound is None else f"{upper_bound}]"

        super().__init__(
            code=ErrorCode.OUT_OF_RANGE,
            message=f'Value "{value}" out of range [{lower_bound}, {upper}',
            severity=ErrorSeverity.MEDIUM,
            context=context,
        )
        self.context.additional_info.setdefault("value", value)


class UnsupportedOperationError(DocPrimitivesError, io.UnsupportedOperation):
    """An operation the object cannot perform in its current state."""

    def __init__(
        self,
        operation: str,
        context: ErrorContext | None = None,
    ) -> None:
        self.operation = operation

        super().__init__(
            code=ErrorCode.UNSUPPORTED_OPERATION,
            message=f'Operation "{operation}" is not supported',
            severity=ErrorSeverity.LOW,
            context=context or ErrorContext(operation=operation),
        )
