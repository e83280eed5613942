"""Line iteration over an open stream.

LineIterator reads one line at a time from a handle the caller owns and
yields ``(index, line)`` pairs with 1-based indexes. The handle is never
closed, rewound or seeked, so a LineIterator can only be walked once.
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import IntFlag
from typing import IO

from docprimitives.constants import LINE_DELIMITER
from docprimitives.types.errors import UnsupportedOperationError
from docprimitives.utils.logger import logger


class LineIteratorFlags(IntFlag):
    """Options controlling how lines are returned."""

    NONE = 0
    # Keep the trailing line terminator on returned lines
    INCLUDE_LINE_DELIMITER = 1
    # Do not return lines that are empty once the terminator is removed
    SKIP_EMPTY = 2


def strip_line_delimiter(line: str) -> str:
    """Remove one trailing platform line terminator, if present."""
    return line.removesuffix(LINE_DELIMITER)


class LineIterator(Iterator[tuple[int, str]]):
    """Forward-only iterator over the lines of a readable stream.

    Works with binary handles (lines are decoded using ``encoding`` and
    ``errors``) as well as text handles. The first line is read when the
    iterator is created.

    Usage:
        with open("notes.txt", "rb") as handle:
            for index, line in LineIterator(handle, LineIterator.SKIP_EMPTY):
                print(index, line)
    """

    INCLUDE_LINE_DELIMITER = LineIteratorFlags.INCLUDE_LINE_DELIMITER
    SKIP_EMPTY = LineIteratorFlags.SKIP_EMPTY

    def __init__(
        self,
        handle: IO,
        flags: int | None = None,
        encoding: str = "utf-8",
        errors: str = "strict",
    ) -> None:
        self._handle = handle
        self._flags = LineIteratorFlags(flags or 0)
        self._encoding = encoding
        self._errors = errors

        self._index = 1
        self._line = self._read_line()

    @property
    def flags(self) -> LineIteratorFlags:
        return self._flags

    @property
    def index(self) -> int:
        """1-based index of the current line."""
        return self._index

    @property
    def line(self) -> str | None:
        """The current line, or None once the stream is exhausted."""
        return self._line

    @property
    def exhausted(self) -> bool:
        return self._line is None

    def current(self) -> tuple[int, str] | None:
        """Return the current ``(index, line)`` pair, or None if exhausted."""
        if self._line is None:
            return None
        return self._index, self._line

    def advance(self) -> None:
        """Move to the next line. Does nothing once exhausted."""
        if self._line is not None:
            # A failed read leaves index and line untouched
            line = self._read_line()
            self._index += 1
            self._line = line

    def restart(self) -> None:
        """Restart iteration, which is only possible at the first line.

        Raises:
            UnsupportedOperationError: If the iterator has already advanced
        """
        if self._index > 1:
            raise UnsupportedOperationError("restart")

    def __iter__(self) -> LineIterator:
        self.restart()
        return self

    def __next__(self) -> tuple[int, str]:
        item = self.current()
        if item is None:
            raise StopIteration
        self.advance()
        return item

    def _read_raw_line(self) -> str | None:
        try:
            raw = self._handle.readline()
        except UnicodeError:
            # Text handles decode inside readline(); that is not a read failure
            raise
        except (OSError, ValueError) as e:
            # Read failures end the iteration just like end of stream
            logger.debug("Stopped reading lines: {}", e)
            return None

        if not raw:
            logger.debug("End of stream")
            return None

        if isinstance(raw, bytes):
            return raw.decode(self._encoding, self._errors)
        return raw

    def _read_line(self) -> str | None:
        """Read the next line the flags allow, or None at end of stream."""
        while True:
            line = self._read_raw_line()
            if line is None:
                return None

            stripped = strip_line_delimiter(line)
            if self._flags & LineIteratorFlags.SKIP_EMPTY and stripped == "":
                continue

            if self._flags & LineIteratorFlags.INCLUDE_LINE_DELIMITER:
                return line
            return stripped
