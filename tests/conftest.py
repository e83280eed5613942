"""
Pytest configuration and shared fixtures for docprimitives tests.
"""
import io
import os

import pytest

SAMPLE_LINES = [
    "Lorem ipsum",
    "dolor sit amet,",
    "consetetur sadipscing elitr",
    "",
    "sed",
    "diam nonumy",
    "eirmod tempor invidunt",
    "",
]


@pytest.fixture
def sample_text() -> str:
    """Eight lines, two of them empty, each ending in the platform terminator."""
    return "".join(line + os.linesep for line in SAMPLE_LINES)


@pytest.fixture
def make_stream():
    """Build an in-memory binary stream positioned at its start."""

    def _make(text: str) -> io.BytesIO:
        return io.BytesIO(text.encode("utf-8"))

    return _make
