"""Shared pytest fixtures and configuration."""

from __future__ import annotations

import io
from collections.abc import Generator
from unittest.mock import patch

import pytest

from spinframe.frame.stack import color_override
from spinframe.frame.stack import frame_stack

TEST_TERM_WIDTH = 80


@pytest.fixture(autouse=True)
def reset_frame_state() -> Generator[None, None, None]:
    """Reset the process-wide frame stack and color override around every test."""
    frame_stack.clear()
    color_override.clear()
    yield
    frame_stack.clear()
    color_override.clear()


@pytest.fixture
def term_width() -> Generator[int, None, None]:
    """Pin the terminal width so border math is deterministic."""
    with patch("spinframe.term.width", return_value=TEST_TERM_WIDTH):
        yield TEST_TERM_WIDTH


@pytest.fixture
def buffer() -> io.StringIO:
    return io.StringIO()


class TTYBuffer(io.StringIO):
    """A string buffer that claims to be an interactive terminal."""

    def isatty(self) -> bool:
        return True


@pytest.fixture
def tty_buffer() -> TTYBuffer:
    return TTYBuffer()
