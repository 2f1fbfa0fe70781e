"""Bordered, nestable output regions.

Example:
    with open_frame("Deployment", color=Color.BLUE) as outer:
        outer.println("Starting deployment...")
        with open_frame("Database", color=Color.GREEN) as inner:
            inner.println("Migrating database...")
        outer.println("Deployment complete!")
"""

from __future__ import annotations

import sys
import time
from enum import Enum
from typing import Any
from typing import TextIO

from spinframe import ansi
from spinframe import term
from spinframe.ansi import Color
from spinframe.frame.renderer import BoxRenderer
from spinframe.frame.renderer import BracketRenderer
from spinframe.frame.renderer import FrameRenderer
from spinframe.frame.stack import color_override
from spinframe.frame.stack import frame_stack


class FrameStyle(str, Enum):
    """How a frame draws its borders."""

    BOX = "box"
    BRACKET = "bracket"


def _make_renderer(style: FrameStyle) -> FrameRenderer:
    width = term.width()
    if style == FrameStyle.BRACKET:
        return BracketRenderer(width)
    return BoxRenderer(width)


class Frame:
    """A writer that wraps every line it receives in the borders of its nesting level.

    Frames are created through :func:`open_frame`, which pushes them onto the
    process-wide stack and draws the top border. Always close a frame, either
    explicitly or by using it as a context manager.
    """

    def __init__(
        self,
        title: str,
        *,
        color: Color = Color.CYAN,
        style: FrameStyle = FrameStyle.BOX,
        output: TextIO | Any | None = None,
    ) -> None:
        self._title = title
        self._color = color
        self._style = FrameStyle(style)
        self._output = sys.stdout if output is None else output
        self._renderer = _make_renderer(self._style)
        self._start_time = time.monotonic()
        self._needs_newline = False

    def __enter__(self) -> Frame:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def title(self) -> str:
        return self._title

    @property
    def color(self) -> Color:
        """The color this frame was configured with (before any override)."""
        return self._color

    @property
    def style(self) -> FrameStyle:
        return self._style

    @property
    def output(self) -> Any:
        return self._output

    def _effective_color(self) -> Color:
        return color_override.resolve(self._color)

    def _depth(self) -> int:
        return frame_stack.frame_depth(self)

    def _emit(self, text: str) -> None:
        self._output.write(text)

    def _open(self) -> None:
        frame_stack.push(self)
        self._emit(self._renderer.open_frame(self._title, self._effective_color(), self._depth()))

    def close(self) -> None:
        """Draw the bottom border and pop the frame.

        Ignored unless this frame is the innermost open one.
        """
        elapsed = time.monotonic() - self._start_time
        # check, render and pop as one step so a concurrent push cannot be popped
        with frame_stack.lock:
            if frame_stack.current() is not self:
                return
            closing = self._renderer.close_frame(elapsed, self._effective_color(), self._depth())
            frame_stack.pop_if_top(self)
        self._emit(closing)
        self.flush()

    def format_line(self, content: str) -> str:
        """Wrap one line of content with the borders for this frame's live depth."""
        return self._renderer.content_line(content, self._effective_color(), self._depth())

    def write(self, text: str) -> int:
        if not text:
            return 0

        lines = text.split("\n")
        ends_with_newline = text.endswith("\n")
        if ends_with_newline:
            lines.pop()

        parts: list[str] = []
        for index, line in enumerate(lines):
            if index > 0 or self._needs_newline:
                parts.append("\n")
            parts.append(self.format_line(line))

        if ends_with_newline:
            parts.append("\n")
        self._needs_newline = not ends_with_newline

        self._emit("".join(parts))
        return len(text)

    def flush(self) -> None:
        flush = getattr(self._output, "flush", None)
        if flush is not None:
            flush()

    def isatty(self) -> bool:
        return term.is_tty(self._output)

    def print(self, message: str, *args: Any) -> None:
        """Write ``message % args`` without a trailing newline."""
        self.write(message % args if args else message)

    def println(self, message: str = "", *args: Any) -> None:
        """Write ``message % args`` followed by a newline."""
        self.write((message % args if args else message) + "\n")

    def divider(self, heading: str = "") -> None:
        """Draw a horizontal rule across the frame, optionally with a heading."""
        self._emit(self._renderer.divider(heading, self._effective_color(), self._depth()))

    def replace_line(self, content: str) -> None:
        """Replace the last line written with ``content``.

        On a terminal the cursor moves up one line and the line is cleared;
        otherwise the new line is simply appended.
        """
        formatted = self.format_line(content)
        if term.is_tty(self._output):
            self._emit(ansi.move_cursor_up(1) + ansi.CLEAR_LINE + formatted + "\n")
        else:
            self._emit(formatted + "\n")

    def replace_line_n(self, position: int, content: str) -> None:
        """Replace the line ``position`` lines above the cursor, then move back down.

        Positions below 1 behave like :meth:`replace_line`.
        """
        if position < 1:
            self.replace_line(content)
            return

        formatted = self.format_line(content)
        if term.is_tty(self._output):
            self._emit(
                ansi.move_cursor_up(position)
                + ansi.CLEAR_LINE
                + formatted
                + ansi.move_cursor_down(position)
            )
        else:
            self._emit(formatted + "\n")

    def replace_block(self, line_count: int, lines: list[str]) -> None:
        """Replace the last ``line_count`` lines with ``lines``."""
        if line_count < 1:
            return

        if not term.is_tty(self._output):
            for line in lines:
                self._emit(self.format_line(line) + "\n")
            return

        parts: list[str] = []
        if line_count > 1:
            parts.append(ansi.move_cursor_up(line_count - 1))
        parts.append("\n".join(ansi.CLEAR_LINE for _ in range(line_count)))

        if lines:
            if line_count > 1:
                parts.append(ansi.move_cursor_up(line_count - 1))
            parts.append("\n".join(self.format_line(line) for line in lines))

        self._emit("".join(parts))

    def __repr__(self) -> str:
        return f"Frame(title={self._title!r}, depth={self._depth()})"


def open_frame(
    title: str,
    *,
    color: Color = Color.CYAN,
    style: FrameStyle = FrameStyle.BOX,
    output: TextIO | Any | None = None,
) -> Frame:
    """Open a new frame and draw its top border.

    Args:
        title: Heading shown in the top border. May contain ``{{...}}`` templates.
        color: Border color.
        style: ``FrameStyle.BOX`` for full borders, ``FrameStyle.BRACKET`` for
            left borders only.
        output: Destination writer. Defaults to ``sys.stdout``.

    Returns:
        The open frame, usable as a writer and as a context manager.
    """
    frame = Frame(title, color=color, style=style, output=output)
    frame._open()
    return frame
