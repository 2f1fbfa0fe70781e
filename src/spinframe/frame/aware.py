"""Rendering glue shared by components that redraw their own line."""

from __future__ import annotations

import io
from collections.abc import Callable
from typing import Any
from typing import Protocol
from typing import runtime_checkable

from spinframe import ansi


@runtime_checkable
class FrameReplacer(Protocol):
    """A writer able to rewrite lines it has already emitted."""

    def replace_line(self, content: str) -> None: ...

    def replace_line_n(self, position: int, content: str) -> None: ...

    def replace_block(self, line_count: int, lines: list[str]) -> None: ...


def try_get_replacer(writer: Any) -> FrameReplacer | None:
    """Return the in-place replacement capability of ``writer``, if any.

    Writers that wrap another writer answer through their own
    ``try_get_replacer()`` so that the capability reflects what they wrap.
    """
    if writer is None:
        return None

    query = getattr(writer, "try_get_replacer", None)
    if callable(query):
        return query()

    if isinstance(writer, FrameReplacer):
        return writer
    return None


def _flush(writer: Any) -> None:
    flush = getattr(writer, "flush", None)
    if flush is not None:
        flush()


class FrameAware:
    """Tracks where a component renders and how to redraw it there.

    Inside a frame-aware writer the first render appends a line and later
    renders replace it. Standalone, later renders return the carriage and
    clear the line instead.
    """

    def __init__(self, output: Any) -> None:
        self._output = output
        self._replacer = try_get_replacer(output)
        self._first_render = True

    @property
    def output(self) -> Any:
        return self._output

    @property
    def in_frame(self) -> bool:
        return self._replacer is not None

    @property
    def first_render(self) -> bool:
        return self._first_render

    def mark_rendered(self) -> None:
        self._first_render = False

    def reset(self) -> None:
        """Treat the next render as the first, e.g. when a component restarts."""
        self._first_render = True

    def set_output(self, output: Any) -> None:
        self._output = output
        self._replacer = try_get_replacer(output)

    def render_content(self, render: Callable[[], str]) -> None:
        content = render()
        if self.in_frame:
            self._render_in_frame(content)
        else:
            self._render_standalone(content)

    def render_with_builder(self, render: Callable[[io.StringIO], None]) -> None:
        """Render through a callback that writes into a string buffer."""
        buffer = io.StringIO()
        render(buffer)
        content = buffer.getvalue()
        if self.in_frame:
            self._render_in_frame(content)
        else:
            self._render_standalone(content)

    def render_final(self, render: Callable[[], str]) -> None:
        content = render()
        if self._replacer is not None:
            if self._first_render:
                self._output.write(content + "\n")
                self._first_render = False
            else:
                self._replacer.replace_line(content)
        else:
            self._output.write("\r" + ansi.CLEAR_LINE + content)
            _flush(self._output)

    def _render_in_frame(self, content: str) -> None:
        if self._first_render or self._replacer is None:
            self._output.write(content + "\n")
            self._first_render = False
        else:
            self._replacer.replace_line(content)

    def _render_standalone(self, content: str) -> None:
        if self._first_render:
            self._output.write(content)
            self._first_render = False
        else:
            self._output.write("\r" + ansi.CLEAR_LINE + content)
        _flush(self._output)
