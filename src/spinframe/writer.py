"""Writers that decorate other writers."""

from __future__ import annotations

import re
from typing import Any

from spinframe.frame.aware import FrameReplacer
from spinframe.frame.aware import try_get_replacer

INDENT_UNIT = "  "

# A leading run of carriage returns and escape sequences, e.g. "\r\x1b[K".
_CONTROL_PREFIX = re.compile(r"^(?:\r|\x1b\[[0-9;?]*[A-Za-z])+")


class IndentedWriter:
    """Indents every line written through it by two spaces per depth level.

    Control sequences at the start of a write pass through unindented, so a
    component redrawing its line with ``"\\r" + CLEAR_LINE + text`` still gets
    ``text`` indented. Line replacement is forwarded to the wrapped writer
    with the indent applied to the new content.

    Example:
        indented = indented_writer(sys.stdout, 2)
        indented.write("Hello\\n")  # "    Hello\\n"
    """

    def __init__(self, writer: Any, depth: int) -> None:
        self._writer = writer
        self._indent = INDENT_UNIT * max(depth, 0)

    @property
    def indent(self) -> str:
        return self._indent

    @property
    def wrapped(self) -> Any:
        return self._writer

    def write(self, text: str) -> int:
        if text == "\n" or not text.strip():
            self._writer.write(text)
            return len(text)

        match = _CONTROL_PREFIX.match(text)
        prefix = match.group(0) if match else ""
        body = text[len(prefix) :]

        self._writer.write(prefix + self._indent_lines(body))
        return len(text)

    def _indent_lines(self, text: str) -> str:
        return "\n".join(self._indent + line if line else line for line in text.split("\n"))

    def _indent_content(self, content: str) -> str:
        return self._indent + content if content else content

    def flush(self) -> None:
        flush = getattr(self._writer, "flush", None)
        if flush is not None:
            flush()

    def isatty(self) -> bool:
        isatty = getattr(self._writer, "isatty", None)
        return bool(isatty and isatty())

    def try_get_replacer(self) -> FrameReplacer | None:
        """Return ``self`` when the wrapped writer can replace lines."""
        if try_get_replacer(self._writer) is None:
            return None
        return self

    def replace_line(self, content: str) -> None:
        replacer = try_get_replacer(self._writer)
        if replacer is not None:
            replacer.replace_line(self._indent_content(content))

    def replace_line_n(self, position: int, content: str) -> None:
        replacer = try_get_replacer(self._writer)
        if replacer is not None:
            replacer.replace_line_n(position, self._indent_content(content))

    def replace_block(self, line_count: int, lines: list[str]) -> None:
        replacer = try_get_replacer(self._writer)
        if replacer is not None:
            replacer.replace_block(line_count, [self._indent_content(line) for line in lines])


def indented_writer(writer: Any, depth: int) -> Any:
    """Wrap ``writer`` so its output is indented ``depth`` levels.

    A depth of zero or less returns ``writer`` unchanged.
    """
    if depth <= 0:
        return writer
    return IndentedWriter(writer, depth)
