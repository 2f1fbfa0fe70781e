"""Border rendering for box and bracket style frames.

Every method takes the depth of the frame being drawn so that one renderer
can serve a frame wherever it currently sits in the stack.
"""

from __future__ import annotations

from typing import Protocol

from spinframe import ansi
from spinframe import term
from spinframe.ansi import Color
from spinframe.frame.stack import frame_stack

TOP_LEFT = "┌"
TOP_RIGHT = "┐"
BOTTOM_LEFT = "└"
BOTTOM_RIGHT = "┘"
HORIZONTAL = "─"
VERTICAL = "│"
TEE = "├"
TEE_RIGHT = "┤"

# Prefix drawn for each ancestor frame on a content line.
VERTICAL_PREFIX = "│  "
# The current frame's own left border.
LEFT_BORDER = "│ "

MIN_AVAILABLE_WIDTH = 10


class FrameRenderer(Protocol):
    """Draws the lines that make up a frame."""

    def open_frame(self, title: str, color: Color, depth: int) -> str: ...

    def close_frame(self, elapsed: float, color: Color, depth: int) -> str: ...

    def divider(self, text: str, color: Color, depth: int) -> str: ...

    def content_line(self, content: str, color: Color, depth: int) -> str: ...


def _expand(text: str) -> str:
    return ansi.format(text) if ansi.has_template(text) else text


def _border_colors(depth: int, fallback: Color) -> list[Color]:
    colors = frame_stack.frame_colors(depth)
    return colors + [fallback] * (depth - len(colors))


def _parent_prefixes(colors: list[Color], depth: int) -> str:
    return "".join(colors[i].sprint(VERTICAL_PREFIX) for i in range(depth - 1))


def _left_borders(colors: list[Color], depth: int) -> str:
    parts = [colors[i].sprint(VERTICAL_PREFIX) for i in range(depth - 1)]
    parts.append(colors[depth - 1].sprint(LEFT_BORDER))
    return "".join(parts)


def _parent_right_borders(colors: list[Color], depth: int) -> str:
    return "".join(" " + colors[i].sprint(VERTICAL) for i in range(depth - 2, -1, -1))


def _timing(elapsed: float) -> str:
    if elapsed <= 0.001:
        return ""
    return f" ({term.format_duration(elapsed)}) "


def _fit_heading(text: str, available: int) -> str:
    """Return ``" text "``, truncated to fit a border line of ``available`` cells."""
    if not text:
        return ""

    room = available - 4
    spaced = f" {text} "
    if term.printable_width(spaced) <= room:
        return spaced

    # " " + text + "... "
    max_len = room - 5
    if max_len <= 0:
        return ""
    return f" {term.truncate(text, max_len)}... "


class BoxRenderer:
    """Fully enclosed frames with right borders for every nesting level."""

    def __init__(self, term_width: int | None = None) -> None:
        self.term_width = term.width() if term_width is None else term_width

    def _available_width(self, depth: int) -> int:
        parents = max(depth - 1, 0)
        # ancestor prefixes, ancestor right borders and the space before each
        used = parents * len(VERTICAL_PREFIX) + parents * len(VERTICAL) + parents
        return max(self.term_width - used, MIN_AVAILABLE_WIDTH)

    def open_frame(self, title: str, color: Color, depth: int) -> str:
        colors = _border_colors(depth, color)
        available = self._available_width(depth)
        heading = _fit_heading(_expand(title), available)
        fill = max(available - 4 - term.printable_width(heading), 0)

        return (
            _parent_prefixes(colors, depth)
            + color.sprint(TOP_LEFT + HORIZONTAL * 2)
            + heading
            + color.sprint(HORIZONTAL * fill + TOP_RIGHT)
            + _parent_right_borders(colors, depth)
            + "\n"
        )

    def close_frame(self, elapsed: float, color: Color, depth: int) -> str:
        colors = _border_colors(depth, color)
        available = self._available_width(depth)
        timing = _timing(elapsed)
        fill = max(available - 4 - len(timing), 0)
        border = BOTTOM_LEFT + HORIZONTAL * 2 + HORIZONTAL * fill + timing + BOTTOM_RIGHT

        return (
            _parent_prefixes(colors, depth)
            + color.sprint(border)
            + _parent_right_borders(colors, depth)
            + "\n"
        )

    def divider(self, text: str, color: Color, depth: int) -> str:
        colors = _border_colors(depth, color)
        available = self._available_width(depth)
        heading = _fit_heading(text, available)
        fill = max(available - 4 - term.printable_width(heading), 0)

        return (
            _parent_prefixes(colors, depth)
            + color.sprint(TEE + HORIZONTAL * 2)
            + heading
            + color.sprint(HORIZONTAL * fill + TEE_RIGHT)
            + _parent_right_borders(colors, depth)
            + "\n"
        )

    def content_line(self, content: str, color: Color, depth: int) -> str:
        if depth <= 0:
            return _expand(content)

        colors = _border_colors(depth, color)
        prefix_width = (depth - 1) * len(VERTICAL_PREFIX) + len(LEFT_BORDER)
        parents = depth - 1
        available = max(self.term_width - prefix_width - len(VERTICAL) - parents * 2, 1)

        processed = _expand(content)
        if term.printable_width(processed) > available:
            processed = term.truncate(processed, available - 3) + "..."
        padding = max(available - term.printable_width(processed), 0)

        return (
            _left_borders(colors, depth)
            + processed
            + " " * padding
            + colors[depth - 1].sprint(VERTICAL)
            + _parent_right_borders(colors, depth)
        )


class BracketRenderer:
    """Open-sided frames: left borders only, content is never padded."""

    def __init__(self, term_width: int | None = None) -> None:
        self.term_width = term.width() if term_width is None else term_width

    def open_frame(self, title: str, color: Color, depth: int) -> str:
        colors = _border_colors(depth, color)
        available = max(self.term_width - max(depth - 1, 0) * 5, MIN_AVAILABLE_WIDTH)
        heading = _fit_heading(_expand(title), available)
        return _parent_prefixes(colors, depth) + color.sprint(TOP_LEFT + HORIZONTAL * 2) + heading + "\n"

    def close_frame(self, elapsed: float, color: Color, depth: int) -> str:
        colors = _border_colors(depth, color)
        return (
            _parent_prefixes(colors, depth)
            + color.sprint(BOTTOM_LEFT + HORIZONTAL * 2)
            + _timing(elapsed)
            + "\n"
        )

    def divider(self, text: str, color: Color, depth: int) -> str:
        colors = _border_colors(depth, color)
        heading = f" {text} " if text else ""
        return _parent_prefixes(colors, depth) + color.sprint(TEE + HORIZONTAL * 2) + heading + "\n"

    def content_line(self, content: str, color: Color, depth: int) -> str:
        if depth <= 0:
            return _expand(content)
        return _left_borders(_border_colors(depth, color), depth) + _expand(content)
