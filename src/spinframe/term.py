"""Terminal measurement and layout helpers.

Width math here always works on *printable* cells: ANSI control sequences
take no space and wide characters (CJK, most emoji) take two.
"""

from __future__ import annotations

import re
import shutil
import sys
from typing import Any

from rich.cells import cell_len

DEFAULT_WIDTH = 120

_ANSI_PATTERN = re.compile(r"\x1b\[[0-9;?]*[a-zA-Z]")


def width() -> int:
    """Return the terminal width in columns, or ``DEFAULT_WIDTH`` when unknown."""
    columns = shutil.get_terminal_size(fallback=(DEFAULT_WIDTH, 24)).columns
    return columns if columns > 0 else DEFAULT_WIDTH


def is_tty(stream: Any = None) -> bool:
    """Return True if ``stream`` (default stdout) is an interactive terminal.

    Cursor movement sequences are only emitted when this holds; otherwise
    in-place updates degrade to appending new lines.
    """
    target = sys.stdout if stream is None else stream
    isatty = getattr(target, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except ValueError:
        # closed stream
        return False


def strip_codes(text: str) -> str:
    return _ANSI_PATTERN.sub("", text)


def printable_width(text: str) -> int:
    """Return the display width of ``text`` ignoring ANSI sequences.

    Example:
        printable_width("\\033[31mhello\\033[0m")  # 5
        printable_width("你好")  # 4
    """
    return cell_len(strip_codes(text))


def truncate(text: str, max_width: int) -> str:
    """Cut ``text`` to ``max_width`` printable cells, keeping escape sequences intact."""
    if max_width <= 0:
        return ""

    result: list[str] = []
    current = 0
    position = 0
    while position < len(text):
        match = _ANSI_PATTERN.match(text, position)
        if match:
            result.append(match.group(0))
            position = match.end()
            continue

        char = text[position]
        char_width = cell_len(char)
        if current + char_width > max_width:
            break
        result.append(char)
        current += char_width
        position += 1

    return "".join(result)


def truncate_and_pad(text: str, max_width: int) -> str:
    """Fit ``text`` into exactly ``max_width`` cells.

    Longer text is truncated with a ``...`` suffix, shorter text is padded
    with spaces.
    """
    if max_width <= 0:
        return ""

    if printable_width(text) > max_width:
        if max_width <= 3:
            return "." * max_width
        text = truncate(text, max_width - 3) + "..."

    padding = max(max_width - printable_width(text), 0)
    return text + " " * padding


class SectionLayout:
    """Proportional column layout with optional minimum widths.

    Weights are relative and need not sum to anything in particular.

    Example:
        layout = SectionLayout(100, 1, 3, 1).with_min_widths(15, 20, 10)
        layout.section_widths()  # [20, 60, 20]
    """

    def __init__(self, total_width: int, *weights: float) -> None:
        self.total_width = total_width
        self.weights = list(weights)
        self.min_widths: list[int] | None = None

    def with_min_widths(self, *min_widths: int) -> SectionLayout:
        self.min_widths = list(min_widths)
        return self

    def _min_width(self, index: int, default: int) -> int:
        if self.min_widths is not None and index < len(self.min_widths):
            return self.min_widths[index]
        return default

    def section_widths(self) -> list[int]:
        if not self.weights:
            return []

        total_weight = sum(self.weights)
        widths = [
            max(int(self.total_width * weight / total_weight), self._min_width(i, 0))
            for i, weight in enumerate(self.weights)
        ]

        used = sum(widths)
        if used <= self.total_width:
            return widths

        # Shrink proportionally; the last section absorbs the rounding.
        ratio = self.total_width / used
        remaining = self.total_width
        last = len(widths) - 1
        for i in range(len(widths)):
            minimum = self._min_width(i, 1)
            if i == last:
                widths[i] = max(remaining, minimum)
            else:
                widths[i] = max(int(widths[i] * ratio), minimum)
                remaining -= widths[i]

        return widths


def format_duration(seconds: float) -> str:
    """Render a duration compactly, truncated to milliseconds.

    Example:
        format_duration(0.1234)  # "123ms"
        format_duration(1.5)  # "1.5s"
        format_duration(75.25)  # "1m15.25s"
    """
    millis = int(max(seconds, 0) * 1000)
    if millis < 1000:
        return f"{millis}ms"

    minutes, millis = divmod(millis, 60_000)
    secs = f"{millis / 1000:.3f}".rstrip("0").rstrip(".")
    if minutes:
        return f"{minutes}m{secs}s"
    return f"{secs}s"
