"""Progress bars driven by explicit updates.

Example:
    p = Progress("Downloading", 100, color=Color.GREEN)
    for done in range(0, 101, 10):
        p.update(done, f"{done} files")
    p.complete("Download finished!")
"""

from __future__ import annotations

import sys
import time
from datetime import timedelta
from typing import Any

from spinframe import term
from spinframe.ansi import CHECK_MARK
from spinframe.ansi import CROSS_MARK
from spinframe.ansi import Color
from spinframe.frame.aware import FrameAware
from spinframe.progress.renderer import BAR
from spinframe.progress.renderer import ProgressRenderer

DEFAULT_WIDTH = 40


class Progress:
    """A bar for work whose size is known, or becomes known later.

    Nothing animates in the background: every call to :meth:`update` or
    :meth:`increment` redraws immediately. Once :meth:`complete` or
    :meth:`fail` has been called, further updates are ignored.

    ``total`` may start at 0 and be set later with :meth:`set_total`;
    :meth:`percentage` is 0 while the total is 0.
    """

    def __init__(
        self,
        title: str,
        total: int,
        *,
        color: Color = Color.CYAN,
        width: int = DEFAULT_WIDTH,
        output: Any = None,
        renderer: ProgressRenderer = BAR,
    ) -> None:
        self._title = title
        self._total = total
        self._current = 0
        self._color = color
        self._width = width if width > 0 else DEFAULT_WIDTH
        self._frame_aware = FrameAware(sys.stdout if output is None else output)
        self._renderer = renderer
        self._start_time = time.monotonic()
        self._message = ""
        self._completed = False
        self._failed = False

    def start(self) -> None:
        """Draw the initial state."""
        self._render()

    def update(self, current: int, message: str = "") -> None:
        if self._completed:
            return
        self._current = current
        self._message = message
        self._render()

    def increment(self, message: str = "") -> None:
        if self._completed:
            return
        self._current += 1
        self._message = message
        self._render()

    def set_total(self, total: int) -> None:
        """Change the total, e.g. once the size of a download is known."""
        self._total = total

    def complete(self, message: str = "") -> None:
        """Fill the bar and draw a success line. Later calls are ignored."""
        if self._completed:
            return

        self._current = self._total
        if message:
            self._message = message
        self._completed = True
        self._render()
        self._finish(CHECK_MARK.colorize(Color.GREEN))

    def fail(self, message: str = "") -> None:
        """Draw the bar in red followed by a failure line. Later calls are ignored."""
        if self._completed or self._failed:
            return

        if message:
            self._message = message
        self._failed = True
        self._completed = True
        self._render()
        self._finish(CROSS_MARK.colorize(Color.RED))

    def set_output(self, output: Any) -> None:
        self._frame_aware.set_output(output)

    def _render(self) -> None:
        self._frame_aware.render_with_builder(lambda out: self._renderer.render(self, out))

    def _finish(self, icon: str) -> None:
        self._frame_aware.render_final(lambda: f"{icon} {self._message}")
        if not self._frame_aware.in_frame:
            self._frame_aware.output.write("\n")

    @property
    def title(self) -> str:
        return self._title

    @property
    def current(self) -> int:
        return self._current

    @property
    def total(self) -> int:
        return self._total

    @property
    def message(self) -> str:
        return self._message

    @property
    def color(self) -> Color:
        return self._color

    @property
    def width(self) -> int:
        return self._width

    @property
    def output(self) -> Any:
        return self._frame_aware.output

    @property
    def in_frame(self) -> bool:
        return self._frame_aware.in_frame

    def percentage(self) -> float:
        if self._total == 0:
            return 0.0
        return self._current / self._total * 100

    def is_completed(self) -> bool:
        return self._completed

    def is_failed(self) -> bool:
        return self._failed

    def elapsed(self) -> timedelta:
        return timedelta(seconds=time.monotonic() - self._start_time)

    def available_width(self) -> int:
        """Width of the bar column: 60% of the usable terminal width, at least 20."""
        total_width = term.width()
        if self.in_frame:
            total_width -= 6
        return max(total_width * 60 // 100, 20)

    def __repr__(self) -> str:
        return f"Progress(title={self._title!r}, current={self._current}, total={self._total})"
