"""Progress bar styles."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING
from typing import Protocol
from typing import TextIO

from spinframe import term
from spinframe.ansi import Color

if TYPE_CHECKING:
    from spinframe.progress.progress import Progress

# Title | bar | status, in relative weights.
SECTION_WEIGHTS = (2, 7, 1)
SECTION_MIN_WIDTHS = (10, 20, 8)
MIN_BAR_WIDTH = 5


class ProgressRenderer(Protocol):
    def render(self, progress: Progress, out: TextIO) -> None: ...


class RenderFunc:
    """Adapts a plain function into a ``ProgressRenderer``.

    Example:
        traffic = RenderFunc(
            lambda p, out: out.write(f"{'🔴' if p.percentage() < 50 else '🟢'} {p.title}")
        )
    """

    def __init__(self, func: Callable[[Progress, TextIO], None]) -> None:
        self._func = func

    def render(self, progress: Progress, out: TextIO) -> None:
        self._func(progress, out)


class CharRenderer:
    """A three-column bar drawn with one glyph for done and one for pending cells."""

    def __init__(self, completed: str, pending: str) -> None:
        self.completed = completed
        self.pending = pending

    def render(self, progress: Progress, out: TextIO) -> None:
        total_width = term.width()
        if progress.in_frame:
            # frame borders and padding
            total_width -= 6

        title_width, bar_width, status_width = (
            term.SectionLayout(total_width, *SECTION_WEIGHTS)
            .with_min_widths(*SECTION_MIN_WIDTHS)
            .section_widths()
        )

        out.write(
            term.truncate_and_pad(progress.title, title_width)
            + self.bar_section(progress, bar_width)
            + term.truncate_and_pad(progress.message, status_width)
        )

    def bar_section(self, progress: Progress, section_width: int) -> str:
        """Return ``[bar] pct% (cur/tot)`` padded to ``section_width`` cells."""
        percentage = f" {progress.percentage():5.1f}%"
        count = f" ({progress.current:02d}/{progress.total:02d}) "
        non_bar = 2 + term.printable_width(percentage) + term.printable_width(count)
        bar_width = max(section_width - non_bar, MIN_BAR_WIDTH)

        filled = 0
        if progress.total > 0:
            filled = int(bar_width * progress.current / progress.total)
        filled = min(max(filled, 0), bar_width)

        color = Color.RED if progress.is_failed() else progress.color
        bar = self.completed * filled + self.pending * (bar_width - filled)
        section = f"[{color.sprint(bar)}]{percentage}{count}"

        padding = section_width - term.printable_width(section)
        if padding > 0:
            section += " " * padding
        return section


class MinimalRenderer:
    """Title, percentage and message, without a bar."""

    def render(self, progress: Progress, out: TextIO) -> None:
        color = Color.RED if progress.is_failed() else progress.color
        text = f"{progress.title}: {color.sprint(f'{progress.percentage():.1f}%')}"
        if progress.message:
            text += f" - {progress.message}"
        out.write(text)


BAR = CharRenderer("█", "░")
DOTS = CharRenderer("●", "○")
MINIMAL = MinimalRenderer()

RENDERERS: dict[str, ProgressRenderer] = {
    "bar": BAR,
    "dots": DOTS,
    "minimal": MINIMAL,
}
