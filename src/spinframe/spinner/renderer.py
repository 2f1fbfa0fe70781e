"""Spinner animation styles."""

from __future__ import annotations

from collections.abc import Callable
from collections.abc import Sequence
from typing import TYPE_CHECKING
from typing import Protocol
from typing import TextIO

from spinframe import ansi
from spinframe.ansi import Icon

if TYPE_CHECKING:
    from spinframe.spinner.spinner import Spinner


class SpinnerRenderer(Protocol):
    def render(self, spinner: Spinner, frame: int, out: TextIO) -> None: ...


class RenderFunc:
    """Adapts a plain function into a ``SpinnerRenderer``.

    Example:
        pulse = RenderFunc(lambda s, frame, out: out.write(f"{'.' * (frame % 4)} {s.message}"))
        Spinner("Waiting", renderer=pulse)
    """

    def __init__(self, func: Callable[[Spinner, int, TextIO], None]) -> None:
        self._func = func

    def render(self, spinner: Spinner, frame: int, out: TextIO) -> None:
        self._func(spinner, frame, out)


class IconCycleRenderer:
    """Draws one icon from a fixed cycle followed by the spinner message."""

    def __init__(self, icons: Sequence[Icon]) -> None:
        if not icons:
            raise ValueError("icon cycle cannot be empty")
        self.icons = tuple(icons)

    def render(self, spinner: Spinner, frame: int, out: TextIO) -> None:
        icon = self.icons[frame % len(self.icons)]
        out.write(f"{icon.colorize(spinner.current_color(frame))} {spinner.message}")


DOTS = IconCycleRenderer(
    [
        ansi.SPINNER_1,
        ansi.SPINNER_2,
        ansi.SPINNER_3,
        ansi.SPINNER_4,
        ansi.SPINNER_5,
        ansi.SPINNER_6,
        ansi.SPINNER_7,
        ansi.SPINNER_8,
    ]
)
# Every other braille frame, for a slower looking rotation.
CLOCK = IconCycleRenderer([ansi.SPINNER_1, ansi.SPINNER_3, ansi.SPINNER_5, ansi.SPINNER_7])
ARROW = IconCycleRenderer([ansi.ARROW_RIGHT, ansi.ARROW_DOWN, ansi.ARROW_LEFT, ansi.ARROW_UP])

RENDERERS: dict[str, SpinnerRenderer] = {
    "dots": DOTS,
    "clock": CLOCK,
    "arrow": ARROW,
}
