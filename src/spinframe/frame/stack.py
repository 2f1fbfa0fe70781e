"""Process-wide bookkeeping for open frames.

A frame's rendering depth is its live, 1-based position in ``frame_stack``,
looked up every time a line is formatted. Frames holding a reference to an
outer frame therefore keep drawing the right number of border prefixes
even after inner frames have closed.

Lock discipline: ``FrameStack`` and ``ColorOverride`` each own one lock.
``FrameStack.frame_colors`` takes the stack lock and then the override
lock, never the reverse.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING

from spinframe.ansi import Color

if TYPE_CHECKING:
    from spinframe.frame.frame import Frame


class ColorOverride:
    """Global color knob that supersedes every frame's own color when set.

    Used to get deterministic output in tests.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._color: Color | None = None

    def get(self) -> Color | None:
        with self._lock:
            return self._color

    def set(self, color: Color) -> None:
        with self._lock:
            self._color = color

    def clear(self) -> None:
        with self._lock:
            self._color = None

    def resolve(self, color: Color) -> Color:
        """Return the override if one is set, else ``color``."""
        with self._lock:
            return self._color if self._color is not None else color


class FrameStack:
    """LIFO list of open frames guarded by its own lock."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._frames: list[Frame] = []

    @property
    def lock(self) -> threading.RLock:
        """The reentrant stack lock, for callers that need several steps to be atomic."""
        return self._lock

    def push(self, frame: Frame) -> None:
        with self._lock:
            self._frames.append(frame)

    def pop(self) -> Frame | None:
        with self._lock:
            if not self._frames:
                return None
            return self._frames.pop()

    def pop_if_top(self, frame: Frame) -> bool:
        """Pop ``frame`` only if it is the innermost open frame.

        Returns True when it was popped.
        """
        with self._lock:
            if not self._frames or self._frames[-1] is not frame:
                return False
            self._frames.pop()
            return True

    def current(self) -> Frame | None:
        with self._lock:
            return self._frames[-1] if self._frames else None

    def depth(self) -> int:
        with self._lock:
            return len(self._frames)

    def frame_depth(self, frame: Frame) -> int:
        """Return the 1-based position of ``frame``, or 0 if it is not open."""
        with self._lock:
            for index, candidate in enumerate(self._frames):
                if candidate is frame:
                    return index + 1
            return 0

    def frame_colors(self, max_depth: int) -> list[Color]:
        """Return the effective colors of the outermost ``max_depth`` frames."""
        with self._lock:
            return [
                color_override.resolve(frame.color) for frame in self._frames[:max(max_depth, 0)]
            ]

    def clear(self) -> None:
        """Forget every open frame (mainly for testing)."""
        with self._lock:
            self._frames.clear()


frame_stack = FrameStack()
color_override = ColorOverride()


@contextmanager
def override_color(color: Color) -> Iterator[None]:
    """Temporarily force every frame to render in ``color``.

    Example:
        with override_color(Color.WHITE):
            frame = open_frame("Deterministic")
    """
    previous = color_override.get()
    color_override.set(color)
    try:
        yield
    finally:
        if previous is None:
            color_override.clear()
        else:
            color_override.set(previous)
