"""Animated spinners with a background render loop.

Example:
    s = Spinner("Loading data...")
    s.start()
    load()
    s.complete("Loaded")

    with spin("Processing files...", renderer=CLOCK, color=Color.GREEN) as s:
        s.update_message("Almost done...")
"""

from __future__ import annotations

import sys
import threading
import time
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import timedelta
from enum import Enum
from types import TracebackType
from typing import Any

from spinframe import term
from spinframe.ansi import CHECK_MARK
from spinframe.ansi import CROSS_MARK
from spinframe.ansi import Color
from spinframe.frame.aware import FrameAware
from spinframe.spinner.renderer import DOTS
from spinframe.spinner.renderer import SpinnerRenderer

DEFAULT_INTERVAL = 0.1

COLOR_CYCLE: tuple[Color, ...] = (Color.RED, Color.BLUE, Color.CYAN, Color.MAGENTA)


class SpinnerState(Enum):
    COMPLETED = "completed"
    FAILED = "failed"


class Spinner:
    """An animated indicator for work of unknown length.

    A background thread redraws the spinner every ``interval`` seconds until
    it is stopped. :meth:`stop`, :meth:`complete` and :meth:`fail` wait for
    that thread to exit before drawing the final line, so no animation frame
    can land after it.

    Args:
        message: Text shown next to the icon.
        color: Fixed icon color. When omitted the icon rotates through
            red, blue, cyan and magenta.
        interval: Seconds between redraws. Non-positive values are ignored.
        output: Destination writer. Defaults to ``sys.stdout``.
        renderer: Animation style: ``DOTS``, ``CLOCK``, ``ARROW`` or any
            object with a ``render(spinner, frame, out)`` method.
        show_elapsed: Append the elapsed time to the final line.
        suppress_render: Run the full lifecycle without writing anything.
    """

    def __init__(
        self,
        message: str,
        *,
        color: Color | None = None,
        interval: float = DEFAULT_INTERVAL,
        output: Any = None,
        renderer: SpinnerRenderer = DOTS,
        show_elapsed: bool = True,
        suppress_render: bool = False,
    ) -> None:
        self._message = message
        self._color = color if color is not None else COLOR_CYCLE[0]
        self._custom_color = color is not None
        self._interval = interval if interval > 0 else DEFAULT_INTERVAL
        self._frame_aware = FrameAware(sys.stdout if output is None else output)
        self._renderer = renderer
        self._show_elapsed = show_elapsed
        self._suppress_render = suppress_render

        self._lock = threading.RLock()
        self._running = False
        self._state = SpinnerState.COMPLETED
        self._start_time = 0.0
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None

    def __enter__(self) -> Spinner:
        self.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if exc is None:
            self.complete()
        else:
            self.fail(str(exc))

    def start(self) -> None:
        """Start animating. Does nothing if already running."""
        with self._lock:
            if self._running:
                return
            self._running = True
            self._start_time = time.monotonic()
            self._frame_aware.reset()
            self._stop_event = threading.Event()
            thread = threading.Thread(
                target=self._animate,
                args=(self._stop_event,),
                name="spinframe-spinner",
                daemon=True,
            )
            # started under the lock so _finish never sees an unstarted thread
            thread.start()
            self._thread = thread

    def stop(self) -> None:
        """Stop animating and draw a success line. Does nothing if not running."""
        self._finish(SpinnerState.COMPLETED)

    def complete(self, message: str = "") -> None:
        if message:
            self.update_message(message)
        self.stop()

    def fail(self, message: str = "") -> None:
        """Stop animating and draw a failure line. Does nothing if not running."""
        if message:
            self.update_message(message)
        self._finish(SpinnerState.FAILED)

    def _finish(self, state: SpinnerState) -> None:
        with self._lock:
            if not self._running:
                return
            self._running = False
            self._state = state
            thread = self._thread
            self._thread = None
            stop_event = self._stop_event

        stop_event.set()
        if thread is not None and thread is not threading.current_thread():
            thread.join()

        self._render_final()
        if not self._suppress_render and not self._frame_aware.in_frame:
            self._frame_aware.output.write("\n")
            self._flush()

    def update_message(self, message: str) -> None:
        with self._lock:
            self._message = message

    def set_output(self, output: Any) -> None:
        """Redirect rendering, re-detecting whether the target can replace lines."""
        with self._lock:
            self._frame_aware.set_output(output)

    def _animate(self, stop_event: threading.Event) -> None:
        frame = 0
        while not stop_event.wait(self._interval):
            self._render(frame)
            frame += 1

    def _render(self, frame: int) -> None:
        with self._lock:
            if not self._running or self._suppress_render:
                return
            self._frame_aware.render_with_builder(
                lambda out: self._renderer.render(self, frame, out)
            )

    def _render_final(self) -> None:
        if self._suppress_render:
            return

        with self._lock:
            if self._state == SpinnerState.FAILED:
                icon = CROSS_MARK.colorize(Color.RED)
            else:
                icon = CHECK_MARK.colorize(Color.GREEN)

            elapsed_text = ""
            if self._show_elapsed:
                elapsed = time.monotonic() - self._start_time
                elapsed_text = " " + Color.CYAN.colorize(f"({term.format_duration(elapsed)})")

            line = f"{icon} {self._message}{elapsed_text}"
            self._frame_aware.render_final(lambda: line)

    def _flush(self) -> None:
        flush = getattr(self._frame_aware.output, "flush", None)
        if flush is not None:
            flush()

    @property
    def message(self) -> str:
        with self._lock:
            return self._message

    @property
    def color(self) -> Color:
        return self._color

    @property
    def show_elapsed(self) -> bool:
        return self._show_elapsed

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def output(self) -> Any:
        return self._frame_aware.output

    @property
    def state(self) -> SpinnerState:
        with self._lock:
            return self._state

    def is_running(self) -> bool:
        with self._lock:
            return self._running

    def elapsed(self) -> timedelta:
        """Time since :meth:`start`, or zero when not running."""
        with self._lock:
            if not self._running:
                return timedelta(0)
            return timedelta(seconds=time.monotonic() - self._start_time)

    def current_color(self, frame: int) -> Color:
        """Icon color for animation frame ``frame``."""
        if self._custom_color:
            return self._color
        return COLOR_CYCLE[frame % len(COLOR_CYCLE)]

    def __repr__(self) -> str:
        return f"Spinner(message={self._message!r}, running={self._running})"


@contextmanager
def spin(message: str, **options: Any) -> Iterator[Spinner]:
    """Run a spinner for the duration of a ``with`` block.

    The spinner completes when the block exits cleanly and fails with the
    exception text otherwise; the exception still propagates.
    """
    with Spinner(message, **options) as s:
        yield s
