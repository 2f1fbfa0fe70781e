"""Tests for progress bars and their renderers."""

from __future__ import annotations

import io
from unittest.mock import patch

from spinframe import term
from spinframe.ansi import Color
from spinframe.frame import open_frame
from spinframe.progress import BAR
from spinframe.progress import DOTS
from spinframe.progress import MINIMAL
from spinframe.progress import Progress
from spinframe.progress import RenderFunc
from spinframe.spinner import TaskComponent


class TestProgressState:
    """Tests for progress counters and completion state."""

    def test_percentage(self) -> None:
        """Test percentage is current over total."""
        p = Progress("Copy", 200, output=io.StringIO())
        p.update(50)
        assert p.percentage() == 25.0

    def test_zero_total_is_zero_percent(self) -> None:
        """Test an unknown total reports zero percent."""
        p = Progress("Scan", 0, output=io.StringIO())
        p.update(10)
        assert p.percentage() == 0.0

    def test_total_can_be_set_later(self) -> None:
        """Test set_total changes the total used for the percentage."""
        p = Progress("Download", 0, output=io.StringIO())
        p.set_total(50)
        p.update(25)
        assert p.total == 50
        assert p.percentage() == 50.0

    def test_increment(self) -> None:
        """Test increment adds one and optionally sets the message."""
        p = Progress("Items", 4, output=io.StringIO())
        p.increment()
        p.increment("second")
        assert p.current == 2
        assert p.message == "second"

    def test_complete_fills_bar(self) -> None:
        """Test complete sets current to the total."""
        p = Progress("Items", 10, output=io.StringIO())
        p.update(3)
        p.complete("done")
        assert p.current == 10
        assert p.is_completed()
        assert not p.is_failed()

    def test_update_after_complete_is_ignored(self) -> None:
        """Test updates after completion change nothing and write nothing."""
        buffer = io.StringIO()
        p = Progress("Items", 10, output=buffer)
        p.complete()
        rendered = buffer.getvalue()

        p.update(2, "late")
        p.increment()

        assert p.current == 10
        assert p.message == ""
        assert buffer.getvalue() == rendered

    def test_fail_marks_completed_and_failed(self) -> None:
        """Test fail ends the bar in the failed state."""
        p = Progress("Items", 10, output=io.StringIO())
        p.fail("broken")
        assert p.is_failed()
        assert p.is_completed()
        assert p.message == "broken"

    def test_second_complete_is_ignored(self) -> None:
        """Test only the first complete or fail draws a final line."""
        buffer = io.StringIO()
        p = Progress("Items", 10, output=buffer)
        p.complete()
        rendered = buffer.getvalue()
        p.complete("again")
        p.fail("again")
        assert buffer.getvalue() == rendered

    def test_non_positive_width_uses_default(self) -> None:
        """Test a non-positive bar width falls back to the default."""
        assert Progress("x", 1, width=0).width == 40

    def test_is_a_task_component(self) -> None:
        """Test progress bars satisfy the task component protocol."""
        assert isinstance(Progress("x", 1), TaskComponent)


class TestProgressRendering:
    """Tests for what progress bars write."""

    def test_bar_layout(self, buffer: io.StringIO) -> None:
        """Test the bar line has title, bar, percentage and counts."""
        with patch("spinframe.term.width", return_value=57):
            p = Progress("Test", 10, output=buffer, color=Color.GREEN)
            p.update(5)

        output = buffer.getvalue()
        assert output.startswith("Test      [")
        assert Color.GREEN.sprint("█" * 10 + "░" * 10) in output
        assert "  50.0% (05/10) " in output
        assert term.printable_width(output) == 57

    def test_bar_redraws_in_place(self, term_width: int, buffer: io.StringIO) -> None:
        """Test later updates redraw the same line."""
        p = Progress("Copy", 4, output=buffer)
        p.update(1)
        p.update(2)

        output = buffer.getvalue()
        assert output.count("\r\033[K") == 1
        assert "\n" not in output

    def test_complete_ends_line(self, term_width: int, buffer: io.StringIO) -> None:
        """Test complete draws a full bar and then a success line."""
        p = Progress("Copy", 4, output=buffer)
        p.update(2)
        p.complete("Copied")

        output = term.strip_codes(buffer.getvalue())
        assert "100.0%" in output
        assert output.endswith("\r✓ Copied\n")

    def test_fail_draws_red_bar(self, term_width: int, buffer: io.StringIO) -> None:
        """Test fail redraws the bar in red with a cross mark."""
        p = Progress("Copy", 10, output=buffer, color=Color.GREEN)
        p.update(5)
        p.fail("Disk full")

        output = buffer.getvalue()
        assert Color.RED.code + "█" in output
        assert Color.RED.colorize("✗") + " Disk full" in output

    def test_dots_renderer(self, term_width: int, buffer: io.StringIO) -> None:
        """Test the dots style uses filled and empty circles."""
        p = Progress("Sync", 2, output=buffer, renderer=DOTS)
        p.update(1)
        output = term.strip_codes(buffer.getvalue())
        assert "●" in output
        assert "○" in output

    def test_minimal_renderer(self, buffer: io.StringIO) -> None:
        """Test the minimal style shows title, percentage and message."""
        p = Progress("Build", 4, output=buffer, renderer=MINIMAL)
        p.update(2, "half")
        assert buffer.getvalue() == f"Build: {Color.CYAN.sprint('50.0%')} - half"

    def test_minimal_renderer_without_message(self, buffer: io.StringIO) -> None:
        """Test the minimal style omits the separator when there is no message."""
        p = Progress("Build", 4, output=buffer, renderer=MINIMAL)
        p.start()
        assert term.strip_codes(buffer.getvalue()) == "Build: 0.0%"

    def test_render_func(self, buffer: io.StringIO) -> None:
        """Test a plain function can act as a renderer."""
        renderer = RenderFunc(lambda p, out: out.write(f"{p.current}/{p.total}"))
        p = Progress("Custom", 3, output=buffer, renderer=renderer)
        p.update(1)
        p.update(2)
        assert buffer.getvalue() == "1/3\r\033[K2/3"

    def test_bar_inside_frame(self, term_width: int, buffer: io.StringIO) -> None:
        """Test a bar inside a frame renders bordered lines."""
        frame = open_frame("Work", output=buffer)
        p = Progress("Copy", 4, output=frame, renderer=BAR)
        assert p.in_frame

        p.update(1)
        p.complete("Copied")
        frame.close()

        lines = term.strip_codes(buffer.getvalue()).splitlines()
        # top border, first render, two replacements (non-TTY appends), bottom border
        assert len(lines) == 5
        assert lines[1].startswith("│ Copy")
        assert lines[3].startswith("│ ✓ Copied")
        assert all(term.printable_width(line) == term_width for line in lines)


class TestAvailableWidth:
    """Tests for the width left for the bar itself."""

    def test_standalone(self, term_width: int) -> None:
        """Test the standalone width reserves room for labels."""
        assert Progress("x", 1, output=io.StringIO()).available_width() == 48

    def test_inside_frame(self, term_width: int, buffer: io.StringIO) -> None:
        """Test a frame's borders reduce the available width."""
        frame = open_frame("Work", output=buffer)
        assert Progress("x", 1, output=frame).available_width() == 44
        frame.close()

    def test_has_minimum(self) -> None:
        """Test narrow terminals still get the minimum width."""
        with patch("spinframe.term.width", return_value=10):
            assert Progress("x", 1, output=io.StringIO()).available_width() == 20
