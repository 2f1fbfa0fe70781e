"""Tests for replacement capability detection and FrameAware rendering."""

from __future__ import annotations

import io

from spinframe import term
from spinframe.frame import FrameAware
from spinframe.frame import open_frame
from spinframe.frame import try_get_replacer
from spinframe.writer import IndentedWriter
from tests.support.stubs import DecliningWriter
from tests.support.stubs import RecordingReplacer


class TestTryGetReplacer:
    """Tests for detecting whether a writer can replace lines."""

    def test_plain_buffer_has_no_replacer(self) -> None:
        """Test a plain buffer cannot replace lines."""
        assert try_get_replacer(io.StringIO()) is None

    def test_none_has_no_replacer(self) -> None:
        """Test no writer means no replacer."""
        assert try_get_replacer(None) is None

    def test_frame_is_its_own_replacer(self, term_width: int, buffer: io.StringIO) -> None:
        """Test a frame replaces its own lines."""
        frame = open_frame("Title", output=buffer)
        assert try_get_replacer(frame) is frame
        frame.close()

    def test_structural_match(self) -> None:
        """Test any object with the replacement methods qualifies."""
        writer = RecordingReplacer()
        assert try_get_replacer(writer) is writer

    def test_explicit_query_wins(self) -> None:
        """Test a writer's own answer overrides its methods."""
        assert try_get_replacer(DecliningWriter()) is None

    def test_indented_writer_forwards_query(self, term_width: int, buffer: io.StringIO) -> None:
        """Test an indented writer can replace only when what it wraps can."""
        assert try_get_replacer(IndentedWriter(buffer, 1)) is None

        frame = open_frame("Title", output=buffer)
        indented = IndentedWriter(frame, 1)
        assert try_get_replacer(indented) is indented
        frame.close()


class TestFrameAwareStandalone:
    """Tests for rendering outside any frame."""

    def test_first_render_appends_then_redraws(self, buffer: io.StringIO) -> None:
        """Test the first render appends and later ones redraw the line."""
        aware = FrameAware(buffer)
        assert not aware.in_frame

        aware.render_content(lambda: "one")
        aware.render_content(lambda: "two")

        assert buffer.getvalue() == "one\r\033[Ktwo"
        assert not aware.first_render

    def test_builder_render(self, buffer: io.StringIO) -> None:
        """Test builder callbacks render like plain content."""
        aware = FrameAware(buffer)

        aware.render_with_builder(lambda out: out.write("a"))
        aware.render_with_builder(lambda out: out.write("b"))

        assert buffer.getvalue() == "a\r\033[Kb"

    def test_render_final_redraws_line(self, buffer: io.StringIO) -> None:
        """Test the final render always redraws the line."""
        aware = FrameAware(buffer)
        aware.render_final(lambda: "done")
        assert buffer.getvalue() == "\r\033[Kdone"

    def test_mark_rendered(self, buffer: io.StringIO) -> None:
        """Test mark_rendered makes the next render a redraw."""
        aware = FrameAware(buffer)
        aware.mark_rendered()
        aware.render_content(lambda: "x")
        assert buffer.getvalue() == "\r\033[Kx"


class TestFrameAwareInFrame:
    """Tests for rendering through a line replacer."""

    def test_first_render_appends_then_replaces(self) -> None:
        """Test the first render appends and later ones replace the line."""
        writer = RecordingReplacer()
        aware = FrameAware(writer)
        assert aware.in_frame

        aware.render_content(lambda: "one")
        aware.render_content(lambda: "two")

        assert writer.getvalue() == "one\n"
        assert writer.replaced == [("line", "two")]

    def test_render_final_replaces(self) -> None:
        """Test the final render replaces an earlier line."""
        writer = RecordingReplacer()
        aware = FrameAware(writer)
        aware.render_content(lambda: "one")

        aware.render_final(lambda: "done")

        assert writer.replaced == [("line", "done")]

    def test_render_final_without_prior_render_appends(self) -> None:
        """Test the final render appends when nothing was drawn yet."""
        writer = RecordingReplacer()
        aware = FrameAware(writer)

        aware.render_final(lambda: "done")

        assert writer.getvalue() == "done\n"
        assert writer.replaced == []

    def test_reset_appends_next_render(self) -> None:
        """Test reset makes the next render append a new line."""
        writer = RecordingReplacer()
        aware = FrameAware(writer)
        aware.render_final(lambda: "first")

        aware.reset()
        aware.render_content(lambda: "second")

        assert aware.first_render is False
        assert writer.getvalue() == "first\nsecond\n"
        assert writer.replaced == []

    def test_set_output_reevaluates(self, buffer: io.StringIO) -> None:
        """Test set_output re-detects the replacement capability."""
        aware = FrameAware(buffer)
        assert not aware.in_frame

        writer = RecordingReplacer()
        aware.set_output(writer)

        assert aware.in_frame
        assert aware.output is writer

    def test_inside_real_frame(self, term_width: int, buffer: io.StringIO) -> None:
        """Test rendering inside a real frame keeps the borders."""
        frame = open_frame("Title", output=buffer)
        aware = FrameAware(frame)

        aware.render_content(lambda: "working")
        aware.render_final(lambda: "finished")
        frame.close()

        lines = term.strip_codes(buffer.getvalue()).splitlines()
        assert lines[1].startswith("│ working")
        assert lines[2].startswith("│ finished")
