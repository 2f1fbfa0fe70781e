"""Tests for the indenting writer decorator."""

from __future__ import annotations

import io

from spinframe.writer import IndentedWriter
from spinframe.writer import indented_writer
from tests.support.stubs import RecordingReplacer


class TestIndentedWriterFactory:
    """Tests for choosing between the raw and the indented writer."""

    def test_zero_depth_returns_writer(self, buffer: io.StringIO) -> None:
        """Test depth zero returns the writer unchanged."""
        assert indented_writer(buffer, 0) is buffer

    def test_negative_depth_returns_writer(self, buffer: io.StringIO) -> None:
        """Test a negative depth returns the writer unchanged."""
        assert indented_writer(buffer, -1) is buffer

    def test_two_spaces_per_level(self, buffer: io.StringIO) -> None:
        """Test each depth level adds two spaces of indent."""
        writer = indented_writer(buffer, 3)
        assert isinstance(writer, IndentedWriter)
        assert writer.indent == "      "


class TestIndentedWriterWrite:
    """Tests for indenting written text."""

    def test_indents_line(self, buffer: io.StringIO) -> None:
        """Test a line is prefixed with the indent."""
        IndentedWriter(buffer, 2).write("Hello\n")
        assert buffer.getvalue() == "    Hello\n"

    def test_returns_input_length(self, buffer: io.StringIO) -> None:
        """Test write reports the length of the text it was given."""
        assert IndentedWriter(buffer, 1).write("abc") == 3

    def test_bare_newline_passes_through(self, buffer: io.StringIO) -> None:
        """Test a lone newline is not indented."""
        IndentedWriter(buffer, 1).write("\n")
        assert buffer.getvalue() == "\n"

    def test_blank_content_passes_through(self, buffer: io.StringIO) -> None:
        """Test whitespace-only text is not indented."""
        IndentedWriter(buffer, 1).write("   ")
        assert buffer.getvalue() == "   "

    def test_multi_line_skips_empty_lines(self, buffer: io.StringIO) -> None:
        """Test each non-empty line is indented and empty lines are left alone."""
        IndentedWriter(buffer, 1).write("a\n\nb\n")
        assert buffer.getvalue() == "  a\n\n  b\n"

    def test_control_prefix_is_not_indented(self, buffer: io.StringIO) -> None:
        """Test the indent goes after a leading carriage return and clear."""
        IndentedWriter(buffer, 1).write("\r\033[Kspinning")
        assert buffer.getvalue() == "\r\033[K  spinning"

    def test_bare_control_sequence(self, buffer: io.StringIO) -> None:
        """Test control codes with no text are passed through."""
        IndentedWriter(buffer, 1).write("\r\033[K")
        assert buffer.getvalue() == "\r\033[K"

    def test_inline_color_is_indented(self, buffer: io.StringIO) -> None:
        """Test the indent goes after a leading color code."""
        IndentedWriter(buffer, 1).write("\033[31mred\033[0m")
        assert buffer.getvalue() == "\033[31m  red\033[0m"


class TestIndentedWriterReplace:
    """Tests for forwarding line replacement with the indent."""

    def test_replace_line_adds_indent(self) -> None:
        """Test replace_line forwards indented content."""
        target = RecordingReplacer()
        IndentedWriter(target, 2).replace_line("new")
        assert target.replaced == [("line", "    new")]

    def test_replace_line_keeps_empty_content(self) -> None:
        """Test empty content is forwarded without an indent."""
        target = RecordingReplacer()
        IndentedWriter(target, 2).replace_line("")
        assert target.replaced == [("line", "")]

    def test_replace_line_n(self) -> None:
        """Test replace_line_n forwards the position and indented content."""
        target = RecordingReplacer()
        IndentedWriter(target, 1).replace_line_n(3, "x")
        assert target.replaced == [("line_n", 3, "  x")]

    def test_replace_block(self) -> None:
        """Test replace_block indents every non-empty line."""
        target = RecordingReplacer()
        IndentedWriter(target, 1).replace_block(2, ["a", "", "b"])
        assert target.replaced == [("block", 2, ["  a", "", "  b"])]

    def test_replace_without_capability_is_noop(self, buffer: io.StringIO) -> None:
        """Test replacement does nothing when the target cannot replace lines."""
        writer = IndentedWriter(buffer, 1)
        writer.replace_line("x")
        writer.replace_block(1, ["y"])
        assert buffer.getvalue() == ""

    def test_nested_indented_writers(self) -> None:
        """Test nested indented writers add their indents together."""
        target = RecordingReplacer()
        outer = IndentedWriter(target, 1)
        inner = IndentedWriter(outer, 1)

        assert inner.try_get_replacer() is inner
        inner.replace_line("deep")

        assert target.replaced == [("line", "    deep")]
