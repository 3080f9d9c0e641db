"""Tests for line splitting, tab expansion, and buffer queries."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from kiloview.buffer import LineBuffer, decode_text, expand_tabs, split_lines


class ExpandTabsTests(unittest.TestCase):
    def test_single_tab_becomes_four_spaces(self) -> None:
        self.assertEqual(expand_tabs("a\tb"), "a    b")

    def test_expansion_is_idempotent(self) -> None:
        once = expand_tabs("\tx\t\ty")
        self.assertEqual(once, "    x        y")
        self.assertEqual(expand_tabs(once), once)

    def test_line_of_only_tabs_terminates(self) -> None:
        self.assertEqual(expand_tabs("\t" * 50), " " * 200)

    def test_line_without_tabs_is_returned_unchanged(self) -> None:
        line = "plain text"
        self.assertIs(expand_tabs(line), line)


class SplitLinesTests(unittest.TestCase):
    def test_final_terminator_does_not_add_a_line(self) -> None:
        self.assertEqual(split_lines("a\nb\n"), ["a", "b"])

    def test_missing_final_terminator_keeps_last_line(self) -> None:
        self.assertEqual(split_lines("a\nb"), ["a", "b"])

    def test_crlf_terminators_are_stripped(self) -> None:
        self.assertEqual(split_lines("a\r\nb\r\n"), ["a", "b"])

    def test_bare_carriage_returns_break_lines(self) -> None:
        self.assertEqual(split_lines("alpha\rbeta\r"), ["alpha", "beta"])

    def test_unicode_and_form_feed_breaks_split_lines(self) -> None:
        self.assertEqual(split_lines("a\fb\u2028c"), ["a", "b", "c"])

    def test_blank_lines_are_kept(self) -> None:
        self.assertEqual(split_lines("\n\nx\n"), ["", "", "x"])

    def test_empty_text_has_no_lines(self) -> None:
        self.assertEqual(split_lines(""), [])


class DecodeTextTests(unittest.TestCase):
    def test_utf8_with_bom(self) -> None:
        self.assertEqual(decode_text("\ufeffhé".encode("utf-8")), "hé")

    def test_invalid_utf8_falls_back_to_latin1(self) -> None:
        self.assertEqual(decode_text(b"caf\xe9"), "café")


class LineBufferTests(unittest.TestCase):
    def test_new_buffer_is_empty(self) -> None:
        buffer = LineBuffer()
        self.assertTrue(buffer.is_empty())
        self.assertEqual(buffer.line_count(), 0)

    def test_load_expands_tabs_and_splits_lines(self) -> None:
        buffer = LineBuffer.from_bytes(b"one\n\ttwo\nthree\n")

        self.assertEqual(buffer.lines, ("one", "    two", "three"))
        self.assertEqual(buffer.line_count(), 3)
        self.assertEqual(buffer.line_length(1), 7)

    def test_load_splits_on_bare_carriage_returns(self) -> None:
        buffer = LineBuffer.from_bytes(b"alpha\rbeta\r")

        self.assertEqual(buffer.lines, ("alpha", "beta"))
        self.assertEqual(buffer.line_count(), 2)
        self.assertEqual(buffer.line_length(0), 5)

    def test_load_replaces_previous_contents(self) -> None:
        buffer = LineBuffer.from_bytes(b"old\nlines\n")
        buffer.load(b"new\n")
        self.assertEqual(buffer.lines, ("new",))

    def test_line_length_out_of_range_is_zero(self) -> None:
        buffer = LineBuffer(["abc"])
        self.assertEqual(buffer.line_length(-1), 0)
        self.assertEqual(buffer.line_length(1), 0)

    def test_line_slice_clamps_to_line(self) -> None:
        buffer = LineBuffer(["abcdefgh"])

        self.assertEqual(buffer.line_slice(0, 0, 3), "abc")
        self.assertEqual(buffer.line_slice(0, 5, 100), "fgh")
        self.assertEqual(buffer.line_slice(0, 8, 12), "")
        self.assertEqual(buffer.line_slice(0, 20, 30), "")
        self.assertEqual(buffer.line_slice(3, 0, 5), "")

    def test_load_path_reads_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "notes.txt"
            target.write_bytes(b"alpha\n\tbeta\n")
            buffer = LineBuffer()
            buffer.load_path(target)

        self.assertEqual(buffer.lines, ("alpha", "    beta"))

    def test_load_path_error_keeps_previous_contents(self) -> None:
        buffer = LineBuffer.from_bytes(b"keep me\n")
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(FileNotFoundError):
                buffer.load_path(Path(tmp) / "missing.txt")

        self.assertEqual(buffer.lines, ("keep me",))

    def test_load_path_error_on_first_load_leaves_buffer_empty(self) -> None:
        buffer = LineBuffer()
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(OSError):
                buffer.load_path(Path(tmp))

        self.assertTrue(buffer.is_empty())


if __name__ == "__main__":
    unittest.main()
