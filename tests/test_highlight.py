"""Tests for content sanitization and Pygments line colouring."""

from __future__ import annotations

import unittest
from pathlib import Path

from pykilo.ansi import ANSI_ESCAPE_RE
from pykilo.highlight import colorize_line, line_colorizer, normalize_style, sanitize_terminal_text


class SanitizeTests(unittest.TestCase):
    def test_plain_text_is_unchanged(self) -> None:
        self.assertEqual(sanitize_terminal_text("hello\tworld"), "hello\tworld")

    def test_control_bytes_are_escaped(self) -> None:
        self.assertEqual(sanitize_terminal_text("a\x07b\x1bc\x7f\x9b"), "a\\x07b\\x1bc\\x7f\\x9b")


class ColorizeTests(unittest.TestCase):
    def test_python_line_gets_ansi_colour_and_keeps_text(self) -> None:
        line = "def main(): return 1"
        rendered = colorize_line(line, Path("demo.py"))
        self.assertIn("\x1b[", rendered)
        self.assertEqual(ANSI_ESCAPE_RE.sub("", rendered), line)

    def test_unknown_file_type_is_left_plain(self) -> None:
        self.assertEqual(colorize_line("plain words", Path("notes.unknownext")), "plain words")

    def test_unknown_style_falls_back_to_default(self) -> None:
        self.assertEqual(normalize_style("no-such-style-here"), "monokai")

    def test_line_colorizer_disabled_cases(self) -> None:
        self.assertIsNone(line_colorizer(None, "monokai", True))
        self.assertIsNone(line_colorizer(Path("a.py"), "monokai", False))
        colorize = line_colorizer(Path("a.py"), "monokai", True)
        self.assertIsNotNone(colorize)
        self.assertEqual(ANSI_ESCAPE_RE.sub("", colorize("x = 1")), "x = 1")


if __name__ == "__main__":
    unittest.main()
