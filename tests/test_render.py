"""Frame composition tests.

Frames are decoded and split back into rows so assertions read in terms of
what each terminal row shows.
"""

from __future__ import annotations

import unittest

from pykilo.render import render_frame
from pykilo.state import CursorPosition, EditorSession, LineBuffer, ViewportExtent

PREFIX = "\x1b[?25l\x1b[H"
SHOW = "\x1b[?25h"


def _session(columns: int, rows: int, lines=(), **kwargs) -> EditorSession:
    return EditorSession(
        extent=ViewportExtent(columns=columns, rows=rows),
        buffer=LineBuffer(lines),
        **kwargs,
    )


def _rows(frame: bytes, session: EditorSession) -> list[str]:
    text = frame.decode("utf-8")
    cursor = f"\x1b[{session.cursor.y + 1};{session.cursor.x + 1}H"
    assert text.startswith(PREFIX)
    assert text.endswith(cursor + SHOW)
    body = text[len(PREFIX) : -len(cursor + SHOW)]
    rows = body.split("\r\n")
    for row in rows:
        assert row.endswith("\x1b[K"), row
    return [row[: -len("\x1b[K")] for row in rows]


class RenderFrameTests(unittest.TestCase):
    def test_empty_buffer_80x24_shows_banner_on_row_eight(self) -> None:
        session = _session(80, 24)
        frame = render_frame(session)
        rows = _rows(frame, session)

        self.assertEqual(len(rows), 24)
        for y, row in enumerate(rows):
            if y == 8:
                self.assertIn(session.welcome_message, row)
                self.assertTrue(row.startswith("~ "))
            else:
                self.assertEqual(row, "~")
        self.assertTrue(frame.endswith(b"\x1b[1;1H\x1b[?25h"))

    def test_banner_appears_once_on_third_row_and_is_centred(self) -> None:
        session = _session(41, 9, welcome_message="hello")
        rows = _rows(render_frame(session), session)

        banner_rows = [y for y, row in enumerate(rows) if "hello" in row]
        self.assertEqual(banner_rows, [3])
        padding = (41 - len("hello")) // 2
        self.assertEqual(rows[3], "~" + " " * (padding - 1) + "hello")

    def test_odd_leftover_rounds_padding_up(self) -> None:
        session = _session(40, 3, welcome_message="hello")
        rows = _rows(render_frame(session), session)
        self.assertEqual(rows[1], "~" + " " * 17 + "hello")

    def test_banner_wider_than_viewport_is_truncated(self) -> None:
        session = _session(4, 3, welcome_message="abcdefgh")
        rows = _rows(render_frame(session), session)
        self.assertEqual(rows[1], "abcd")

    def test_banner_exactly_viewport_wide_has_no_padding(self) -> None:
        session = _session(5, 3, welcome_message="hello")
        rows = _rows(render_frame(session), session)
        self.assertEqual(rows[1], "hello")

    def test_content_line_replaces_banner_and_filler(self) -> None:
        session = _session(20, 6, lines=["first line"])
        rows = _rows(render_frame(session), session)

        self.assertEqual(rows[0], "first line")
        self.assertEqual(rows[1:], ["~"] * 5)

    def test_content_line_is_clipped_to_viewport(self) -> None:
        session = _session(5, 2, lines=["abcdefghij"])
        rows = _rows(render_frame(session), session)
        self.assertEqual(rows[0], "abcde")

    def test_control_bytes_in_content_are_escaped(self) -> None:
        session = _session(20, 1, lines=["a\x1b[2Jb"])
        rows = _rows(render_frame(session), session)
        self.assertEqual(rows[0], "a\\x1b[2Jb")

    def test_colorized_content_is_reset_after_row(self) -> None:
        session = _session(20, 1, lines=["abc"], colorize=lambda text: f"\x1b[31m{text}")
        rows = _rows(render_frame(session), session)
        self.assertEqual(rows[0], "\x1b[31mabc\x1b[0m")

    def test_cursor_position_is_one_based(self) -> None:
        session = _session(10, 5, cursor=CursorPosition(x=3, y=2))
        frame = render_frame(session)
        self.assertTrue(frame.endswith(b"\x1b[3;4H\x1b[?25h"))

    def test_last_row_has_no_trailing_break(self) -> None:
        frame = render_frame(_session(10, 4)).decode("utf-8")
        self.assertEqual(frame.count("\r\n"), 3)

    def test_custom_filler_glyph(self) -> None:
        session = _session(10, 2, filler="·", welcome_message="x" * 10)
        rows = _rows(render_frame(session), session)
        self.assertEqual(rows[1], "·")

    def test_zero_extent_renders_no_rows(self) -> None:
        frame = render_frame(_session(0, 0))
        self.assertEqual(frame, b"\x1b[?25l\x1b[H\x1b[1;1H\x1b[?25h")

    def test_render_is_deterministic(self) -> None:
        session = _session(30, 10, lines=["hello world"], cursor=CursorPosition(x=2, y=1))
        self.assertEqual(render_frame(session), render_frame(session))

    def test_render_does_not_move_cursor(self) -> None:
        session = _session(10, 5, cursor=CursorPosition(x=7, y=4))
        render_frame(session)
        self.assertEqual((session.cursor.x, session.cursor.y), (7, 4))


if __name__ == "__main__":
    unittest.main()
