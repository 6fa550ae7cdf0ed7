"""Frame composition for the editor viewport.

A frame is built as a list of fragments and joined once, so the caller can
emit the whole redraw with a single write. Writing fragment by fragment makes
the terminal show half-drawn rows while the cursor races across the screen.
The renderer only reads the session; it never moves the cursor state.
"""

from __future__ import annotations

from .ansi import (
    CLEAR_LINE,
    CURSOR_HOME,
    ESC,
    HIDE_CURSOR,
    RESET_STYLE,
    ROW_BREAK,
    SHOW_CURSOR,
    clip_ansi_line,
    cursor_to,
    display_width,
)
from .highlight import sanitize_terminal_text
from .state import EditorSession


def content_row(session: EditorSession, index: int) -> str:
    """Return buffer line ``index`` made safe and clipped to the viewport width."""
    text = sanitize_terminal_text(session.buffer[index])
    if session.colorize is not None:
        text = session.colorize(text)
    clipped = clip_ansi_line(text, session.extent.columns)
    if ESC in clipped:
        clipped += RESET_STYLE
    return clipped


def welcome_row(session: EditorSession) -> str:
    """Return the welcome banner centred in the viewport.

    The left padding starts with one filler glyph so the banner row still
    carries the row marker. Odd leftovers round the padding up.
    """
    columns = session.extent.columns
    banner = clip_ansi_line(session.welcome_message, columns)
    padding = (columns - display_width(banner) + 1) // 2
    if padding <= 0:
        return banner
    return session.filler + " " * (padding - 1) + banner


def render_frame(session: EditorSession) -> bytes:
    """Compose one complete frame for ``session`` as terminal-ready bytes."""
    rows = session.extent.rows
    banner_row = rows // 3
    buffer_len = len(session.buffer)

    out: list[str] = [HIDE_CURSOR, CURSOR_HOME]
    for y in range(rows):
        if y < buffer_len:
            out.append(content_row(session, y))
        elif buffer_len == 0 and y == banner_row:
            out.append(welcome_row(session))
        else:
            out.append(session.filler)
        out.append(CLEAR_LINE)
        if y < rows - 1:
            out.append(ROW_BREAK)

    out.append(cursor_to(session.cursor.y + 1, session.cursor.x + 1))
    out.append(SHOW_CURSOR)
    return "".join(out).encode("utf-8", errors="replace")
