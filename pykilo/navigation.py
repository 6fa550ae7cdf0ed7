"""Cursor movement within the fixed viewport.

Every command clamps silently; nothing here raises. Coordinates are floored
at zero so a viewport that has not been measured yet (zero extent) keeps the
cursor at the origin.
"""

from __future__ import annotations

from .input.keys import LogicalKey, Other
from .state import CursorPosition, EditorSession, ViewportExtent


def move_cursor(cursor: CursorPosition, extent: ViewportExtent, key: LogicalKey | Other) -> None:
    """Apply one movement key to ``cursor`` in place."""
    last_col = max(0, extent.columns - 1)
    last_row = max(0, extent.rows - 1)

    if key is LogicalKey.MOVE_LEFT:
        cursor.x = max(cursor.x - 1, 0)
    elif key is LogicalKey.MOVE_RIGHT:
        cursor.x = min(cursor.x + 1, last_col)
    elif key is LogicalKey.MOVE_UP:
        cursor.y = max(cursor.y - 1, 0)
    elif key is LogicalKey.MOVE_DOWN:
        cursor.y = min(cursor.y + 1, last_row)
    elif key is LogicalKey.PAGE_UP:
        cursor.y = 0
    elif key is LogicalKey.PAGE_DOWN:
        # One past the last visible row; kept to match long-standing behaviour.
        cursor.y = max(0, extent.rows)
    elif key is LogicalKey.HOME:
        cursor.x = 0
    elif key is LogicalKey.END:
        cursor.x = last_col


def apply_movement(session: EditorSession, key: LogicalKey | Other) -> None:
    """Move the session cursor for ``key``; non-movement keys are no-ops."""
    move_cursor(session.cursor, session.extent, key)
