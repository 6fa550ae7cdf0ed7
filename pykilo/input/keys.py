"""Key-sequence decoding into the editor's logical key vocabulary.

Several terminal emulators send different escape sequences for the same key,
so decoding is a static table checked in precedence order. The first entry
listing a sequence wins; anything unlisted decodes to ``Other``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class LogicalKey(Enum):
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    HOME = "home"
    END = "end"
    DELETE = "delete"
    QUIT = "quit"


@dataclass(frozen=True)
class Other:
    """Fallback decode result carrying the unrecognized raw sequence."""

    raw: str


@dataclass(frozen=True)
class KeyEvent:
    """One complete key event as delivered by the input layer.

    Modifier flags describe how the sequence was produced; decoding looks only
    at ``sequence``.
    """

    sequence: str
    ctrl: bool = False
    meta: bool = False
    shift: bool = False


QUIT_SEQUENCE = "\x11"

KEY_TABLE: tuple[tuple[tuple[str, ...], LogicalKey], ...] = (
    (("\x1b[A",), LogicalKey.MOVE_UP),
    (("\x1b[B",), LogicalKey.MOVE_DOWN),
    (("\x1b[C",), LogicalKey.MOVE_RIGHT),
    (("\x1b[D",), LogicalKey.MOVE_LEFT),
    (("\x1b[5~",), LogicalKey.PAGE_UP),
    (("\x1b[6~",), LogicalKey.PAGE_DOWN),
    (("\x1b[H", "\x1b[1~", "\x1b[7~", "\x1bOH"), LogicalKey.HOME),
    (("\x1b[4~", "\x1b[8~", "\x1b[F", "\x1bOF"), LogicalKey.END),
    (("\x1b[3~",), LogicalKey.DELETE),
    # vi-style fallback for terminals without arrow keys.
    (("w",), LogicalKey.MOVE_UP),
    (("s",), LogicalKey.MOVE_DOWN),
    (("a",), LogicalKey.MOVE_LEFT),
    (("d",), LogicalKey.MOVE_RIGHT),
    ((QUIT_SEQUENCE,), LogicalKey.QUIT),
)

MOVEMENT_KEYS = frozenset(
    {
        LogicalKey.MOVE_UP,
        LogicalKey.MOVE_DOWN,
        LogicalKey.MOVE_LEFT,
        LogicalKey.MOVE_RIGHT,
        LogicalKey.PAGE_UP,
        LogicalKey.PAGE_DOWN,
        LogicalKey.HOME,
        LogicalKey.END,
    }
)


def _build_lookup() -> dict[str, LogicalKey]:
    lookup: dict[str, LogicalKey] = {}
    for sequences, key in KEY_TABLE:
        for sequence in sequences:
            lookup.setdefault(sequence, key)
    return lookup


_LOOKUP = _build_lookup()


def decode(event: KeyEvent) -> LogicalKey | Other:
    """Map one key event to exactly one logical key. Never raises."""
    key = _LOOKUP.get(event.sequence)
    if key is None:
        return Other(event.sequence)
    return key
