"""Main interactive event loop.

One event is read, decoded, applied and rendered before the next read, so
the session is never observed half-updated. The read blocks without timeout;
there is no idle redraw.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable

from .input import MOVEMENT_KEYS, KeyEvent, LogicalKey, decode
from .navigation import apply_movement
from .render import render_frame
from .state import EditorSession
from .terminal import TerminalController

logger = logging.getLogger(__name__)


class LoopState(enum.Enum):
    RUNNING = "running"
    TERMINATING = "terminating"


def process_event(session: EditorSession, event: KeyEvent) -> LoopState:
    """Decode ``event`` and apply it to ``session``; return the next loop state."""
    key = decode(event)
    if key is LogicalKey.QUIT:
        return LoopState.TERMINATING
    if key in MOVEMENT_KEYS:
        apply_movement(session, key)
    return LoopState.RUNNING


def run_main_loop(
    session: EditorSession,
    terminal: TerminalController,
    read_event: Callable[[], KeyEvent | None],
) -> None:
    """Run the editor until Quit (or end of input), then restore the terminal.

    A frame is written after the initial setup and after every event,
    including the Quit that ends the loop.
    """
    with terminal.raw_mode():
        terminal.write(render_frame(session))
        state = LoopState.RUNNING
        while state is LoopState.RUNNING:
            event = read_event()
            if event is None:
                logger.info("input closed, terminating")
                break
            state = process_event(session, event)
            terminal.write(render_frame(session))
    logger.info("editor loop finished at cursor (%d, %d)", session.cursor.x, session.cursor.y)
