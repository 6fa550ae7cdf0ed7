"""Editor bootstrap: terminal checks, buffer loading, session creation.

Environment failures (no TTY, unreadable window size, raw mode refused) are
fatal and reported before any frame is drawn.
"""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from functools import partial
from pathlib import Path

from .highlight import DEFAULT_STYLE, line_colorizer
from .input import read_key_event
from .loop import run_main_loop
from .source import load_line_buffer
from .state import DEFAULT_FILLER, DEFAULT_WELCOME_MESSAGE, EditorSession
from .terminal import TerminalController, TerminalModeError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EditorOptions:
    path: Path | None = None
    style: str = DEFAULT_STYLE
    no_color: bool = False
    filler: str = DEFAULT_FILLER
    welcome_message: str = DEFAULT_WELCOME_MESSAGE
    clear_on_exit: bool = False


def run_editor(options: EditorOptions) -> None:
    """Run one interactive editor session on the process's stdin/stdout."""
    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()

    try:
        terminal = TerminalController(stdin_fd, stdout_fd)
        extent = terminal.query_extent()
    except TerminalModeError as exc:
        logger.error("terminal setup failed: %s", exc)
        raise SystemExit(f"pykilo: {exc}") from exc
    logger.info("viewport is %d columns x %d rows", extent.columns, extent.rows)

    buffer = load_line_buffer(options.path)
    colorize_enabled = not options.no_color and os.isatty(stdout_fd)
    session = EditorSession(
        extent=extent,
        buffer=buffer,
        welcome_message=options.welcome_message,
        filler=options.filler,
        colorize=line_colorizer(options.path, options.style, colorize_enabled),
    )

    try:
        run_main_loop(session, terminal, partial(read_key_event, stdin_fd))
    except TerminalModeError as exc:
        logger.error("raw mode unavailable: %s", exc)
        raise SystemExit(f"pykilo: {exc}") from exc

    if options.clear_on_exit:
        terminal.clear_screen()
