"""Terminal control helpers for the editor session.

Owns the raw-mode lifecycle, viewport measurement, and frame output.
Raw mode is only ever entered through ``raw_mode()`` so the saved tty state is
restored on every exit path.
"""

from __future__ import annotations

import contextlib
import logging
import os
import termios
import tty

from .ansi import CLEAR_SCREEN, CURSOR_HOME
from .state import ViewportExtent

logger = logging.getLogger(__name__)


class TerminalModeError(RuntimeError):
    """The terminal cannot be put into raw mode or measured."""


class TerminalController:
    """Manage raw-mode transitions and writes for one stdin/stdout pair."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state and bind stdin/stdout file descriptors."""
        if not os.isatty(stdin_fd):
            raise TerminalModeError("standard input is not a terminal")
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        try:
            self._saved_tty_state = termios.tcgetattr(stdin_fd)
        except termios.error as exc:
            raise TerminalModeError(f"cannot read terminal attributes: {exc}") from exc
        self._raw = False

    @property
    def is_raw(self) -> bool:
        return self._raw

    def enter_raw_mode(self) -> None:
        """Disable echo, line buffering and signal keys on stdin."""
        try:
            tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        except termios.error as exc:
            raise TerminalModeError(f"cannot enable raw mode: {exc}") from exc
        self._raw = True
        logger.debug("raw mode enabled on fd %d", self.stdin_fd)

    def restore_mode(self) -> None:
        """Restore the tty attributes captured at construction."""
        if not self._raw:
            return
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)
        self._raw = False
        logger.debug("terminal mode restored on fd %d", self.stdin_fd)

    def query_extent(self) -> ViewportExtent:
        """Return the current terminal size of stdout."""
        try:
            size = os.get_terminal_size(self.stdout_fd)
        except OSError as exc:
            raise TerminalModeError(f"cannot read window size: {exc}") from exc
        return ViewportExtent(columns=size.columns, rows=size.lines)

    def write(self, data: bytes) -> None:
        os.write(self.stdout_fd, data)

    def clear_screen(self) -> None:
        # Clear everything, then park the cursor top-left.
        self.write((CLEAR_SCREEN + CURSOR_HOME).encode("ascii"))

    @contextlib.contextmanager
    def raw_mode(self):
        """Context manager that brackets code with raw-mode enter/restore calls."""
        try:
            self.enter_raw_mode()
            yield self
        finally:
            self.restore_mode()
