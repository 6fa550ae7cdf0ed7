"""Low-level terminal input reading.

Reads raw bytes from stdin and groups them into complete key events so the
decoder never sees a partial escape sequence. Bytes following ESC are only
waited for briefly; a lone ESC is delivered as its own event.
"""

from __future__ import annotations

import os
import select

from .keys import KeyEvent

ESC_SEQUENCE_TIMEOUT_MS = 25
MAX_SEQUENCE_BYTES = 32


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _utf8_continuation_count(lead: int) -> int:
    if lead >= 0xF0:
        return 3
    if lead >= 0xE0:
        return 2
    if lead >= 0xC0:
        return 1
    return 0


def _read_escape_sequence(fd: int, introducer: bytes) -> bytes:
    """Read a CSI/SS3 body up to and including its final byte."""
    seq = b"\x1b" + introducer
    while len(seq) < MAX_SEQUENCE_BYTES:
        part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if part is None:
            break
        seq += part
        # Final bytes are 0x40-0x7e; parameter and intermediate bytes sit below.
        if 0x40 <= part[0] <= 0x7E:
            break
    return seq


def read_key_event(fd: int, timeout_ms: int | None = None) -> KeyEvent | None:
    """Read one key event from ``fd``.

    Blocks indefinitely when ``timeout_ms`` is ``None``. Returns ``None`` at end
    of input or when the timeout elapses with nothing to read.
    """
    if timeout_ms is not None:
        ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
        if not ready:
            return None

    ch = os.read(fd, 1)
    if not ch:
        return None

    if ch != b"\x1b":
        code = ch[0]
        if code < 0x20 or code == 0x7F:
            return KeyEvent(ch.decode("ascii"), ctrl=code < 0x20)
        raw = ch
        for _ in range(_utf8_continuation_count(code)):
            part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
            if part is None:
                break
            raw += part
        text = raw.decode("utf-8", errors="replace")
        return KeyEvent(text, shift=text.isalpha() and text.isupper())

    nxt = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if nxt is None:
        return KeyEvent("\x1b")
    if nxt in {b"[", b"O"}:
        return KeyEvent(_read_escape_sequence(fd, nxt).decode("ascii", errors="replace"))
    # ESC + printable byte is how terminals report Alt/Meta combinations.
    return KeyEvent(("\x1b" + nxt.decode("utf-8", errors="replace")), meta=True)
