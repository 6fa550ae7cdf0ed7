"""File loading for the line buffer.

Lines are produced lazily so the session only pays for what it consumes.
Each line decodes as UTF-8 and falls back to latin-1, which accepts any byte
sequence. A leading byte-order mark is dropped.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from itertools import islice
from pathlib import Path

from .state import LineBuffer

BOM = "\ufeff"

logger = logging.getLogger(__name__)


def decode_line(raw: bytes) -> str:
    """Decode one raw line, stripping its line terminator."""
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError:
        text = raw.decode("latin-1")
    return text.rstrip("\r\n")


def iter_lines(path: Path) -> Iterator[str]:
    """Yield lines of ``path`` without their trailing newline."""
    with path.open("rb") as handle:
        for index, raw in enumerate(handle):
            line = decode_line(raw)
            if index == 0 and line.startswith(BOM):
                line = line[len(BOM):]
            yield line


def load_line_buffer(path: Path | None, max_lines: int | None = 1) -> LineBuffer:
    """Build a ``LineBuffer`` from the first ``max_lines`` lines of ``path``.

    ``None``, directories, and unreadable files give an empty buffer.
    ``max_lines=None`` loads the whole file.
    """
    buffer = LineBuffer()
    if path is None:
        return buffer
    try:
        if path.is_dir():
            logger.info("%s is a directory, starting with an empty buffer", path)
            return buffer
        for line in islice(iter_lines(path), max_lines):
            buffer.append(line)
    except OSError as exc:
        logger.warning("cannot read %s: %s", path, exc)
        return LineBuffer()
    logger.info("loaded %d line(s) from %s", len(buffer), path)
    return buffer
