"""Content-line sanitization and Pygments syntax colouring.

Control bytes in file content are escaped before anything reaches the
terminal. Colouring is optional and picks a lexer from the file name.
"""

from __future__ import annotations

import logging
import re
from functools import lru_cache, partial
from pathlib import Path
from typing import Callable

from pygments import highlight as pygments_highlight
from pygments.formatters import TerminalFormatter
from pygments.lexers import TextLexer, get_lexer_for_filename
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

DEFAULT_STYLE = "monokai"

_CONTROL_RE = re.compile(r"[\x00-\x08\x0a-\x1f\x7f-\x9f]")

logger = logging.getLogger(__name__)


def sanitize_terminal_text(source: str) -> str:
    """Escape terminal control bytes to avoid side effects (bell, cursor moves, etc.)."""
    if _CONTROL_RE.search(source) is None:
        return source

    out: list[str] = []
    for ch in source:
        code = ord(ch)
        # Tabs survive; clipping expands them to spaces.
        if ch == "\t":
            out.append(ch)
            continue
        # C0 controls + DEL + C1 controls.
        if code < 32 or code == 127 or 0x80 <= code <= 0x9F:
            out.append(f"\\x{code:02x}")
            continue
        out.append(ch)
    return "".join(out)


@lru_cache(maxsize=None)
def normalize_style(style: str) -> str:
    """Return ``style`` when Pygments knows it, otherwise the default style."""
    try:
        get_style_by_name(style)
    except ClassNotFound:
        logger.warning("unknown pygments style %r, using %r", style, DEFAULT_STYLE)
        return DEFAULT_STYLE
    return style


@lru_cache(maxsize=None)
def _formatter_for_style(style: str) -> TerminalFormatter:
    return TerminalFormatter(style=style)


@lru_cache(maxsize=None)
def _lexer_for_name(name: str):
    try:
        return get_lexer_for_filename(name)
    except ClassNotFound:
        return TextLexer()


def colorize_line(text: str, path: Path, style: str = DEFAULT_STYLE) -> str:
    """Return ``text`` with ANSI colouring for the language of ``path``."""
    lexer = _lexer_for_name(path.name)
    if isinstance(lexer, TextLexer):
        return text
    formatter = _formatter_for_style(normalize_style(style))
    rendered = pygments_highlight(text, lexer, formatter)
    # Pygments always terminates output with a newline.
    return rendered.rstrip("\n")


def line_colorizer(path: Path | None, style: str, enabled: bool) -> Callable[[str], str] | None:
    """Build the per-line colouring callback for a session, or ``None``."""
    if not enabled or path is None:
        return None
    return partial(colorize_line, path=path, style=style)
