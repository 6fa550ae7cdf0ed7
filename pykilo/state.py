from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field

from . import __version__

DEFAULT_FILLER = "~"
DEFAULT_WELCOME_MESSAGE = f"Kilo editor in Python - version {__version__}"


@dataclass(frozen=True)
class ViewportExtent:
    columns: int = 0
    rows: int = 0


@dataclass
class CursorPosition:
    x: int = 0
    y: int = 0


class LineBuffer:
    """Ordered, append-only sequence of text lines in file order."""

    def __init__(self, lines: Iterable[str] = ()) -> None:
        self._lines: list[str] = list(lines)

    def append(self, line: str) -> None:
        self._lines.append(line)

    def __len__(self) -> int:
        return len(self._lines)

    def __getitem__(self, index: int) -> str:
        return self._lines[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self._lines)

    def __repr__(self) -> str:
        return f"LineBuffer({self._lines!r})"


@dataclass
class EditorSession:
    extent: ViewportExtent = field(default_factory=ViewportExtent)
    cursor: CursorPosition = field(default_factory=CursorPosition)
    buffer: LineBuffer = field(default_factory=LineBuffer)
    welcome_message: str = DEFAULT_WELCOME_MESSAGE
    filler: str = DEFAULT_FILLER
    colorize: Callable[[str], str] | None = None
