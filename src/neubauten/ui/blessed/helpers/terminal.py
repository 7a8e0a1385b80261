"""Terminal output utilities shared by the blessed UI."""

import sys
from typing import Optional, Protocol, TextIO

from blessed import Terminal
from blessed.keyboard import Keystroke


class RenderSurface(Protocol):
    """Cell-based drawing target used by the UI components."""

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    def clear(self) -> None: ...

    def draw_text(self, x: int, y: int, style: str, text: str) -> None: ...

    def present(self) -> None: ...


class KeySource(Protocol):
    """Anything that yields keystrokes with a bounded wait."""

    def inkey(self, timeout: Optional[float] = None) -> Optional[Keystroke]: ...


class BlessedSurface:
    """RenderSurface backed by a blessed Terminal.

    Drawing is buffered and written to the stream in one go on ``present()``
    so a frame never shows half-drawn.
    """

    def __init__(self, term: Terminal, stream: TextIO | None = None) -> None:
        self.term = term
        self.stream = stream if stream is not None else sys.stdout
        self._buffer: list[str] = []

    @property
    def width(self) -> int:
        return self.term.width

    @property
    def height(self) -> int:
        return self.term.height

    def clear(self) -> None:
        self._buffer.append(self.term.home + self.term.clear)

    def draw_text(self, x: int, y: int, style: str, text: str) -> None:
        """Queue text at (x, y); style names a blessed formatting attribute."""
        if style:
            text = getattr(self.term, style)(text)
        self._buffer.append(self.term.move_xy(x, y) + text)

    def present(self) -> None:
        self.stream.write("".join(self._buffer))
        self.stream.flush()
        self._buffer.clear()

    def inkey(self, timeout: Optional[float] = None) -> Optional[Keystroke]:
        return self.term.inkey(timeout=timeout)
