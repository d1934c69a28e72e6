"""Virtual terminal for testing -- implements the Terminal protocol in-memory.

This module provides a ``VirtualTerminal`` class that satisfies the
``hexdex.console.terminal.Terminal`` protocol without performing any real
I/O. Output lands on a character grid that tests can inspect, and key
presses are served from a scripted queue.
"""

from __future__ import annotations

from collections import deque

from hexdex.console.colors import DEFAULT_FOREGROUND, DEFAULT_HIGHLIGHT, Color
from hexdex.console.keys import KeyEvent, parse_key


class VirtualTerminal:
    """In-memory terminal that records all drawing for test inspection.

    Parameters
    ----------
    rows:
        Number of terminal rows (height).
    columns:
        Number of terminal columns (width).
    """

    def __init__(self, rows: int = 24, columns: int = 80) -> None:
        self._rows = rows
        self._columns = columns
        self._x = 0
        self._y = 0
        self._fg = DEFAULT_FOREGROUND
        self._bg = DEFAULT_HIGHLIGHT
        self._cursor_visible = True
        self._keys: deque[KeyEvent] = deque()
        self._writes: list[str] = []
        self.clear_count = 0
        self._reset_grid()

    # -- Terminal protocol: properties --------------------------------------

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def cursor_position(self) -> tuple[int, int]:
        return (self._x, self._y)

    @property
    def cursor_visible(self) -> bool:
        return self._cursor_visible

    # -- Terminal protocol: input -------------------------------------------

    def read_key(self) -> KeyEvent:
        if not self._keys:
            raise RuntimeError("No scripted key presses left")
        return self._keys.popleft()

    # -- Terminal protocol: output ------------------------------------------

    def set_cursor(self, x: int, y: int) -> None:
        self._x = x
        self._y = y

    def set_color(self, fg: Color, bg: Color) -> None:
        self._fg = fg
        self._bg = bg

    def write(self, text: str) -> None:
        """Put *text* on the grid at the cursor, clipping at the right edge."""
        self._writes.append(text)
        for ch in text:
            if 0 <= self._y < self._rows and 0 <= self._x < self._columns:
                self._grid[self._y][self._x] = ch
                self._colors[self._y][self._x] = (self._fg, self._bg)
            self._x += 1

    def new_line(self) -> None:
        self._x = 0
        self._y = min(self._y + 1, self._rows - 1)

    def clear(self) -> None:
        self.clear_count += 1
        self._reset_grid()
        self._x = 0
        self._y = 0

    def hide_cursor(self) -> None:
        self._cursor_visible = False

    def show_cursor(self) -> None:
        self._cursor_visible = True

    def flush(self) -> None:
        """No-op -- the virtual terminal has no underlying stream to flush."""
        pass

    # -- Test helpers -------------------------------------------------------

    def feed(self, *keys: KeyEvent | str) -> None:
        """Queue key presses; strings are parsed as raw terminal sequences."""
        for key in keys:
            if isinstance(key, str):
                event = parse_key(key)
                if event is None:
                    raise ValueError(f"Unparseable key sequence {key!r}")
                key = event
            self._keys.append(key)

    def type_text(self, text: str) -> None:
        """Queue one printable key press per character of *text*."""
        for ch in text:
            self._keys.append(KeyEvent.of_char(ch))

    @property
    def pending_keys(self) -> int:
        return len(self._keys)

    def line(self, y: int) -> str:
        """Row *y* of the screen with trailing blanks removed."""
        return "".join(self._grid[y]).rstrip()

    def screen(self) -> list[str]:
        return [self.line(y) for y in range(self._rows)]

    def color_at(self, x: int, y: int) -> tuple[Color, Color]:
        return self._colors[y][x]

    @property
    def output(self) -> str:
        """Everything written since creation, concatenated."""
        return "".join(self._writes)

    def _reset_grid(self) -> None:
        self._grid = [[" "] * self._columns for _ in range(self._rows)]
        self._colors = [
            [(DEFAULT_FOREGROUND, DEFAULT_HIGHLIGHT)] * self._columns for _ in range(self._rows)
        ]
