"""Terminal abstraction for blocking key reads and positioned output.

Provides a ``Terminal`` protocol and a concrete ``ProcessTerminal``
implementation backed by ``sys.stdin``/``sys.stdout`` that manages raw mode,
cursor placement, colours and screen clearing via ANSI escape sequences.

The terminal tracks its own cursor position as it writes, so callers can
ask where the cursor is without a round trip to the terminal emulator.
"""

from __future__ import annotations

import codecs
import logging
import os
import select
import sys
import termios
import tty
from collections import deque
from contextlib import contextmanager
from typing import IO, Iterator, Protocol

from hexdex.console.colors import SGR_RESET, Color, sgr
from hexdex.console.keys import KeyEvent, parse_key
from hexdex.console.stdin_buffer import StdinBuffer
from hexdex.console.utils import visible_width

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# ANSI escape constants
# ---------------------------------------------------------------------------

_HIDE_CURSOR = "\x1b[?25l"
_SHOW_CURSOR = "\x1b[?25h"
_CLEAR_SCREEN = "\x1b[2J\x1b[H"
_CURSOR_TO_FMT = "\x1b[{};{}H"
_NEW_LINE = "\r\n"


# ---------------------------------------------------------------------------
# Terminal protocol
# ---------------------------------------------------------------------------


class Terminal(Protocol):
    """Interface the console buffer and line editor draw and read through."""

    def read_key(self) -> KeyEvent: ...

    def set_cursor(self, x: int, y: int) -> None: ...

    def set_color(self, fg: Color, bg: Color) -> None: ...

    def write(self, text: str) -> None: ...

    def new_line(self) -> None: ...

    def clear(self) -> None: ...

    @property
    def cursor_position(self) -> tuple[int, int]: ...

    @property
    def columns(self) -> int: ...

    @property
    def rows(self) -> int: ...

    def hide_cursor(self) -> None: ...

    def show_cursor(self) -> None: ...

    def flush(self) -> None: ...


# ---------------------------------------------------------------------------
# ProcessTerminal implementation
# ---------------------------------------------------------------------------


class ProcessTerminal:
    """Concrete terminal backed by the process's stdin and stdout.

    Key reads require raw mode; wrap interactive use in :meth:`session`.
    """

    def __init__(
        self,
        *,
        escape_timeout: float = 0.05,
        write_log_path: str | None = None,
        stdin: IO[str] | None = None,
        stdout: IO[str] | None = None,
    ) -> None:
        self._stdin = stdin or sys.stdin
        self._stdout = stdout or sys.stdout
        self._escape_timeout = escape_timeout
        self._write_log_path: str = (
            write_log_path if write_log_path is not None else os.environ.get("HEXDEX_WRITE_LOG", "")
        )
        self._stdin_buffer = StdinBuffer()
        self._pending: deque[KeyEvent] = deque()
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self._original_termios: list | None = None
        self._x = 0
        self._y = 0

    # -- properties ---------------------------------------------------------

    @property
    def columns(self) -> int:
        try:
            return os.get_terminal_size(self._stdout.fileno()).columns
        except (ValueError, OSError):
            return 80

    @property
    def rows(self) -> int:
        try:
            return os.get_terminal_size(self._stdout.fileno()).lines
        except (ValueError, OSError):
            return 24

    @property
    def cursor_position(self) -> tuple[int, int]:
        return (self._x, self._y)

    # -- raw mode -----------------------------------------------------------

    @contextmanager
    def session(self) -> Iterator[ProcessTerminal]:
        """Enable raw mode for the duration of the block, then restore it."""
        fd = self._stdin.fileno()
        self._original_termios = termios.tcgetattr(fd)
        tty.setraw(fd)
        logger.debug("Raw mode enabled on fd %d", fd)
        try:
            yield self
        finally:
            self._raw_write(SGR_RESET + _SHOW_CURSOR)
            termios.tcsetattr(fd, termios.TCSADRAIN, self._original_termios)
            self._original_termios = None
            self._stdin_buffer.clear()
            self._pending.clear()
            logger.debug("Terminal attributes restored on fd %d", fd)

    # -- input --------------------------------------------------------------

    def read_key(self) -> KeyEvent:
        """Block until one recognised key press is available and return it."""
        while not self._pending:
            for sequence in self._read_sequences():
                event = parse_key(sequence)
                if event is None:
                    logger.debug("Ignoring unrecognised input %r", sequence)
                    continue
                self._pending.append(event)
        return self._pending.popleft()

    def _read_sequences(self) -> list[str]:
        fd = self._stdin.fileno()
        sequences = self._stdin_buffer.process(self._read_chunk(fd))
        # An ESC with nothing after it within the timeout is the Escape key.
        while self._stdin_buffer.pending:
            ready, _, _ = select.select([fd], [], [], self._escape_timeout)
            if not ready:
                sequences.extend(self._stdin_buffer.flush())
                break
            sequences.extend(self._stdin_buffer.process(self._read_chunk(fd)))
        return sequences

    def _read_chunk(self, fd: int) -> str:
        raw = os.read(fd, 1024)
        if not raw:
            raise EOFError("stdin closed")
        return self._decoder.decode(raw)

    # -- output -------------------------------------------------------------

    def set_cursor(self, x: int, y: int) -> None:
        self._raw_write(_CURSOR_TO_FMT.format(y + 1, x + 1))
        self._x = x
        self._y = y

    def set_color(self, fg: Color, bg: Color) -> None:
        self._raw_write(sgr(fg, bg))

    def write(self, text: str) -> None:
        """Write *text* at the cursor and advance the tracked column."""
        self._raw_write(text)
        self._x += visible_width(text)

        if self._write_log_path:
            try:
                with open(self._write_log_path, "a") as f:
                    f.write(text)
            except OSError:
                pass

    def new_line(self) -> None:
        self._raw_write(_NEW_LINE)
        self._x = 0
        self._y = min(self._y + 1, self.rows - 1)

    def clear(self) -> None:
        self._raw_write(SGR_RESET + _CLEAR_SCREEN)
        self._x = 0
        self._y = 0

    def hide_cursor(self) -> None:
        self._raw_write(_HIDE_CURSOR)

    def show_cursor(self) -> None:
        self._raw_write(_SHOW_CURSOR)

    def flush(self) -> None:
        try:
            self._stdout.flush()
        except OSError:
            pass

    def _raw_write(self, data: str) -> None:
        try:
            self._stdout.write(data)
            self._stdout.flush()
        except OSError:
            pass
