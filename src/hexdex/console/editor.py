"""Single-line editor driven one key press at a time.

Each key is resolved by :func:`step`, a flat transition table over an
:class:`EditSession`. The typed characters live in the session's own
:class:`HistoryLog`, one cell per character on the input row; after any
structural change the screen is repainted from the caller's log with the
session log drawn on top.

Row invariant: the session's cells occupy columns
``[margin, margin + len(log))`` of ``row`` with no gaps and no duplicates,
and ``margin <= cursor_x <= margin + len(log)``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Union

from hexdex.console.cell import CURRENT_CURSOR, Cell, Placement, resolve_placement
from hexdex.console.colors import DEFAULT_FOREGROUND, DEFAULT_HIGHLIGHT, Color
from hexdex.console.history import HistoryLog
from hexdex.console.keys import Key, KeyEvent
from hexdex.console.renderer import render
from hexdex.console.terminal import Terminal

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Outcomes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Continue:
    """Keep editing. ``repaint`` is set when the session log changed."""

    cursor_x: int
    repaint: bool = False


@dataclass(frozen=True)
class Committed:
    """Enter was pressed; ``text`` is the line read left to right."""

    text: str


@dataclass(frozen=True)
class Cancelled:
    """Escape was pressed."""


StepResult = Union[Continue, Committed, Cancelled]
LineResult = Union[Committed, Cancelled]


# ---------------------------------------------------------------------------
# Session state
# ---------------------------------------------------------------------------


@dataclass
class EditSession:
    cursor_x: int
    row: int
    margin: int
    log: HistoryLog = field(default_factory=HistoryLog)
    style: Color = DEFAULT_FOREGROUND
    highlight: Color = DEFAULT_HIGHLIGHT

    @classmethod
    def at(cls, x: int, y: int, **kwargs) -> EditSession:
        return cls(cursor_x=x, row=y, margin=x, **kwargs)

    @property
    def end(self) -> int:
        """Column just past the last typed character."""
        return self.margin + len(self.log)

    @property
    def text(self) -> str:
        return self.log.row_text(self.row)


# ---------------------------------------------------------------------------
# Transitions
# ---------------------------------------------------------------------------


def _home(session: EditSession) -> bool:
    session.cursor_x = session.margin
    return False


def _end(session: EditSession) -> bool:
    session.cursor_x = session.end
    return False


def _left(session: EditSession) -> bool:
    session.cursor_x = max(session.cursor_x - 1, session.margin)
    return False


def _right(session: EditSession) -> bool:
    session.cursor_x = min(session.cursor_x + 1, session.end)
    return False


def _delete(session: EditSession) -> bool:
    if session.cursor_x >= session.end:
        return False
    session.log.remove_at(session.cursor_x, session.row)
    session.log.shift_row(session.cursor_x, session.row, -1)
    return True


def _backspace(session: EditSession) -> bool:
    if session.cursor_x <= session.margin:
        return False
    session.cursor_x -= 1
    return _delete(session)


def _insert(session: EditSession, char: str) -> bool:
    session.log.shift_row(session.cursor_x, session.row, 1)
    session.log.append(
        Cell(
            char,
            x=session.cursor_x,
            y=session.row,
            style=session.style,
            highlight=session.highlight,
            trailing_breaks=0,
        )
    )
    session.cursor_x += 1
    return True


_TRANSITIONS: dict[str, Callable[[EditSession], bool]] = {
    Key.home: _home,
    Key.end: _end,
    Key.left: _left,
    Key.right: _right,
    Key.delete: _delete,
    Key.backspace: _backspace,
}


def step(session: EditSession, event: KeyEvent) -> StepResult:
    """Apply one key press to *session* and report what the caller should do."""
    if event.key == Key.escape:
        return Cancelled()
    if event.key == Key.enter:
        return Committed(session.text)

    transition = _TRANSITIONS.get(event.key)
    if transition is not None:
        changed = transition(session)
    elif event.is_printable:
        changed = _insert(session, event.char)
    else:
        changed = False

    return Continue(session.cursor_x, repaint=changed)


# ---------------------------------------------------------------------------
# Driver
# ---------------------------------------------------------------------------


class LineEditor:
    """Runs edit sessions against a terminal.

    *background* is the log repainted underneath the line being edited;
    it is never modified.
    """

    def __init__(self, terminal: Terminal, background: HistoryLog | None = None) -> None:
        self.terminal = terminal
        self.background = background if background is not None else HistoryLog()

    def read_line(
        self,
        at: Placement = CURRENT_CURSOR,
        style: Color = DEFAULT_FOREGROUND,
        highlight: Color = DEFAULT_HIGHLIGHT,
    ) -> LineResult:
        """Capture one line starting at *at*; returns on Enter or Escape.

        Typed characters are drawn in *style* on *highlight*.
        """
        pos = resolve_placement(at, self.terminal.cursor_position)
        session = EditSession.at(pos.x, pos.y, style=style, highlight=highlight)
        logger.debug("Edit session started at (%d, %d)", pos.x, pos.y)
        return self.run(session)

    def run(self, session: EditSession) -> LineResult:
        while True:
            self.terminal.set_cursor(session.cursor_x, session.row)
            self.terminal.flush()
            event = self.terminal.read_key()
            result = step(session, event)

            if isinstance(result, Continue):
                if result.repaint:
                    render(self.terminal, self.background, overlay=session.log)
                continue

            logger.debug("Edit session ended: %r", result)
            return result
