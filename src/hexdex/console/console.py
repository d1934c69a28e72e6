"""Print API over a persistent, application-wide history log.

A :class:`Console` owns the log of everything printed since the last
screen transition. Printing appends one cell per run of text and draws it
straight to the terminal; the log is only replayed in full when the screen
has to be reconstructed (:meth:`Console.refresh`) or while a line is being
edited.
"""

from __future__ import annotations

import logging
import re

from hexdex.console.cell import CURRENT_CURSOR, Cell, Placement, Position, resolve_placement
from hexdex.console.colors import Color
from hexdex.console.config import ConsoleConfig
from hexdex.console.editor import Cancelled, LineEditor, LineResult
from hexdex.console.errors import InputCancelled
from hexdex.console.history import HistoryLog
from hexdex.console.markup import parse_markup
from hexdex.console.renderer import draw_cell, render
from hexdex.console.terminal import Terminal

logger = logging.getLogger(__name__)

# Optional sign and ASCII digits only; no underscores or other scripts.
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


class Console:
    """Positional print and line-input entry points for one terminal.

    Only one console should drive a given terminal at a time: the cursor
    and colour state are shared by every print and repaint.
    """

    def __init__(
        self,
        terminal: Terminal,
        config: ConsoleConfig | None = None,
        history: HistoryLog | None = None,
    ) -> None:
        self.terminal = terminal
        self.config = config or ConsoleConfig()
        self.history = history if history is not None else HistoryLog()
        self._editor = LineEditor(terminal, background=self.history)

    # -- output -------------------------------------------------------------

    def print(
        self,
        text: str,
        breaks: int = 1,
        color: Color | None = None,
        highlight: Color | None = None,
        at: Placement = CURRENT_CURSOR,
    ) -> Cell:
        """Record *text* in the history and draw it without a repaint.

        *at* defaults to wherever the terminal cursor is when called.
        """
        pos = resolve_placement(at, self.terminal.cursor_position)
        cell = Cell(
            text,
            x=pos.x,
            y=pos.y,
            style=self.config.default_color if color is None else color,
            highlight=self.config.default_highlight if highlight is None else highlight,
            trailing_breaks=breaks,
        )
        self.history.append(cell)
        draw_cell(self.terminal, cell)
        self.terminal.flush()
        return cell

    def style_print(
        self,
        markup: str,
        breaks: int = 1,
        at: Placement = CURRENT_CURSOR,
        highlight: Color | None = None,
    ) -> list[Cell]:
        """Print colour *markup* such as ``"§(7)Score: §(10)3 / 4"``.

        Only the last segment carries *breaks*. The first segment is placed
        at *at*; each following one continues from the cursor.
        """
        segments = parse_markup(markup, default=self.config.default_color)
        cells: list[Cell] = []
        for index, segment in enumerate(segments):
            last = index == len(segments) - 1
            cells.append(
                self.print(
                    segment.text,
                    breaks=breaks if last else 0,
                    color=segment.color,
                    highlight=highlight,
                    at=at if index == 0 else CURRENT_CURSOR,
                )
            )
        return cells

    def refresh(self) -> None:
        """Repaint the whole screen from the history."""
        render(self.terminal, self.history)

    def clear(self) -> None:
        """Forget the history and blank the screen."""
        logger.debug("Clearing console (%d cells)", len(self.history))
        self.history.clear()
        self.terminal.clear()

    def remove(self, x: int, y: int) -> Cell | None:
        """Drop the history cell at ``(x, y)``. The screen is not redrawn."""
        return self.history.remove_at(x, y)

    # -- input --------------------------------------------------------------

    def read_line(self, at: Placement = CURRENT_CURSOR) -> LineResult:
        """Edit one line at *at* over the current history."""
        return self._editor.read_line(
            at,
            style=self.config.default_color,
            highlight=self.config.default_highlight,
        )

    def read_int(self, at: Placement = CURRENT_CURSOR) -> int:
        """Prompt until the submitted line parses as an integer.

        Raises :class:`InputCancelled` when Escape is pressed.
        """
        origin = self._print_prompt(at)
        while True:
            text = self._read_submitted(origin)
            stripped = text.strip()
            if _INTEGER_RE.fullmatch(stripped):
                return int(stripped)
            logger.debug("Rejected integer input %r", text)
            self.refresh()

    def read_str(self, at: Placement = CURRENT_CURSOR, max_length: int | None = None) -> str:
        """Prompt until a non-empty line of at most *max_length* is submitted.

        Raises :class:`InputCancelled` when Escape is pressed.
        """
        origin = self._print_prompt(at)
        while True:
            text = self._read_submitted(origin)
            if text and (max_length is None or len(text) <= max_length):
                return text
            logger.debug("Rejected string input %r", text)
            self.refresh()

    def _print_prompt(self, at: Placement) -> Position:
        self.print(self.config.prompt, breaks=0, at=at)
        return Position(*self.terminal.cursor_position)

    def _read_submitted(self, origin: Position) -> str:
        result = self.read_line(origin)
        if isinstance(result, Cancelled):
            raise InputCancelled()
        return result.text
