"""Full-screen repaint from a history log.

Every render clears the terminal and replays the log in insertion order;
there is no diffing.
"""

from __future__ import annotations

import logging

from hexdex.console.cell import Cell
from hexdex.console.history import HistoryLog
from hexdex.console.terminal import Terminal

logger = logging.getLogger(__name__)


def draw_cell(terminal: Terminal, cell: Cell) -> None:
    """Draw one cell: colour, position, text, then its trailing line breaks."""
    terminal.set_color(cell.style, cell.highlight)
    terminal.set_cursor(cell.x, cell.y)
    terminal.write(cell.text)
    for _ in range(cell.trailing_breaks):
        terminal.new_line()


def render(terminal: Terminal, log: HistoryLog, overlay: HistoryLog | None = None) -> None:
    """Clear the screen and replay *log*, then *overlay* if given.

    *overlay* is drawn on top without being merged into *log*; the line
    editor uses it to show an in-progress edit.
    """
    cells = log.cells
    if overlay is not None:
        cells.extend(overlay)

    logger.debug("Repainting %d cells", len(cells))
    terminal.clear()
    for cell in cells:
        draw_cell(terminal, cell)
    terminal.flush()
