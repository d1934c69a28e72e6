"""Small interactive screens built on :class:`~hexdex.console.console.Console`."""

from __future__ import annotations

import logging

from hexdex.console.cell import CURRENT_CURSOR, Placement, Position
from hexdex.console.colors import Color
from hexdex.console.console import Console
from hexdex.console.errors import InputCancelled
from hexdex.console.keys import Key
from hexdex.console.utils import visible_width

logger = logging.getLogger(__name__)


def pick_number(
    console: Console,
    low: int = 1,
    high: int = 9,
    at: Placement = CURRENT_CURSOR,
    highlight: Color = Color.DARK_GRAY,
) -> int:
    """Let the user choose a number in ``[low, high]`` with Up and Down.

    Draws `` > n < `` and rewrites the highlighted number cell in place on
    every change. Enter confirms; Escape raises :class:`InputCancelled`.
    """
    if low > high:
        raise ValueError(f"low ({low}) must not exceed high ({high})")

    terminal = console.terminal
    width = max(len(str(low)), len(str(high)))
    value = low

    console.print(" > ", breaks=0, at=at)
    slot = Position(*terminal.cursor_position)
    console.print(str(value).rjust(width), breaks=0, highlight=highlight, at=slot)
    console.print(" < ")

    terminal.hide_cursor()
    try:
        while True:
            event = terminal.read_key()
            if event.key == Key.enter:
                logger.debug("Picked %d", value)
                return value
            if event.key == Key.escape:
                raise InputCancelled()
            if event.key == Key.up and value < high:
                value += 1
            elif event.key == Key.down and value > low:
                value -= 1
            else:
                continue

            console.remove(slot.x, slot.y)
            console.print(str(value).rjust(width), breaks=0, highlight=highlight, at=slot)
    finally:
        terminal.show_cursor()


def center_screen(
    console: Console,
    title: str,
    subtitle: str = "",
    margin_top: int = 10,
    wait_for_enter: bool = True,
) -> None:
    """Clear the screen and show a centred title card.

    With *wait_for_enter* the call blocks until Enter is pressed; every
    other key is ignored.
    """
    terminal = console.terminal
    console.clear()

    columns = terminal.columns
    title_row = min(margin_top, terminal.rows - 1)
    console.print(title, breaks=0, at=Position(max((columns - visible_width(title)) // 2, 0), title_row))
    if subtitle:
        subtitle_row = min(title_row + 2, terminal.rows - 1)
        console.print(
            subtitle,
            breaks=0,
            at=Position(max((columns - visible_width(subtitle)) // 2, 0), subtitle_row),
        )

    terminal.set_cursor(columns // 2, min(title_row + 15, terminal.rows - 1))
    terminal.flush()

    if not wait_for_enter:
        return
    while terminal.read_key().key != Key.enter:
        pass
