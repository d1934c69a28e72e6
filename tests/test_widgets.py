"""Tests for the number picker and the centred title screen."""

from __future__ import annotations

import pytest

from hexdex.console.cell import Position
from hexdex.console.colors import Color
from hexdex.console.console import Console
from hexdex.console.errors import InputCancelled
from hexdex.console.keys import Key, KeyEvent
from hexdex.console.widgets import center_screen, pick_number

from .virtual_terminal import VirtualTerminal

UP = KeyEvent(Key.up)
DOWN = KeyEvent(Key.down)
ENTER = KeyEvent(Key.enter)
ESCAPE = KeyEvent(Key.escape)


class TestPickNumber:
    def test_up_down_enter(self) -> None:
        term = VirtualTerminal()
        console = Console(term)
        term.feed(UP, UP, DOWN, ENTER)
        assert pick_number(console) == 2
        assert term.line(0) == " > 2 <"
        assert term.color_at(3, 0) == (Color.WHITE, Color.DARK_GRAY)

    def test_history_keeps_single_number_cell(self) -> None:
        term = VirtualTerminal()
        console = Console(term)
        term.feed(UP, UP, UP, ENTER)
        pick_number(console, at=Position(0, 4))
        numbers = [c for c in console.history if c.text.strip().isdigit()]
        assert [(c.text, c.x, c.y) for c in numbers] == [("4", 3, 4)]
        term.clear()
        console.refresh()
        assert term.line(4) == " > 4 <"

    def test_clamped_to_bounds(self) -> None:
        term = VirtualTerminal()
        console = Console(term)
        term.feed(DOWN, DOWN, UP, UP, UP, UP, ENTER)
        assert pick_number(console, low=1, high=3) == 3

    def test_other_keys_ignored(self) -> None:
        term = VirtualTerminal()
        console = Console(term)
        term.feed(KeyEvent.of_char("x"), KeyEvent(Key.left), ENTER)
        assert pick_number(console, low=5, high=9) == 5

    def test_wide_range_is_right_aligned(self) -> None:
        term = VirtualTerminal()
        console = Console(term)
        term.feed(ENTER)
        pick_number(console, low=1, high=12)
        assert term.line(0) == " >  1 <"

    def test_escape_cancels_and_restores_cursor(self) -> None:
        term = VirtualTerminal()
        console = Console(term)
        term.feed(UP, ESCAPE)
        with pytest.raises(InputCancelled):
            pick_number(console)
        assert term.cursor_visible

    def test_invalid_range(self) -> None:
        with pytest.raises(ValueError):
            pick_number(Console(VirtualTerminal()), low=5, high=1)


class TestCenterScreen:
    def test_title_and_subtitle_centred(self) -> None:
        term = VirtualTerminal(rows=24, columns=80)
        console = Console(term)
        console.print("old screen")
        term.feed(KeyEvent.of_char("a"), ENTER)
        center_screen(console, "HexerDexer", "Press ENTER to start")
        assert term.line(0) == ""
        assert term.line(10) == " " * 35 + "HexerDexer"
        assert term.line(12) == " " * 30 + "Press ENTER to start"
        assert term.cursor_position == (40, 23)
        assert term.pending_keys == 0

    def test_no_wait(self) -> None:
        term = VirtualTerminal()
        console = Console(term)
        center_screen(console, "Title", wait_for_enter=False)
        assert [c.text for c in console.history] == ["Title"]

    def test_cursor_left_two_rows_below_blank_block(self) -> None:
        term = VirtualTerminal(rows=40, columns=80)
        console = Console(term)
        center_screen(console, "Title", "Sub", wait_for_enter=False)
        assert term.line(10) == " " * 37 + "Title"
        assert term.cursor_position == (40, 25)
