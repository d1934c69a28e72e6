"""Styled cells and screen placements."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from hexdex.console.colors import DEFAULT_FOREGROUND, DEFAULT_HIGHLIGHT, Color


@dataclass
class Cell:
    """One printed run of text at a fixed screen coordinate.

    Cells are mutable because a :class:`~hexdex.console.history.HistoryLog`
    shifts their column in place while a line is being edited.
    """

    text: str
    x: int
    y: int
    style: Color = DEFAULT_FOREGROUND
    highlight: Color = DEFAULT_HIGHLIGHT
    trailing_breaks: int = 1

    @property
    def position(self) -> Position:
        return Position(self.x, self.y)


@dataclass(frozen=True)
class Position:
    """An explicit screen coordinate (column, row), zero-based."""

    x: int
    y: int


class CurrentCursor:
    """Placement resolved to the terminal cursor at the moment of the call."""

    _instance: CurrentCursor | None = None

    def __new__(cls) -> CurrentCursor:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "CURRENT_CURSOR"


CURRENT_CURSOR = CurrentCursor()

Placement = Union[Position, CurrentCursor]


def resolve_placement(at: Placement, cursor: tuple[int, int]) -> Position:
    """Turn *at* into a concrete :class:`Position` given the live cursor."""
    if isinstance(at, Position):
        return at
    return Position(cursor[0], cursor[1])
