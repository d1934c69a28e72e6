"""Fixed 16-entry colour palette and its ANSI SGR encoding.

Indexes follow the classic console ordering, so markup codes such as
``§(9)`` (blue) and ``§(12)`` (red) select the same colours a Windows
console would.
"""

from __future__ import annotations

from enum import IntEnum

from hexdex.console.errors import ParseError


class Color(IntEnum):
    BLACK = 0
    DARK_BLUE = 1
    DARK_GREEN = 2
    DARK_CYAN = 3
    DARK_RED = 4
    DARK_MAGENTA = 5
    DARK_YELLOW = 6
    GRAY = 7
    DARK_GRAY = 8
    BLUE = 9
    GREEN = 10
    CYAN = 11
    RED = 12
    MAGENTA = 13
    YELLOW = 14
    WHITE = 15


DEFAULT_FOREGROUND = Color.WHITE
DEFAULT_HIGHLIGHT = Color.BLACK

PALETTE_SIZE = len(Color)

# Palette index -> ANSI base colour (0-7). Bright variants add 60.
_ANSI_BASE: dict[Color, int] = {
    Color.BLACK: 0,
    Color.DARK_BLUE: 4,
    Color.DARK_GREEN: 2,
    Color.DARK_CYAN: 6,
    Color.DARK_RED: 1,
    Color.DARK_MAGENTA: 5,
    Color.DARK_YELLOW: 3,
    Color.GRAY: 7,
    Color.DARK_GRAY: 0,
    Color.BLUE: 4,
    Color.GREEN: 2,
    Color.CYAN: 6,
    Color.RED: 1,
    Color.MAGENTA: 5,
    Color.YELLOW: 3,
    Color.WHITE: 7,
}

_BRIGHT = {
    Color.DARK_GRAY,
    Color.BLUE,
    Color.GREEN,
    Color.CYAN,
    Color.RED,
    Color.MAGENTA,
    Color.YELLOW,
    Color.WHITE,
}


def color_from_code(code: int | str) -> Color:
    """Map a markup code to a palette colour.

    Raises :class:`ParseError` when *code* is not a base-10 integer or lies
    outside ``0..15``.
    """
    raw = str(code)
    try:
        index = int(raw)
    except ValueError:
        raise ParseError(raw) from None
    if not 0 <= index < PALETTE_SIZE:
        raise ParseError(raw, f"Colour code {index} is outside 0..{PALETTE_SIZE - 1}")
    return Color(index)


def fg_code(color: Color) -> int:
    base = 30 + _ANSI_BASE[color]
    return base + 60 if color in _BRIGHT else base


def bg_code(color: Color) -> int:
    base = 40 + _ANSI_BASE[color]
    return base + 60 if color in _BRIGHT else base


def sgr(fg: Color, bg: Color = DEFAULT_HIGHLIGHT) -> str:
    """Return the SGR escape selecting *fg* on *bg*."""
    return f"\x1b[{fg_code(fg)};{bg_code(bg)}m"


SGR_RESET = "\x1b[0m"
