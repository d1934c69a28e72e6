"""Inline colour markup: ``"§(7)What is §(9)2A§(7)?"``.

A marker ``§(<digits>)`` switches the colour of all following text until the
next marker. The text is split on the marker pattern so the pieces alternate
text, code, text, ... and always start and end with a (possibly empty) text
piece.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from hexdex.console.colors import DEFAULT_FOREGROUND, Color, color_from_code
from hexdex.console.errors import ParseError

_MARKER_RE = re.compile(r"§\((\d+)\)")

# Anything that opens like a marker; used to reject malformed codes such as
# "§(x)" or "§(-1)" instead of printing them literally.
_LOOSE_MARKER_RE = re.compile(r"§\(([^)]*)\)")


@dataclass(frozen=True)
class Segment:
    text: str
    color: Color


def parse_markup(text: str, default: Color = DEFAULT_FOREGROUND) -> list[Segment]:
    """Split *text* into coloured segments.

    The current colour starts at *default* and every code piece replaces it.
    Empty text pieces are kept so a caller printing the segments still emits
    the trailing line breaks carried by the last one.

    Raises :class:`ParseError` for a non-numeric or out-of-range code.
    """
    for match in _LOOSE_MARKER_RE.finditer(text):
        code = match.group(1)
        if not code.isdigit() or not code.isascii():
            raise ParseError(code)

    pieces = _MARKER_RE.split(text)
    segments: list[Segment] = []
    color = default
    for index, piece in enumerate(pieces):
        if index % 2 == 0:
            segments.append(Segment(piece, color))
        else:
            color = color_from_code(piece)
    return segments


def strip_markup(text: str) -> str:
    """Return *text* with every colour marker removed."""
    return "".join(segment.text for segment in parse_markup(text))
