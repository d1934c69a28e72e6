"""Keyboard input parsing for the line editor.

Turns one complete raw terminal sequence (as produced by
:class:`~hexdex.console.stdin_buffer.StdinBuffer`) into a :class:`KeyEvent`
carrying the key name, the typed character and the modifier flags.
Legacy xterm/VT sequences and single control bytes are recognised.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from hexdex.console.utils import is_control_char

# ---------------------------------------------------------------------------
# Key names
# ---------------------------------------------------------------------------


class Key:
    """Named key constants used in :attr:`KeyEvent.key`."""

    char = "char"
    escape = "escape"
    enter = "enter"
    tab = "tab"
    backspace = "backspace"
    delete = "delete"
    insert = "insert"
    clear = "clear"
    home = "home"
    end = "end"
    page_up = "pageUp"
    page_down = "pageDown"
    up = "up"
    down = "down"
    left = "left"
    right = "right"

    f1 = "f1"
    f2 = "f2"
    f3 = "f3"
    f4 = "f4"
    f5 = "f5"
    f6 = "f6"
    f7 = "f7"
    f8 = "f8"
    f9 = "f9"
    f10 = "f10"
    f11 = "f11"
    f12 = "f12"


@dataclass(frozen=True)
class KeyEvent:
    """A single key press.

    ``key`` is one of the :class:`Key` names; printable characters use
    ``Key.char`` with the character itself in ``char``.
    """

    key: str
    char: str = ""
    ctrl: bool = False
    alt: bool = False
    shift: bool = False

    @property
    def is_printable(self) -> bool:
        return (
            self.key == Key.char
            and not self.ctrl
            and not self.alt
            and len(self.char) == 1
            and not is_control_char(self.char)
        )

    @classmethod
    def of_char(cls, char: str) -> KeyEvent:
        return cls(Key.char, char)


# ---------------------------------------------------------------------------
# Legacy escape sequences
# ---------------------------------------------------------------------------

LEGACY_KEY_SEQUENCES: dict[str, str] = {
    "\x1b[A": "up",
    "\x1b[B": "down",
    "\x1b[C": "right",
    "\x1b[D": "left",
    "\x1b[H": "home",
    "\x1b[F": "end",
    "\x1bOA": "up",
    "\x1bOB": "down",
    "\x1bOC": "right",
    "\x1bOD": "left",
    "\x1bOH": "home",
    "\x1bOF": "end",
    "\x1b[2~": "insert",
    "\x1b[3~": "delete",
    "\x1b[5~": "pageUp",
    "\x1b[6~": "pageDown",
    "\x1bOP": "f1",
    "\x1bOQ": "f2",
    "\x1bOR": "f3",
    "\x1bOS": "f4",
    "\x1b[15~": "f5",
    "\x1b[17~": "f6",
    "\x1b[18~": "f7",
    "\x1b[19~": "f8",
    "\x1b[20~": "f9",
    "\x1b[21~": "f10",
    "\x1b[23~": "f11",
    "\x1b[24~": "f12",
    "\x1b[1~": "home",
    "\x1b[4~": "end",
    "\x1b[7~": "home",
    "\x1b[8~": "end",
    "\x1b[E": "clear",
}

# xterm modifier parameter (1 + bitmask) for CSI 1;<mod> X and CSI n;<mod> ~
MODIFIERS: dict[str, int] = {
    "shift": 1,
    "alt": 2,
    "ctrl": 4,
}

_CSI_LETTER_KEYS: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
    "H": "home",
    "F": "end",
    "P": "f1",
    "Q": "f2",
    "R": "f3",
    "S": "f4",
}

_CSI_TILDE_KEYS: dict[int, str] = {
    1: "home",
    2: "insert",
    3: "delete",
    4: "end",
    5: "pageUp",
    6: "pageDown",
    15: "f5",
    17: "f6",
    18: "f7",
    19: "f8",
    20: "f9",
    21: "f10",
    23: "f11",
    24: "f12",
}

_MODIFIED_LETTER_RE = re.compile(r"^\x1b\[1;(\d+)([A-Z])$")
_MODIFIED_TILDE_RE = re.compile(r"^\x1b\[(\d+);(\d+)~$")


def _with_modifier(key: str, modifier: int) -> KeyEvent:
    mod = modifier - 1
    return KeyEvent(
        key,
        ctrl=bool(mod & MODIFIERS["ctrl"]),
        alt=bool(mod & MODIFIERS["alt"]),
        shift=bool(mod & MODIFIERS["shift"]),
    )


def parse_key(data: str) -> KeyEvent | None:  # noqa: C901
    """Parse one raw terminal sequence, or return ``None`` if unrecognised."""
    if not data:
        return None

    # --- Legacy escape sequences ---
    name = LEGACY_KEY_SEQUENCES.get(data)
    if name is not None:
        return KeyEvent(name)

    match = _MODIFIED_LETTER_RE.match(data)
    if match and match.group(2) in _CSI_LETTER_KEYS:
        return _with_modifier(_CSI_LETTER_KEYS[match.group(2)], int(match.group(1)))

    match = _MODIFIED_TILDE_RE.match(data)
    if match and int(match.group(1)) in _CSI_TILDE_KEYS:
        return _with_modifier(_CSI_TILDE_KEYS[int(match.group(1))], int(match.group(2)))

    if data == "\x1b[Z":
        return KeyEvent(Key.tab, shift=True)

    # --- Simple single-byte keys ---
    if data == "\x1b":
        return KeyEvent(Key.escape)
    if data in ("\r", "\n", "\r\n"):
        return KeyEvent(Key.enter)
    if data == "\t":
        return KeyEvent(Key.tab)
    if data in ("\x7f", "\x08"):
        return KeyEvent(Key.backspace)

    # --- Ctrl + letter (0x01 - 0x1a) ---
    if len(data) == 1 and 1 <= ord(data) <= 26:
        return KeyEvent(Key.char, chr(ord(data) + ord("a") - 1), ctrl=True)

    # --- Alt + key (ESC prefix) ---
    if len(data) == 2 and data[0] == "\x1b":
        inner = parse_key(data[1])
        if inner is None:
            return None
        return KeyEvent(inner.key, inner.char, ctrl=inner.ctrl, alt=True, shift=inner.shift)

    # --- Plain printable character ---
    if len(data) == 1 and not is_control_char(data):
        return KeyEvent.of_char(data)

    return None
