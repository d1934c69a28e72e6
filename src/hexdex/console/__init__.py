"""hexdex-console: positional console buffer and line editor."""

# Cells and placements
from hexdex.console.cell import CURRENT_CURSOR, Cell, CurrentCursor, Placement, Position

# Palette
from hexdex.console.colors import Color, color_from_code, sgr

# Configuration
from hexdex.console.config import ConsoleConfig

# Print API
from hexdex.console.console import Console

# Line editor
from hexdex.console.editor import (
    Cancelled,
    Committed,
    Continue,
    EditSession,
    LineEditor,
    LineResult,
    StepResult,
    step,
)

# Errors
from hexdex.console.errors import ConsoleError, InputCancelled, ParseError

# History
from hexdex.console.history import HistoryLog

# Keyboard input handling
from hexdex.console.keys import Key, KeyEvent, parse_key

# Markup
from hexdex.console.markup import Segment, parse_markup, strip_markup

# Rendering
from hexdex.console.renderer import draw_cell, render

# Input buffering
from hexdex.console.stdin_buffer import StdinBuffer

# Terminal interface and implementations
from hexdex.console.terminal import ProcessTerminal, Terminal

# Interactive screens
from hexdex.console.widgets import center_screen, pick_number

__all__ = [
    # Cells
    "CURRENT_CURSOR",
    "Cell",
    "CurrentCursor",
    "Placement",
    "Position",
    # Palette
    "Color",
    "color_from_code",
    "sgr",
    # Config
    "ConsoleConfig",
    # Console
    "Console",
    # Editor
    "Cancelled",
    "Committed",
    "Continue",
    "EditSession",
    "LineEditor",
    "LineResult",
    "StepResult",
    "step",
    # Errors
    "ConsoleError",
    "InputCancelled",
    "ParseError",
    # History
    "HistoryLog",
    # Keys
    "Key",
    "KeyEvent",
    "parse_key",
    # Markup
    "Segment",
    "parse_markup",
    "strip_markup",
    # Renderer
    "draw_cell",
    "render",
    # Stdin buffer
    "StdinBuffer",
    # Terminal
    "ProcessTerminal",
    "Terminal",
    # Widgets
    "center_screen",
    "pick_number",
]
