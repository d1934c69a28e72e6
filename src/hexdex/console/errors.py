"""Exception types raised by the console buffer and its readers."""

from __future__ import annotations


class ConsoleError(Exception):
    """Base class for all hexdex console errors."""


class ParseError(ConsoleError, ValueError):
    """A markup colour code was non-numeric or outside the palette."""

    def __init__(self, code: str, message: str | None = None) -> None:
        self.code = code
        super().__init__(message or f"Invalid colour code: {code!r}")


class InputCancelled(ConsoleError):
    """The user pressed Escape while a reader was waiting for input."""

    def __init__(self) -> None:
        super().__init__("Input cancelled")
