"""StdinBuffer buffers raw input and emits complete key sequences.

Reads from a raw-mode terminal can split an escape sequence across two
chunks, or deliver several key presses in one chunk. Without buffering a
partial ``ESC [`` would be misread as an Escape key press followed by
literal text.
"""

from __future__ import annotations

ESC = "\x1b"


def _is_complete_sequence(data: str) -> str:
    """Check if a string is a complete escape sequence or needs more data.

    Returns 'complete', 'incomplete', or 'not-escape'.
    """
    if not data.startswith(ESC):
        return "not-escape"

    if len(data) == 1:
        return "incomplete"

    after_esc = data[1:]

    # CSI sequences: ESC [
    if after_esc.startswith("["):
        return _is_complete_csi_sequence(data)

    # SS3 sequences: ESC O
    if after_esc.startswith("O"):
        return "complete" if len(after_esc) >= 2 else "incomplete"

    # Meta key sequences: ESC followed by a single character
    return "complete"


def _is_complete_csi_sequence(data: str) -> str:
    if len(data) < 3:
        return "incomplete"

    last_char_code = ord(data[-1])
    if 0x40 <= last_char_code <= 0x7E:
        return "complete"
    return "incomplete"


def _extract_complete_sequences(buffer: str) -> tuple[list[str], str]:
    """Split accumulated buffer into complete sequences.

    Returns (sequences, remainder).
    """
    sequences: list[str] = []
    pos = 0

    while pos < len(buffer):
        remaining = buffer[pos:]

        if remaining.startswith(ESC):
            seq_end = 1
            while seq_end <= len(remaining):
                candidate = remaining[:seq_end]
                if _is_complete_sequence(candidate) == "complete":
                    sequences.append(candidate)
                    pos += seq_end
                    break
                seq_end += 1
            else:
                return sequences, remaining
        else:
            sequences.append(remaining[0])
            pos += 1

    return sequences, ""


class StdinBuffer:
    """Accumulates input chunks and hands back whole sequences.

    An incomplete escape prefix is held until more data arrives or the
    caller decides the wait is over and calls :meth:`flush` (a lone ESC
    then becomes the Escape key).
    """

    def __init__(self) -> None:
        self._buffer: str = ""

    def process(self, data: str) -> list[str]:
        """Feed *data* and return every sequence that is now complete."""
        self._buffer += data
        sequences, self._buffer = _extract_complete_sequences(self._buffer)
        return sequences

    def flush(self) -> list[str]:
        if not self._buffer:
            return []
        sequences = [self._buffer]
        self._buffer = ""
        return sequences

    @property
    def pending(self) -> bool:
        return bool(self._buffer)

    def clear(self) -> None:
        self._buffer = ""
