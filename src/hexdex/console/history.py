"""Insertion-ordered record of every cell currently on screen."""

from __future__ import annotations

from typing import Iterator

from hexdex.console.cell import Cell


class HistoryLog:
    """Ordered collection of :class:`Cell` objects.

    Render order is insertion order: when two cells share a coordinate the
    one appended later is drawn last and wins. Editing callers must remove
    or shift cells at vacated coordinates so stale glyphs never bleed
    through on the next repaint.
    """

    def __init__(self, cells: list[Cell] | None = None) -> None:
        self._cells: list[Cell] = list(cells) if cells else []

    def append(self, cell: Cell) -> None:
        """Add *cell* to the end. No ordering validation is performed."""
        self._cells.append(cell)

    def remove_at(self, x: int, y: int) -> Cell | None:
        """Remove and return the first cell positioned exactly at ``(x, y)``.

        Returns ``None`` and leaves the log untouched when nothing matches.
        """
        for index, cell in enumerate(self._cells):
            if cell.x == x and cell.y == y:
                return self._cells.pop(index)
        return None

    def shift_row(self, x: int, y: int, delta: int) -> None:
        """Add *delta* to the column of every cell on row *y* at or after *x*."""
        for cell in self._cells:
            if cell.y == y and cell.x >= x:
                cell.x += delta

    def clear(self) -> None:
        self._cells.clear()

    # -- read access --------------------------------------------------------

    @property
    def cells(self) -> list[Cell]:
        return list(self._cells)

    def cell_at(self, x: int, y: int) -> Cell | None:
        for cell in self._cells:
            if cell.x == x and cell.y == y:
                return cell
        return None

    def cells_on_row(self, y: int) -> list[Cell]:
        """Cells on row *y* ordered by column."""
        return sorted((c for c in self._cells if c.y == y), key=lambda c: c.x)

    def text(self) -> str:
        """Concatenate cell contents in insertion order."""
        return "".join(cell.text for cell in self._cells)

    def row_text(self, y: int) -> str:
        """Concatenate the contents of row *y* in left-to-right column order."""
        return "".join(cell.text for cell in self.cells_on_row(y))

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    def __bool__(self) -> bool:
        return bool(self._cells)

    def __repr__(self) -> str:
        return f"HistoryLog({self._cells!r})"
