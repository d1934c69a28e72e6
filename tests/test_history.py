"""Tests for HistoryLog -- append, positional removal and row shifting."""

from __future__ import annotations

from hexdex.console.cell import Cell
from hexdex.console.history import HistoryLog


def _row(log: HistoryLog, y: int) -> list[tuple[str, int]]:
    return [(c.text, c.x) for c in log.cells_on_row(y)]


class TestAppendAndClear:
    def test_starts_empty(self) -> None:
        log = HistoryLog()
        assert len(log) == 0
        assert not log

    def test_append_keeps_insertion_order(self) -> None:
        log = HistoryLog()
        a = Cell("a", x=5, y=0)
        b = Cell("b", x=0, y=0)
        log.append(a)
        log.append(b)
        assert list(log) == [a, b]

    def test_clear_empties(self) -> None:
        log = HistoryLog([Cell("a", x=0, y=0), Cell("b", x=1, y=0)])
        log.clear()
        assert len(log) == 0

    def test_cells_returns_a_copy(self) -> None:
        log = HistoryLog([Cell("a", x=0, y=0)])
        cells = log.cells
        cells.clear()
        assert len(log) == 1


class TestRemoveAt:
    def test_removes_exact_match(self) -> None:
        a = Cell("a", x=0, y=2)
        b = Cell("b", x=1, y=2)
        log = HistoryLog([a, b])
        assert log.remove_at(1, 2) is b
        assert list(log) == [a]

    def test_no_match_is_noop(self) -> None:
        a = Cell("a", x=0, y=2)
        log = HistoryLog([a])
        assert log.remove_at(0, 3) is None
        assert log.remove_at(4, 2) is None
        assert list(log) == [a]

    def test_removes_only_first_of_duplicates(self) -> None:
        first = Cell("old", x=3, y=1)
        second = Cell("new", x=3, y=1)
        log = HistoryLog([first, second])
        log.remove_at(3, 1)
        assert list(log) == [second]

    def test_empty_log_is_noop(self) -> None:
        log = HistoryLog()
        assert log.remove_at(0, 0) is None


class TestShiftRow:
    def test_shifts_cells_at_and_after_column(self) -> None:
        log = HistoryLog([Cell(ch, x=i, y=0) for i, ch in enumerate("abcd")])
        log.shift_row(2, 0, 1)
        assert _row(log, 0) == [("a", 0), ("b", 1), ("c", 3), ("d", 4)]

    def test_other_rows_untouched(self) -> None:
        log = HistoryLog([Cell("a", x=4, y=0), Cell("b", x=4, y=1)])
        log.shift_row(0, 1, -1)
        assert log.cell_at(4, 0) is not None
        assert log.cell_at(3, 1) is not None

    def test_negative_delta(self) -> None:
        log = HistoryLog([Cell(ch, x=i, y=5) for i, ch in enumerate("xyz")])
        log.remove_at(1, 5)
        log.shift_row(1, 5, -1)
        assert _row(log, 5) == [("x", 0), ("z", 1)]


class TestInsertDeleteRoundTrip:
    def test_delete_undoes_insert(self) -> None:
        log = HistoryLog([Cell(ch, x=10 + i, y=3, trailing_breaks=0) for i, ch in enumerate("abc")])
        before = _row(log, 3)

        log.shift_row(11, 3, 1)
        log.append(Cell("X", x=11, y=3, trailing_breaks=0))
        assert log.row_text(3) == "aXbc"

        log.remove_at(11, 3)
        log.shift_row(11, 3, -1)
        assert _row(log, 3) == before


class TestText:
    def test_text_uses_insertion_order(self) -> None:
        log = HistoryLog([Cell("b", x=1, y=0), Cell("a", x=0, y=0)])
        assert log.text() == "ba"

    def test_row_text_uses_column_order(self) -> None:
        log = HistoryLog([Cell("b", x=1, y=0), Cell("a", x=0, y=0), Cell("z", x=0, y=1)])
        assert log.row_text(0) == "ab"
        assert log.row_text(1) == "z"
