"""Tests for the frame builder and cell style precedence."""

import pytest

from gpiolocator.core import LineBank
from gpiolocator.models import BankSnapshot, CellStyle, Level, LineSnapshot
from gpiolocator.tui.services import ViewportState
from gpiolocator.ui_shared import KEY_LEGEND, build_grid, cell_style, format_staleness


class TestCellStyle:
    """Style precedence: changed, high, low, unavailable."""

    @pytest.mark.unit
    @pytest.mark.parametrize("level", list(Level))
    def test_changed_always_wins(self, level):
        assert cell_style(level, changed=True) is CellStyle.ATTENTION
        assert cell_style(level, changed=True, blocked=True) is CellStyle.ATTENTION

    @pytest.mark.unit
    def test_stable_levels(self):
        assert cell_style(Level.HIGH, changed=False) is CellStyle.STABLE_HIGH
        assert cell_style(Level.LOW, changed=False) is CellStyle.STABLE_LOW

    @pytest.mark.unit
    def test_unavailable(self):
        assert cell_style(Level.UNAVAILABLE, changed=False) is CellStyle.UNAVAILABLE
        assert cell_style(Level.UNAVAILABLE, changed=False, blocked=True) is CellStyle.UNAVAILABLE


class TestBuildGrid:
    """Layout of the frame."""

    @pytest.mark.unit
    @pytest.mark.parametrize("count,rows", [(1, 1), (8, 1), (10, 2), (256, 32), (257, 33)])
    def test_rows_of_eight(self, make_control, count, rows):
        frame = build_grid(LineBank(make_control(), count).snapshot())

        assert frame.row_count == rows
        assert all(len(row) == 8 for row in frame.rows)

    @pytest.mark.unit
    def test_cells_indexed_row_major(self, make_control):
        frame = build_grid(LineBank(make_control(), 16).snapshot())

        for row_index, row in enumerate(frame.rows):
            for col, cell in enumerate(row):
                assert cell.index == row_index * 8 + col
                assert cell.label == f"Pin{cell.index}"

    @pytest.mark.unit
    def test_cell_styles_follow_bank(self, bank, fake_control):
        fake_control.levels.update({0: True, 1: False})
        bank.prime()
        fake_control.levels[2] = True
        bank.sample_all()

        styles = [cell.style for cell in build_grid(bank.snapshot()).rows[0]]

        assert styles[:4] == [
            CellStyle.STABLE_HIGH,
            CellStyle.STABLE_LOW,
            CellStyle.ATTENTION,
            CellStyle.UNAVAILABLE,
        ]

    @pytest.mark.unit
    def test_title_and_legend(self):
        snapshot = BankSnapshot(
            lines=tuple(LineSnapshot(index=i) for i in range(8)),
            last_poll=10.0,
            taken_at=10.0015,
        )

        frame = build_grid(snapshot)

        assert frame.title == "Delay 1500μs"
        assert frame.legend == KEY_LEGEND

    @pytest.mark.unit
    def test_selected_row_from_viewport(self, make_control):
        bank = LineBank(make_control(), 32)
        viewport = ViewportState(bank.row_count)
        viewport.scroll_down()
        viewport.scroll_down()

        assert build_grid(bank.snapshot(), viewport).selected_row == 2
        assert build_grid(bank.snapshot()).selected_row == 0


class TestFormatStaleness:
    """Header text."""

    @pytest.mark.unit
    def test_microseconds(self):
        assert format_staleness(0.0) == "Delay 0μs"
        assert format_staleness(0.25) == "Delay 250000μs"


class TestBankSnapshot:
    """Snapshot helpers."""

    @pytest.mark.unit
    def test_counts(self):
        snapshot = BankSnapshot(
            lines=(
                LineSnapshot(index=0, level=Level.HIGH, configured=True),
                LineSnapshot(index=1, level=Level.LOW, changed=True, configured=True),
                LineSnapshot(index=2, changed=True, blocked=True),
            ),
            last_poll=5.0,
            taken_at=4.0,
        )

        assert snapshot.available_count == 2
        assert snapshot.changed_count == 2
        assert snapshot.blocked_count == 1
        assert snapshot.elapsed == 0.0
        assert snapshot.lines[1].row == 0
        assert snapshot.lines[1].col == 1

    @pytest.mark.unit
    def test_is_frozen(self, bank):
        snapshot = bank.snapshot()
        with pytest.raises(Exception):
            snapshot.lines[0].changed = True
