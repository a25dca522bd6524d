"""Frame builder: line bank snapshot to a grid of styled cells.

Pure functions with no Textual dependency, so the layout rules are
testable without running the dashboard.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from gpiolocator.models import LINES_PER_ROW, BankSnapshot, CellStyle

from .colors import cell_style

if TYPE_CHECKING:
    from gpiolocator.tui.services import ViewportState

KEY_LEGEND = "q to quit, r to refresh, j/k to scroll, b to block changed pins"


@dataclass(frozen=True)
class GridCell:
    """One line in the grid."""

    index: int
    label: str
    style: CellStyle


@dataclass(frozen=True)
class GridFrame:
    """Everything needed to draw one frame."""

    rows: tuple[tuple[GridCell, ...], ...]
    title: str
    legend: str
    selected_row: int = 0

    @property
    def row_count(self) -> int:
        return len(self.rows)


def format_staleness(elapsed: float) -> str:
    """Header text for the time since the last completed poll."""
    return f"Delay {round(elapsed * 1_000_000)}μs"


def build_grid(snapshot: BankSnapshot, viewport: Optional["ViewportState"] = None) -> GridFrame:
    """
    Build the frame for a snapshot.

    Layout is ceil(N / 8) rows of 8 cells; line index = row * 8 + col.

    Args:
        snapshot: Bank snapshot to draw
        viewport: Scroll state; row 0 is selected when omitted

    Returns:
        GridFrame with every row (the widget crops to the visible window)
    """
    rows = []
    for start in range(0, snapshot.line_count, LINES_PER_ROW):
        rows.append(tuple(
            GridCell(
                index=line.index,
                label=f"Pin{line.index}",
                style=cell_style(line.level, line.changed, line.blocked),
            )
            for line in snapshot.lines[start:start + LINES_PER_ROW]
        ))

    return GridFrame(
        rows=tuple(rows),
        title=format_staleness(snapshot.elapsed),
        legend=KEY_LEGEND,
        selected_row=viewport.selected_row if viewport is not None else 0,
    )
