"""Grid widget showing every GPIO line as a colored cell."""

from rich.text import Text
from textual.widgets import Static

from gpiolocator.tui.services import ViewportState
from gpiolocator.ui_shared import CELL_STYLES, SELECTED_ROW_MARKER, GridFrame

CELL_WIDTH = 12


class LineGrid(Static):
    """
    Rows of eight line cells (presentation only).

    The widget holds no line state. Each render tick the app passes a
    freshly built GridFrame and the viewport, and only the rows in the
    viewport window are drawn.
    """

    DEFAULT_CSS = """
    LineGrid {
        border: round $primary;
        border-title-align: left;
        border-subtitle-align: center;
        height: 1fr;
        padding: 0 1;
    }
    """

    def __init__(self) -> None:
        super().__init__()
        self._frame: GridFrame | None = None
        self.visible_rows: range = range(0)

    @property
    def frame(self) -> GridFrame | None:
        """Last frame drawn."""
        return self._frame

    def show_frame(self, frame: GridFrame, viewport: ViewportState) -> None:
        """
        Draw a frame.

        Args:
            frame: Frame built from the latest bank snapshot
            viewport: Scroll state deciding which rows are visible
        """
        self._frame = frame
        self.visible_rows = viewport.window(self.content_size.height or frame.row_count)
        self.border_title = frame.title
        self.border_subtitle = frame.legend
        self.update(self._render_rows(frame))

    def _render_rows(self, frame: GridFrame) -> Text:
        text = Text(no_wrap=True)
        blank_marker = " " * len(SELECTED_ROW_MARKER)
        for position, row_index in enumerate(self.visible_rows):
            if position:
                text.append("\n")
            marker = SELECTED_ROW_MARKER if row_index == frame.selected_row else blank_marker
            text.append(f"{marker} ")
            for cell in frame.rows[row_index]:
                text.append(cell.label.center(CELL_WIDTH - 1), style=CELL_STYLES[cell.style])
                text.append(" ")
        return text
