"""Viewport state for scrolling the line grid.

Pure row geometry with no Textual dependency:
- Selected row moves one whole row at a time, clamped to [0, rows - 1]
- The visible window follows the selected row
"""

import logging
from typing import Literal

logger = logging.getLogger(__name__)

Direction = Literal["up", "down"]


class ViewportState:
    """
    Scroll/selection cursor over the grid rows.

    Example:
        >>> viewport = ViewportState(row_count=32)
        >>> viewport.scroll_down()
        1
        >>> viewport.window(height=10)
        range(0, 10)
    """

    def __init__(self, row_count: int):
        """
        Initialize the viewport.

        Args:
            row_count: Number of grid rows (at least 1)

        Raises:
            ValueError: If row_count is less than 1
        """
        if row_count < 1:
            raise ValueError(f"row_count must be at least 1, got {row_count}")
        self.row_count = row_count
        self.selected_row = 0
        self.offset = 0

    def scroll(self, direction: Direction) -> int:
        """
        Move the selection one row.

        Args:
            direction: "up" or "down"

        Returns:
            The selected row after the move
        """
        step = 1 if direction == "down" else -1
        self.selected_row = min(max(self.selected_row + step, 0), self.row_count - 1)
        return self.selected_row

    def scroll_down(self) -> int:
        return self.scroll("down")

    def scroll_up(self) -> int:
        return self.scroll("up")

    def window(self, height: int) -> range:
        """
        Rows visible in a view `height` rows tall.

        Scrolls the offset just enough to keep the selected row visible.
        """
        height = max(1, height)
        if self.selected_row < self.offset:
            self.offset = self.selected_row
        elif self.selected_row >= self.offset + height:
            self.offset = self.selected_row - height + 1
        self.offset = min(self.offset, max(0, self.row_count - height))
        return range(self.offset, min(self.offset + height, self.row_count))
