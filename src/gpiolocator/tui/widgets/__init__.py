"""TUI widgets for the GPIO line locator."""

from .line_grid import LineGrid
from .status_bar import StatusBar

__all__ = [
    "LineGrid",
    "StatusBar",
]
