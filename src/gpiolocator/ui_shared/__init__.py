"""Shared UI infrastructure.

- colors: Cell style definitions and style precedence
- grid: Pure frame builder used by the dashboard and the CLI listing
"""

from .colors import CELL_STYLES, SELECTED_ROW_MARKER, cell_style
from .grid import KEY_LEGEND, GridCell, GridFrame, build_grid, format_staleness

__all__ = [
    # Colors
    "CELL_STYLES",
    "KEY_LEGEND",
    "SELECTED_ROW_MARKER",
    # Grid
    "GridCell",
    "GridFrame",
    "build_grid",
    "cell_style",
    "format_staleness",
]
