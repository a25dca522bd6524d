"""Cell style definitions - single source of truth for line colors.

Color Scheme:
- Changed since last acknowledge: yellow (regardless of level)
- Stable high: green
- Stable low: blue
- Unavailable (unconfigured, unreadable or blocked): dark grey
"""

from gpiolocator.models import CellStyle, Level

# Rich style strings for each cell style
CELL_STYLES: dict[CellStyle, str] = {
    CellStyle.ATTENTION: "black on yellow",
    CellStyle.STABLE_HIGH: "black on green",
    CellStyle.STABLE_LOW: "white on blue",
    CellStyle.UNAVAILABLE: "white on grey30",
}

# Marker drawn in front of the selected row
SELECTED_ROW_MARKER = ">>"


def cell_style(level: Level, changed: bool, blocked: bool = False) -> CellStyle:
    """Get the style for a line based on its state.

    Style priority:
    1. Changed (attention) - always takes highest priority
    2. High level
    3. Low level
    4. Unavailable - blocked lines land here from their first poll after blocking

    Args:
        level: Level read at the last poll
        changed: Whether the sticky change flag is raised
        blocked: Whether the line is excluded from polling

    Returns:
        CellStyle to display
    """
    if changed:
        return CellStyle.ATTENTION
    if level is Level.HIGH:
        return CellStyle.STABLE_HIGH
    if level is Level.LOW:
        return CellStyle.STABLE_LOW
    return CellStyle.UNAVAILABLE
