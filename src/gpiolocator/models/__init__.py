"""Data models for the GPIO line locator."""

from .config import AppConfig, normalize_line_count
from .enums import CellStyle, Level
from .line import LINES_PER_ROW, BankSnapshot, ChangeLatch, LineSnapshot, levels_differ

__all__ = [
    # Config
    "AppConfig",
    # Models
    "BankSnapshot",
    # Enums
    "CellStyle",
    "ChangeLatch",
    "LINES_PER_ROW",
    "Level",
    "LineSnapshot",
    "levels_differ",
    "normalize_line_count",
]
