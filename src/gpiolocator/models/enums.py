"""Enumerations for the GPIO line locator."""

from enum import Enum
from typing import Optional


class Level(str, Enum):
    """Tri-state level of a GPIO input line."""

    HIGH = "high"
    LOW = "low"
    UNAVAILABLE = "unavailable"  # Unconfigured, unreadable or blocked

    @classmethod
    def from_reading(cls, value: Optional[bool]) -> "Level":
        """Convert a raw reading (None when the read failed) to a level."""
        if value is None:
            return cls.UNAVAILABLE
        return cls.HIGH if value else cls.LOW

    @property
    def is_defined(self) -> bool:
        """True for HIGH and LOW."""
        return self is not Level.UNAVAILABLE


class CellStyle(str, Enum):
    """Display style of a grid cell."""

    ATTENTION = "attention"  # Changed since last acknowledge
    STABLE_HIGH = "stable_high"
    STABLE_LOW = "stable_low"
    UNAVAILABLE = "unavailable"
