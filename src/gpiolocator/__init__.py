"""gpiolocator: terminal dashboard for finding GPIO input lines."""

__version__ = "0.1.0"

# Core state
from .core import LineBank, PollingEngine

__all__ = [
    "LineBank",
    "PollingEngine",
]
