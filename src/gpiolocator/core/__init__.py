"""Core line tracking: shared line bank and its polling thread."""

from .line_bank import LineBank
from .polling import PollingEngine

__all__ = ["LineBank", "PollingEngine"]
