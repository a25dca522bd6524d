"""Textual dashboard for the GPIO line locator."""

from .app import LineLocator

__all__ = ["LineLocator"]
