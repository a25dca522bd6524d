"""TUI-specific services."""

from .viewport_service import ViewportState

__all__ = ["ViewportState"]
