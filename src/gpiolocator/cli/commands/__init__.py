"""CLI commands for gpiolocator."""

from .lines import lines_group

__all__ = ["lines_group"]
