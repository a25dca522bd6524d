"""Line control protocol consumed by the line bank."""

from __future__ import annotations

from typing import Protocol


class LineHandle(Protocol):
    """Opaque reference to a configured input line."""

    index: int


class LineControl(Protocol):
    """
    Protocol for the OS line-control interface.

    Implementations must be safe to call from the polling thread.
    """

    def configure(self, index: int) -> LineHandle:
        """
        Export the line and set it to input.

        Idempotent: configuring an already configured line succeeds.

        Raises:
            LineConfigurationError: If the line cannot be used
        """
        ...

    def read(self, handle: LineHandle) -> bool:
        """
        Read the current level (True for high).

        Raises:
            LineReadError: If the value cannot be read right now
        """
        ...
