"""GPIO line exceptions.

Both errors are absorbed at the LineBank boundary and turned into an
UNAVAILABLE cell; they never reach the user as text.

- LineError: Base class for per-line failures
- LineConfigurationError: Line could not be exported or set to input
- LineReadError: Line value could not be read during a poll tick
"""

from .base import GpioLocatorError


class LineError(GpioLocatorError):
    """A single GPIO line failed."""

    def __init__(self, index: int, user_message: str, technical_message: str, **kwargs):
        super().__init__(
            user_message=user_message,
            technical_message=technical_message,
            **kwargs
        )
        self.index = index


class LineConfigurationError(LineError):
    """Line could not be configured as an input at startup."""

    def __init__(self, index: int, reason: str):
        """
        Initialize line configuration error.

        Args:
            index: GPIO line number
            reason: Underlying failure (usually the OSError text)
        """
        super().__init__(
            index,
            user_message=f"GPIO line {index} is not available",
            technical_message=f"Failed to configure GPIO line {index} as input: {reason}",
            recovery_hint="Check that the line exists and that you can write to the sysfs GPIO export file"
        )
        self.reason = reason


class LineReadError(LineError):
    """Line value could not be read."""

    def __init__(self, index: int, reason: str):
        """
        Initialize line read error.

        Args:
            index: GPIO line number
            reason: Underlying failure
        """
        super().__init__(
            index,
            user_message=f"Could not read GPIO line {index}",
            technical_message=f"Failed to read value of GPIO line {index}: {reason}",
        )
        self.reason = reason
