"""Terminal acquisition exceptions (fatal at startup)."""

from .base import GpioLocatorError


class TerminalUnavailableError(GpioLocatorError):
    """The dashboard could not take over the terminal."""

    def __init__(self, reason: str):
        super().__init__(
            user_message="Cannot start the dashboard: no interactive terminal",
            technical_message=f"Terminal acquisition failed: {reason}",
            recovery_hint=(
                "Run gpiolocator from an interactive terminal, "
                "or use 'gpiolocator lines list' for a one-shot reading"
            )
        )
        self.reason = reason
