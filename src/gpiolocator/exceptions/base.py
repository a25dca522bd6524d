"""Root of the gpiolocator exception hierarchy."""

from typing import Optional


class GpioLocatorError(Exception):
    """
    Base exception for all gpiolocator errors.

    Every error is reported twice: the log gets `technical_message`, the
    CLI banner and TUI notifications get `user_message` followed by
    `recovery_hint` when there is one.
    """

    def __init__(
        self,
        user_message: str,
        *,
        technical_message: Optional[str] = None,
        recovery_hint: Optional[str] = None,
    ):
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        return self.user_message

    def get_full_message(self) -> str:
        """User message with the recovery hint appended, for notifications."""
        if not self.recovery_hint:
            return self.user_message
        return f"{self.user_message}\n\nSuggestion: {self.recovery_hint}"
