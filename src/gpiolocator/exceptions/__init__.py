"""
Custom exception hierarchy for gpiolocator.

## Exception Hierarchy

```
GpioLocatorError (base)
├── LineError
│   ├── LineConfigurationError
│   └── LineReadError
├── ConfigurationError
│   ├── ConfigFileInvalidError
│   └── ConfigValidationError
└── TerminalUnavailableError
```

Per-line errors are absorbed by `gpiolocator.core.LineBank` and shown as
unavailable cells. Only configuration and terminal errors reach the CLI,
which prints `user_message` and `recovery_hint` on stderr.

See `gpiolocator.exceptions.handlers` for utilities to handle these exceptions systematically.
"""

from .base import GpioLocatorError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .handlers import (
    ErrorCollector,
    ErrorContext,
    collect_errors,
    format_error_for_display,
    handle_errors,
    wrap_pydantic_error,
)
from .line import LineConfigurationError, LineError, LineReadError
from .terminal import TerminalUnavailableError

__all__ = [
    # Config
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ConfigurationError",
    "ErrorCollector",
    "ErrorContext",
    # Base
    "GpioLocatorError",
    # Line
    "LineConfigurationError",
    "LineError",
    "LineReadError",
    # Terminal
    "TerminalUnavailableError",
    "collect_errors",
    "format_error_for_display",
    # Handlers
    "handle_errors",
    "wrap_pydantic_error",
]
