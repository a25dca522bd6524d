"""GPIO line control implementations."""

from .protocols import LineControl, LineHandle
from .sysfs import DEFAULT_GPIO_ROOT, SysfsLineControl, SysfsLineHandle

__all__ = [
    "DEFAULT_GPIO_ROOT",
    "LineControl",
    "LineHandle",
    "SysfsLineControl",
    "SysfsLineHandle",
]
