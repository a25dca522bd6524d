"""Sysfs GPIO line control (/sys/class/gpio)."""

import logging
from dataclasses import dataclass
from pathlib import Path

from gpiolocator.exceptions import LineConfigurationError, LineReadError

logger = logging.getLogger(__name__)

DEFAULT_GPIO_ROOT = Path("/sys/class/gpio")


@dataclass(frozen=True)
class SysfsLineHandle:
    """A line exported through sysfs."""

    index: int
    path: Path

    @property
    def value_path(self) -> Path:
        return self.path / "value"


class SysfsLineControl:
    """
    Line control backed by the legacy sysfs GPIO interface.

    Layout under root:
        export            write a line number to export it
        gpio{N}/direction "in" or "out"
        gpio{N}/value     "0" or "1"
    """

    def __init__(self, root: Path = DEFAULT_GPIO_ROOT):
        """
        Initialize sysfs line control.

        Args:
            root: Sysfs GPIO directory
        """
        self.root = Path(root)

    def line_path(self, index: int) -> Path:
        return self.root / f"gpio{index}"

    def is_exported(self, index: int) -> bool:
        return self.line_path(index).is_dir()

    def configure(self, index: int) -> SysfsLineHandle:
        """
        Export line `index` (if needed) and set its direction to input.

        Raises:
            LineConfigurationError: If export or direction setup fails
        """
        path = self.line_path(index)
        try:
            if not path.is_dir():
                (self.root / "export").write_text(f"{index}\n")
                if not path.is_dir():
                    raise LineConfigurationError(index, f"{path} did not appear after export")
            (path / "direction").write_text("in\n")
        except OSError as e:
            raise LineConfigurationError(index, str(e)) from e

        logger.debug(f"Configured GPIO line {index} as input")
        return SysfsLineHandle(index=index, path=path)

    def read(self, handle: SysfsLineHandle) -> bool:
        """
        Read the value file of a configured line.

        Raises:
            LineReadError: If the file cannot be read or holds no number
        """
        try:
            raw = handle.value_path.read_text().strip()
            return int(raw) != 0
        except (OSError, ValueError) as e:
            raise LineReadError(handle.index, str(e)) from e
