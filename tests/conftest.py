"""Pytest fixtures for tests."""

from dataclasses import dataclass
from pathlib import Path
from tempfile import TemporaryDirectory
from typing import Optional

import pytest

from gpiolocator.core import LineBank
from gpiolocator.exceptions import LineConfigurationError, LineReadError


@dataclass(frozen=True)
class FakeHandle:
    """Handle returned by FakeLineControl."""

    index: int


class FakeLineControl:
    """
    Scriptable line control.

    - levels[index] = True/False: line reads high/low
    - levels[index] = None or missing: read raises LineReadError
    - unconfigurable: indices whose configure() raises LineConfigurationError
    """

    def __init__(self, levels: Optional[dict[int, Optional[bool]]] = None, unconfigurable=()):
        self.levels: dict[int, Optional[bool]] = dict(levels or {})
        self.unconfigurable = set(unconfigurable)
        self.configured: list[int] = []
        self.reads: dict[int, int] = {}

    def configure(self, index: int) -> FakeHandle:
        if index in self.unconfigurable:
            raise LineConfigurationError(index, "no such line")
        self.configured.append(index)
        return FakeHandle(index)

    def read(self, handle: FakeHandle) -> bool:
        self.reads[handle.index] = self.reads.get(handle.index, 0) + 1
        value = self.levels.get(handle.index)
        if value is None:
            raise LineReadError(handle.index, "value not readable")
        return value


@pytest.fixture
def temp_dir():
    """Create a temporary directory that gets cleaned up."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def fake_control():
    """Line control where nothing is readable until a test sets levels."""
    return FakeLineControl()


@pytest.fixture
def bank(fake_control):
    """Eight-line bank over fake_control."""
    return LineBank(fake_control, 8)


@pytest.fixture
def sysfs_root(temp_dir):
    """
    Fake /sys/class/gpio tree.

    Lines 0-3 are already exported (0 and 2 high, 1 and 3 low); the rest
    are absent, so writing to export does not make them appear.
    """
    root = temp_dir / "gpio"
    root.mkdir()
    (root / "export").write_text("")
    for index, value in enumerate(["1", "0", "1", "0"]):
        line_dir = root / f"gpio{index}"
        line_dir.mkdir()
        (line_dir / "direction").write_text("out\n")
        (line_dir / "value").write_text(f"{value}\n")
    return root


@pytest.fixture
def make_control():
    """Factory for FakeLineControl instances."""
    return FakeLineControl
