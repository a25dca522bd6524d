"""Tests for SysfsLineControl against a fake sysfs tree."""

import pytest

from gpiolocator.core import LineBank
from gpiolocator.exceptions import LineConfigurationError, LineReadError
from gpiolocator.gpio import SysfsLineControl, SysfsLineHandle
from gpiolocator.models import Level


class TestConfigure:
    """Export and direction setup."""

    @pytest.mark.unit
    def test_exported_line_set_to_input(self, sysfs_root):
        control = SysfsLineControl(sysfs_root)

        handle = control.configure(1)

        assert handle == SysfsLineHandle(index=1, path=sysfs_root / "gpio1")
        assert (sysfs_root / "gpio1" / "direction").read_text() == "in\n"
        # Already exported, so nothing was written to export
        assert (sysfs_root / "export").read_text() == ""

    @pytest.mark.unit
    def test_configure_is_idempotent(self, sysfs_root):
        control = SysfsLineControl(sysfs_root)
        assert control.configure(0) == control.configure(0)

    @pytest.mark.unit
    def test_missing_line_is_exported_then_rejected(self, sysfs_root):
        control = SysfsLineControl(sysfs_root)

        with pytest.raises(LineConfigurationError) as exc_info:
            control.configure(9)

        assert exc_info.value.index == 9
        assert (sysfs_root / "export").read_text() == "9\n"

    @pytest.mark.unit
    def test_missing_root(self, temp_dir):
        control = SysfsLineControl(temp_dir / "nope")

        with pytest.raises(LineConfigurationError):
            control.configure(0)


class TestRead:
    """Reading value files."""

    @pytest.mark.unit
    def test_reads_levels(self, sysfs_root):
        control = SysfsLineControl(sysfs_root)
        assert control.read(control.configure(0)) is True
        assert control.read(control.configure(1)) is False

    @pytest.mark.unit
    def test_unreadable_value(self, sysfs_root):
        control = SysfsLineControl(sysfs_root)
        handle = control.configure(2)
        (sysfs_root / "gpio2" / "value").unlink()

        with pytest.raises(LineReadError) as exc_info:
            control.read(handle)
        assert exc_info.value.index == 2

    @pytest.mark.unit
    def test_garbage_value(self, sysfs_root):
        control = SysfsLineControl(sysfs_root)
        handle = control.configure(3)
        (sysfs_root / "gpio3" / "value").write_text("x\n")

        with pytest.raises(LineReadError):
            control.read(handle)


class TestWithLineBank:
    """LineBank over the fake sysfs tree."""

    @pytest.mark.integration
    def test_bank_reads_sysfs_lines(self, sysfs_root):
        bank = LineBank(SysfsLineControl(sysfs_root), 8)
        bank.prime()

        snapshot = bank.snapshot()
        assert [line.level for line in snapshot.lines[:5]] == [
            Level.HIGH, Level.LOW, Level.HIGH, Level.LOW, Level.UNAVAILABLE,
        ]
        assert snapshot.available_count == 4

        (sysfs_root / "gpio1" / "value").write_text("1\n")
        bank.sample_all()
        assert [line.index for line in bank.snapshot().lines if line.changed] == [1]
