"""Tests for PollingEngine - background sampling thread."""

import time
from unittest.mock import Mock

import pytest

from gpiolocator.core import LineBank, PollingEngine
from gpiolocator.models import Level


def wait_for(predicate, timeout: float = 2.0) -> bool:
    """Poll predicate until true or timeout."""
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.005)
    return predicate()


class TestPollingEngine:
    """PollingEngine lifecycle and ticking."""

    @pytest.mark.unit
    def test_rejects_non_positive_interval(self, bank):
        with pytest.raises(ValueError):
            PollingEngine(bank, poll_interval=0)

    @pytest.mark.unit
    def test_tick_samples_bank(self, bank, fake_control):
        engine = PollingEngine(bank, poll_interval=1.0)
        fake_control.levels[2] = True

        engine.tick()

        assert engine.tick_count == 1
        assert bank.snapshot().lines[2].level is Level.HIGH

    @pytest.mark.unit
    def test_tick_survives_unexpected_error(self):
        bank = Mock(spec=LineBank)
        bank.sample_all.side_effect = RuntimeError("boom")
        engine = PollingEngine(bank, poll_interval=1.0)

        engine.tick()  # Should not raise

        assert engine.tick_count == 0

    @pytest.mark.unit
    def test_skipped_tick_not_counted(self):
        bank = Mock(spec=LineBank)
        bank.sample_all.return_value = False
        engine = PollingEngine(bank, poll_interval=1.0)

        engine.tick()

        assert engine.tick_count == 0

    @pytest.mark.integration
    def test_background_thread_polls_periodically(self, bank, fake_control):
        engine = PollingEngine(bank, poll_interval=0.01)
        engine.start()
        try:
            assert engine.is_running
            assert wait_for(lambda: engine.tick_count >= 3)

            fake_control.levels[7] = False
            assert wait_for(lambda: bank.snapshot().lines[7].changed)
        finally:
            engine.stop()

        assert not engine.is_running

    @pytest.mark.integration
    def test_start_primes_before_sampling(self, fake_control):
        """Lines readable at startup are not reported as changed."""
        fake_control.levels.update({0: True, 1: False})
        bank = LineBank(fake_control, 8)

        with PollingEngine(bank, poll_interval=0.01) as engine:
            assert wait_for(lambda: engine.tick_count >= 2)

        snapshot = bank.snapshot()
        assert snapshot.lines[0].level is Level.HIGH
        assert snapshot.lines[1].level is Level.LOW
        assert snapshot.changed_count == 0

    @pytest.mark.integration
    def test_stop_halts_ticking(self, bank):
        engine = PollingEngine(bank, poll_interval=0.01)
        engine.start()
        assert wait_for(lambda: engine.tick_count >= 1)
        engine.stop()

        # Allow the thread to observe the stop event
        time.sleep(0.05)
        count = engine.tick_count
        time.sleep(0.05)
        assert engine.tick_count == count

    @pytest.mark.unit
    def test_double_start_is_ignored(self, bank):
        engine = PollingEngine(bank, poll_interval=0.5)
        engine.start()
        try:
            first_thread = engine._thread
            engine.start()
            assert engine._thread is first_thread
        finally:
            engine.stop()
