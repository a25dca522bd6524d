"""Lock-guarded line bank: sampled levels, change latches and blocked lines."""

import logging
import time
from collections.abc import Iterator
from contextlib import contextmanager
from threading import Lock
from typing import Optional

from gpiolocator.exceptions import LineConfigurationError, LineReadError, collect_errors
from gpiolocator.gpio import LineControl, LineHandle
from gpiolocator.models import (
    LINES_PER_ROW,
    BankSnapshot,
    ChangeLatch,
    Level,
    LineSnapshot,
    normalize_line_count,
)

logger = logging.getLogger(__name__)


class LineBank:
    """
    Shared state for every watched GPIO line.

    The polling thread and the dashboard both hold a reference to the same
    bank. Every method below is one critical section over the bank lock and
    these methods are the only places the per-line sequences are mutated:

    - sample_all / prime: polling thread
    - acknowledge_all / block_changed: key bindings
    - snapshot: render loop (read only)

    Per-line state is kept as parallel lists of identical length.
    """

    def __init__(self, line_control: LineControl, count: int, lock_timeout: float = 1.0):
        """
        Create the bank and configure every line once.

        Args:
            line_control: OS line-control interface
            count: Requested number of lines (rounded up to a multiple of 8)
            lock_timeout: Seconds to wait for the lock before skipping an operation
        """
        self._control = line_control
        self._lock = Lock()
        self._lock_timeout = lock_timeout

        n = normalize_line_count(count)
        self._handles: list[Optional[LineHandle]] = [None] * n
        self._levels: list[Level] = [Level.UNAVAILABLE] * n
        self._previous: list[Level] = [Level.UNAVAILABLE] * n
        self._latches: list[ChangeLatch] = [ChangeLatch() for _ in range(n)]
        self._blocked: list[bool] = [False] * n
        self._last_poll = time.monotonic()

        self._configure_lines()
        # Nothing else holds the bank yet
        self._last_snapshot: BankSnapshot = self._take_snapshot()

    def _configure_lines(self) -> None:
        collector = collect_errors("configure GPIO lines", catch=(LineConfigurationError,))
        for index in range(len(self._handles)):
            with collector.try_operation(f"configure line {index}"):
                self._handles[index] = self._control.configure(index)

        for _, error in collector.errors:
            logger.debug(error.technical_message)
        logger.info(collector.get_summary())

    @contextmanager
    def _locked(self, operation: str, timeout: Optional[float] = None) -> Iterator[bool]:
        """Hold the bank lock; yields False if it could not be acquired in time."""
        acquired = self._lock.acquire(timeout=self._lock_timeout if timeout is None else timeout)
        if not acquired:
            logger.warning(f"Line bank busy, skipping {operation}")
        try:
            yield acquired
        finally:
            if acquired:
                self._lock.release()

    @property
    def line_count(self) -> int:
        return len(self._handles)

    @property
    def row_count(self) -> int:
        return self.line_count // LINES_PER_ROW

    def _read(self, index: int) -> Level:
        handle = self._handles[index]
        if handle is None:
            return Level.UNAVAILABLE
        try:
            return Level.from_reading(self._control.read(handle))
        except LineReadError as e:
            logger.debug(e.technical_message)
            return Level.UNAVAILABLE

    def prime(self) -> bool:
        """
        Take a baseline reading without raising any change latch.

        Returns:
            False if the lock could not be acquired
        """
        with self._locked("prime") as acquired:
            if not acquired:
                return False
            for index in range(self.line_count):
                if self._blocked[index]:
                    continue
                level = self._read(index)
                self._previous[index] = level
                self._levels[index] = level
            self._last_poll = time.monotonic()
            return True

    def sample_all(self) -> bool:
        """
        Read every unblocked line and raise latches on level changes.

        Blocked lines are not read and report UNAVAILABLE. A failed read
        degrades that line to UNAVAILABLE for this tick only.

        Returns:
            False if the lock could not be acquired
        """
        with self._locked("sample") as acquired:
            if not acquired:
                return False
            for index in range(self.line_count):
                if self._blocked[index]:
                    self._previous[index] = Level.UNAVAILABLE
                    self._levels[index] = Level.UNAVAILABLE
                    continue
                level = self._read(index)
                if self._latches[index].raise_if_differs(self._previous[index], level):
                    logger.debug(f"Line {index}: {self._previous[index].value} -> {level.value}")
                self._previous[index] = level
                self._levels[index] = level
            self._last_poll = time.monotonic()
            return True

    def acknowledge_all(self, timeout: Optional[float] = None) -> int:
        """
        Clear every change latch, blocked lines included.

        Levels and blocked flags are left alone.

        Returns:
            Number of latches that were raised
        """
        with self._locked("acknowledge", timeout) as acquired:
            if not acquired:
                return 0
            cleared = 0
            for latch in self._latches:
                if latch.is_raised:
                    cleared += 1
                latch.clear()
        if cleared:
            logger.info(f"Acknowledged {cleared} changed line(s)")
        return cleared

    def block_changed(self, timeout: Optional[float] = None) -> list[int]:
        """
        Permanently stop polling every line whose latch is raised.

        The latch itself stays raised until acknowledged.

        Returns:
            Indices of lines blocked by this call
        """
        with self._locked("block", timeout) as acquired:
            if not acquired:
                return []
            newly_blocked = []
            for index, latch in enumerate(self._latches):
                if latch.is_raised and not self._blocked[index]:
                    self._blocked[index] = True
                    self._handles[index] = None
                    newly_blocked.append(index)
        if newly_blocked:
            logger.info(f"Blocked line(s) {newly_blocked}")
        return newly_blocked

    def snapshot(self, timeout: Optional[float] = None) -> BankSnapshot:
        """
        Copy the whole bank in one critical section.

        If the lock is busy the previous snapshot is returned instead.

        Args:
            timeout: Lock wait for this call; defaults to the bank's lock_timeout
        """
        with self._locked("snapshot", timeout) as acquired:
            if not acquired:
                return self._last_snapshot
            return self._take_snapshot()

    def _take_snapshot(self) -> BankSnapshot:
        """Build a snapshot. Must be called with the lock held."""
        lines = tuple(
            LineSnapshot(
                index=index,
                level=self._levels[index],
                previous_level=self._previous[index],
                changed=self._latches[index].is_raised,
                blocked=self._blocked[index],
                configured=self._handles[index] is not None,
            )
            for index in range(self.line_count)
        )
        snapshot = BankSnapshot(lines=lines, last_poll=self._last_poll, taken_at=time.monotonic())
        self._last_snapshot = snapshot
        return snapshot
