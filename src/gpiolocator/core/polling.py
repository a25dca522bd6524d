"""Background polling of the line bank."""

import logging
import threading
from typing import Optional

from gpiolocator.exceptions import ErrorContext

from .line_bank import LineBank

logger = logging.getLogger(__name__)


class PollingEngine:
    """
    Samples a LineBank on a fixed wall-clock period.

    Runs on its own daemon thread, independent of the render loop. The
    stop event doubles as the tick timer so stop() takes effect at the
    next wait. The thread is not joined on stop; it exits on its own or
    dies with the process.
    """

    def __init__(self, bank: LineBank, poll_interval: float = 0.25):
        """
        Initialize polling engine.

        Args:
            bank: Line bank to sample
            poll_interval: Seconds between two samples
        """
        if poll_interval <= 0:
            raise ValueError(f"poll_interval must be positive, got {poll_interval}")
        self._bank = bank
        self._poll_interval = poll_interval
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self._tick_count = 0

    @property
    def poll_interval(self) -> float:
        return self._poll_interval

    @property
    def tick_count(self) -> int:
        """Number of completed sample_all() calls."""
        return self._tick_count

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive() and not self._stop_event.is_set()

    def start(self) -> None:
        """Start the polling thread."""
        if self.is_running:
            logger.warning("PollingEngine is already running")
            return

        self._stop_event.clear()
        self._thread = threading.Thread(target=self._run, name="gpio-poll", daemon=True)
        self._thread.start()
        logger.debug(f"PollingEngine started (interval={self._poll_interval}s)")

    def stop(self) -> None:
        """Ask the polling thread to exit."""
        self._stop_event.set()
        logger.debug("PollingEngine stopped")

    def _run(self) -> None:
        with ErrorContext("take baseline reading", logger_instance=logger, re_raise=False):
            self._bank.prime()

        while not self._stop_event.wait(self._poll_interval):
            self.tick()

    def tick(self) -> None:
        """Run one poll. Unexpected failures are logged and the next tick retries."""
        with ErrorContext("poll GPIO lines", logger_instance=logger, re_raise=False):
            if self._bank.sample_all():
                self._tick_count += 1

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.stop()
