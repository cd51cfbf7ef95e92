"""
Tenzies - Interval Ticker

A cancellable background timer that calls a callback once per interval.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable

logger = logging.getLogger(__name__)


class IntervalTicker:
    """Calls ``callback()`` every ``interval`` seconds on a daemon thread.

    At most one timer runs per ticker: ``start`` cancels the previous one.
    ``cancel`` is safe to call at any time, including when nothing runs.
    """

    def __init__(self, interval: float = 1.0, *, name: str = "tenzies-timer") -> None:
        if interval <= 0:
            raise ValueError(f"Tick interval must be positive, got {interval}.")
        self.interval = interval
        self.name = name
        self._stop_event: threading.Event | None = None
        self._thread: threading.Thread | None = None
        self._lock = threading.Lock()

    @property
    def is_running(self) -> bool:
        with self._lock:
            return self._stop_event is not None and not self._stop_event.is_set()

    def start(self, callback: Callable[[], None]) -> None:
        """Start ticking, replacing any timer already running."""
        with self._lock:
            self._cancel_locked()

            stop_event = threading.Event()
            thread = threading.Thread(
                target=self._run,
                args=(callback, stop_event),
                daemon=True,
                name=self.name,
            )
            self._stop_event = stop_event
            self._thread = thread
            thread.start()
        logger.debug("Ticker %s started (%.2fs)", self.name, self.interval)

    def cancel(self) -> None:
        """Stop ticking. No-op when not running."""
        with self._lock:
            stopped = self._cancel_locked()
        if stopped:
            logger.debug("Ticker %s cancelled", self.name)

    def _cancel_locked(self) -> bool:
        stop_event = self._stop_event
        self._stop_event = None
        self._thread = None
        if stop_event is None or stop_event.is_set():
            return False
        stop_event.set()
        return True

    def _run(self, callback: Callable[[], None], stop_event: threading.Event) -> None:
        # wait() returns True once cancelled, ending the loop
        while not stop_event.wait(self.interval):
            try:
                callback()
            except Exception:
                logger.exception("Tick callback failed")
