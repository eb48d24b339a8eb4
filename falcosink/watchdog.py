"""Background timer that fires a callback when a deadline passes."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from datetime import timedelta
from typing import Callable, Generic, TypeVar

T = TypeVar("T")


def _seconds(value: float | timedelta) -> float:
    if isinstance(value, timedelta):
        return value.total_seconds()
    return float(value)


@dataclass
class _Timeout(Generic[T]):
    deadline: float | None = None
    payload: T | None = None


class Watchdog(Generic[T]):
    """Runs a polling thread that calls back once per expired timeout.

    Times are given in seconds (or as ``timedelta``).
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._pending: _Timeout[T] | None = None
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None
        self._running = False

    def __enter__(self) -> "Watchdog[T]":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    def start(
        self,
        callback: Callable[[T], None],
        resolution: float | timedelta = 0.1,
    ) -> None:
        """(Re)start the polling thread, checking every ``resolution``."""
        self.stop()
        interval = _seconds(resolution)
        stop_event = threading.Event()
        self._stop_event = stop_event
        self._running = True

        def loop() -> None:
            current: _Timeout[T] = _Timeout()
            while not stop_event.is_set():
                with self._lock:
                    pending, self._pending = self._pending, None
                if pending is not None:
                    current = pending
                if current.deadline is not None and current.deadline < time.monotonic():
                    callback(current.payload)
                    current = _Timeout()
                stop_event.wait(interval)

        self._thread = threading.Thread(target=loop, name="watchdog", daemon=True)
        self._thread.start()

    def stop(self) -> None:
        """Stop the polling thread and drop any pending timeout."""
        if not self._running:
            return
        self._running = False
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join()
            self._thread = None
        with self._lock:
            self._pending = None

    def set_timeout(self, timeout: float | timedelta, payload: T) -> None:
        """Arm the watchdog to fire with ``payload`` after ``timeout``."""
        entry = _Timeout(time.monotonic() + _seconds(timeout), payload)
        with self._lock:
            self._pending = entry

    def cancel_timeout(self) -> None:
        """Disarm any armed timeout."""
        with self._lock:
            self._pending = _Timeout()