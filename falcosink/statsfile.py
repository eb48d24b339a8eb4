"""Periodic capture statistics written to a file as JSON lines."""

from __future__ import annotations

import os
import threading
from dataclasses import dataclass
from typing import Mapping, Protocol, TextIO

from .engine import FalcoError

EXTRA_PREFIX = "FALCO_STATS_EXTRA_"
"""Environment keys with this prefix are added to every sample."""


@dataclass(frozen=True)
class CaptureStats:
    """Counters reported by a capture source."""

    n_evts: int = 0
    n_drops: int = 0
    n_preemptions: int = 0


class StatsSource(Protocol):
    """Anything that can report its current capture statistics."""

    def get_capture_stats(self) -> CaptureStats: ...


class StatsFileWriter:
    """Appends a stats sample to a file each time the interval has elapsed.

    A background timer marks a sample as due every ``interval_msec``
    milliseconds (0 disables it); :meth:`handle` writes the sample and is
    meant to be called often, e.g. once per processed event.
    """

    def __init__(
        self,
        inspector: StatsSource,
        filename: str | os.PathLike[str],
        interval_msec: int,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        if interval_msec < 0:
            raise FalcoError(
                f"Could not set up periodic timer: invalid interval {interval_msec}"
            )
        self._inspector = inspector
        self._num_stats = 0
        self._last_stats = CaptureStats()
        self._due = threading.Event()
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

        try:
            self._output: TextIO | None = open(filename, "a", encoding="utf-8")
        except OSError as exc:
            raise FalcoError(f"Could not open stats file {filename}: {exc}") from exc

        env = os.environ if environ is None else environ
        self._extra = ", ".join(
            f'"{key[len(EXTRA_PREFIX):]}": "{value}"'
            for key, value in env.items()
            if key.startswith(EXTRA_PREFIX)
        )

        if interval_msec > 0:
            interval = interval_msec / 1000.0

            def tick() -> None:
                while not self._stop.wait(interval):
                    self._due.set()

            self._thread = threading.Thread(target=tick, name="stats-timer", daemon=True)
            self._thread.start()

    def __enter__(self) -> "StatsFileWriter":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def handle(self) -> bool:
        """Write a sample if one is due; return whether one was written."""
        if not self._due.is_set() or self._output is None:
            return False
        self._due.clear()
        self._num_stats += 1
        cur = self._inspector.get_capture_stats()

        if self._num_stats == 1:
            delta = cur
        else:
            delta = CaptureStats(
                n_evts=cur.n_evts - self._last_stats.n_evts,
                n_drops=cur.n_drops - self._last_stats.n_drops,
                n_preemptions=cur.n_preemptions - self._last_stats.n_preemptions,
            )

        if delta.n_evts == 0:
            drop_pct = "0"
        else:
            drop_pct = format(100.0 * delta.n_drops / delta.n_evts, "g")

        extra = f", {self._extra}" if self._extra else ""
        line = (
            f'{{"sample": {self._num_stats}{extra}, "cur": {{'
            f'"events": {cur.n_evts}, "drops": {cur.n_drops}, '
            f'"preemptions": {cur.n_preemptions}'
            f'}}, "delta": {{'
            f'"events": {delta.n_evts}, "drops": {delta.n_drops}, '
            f'"preemptions": {delta.n_preemptions}'
            f'}}, "drop_pct": {drop_pct}}},\n'
        )
        self._output.write(line)
        self._output.flush()
        self._last_stats = cur
        return True

    def close(self) -> None:
        """Stop the timer and close the output file."""
        self._stop.set()
        if self._thread is not None:
            self._thread.join()
            self._thread = None
        if self._output is not None:
            self._output.close()
            self._output = None