"""Leveled logging to stderr and syslog."""

from __future__ import annotations

import sys
import time
from datetime import datetime, timezone
from typing import Callable, TextIO

from .engine import FalcoError, Priority

try:
    import syslog as _syslog
except ImportError:  # not available on every platform
    _syslog = None

_LEVELS = {
    "emergency": Priority.EMERGENCY,
    "alert": Priority.ALERT,
    "critical": Priority.CRITICAL,
    "error": Priority.ERROR,
    "warning": Priority.WARNING,
    "notice": Priority.NOTICE,
    "info": Priority.INFORMATIONAL,
    "debug": Priority.DEBUG,
}


def _system_syslog(priority: int, message: str) -> None:
    if _syslog is not None:
        _syslog.syslog(priority, message)


class Logger:
    """Writes messages at or above a threshold priority to stderr and syslog."""

    def __init__(
        self,
        level: int = Priority.INFORMATIONAL,
        *,
        log_stderr: bool = True,
        log_syslog: bool = True,
        time_format_iso_8601: bool = False,
        stream: TextIO | None = None,
        syslog_func: Callable[[int, str], None] | None = None,
    ) -> None:
        self.level = int(level)
        self.log_stderr = log_stderr
        self.log_syslog = log_syslog
        self.time_format_iso_8601 = time_format_iso_8601
        self._stream = stream
        self._syslog_func = syslog_func or _system_syslog

    def set_time_format_iso_8601(self, value: bool) -> None:
        """Choose ISO 8601 UTC timestamps instead of local asctime ones."""
        self.time_format_iso_8601 = value

    def set_level(self, level: str) -> None:
        """Set the threshold by name; raises FalcoError for unknown names."""
        try:
            self.level = int(_LEVELS[level])
        except KeyError:
            raise FalcoError("Unknown log level " + level) from None

    def log(self, priority: int, msg: str) -> None:
        """Emit ``msg`` unless ``priority`` is less severe than the level."""
        if int(priority) > self.level:
            return

        text = msg
        if self.log_syslog:
            # syslog lines carry no trailing newline
            if text.endswith("\n"):
                text = text[:-1]
            self._syslog_func(int(priority), text)

        if self.log_stderr:
            if not text.endswith("\n"):
                text += "\n"
            stream = self._stream if self._stream is not None else sys.stderr
            stream.write(f"{self._timestamp()}: {text}")

    def _timestamp(self) -> str:
        if self.time_format_iso_8601:
            return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S%z")
        return time.asctime(time.localtime())


default_logger = Logger()