"""Output that writes messages to standard output."""

from __future__ import annotations

import sys
from typing import TextIO

from .outputs import AbstractOutput, Message, OutputConfig


class StdoutOutput(AbstractOutput):
    """Writes each message as a line to standard output (or ``stream``)."""

    def __init__(
        self,
        config: OutputConfig,
        buffered: bool = True,
        hostname: str = "",
        json_output: bool = False,
        *,
        stream: TextIO | None = None,
    ) -> None:
        super().__init__(config, buffered, hostname, json_output)
        self._stream = stream

    def _target(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def output(self, msg: Message) -> None:
        target = self._target()
        target.write(msg.msg + "\n")
        if not self.buffered:
            target.flush()

    def cleanup(self) -> None:
        self._target().flush()