"""Output that appends messages to a file."""

from __future__ import annotations

from typing import TextIO

from .engine import FalcoError
from .outputs import AbstractOutput, Message, OutputConfig


class FileOutput(AbstractOutput):
    """Appends each message as a line to the file named by ``filename``.

    Unless the ``keep_alive`` option is ``"true"``, the file is closed after
    every message.
    """

    def __init__(
        self,
        config: OutputConfig,
        buffered: bool = True,
        hostname: str = "",
        json_output: bool = False,
    ) -> None:
        super().__init__(config, buffered, hostname, json_output)
        self._file: TextIO | None = None

    @property
    def is_open(self) -> bool:
        """Whether the underlying file is currently open."""
        return self._file is not None

    def _open_file(self) -> TextIO:
        if self._file is None:
            filename = self.config.options.get("filename", "")
            try:
                self._file = open(filename, "a", encoding="utf-8")
            except OSError as exc:
                raise FalcoError("failed to open output file " + filename) from exc
        return self._file

    def output(self, msg: Message) -> None:
        handle = self._open_file()
        handle.write(msg.msg + "\n")
        if not self.buffered:
            handle.flush()
        if self.config.options.get("keep_alive") != "true":
            self.cleanup()

    def cleanup(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None

    def reopen(self) -> None:
        self.cleanup()
        self._open_file()