"""Output that pipes messages to the standard input of a shell command."""

from __future__ import annotations

import subprocess

from .outputs import AbstractOutput, Message, OutputConfig


class ProgramOutput(AbstractOutput):
    """Writes each message as a line to the command named by ``program``.

    Unless the ``keep_alive`` option is ``"true"``, the command is closed
    (and waited for) after every message.
    """

    def __init__(
        self,
        config: OutputConfig,
        buffered: bool = True,
        hostname: str = "",
        json_output: bool = False,
    ) -> None:
        super().__init__(config, buffered, hostname, json_output)
        self._process: subprocess.Popen[bytes] | None = None

    @property
    def is_open(self) -> bool:
        """Whether a program is currently running and attached."""
        return self._process is not None

    def _open_process(self) -> subprocess.Popen[bytes]:
        if self._process is None:
            self._process = subprocess.Popen(
                self.config.options.get("program", ""),
                shell=True,
                stdin=subprocess.PIPE,
                bufsize=-1 if self.buffered else 0,
            )
        return self._process

    def output(self, msg: Message) -> None:
        process = self._open_process()
        assert process.stdin is not None
        process.stdin.write((msg.msg + "\n").encode("utf-8"))
        if not self.buffered:
            process.stdin.flush()
        if self.config.options.get("keep_alive") != "true":
            self.cleanup()

    def cleanup(self) -> None:
        if self._process is not None:
            process, self._process = self._process, None
            if process.stdin is not None:
                try:
                    process.stdin.close()
                except BrokenPipeError:
                    pass
            process.wait()

    def reopen(self) -> None:
        self.cleanup()
        self._open_process()