"""Output that POSTs messages to an HTTP endpoint."""

from __future__ import annotations

import urllib.error
import urllib.request

from .engine import Priority
from .logger import Logger, default_logger
from .outputs import AbstractOutput, Message, OutputConfig


class HttpOutput(AbstractOutput):
    """POSTs each message body to the ``url`` option.

    Transport errors are logged, not raised; HTTP error statuses are ignored.
    """

    def __init__(
        self,
        config: OutputConfig,
        buffered: bool = True,
        hostname: str = "",
        json_output: bool = False,
        *,
        logger: Logger | None = None,
    ) -> None:
        super().__init__(config, buffered, hostname, json_output)
        self._logger = logger if logger is not None else default_logger

    def output(self, msg: Message) -> None:
        headers = {
            "Content-Type": "application/json" if self.json_output else "text/plain",
        }
        user_agent = self.config.options.get("user_agent", "")
        if user_agent:
            headers["User-Agent"] = user_agent
        try:
            request = urllib.request.Request(
                self.config.options.get("url", ""),
                data=msg.msg.encode("utf-8"),
                headers=headers,
                method="POST",
            )
            with urllib.request.urlopen(request) as response:
                response.read()
        except urllib.error.HTTPError as exc:
            exc.close()
        except (OSError, ValueError) as exc:
            self._logger.log(Priority.ERROR, f"http output error: {exc}")