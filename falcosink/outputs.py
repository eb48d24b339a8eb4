"""Common types for alert outputs: configuration, messages and the base output."""

from __future__ import annotations

import abc
from dataclasses import dataclass, field

from .engine import Priority


@dataclass
class OutputConfig:
    """Names an output (file, syslog, stdout, ...) and carries its options."""

    name: str
    options: dict[str, str] = field(default_factory=dict)


@dataclass
class Message:
    """A message to emit: a rule match or a generic alert such as a drop."""

    ts: int = 0
    priority: Priority = Priority.DEBUG
    msg: str = ""
    rule: str = ""
    source: str = ""
    fields: dict[str, str] = field(default_factory=dict)
    tags: set[str] = field(default_factory=set)


class AbstractOutput(abc.ABC):
    """Base class for every output channel.

    Instances can be used as context managers; leaving the block calls
    :meth:`cleanup`.
    """

    def __init__(
        self,
        config: OutputConfig,
        buffered: bool = True,
        hostname: str = "",
        json_output: bool = False,
    ) -> None:
        self.config = config
        self.buffered = buffered
        self.hostname = hostname
        self.json_output = json_output

    @property
    def name(self) -> str:
        """The output's name as given in its configuration."""
        return self.config.name

    @abc.abstractmethod
    def output(self, msg: Message) -> None:
        """Emit one message."""

    def reopen(self) -> None:
        """Possibly close the output and open it again."""

    def cleanup(self) -> None:
        """Possibly flush or close the output."""

    def __enter__(self) -> "AbstractOutput":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.cleanup()