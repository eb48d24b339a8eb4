"""Core engine types: rules, priorities and the engine error type."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

ENGINE_VERSION = 13
"""Version of the rules and filter fields supported by this engine."""

FIELDS_CHECKSUM = "94290ff98e5affc85b2287b09a3f4054918f14e90db1ac4bfd6d5ce4e910329c"
"""Checksum of the set of fields supported by this engine version."""


class FalcoError(Exception):
    """Raised for any error reported by the engine or its outputs."""


class Priority(enum.IntEnum):
    """Rule and log priorities, numerically aligned with syslog levels.

    A lower value means a more severe priority.
    """

    EMERGENCY = 0
    ALERT = 1
    CRITICAL = 2
    ERROR = 3
    WARNING = 4
    NOTICE = 5
    INFORMATIONAL = 6
    DEBUG = 7


@dataclass
class FalcoRule:
    """A rule loaded in the engine; ``id`` is unique across loaded rules."""

    id: int = 0
    source: str = ""
    name: str = ""
    description: str = ""
    output: str = ""
    tags: set[str] = field(default_factory=set)
    exception_fields: set[str] = field(default_factory=set)
    priority: Priority = Priority.DEBUG