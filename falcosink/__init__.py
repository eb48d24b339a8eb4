"""Alert outputs, logging, a watchdog timer, stats files and a health endpoint."""

__version__ = "0.1.0"