"""
Severity levels and sink destinations.

Severity values follow the classic system-log convention, lower is more severe:

    EMERG    0  system is unusable
    ALERT    1  action must be taken immediately
    CRIT     2  critical conditions
    ERR      3  error conditions
    WARNING  4  warning conditions
    NOTICE   5  normal but significant condition
    INFO     6  informational
    DEBUG    7  debug-level messages
"""

from __future__ import annotations

from enum import IntEnum


class Severity(IntEnum):
    """Message severity, numerically equal to the syslog LOG_* constants."""

    EMERG = 0
    ALERT = 1
    CRIT = 2
    ERR = 3
    WARNING = 4
    NOTICE = 5
    INFO = 6
    DEBUG = 7


class Destination(IntEnum):
    """Sink tags. Values are persisted in fixtures and configuration, never renumber."""

    STDERR = 0
    SYSLOG = 1
    NULL = 2
    FILE = 3
    USER = 4
    MAX = 5


MIN_PRIORITY = int(Severity.EMERG)
MAX_PRIORITY = int(Severity.DEBUG)

_PRIORITY_LABELS = (
    "EMERG",
    "ALERT",
    "CRIT",
    "ERR",
    "WARNING",
    "NOTICE",
    "INFO",
    "DEBUG",
)

_DST_LABELS = (
    "STDIO",
    "SYSLOG",
    "NULL",
    "FILE",
    "USER",
)


def str_priority(priority: int) -> str | None:
    """Return the uppercase label for a severity, or None when out of range."""
    if not MIN_PRIORITY <= priority <= MAX_PRIORITY:
        return None
    return _PRIORITY_LABELS[priority]


def str_dst(dst: int) -> str | None:
    """Return the short name of a sink tag, or None for MAX and anything outside."""
    if not 0 <= dst < Destination.MAX:
        return None
    return _DST_LABELS[dst]


def clamp_priority(priority: int) -> tuple[int, bool]:
    """Clamp a threshold into [EMERG, DEBUG]. Returns (value, clamped)."""
    if priority < MIN_PRIORITY:
        return MIN_PRIORITY, True
    if priority > MAX_PRIORITY:
        return MAX_PRIORITY, True
    return int(priority), False
