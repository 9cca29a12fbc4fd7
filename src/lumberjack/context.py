"""
Logger context.

A ``LoggerContext`` bundles an owner name, a severity threshold, the timestamp
flag and exactly one active sink. The threshold lives in the plain attribute
``priority`` so emission sites can filter with a single attribute read before
paying for a call to ``submit``.
"""

from __future__ import annotations

import threading
from typing import IO, Any, Optional

from .diagnostics import get_logger
from .exceptions import SinkOpenError
from .levels import MAX_PRIORITY, Destination, clamp_priority, str_dst
from .sinks import BaseSink, NullSink, StderrSink, Writer, make_sink

logger = get_logger("context")


class LoggerContext:
    """Host-owned logger handle.

    Args:
        owner: Subsystem name shown in the prefix (None permitted)
        dst: Sink tag, see ``Destination``
        priority: Threshold, clamped to 0..7
        use_timestamp: Prepend the timestamp/pid/location prefix
        filepath: Target path when ``dst`` is FILE
        user_fn: Callback when ``dst`` is USER

    A FILE destination that cannot be opened leaves the context on the
    stderr-split sink; the constructor does not raise for it.
    """

    def __init__(
        self,
        owner: Optional[str] = None,
        dst: int = Destination.STDERR,
        priority: int = MAX_PRIORITY,
        use_timestamp: Any = 1,
        filepath: Optional[str] = None,
        user_fn: Optional[Writer] = None,
    ):
        self.priority = MAX_PRIORITY
        self._owner: Optional[str] = None
        self._use_timestamp = 0
        self._sink: BaseSink = NullSink()
        self._lock = threading.RLock()

        self.set_owner(owner)
        self.set_priority(priority)
        self.set_use_timestamp(use_timestamp)
        self.set_dst(dst, filepath, user_fn)

    # =========================================================================
    # Getters
    # =========================================================================

    @property
    def dst(self) -> int:
        return int(self._sink.dst)

    @property
    def filename(self) -> Optional[str]:
        return self._sink.path

    @property
    def owner(self) -> Optional[str]:
        return self._owner

    @property
    def use_timestamp(self) -> int:
        return self._use_timestamp

    @property
    def file(self) -> Optional[IO[str]]:
        return self._sink.file

    @property
    def user_fn(self) -> Optional[Writer]:
        return self._sink.user_fn

    @property
    def sink(self) -> BaseSink:
        return self._sink

    # =========================================================================
    # Setters
    # =========================================================================

    def set_dst(self, dst: int, filepath: Optional[str] = None, user_fn: Optional[Writer] = None) -> int:
        """Replace the active sink.

        The previous sink is closed before the new one is built. Returns 1 when
        a FILE destination could not be opened (the context falls back to the
        stderr-split sink), 0 otherwise.
        """
        with self._lock:
            previous, self._sink = self._sink, NullSink()
            previous.close()

            if str_dst(dst) is None:
                logger.info("unknown_destination", dst=dst, fallback="STDIO")

            try:
                self._sink = make_sink(dst, filepath, user_fn)
            except SinkOpenError as exc:
                logger.warning("file_open_failed", owner=self._owner, error=str(exc), fallback="STDIO")
                self._sink = StderrSink()
                return 1
            return 0

    def set_owner(self, owner: Optional[str]) -> None:
        self._owner = None if owner is None else str(owner)

    def set_priority(self, priority: int) -> int:
        """Set the threshold. Returns 1 if the value had to be clamped into 0..7."""
        value, clamped = clamp_priority(int(priority))
        self.priority = value
        if clamped:
            logger.warning("priority_clamped", owner=self._owner, requested=priority, applied=value)
            return 1
        return 0

    def set_use_timestamp(self, use_timestamp: Any) -> None:
        self._use_timestamp = 1 if use_timestamp else 0

    # =========================================================================
    # Submit / Teardown
    # =========================================================================

    def submit(self, priority: int, function: Optional[str], line: Optional[int], template: str, *args: Any) -> None:
        """Deliver a message through the active sink. No threshold check is made here."""
        with self._lock:
            self._sink.write(self, priority, function, line, template, args)

    def close(self) -> int:
        """Release the owner, the path and any open file. Safe to call twice."""
        with self._lock:
            previous, self._sink = self._sink, NullSink()
            previous.close()
            self._owner = None
        return 0

    def __enter__(self) -> "LoggerContext":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        return (
            f"LoggerContext(owner={self._owner!r}, priority={self.priority}, "
            f"use_timestamp={self._use_timestamp}, sink={self._sink!r})"
        )
