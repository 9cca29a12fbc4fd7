"""
Sink variants and their writers.

Every writer shares one signature::

    writer(ctx, priority, function, line, template, args)

where ``args`` is the tuple captured by ``submit``. The writers are plain
functions so a host can call one directly and bypass dispatch; the sink classes
own the resources a variant needs (file handle, callback) and carry the
``Destination`` tag that selects the writer.

Design Pattern: Strategy Pattern, one class per destination.
"""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import IO, TYPE_CHECKING, Any, Callable, Optional, Tuple

from .diagnostics import get_logger
from .exceptions import SinkOpenError
from .formatters import expand, format_message
from .levels import Destination, Severity

if TYPE_CHECKING:
    from .context import LoggerContext

logger = get_logger("sinks")

Writer = Callable[["LoggerContext", int, Optional[str], Optional[int], str, Tuple[Any, ...]], None]


def _write(stream: IO[str], text: str, *, flush: bool = False) -> None:
    try:
        stream.write(text)
        if flush:
            stream.flush()
    except (OSError, ValueError) as exc:
        # Write failures are not reported to the caller
        logger.debug("sink_write_failed", error=str(exc))


# =============================================================================
# Writers
# =============================================================================


def submit_to_stderr(
    ctx: LoggerContext,
    priority: int,
    function: Optional[str],
    line: Optional[int],
    template: str,
    args: Tuple[Any, ...],
) -> None:
    """Write to stdout for INFO and DEBUG, to stderr for everything more severe."""
    stream = sys.stdout if priority >= Severity.INFO else sys.stderr
    _write(stream, format_message(ctx.owner, ctx.use_timestamp, priority, function, line, template, args))


def submit_to_file(
    ctx: LoggerContext,
    priority: int,
    function: Optional[str],
    line: Optional[int],
    template: str,
    args: Tuple[Any, ...],
) -> None:
    """Append to the context's open file and flush after every message."""
    fp = ctx.file
    if fp is None:
        return
    _write(fp, format_message(ctx.owner, ctx.use_timestamp, priority, function, line, template, args), flush=True)


def submit_to_syslog(
    ctx: LoggerContext,
    priority: int,
    function: Optional[str],
    line: Optional[int],
    template: str,
    args: Tuple[Any, ...],
) -> None:
    """Forward to the system log. The facility adds its own prefix."""
    try:
        import syslog
    except ImportError:
        return
    syslog.syslog(int(priority), expand(template, args))


def submit_to_null(
    ctx: LoggerContext,
    priority: int,
    function: Optional[str],
    line: Optional[int],
    template: str,
    args: Tuple[Any, ...],
) -> None:
    pass


def submit_to_user(
    ctx: LoggerContext,
    priority: int,
    function: Optional[str],
    line: Optional[int],
    template: str,
    args: Tuple[Any, ...],
) -> None:
    """Hand the untouched tuple to the user callback, if one is installed."""
    fn = ctx.user_fn
    if fn is None:
        return
    fn(ctx, priority, function, line, template, args)


# =============================================================================
# Sink Variants
# =============================================================================


class BaseSink(ABC):
    """Abstract base class for sinks."""

    dst: Destination

    @abstractmethod
    def write(
        self,
        ctx: LoggerContext,
        priority: int,
        function: Optional[str],
        line: Optional[int],
        template: str,
        args: Tuple[Any, ...],
    ) -> None:
        """Deliver one message."""
        ...

    def close(self) -> None:
        """Release resources held by the variant."""

    @property
    def file(self) -> Optional[IO[str]]:
        return None

    @property
    def path(self) -> Optional[str]:
        return None

    @property
    def user_fn(self) -> Optional[Writer]:
        return None

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class StderrSink(BaseSink):
    dst = Destination.STDERR

    def write(self, ctx, priority, function, line, template, args) -> None:
        submit_to_stderr(ctx, priority, function, line, template, args)


class SyslogSink(BaseSink):
    dst = Destination.SYSLOG

    def write(self, ctx, priority, function, line, template, args) -> None:
        submit_to_syslog(ctx, priority, function, line, template, args)


class NullSink(BaseSink):
    dst = Destination.NULL

    def write(self, ctx, priority, function, line, template, args) -> None:
        submit_to_null(ctx, priority, function, line, template, args)


class FileSink(BaseSink):
    """Append-only text file. Created if absent, never truncated."""

    dst = Destination.FILE

    def __init__(self, path: Optional[str]):
        if not path:
            raise SinkOpenError(path, "empty path")
        try:
            self._file: Optional[IO[str]] = open(path, "a", encoding="utf-8")
        except OSError as exc:
            raise SinkOpenError(path, exc.strerror or str(exc)) from exc
        self._path: Optional[str] = path

    def write(self, ctx, priority, function, line, template, args) -> None:
        submit_to_file(ctx, priority, function, line, template, args)

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None
        self._path = None

    @property
    def file(self) -> Optional[IO[str]]:
        return self._file

    @property
    def path(self) -> Optional[str]:
        return self._path

    def __repr__(self) -> str:
        return f"FileSink(path={self._path!r})"


class UserSink(BaseSink):
    """Delegates to a host callback that does its own formatting."""

    dst = Destination.USER

    def __init__(self, fn: Optional[Writer]):
        self._fn = fn

    def write(self, ctx, priority, function, line, template, args) -> None:
        submit_to_user(ctx, priority, function, line, template, args)

    @property
    def user_fn(self) -> Optional[Writer]:
        return self._fn

    def __repr__(self) -> str:
        return f"UserSink(fn={self._fn!r})"


def make_sink(dst: int, filepath: Optional[str] = None, user_fn: Optional[Writer] = None) -> BaseSink:
    """Build the variant for a tag. Unknown tags get the stderr-split sink.

    Raises:
        SinkOpenError: FILE was requested and the path cannot be opened.
    """
    if dst == Destination.SYSLOG:
        return SyslogSink()
    if dst == Destination.NULL:
        return NullSink()
    if dst == Destination.FILE:
        return FileSink(filepath)
    if dst == Destination.USER:
        return UserSink(user_fn)
    return StderrSink()
