"""
Message formatting.

A message is the optional prefix

    [     sec.nsec] [pid] LABEL - owner: function:line

followed by the printf-style expansion of the caller's template. The logger
never appends a newline; templates carry their own line termination.
"""

from __future__ import annotations

import os
import time
from collections.abc import Mapping
from typing import Any

from .diagnostics import get_logger
from .levels import str_priority

logger = get_logger("formatters")

NSEC_PER_SEC = 1_000_000_000

# Rendered in place of an absent owner or an unknown severity label.
MISSING = "(null)"


def realtime() -> tuple[int, int]:
    """Current real-time clock as (seconds, nanoseconds)."""
    return divmod(time.time_ns(), NSEC_PER_SEC)


def format_prefix(
    owner: str | None,
    priority: int,
    function: str | None,
    line: int | None,
    *,
    now: tuple[int, int] | None = None,
    pid: int | None = None,
) -> str:
    """Build the timestamp/pid/label/location prefix, trailing space included."""
    sec, nsec = now if now is not None else realtime()
    return "[%10d.%09d] [%d] %s - %s: %s:%s " % (
        sec,
        nsec,
        os.getpid() if pid is None else pid,
        str_priority(priority) or MISSING,
        MISSING if owner is None else owner,
        function,
        line,
    )


def expand(template: str, args: tuple[Any, ...]) -> str:
    """Expand a printf-style template.

    The template is always expanded, so ``%%`` collapses even without
    arguments. An argument-less template that does not expand (a lone ``%``)
    is returned verbatim. A single mapping argument is used for ``%(name)s``
    style templates.
    """
    if not args:
        try:
            return template % ()
        except (TypeError, ValueError):
            return template

    values: Any = args
    if len(args) == 1 and isinstance(args[0], Mapping):
        values = args[0]

    try:
        return template % values
    except (TypeError, ValueError, KeyError) as exc:
        logger.warning("template_expansion_failed", template=template, args=repr(args), error=str(exc))
        return f"{template} {args!r}"


def format_message(
    owner: str | None,
    use_timestamp: int,
    priority: int,
    function: str | None,
    line: int | None,
    template: str,
    args: tuple[Any, ...],
) -> str:
    """Full text written by the stderr-split and file sinks."""
    body = expand(template, args)
    if not use_timestamp:
        return body
    return format_prefix(owner, priority, function, line) + body
