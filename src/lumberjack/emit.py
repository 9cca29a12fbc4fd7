"""
Per-severity emission helpers.

``log_err(ctx, "z=%d\\n", 7)`` checks ``ctx.priority`` and, only when the
message passes, calls ``submit`` with the caller's function name and line.
The parent-object forms (``err(obj, ...)``) do the same with ``obj.log``.

When ``LJ_ENABLE_LOGGING`` is false at import time every helper is bound to a
no-op, so neither the threshold check nor ``submit`` runs. Arguments are still
evaluated by the caller.
"""

from __future__ import annotations

import inspect
from typing import Any, Callable

from .config import settings
from .levels import Severity

ENABLE_LOGGING: bool = settings.enable_logging

Helper = Callable[..., None]


def _disabled(ctx: Any, template: str, *args: Any) -> None:
    pass


def _submit_from_caller(ctx: Any, priority: Severity, template: str, args: tuple[Any, ...]) -> None:
    # This frame <- helper <- call site
    frame = inspect.currentframe()
    caller = frame.f_back.f_back if frame is not None and frame.f_back is not None else None
    if caller is None:
        ctx.submit(priority, None, None, template, *args)
        return
    try:
        ctx.submit(priority, caller.f_code.co_name, caller.f_lineno, template, *args)
    finally:
        del frame, caller


def make_helper(priority: Severity, *, parent: bool = False, enabled: bool = ENABLE_LOGGING) -> Helper:
    """Build the emission helper for one severity.

    Args:
        priority: Severity attached to every message
        parent: Take an object whose ``log`` attribute is the context
        enabled: False returns a no-op
    """
    if not enabled:
        return _disabled

    level = Severity(priority)

    if parent:

        def helper(obj: Any, template: str, *args: Any) -> None:
            ctx = obj.log
            if ctx.priority >= level:
                _submit_from_caller(ctx, level, template, args)

    else:

        def helper(ctx: Any, template: str, *args: Any) -> None:
            if ctx.priority >= level:
                _submit_from_caller(ctx, level, template, args)

    helper.__doc__ = f"Emit at {level.name} when the context's threshold allows it."
    return helper


# Context helpers
log_emerg = make_helper(Severity.EMERG)
log_alert = make_helper(Severity.ALERT)
log_crit = make_helper(Severity.CRIT)
log_err = make_helper(Severity.ERR)
log_warn = make_helper(Severity.WARNING)
log_notice = make_helper(Severity.NOTICE)
log_info = make_helper(Severity.INFO)
log_dbg = make_helper(Severity.DEBUG)

# Parent-object helpers
emerg = make_helper(Severity.EMERG, parent=True)
alert = make_helper(Severity.ALERT, parent=True)
crit = make_helper(Severity.CRIT, parent=True)
err = make_helper(Severity.ERR, parent=True)
warn = make_helper(Severity.WARNING, parent=True)
notice = make_helper(Severity.NOTICE, parent=True)
info = make_helper(Severity.INFO, parent=True)
dbg = make_helper(Severity.DEBUG, parent=True)
