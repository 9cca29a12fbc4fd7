"""
Functional host surface.

Thin wrappers over ``LoggerContext`` for hosts that prefer free functions:
``init``/``free``, the getters and setters, ``submit`` and the label lookups.
"""

from __future__ import annotations

from typing import IO, Any, Optional

from .config import LumberjackSettings, settings
from .context import LoggerContext
from .diagnostics import get_logger
from .exceptions import InvalidHandleError
from .sinks import Writer

logger = get_logger("api")


def _require(ctx: Optional[LoggerContext], operation: str) -> LoggerContext:
    if ctx is None:
        raise InvalidHandleError(operation)
    return ctx


# =============================================================================
# Lifecycle
# =============================================================================


def init(
    owner: Optional[str],
    dst: int,
    priority: int,
    use_timestamp: Any,
    filepath: Optional[str] = None,
    user_fn: Optional[Writer] = None,
) -> Optional[LoggerContext]:
    """Create a logger context, or return None if it cannot be allocated."""
    try:
        return LoggerContext(owner, dst, priority, use_timestamp, filepath, user_fn)
    except MemoryError:
        logger.error("context_allocation_failed", owner=owner)
        return None


def init_from_settings(cfg: Optional[LumberjackSettings] = None) -> Optional[LoggerContext]:
    """Create a logger context from ``LJ_*`` configuration."""
    cfg = cfg or settings
    return init(cfg.owner, cfg.dst, cfg.priority, cfg.use_timestamp, cfg.file_path)


def free(ctx: Optional[LoggerContext]) -> int:
    return _require(ctx, "free").close()


# =============================================================================
# Getters
# =============================================================================


def get_dst(ctx: LoggerContext) -> int:
    return ctx.dst


def get_filename(ctx: LoggerContext) -> Optional[str]:
    return ctx.filename


def get_owner(ctx: LoggerContext) -> Optional[str]:
    return ctx.owner


def get_priority(ctx: LoggerContext) -> int:
    return ctx.priority


def get_use_timestamp(ctx: LoggerContext) -> int:
    return ctx.use_timestamp


def get_file(ctx: LoggerContext) -> Optional[IO[str]]:
    return ctx.file


# =============================================================================
# Setters
# =============================================================================


def set_dst(ctx: LoggerContext, dst: int, filepath: Optional[str] = None, user_fn: Optional[Writer] = None) -> int:
    return ctx.set_dst(dst, filepath, user_fn)


def set_owner(ctx: LoggerContext, owner: Optional[str]) -> None:
    ctx.set_owner(owner)


def set_priority(ctx: LoggerContext, priority: int) -> int:
    return ctx.set_priority(priority)


def set_use_timestamp(ctx: LoggerContext, use_timestamp: Any) -> None:
    ctx.set_use_timestamp(use_timestamp)


# =============================================================================
# Submit
# =============================================================================


def submit(
    ctx: Optional[LoggerContext],
    priority: int,
    function: Optional[str],
    line: Optional[int],
    template: str,
    *args: Any,
) -> None:
    """Pack ``args`` and hand the message to the context's active sink."""
    _require(ctx, "submit").submit(priority, function, line, template, *args)
