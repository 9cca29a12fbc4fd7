"""
Diagnostics for lumberjack itself.

Soft errors (clamped thresholds, unopenable files, bad templates) are reported
here, never through the host's logger contexts. Events are built with structlog
and handed to the stdlib logger ``lumberjack.<name>``, so the host decides where
they go with ordinary ``logging`` handlers. Until it adds one, the
``NullHandler`` on ``lumberjack`` keeps them off the host's stderr.

Library: structlog + orjson for the JSON rendering.
"""

from __future__ import annotations

import logging
from typing import Any

import orjson
import structlog
from structlog.typing import EventDict, WrappedLogger

from .config import DiagFormat, settings

ROOT_LOGGER_NAME = "lumberjack"

# Diagnostics only reach stderr through a handler the host installs
logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())

# =============================================================================
# Global State
# =============================================================================

_format: DiagFormat = settings.diag_format

# Keys rendered in the fixed part of a console line
_CONSOLE_FIXED_KEYS = frozenset({"level", "message", "logger", "timestamp"})


# =============================================================================
# Structlog Processors
# =============================================================================


def add_logger_name(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Replace the bound ``_name`` with a public ``logger`` key."""
    event_dict["logger"] = event_dict.pop("_name", ROOT_LOGGER_NAME)
    return event_dict


def render(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> str:
    """
    Render a diagnostic as one console line or one JSON document.

    The structlog ``event`` is published as ``message`` in both formats.
    """
    event_dict["message"] = event_dict.pop("event", "")

    if _format == "json":
        return orjson.dumps(event_dict, default=str, option=orjson.OPT_UTC_Z).decode()

    level = str(event_dict.get("level", "info")).upper()
    line = f"{level:>8} | {event_dict.get('logger', ROOT_LOGGER_NAME)} | {event_dict['message']}"
    extras = [f"{k}={v}" for k, v in event_dict.items() if k not in _CONSOLE_FIXED_KEYS]
    if extras:
        line = f"{line} " + " ".join(extras)
    return line


_PROCESSORS = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso", utc=True),
    add_logger_name,
    structlog.processors.format_exc_info,
    render,
]


# =============================================================================
# Public API
# =============================================================================


def get_logger(name: str) -> Any:
    """Get a structured diagnostics logger named ``lumberjack.<name>``."""
    full_name = f"{ROOT_LOGGER_NAME}.{name}"
    return structlog.wrap_logger(
        logging.getLogger(full_name),
        processors=_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
    ).bind(_name=full_name)


def configure_diagnostics(*, level: str | None = None, fmt: str | None = None) -> None:
    """
    Configure lumberjack's own diagnostics.

    Args:
        level: Minimum level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        fmt: Rendering format (console, json)
    """
    global _format

    level_name = (level or settings.diag_level).upper()
    logging.getLogger(ROOT_LOGGER_NAME).setLevel(getattr(logging, level_name, logging.WARNING))
    _format = "json" if (fmt or settings.diag_format).lower() == "json" else "console"


configure_diagnostics()
