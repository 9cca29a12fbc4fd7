"""
lumberjack: embeddable leveled logging.

A host creates independent logger contexts, each with an owner name, a severity
threshold and one sink:
- stdio: severities up to NOTICE on stderr, INFO and DEBUG on stdout
- syslog: the system log
- null: discard
- file: append-only file, flushed per message
- user: a host callback

Design Pattern: Strategy Pattern for sink abstraction.
Library: structlog + orjson for lumberjack's own diagnostics, pydantic-settings for configuration.
"""

from .api import (
    free,
    get_dst,
    get_file,
    get_filename,
    get_owner,
    get_priority,
    get_use_timestamp,
    init,
    init_from_settings,
    set_dst,
    set_owner,
    set_priority,
    set_use_timestamp,
    submit,
)
from .context import LoggerContext
from .emit import (
    ENABLE_LOGGING,
    log_alert,
    log_crit,
    log_dbg,
    log_emerg,
    log_err,
    log_info,
    log_notice,
    log_warn,
)
from .exceptions import InvalidHandleError, LumberjackError, SinkOpenError
from .levels import Destination, Severity, str_dst, str_priority
from .sinks import (
    submit_to_file,
    submit_to_null,
    submit_to_stderr,
    submit_to_syslog,
    submit_to_user,
)

__version__ = "0.1.0"

__all__ = [
    "Destination",
    "ENABLE_LOGGING",
    "InvalidHandleError",
    "LoggerContext",
    "LumberjackError",
    "Severity",
    "SinkOpenError",
    "free",
    "get_dst",
    "get_file",
    "get_filename",
    "get_owner",
    "get_priority",
    "get_use_timestamp",
    "init",
    "init_from_settings",
    "log_alert",
    "log_crit",
    "log_dbg",
    "log_emerg",
    "log_err",
    "log_info",
    "log_notice",
    "log_warn",
    "set_dst",
    "set_owner",
    "set_priority",
    "set_use_timestamp",
    "str_dst",
    "str_priority",
    "submit",
    "submit_to_file",
    "submit_to_null",
    "submit_to_stderr",
    "submit_to_syslog",
    "submit_to_user",
]
