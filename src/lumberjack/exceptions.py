"""
Exception hierarchy for lumberjack.

Most configuration problems are reported as soft errors (non-zero returns) and
never raised. These exceptions cover misuse the library cannot recover from on
its own, and the internal signal used to fall back from a file sink.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class LumberjackError(Exception):
    """Root of all lumberjack errors."""

    def __init__(
        self,
        message: str,
        *,
        code: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details = details or {}


class InvalidHandleError(LumberjackError):
    """Raised when an operation receives None instead of a logger context."""

    def __init__(self, operation: str) -> None:
        super().__init__(
            f"{operation}() requires a logger context, got None",
            code="INVALID_HANDLE",
            details={"operation": operation},
        )


class SinkOpenError(LumberjackError):
    """Raised when a file sink cannot open its target path."""

    def __init__(self, path: Optional[str], reason: str) -> None:
        super().__init__(
            f"Cannot open log file {path!r}: {reason}",
            code="SINK_OPEN_FAILED",
            details={"path": path, "reason": reason},
        )
