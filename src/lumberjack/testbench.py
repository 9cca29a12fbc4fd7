"""
Testbench for lumberjack.

Runs a fixed set of scenarios against real sinks so the output can be eyeballed
(or captured) end to end. Each scenario prints its name, creates a context,
emits one INFO, one DEBUG and one ERR message, and frees the context.

Usage:
    lumberjack-testbench                      # all scenarios
    lumberjack-testbench file_debug null_debug_timestamp
"""

from __future__ import annotations

import sys
from typing import Callable, Dict, List, Optional

from .api import free, init
from .emit import log_dbg, log_err, log_info
from .levels import Destination, Severity

TEST_LOG = "test.log"


def stdio_debug_timestamp() -> None:
    print("stdio_debug_timestamp")
    ctx = init("testbench", Destination.STDERR, Severity.DEBUG, 1)
    log_info(ctx, "Debug Level: Info message: %d\n", 5)
    log_dbg(ctx, "Debug Level: Debug message: %d\n", 6)
    log_err(ctx, "Debug Level: Error message: %d\n", 7)
    free(ctx)


def stdio_info_timestamp() -> None:
    print("stdio_info_timestamp")
    ctx = init("testbench", Destination.STDERR, Severity.INFO, 1)
    log_info(ctx, "Info Level: Info message: %d\n", 5)
    log_dbg(ctx, "Info Level: Debug message: %d\n", 6)
    log_err(ctx, "Info Level: Error message: %d\n", 7)
    free(ctx)


def stdio_err_timestamp() -> None:
    print("stdio_err_timestamp")
    ctx = init("testbench", Destination.STDERR, Severity.ERR, 1)
    log_info(ctx, "Err Level: Info message: %d\n", 5)
    log_dbg(ctx, "Err Level: Debug message: %d\n", 6)
    log_err(ctx, "Err Level: Error message: %d\n", 7)
    free(ctx)


def syslog_debug_timestamp() -> None:
    print("syslog_debug_timestamp")
    ctx = init("testbench", Destination.SYSLOG, Severity.DEBUG, 0)
    log_info(ctx, "Debug Level: Info message: %d\n", 5)
    log_dbg(ctx, "Debug Level: Debug message: %d\n", 6)
    log_err(ctx, "Debug Level: Error message: %d\n", 7)
    free(ctx)


def file_debug_timestamp() -> None:
    # A path with the STDERR tag: the path is ignored
    print("file_debug_timestamp")
    ctx = init("testbench", Destination.STDERR, Severity.DEBUG, 1, TEST_LOG)
    log_info(ctx, "Debug Level: Info message: %d\n", 5)
    log_dbg(ctx, "Debug Level: Debug message: %d\n", 6)
    log_err(ctx, "Debug Level: Error message: %d\n", 7)
    free(ctx)


def null_debug_timestamp() -> None:
    print("null_debug_timestamp")
    ctx = init("testbench", Destination.NULL, Severity.DEBUG, 0)
    log_info(ctx, "Debug Level: Info message: %d\n", 5)
    log_dbg(ctx, "Debug Level: Debug message: %d\n", 6)
    log_err(ctx, "Debug Level: Error message: %d\n", 7)
    free(ctx)


def file_debug() -> None:
    print("file_debug")
    ctx = init("testbench", Destination.FILE, Severity.DEBUG, 1, TEST_LOG)
    log_info(ctx, "Debug Level: Info message: %d\n", 5)
    log_dbg(ctx, "Debug Level: Debug message: %d\n", 6)
    log_err(ctx, "Debug Level: Error message: %d\n", 7)
    free(ctx)


SCENARIOS: Dict[str, Callable[[], None]] = {
    "stdio_debug_timestamp": stdio_debug_timestamp,
    "stdio_info_timestamp": stdio_info_timestamp,
    "stdio_err_timestamp": stdio_err_timestamp,
    "syslog_debug_timestamp": syslog_debug_timestamp,
    "file_debug_timestamp": file_debug_timestamp,
    "null_debug_timestamp": null_debug_timestamp,
    "file_debug": file_debug,
}


def main(argv: Optional[List[str]] = None) -> int:
    names = list(sys.argv[1:] if argv is None else argv) or list(SCENARIOS)

    unknown = [name for name in names if name not in SCENARIOS]
    if unknown:
        print(f"Unknown scenario(s): {', '.join(unknown)}", file=sys.stderr)
        print(f"Available: {', '.join(SCENARIOS)}", file=sys.stderr)
        return 2

    for name in names:
        SCENARIOS[name]()
    return 0


if __name__ == "__main__":
    sys.exit(main())
