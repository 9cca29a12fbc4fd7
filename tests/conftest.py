import os
import typing as t

import pytest

from lumberjack import formatters
from lumberjack.context import LoggerContext

FIXED_NOW = (1_700_000_000, 123_456_789)


@pytest.fixture
def fixed_clock(monkeypatch):
    """
    Freezes the real-time clock used for message prefixes.
    """
    monkeypatch.setattr(formatters, "realtime", lambda: FIXED_NOW)
    return FIXED_NOW


@pytest.fixture
def in_tmp_dir(tmp_path, monkeypatch):
    """
    Runs the test from an empty temporary directory (for relative log paths).
    """
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def make_ctx() -> t.Iterator[t.Callable[..., LoggerContext]]:
    """
    Factory for contexts that are always closed at teardown.
    """
    created: list[LoggerContext] = []

    def _make(*args, **kwargs) -> LoggerContext:
        ctx = LoggerContext(*args, **kwargs)
        created.append(ctx)
        return ctx

    yield _make

    for ctx in created:
        ctx.close()


@pytest.fixture
def expected_prefix(fixed_clock) -> t.Callable[..., str]:
    """
    Builds the prefix a sink writes under the frozen clock.
    """

    def _prefix(label: str, function: str, line: int, owner: str = "testbench") -> str:
        sec, nsec = fixed_clock
        return f"[{sec:>10}.{nsec:09d}] [{os.getpid()}] {label} - {owner}: {function}:{line} "

    return _prefix
