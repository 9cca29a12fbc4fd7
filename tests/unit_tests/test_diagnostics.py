"""
lumberjack's own diagnostics.
"""

from __future__ import annotations

import json
import logging
import os
import subprocess
import sys
import textwrap
from pathlib import Path

import pytest

from lumberjack import diagnostics
from lumberjack.diagnostics import ROOT_LOGGER_NAME, configure_diagnostics, get_logger

SRC_DIR = Path(__file__).resolve().parents[2] / "src"


@pytest.fixture(autouse=True)
def restore_diagnostics():
    yield
    configure_diagnostics(level="WARNING", fmt="console")


class TestRendering:
    def test_console_line(self, caplog) -> None:
        with caplog.at_level(logging.WARNING, logger="lumberjack"):
            get_logger("unit").warning("something_odd", path="/tmp/x")
        record = caplog.records[-1]
        assert record.name == "lumberjack.unit"
        assert record.levelno == logging.WARNING
        message = record.getMessage()
        assert "WARNING | lumberjack.unit | something_odd" in message
        assert "path=/tmp/x" in message

    def test_json_document(self, caplog) -> None:
        configure_diagnostics(level="WARNING", fmt="json")
        with caplog.at_level(logging.WARNING, logger="lumberjack"):
            get_logger("unit").error("broken", code=3)
        payload = json.loads(caplog.records[-1].getMessage())
        assert payload["message"] == "broken"
        assert payload["level"] == "error"
        assert payload["logger"] == "lumberjack.unit"
        assert payload["code"] == 3
        assert "timestamp" in payload


class TestLevel:
    def test_below_level_is_dropped(self, caplog) -> None:
        configure_diagnostics(level="ERROR")
        caplog.set_level(logging.DEBUG)
        get_logger("unit").warning("quiet")
        assert not [r for r in caplog.records if r.name.startswith("lumberjack")]

    def test_configure_sets_stdlib_level(self) -> None:
        configure_diagnostics(level="debug")
        assert logging.getLogger("lumberjack").level == logging.DEBUG

    def test_unknown_format_is_console(self) -> None:
        configure_diagnostics(fmt="yaml")
        assert diagnostics._format == "console"


class TestHostWithoutLogging:
    """Diagnostics stay silent until the host configures logging"""

    def test_root_logger_has_null_handler(self) -> None:
        handlers = logging.getLogger(ROOT_LOGGER_NAME).handlers
        assert any(isinstance(h, logging.NullHandler) for h in handlers)

    def test_soft_errors_do_not_reach_stderr(self, tmp_path) -> None:
        script = textwrap.dedent(
            f"""
            from lumberjack import Destination, init, set_dst

            ctx = init("o", Destination.NULL, 99, 0)
            assert ctx.priority == 7
            assert set_dst(ctx, Destination.FILE, {str(tmp_path / "missing" / "x.log")!r}) == 1
            """
        )
        env = {k: v for k, v in os.environ.items() if not k.startswith("LJ_")}
        env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(SRC_DIR), env.get("PYTHONPATH")]))

        result = subprocess.run(
            [sys.executable, "-c", script],
            cwd=tmp_path,
            env=env,
            capture_output=True,
            text=True,
            check=False,
        )

        assert result.returncode == 0, result.stderr
        assert result.stderr == ""
        assert result.stdout == ""
