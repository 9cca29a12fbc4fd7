"""
LumberjackSettings parsing.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from lumberjack.config import LumberjackSettings
from lumberjack.levels import Destination


class TestDefaults:
    def test_defaults(self, monkeypatch, in_tmp_dir) -> None:
        for name in ("LJ_ENABLE_LOGGING", "LJ_DST", "LJ_PRIORITY", "LJ_OWNER"):
            monkeypatch.delenv(name, raising=False)
        cfg = LumberjackSettings()
        assert cfg.enable_logging is True
        assert cfg.dst == Destination.STDERR
        assert cfg.priority == 7
        assert cfg.use_timestamp is True
        assert cfg.owner is None
        assert cfg.file_path is None
        assert cfg.diag_level == "WARNING"
        assert cfg.diag_format == "console"


class TestEnvironment:
    """LJ_ prefixed variables"""

    def test_reads_prefixed_variables(self, monkeypatch, in_tmp_dir) -> None:
        monkeypatch.setenv("LJ_OWNER", "svc")
        monkeypatch.setenv("LJ_DST", "3")
        monkeypatch.setenv("LJ_FILE_PATH", "svc.log")
        monkeypatch.setenv("LJ_ENABLE_LOGGING", "0")
        monkeypatch.setenv("LJ_DIAG_LEVEL", "debug")
        cfg = LumberjackSettings()
        assert cfg.owner == "svc"
        assert cfg.dst == Destination.FILE
        assert cfg.file_path == "svc.log"
        assert cfg.enable_logging is False
        assert cfg.diag_level == "DEBUG"

    def test_reads_dotenv_file(self, monkeypatch, in_tmp_dir) -> None:
        monkeypatch.delenv("LJ_DST", raising=False)
        (in_tmp_dir / ".env").write_text("LJ_DST=null\nLJ_PRIORITY=3\n")
        cfg = LumberjackSettings()
        assert cfg.dst == Destination.NULL
        assert cfg.priority == 3


class TestDestinationField:
    """dst accepts tags and names"""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (0, Destination.STDERR),
            ("1", Destination.SYSLOG),
            ("syslog", Destination.SYSLOG),
            ("STDIO", Destination.STDERR),
            ("User", Destination.USER),
        ],
    )
    def test_accepted(self, value, expected) -> None:
        assert LumberjackSettings(dst=value).dst == expected

    @pytest.mark.parametrize("value", ["max", 5, "bogus", 9])
    def test_rejected(self, value) -> None:
        with pytest.raises(ValidationError):
            LumberjackSettings(dst=value)

    def test_frozen(self) -> None:
        cfg = LumberjackSettings()
        with pytest.raises(ValidationError):
            cfg.owner = "other"
