"""
Severity and destination lookups.
"""

from __future__ import annotations

import pytest

from lumberjack.levels import (
    MAX_PRIORITY,
    MIN_PRIORITY,
    Destination,
    Severity,
    clamp_priority,
    str_dst,
    str_priority,
)


class TestSeverity:
    """Severity ordering and labels"""

    @pytest.mark.parametrize(
        "severity, label",
        [
            (0, "EMERG"),
            (1, "ALERT"),
            (2, "CRIT"),
            (3, "ERR"),
            (4, "WARNING"),
            (5, "NOTICE"),
            (6, "INFO"),
            (7, "DEBUG"),
        ],
    )
    def test_labels(self, severity: int, label: str) -> None:
        assert str_priority(severity) == label

    @pytest.mark.parametrize("severity", [-1, 8, 100])
    def test_out_of_range_label_is_absent(self, severity: int) -> None:
        assert str_priority(severity) is None

    def test_values_match_syslog_constants(self) -> None:
        syslog = pytest.importorskip("syslog")
        assert Severity.EMERG == syslog.LOG_EMERG
        assert Severity.ERR == syslog.LOG_ERR
        assert Severity.INFO == syslog.LOG_INFO
        assert Severity.DEBUG == syslog.LOG_DEBUG

    def test_lower_is_more_severe(self) -> None:
        assert Severity.EMERG < Severity.ERR < Severity.DEBUG
        assert (MIN_PRIORITY, MAX_PRIORITY) == (0, 7)


class TestDestination:
    """Sink tag values are stable"""

    def test_tag_values(self) -> None:
        assert [int(d) for d in Destination] == [0, 1, 2, 3, 4, 5]

    @pytest.mark.parametrize(
        "dst, name",
        [(0, "STDIO"), (1, "SYSLOG"), (2, "NULL"), (3, "FILE"), (4, "USER")],
    )
    def test_names(self, dst: int, name: str) -> None:
        assert str_dst(dst) == name

    @pytest.mark.parametrize("dst", [Destination.MAX, 6, -1])
    def test_sentinel_and_beyond_are_absent(self, dst: int) -> None:
        assert str_dst(dst) is None


class TestClamp:
    """Threshold clamping"""

    def test_in_range_is_untouched(self) -> None:
        assert clamp_priority(3) == (3, False)

    def test_negative_clamps_to_emerg(self) -> None:
        assert clamp_priority(-5) == (0, True)

    def test_too_large_clamps_to_debug(self) -> None:
        assert clamp_priority(42) == (7, True)
