"""
lumberjack Configuration.

Settings are read from the environment (prefix ``LJ_``) and an optional ``.env``
file. They provide the global emission switch, the defaults used by
``init_from_settings()`` and the options of the library's own diagnostics.

Usage:
    from lumberjack.config import settings

    settings.enable_logging  # True
    settings.dst             # Destination.STDERR
"""

from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .levels import MAX_PRIORITY, Destination

DiagFormat = Literal["console", "json"]

_DST_ALIASES = {"STDIO": Destination.STDERR}


class LumberjackSettings(BaseSettings):
    """Configuration for lumberjack.

    Prefix: LJ_
    """

    model_config = SettingsConfigDict(
        env_prefix="LJ_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    enable_logging: bool = Field(
        default=True,
        description="Bind the emission helpers to real implementations (False turns them into no-ops)",
    )

    # Defaults for contexts built by init_from_settings()
    owner: Optional[str] = Field(default=None, description="Owner name shown in the message prefix")
    dst: Destination = Field(default=Destination.STDERR, description="Sink tag (0-4) or its name")
    priority: int = Field(default=MAX_PRIORITY, description="Threshold, clamped to 0..7 on use")
    use_timestamp: bool = Field(default=True, description="Prepend the timestamp/pid/location prefix")
    file_path: Optional[str] = Field(default=None, description="Target path for the FILE sink")

    # Library diagnostics
    diag_level: str = Field(default="WARNING", description="Level of lumberjack's own diagnostics")
    diag_format: DiagFormat = Field(default="console", description="Diagnostics rendering (console, json)")

    @field_validator("dst", mode="before")
    @classmethod
    def parse_dst(cls, value: Any) -> Any:
        if isinstance(value, str):
            name = value.strip().upper()
            if name.lstrip("-").isdigit():
                return int(name)
            if name in _DST_ALIASES:
                return _DST_ALIASES[name]
            try:
                return Destination[name]
            except KeyError:
                raise ValueError(f"unknown destination {value!r}") from None
        return value

    @field_validator("dst")
    @classmethod
    def reject_sentinel(cls, value: Destination) -> Destination:
        if value == Destination.MAX:
            raise ValueError("MAX is a range sentinel, not a destination")
        return value

    @field_validator("diag_level")
    @classmethod
    def upper_level(cls, value: str) -> str:
        return value.upper()


# Singleton instance
settings = LumberjackSettings()

__all__ = ["LumberjackSettings", "settings", "DiagFormat"]
