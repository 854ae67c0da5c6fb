from __future__ import annotations

from typing import Literal, TypeAlias

from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel: TypeAlias = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class JsonPathTesterConfig(BaseSettings):
    """Process-wide settings, read from ``JSONPATH_TESTER_*`` variables."""

    log_level: LogLevel = "WARNING"
    rich_tracebacks: bool = False
    trace_segments: bool = False

    model_config = SettingsConfigDict(
        env_prefix="JSONPATH_TESTER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_assignment=True,
    )


JSONPATH_TESTER_CONFIG = JsonPathTesterConfig()


__all__ = ["JSONPATH_TESTER_CONFIG", "JsonPathTesterConfig", "LogLevel"]
