from collections.abc import Generator
from contextlib import contextmanager
from dataclasses import dataclass

import pytest

from .config import JSONPATH_TESTER_CONFIG, JsonPathTesterConfig, LogLevel


@dataclass(frozen=True)
class _ConfigSnapshot:
    log_level: LogLevel
    rich_tracebacks: bool
    trace_segments: bool

    @classmethod
    def capture(cls) -> "_ConfigSnapshot":
        return cls(
            log_level=JSONPATH_TESTER_CONFIG.log_level,
            rich_tracebacks=JSONPATH_TESTER_CONFIG.rich_tracebacks,
            trace_segments=JSONPATH_TESTER_CONFIG.trace_segments,
        )

    def restore(self) -> None:
        JSONPATH_TESTER_CONFIG.log_level = self.log_level
        JSONPATH_TESTER_CONFIG.rich_tracebacks = self.rich_tracebacks
        JSONPATH_TESTER_CONFIG.trace_segments = self.trace_segments


@contextmanager
def override_config(**values: object) -> Generator[JsonPathTesterConfig, None, None]:
    """Temporarily set fields on the global config, restoring them on exit."""
    snapshot = _ConfigSnapshot.capture()
    try:
        for name, value in values.items():
            if name not in JsonPathTesterConfig.model_fields:
                raise AttributeError(f"unknown config field {name!r}")
            setattr(JSONPATH_TESTER_CONFIG, name, value)
        yield JSONPATH_TESTER_CONFIG
    finally:
        snapshot.restore()


@pytest.fixture()
def jsonpath_tester_config() -> Generator[JsonPathTesterConfig, None, None]:
    """Give the test a config it may mutate freely."""
    with override_config() as config:
        yield config
