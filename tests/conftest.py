"""
Shared test fixtures for the railtrack test suite.

Every test starts from default structlog configuration and freshly loaded
settings, so configure_structlog() or RAILTRACK_* variables set by one test
never leak into the next.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest
import structlog

from railtrack.config import get_settings


@pytest.fixture(autouse=True)
def _isolate_logging_state(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Reset structlog and the settings cache around each test."""
    for name in ("LOG_LEVEL", "LOG_JSON", "TEE_LOG_LEVEL", "FAILURE_LOG_LEVEL"):
        monkeypatch.delenv(f"RAILTRACK_{name}", raising=False)
    get_settings.cache_clear()
    structlog.reset_defaults()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()


class CallCounter:
    """Callable that records every argument tuple it receives."""

    def __init__(self, returns: object = None) -> None:
        self.calls: list[tuple[object, ...]] = []
        self._returns = returns

    def __call__(self, *args: object) -> object:
        self.calls.append(args)
        return self._returns

    @property
    def count(self) -> int:
        return len(self.calls)


@pytest.fixture()
def counter() -> CallCounter:
    """A fresh side-effect counter."""
    return CallCounter()
