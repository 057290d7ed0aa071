"""
Observation helpers — structured logging built on the tee hooks.

log_success() and log_failure() build functions for success_tee() and
failure_tee(), so a pipeline can log as it goes without changing what
flows through it:

    result = (
        parse(raw)
        .success_tee(log_success("order.parsed"))
        .bind(validate)
        .failure_tee(log_failure("order.rejected"))
    )

traced() wraps a whole Result-returning function: it logs the start, the
outcome with its duration and messages, and re-raises anything the
function raises after logging it.

Levels default to RailtrackSettings.tee_log_level for Pass and
RailtrackSettings.failure_log_level for Fail.
"""

from __future__ import annotations

import functools
import logging
import time
from collections.abc import Callable
from typing import Any, ParamSpec, TypeVar

import structlog

from railtrack.config import get_settings
from railtrack.result import Result, expect_result

S = TypeVar("S")
M = TypeVar("M")
P = ParamSpec("P")

LOGGER_NAME = "railtrack"


def _logger(logger: Any | None) -> Any:
    # Resolved per call so loggers follow the current structlog configuration
    return logger if logger is not None else structlog.get_logger(LOGGER_NAME)


def _level(level: str | int | None, default: str) -> int:
    if level is None:
        level = default
    if isinstance(level, int):
        return level
    return getattr(logging, level.upper())


def log_success(
    event: str,
    logger: Any | None = None,
    level: str | int | None = None,
) -> Callable[[Any, tuple[Any, ...]], None]:
    """Build a success_tee() observer that logs `event` with value and messages."""

    def _emit(value: Any, messages: tuple[Any, ...]) -> None:
        _logger(logger).log(
            _level(level, get_settings().tee_log_level),
            event,
            value=value,
            messages=list(messages),
        )

    return _emit


def log_failure(
    event: str,
    logger: Any | None = None,
    level: str | int | None = None,
) -> Callable[[tuple[Any, ...]], None]:
    """Build a failure_tee() observer that logs `event` with the error messages."""

    def _emit(messages: tuple[Any, ...]) -> None:
        _logger(logger).log(
            _level(level, get_settings().failure_log_level),
            event,
            messages=list(messages),
        )

    return _emit


def traced(
    operation: str,
    logger: Any | None = None,
) -> Callable[[Callable[P, Result[S, M]]], Callable[P, Result[S, M]]]:
    """
    Decorator that logs entry, outcome and duration of a Result-returning function.

    Events: "<operation>.started", "<operation>.completed" (with outcome,
    duration_ms and message_count) and "<operation>.crashed" when the
    function raises. The Result is returned untouched.

        @traced("checkout")
        def checkout(cart: Cart) -> Result[Receipt, str]:
            ...
    """

    def decorator(fn: Callable[P, Result[S, M]]) -> Callable[P, Result[S, M]]:
        @functools.wraps(fn)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[S, M]:
            settings = get_settings()
            log = _logger(logger).bind(operation=operation)
            log.log(_level(None, settings.tee_log_level), f"{operation}.started")
            start = time.monotonic()

            try:
                result = expect_result(fn(*args, **kwargs), operation)
            except Exception:
                log.exception(
                    f"{operation}.crashed",
                    duration_ms=_elapsed_ms(start),
                )
                raise

            elapsed = _elapsed_ms(start)
            return result.success_tee(
                lambda _, messages: log.log(
                    _level(None, settings.tee_log_level),
                    f"{operation}.completed",
                    outcome="pass",
                    duration_ms=elapsed,
                    message_count=len(messages),
                )
            ).failure_tee(
                lambda messages: log.log(
                    _level(None, settings.failure_log_level),
                    f"{operation}.completed",
                    outcome="fail",
                    duration_ms=elapsed,
                    message_count=len(messages),
                    messages=[str(message) for message in messages],
                )
            )

        return wrapper

    return decorator


def _elapsed_ms(start: float) -> float:
    return round((time.monotonic() - start) * 1000, 3)
