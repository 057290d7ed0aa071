"""
Free-function surface of the algebra.

Every function takes the Result last, so partial application reads like
a pipeline stage:

    normalise = partial(lift, str.strip)
    checked = partial(bind, validate_sku)
    checked(normalise(pass_("  A-1 ")))

The methods on Result do the work; these wrappers fix the argument order
and add the two operations that are not about a single Result: collect()
and fail_if_none().
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from functools import reduce
from typing import Any, TypeVar

from railtrack.errors import MessageFormatter
from railtrack.result import Fail, Pass, Result, expect_result, fail, pass_

S = TypeVar("S")
M = TypeVar("M")
T = TypeVar("T")
R = TypeVar("R")

# Values collected so far, newest first: (newest, (previous, (..., ())))
_Stack = tuple[Any, ...]


def either(
    on_success: Callable[[S, tuple[M, ...]], R],
    on_failure: Callable[[tuple[M, ...]], R],
    result: Result[S, M],
) -> R:
    """on_success(value, messages) for Pass, on_failure(messages) for Fail."""
    return result.either(on_success, on_failure)


def return_or_fail(result: Result[S, M], formatter: MessageFormatter = str) -> S:
    """Success value of `result`, or FailedResultError with its messages."""
    return result.return_or_fail(formatter)


def merge_messages(messages: Iterable[M], result: Result[S, M]) -> Result[S, M]:
    """Prepend `messages` to the messages already inside `result`."""
    return result.merge_messages(messages)


def bind(f: Callable[[S], Result[T, M]], result: Result[S, M]) -> Result[T, M]:
    """Run f on the success value, keeping earlier messages in front."""
    return result.bind(f)


def apply(wrapped_fn: Result[Callable[[S], T], M], result: Result[S, M]) -> Result[T, M]:
    """Apply a function held in a Result to a value held in a Result."""
    return wrapped_fn.apply(result)


def lift(f: Callable[[S], T], result: Result[S, M]) -> Result[T, M]:
    """apply(pass_(f), result)."""
    return pass_(f).apply(result)


def success_tee(f: Callable[[S, tuple[M, ...]], Any], result: Result[S, M]) -> Result[S, M]:
    """Observe a Pass through f(value, messages); return `result` unchanged."""
    return result.success_tee(f)


def failure_tee(f: Callable[[tuple[M, ...]], Any], result: Result[S, M]) -> Result[S, M]:
    """Observe a Fail through f(messages); return `result` unchanged."""
    return result.failure_tee(f)


def _accumulate(collected: Result[_Stack, M], current: Result[S, M]) -> Result[_Stack, M]:
    current = expect_result(current, "collect")
    return collected.either(
        lambda stack, seen: current.either(
            lambda value, fresh: Pass((value, stack), seen + fresh),
            lambda fresh: Fail(seen + fresh),
        ),
        lambda seen: Fail(seen + current.messages),
    )


def _unwind(stack: _Stack) -> list[Any]:
    values = []
    while stack:
        value, stack = stack
        values.append(value)
    values.reverse()
    return values


def collect(results: Iterable[Result[S, M]]) -> Result[list[S], M]:
    """
    Turn a sequence of Results into one Result holding a list.

    Every Result in the sequence is visited, even after a Fail, so the
    outcome carries every message in sequence order:

        collect([Pass(1), Pass(2, ["rounded"]), Pass(3)])  # → Pass([1, 2, 3], ["rounded"])
        collect([Pass(1), fail("x"), Pass(3, ["y"])])      # → Fail(["x", "y"])

    Values are stacked newest-first during the fold and put back in input
    order at the end.
    """
    return lift(_unwind, reduce(_accumulate, results, pass_(())))


def fail_if_none(message: M, value: S | None) -> Result[S, M]:
    """pass_(value) unless value is None, in which case fail(message)."""
    if value is None:
        return fail(message)
    return pass_(value)
