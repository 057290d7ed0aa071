"""
Result type — the core of Railway-Oriented Programming with messages.

A Result[S, M] is either Pass(value: S, messages) or Fail(messages).
Pass carries informational messages gathered so far, Fail carries the
error messages that explain it (at least one). Combinators never raise
for control flow: they return a new Result, and a Fail skips every step
that would need the missing value while messages keep accumulating.

    ┌───────────┐    bind     ┌───────────┐    bind     ┌──────────┐
    │  parse    │──Pass──────▶│ validate  │──Pass──────▶│  price   │──→ Result[S, M]
    │           │  msgs ++    │           │  msgs ++    │          │
    └─────┬─────┘             └─────┬─────┘             └─────┬────┘
          │ Fail                    │ Fail                    │ Fail
          └─────────────────────────┴─────────────────────────┴──→ Result[S, M]

Message order is always "earlier produced" followed by "later produced".

All combinators are written in terms of Result.either(), the one place
that looks at which variant it holds.

Infix forms:
  - result >> f           bind
  - wrapped_fn * result   apply
  - f @ result            lift
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Generic, NoReturn, TypeVar

from railtrack.errors import FailedResultError, MessageFormatter

S = TypeVar("S")
M = TypeVar("M")
T = TypeVar("T")
R = TypeVar("R")


class Result(Generic[S, M]):
    """
    Outcome of a computation that may fail, with accumulated messages.

    Two variants, nothing else:
      - Pass(value, messages) — success plus informational messages
      - Fail(messages)        — failure plus one or more error messages

    Usage:
        >>> pass_(3).bind(lambda x: Pass(x * 2, ["doubled"]))
        Pass(6, ['doubled'])

        >>> fail("no stock").bind(lambda x: pass_(x * 2))
        Fail(['no stock'])
    """

    __slots__ = ()

    # ──────────────────────── Introspection ────────────────────────

    def is_pass(self) -> bool:
        """Check if this Result is a Pass."""
        return isinstance(self, Pass)

    def is_fail(self) -> bool:
        """Check if this Result is a Fail."""
        return isinstance(self, Fail)

    # ──────────────────────── Elimination ────────────────────────

    def either(
        self,
        on_success: Callable[[S, tuple[M, ...]], R],
        on_failure: Callable[[tuple[M, ...]], R],
    ) -> R:
        """
        Apply one of two functions depending on the variant.

        This is the fundamental destructor: on_success(value, messages)
        for Pass, on_failure(messages) for Fail.

            result.either(
                lambda order, notes: f"accepted {order.id} ({len(notes)} notes)",
                lambda errors: "rejected: " + "; ".join(errors),
            )
        """
        match self:
            case Pass(value, messages):
                return on_success(value, messages)
            case Fail(messages):
                return on_failure(messages)
        raise TypeError("unreachable")  # pragma: no cover

    def return_or_fail(self, formatter: MessageFormatter = str) -> S:
        """
        Extract the success value, or raise FailedResultError for a Fail.

        The error text is every message passed through `formatter` and
        joined with a newline and a tab. Reserve this for top-level unwrap
        points; inside a pipeline, keep composing with bind/apply.
        """

        def _raise(messages: tuple[M, ...]) -> NoReturn:
            raise FailedResultError(messages, formatter)

        return self.either(lambda value, _: value, _raise)

    # ──────────────────────── Composition ────────────────────────

    def merge_messages(self, messages: Iterable[M]) -> Result[S, M]:
        """
        Put `messages` in front of the messages already stored here.

            Pass(x, [c, d]).merge_messages([a, b])  # → Pass(x, [a, b, c, d])
            Fail([c]).merge_messages([a, b])        # → Fail([a, b, c])
        """
        extra = tuple(messages)
        return self.either(
            lambda value, existing: Pass(value, extra + existing),
            lambda existing: Fail(extra + existing),
        )

    def bind(self, f: Callable[[S], Result[T, M]]) -> Result[T, M]:
        """
        Chain a Result-returning function. Short-circuits on Fail.

        For Pass(x, msgs) the outcome is f(x) with msgs merged in front of
        its own messages. A Fail is returned as is and f is never called.

            def reserve(sku: str) -> Result[str, str]:
                if sku in stock:
                    return Pass(sku, [f"reserved {sku}"])
                return fail(f"{sku} is out of stock")

            pass_("A-1").bind(reserve)  # → Pass("A-1", ["reserved A-1"])
        """
        return self.either(
            lambda value, messages: expect_result(f(value), "bind").merge_messages(messages),
            lambda _: self,
        )

    def apply(self, result: Result[Any, M]) -> Result[Any, M]:
        """
        Apply the function held by this Result to the value held by `result`.

        Both sides are already evaluated, so there is no short-circuit and
        every message survives:

            Pass(f, m1) * Pass(x, m2)  → Pass(f(x), m1 + m2)
            Fail(e1)    * Pass(_, m2)  → Fail(e1 + m2)
            Pass(_, m1) * Fail(e2)     → Fail(e2 + m1)
            Fail(e1)    * Fail(e2)     → Fail(e1 + e2)

        In the third row the errors of `result` come before the messages
        of the function side.
        """
        return self.either(
            lambda f, m1: result.either(
                lambda value, m2: Pass(f(value), m1 + m2),
                lambda e2: Fail(e2 + m1),
            ),
            lambda e1: result.either(
                lambda _, m2: Fail(e1 + m2),
                lambda e2: Fail(e1 + e2),
            ),
        )

    def map(self, f: Callable[[S], T]) -> Result[T, M]:
        """Lift a plain function into the algebra and apply it (same as lift)."""
        return pass_(f).apply(self)

    # ──────────────────────── Side Effects ────────────────────────

    def success_tee(self, f: Callable[[S, tuple[M, ...]], Any]) -> Result[S, M]:
        """
        Call f(value, messages) on Pass for its side effect.

        Returns this very Result either way, f's return value is ignored.

            result.success_tee(lambda order, notes: log.info("order.accepted", id=order.id))
        """

        def _observe(value: S, messages: tuple[M, ...]) -> Result[S, M]:
            f(value, messages)
            return self

        return self.either(_observe, lambda _: self)

    def failure_tee(self, f: Callable[[tuple[M, ...]], Any]) -> Result[S, M]:
        """Call f(messages) on Fail for its side effect. Returns this very Result."""

        def _observe(messages: tuple[M, ...]) -> Result[S, M]:
            f(messages)
            return self

        return self.either(lambda _, __: self, _observe)

    # ──────────────────────── Static Factories ────────────────────────

    @staticmethod
    def of(value: T) -> Result[T, Any]:
        """Wrap a value as Pass(value, ()) — same as pass_()."""
        return pass_(value)

    @staticmethod
    def failure(message: T) -> Result[Any, T]:
        """Wrap a single message as Fail((message,)) — same as fail()."""
        return fail(message)

    # ──────────────────────── Dunder methods ────────────────────────

    def __rshift__(self, f: Callable[[S], Result[T, M]]) -> Result[T, M]:
        return self.bind(f)

    def __mul__(self, other: object) -> Result[Any, M]:
        if not isinstance(other, Result):
            return NotImplemented
        return self.apply(other)

    def __rmatmul__(self, f: object) -> Result[Any, M]:
        # f @ result: functions have no __matmul__, so Python lands here
        if not callable(f):
            return NotImplemented
        return self.map(f)

    def __bool__(self) -> bool:
        """Allow truthiness check: `if result: ...` holds only for Pass."""
        return self.is_pass()


@dataclass(frozen=True, slots=True)
class Pass(Result[S, M]):
    """The success track — a value plus informational messages."""

    value: S
    messages: tuple[M, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "messages", tuple(self.messages))

    def __repr__(self) -> str:
        return f"Pass({self.value!r}, {list(self.messages)!r})"


@dataclass(frozen=True, slots=True)
class Fail(Result[Any, M]):
    """The failure track — one or more error messages, no value."""

    messages: tuple[M, ...]

    def __post_init__(self) -> None:
        messages = tuple(self.messages)
        if not messages:
            raise ValueError("Fail requires at least one message")
        object.__setattr__(self, "messages", messages)

    def __repr__(self) -> str:
        return f"Fail({list(self.messages)!r})"


def pass_(value: S) -> Result[S, Any]:
    """Wrap a value as a Pass with no messages."""
    return Pass(value, ())


def fail(message: M) -> Result[Any, M]:
    """Wrap a single message as a Fail."""
    return Fail((message,))


def expect_result(candidate: object, where: str) -> Result[Any, Any]:
    """Return `candidate` if it is a Result, raise TypeError otherwise."""
    if not isinstance(candidate, Result):
        raise TypeError(
            f"{where} expected a Result, got {type(candidate).__name__}: {candidate!r}"
        )
    return candidate
