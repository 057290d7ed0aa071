"""
Sequential composition blocks — do-notation over Result with generators.

A generator function decorated with @trial reads like straight-line code,
and every `yield` is one bind step:

    @trial
    def quote(order_id: str) -> Generator[Result, Any, Decimal]:
        order = yield find_order(order_id)
        prices = yield collect(price(line) for line in order.lines)
        return sum(prices)

    quote("A-17")  # → Pass(Decimal(...), [...messages from every step...])

The first Fail stops the block; the generator is closed so its finally
clauses still run. Messages from every completed step come first,
exactly as with a chain of bind() calls.

What the block returns decides the last step:
  - nothing / None   → zero()           Pass(None, ())
  - a plain value    → return_(value)   Pass(value, ())
  - a Result         → return_from(r)   r itself
"""

from __future__ import annotations

import functools
from collections.abc import Callable, Generator
from typing import Any, ParamSpec, TypeVar

from railtrack.result import Fail, Pass, Result, expect_result, pass_

S = TypeVar("S")
T = TypeVar("T")
M = TypeVar("M")
P = ParamSpec("P")

Block = Callable[P, Generator[Result[Any, Any], Any, Any]]


class TrialBuilder:
    """
    Builder for sequential Result blocks.

    zero, bind, return_ and return_from are the four building blocks; run()
    drives a generator through them and __call__ turns the builder into a
    decorator. Running a block is exactly repeated application of bind().
    """

    def zero(self) -> Result[None, Any]:
        """The empty success: Pass(None, ())."""
        return pass_(None)

    def bind(self, result: Result[S, M], f: Callable[[S], Result[T, M]]) -> Result[T, M]:
        """One step: same as result.bind(f)."""
        return result.bind(f)

    def return_(self, value: S) -> Result[S, Any]:
        """Finish with a bare value."""
        return pass_(value)

    def return_from(self, result: Result[S, M]) -> Result[S, M]:
        """Finish with an existing Result, unchanged."""
        return result

    def run(self, block: Block[P], /, *args: P.args, **kwargs: P.kwargs) -> Result[Any, Any]:
        """
        Call `block` and drive it to completion.

        A plain (non-generator) function is accepted too; its return value
        is treated like a generator's return value.
        """
        steps = block(*args, **kwargs)
        if not isinstance(steps, Generator):
            return self._finish(steps)
        try:
            return self._drive(steps)
        finally:
            steps.close()

    def __call__(self, block: Block[P]) -> Callable[P, Result[Any, Any]]:
        @functools.wraps(block)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[Any, Any]:
            return self.run(block, *args, **kwargs)

        return wrapper

    def _drive(self, steps: Generator[Result[Any, Any], Any, Any]) -> Result[Any, Any]:
        # `state` is the bind chain so far: last value plus every message
        state: Result[Any, Any] = self.zero()
        sent = None
        while True:
            try:
                yielded = steps.send(sent)
            except StopIteration as stop:
                returned = stop.value
                return self.bind(state, lambda _: self._finish(returned))
            step = expect_result(yielded, "trial block step")
            match self.bind(state, lambda _: step):
                case Fail() as failed:
                    return failed
                case Pass(value, _) as state:
                    sent = value

    def _finish(self, returned: Any) -> Result[Any, Any]:
        if returned is None:
            return self.zero()
        if isinstance(returned, Result):
            return self.return_from(returned)
        return self.return_(returned)


trial = TrialBuilder()
