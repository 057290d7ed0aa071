"""
Test assertions for Result values.

Expressive assert helpers that produce clear failure messages.

Usage in tests:
    from railtrack import ResultAssertions

    def test_quote():
        result = quote(order)
        total = ResultAssertions.assert_pass(result)
        ResultAssertions.assert_messages(result, ["discount applied"])

    def test_unknown_sku():
        result = quote(bad_order)
        ResultAssertions.assert_fail_message_contains(result, "unknown sku")
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, TypeVar

from railtrack.result import Fail, Pass, Result

S = TypeVar("S")
M = TypeVar("M")


class ResultAssertions:
    """Expressive test assertions for Result values."""

    @staticmethod
    def assert_pass(result: Result[S, M], message: str = "") -> S:
        """
        Assert the Result is a Pass and return its value.

            value = ResultAssertions.assert_pass(result)
        """
        context = f" — {message}" if message else ""
        match result:
            case Pass(value, _):
                return value
            case Fail(errors):
                raise AssertionError(f"Expected Pass but got Fail({list(errors)!r}){context}")
        raise AssertionError(f"Expected a Result but got {result!r}{context}")

    @staticmethod
    def assert_fail(result: Result[S, M], message: str = "") -> tuple[M, ...]:
        """
        Assert the Result is a Fail and return its messages.

            errors = ResultAssertions.assert_fail(result)
        """
        context = f" — {message}" if message else ""
        match result:
            case Fail(errors):
                return errors
            case Pass(value, _):
                raise AssertionError(f"Expected Fail but got Pass({value!r}){context}")
        raise AssertionError(f"Expected a Result but got {result!r}{context}")

    @staticmethod
    def assert_pass_value(result: Result[S, M], expected_value: Any) -> None:
        """Assert the Result is a Pass holding the expected value."""
        value = ResultAssertions.assert_pass(result)
        assert value == expected_value, (
            f"Expected pass value {expected_value!r} but got {value!r}"
        )

    @staticmethod
    def assert_messages(result: Result[S, M], expected: Sequence[M]) -> None:
        """Assert the exact messages, in order, on either variant."""
        assert list(result.messages) == list(expected), (
            f"Expected messages {list(expected)!r} but got {list(result.messages)!r}"
        )

    @staticmethod
    def assert_fail_message_contains(result: Result[S, M], substring: str) -> None:
        """Assert that some failure message contains the substring (case-insensitive)."""
        errors = ResultAssertions.assert_fail(result)
        assert any(substring.lower() in str(error).lower() for error in errors), (
            f"Expected a failure message to contain {substring!r} "
            f"but messages were: {list(errors)!r}"
        )
