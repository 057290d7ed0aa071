"""Tests for ResultAssertions test helper."""

import pytest

from railtrack import Fail, Pass, ResultAssertions, fail, pass_


class TestAssertPass:
    def test_returns_value(self):
        assert ResultAssertions.assert_pass(pass_(42)) == 42

    def test_fails_on_fail_with_clear_message(self):
        with pytest.raises(AssertionError, match="Expected Pass but got Fail"):
            ResultAssertions.assert_pass(fail("Name is required"))

    def test_custom_message(self):
        with pytest.raises(AssertionError, match="custom context"):
            ResultAssertions.assert_pass(fail("x"), "custom context")

    def test_rejects_non_result(self):
        with pytest.raises(AssertionError, match="Expected a Result"):
            ResultAssertions.assert_pass(42)  # type: ignore[arg-type]


class TestAssertFail:
    def test_returns_messages(self):
        assert ResultAssertions.assert_fail(Fail(["a", "b"])) == ("a", "b")

    def test_fails_on_pass(self):
        with pytest.raises(AssertionError, match="Expected Fail but got Pass"):
            ResultAssertions.assert_fail(pass_(42))


class TestAssertPassValue:
    def test_exact_value_match(self):
        ResultAssertions.assert_pass_value(pass_(42), 42)

    def test_fails_on_wrong_value(self):
        with pytest.raises(AssertionError, match="Expected pass value"):
            ResultAssertions.assert_pass_value(pass_(42), 99)


class TestAssertMessages:
    def test_exact_order_on_pass(self):
        ResultAssertions.assert_messages(Pass(1, ["a", "b"]), ["a", "b"])

    def test_exact_order_on_fail(self):
        ResultAssertions.assert_messages(Fail(["e1", "e2"]), ("e1", "e2"))

    def test_order_matters(self):
        with pytest.raises(AssertionError, match="Expected messages"):
            ResultAssertions.assert_messages(Pass(1, ["a", "b"]), ["b", "a"])


class TestAssertFailMessageContains:
    def test_case_insensitive_substring(self):
        ResultAssertions.assert_fail_message_contains(Fail(["ok", "NAME IS REQUIRED"]), "name")

    def test_fails_when_not_contained(self):
        with pytest.raises(AssertionError, match="Expected a failure message to contain"):
            ResultAssertions.assert_fail_message_contains(fail("Age is required"), "name")
