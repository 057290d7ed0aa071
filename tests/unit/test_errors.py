"""Tests for FailedResultError and message formatting."""

from __future__ import annotations

from railtrack import MESSAGE_SEPARATOR, FailedResultError, format_messages


class TestFormatMessages:
    def test_separator_is_newline_tab(self):
        assert MESSAGE_SEPARATOR == "\n\t"

    def test_joins_in_order(self):
        assert format_messages(["a", "b", "c"]) == "a\n\tb\n\tc"

    def test_single_message_has_no_separator(self):
        assert format_messages(["only"]) == "only"

    def test_formatter_applied_to_each_message(self):
        assert format_messages([1, 2], formatter=lambda n: f"#{n}") == "#1\n\t#2"


class TestFailedResultError:
    def test_text_and_messages(self):
        error = FailedResultError(["missing name", "bad email"])
        assert str(error) == "missing name\n\tbad email"
        assert error.messages == ("missing name", "bad email")

    def test_keeps_original_message_objects(self):
        cause = ValueError("bad")
        error = FailedResultError([cause])
        assert error.messages[0] is cause
        assert str(error) == "bad"
