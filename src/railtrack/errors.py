"""
Fatal-error boundary of the algebra.

A Fail travels in-band as a value. The only place it turns into a Python
exception is Result.return_or_fail(), which raises FailedResultError with
every message rendered and joined by a newline plus a tab:

    >>> str(FailedResultError(["missing name", "bad email"]))
    'missing name\\n\\tbad email'

Messages can be any type. The formatter argument is the display capability
used to turn each one into text; str() is the default.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

MESSAGE_SEPARATOR = "\n\t"

MessageFormatter = Callable[[Any], str]


def format_messages(messages: Iterable[Any], formatter: MessageFormatter = str) -> str:
    """Render messages in order, joined by MESSAGE_SEPARATOR."""
    return MESSAGE_SEPARATOR.join(formatter(message) for message in messages)


class FailedResultError(RuntimeError):
    """
    Raised when a Fail is unwrapped with return_or_fail().

    The original messages stay available on `.messages` so a top-level
    handler can inspect them without parsing the text.
    """

    def __init__(
        self,
        messages: Iterable[Any],
        formatter: MessageFormatter = str,
    ) -> None:
        self.messages: tuple[Any, ...] = tuple(messages)
        super().__init__(format_messages(self.messages, formatter))
