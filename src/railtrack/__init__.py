"""
railtrack — Railway-Oriented Programming with message accumulation.

Explicit, composable error handling: a Result is either Pass(value, messages)
or Fail(messages), and failures flow through a pipeline as values instead of
exceptions.

    from railtrack import Pass, collect, fail, pass_

    def parse_quantity(raw: str) -> Result[int, str]:
        if not raw.isdigit():
            return fail(f"quantity {raw!r} is not a number")
        return pass_(int(raw))

    collect(parse_quantity(q) for q in ["3", "x", "5"])  # → Fail(["quantity 'x' is not a number"])
"""

from railtrack.assertions import ResultAssertions
from railtrack.combinators import (
    apply,
    bind,
    collect,
    either,
    fail_if_none,
    failure_tee,
    lift,
    merge_messages,
    return_or_fail,
    success_tee,
)
from railtrack.config import RailtrackSettings, get_settings
from railtrack.errors import MESSAGE_SEPARATOR, FailedResultError, format_messages
from railtrack.logs import configure_from_settings, configure_structlog
from railtrack.observe import log_failure, log_success, traced
from railtrack.result import Fail, Pass, Result, fail, pass_
from railtrack.trial import TrialBuilder, trial

__all__ = [
    "Result",
    "Pass",
    "Fail",
    "pass_",
    "fail",
    "either",
    "return_or_fail",
    "merge_messages",
    "bind",
    "apply",
    "lift",
    "success_tee",
    "failure_tee",
    "collect",
    "fail_if_none",
    "TrialBuilder",
    "trial",
    "FailedResultError",
    "MESSAGE_SEPARATOR",
    "format_messages",
    "log_success",
    "log_failure",
    "traced",
    "RailtrackSettings",
    "get_settings",
    "configure_structlog",
    "configure_from_settings",
    "ResultAssertions",
]

__version__ = "1.0.0"
