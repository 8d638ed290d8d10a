"""Assertion evaluation and failure reporting."""

from __future__ import annotations

import sys
from typing import Any, TextIO

from pydantic import BaseModel

from tally.comparison import is_equal
from tally.naming import render, short_name


class AssertionResult(BaseModel):
    """Outcome of a single assertion.

    Attributes:
    ----------
    passed: bool
        Whether the assertion held
    message: str | None
        The diagnostic line written on failure, without its newline
    """

    passed: bool
    message: str | None = None

    def __bool__(self) -> bool:
        return self.passed


class FatalAssertionError(BaseException):
    """Raised by the ``assert_*`` forms when they fail.

    Not an ``Exception``: neither ``except Exception`` in a test body nor the
    run-all driver contains it, so it ends the whole run.
    The top-level entry point turns it into a non-zero exit status.
    """

    def __init__(self, result: AssertionResult) -> None:
        self.assertion_result = result
        super().__init__(result.message or "fatal assertion failed")


def format_failure(
    compare: bool,
    expect_equal: bool,
    left: Any,
    right: Any,
    left_text: str,
    right_text: str,
    file: str,
    line: int,
    name: str = "",
) -> str:
    """Build the diagnostic line for a failed assertion."""
    if name:
        prefix = f"{short_name(file)}:{line} in Test({name}) Assert Failed: "
    else:
        prefix = f"{short_name(file)}:{line} Assert Failed: "

    if compare:
        op = "==" if expect_equal else "!="
        body = (
            f"compare {{{left_text}}} {op} {{{right_text}}} "
            f'got {{"{render(left)}"}} {op} {{"{render(right)}"}}'
        )
    else:
        body = f"evaluate {{{left_text}}} == {render(right)}"
    return prefix + body


def evaluate(
    compare: bool,
    expect_equal: bool,
    left: Any,
    right: Any,
    left_text: str | None = None,
    right_text: str | None = None,
    file: str = "<unknown>",
    line: int = 0,
    *,
    out: TextIO | None = None,
    name: str = "",
    fatal: bool = False,
) -> AssertionResult:
    """Evaluate one assertion.

    Parameters
    ----------
    compare:
        True for a comparison of two expressions, False for a single value
        checked against an expected boolean.
    expect_equal:
        Whether the assertion holds when the operands are equal (True) or
        when they differ (False).
    left, right:
        The operands. Floats are compared with a tolerance.
    left_text, right_text:
        Source text of the operands; ``repr`` is used when omitted.
    file, line:
        Call site reported in the diagnostic.
    out:
        Sink for the diagnostic. Defaults to ``sys.stderr``.
    name:
        Name of the enclosing test, if any.
    fatal:
        Raise :class:`FatalAssertionError` on failure instead of returning.
    """
    equal = is_equal(left, right)
    success = equal if expect_equal else not equal
    if success:
        return AssertionResult(passed=True)

    message = format_failure(
        compare,
        expect_equal,
        left,
        right,
        repr(left) if left_text is None else left_text,
        repr(right) if right_text is None else right_text,
        file,
        line,
        name,
    )
    sink = out if out is not None else sys.stderr
    sink.write(message + "\n")
    sink.flush()

    result = AssertionResult(passed=False, message=message)
    if fatal:
        raise FatalAssertionError(result)
    return result


__all__ = ["AssertionResult", "FatalAssertionError", "evaluate", "format_failure"]
