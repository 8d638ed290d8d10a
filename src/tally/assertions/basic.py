"""The eight assertion forms.

``expect_*`` record a failure on the running test and let it continue.
``assert_*`` raise :class:`~tally.assertions.base.FatalAssertionError`,
which stops the whole run.

Outside a running test the forms still work: diagnostics go to
``sys.stderr`` and nothing is counted.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from tally.assertions.base import AssertionResult, FatalAssertionError, evaluate
from tally.context import current_test
from tally.naming import render
from tally.source import CallSite, call_site

if TYPE_CHECKING:
    from tally.testing.case import TestCase


def check(
    test: TestCase | None,
    compare: bool,
    expect_equal: bool,
    left: Any,
    right: Any,
    site: CallSite,
    *,
    fatal: bool,
) -> AssertionResult:
    """Evaluate an assertion on behalf of ``test`` and count a failure."""
    right_text = site.texts[1] if compare and len(site.texts) > 1 else render(right)
    result = evaluate(
        compare,
        expect_equal,
        left,
        right,
        site.texts[0] if site.texts else None,
        right_text,
        site.file,
        site.line,
        out=test.output if test is not None else None,
        name=test.name if test is not None else "",
    )
    if not result:
        # counted before raising so a swallowed fatal error still fails the test
        if test is not None:
            test.record_failure()
        if fatal:
            raise FatalAssertionError(result)
    return result


def expect_eq(left: Any, right: Any) -> AssertionResult:
    """Check ``left == right``."""
    site = call_site("expect_eq", (left, right))
    return check(current_test(), True, True, left, right, site, fatal=False)


def expect_ne(left: Any, right: Any) -> AssertionResult:
    """Check ``left != right``."""
    site = call_site("expect_ne", (left, right))
    return check(current_test(), True, False, left, right, site, fatal=False)


def expect_true(value: Any) -> AssertionResult:
    """Check that ``value`` is truthy."""
    site = call_site("expect_true", (value,))
    return check(current_test(), False, True, bool(value), True, site, fatal=False)


def expect_false(value: Any) -> AssertionResult:
    """Check that ``value`` is falsy."""
    site = call_site("expect_false", (value,))
    return check(current_test(), False, True, bool(value), False, site, fatal=False)


def assert_eq(left: Any, right: Any) -> AssertionResult:
    site = call_site("assert_eq", (left, right))
    return check(current_test(), True, True, left, right, site, fatal=True)


def assert_ne(left: Any, right: Any) -> AssertionResult:
    site = call_site("assert_ne", (left, right))
    return check(current_test(), True, False, left, right, site, fatal=True)


def assert_true(value: Any) -> AssertionResult:
    site = call_site("assert_true", (value,))
    return check(current_test(), False, True, bool(value), True, site, fatal=True)


def assert_false(value: Any) -> AssertionResult:
    site = call_site("assert_false", (value,))
    return check(current_test(), False, True, bool(value), False, site, fatal=True)


__all__ = [
    "assert_eq",
    "assert_false",
    "assert_ne",
    "assert_true",
    "check",
    "expect_eq",
    "expect_false",
    "expect_ne",
    "expect_true",
]
