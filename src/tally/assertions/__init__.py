"""Assertion engine."""

from .base import AssertionResult, FatalAssertionError, evaluate, format_failure
from .basic import (
    assert_eq,
    assert_false,
    assert_ne,
    assert_true,
    expect_eq,
    expect_false,
    expect_ne,
    expect_true,
)

__all__ = [
    "AssertionResult",
    "FatalAssertionError",
    "evaluate",
    "format_failure",
    "expect_eq",
    "expect_ne",
    "expect_true",
    "expect_false",
    "assert_eq",
    "assert_ne",
    "assert_true",
    "assert_false",
]
