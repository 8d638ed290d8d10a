"""Tally - a minimal self-registering unit test facility."""

from .assertions import (
    AssertionResult,
    FatalAssertionError,
    assert_eq,
    assert_false,
    assert_ne,
    assert_true,
    evaluate,
    expect_eq,
    expect_false,
    expect_ne,
    expect_true,
)
from .cli import main
from .context import current_test
from .naming import short_name
from .testing import (
    FunctionTestCase,
    Runner,
    RunResult,
    TestCase,
    clear_registry,
    get_registry,
    register,
    run_tests,
    set_output_stream,
    unit,
)
from .version import __version__


__all__ = [
    # Declaration
    "TestCase",
    "FunctionTestCase",
    "unit",
    "current_test",
    "set_output_stream",
    # Assertions
    "expect_eq",
    "expect_ne",
    "expect_true",
    "expect_false",
    "assert_eq",
    "assert_ne",
    "assert_true",
    "assert_false",
    "evaluate",
    "AssertionResult",
    "FatalAssertionError",
    # Registry and driver
    "register",
    "get_registry",
    "clear_registry",
    "Runner",
    "RunResult",
    "run_tests",
    "main",
    "short_name",
    "__version__",
]
