"""Tests for the tally entry point."""

import io
import logging

import pytest
from rich.console import Console
from rich.logging import RichHandler

from tally import unit
from tally.cli import configure_logging, main, run_suite
from tally.config import TallyConfig


def make_console() -> Console:
    return Console(file=io.StringIO(), width=120)


def test_passing_suite_exits_zero(sink):
    @unit
    def passes(t):
        t.expect_eq(1, 1)

    assert run_suite(TallyConfig(), out=sink) == 0


def test_failing_suite_uses_failure_exit_code(sink):
    @unit
    def fails(t):
        t.set_output_stream(sink)
        t.expect_eq(1, 2)

    assert run_suite(TallyConfig(), out=sink) == 1
    assert run_suite(TallyConfig(failure_exit_code=3), out=sink) == 3


def test_erroring_suite_fails(sink):
    @unit
    def raises():
        raise ValueError("boom")

    assert run_suite(TallyConfig(), out=sink) == 1
    assert "Test(raises) has thrown an uncaught exception" in sink.getvalue()


def test_fatal_assertion_becomes_exit_status(sink):
    ran = []

    @unit
    def fatal(t):
        t.set_output_stream(sink)
        t.assert_false(True)

    @unit
    def after():
        ran.append("after")

    console = make_console()
    code = run_suite(TallyConfig(summary=True, failure_exit_code=4), out=sink, console=console)

    assert code == 4
    assert ran == []
    assert console.file.getvalue() == ""


def test_summary_is_printed_when_enabled(sink):
    @unit
    def passes():
        pass

    @unit
    def fails(t):
        t.set_output_stream(sink)
        t.expect_true(False)

    console = make_console()
    run_suite(TallyConfig(summary=True), out=sink, console=console)

    assert console.file.getvalue() == "2 tests: 1 passed, 1 failed, 0 errors\n"


def test_summary_is_off_by_default(sink):
    @unit
    def passes():
        pass

    console = make_console()
    run_suite(TallyConfig(), out=sink, console=console)

    assert console.file.getvalue() == ""


def test_configure_logging_is_idempotent():
    first = configure_logging("DEBUG")
    second = configure_logging("INFO")

    assert first is second is logging.getLogger("tally")
    assert second.level == logging.INFO
    assert sum(isinstance(h, RichHandler) for h in second.handlers) == 1


def test_main_exits_with_run_status(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("TALLY_LOG_LEVEL", "WARNING")
    monkeypatch.setenv("TALLY_SUMMARY", "0")
    monkeypatch.setenv("TALLY_FAILURE_EXIT_CODE", "9")

    @unit
    def raises():
        raise ValueError("boom")

    with pytest.raises(SystemExit) as exc_info:
        main()

    assert exc_info.value.code == 9


def test_main_exits_zero_when_nothing_fails(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("TALLY_SUMMARY", "0")
    monkeypatch.setenv("TALLY_FAILURE_EXIT_CODE", "1")

    with pytest.raises(SystemExit) as exc_info:
        main()

    assert exc_info.value.code == 0
