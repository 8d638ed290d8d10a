"""Test declaration, registry and the run-all driver."""

from .case import FunctionTestCase, TestCase, set_output_stream, unit
from .registry import Registry, clear_registry, get_registry, register
from .runner import CaseResult, CaseStatus, Runner, RunResult, run_tests


__all__ = [
    "TestCase",
    "FunctionTestCase",
    "unit",
    "set_output_stream",
    "Registry",
    "get_registry",
    "register",
    "clear_registry",
    "Runner",
    "RunResult",
    "CaseResult",
    "CaseStatus",
    "run_tests",
]
