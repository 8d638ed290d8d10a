"""Shared fixtures for unit tests."""

import io

import pytest

from tally.testing.registry import clear_registry


@pytest.fixture(autouse=True)
def clean_registry():
    """Clear the test registry before and after each test."""
    clear_registry()
    yield
    clear_registry()


@pytest.fixture
def sink() -> io.StringIO:
    """Provide an in-memory output sink for diagnostics."""
    return io.StringIO()
