from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING, Iterator

if TYPE_CHECKING:
    from tally.testing.case import TestCase


CURRENT_TEST: ContextVar[TestCase | None] = ContextVar("current_test", default=None)


def current_test() -> TestCase | None:
    """Return the test whose body is running, if any."""
    return CURRENT_TEST.get()


@contextmanager
def case_scope(test: TestCase) -> Iterator[None]:
    token = CURRENT_TEST.set(test)
    try:
        yield
    finally:
        CURRENT_TEST.reset(token)
