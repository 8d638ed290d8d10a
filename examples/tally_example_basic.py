"""Example: declaring tests and running them as a script.

Run with:
    python examples/tally_example_basic.py

Print a summary line as well:
    TALLY_SUMMARY=1 python examples/tally_example_basic.py
"""

import io

import tally
from tally import TestCase, expect_eq, expect_false, expect_ne, expect_true, unit


def answer() -> int:
    return 42


@unit
def fancyname():
    expect_true(True)
    expect_false(4 != 4)
    expect_eq(answer(), 42)
    expect_ne(answer(), 43)
    expect_eq(0.1 + 0.2, 0.3)

    if expect_true(answer() > 0):
        expect_eq(answer() // 2, 21)


@unit("captured log")
def captured(test):
    """Diagnostics can be redirected before any assertion runs."""
    log = io.StringIO()
    test.set_output_stream(log)
    test.expect_eq(answer(), 42)
    expect_eq(log.getvalue(), "")


class Division(TestCase):
    def run_body(self) -> None:
        self.expect_eq(7 / 2, 3.5)
        self.assert_ne(7 // 2, 0)


Division("division")


if __name__ == "__main__":
    tally.main()
