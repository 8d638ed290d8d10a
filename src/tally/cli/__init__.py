"""Entry point for running a registered suite as a program.

Typical use at the bottom of a test script::

    if __name__ == "__main__":
        tally.main()
"""

from __future__ import annotations

import logging
from typing import TextIO

from rich.console import Console
from rich.logging import RichHandler

from tally.assertions.base import FatalAssertionError
from tally.config import TallyConfig, load_config
from tally.testing.runner import Runner, RunResult

logger = logging.getLogger(__name__)


def main() -> None:
    """Run every registered test and exit with the matching status."""
    config = load_config()
    configure_logging(config.log_level)
    raise SystemExit(run_suite(config))


def configure_logging(level: str) -> logging.Logger:
    """Set the ``tally`` logger level and route it to stderr through rich."""
    package_logger = logging.getLogger("tally")
    package_logger.setLevel(level)
    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        package_logger.addHandler(
            RichHandler(console=Console(stderr=True), show_path=False)
        )
    return package_logger


def run_suite(
    config: TallyConfig,
    *,
    out: TextIO | None = None,
    console: Console | None = None,
) -> int:
    """Run the registry and return a process exit status."""
    try:
        run_result = Runner(out=out).run()
    except FatalAssertionError as exc:
        logger.debug("Run aborted by fatal assertion: %s", exc)
        return config.failure_exit_code

    if config.summary:
        _print_summary(console or Console(stderr=True), run_result)

    return 0 if run_result else config.failure_exit_code


def _print_summary(console: Console, run_result: RunResult) -> None:
    color = "green" if run_result else "red"
    console.print(
        f"[{color}]{run_result.total} tests: {run_result.passed} passed, "
        f"{run_result.failed} failed, {run_result.errors} errors[/{color}]"
    )


__all__ = ["configure_logging", "main", "run_suite"]
