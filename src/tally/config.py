"""Environment-based configuration for the tally entry point."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "TALLY_"

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")
_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


class ConfigError(ValueError):
    """Raised when an environment setting cannot be parsed."""


@dataclass(frozen=True)
class TallyConfig:
    """Settings read by :func:`tally.cli.main`.

    Attributes
    ----------
    log_level
        Level for the ``tally`` logger.
    summary
        Print a one-line summary after the run.
    failure_exit_code
        Exit status used when any test failed or a fatal assertion fired.
    """

    log_level: str = "WARNING"
    summary: bool = False
    failure_exit_code: int = 1


DEFAULT_CONFIG = TallyConfig()


def _parse_bool(key: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    msg = f"{key} must be a boolean, got {raw!r}"
    raise ConfigError(msg)


def _parse_log_level(key: str, raw: str) -> str:
    value = raw.strip().upper()
    if value not in LOG_LEVELS:
        msg = f"{key} must be one of {', '.join(LOG_LEVELS)}, got {raw!r}"
        raise ConfigError(msg)
    return value


def _parse_exit_code(key: str, raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        msg = f"{key} must be an integer, got {raw!r}"
        raise ConfigError(msg) from None
    if not 1 <= value <= 255:
        msg = f"{key} must be between 1 and 255, got {value}"
        raise ConfigError(msg)
    return value


def load_config(env: Mapping[str, str] | None = None) -> TallyConfig:
    """Build a :class:`TallyConfig` from ``TALLY_*`` environment variables.

    When ``env`` is None, a ``.env`` file found from the working directory is
    loaded first (without overriding variables already set) and
    ``os.environ`` is read.
    """
    if env is None:
        load_dotenv(find_dotenv(usecwd=True))
        env = os.environ

    settings: dict[str, object] = {}

    key = f"{ENV_PREFIX}LOG_LEVEL"
    if key in env:
        settings["log_level"] = _parse_log_level(key, env[key])

    key = f"{ENV_PREFIX}SUMMARY"
    if key in env:
        settings["summary"] = _parse_bool(key, env[key])

    key = f"{ENV_PREFIX}FAILURE_EXIT_CODE"
    if key in env:
        settings["failure_exit_code"] = _parse_exit_code(key, env[key])

    return TallyConfig(**settings)  # type: ignore[arg-type]


__all__ = ["ConfigError", "DEFAULT_CONFIG", "TallyConfig", "load_config"]
