"""Helpers for naming source files and rendering values in diagnostics."""

from __future__ import annotations

import os
from typing import Any


def short_name(path: str) -> str:
    """Return the final component of ``path``.

    Everything up to and including the last path separator is dropped.
    A path without a separator is returned unchanged.
    """
    cut = path.rfind("/")
    if os.sep != "/":
        cut = max(cut, path.rfind(os.sep))
    if cut == -1:
        return path
    return path[cut + 1 :]


def render(value: Any) -> str:
    """Render a value the way failure diagnostics print it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


__all__ = ["render", "short_name"]
