"""Call-site inspection for assertion diagnostics.

Assertions report the file and line they were called from together with the
source text of their arguments (``x + 1`` rather than its value). The text is
recovered by parsing the calling module with :mod:`ast` and slicing out the
argument segments of the matching call. When the source is unavailable
(interactive sessions, ``exec`` strings, aliased imports) the ``repr`` of each
value is used instead.
"""

from __future__ import annotations

import ast
import inspect
import linecache
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from types import FrameType
from typing import Any

from tally.naming import short_name

logger = logging.getLogger(__name__)

UNKNOWN_FILE = "<unknown>"

Position = tuple[int, int, int, int]

_parse_cache: dict[str, tuple[str, ast.Module]] = {}


@dataclass(frozen=True, slots=True)
class CallSite:
    """Where an assertion was called and how its arguments were spelled."""

    file: str
    line: int
    texts: tuple[str, ...] = ()


def _outer_frame(depth: int) -> FrameType | None:
    # depth 0 is the caller of _outer_frame's caller
    frame = inspect.currentframe()
    for _ in range(depth + 2):
        if frame is None:
            return None
        frame = frame.f_back
    return frame


def _call_position(frame: FrameType) -> Position | None:
    positions = inspect.getframeinfo(frame, context=0).positions
    if positions is None:
        return None
    values = (
        positions.lineno,
        positions.end_lineno,
        positions.col_offset,
        positions.end_col_offset,
    )
    if any(value is None for value in values):
        return None
    return values  # type: ignore[return-value]


def caller_location(depth: int = 1) -> tuple[str, int]:
    """Return ``(filename, lineno)`` of the frame ``depth`` levels above the caller."""
    frame = _outer_frame(depth)
    try:
        if frame is None:
            return UNKNOWN_FILE, 0
        return frame.f_code.co_filename, frame.f_lineno
    finally:
        del frame


def _parsed_source(filename: str) -> tuple[str, ast.Module] | None:
    lines = linecache.getlines(filename)
    if not lines:
        return None
    source = "".join(lines)

    cached = _parse_cache.get(filename)
    if cached is not None and cached[0] == source:
        return cached

    try:
        tree = ast.parse(source, filename)
    except (SyntaxError, ValueError):
        logger.debug("Could not parse %s for assertion texts", filename)
        return None

    _parse_cache[filename] = (source, tree)
    return source, tree


def _callee_name(node: ast.expr) -> str | None:
    if isinstance(node, ast.Name):
        return node.id
    if isinstance(node, ast.Attribute):
        return node.attr
    return None


def _node_position(node: ast.Call) -> Position | None:
    if node.end_lineno is None or node.end_col_offset is None:
        return None
    return node.lineno, node.end_lineno, node.col_offset, node.end_col_offset


def argument_texts(
    filename: str,
    line: int,
    func_name: str,
    count: int,
    position: Position | None = None,
) -> tuple[str, ...] | None:
    """Source text of the first ``count`` positional arguments of a call.

    A call whose location equals ``position`` wins. Otherwise the innermost
    call to ``func_name`` spanning ``line`` is used. Returns None when no
    such call can be found.
    """
    parsed = _parsed_source(filename)
    if parsed is None:
        return None
    source, tree = parsed

    best: ast.Call | None = None
    best_span = 0
    for node in ast.walk(tree):
        if not isinstance(node, ast.Call):
            continue
        end = node.end_lineno or node.lineno
        if not node.lineno <= line <= end:
            continue
        if _callee_name(node.func) != func_name or len(node.args) < count:
            continue
        if any(isinstance(arg, ast.Starred) for arg in node.args[:count]):
            continue
        if position is not None and _node_position(node) == position:
            best = node
            break
        # ast.walk is breadth first, so on a tie the later node is nested deeper
        span = end - node.lineno
        if best is None or span <= best_span:
            best, best_span = node, span

    if best is None:
        return None

    segments = [ast.get_source_segment(source, arg) for arg in best.args[:count]]
    if any(segment is None for segment in segments):
        return None
    return tuple(segment for segment in segments if segment is not None)


def call_site(func_name: str, values: Sequence[Any], depth: int = 1) -> CallSite:
    """Describe the call to ``func_name`` made ``depth`` frames above the caller."""
    frame = _outer_frame(depth)
    try:
        if frame is None:
            return CallSite(
                file=UNKNOWN_FILE, line=0, texts=tuple(repr(v) for v in values)
            )
        filename = frame.f_code.co_filename
        line = frame.f_lineno
        position = _call_position(frame)
    finally:
        del frame

    texts = argument_texts(filename, line, func_name, len(values), position)
    if texts is None:
        texts = tuple(repr(value) for value in values)
    return CallSite(file=short_name(filename), line=line, texts=texts)


__all__ = ["CallSite", "argument_texts", "call_site", "caller_location"]
