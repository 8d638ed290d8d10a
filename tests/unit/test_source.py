"""Tests for call-site inspection."""

import inspect

from tally.naming import short_name
from tally.source import argument_texts, call_site, caller_location


def locate(left, right):
    return call_site("locate", (left, right))


def where():
    return caller_location()


def test_call_site_recovers_argument_text():
    x = 3
    site = locate(x + 1, "lit")

    assert site.texts == ("x + 1", '"lit"')
    assert site.file == "test_source.py"


def test_call_site_reports_calling_line():
    site, here = locate(1, 2), inspect.currentframe().f_lineno

    assert site.line == here


def test_call_site_handles_calls_spanning_lines():
    x = 3
    site = locate(
        x * 2,
        x,
    )

    assert site.texts == ("x * 2", "x")


def test_call_site_picks_innermost_matching_call():
    site = locate(locate(1, 2).line, 0)

    assert site.texts == ("locate(1, 2).line", "0")


def test_call_site_falls_back_to_repr_for_aliases():
    alias = locate
    site = alias(1, "b")

    assert site.texts == ("1", "'b'")


def test_call_site_falls_back_to_repr_for_starred_arguments():
    pair = (5, 6)
    site = locate(*pair)

    assert site.texts == ("5", "6")


def test_caller_location_points_at_the_caller():
    (filename, line), here = where(), inspect.currentframe().f_lineno

    assert short_name(filename) == "test_source.py"
    assert line == here


def test_argument_texts_returns_none_without_source():
    assert argument_texts("<no such file>", 1, "locate", 2) is None
