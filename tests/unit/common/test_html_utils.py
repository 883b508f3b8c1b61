"""Tests for HTML escaping helpers."""

import pytest

from common.utils.html_utils import escape_html, escape_multiline_html


@pytest.mark.parametrize(
    "raw, escaped",
    [
        ("&", "&amp;"),
        ("<", "&lt;"),
        (">", "&gt;"),
        ('"', "&quot;"),
        ("'", "&#039;"),
        ("plain text", "plain text"),
    ],
)
def test_escape_html(raw, escaped):
    assert escape_html(raw) == escaped


def test_ampersand_escaped_once():
    assert escape_html("&lt;") == "&amp;lt;"


def test_multiline():
    assert escape_multiline_html("a<b\nc") == "a&lt;b<br>c"
