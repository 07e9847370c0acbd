"""Unit tests for shared text helpers."""

from __future__ import annotations

import pytest

from devconvert.converters.text import (
    camelize,
    is_number,
    js_key,
    json_kind,
    parse_json,
    parse_json_object,
)
from devconvert.errors import ParseError


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("background-color", "backgroundColor"),
        ("border-top-left-radius", "borderTopLeftRadius"),
        ("color", "color"),
        ("-webkit-transition", "WebkitTransition"),
        ("font-Size", "font-Size"),
    ],
)
def test_camelize_upper_cases_letter_after_hyphen(name: str, expected: str) -> None:
    """Upper-case lowercase letters after hyphens, leaving others untouched."""
    assert camelize(name) == expected


def test_js_key_quotes_non_identifiers() -> None:
    """Quote keys that cannot appear bare in an object literal."""
    assert js_key("marginTop") == "marginTop"
    assert js_key("$ref") == "$ref"
    assert js_key("first name") == "'first name'"
    assert js_key("it's") == "'it\\'s'"


def test_parse_json_reports_position() -> None:
    """Surface line and column of a syntax error."""
    with pytest.raises(ParseError, match=r"Invalid JSON: .*line 1, column"):
        parse_json('{"a": }')


@pytest.mark.parametrize("text", ["NaN", '{"a": Infinity}', '[-Infinity]'])
def test_parse_json_rejects_non_standard_constants(text: str) -> None:
    """Reject NaN and Infinity literals accepted by the stdlib parser."""
    with pytest.raises(ParseError):
        parse_json(text)


def test_parse_json_object_requires_object_root() -> None:
    """Name the actual top-level kind when it is not an object."""
    assert parse_json_object('{"a": 1}') == {"a": 1}
    with pytest.raises(ParseError, match="got array"):
        parse_json_object("[1, 2]")


def test_json_kind_and_is_number_treat_booleans_separately() -> None:
    """Booleans are never classified as numbers."""
    assert json_kind(True) == "boolean"
    assert json_kind(1.5) == "number"
    assert json_kind(None) == "null"
    assert is_number(3)
    assert is_number(2.5)
    assert not is_number(True)
    assert not is_number("3")
