"""Unit tests for the annotated passthrough fallback."""

from __future__ import annotations

from devconvert.application.options import DEFAULT_OPTIONS
from devconvert.converters import annotated_passthrough


def test_passthrough_returns_input_under_comment() -> None:
    """Echo the input unchanged beneath a comment naming the target."""
    convert = annotated_passthrough("graphql")
    assert convert('{"id": 1}', DEFAULT_OPTIONS) == '// Converted graphql:\n{"id": 1}'


def test_passthrough_never_parses_input() -> None:
    """Malformed input is not an error for the fallback."""
    convert = annotated_passthrough("jsdoc")
    assert convert("{not json", DEFAULT_OPTIONS).endswith("{not json")
    assert convert.__name__ == "passthrough_jsdoc"
