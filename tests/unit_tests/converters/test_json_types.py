"""Unit tests for JSON to TypeScript interface generation."""

from __future__ import annotations

import pytest

from devconvert.application.options import GeneratorOptions
from devconvert.converters.json_types import json_to_typescript
from devconvert.errors import ParseError


def test_flat_object_becomes_single_interface() -> None:
    """Type primitive fields by runtime kind, in key order."""
    output = json_to_typescript('{"id":1,"name":"John Doe","isActive":true}')
    assert output == (
        "interface RootObject {\n"
        "  id: number;\n"
        "  name: string;\n"
        "  isActive: boolean;\n"
        "}"
    )


def test_nested_objects_follow_parent_in_discovery_order() -> None:
    """Emit one declaration per nested shape, parent first, blank-line separated."""
    output = json_to_typescript(
        '{"user": {"name": "a", "address": {"city": "x"}}, "count": 2}'
    )
    assert output.split("\n\n") == [
        "interface RootObject {\n  user: User;\n  count: number;\n}",
        "interface User {\n  name: string;\n  address: Address;\n}",
        "interface Address {\n  city: string;\n}",
    ]


def test_repeated_shape_reuses_declaration() -> None:
    """Identical shapes under different keys share one interface."""
    output = json_to_typescript('{"home": {"x": 1}, "work": {"x": 2}}')
    assert output.count("interface ") == 2
    assert "home: Home;" in output
    assert "work: Home;" in output


def test_array_of_objects_merges_keys_and_marks_missing_optional() -> None:
    """Keys absent from some elements become optional fields."""
    output = json_to_typescript('{"items": [{"id": 1, "tag": "a"}, {"id": 2}]}')
    assert "items: Item[];" in output
    assert "interface Item {\n  id: number;\n  tag?: string;\n}" in output


def test_primitive_and_mixed_arrays() -> None:
    """Infer element types for scalar and mixed arrays."""
    output = json_to_typescript('{"tags": ["a"], "mixed": [1, "b"], "empty": []}')
    assert "tags: string[];" in output
    assert "mixed: (number | string)[];" in output
    assert "empty: any[];" in output


def test_null_is_any_unless_other_types_present() -> None:
    """A lone null is ``any``; alongside other kinds it is dropped."""
    output = json_to_typescript('{"a": null, "b": [null, 1]}')
    assert "a: any;" in output
    assert "b: number[];" in output


def test_non_identifier_keys_are_quoted() -> None:
    """Quote keys that are not valid identifiers."""
    output = json_to_typescript('{"first-name": "x"}')
    assert "'first-name': string;" in output


def test_root_array_of_objects_and_custom_root_name() -> None:
    """Use the configured root name for a top-level array of objects."""
    output = json_to_typescript('[{"id": 1}, {"id": 2}]', GeneratorOptions(root_name="Row"))
    assert output == "interface Row {\n  id: number;\n}"


def test_name_collisions_get_numeric_suffix() -> None:
    """Distinct shapes with the same hint get unique names."""
    output = json_to_typescript('{"a": {"data": {"x": 1}}, "b": {"data": {"y": "s"}}}')
    assert "interface Data {" in output
    assert "interface Data2 {" in output


@pytest.mark.parametrize("text", ['"text"', "42", "[1, 2]", "null"])
def test_non_object_root_is_parse_error(text: str) -> None:
    """Reject documents with no object to describe."""
    with pytest.raises(ParseError, match="Expected a JSON object"):
        json_to_typescript(text)


def test_invalid_json_is_parse_error() -> None:
    """Surface syntax errors as ParseError."""
    with pytest.raises(ParseError, match="Invalid JSON"):
        json_to_typescript("{not json}")
