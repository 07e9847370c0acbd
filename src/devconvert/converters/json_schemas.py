"""Flat schema generators driven by a binary number/string inference.

Each top-level key of the parsed object becomes one field. A value is
classified as numeric when it is a JSON number and as a string otherwise;
booleans, nulls and nested values all fall on the string side.
"""

from __future__ import annotations

from collections.abc import Callable

from devconvert.application.options import DEFAULT_OPTIONS, GeneratorOptions
from devconvert.converters.text import is_number, js_key, parse_json_object


def _fields(text: str, render: Callable[[str, bool], str]) -> list[str]:
    parsed = parse_json_object(text)
    return [render(key, is_number(value)) for key, value in parsed.items()]


def json_to_zod(text: str, options: GeneratorOptions = DEFAULT_OPTIONS) -> str:
    """Emit a ``z.object`` schema declaration."""
    fields = _fields(
        text,
        lambda key, numeric: f"  {js_key(key)}: z.{'number' if numeric else 'string'}()",
    )
    return f"const {options.zod_schema_name} = z.object({{\n" + ",\n".join(fields) + "\n})"


def json_to_typebox(text: str, options: GeneratorOptions = DEFAULT_OPTIONS) -> str:
    """Emit a ``Type.Object`` schema declaration."""
    fields = _fields(
        text,
        lambda key, numeric: f"  {js_key(key)}: Type.{'Number' if numeric else 'String'}()",
    )
    return (
        f"const {options.typebox_schema_name} = Type.Object({{\n"
        + ",\n".join(fields)
        + "\n})"
    )


def json_to_mongoose(text: str, options: GeneratorOptions = DEFAULT_OPTIONS) -> str:
    """Emit a Mongoose ``Schema`` with ``String``/``Number`` fields."""
    fields = _fields(
        text,
        lambda key, numeric: f"  {js_key(key)}: {'Number' if numeric else 'String'}",
    )
    return (
        f"const {options.mongoose_schema_name} = new Schema({{\n"
        + ",\n".join(fields)
        + "\n})"
    )


def json_to_sql(text: str, options: GeneratorOptions = DEFAULT_OPTIONS) -> str:
    """Emit a ``CREATE TABLE`` statement with one column per top-level key.

    Examples
    --------
    >>> print(json_to_sql('{"id": 1, "username": "alice"}'))
    CREATE TABLE users (
      id INT,
      username VARCHAR(255)
    );
    """
    columns = _fields(
        text,
        lambda key, numeric: f"  {key} {'INT' if numeric else 'VARCHAR(255)'}",
    )
    return f"CREATE TABLE {options.table_name} (\n" + ",\n".join(columns) + "\n);"
