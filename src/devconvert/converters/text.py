"""Shared text-rewrite helpers used by the converters."""

from __future__ import annotations

import json
import re

from devconvert.errors import ParseError
from devconvert.types import JsonValue

_HYPHEN_LETTER = re.compile(r"-([a-z])")
_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def camelize(name: str) -> str:
    """Upper-case each lowercase letter following a hyphen and drop the hyphen.

    Examples
    --------
    >>> camelize("background-color")
    'backgroundColor'
    """
    return _HYPHEN_LETTER.sub(lambda match: match.group(1).upper(), name)


def is_identifier(name: str) -> bool:
    """Check whether ``name`` can be used unquoted as a JS object key."""
    return bool(_IDENTIFIER.match(name))


def js_key(name: str) -> str:
    """Render an object key, single-quoting it when it is not an identifier."""
    if is_identifier(name):
        return name
    return "'" + name.replace("\\", "\\\\").replace("'", "\\'") + "'"


def _reject_constant(token: str) -> JsonValue:
    raise ValueError(f"{token} is not valid JSON")


def parse_json(text: str) -> JsonValue:
    """Parse strict JSON text.

    Raises
    ------
    ParseError
        If ``text`` is not valid JSON. ``NaN`` and ``Infinity`` are rejected.
    """
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise ParseError(
            f"Invalid JSON: {exc.msg} (line {exc.lineno}, column {exc.colno})"
        ) from exc
    except ValueError as exc:
        raise ParseError(f"Invalid JSON: {exc}") from exc
    except RecursionError as exc:
        raise ParseError("Invalid JSON: document is nested too deeply.") from exc


def parse_json_object(text: str) -> dict[str, JsonValue]:
    """Parse JSON text that must hold an object at the top level."""
    value = parse_json(text)
    if not isinstance(value, dict):
        raise ParseError(
            f"Expected a JSON object at the top level, got {json_kind(value)}."
        )
    return value


def json_kind(value: JsonValue) -> str:
    """Return a JSON type name for error messages."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    return "object"


def is_number(value: JsonValue) -> bool:
    """Runtime numeric check; booleans are not numbers."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)
