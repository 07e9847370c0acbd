"""JSON to TypeScript interface generation.

The parsed document is walked recursively. Every distinct object shape becomes
one ``interface`` declaration; shapes that repeat reuse the first declaration.
Arrays of objects are merged into a single shape whose keys become optional
when some elements lack them.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from devconvert.application.options import DEFAULT_OPTIONS, GeneratorOptions
from devconvert.converters.text import is_number, js_key, json_kind, parse_json
from devconvert.errors import ParseError
from devconvert.types import JsonValue

_WORD = re.compile(r"[A-Za-z0-9]+")


@dataclass(frozen=True)
class _Field:
    name: str
    type_name: str
    optional: bool = False

    def render(self) -> str:
        marker = "?" if self.optional else ""
        return f"  {js_key(self.name)}{marker}: {self.type_name};"


def _singular(word: str) -> str:
    lowered = word.lower()
    if lowered.endswith("ies") and len(word) > 3:
        return word[:-3] + "y"
    if lowered.endswith(("sses", "xes", "ches", "shes")):
        return word[:-2]
    if lowered.endswith("s") and not lowered.endswith("ss") and len(word) > 1:
        return word[:-1]
    return word


def _pascal(key: str) -> str:
    parts = _WORD.findall(key)
    name = "".join(part[0].upper() + part[1:] for part in parts)
    if not name:
        return "Item"
    if name[0].isdigit():
        return "Type" + name
    return name


class InterfaceBuilder:
    """Collect interface declarations for one JSON document."""

    def __init__(self, root_name: str) -> None:
        self._root_name = root_name
        self._declarations: list[str] = []
        self._names_by_shape: dict[tuple[_Field, ...], str] = {}
        self._used_names: set[str] = {root_name}

    def build(self, document: JsonValue) -> list[str]:
        """Return declarations for ``document`` in discovery order, root first."""
        if isinstance(document, dict):
            objects = [document]
        elif isinstance(document, list) and any(
            isinstance(item, dict) for item in document
        ):
            objects = [item for item in document if isinstance(item, dict)]
        else:
            raise ParseError(
                "Expected a JSON object or an array of objects, "
                f"got {json_kind(document)}."
            )
        self._interface(objects, name=self._root_name)
        return list(self._declarations)

    def _unique_name(self, hint: str) -> str:
        if hint not in self._used_names:
            self._used_names.add(hint)
            return hint
        index = 2
        while f"{hint}{index}" in self._used_names:
            index += 1
        name = f"{hint}{index}"
        self._used_names.add(name)
        return name

    def _interface(
        self,
        objects: list[dict[str, JsonValue]],
        *,
        hint: str = "",
        name: str | None = None,
    ) -> str:
        # Reserve the slot first so a parent precedes its children.
        slot = len(self._declarations)
        self._declarations.append("")

        keys: list[str] = []
        for obj in objects:
            for key in obj:
                if key not in keys:
                    keys.append(key)

        fields = []
        for key in keys:
            values = [obj[key] for obj in objects if key in obj]
            fields.append(
                _Field(
                    name=key,
                    type_name=self._union(values, _pascal(key)),
                    optional=len(values) < len(objects),
                )
            )
        shape = tuple(fields)

        existing = self._names_by_shape.get(shape)
        if existing is not None and name is None:
            # A repeated shape cannot have introduced new children.
            self._declarations.pop(slot)
            return existing

        resolved = name if name is not None else self._unique_name(hint)
        self._names_by_shape.setdefault(shape, resolved)
        body = "\n".join(field.render() for field in fields)
        self._declarations[slot] = (
            f"interface {resolved} {{\n{body}\n}}" if body else f"interface {resolved} {{\n}}"
        )
        return resolved

    def _array(self, items: list[JsonValue], hint: str) -> str:
        if not items:
            return "any[]"
        inner = self._union(items, _pascal(_singular(hint)))
        if " | " in inner:
            return f"({inner})[]"
        return f"{inner}[]"

    def _union(self, values: list[JsonValue], hint: str) -> str:
        objects = [value for value in values if isinstance(value, dict)]
        arrays = [value for value in values if isinstance(value, list)]
        parts: list[str] = []
        seen_object = seen_array = False
        for value in values:
            if isinstance(value, dict):
                if not seen_object:
                    seen_object = True
                    parts.append(self._interface(objects, hint=hint))
                continue
            if isinstance(value, list):
                if not seen_array:
                    seen_array = True
                    merged = [item for array in arrays for item in array]
                    parts.append(self._array(merged, hint))
                continue
            parts.append(_scalar_type(value))

        unique = list(dict.fromkeys(parts))
        if len(unique) > 1 and "any" in unique:
            unique.remove("any")
        return " | ".join(unique)


def _scalar_type(value: JsonValue) -> str:
    if value is None:
        return "any"
    if isinstance(value, bool):
        return "boolean"
    if is_number(value):
        return "number"
    return "string"


def json_to_typescript(text: str, options: GeneratorOptions = DEFAULT_OPTIONS) -> str:
    """Convert a JSON document into TypeScript interface declarations.

    Parameters
    ----------
    text : str
        JSON source text.
    options : GeneratorOptions
        Generator names; ``root_name`` names the top-level interface.

    Returns
    -------
    str
        Interface declarations separated by a blank line.

    Raises
    ------
    ParseError
        If the text is not JSON, or its root is not an object or an array
        of objects.
    """
    document = parse_json(text)
    try:
        declarations = InterfaceBuilder(options.root_name).build(document)
    except RecursionError as exc:
        raise ParseError("JSON document is nested too deeply.") from exc
    return "\n\n".join(declarations)
