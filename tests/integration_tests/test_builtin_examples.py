"""Integration tests running every built-in example end to end."""

from __future__ import annotations

import pytest

from devconvert import transform
from devconvert.registry import create_default_registry

REGISTRY = create_default_registry()

EXPECTED_FRAGMENTS = {
    "jsx": ["export const IconComponent = (props) => (", "<svg {...props}", 'strokeWidth="4"'],
    "svg_tailwind": ["className={className}", 'stroke="currentColor"', 'fill="none"'],
    "html_jsx": ['className="container"', 'htmlFor="username"'],
    "tailwind": ["bg-blue-500 px-4 py-2 rounded"],
    "css_obj": ["backgroundColor: '#ffffff'", "marginTop: '20px'", "fontSize: '1rem'"],
    "typescript": ["interface RootObject {", "isActive: boolean;"],
    "zod": ["const schema = z.object({", "username: z.string()", "age: z.number()"],
    "typebox": ["const T = Type.Object({", "count: Type.Number()"],
    "mongoose": ["const PostSchema = new Schema({", "views: Number"],
    "sql": ["CREATE TABLE users (", "username VARCHAR(255)", ");"],
    "jsdoc": ["// Converted jsdoc:"],
    "graphql": ["// Converted graphql:"],
    "curl_fetch": ["fetch('https://api.example.com/data',"],
}


def test_every_builtin_has_expectations() -> None:
    """Keep this table in sync with the registry."""
    assert sorted(EXPECTED_FRAGMENTS) == sorted(REGISTRY.ids())


@pytest.mark.parametrize("conversion_id", REGISTRY.ids())
def test_example_converts(conversion_id: str) -> None:
    """The shipped example converts and contains the expected fragments."""
    spec = REGISTRY.get(conversion_id)
    result = transform(conversion_id, spec.example)
    assert result.ok, result.message
    for fragment in EXPECTED_FRAGMENTS[conversion_id]:
        assert fragment in (result.output or "")
