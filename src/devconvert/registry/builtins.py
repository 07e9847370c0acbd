"""Built-in conversions, in menu order."""

from __future__ import annotations

import json

from devconvert import converters
from devconvert.registry.base import ConversionSpec, Transformer
from devconvert.types import Category

_SVG_EXAMPLE = (
    '<svg width="100" height="100">\n'
    '  <circle cx="50" cy="50" r="40" stroke="green" stroke-width="4" fill="yellow" />\n'
    "</svg>"
)
_SVG_ICON_EXAMPLE = (
    '<svg width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="#000">\n'
    '  <path d="M5 12h14M12 5l7 7-7 7" stroke-width="2" stroke-linecap="round"'
    ' stroke-linejoin="round"/>\n'
    "</svg>"
)
_HTML_EXAMPLE = (
    '<div class="container" for="username">\n'
    "  <label>Username</label>\n"
    '  <input type="text" id="username" />\n'
    "</div>"
)
_CSS_RULE_EXAMPLE = (
    ".btn {\n"
    "  background-color: #3b82f6;\n"
    "  padding: 0.5rem 1rem;\n"
    "  border-radius: 0.25rem;\n"
    "}"
)
_CSS_DECLARATIONS_EXAMPLE = "background-color: #ffffff;\nmargin-top: 20px;\nfont-size: 1rem;"
_CURL_EXAMPLE = "curl 'https://api.example.com/data' -H 'Authorization: Bearer 123'"


def _json_example(**fields: object) -> str:
    return json.dumps(fields, indent=2)


BUILTIN_CONVERSIONS: tuple[tuple[ConversionSpec, Transformer], ...] = (
    (
        ConversionSpec("jsx", Category.SVG, "to JSX", "xml", "javascript", _SVG_EXAMPLE),
        converters.svg_to_jsx,
    ),
    (
        ConversionSpec(
            "svg_tailwind",
            Category.SVG,
            "to Tailwind JSX",
            "xml",
            "javascript",
            _SVG_ICON_EXAMPLE,
        ),
        converters.svg_to_tailwind,
    ),
    (
        ConversionSpec("html_jsx", Category.HTML, "to JSX", "html", "javascript", _HTML_EXAMPLE),
        converters.html_to_jsx,
    ),
    (
        ConversionSpec(
            "tailwind", Category.CSS, "to Tailwind", "css", "typescript", _CSS_RULE_EXAMPLE
        ),
        converters.css_to_tailwind,
    ),
    (
        ConversionSpec(
            "css_obj",
            Category.CSS,
            "to JS Object",
            "css",
            "javascript",
            _CSS_DECLARATIONS_EXAMPLE,
        ),
        converters.css_to_object,
    ),
    (
        ConversionSpec(
            "typescript",
            Category.JSON,
            "to TypeScript",
            "json",
            "typescript",
            _json_example(id=1, name="John Doe", isActive=True),
        ),
        converters.json_to_typescript,
    ),
    (
        ConversionSpec(
            "zod",
            Category.JSON,
            "to Zod",
            "json",
            "typescript",
            _json_example(username="dev_user", age=25),
        ),
        converters.json_to_zod,
    ),
    (
        ConversionSpec(
            "typebox",
            Category.JSON,
            "to TypeBox",
            "json",
            "typescript",
            _json_example(status="success", count=10),
        ),
        converters.json_to_typebox,
    ),
    (
        ConversionSpec(
            "mongoose",
            Category.JSON,
            "to Mongoose Schema",
            "json",
            "typescript",
            _json_example(title="Post", views=100),
        ),
        converters.json_to_mongoose,
    ),
    (
        ConversionSpec(
            "sql",
            Category.JSON,
            "to MySQL",
            "json",
            "sql",
            _json_example(id=1, username="alice"),
        ),
        converters.json_to_sql,
    ),
    (
        ConversionSpec(
            "jsdoc",
            Category.JSON,
            "to JSDoc",
            "json",
            "typescript",
            _json_example(id=1, name="John Doe"),
        ),
        converters.annotated_passthrough("jsdoc"),
    ),
    (
        ConversionSpec(
            "graphql",
            Category.JSON,
            "to GraphQL",
            "json",
            "graphql",
            _json_example(id=1, name="John Doe"),
        ),
        converters.annotated_passthrough("graphql"),
    ),
    (
        ConversionSpec(
            "curl_fetch", Category.NETWORK, "Curl to Fetch", "shell", "javascript", _CURL_EXAMPLE
        ),
        converters.curl_to_fetch,
    ),
)
