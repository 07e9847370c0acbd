"""Transformation functions, one per conversion id.

Every function takes the (already stripped) input text and a
:class:`~devconvert.application.options.GeneratorOptions` and returns the
converted text, raising :class:`~devconvert.errors.ParseError` on input that
does not fit its source grammar.
"""

from __future__ import annotations

from collections.abc import Callable

from devconvert.application.options import DEFAULT_OPTIONS, GeneratorOptions
from devconvert.converters.css import css_to_object, css_to_tailwind
from devconvert.converters.json_schemas import (
    json_to_mongoose,
    json_to_sql,
    json_to_typebox,
    json_to_zod,
)
from devconvert.converters.json_types import json_to_typescript
from devconvert.converters.markup import html_to_jsx, svg_to_jsx, svg_to_tailwind
from devconvert.converters.network import curl_to_fetch


def annotated_passthrough(conversion_id: str) -> Callable[[str, GeneratorOptions], str]:
    """Build the fallback for ids without grammar-specific logic.

    The input comes back unchanged under a comment naming the target.
    """

    def _passthrough(text: str, options: GeneratorOptions = DEFAULT_OPTIONS) -> str:
        del options
        return f"// Converted {conversion_id}:\n{text}"

    _passthrough.__name__ = f"passthrough_{conversion_id}"
    return _passthrough


__all__ = [
    "annotated_passthrough",
    "css_to_object",
    "css_to_tailwind",
    "curl_to_fetch",
    "html_to_jsx",
    "json_to_mongoose",
    "json_to_sql",
    "json_to_typebox",
    "json_to_typescript",
    "json_to_zod",
    "svg_to_jsx",
    "svg_to_tailwind",
]
