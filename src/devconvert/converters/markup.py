"""SVG and HTML to JSX rewrites.

These are pattern substitutions, not tree transformations: each pattern is
applied once, to its first match in the whole input, regardless of lines.
"""

from __future__ import annotations

import re

from devconvert.application.options import DEFAULT_OPTIONS, GeneratorOptions
from devconvert.converters.css import parse_declaration, style_entries
from devconvert.converters.text import js_key

_STROKE_ATTRIBUTES = (
    (re.compile(r"stroke-width="), "strokeWidth="),
    (re.compile(r"stroke-linecap="), "strokeLinecap="),
    (re.compile(r"stroke-linejoin="), "strokeLinejoin="),
)
_CLASS_ATTR = re.compile(r"class=")
_FOR_ATTR = re.compile(r"for=")
_STYLE_ATTR = re.compile(r'style="([^"]*)"')

_WIDTH_ATTR = re.compile(r'(?<=\s)width="[^"]*"')
_HEIGHT_ATTR = re.compile(r'\s+height="[^"]*"')
_STROKE_ATTR = re.compile(r'(?<=\s)stroke="[^"]*"')
_FILL_ATTR = re.compile(r'(?<=\s)fill="[^"]*"')

TAILWIND_ICON_TEMPLATE = 'export const Icon = ({{ className = "w-6 h-6" }}) => (\n  {body}\n);'
PLAIN_ICON_TEMPLATE = "export const IconComponent = (props) => (\n  {body}\n);"


def _style_object(match: re.Match[str]) -> str:
    declarations = [
        parsed
        for chunk in match.group(1).split(";")
        if (parsed := parse_declaration(chunk))
    ]
    entries = style_entries(declarations)
    body = ", ".join(f"{js_key(key)}: '{value}'" for key, value in entries.items())
    return f"style={{{{{body}}}}}"


def rewrite_stroke_attributes(markup: str) -> str:
    """Camel-case the hyphenated stroke attributes."""
    for pattern, replacement in _STROKE_ATTRIBUTES:
        markup = pattern.sub(replacement, markup, count=1)
    return markup


def html_to_jsx(text: str, options: GeneratorOptions = DEFAULT_OPTIONS) -> str:
    """Rewrite HTML attributes into their JSX spelling.

    ``class=`` becomes ``className=``, ``for=`` becomes ``htmlFor=`` and an
    inline ``style="a-b: c;"`` becomes ``style={{aB: 'c'}}``.
    """
    del options
    text = _CLASS_ATTR.sub("className=", text, count=1)
    text = _FOR_ATTR.sub("htmlFor=", text, count=1)
    return _STYLE_ATTR.sub(_style_object, text, count=1)


def svg_to_jsx(text: str, options: GeneratorOptions = DEFAULT_OPTIONS) -> str:
    """Wrap SVG markup in a React component that spreads its props."""
    body = html_to_jsx(rewrite_stroke_attributes(text), options)
    body = body.replace("<svg", "<svg {...props}", 1)
    return PLAIN_ICON_TEMPLATE.format(body=body)


def svg_to_tailwind(text: str, options: GeneratorOptions = DEFAULT_OPTIONS) -> str:
    """Wrap SVG markup in a React component sized through ``className``.

    The first ``width`` becomes the ``className`` prop, the first ``height``
    is removed, and the first ``stroke``/``fill`` are forced to
    ``currentColor``/``none``.
    """
    del options
    body = _WIDTH_ATTR.sub("className={className}", text, count=1)
    body = _HEIGHT_ATTR.sub("", body, count=1)
    body = _STROKE_ATTR.sub('stroke="currentColor"', body, count=1)
    body = _FILL_ATTR.sub('fill="none"', body, count=1)
    body = rewrite_stroke_attributes(body)
    return TAILWIND_ICON_TEMPLATE.format(body=body)
