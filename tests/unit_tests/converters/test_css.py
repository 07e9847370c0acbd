"""Unit tests for CSS conversions."""

from __future__ import annotations

import pytest

from devconvert.converters.css import css_to_object, css_to_tailwind, parse_declaration


def test_parse_declaration_splits_on_first_colon() -> None:
    """Keep everything after the first colon as the value."""
    assert parse_declaration("background: url(http://x.test/a.png);") == (
        "background",
        "url(http://x.test/a.png)",
    )
    assert parse_declaration(".btn {") is None
    assert parse_declaration("color:") is None
    assert parse_declaration("color: ;") is None
    assert parse_declaration(": red") is None


def test_css_object_camel_cases_keys_in_line_order() -> None:
    """Convert kebab-case properties and strip trailing semicolons."""
    output = css_to_object("background-color: #ffffff;\nmargin-top: 20px;")
    assert output == "{\n  backgroundColor: '#ffffff',\n  marginTop: '20px'\n}"


def test_css_object_skips_lines_without_key_and_value() -> None:
    """Selectors, braces and blank lines are silently ignored."""
    output = css_to_object(".card {\n\n  padding: 4px;\n}")
    assert output == "{\n  padding: '4px'\n}"


def test_css_object_escapes_single_quotes() -> None:
    """Escape quotes so the value stays a valid JS string."""
    output = css_to_object("font-family: 'Inter', sans-serif;")
    assert output == "{\n  fontFamily: '\\'Inter\\', sans-serif'\n}"


def test_css_object_with_no_declarations_is_empty_object() -> None:
    """Input with nothing usable renders an empty object."""
    assert css_to_object("just some words") == "{}"


def test_tailwind_maps_rule_block() -> None:
    """Map a one-line rule onto utility classes in declaration order."""
    css = ".btn{background-color:#3b82f6;padding:0.5rem 1rem;border-radius:0.25rem}"
    assert css_to_tailwind(css) == "bg-blue-500 px-4 py-2 rounded"


@pytest.mark.parametrize(
    ("css", "expected"),
    [
        ("display: none !important;", "hidden"),
        ("margin: 0 auto;", "mx-auto my-0"),
        ("padding: 1rem 1rem;", "p-4"),
        ("padding: 1px 2px 4px 8px;", "pt-px pr-0.5 pb-1 pl-2"),
        ("padding-top: 1rem;", "pt-4"),
        ("width: 100%; height: 100vh;", "w-full h-screen"),
        ("color: #FFF;", "text-white"),
        ("border: 1px solid #e5e7eb;", "border border-gray-200"),
        ("opacity: 0.5;", "opacity-50"),
        ("font-weight: 700; font-size: 14px;", "font-bold text-sm"),
        ("display: flex; justify-content: space-between; align-items: center;",
         "flex justify-between items-center"),
    ],
)
def test_tailwind_known_declarations(css: str, expected: str) -> None:
    """Translate supported declarations."""
    assert css_to_tailwind(css) == expected


def test_tailwind_drops_unknown_and_duplicate_classes() -> None:
    """Unmapped declarations vanish and repeated classes appear once."""
    css = "transition: all 0.2s;\ndisplay: flex;\nopacity: 0.33;\ndisplay: flex;"
    assert css_to_tailwind(css) == "flex"


@pytest.mark.parametrize("value", ["1e400", "inf", "-inf", "nan"])
def test_tailwind_ignores_non_finite_opacity(value: str) -> None:
    """Opacity values that are not finite numbers map to no class."""
    assert css_to_tailwind(f"opacity: {value};") == ""
    assert css_to_tailwind(f"opacity: {value}; display: flex;") == "flex"
