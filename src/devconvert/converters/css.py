"""CSS declaration conversions: JS style objects and Tailwind utility classes."""

from __future__ import annotations

import math
import re
from collections.abc import Callable

from devconvert.application.options import DEFAULT_OPTIONS, GeneratorOptions
from devconvert.converters.text import camelize, js_key


def parse_declaration(line: str) -> tuple[str, str] | None:
    """Split one ``property: value`` line on its first colon.

    Returns ``None`` when either side is missing.
    """
    key, sep, value = line.partition(":")
    key = key.strip()
    value = value.strip()
    if value.endswith(";"):
        value = value[:-1].rstrip()
    if not sep or not key or not value:
        return None
    return key, value


def style_entries(declarations: list[tuple[str, str]]) -> dict[str, str]:
    """Camel-case property names and escape single quotes in values."""
    entries: dict[str, str] = {}
    for key, value in declarations:
        entries[camelize(key)] = value.replace("'", "\\'")
    return entries


def render_object(entries: dict[str, str], *, indent: str = "  ") -> str:
    """Render entries as a pretty-printed JS object literal."""
    if not entries:
        return "{}"
    body = ",\n".join(f"{indent}{js_key(key)}: '{value}'" for key, value in entries.items())
    return "{\n" + body + "\n}"


def css_to_object(text: str, options: GeneratorOptions = DEFAULT_OPTIONS) -> str:
    """Convert CSS declarations, one per line, into a JS style object.

    Lines without both a property and a value (selectors, braces, blank
    lines) are skipped.
    """
    del options
    declarations = [
        parsed for line in text.split("\n") if (parsed := parse_declaration(line))
    ]
    return render_object(style_entries(declarations))


# -----------------------------
# Tailwind mapping tables
# -----------------------------
SPACING_SCALE = {
    "0": "0",
    "1px": "px",
    "0.125rem": "0.5",
    "2px": "0.5",
    "0.25rem": "1",
    "4px": "1",
    "0.5rem": "2",
    "8px": "2",
    "0.75rem": "3",
    "12px": "3",
    "1rem": "4",
    "16px": "4",
    "1.25rem": "5",
    "20px": "5",
    "1.5rem": "6",
    "24px": "6",
    "2rem": "8",
    "32px": "8",
    "2.5rem": "10",
    "40px": "10",
    "3rem": "12",
    "48px": "12",
    "4rem": "16",
    "64px": "16",
    "auto": "auto",
}

COLORS = {
    "transparent": "transparent",
    "currentcolor": "current",
    "#fff": "white",
    "#ffffff": "white",
    "white": "white",
    "#000": "black",
    "#000000": "black",
    "black": "black",
    "#f3f4f6": "gray-100",
    "#e5e7eb": "gray-200",
    "#d1d5db": "gray-300",
    "#9ca3af": "gray-400",
    "#6b7280": "gray-500",
    "#4b5563": "gray-600",
    "#374151": "gray-700",
    "#1f2937": "gray-800",
    "#111827": "gray-900",
    "#ef4444": "red-500",
    "#dc2626": "red-600",
    "#f97316": "orange-500",
    "#eab308": "yellow-500",
    "#22c55e": "green-500",
    "#16a34a": "green-600",
    "#3b82f6": "blue-500",
    "#2563eb": "blue-600",
    "#6366f1": "indigo-500",
    "#a855f7": "purple-500",
    "#ec4899": "pink-500",
}

RADIUS = {
    "0": "rounded-none",
    "0.125rem": "rounded-sm",
    "2px": "rounded-sm",
    "0.25rem": "rounded",
    "4px": "rounded",
    "0.375rem": "rounded-md",
    "6px": "rounded-md",
    "0.5rem": "rounded-lg",
    "8px": "rounded-lg",
    "0.75rem": "rounded-xl",
    "12px": "rounded-xl",
    "1rem": "rounded-2xl",
    "16px": "rounded-2xl",
    "9999px": "rounded-full",
    "50%": "rounded-full",
}

BORDER_WIDTH = {"0": "border-0", "1px": "border", "2px": "border-2", "4px": "border-4", "8px": "border-8"}

FONT_SIZE = {
    "0.75rem": "text-xs",
    "12px": "text-xs",
    "0.875rem": "text-sm",
    "14px": "text-sm",
    "1rem": "text-base",
    "16px": "text-base",
    "1.125rem": "text-lg",
    "18px": "text-lg",
    "1.25rem": "text-xl",
    "20px": "text-xl",
    "1.5rem": "text-2xl",
    "24px": "text-2xl",
    "1.875rem": "text-3xl",
    "30px": "text-3xl",
    "2.25rem": "text-4xl",
    "36px": "text-4xl",
}

FONT_WEIGHT = {
    "100": "font-thin",
    "200": "font-extralight",
    "300": "font-light",
    "400": "font-normal",
    "normal": "font-normal",
    "500": "font-medium",
    "600": "font-semibold",
    "700": "font-bold",
    "bold": "font-bold",
    "800": "font-extrabold",
    "900": "font-black",
}

KEYWORDS: dict[str, dict[str, str]] = {
    "display": {
        "block": "block",
        "inline-block": "inline-block",
        "inline": "inline",
        "flex": "flex",
        "inline-flex": "inline-flex",
        "grid": "grid",
        "none": "hidden",
    },
    "position": {
        "static": "static",
        "relative": "relative",
        "absolute": "absolute",
        "fixed": "fixed",
        "sticky": "sticky",
    },
    "text-align": {
        "left": "text-left",
        "center": "text-center",
        "right": "text-right",
        "justify": "text-justify",
    },
    "text-decoration": {
        "underline": "underline",
        "line-through": "line-through",
        "none": "no-underline",
    },
    "text-transform": {
        "uppercase": "uppercase",
        "lowercase": "lowercase",
        "capitalize": "capitalize",
        "none": "normal-case",
    },
    "flex-direction": {
        "row": "flex-row",
        "row-reverse": "flex-row-reverse",
        "column": "flex-col",
        "column-reverse": "flex-col-reverse",
    },
    "flex-wrap": {"wrap": "flex-wrap", "nowrap": "flex-nowrap"},
    "justify-content": {
        "flex-start": "justify-start",
        "start": "justify-start",
        "flex-end": "justify-end",
        "end": "justify-end",
        "center": "justify-center",
        "space-between": "justify-between",
        "space-around": "justify-around",
        "space-evenly": "justify-evenly",
    },
    "align-items": {
        "flex-start": "items-start",
        "start": "items-start",
        "flex-end": "items-end",
        "end": "items-end",
        "center": "items-center",
        "baseline": "items-baseline",
        "stretch": "items-stretch",
    },
    "cursor": {"pointer": "cursor-pointer", "default": "cursor-default", "not-allowed": "cursor-not-allowed"},
    "overflow": {
        "hidden": "overflow-hidden",
        "auto": "overflow-auto",
        "scroll": "overflow-scroll",
        "visible": "overflow-visible",
    },
}

_SIZE_KEYWORDS = {"100%": "full", "auto": "auto", "fit-content": "fit"}
_BOX_SIDES = {"top": "t", "right": "r", "bottom": "b", "left": "l"}


def _box_classes(prefix: str, value: str) -> list[str]:
    """Expand padding/margin shorthand (1 to 4 values) into utilities."""
    scaled = [SPACING_SCALE.get(part) for part in value.split()]
    if not scaled or None in scaled or len(scaled) > 4:
        return []
    if len(scaled) == 1:
        return [f"{prefix}-{scaled[0]}"]
    if len(scaled) == 2:
        vertical, horizontal = scaled
        if vertical == horizontal:
            return [f"{prefix}-{vertical}"]
        return [f"{prefix}x-{horizontal}", f"{prefix}y-{vertical}"]
    if len(scaled) == 3:
        top, horizontal, bottom = scaled
        return [f"{prefix}t-{top}", f"{prefix}x-{horizontal}", f"{prefix}b-{bottom}"]
    return [f"{prefix}{side}-{amount}" for side, amount in zip("trbl", scaled)]


def _size_class(prefix: str, value: str) -> list[str]:
    if value in _SIZE_KEYWORDS:
        return [f"{prefix}-{_SIZE_KEYWORDS[value]}"]
    if (prefix, value) in {("w", "100vw"), ("h", "100vh")}:
        return [f"{prefix}-screen"]
    amount = SPACING_SCALE.get(value)
    return [f"{prefix}-{amount}"] if amount else []


def _color_class(prefix: str, value: str) -> list[str]:
    color = COLORS.get(value)
    return [f"{prefix}-{color}"] if color else []


def _lookup(table: dict[str, str]) -> Callable[[str], list[str]]:
    return lambda value: [table[value]] if value in table else []


def _border(value: str) -> list[str]:
    classes: list[str] = []
    for part in value.split():
        if part in BORDER_WIDTH:
            classes.append(BORDER_WIDTH[part])
        elif part in COLORS:
            classes.append(f"border-{COLORS[part]}")
    return classes


def _opacity(value: str) -> list[str]:
    try:
        amount = float(value)
    except ValueError:
        return []
    if not math.isfinite(amount):
        return []
    percent = round(amount * 100)
    if 0 <= percent <= 100 and percent % 5 == 0:
        return [f"opacity-{percent}"]
    return []


def _property_handlers() -> dict[str, Callable[[str], list[str]]]:
    handlers: dict[str, Callable[[str], list[str]]] = {
        "padding": lambda value: _box_classes("p", value),
        "margin": lambda value: _box_classes("m", value),
        "gap": lambda value: _size_class("gap", value) if value in SPACING_SCALE else [],
        "width": lambda value: _size_class("w", value),
        "height": lambda value: _size_class("h", value),
        "background-color": lambda value: _color_class("bg", value),
        "background": lambda value: _color_class("bg", value),
        "color": lambda value: _color_class("text", value),
        "border-color": lambda value: _color_class("border", value),
        "border": _border,
        "border-width": _lookup(BORDER_WIDTH),
        "border-radius": _lookup(RADIUS),
        "font-size": _lookup(FONT_SIZE),
        "font-weight": _lookup(FONT_WEIGHT),
        "opacity": _opacity,
    }
    for side, letter in _BOX_SIDES.items():
        handlers[f"padding-{side}"] = (
            lambda value, letter=letter: _box_classes(f"p{letter}", value)
            if len(value.split()) == 1
            else []
        )
        handlers[f"margin-{side}"] = (
            lambda value, letter=letter: _box_classes(f"m{letter}", value)
            if len(value.split()) == 1
            else []
        )
    for name, table in KEYWORDS.items():
        handlers[name] = _lookup(table)
    return handlers


_HANDLERS = _property_handlers()
_RULE_SEPARATORS = re.compile(r"[;{}\n]")


def css_to_tailwind(text: str, options: GeneratorOptions = DEFAULT_OPTIONS) -> str:
    """Map known CSS declarations onto Tailwind utility classes.

    Selectors and braces are ignored. Declarations with no known mapping
    are dropped.

    Examples
    --------
    >>> css_to_tailwind(".btn { background-color: #3b82f6; padding: 0.5rem 1rem; }")
    'bg-blue-500 px-4 py-2'
    """
    del options
    classes: list[str] = []
    for chunk in _RULE_SEPARATORS.split(text):
        parsed = parse_declaration(chunk)
        if parsed is None:
            continue
        prop, value = parsed
        handler = _HANDLERS.get(prop.lower())
        if handler is None:
            continue
        value = value.replace("!important", "").strip().lower()
        classes.extend(handler(value))
    return " ".join(dict.fromkeys(classes))
