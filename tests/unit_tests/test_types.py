"""Unit tests for shared types."""

from __future__ import annotations

from typing import TypeAliasType

from devconvert import types as types_module
from devconvert.types import Category


def test_category_menu_order_and_display_names() -> None:
    """Categories iterate in menu order with their display names."""
    assert [category.display_name for category in Category] == [
        "SVG",
        "HTML",
        "CSS",
        "JSON",
        "Network",
    ]


def test_only_json_aliases_are_declared() -> None:
    """The module declares the JSON aliases and nothing option-related."""
    aliases = sorted(
        name for name, value in vars(types_module).items() if isinstance(value, TypeAliasType)
    )
    assert aliases == ["JsonScalar", "JsonValue"]
