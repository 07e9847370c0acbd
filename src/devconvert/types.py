"""Shared type aliases and enumerations."""

from __future__ import annotations

from enum import Enum


class Category(Enum):
    """Structural category of a conversion, in menu order."""

    SVG = "SVG"
    HTML = "HTML"
    CSS = "CSS"
    JSON = "JSON"
    NETWORK = "Network"

    @property
    def display_name(self) -> str:
        return self.value


type JsonScalar = str | int | float | bool | None
type JsonValue = JsonScalar | list["JsonValue"] | dict[str, "JsonValue"]
